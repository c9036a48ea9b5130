"""
Bugboard Backend — Bug Request/Response Schemas
=================================================

What:  Pydantic models for the /api/bugs contract.

Status handling differs between create and update on purpose:
    - create: an unknown status is a 400 (see validate_bug_input)
    - update: an unknown status is ignored and the stored one is kept
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class BugCreate(BaseModel):
    title: Optional[str] = Field(default=None, description="Bug title (required)")
    description: Optional[str] = Field(default=None, description="Steps, context")
    # Any: an unknown value must reach validate_bug_input and get its message
    status: Optional[Any] = Field(
        default=None,
        description="open | in-progress | resolved (defaults to open)",
    )

    model_config = {"extra": "ignore"}


class BugUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    # Any: values outside the tracker states are ignored, never rejected
    status: Optional[Any] = None

    model_config = {"extra": "ignore"}


class BugResponse(BaseModel):
    id: str = Field(description="Bug identifier (string form)")
    title: str
    description: Optional[str] = None
    status: str
    reporter: Optional[str] = Field(
        default=None,
        description="Identity that reported the bug; null when anonymous",
    )
    created_at: datetime
    updated_at: datetime
