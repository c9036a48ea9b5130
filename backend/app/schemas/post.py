"""
Bugboard Backend — Post Request/Response Schemas
==================================================

What:  Pydantic models for the /api/posts contract.
Why:   Response models pin every identifier field to `str | None`, so a
       store-native id can never leak onto the wire unnoticed.

Request models are deliberately permissive (every field optional): the
required-field rules live in app.validators so the client gets one
field → message map instead of FastAPI's default 422 body.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """Body of POST /api/posts. Unknown fields are ignored."""
    title: Optional[str] = Field(default=None, description="Post title (required)")
    content: Optional[str] = Field(default=None, description="Post body (required)")
    category: Optional[str] = Field(default=None, description="Category identifier")
    slug: Optional[str] = Field(
        default=None,
        description="URL slug. Derived from the title when omitted.",
    )

    model_config = {"extra": "ignore"}


class PostUpdate(BaseModel):
    """
    Body of PUT /api/posts/{id}.

    Partial update: only fields that are present AND non-empty overwrite
    the stored values. author, category and slug cannot be changed.
    """
    title: Optional[str] = None
    content: Optional[str] = None

    model_config = {"extra": "ignore"}


class PostResponse(BaseModel):
    id: str = Field(description="Post identifier (string form)")
    title: str
    content: str
    author: Optional[str] = Field(default=None, description="Identity of the owner")
    category: Optional[str] = None
    slug: str = ""
    created_at: datetime
    updated_at: datetime
