"""
Bugboard Backend — Shared Response Schemas
============================================

What:  Error, delete-acknowledgement and health response models.

Error format (every endpoint):
    {"error": "Not found"}
    {"error": {"title": "Title is required"}}
    {"error": "boom", "requestId": "a1b2c3d4"}   ← error reporter (500)
"""

from typing import Dict, Optional, Union

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: Union[str, Dict[str, str]] = Field(
        description="Error message, or a field → message map for validation errors",
    )


class ServerErrorResponse(BaseModel):
    """Body produced by the error reporter for any unhandled failure."""
    error: str
    requestId: Optional[str] = Field(default=None, description="Request correlation ID")


class DeleteResponse(BaseModel):
    success: bool = True


class HealthResponse(BaseModel):
    """
    Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
