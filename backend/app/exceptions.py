"""
Bugboard Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for the request pipeline.
Why:   Each expected failure (bad input, no identity, not the owner, missing
       record) maps to one HTTP status. Handlers registered in main.py turn
       them into `{"error": ...}` bodies.
How:   Each exception carries a message, optional context dict and a
       `status_code` class attribute.

Exception Hierarchy:
    BugboardError (base)
    ├── ValidationError     → 400 Bad Request (field → message map)
    ├── UnauthorizedError   → 401 Unauthorized (no caller identity)
    ├── ForbiddenError      → 403 Forbidden (identity is not the owner)
    ├── NotFoundError       → 404 Not Found
    └── DatabaseError       → 500 Internal Server Error (via the error reporter)
        └── StoreTimeoutError

Only DatabaseError (and anything not in this hierarchy) reaches the error
reporter; the other four are answered with their own status.
"""

from typing import Any, Dict, Optional


class BugboardError(Exception):
    """
    Base exception for all Bugboard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BugboardError):
    """
    Raised when a request payload fails validation.

    HTTP:    400 Bad Request

    Example response:
        {"error": {"title": "Title is required"}}
    """

    status_code = 400

    def __init__(
        self,
        errors: Dict[str, str],
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message="Validation failed", context=context)
        self.errors = dict(errors)


class UnauthorizedError(BugboardError):
    """Raised when an owner-gated operation is attempted anonymously."""

    status_code = 401

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Unauthorized", context=context)


class ForbiddenError(BugboardError):
    """
    Raised when the caller is identified but does not own the record.

    HTTP:    403 Forbidden
    When:    PUT/DELETE /api/posts/{id} by anyone other than the author.
    """

    status_code = 403

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Forbidden", context=context)


class NotFoundError(BugboardError):
    """
    Raised when a requested record does not exist.

    The response message is always the fixed string "Not found"; the
    resource name and id only go into the context for logging.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message="Not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(BugboardError):
    """
    Raised when a document store operation fails unexpectedly.

    HTTP:    500 Internal Server Error (answered by the error reporter)

    Security Note:
        The message is chosen by the service layer; driver errors (SQL,
        constraint names) are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreTimeoutError(DatabaseError):
    """Raised when a store call exceeds STORE_TIMEOUT_SECONDS."""

    def __init__(
        self,
        timeout: float,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["timeout_seconds"] = timeout
        super().__init__(
            message=f"The data store did not respond within {timeout:g} seconds.",
            context=ctx,
        )
        self.timeout = timeout
