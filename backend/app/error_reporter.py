"""
Bugboard Backend — Error Reporter (Last-Resort Exception Handler)
===================================================================

What:  Turns any failure that escaped the route handlers into one structured
       log entry and a uniform 500 JSON body.
Who:   Registered in main.py for DatabaseError and for bare Exception.
When:  Only for failures that are NOT answered by a dedicated handler
       (validation, unauthorized, forbidden and not-found have their own).

Response (always 500):
    {"error": "<failure message or 'Internal Server Error'>", "requestId": "a1b2c3d4"}

Log entry (ERROR level, extra fields):
    method, url, status_code (the failure's own status_code or 500), timestamp,
    request_id, plus the stack trace for non-application errors.

The reporter does not try to preserve a more specific status code carried
by the failure: anything that gets here becomes a 500.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from starlette.requests import Request
from starlette.responses import JSONResponse

from app.exceptions import BugboardError
from app.middleware.request_id import request_id_var

DEFAULT_ERROR_MESSAGE = "Internal Server Error"


def failure_message(exc: Any) -> str:
    """The failure's message, or the default when it carries none."""
    if isinstance(exc, BugboardError):
        message = exc.message
    elif isinstance(exc, BaseException):
        message = str(exc)
    else:
        message = getattr(exc, "message", None)
    return message or DEFAULT_ERROR_MESSAGE


class ErrorReporter:
    """
    Callable exception handler with an injected logger.

    Usage:
        reporter = ErrorReporter(logging.getLogger("bugboard.errors"))
        app.add_exception_handler(Exception, reporter)
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("bugboard.errors")

    async def __call__(self, request: Request, exc: Exception) -> JSONResponse:
        return self.report(request, exc)

    def report(self, request: Request, exc: Any) -> JSONResponse:
        message = failure_message(exc)
        rid = getattr(request.state, "request_id", None) or request_id_var.get("") or None

        extra = {
            "method": request.method,
            "url": str(request.url),
            "status_code": getattr(exc, "status_code", None) or 500,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": rid,
        }
        if isinstance(exc, BugboardError) and exc.context:
            extra["context"] = exc.context

        # Application errors were already logged where they were raised;
        # anything else gets its stack trace here (log only, never the body)
        self.logger.error(
            message,
            extra=extra,
            exc_info=exc if isinstance(exc, BaseException) and not isinstance(exc, BugboardError) else None,
        )

        return JSONResponse(
            status_code=500,
            content={"error": message, "requestId": rid},
        )
