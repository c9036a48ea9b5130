"""
Bugboard Backend — Request Logging Middleware
===============================================

What:  One structured access-log entry per HTTP request.
How:   Measures the time spent in the rest of the stack and logs method,
       path, status, duration, request ID and the caller's id (or
       "anonymous").

Log level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

What we DON'T log (privacy): request bodies, Authorization header values.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("bugboard.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        # Health checks run every few seconds; logging them is noise
        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        # request.state is shared with the inner middleware (same ASGI scope)
        identity = getattr(request.state, "identity", None)
        user_id = identity.id if identity else "anonymous"
        rid = request_id_var.get("")

        logger.log(
            log_level,
            "%s %s",
            method,
            path,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration": f"{duration_ms:.0f}ms",
                "user_id": user_id,
            },
        )

        return response
