"""
Bugboard Backend — Error Reporting Middleware
===============================================

What:  Catches any exception that escaped the exception handlers and hands
       it to the ErrorReporter.
Why:   Without it the failure would reach Starlette's ServerErrorMiddleware,
       which re-raises after responding (uvicorn then logs a second
       traceback) and sits outside RequestIDMiddleware (the 500 would lose
       its X-Request-ID header).
How:   Installed innermost, so the access log and the request-ID header
       still see the 500 the reporter produced.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.error_reporter import ErrorReporter


class ErrorReportingMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: ASGIApp, reporter: ErrorReporter):
        super().__init__(app)
        self.reporter = reporter

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self.reporter.report(request, exc)
