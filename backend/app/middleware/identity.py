"""
Bugboard Backend — Identity Middleware
========================================

What:  Binds the caller identity to every request.
How:   Runs app.auth.extract_identity on the Authorization header and stores
       the result (CallerIdentity or None) in request.state.identity.
       Never rejects a request: whether anonymity is acceptable is decided
       per route by the services.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.auth import extract_identity


class IdentityMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request.state.identity = extract_identity(request.headers.get("Authorization"))
        return await call_next(request)
