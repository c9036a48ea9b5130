"""
Bugboard Backend — Caller Identity
====================================

What:  Derives the caller identity from the Authorization header.
Why:   Post mutation is owner-gated; bug reports record who filed them.
How:   `extract_identity` parses the header value; IdentityMiddleware binds
       the result to `request.state.identity`; route handlers receive it
       through the `get_identity` / `require_identity` dependencies.

Accepted header forms:
    Authorization: Bearer <token>
    Authorization: <token>

Security Note:
    This is NOT token verification. The token is trusted to be the caller's
    id. Swap `extract_identity` for a real verifier before exposing the API.
"""

from dataclasses import dataclass
from typing import Any, Optional

from fastapi import Request

from app.exceptions import UnauthorizedError


@dataclass(frozen=True)
class CallerIdentity:
    id: str


def extract_identity(header_value: Optional[str]) -> Optional[CallerIdentity]:
    """
    Parse an Authorization header value into a CallerIdentity.

    Returns None (anonymous) for an absent or empty header, or when the
    token part is empty. Never raises.

    Examples:
        "Bearer abc" → CallerIdentity(id="abc")
        "abc"        → CallerIdentity(id="abc")
        "a b c"      → CallerIdentity(id="a b c")
        "Bearer "    → None
    """
    if not header_value:
        return None
    parts = header_value.split(" ")
    token = parts[1] if len(parts) == 2 else header_value
    if not token:
        return None
    return CallerIdentity(id=token)


def generate_token(user: Any) -> Optional[str]:
    """
    Mint the credential a client sends for `user`.

    The inverse of extract_identity: the token is simply the user's id.
    Accepts a record exposing `id`, a mapping with an "id" key, or a plain
    value.
    """
    if user is None:
        return None
    if isinstance(user, dict):
        if "id" in user:
            return str(user["id"])
        return None
    user_id = getattr(user, "id", None)
    if user_id is not None:
        return str(user_id)
    return str(user)


# ── FastAPI Dependencies ──────────────────────────────────────────────────

def get_identity(request: Request) -> Optional[CallerIdentity]:
    """
    Caller identity for the current request, or None when anonymous.

    Falls back to parsing the header directly when IdentityMiddleware is not
    installed (e.g. a router mounted on a bare app in tests).
    """
    if hasattr(request.state, "identity"):
        return request.state.identity
    return extract_identity(request.headers.get("Authorization"))


def require_identity(request: Request) -> CallerIdentity:
    """Like get_identity, but anonymous callers get a 401."""
    identity = get_identity(request)
    if identity is None:
        raise UnauthorizedError(context={"path": request.url.path})
    return identity
