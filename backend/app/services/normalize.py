"""
Bugboard Backend — Response Normalization
===========================================

What:  Converts stored records into response models.
Why:   Store-native identifiers (UUIDs) must cross the wire as plain strings
       and absent identifiers as null. Doing it in one total function means
       no call site has to check what kind of value it holds.
"""

from typing import Any, Optional

from app.schemas.bug import BugResponse
from app.schemas.post import PostResponse


def normalize_id(value: Any) -> Optional[str]:
    """
    String form of an identifier, or None when absent.

    Total: accepts None, strings, UUIDs and any other object with a string
    form. Empty strings count as absent. Idempotent on its own output.
    """
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text or None


def post_to_response(record: Any) -> PostResponse:
    return PostResponse(
        id=normalize_id(record.id),
        title=record.title,
        content=record.content,
        author=normalize_id(record.author),
        category=normalize_id(record.category),
        slug=record.slug or "",
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def bug_to_response(record: Any) -> BugResponse:
    return BugResponse(
        id=normalize_id(record.id),
        title=record.title,
        description=record.description,
        status=record.status,
        reporter=normalize_id(record.reporter),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )
