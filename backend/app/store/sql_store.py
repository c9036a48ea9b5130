"""
Bugboard Backend — SQLAlchemy Document Store
==============================================

What:  DocumentStore implementation over an async SQLAlchemy session.
How:   Collections map to ORM models (posts → Post, bugs → Bug). Writes are
       flushed, not committed: the per-request session dependency commits
       once the handler succeeds and rolls back if anything raises.

Query plans:
    find("posts", {"category": c}, skip, limit)
        SELECT ... FROM posts WHERE category = :c
        ORDER BY created_at ASC OFFSET :skip LIMIT :limit
        → idx_posts_category, then idx_posts_created_at for the sort
    find_by_id(...)
        → primary key lookup (session.get)
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Type

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.models.bug import Bug
from app.models.post import Post
from app.store.base import BUGS, POSTS, DocumentStore

logger = logging.getLogger(__name__)

_MODELS: Dict[str, Type[Base]] = {
    POSTS: Post,
    BUGS: Bug,
}


def _model_for(collection: str) -> Type[Base]:
    try:
        return _MODELS[collection]
    except KeyError:
        raise ValueError(f"Unknown collection '{collection}'") from None


def _coerce_uuid(record_id: Any) -> Optional[uuid.UUID]:
    """Store-native id from whatever the route received; None if malformed."""
    if isinstance(record_id, uuid.UUID):
        return record_id
    try:
        return uuid.UUID(str(record_id))
    except (TypeError, ValueError):
        return None


class SQLAlchemyDocumentStore(DocumentStore):
    """Document store bound to one AsyncSession (one request)."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, collection: str, fields: Mapping[str, Any]) -> Any:
        model = _model_for(collection)
        now = datetime.now(timezone.utc)
        record = model(id=uuid.uuid4(), created_at=now, updated_at=now, **dict(fields))
        self.session.add(record)
        await self.session.flush()
        logger.debug("Inserted %s into %s", record.id, collection)
        return record

    async def find(
        self,
        collection: str,
        filter: Optional[Dict[str, Any]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Any]:
        model = _model_for(collection)
        query = select(model)
        for field_name, value in (filter or {}).items():
            query = query.where(getattr(model, field_name) == value)
        query = query.order_by(model.created_at.asc())
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_by_id(self, collection: str, record_id: Any) -> Optional[Any]:
        model = _model_for(collection)
        key = _coerce_uuid(record_id)
        if key is None:
            return None
        return await self.session.get(model, key)

    async def save(self, record: Any) -> Any:
        record.updated_at = datetime.now(timezone.utc)
        self.session.add(record)
        await self.session.flush()
        return record

    async def remove(self, record: Any) -> None:
        await self.session.delete(record)
        await self.session.flush()
