"""
Bugboard Backend — Document Store Package
===========================================

What:  The persistence boundary consumed by the request pipeline.
How:   DocumentStore (base.py) is the contract; SQLAlchemyDocumentStore
       (sql_store.py) implements it over an async SQLAlchemy session.
       Route handlers receive a store through the `get_document_store`
       dependency, which tests replace via `app.dependency_overrides`.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.store.base import BUGS, COLLECTIONS, POSTS, DocumentStore
from app.store.sql_store import SQLAlchemyDocumentStore


async def get_document_store(
    db: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DocumentStore, None]:
    """One store per request, bound to that request's session/transaction."""
    yield SQLAlchemyDocumentStore(db)


__all__ = [
    "BUGS",
    "COLLECTIONS",
    "POSTS",
    "DocumentStore",
    "SQLAlchemyDocumentStore",
    "get_document_store",
]
