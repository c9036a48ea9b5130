"""
Bugboard Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── memory_store: InMemoryDocumentStore (no database needed)
    ├── mock_db_session: Mock AsyncSession for SQLAlchemyDocumentStore tests
    ├── error_logger: MagicMock logger handed to the error reporter
    ├── app_instance: fresh FastAPI app wired to memory_store
    └── test_client: HTTPX AsyncClient over ASGITransport
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["STORE_TIMEOUT_SECONDS"] = "5"

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Mapping, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.auth import generate_token
from app.error_reporter import ErrorReporter
from app.store import get_document_store
from app.store.base import COLLECTIONS, DocumentStore


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Document Store
# ══════════════════════════════════════════════════════════════════════════

class InMemoryDocumentStore(DocumentStore):
    """
    DocumentStore double keeping records in dicts.

    Ids are real uuid.UUID objects, so responses only contain strings if
    normalization works. `writes` counts create/save/remove calls, which
    lets tests assert that a rejected request touched nothing.
    """

    def __init__(self):
        self.collections: Dict[str, Dict[uuid.UUID, SimpleNamespace]] = {
            name: {} for name in COLLECTIONS
        }
        self.writes = 0
        self.find_calls: List[Dict[str, Any]] = []

    def _collection(self, collection: str) -> Dict[uuid.UUID, SimpleNamespace]:
        if collection not in self.collections:
            raise ValueError(f"Unknown collection '{collection}'")
        return self.collections[collection]

    async def create(self, collection: str, fields: Mapping[str, Any]) -> Any:
        now = datetime.now(timezone.utc)
        record = SimpleNamespace(
            id=uuid.uuid4(), created_at=now, updated_at=now, _collection=collection, **fields
        )
        self._collection(collection)[record.id] = record
        self.writes += 1
        return record

    async def find(
        self,
        collection: str,
        filter: Optional[Dict[str, Any]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Any]:
        self.find_calls.append(
            {"collection": collection, "filter": dict(filter or {}), "skip": skip, "limit": limit}
        )
        records = [
            r
            for r in self._collection(collection).values()
            if all(getattr(r, k, None) == v for k, v in (filter or {}).items())
        ]
        records = records[skip:]
        return records if limit is None else records[:limit]

    async def find_by_id(self, collection: str, record_id: Any) -> Optional[Any]:
        try:
            key = record_id if isinstance(record_id, uuid.UUID) else uuid.UUID(str(record_id))
        except ValueError:
            return None
        return self._collection(collection).get(key)

    async def save(self, record: Any) -> Any:
        record.updated_at = datetime.now(timezone.utc)
        self._collection(record._collection)[record.id] = record
        self.writes += 1
        return record

    async def remove(self, record: Any) -> None:
        self._collection(record._collection).pop(record.id, None)
        self.writes += 1

    def count(self, collection: str) -> int:
        return len(self._collection(collection))


def auth_header(user_id: Any, scheme: Optional[str] = "Bearer") -> Dict[str, str]:
    token = generate_token(user_id)
    return {"Authorization": f"{scheme} {token}" if scheme else token}


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.get.return_value = post
        record = await SQLAlchemyDocumentStore(mock_db_session).find_by_id("posts", pid)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def error_logger():
    return MagicMock()


@pytest.fixture
def app_instance(memory_store, error_logger):
    """A fresh app per test, wired to the in-memory store."""
    from app.main import create_app

    app = create_app(reporter=ErrorReporter(error_logger))
    app.dependency_overrides[get_document_store] = lambda: memory_store
    return app


@pytest_asyncio.fixture
async def test_client(app_instance):
    """
    HTTPX AsyncClient talking to the app in-process.

    raise_app_exceptions=False: a failure raised by the outer middleware is
    answered by the Exception handler and then re-raised by Starlette; the
    test wants the response.
    """
    transport = ASGITransport(app=app_instance, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
