"""
Bugboard Backend — SQLAlchemyDocumentStore Unit Tests
=======================================================

What we test:
    ✅ Collection → model mapping, unknown collections
    ✅ create/save flush (never commit) and stamp timestamps
    ✅ find builds filter, ordering, offset and limit
    ✅ find_by_id coerces ids and treats malformed ones as missing

How we test:
    A mocked AsyncSession (see conftest.py); compiled SQL is inspected
    instead of being executed.
"""

import uuid
from unittest.mock import MagicMock

import pytest

from app.models.bug import Bug
from app.models.post import Post
from app.store.base import BUGS, POSTS
from app.store.sql_store import SQLAlchemyDocumentStore


def _result(rows):
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


class TestCreate:

    @pytest.mark.asyncio
    async def test_creates_post(self, mock_db_session):
        store = SQLAlchemyDocumentStore(mock_db_session)

        post = await store.create(POSTS, {"title": "T", "content": "C", "author": "alice", "slug": "t"})

        assert isinstance(post, Post)
        assert isinstance(post.id, uuid.UUID)
        assert post.created_at == post.updated_at
        mock_db_session.add.assert_called_once_with(post)
        mock_db_session.flush.assert_awaited_once()
        mock_db_session.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_creates_bug(self, mock_db_session):
        bug = await SQLAlchemyDocumentStore(mock_db_session).create(BUGS, {"title": "t", "status": "open"})
        assert isinstance(bug, Bug)

    @pytest.mark.asyncio
    async def test_unknown_collection(self, mock_db_session):
        with pytest.raises(ValueError, match="Unknown collection"):
            await SQLAlchemyDocumentStore(mock_db_session).create("comments", {})


class TestFind:

    @pytest.mark.asyncio
    async def test_filter_skip_limit(self, mock_db_session):
        mock_db_session.execute.return_value = _result(["row"])
        store = SQLAlchemyDocumentStore(mock_db_session)

        rows = await store.find(POSTS, {"category": "news"}, skip=5, limit=5)

        assert rows == ["row"]
        query = mock_db_session.execute.await_args.args[0]
        sql = str(query.compile(compile_kwargs={"literal_binds": True}))
        assert "WHERE posts.category = 'news'" in sql
        assert "ORDER BY posts.created_at ASC" in sql
        assert "LIMIT 5" in sql
        assert "OFFSET 5" in sql

    @pytest.mark.asyncio
    async def test_no_paging(self, mock_db_session):
        mock_db_session.execute.return_value = _result([])

        await SQLAlchemyDocumentStore(mock_db_session).find(BUGS, {})

        sql = str(mock_db_session.execute.await_args.args[0].compile())
        assert "LIMIT" not in sql
        assert "OFFSET" not in sql
        assert "WHERE" not in sql


class TestFindById:

    @pytest.mark.asyncio
    async def test_string_id_is_coerced(self, mock_db_session):
        record_id = uuid.uuid4()
        mock_db_session.get.return_value = "post"

        found = await SQLAlchemyDocumentStore(mock_db_session).find_by_id(POSTS, str(record_id))

        assert found == "post"
        mock_db_session.get.assert_awaited_once_with(Post, record_id)

    @pytest.mark.asyncio
    async def test_malformed_id(self, mock_db_session):
        found = await SQLAlchemyDocumentStore(mock_db_session).find_by_id(BUGS, "not-a-uuid")

        assert found is None
        mock_db_session.get.assert_not_awaited()


class TestSaveAndRemove:

    @pytest.mark.asyncio
    async def test_save_bumps_updated_at(self, mock_db_session):
        store = SQLAlchemyDocumentStore(mock_db_session)
        post = await store.create(POSTS, {"title": "T", "content": "C", "author": "a", "slug": "t"})
        created = post.updated_at

        saved = await store.save(post)

        assert saved is post
        assert saved.updated_at >= created
        assert mock_db_session.flush.await_count == 2

    @pytest.mark.asyncio
    async def test_remove(self, mock_db_session):
        record = object()

        await SQLAlchemyDocumentStore(mock_db_session).remove(record)

        mock_db_session.delete.assert_awaited_once_with(record)
        mock_db_session.flush.assert_awaited_once()
