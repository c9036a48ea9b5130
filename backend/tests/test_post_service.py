"""
Bugboard Backend — PostService Unit Tests
===========================================

What we test:
    ✅ create: identity required, validation, author from identity, slug default
    ✅ list: category filter and page/limit → skip/limit
    ✅ get: not-found handling, malformed ids
    ✅ update/delete: 401 → 404 → 403 ordering, nothing written on rejection
    ✅ identifiers in every result are strings
    ✅ store failures become DatabaseError, slow stores StoreTimeoutError

How we test:
    PostService talks to an InMemoryDocumentStore (or an AsyncMock store for
    call-shape assertions). No database, no HTTP.
"""

import asyncio
import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from conftest import InMemoryDocumentStore

from app.auth import CallerIdentity
from app.exceptions import (
    DatabaseError,
    ForbiddenError,
    NotFoundError,
    StoreTimeoutError,
    UnauthorizedError,
    ValidationError,
)
from app.services.post_service import PostService, slugify
from app.store.base import POSTS

ALICE = CallerIdentity(id="alice")
BOB = CallerIdentity(id="bob")


class TestSlugify:

    def test_lowercases_and_dashes(self):
        assert slugify("Hello  Big World") == "hello-big-world"

    def test_tabs_and_newlines(self):
        assert slugify("A\tB\nC") == "a-b-c"


class TestCreatePost:

    def setup_method(self):
        self.service = PostService(logger=MagicMock())

    @pytest.mark.asyncio
    async def test_anonymous_is_rejected_before_store(self, memory_store):
        with pytest.raises(UnauthorizedError):
            await self.service.create_post(memory_store, None, {"title": "t", "content": "c"})
        assert memory_store.writes == 0

    @pytest.mark.asyncio
    async def test_missing_title_is_rejected(self, memory_store):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_post(memory_store, ALICE, {"content": "c"})
        assert exc_info.value.errors == {"title": "Title is required"}
        assert memory_store.writes == 0

    @pytest.mark.asyncio
    async def test_author_comes_from_identity(self, memory_store):
        post = await self.service.create_post(
            memory_store, ALICE, {"title": "Hello World", "content": "body", "author": "mallory"}
        )
        assert post.author == "alice"
        assert post.slug == "hello-world"
        assert post.category is None

    @pytest.mark.asyncio
    async def test_explicit_slug_and_category_kept(self, memory_store):
        post = await self.service.create_post(
            memory_store,
            ALICE,
            {"title": "T", "content": "c", "slug": "custom", "category": "news"},
        )
        assert post.slug == "custom"
        assert post.category == "news"

    @pytest.mark.asyncio
    async def test_identifier_is_string(self, memory_store):
        post = await self.service.create_post(memory_store, ALICE, {"title": "T", "content": "c"})
        assert isinstance(post.id, str)
        uuid.UUID(post.id)

    @pytest.mark.asyncio
    async def test_logs_creation(self, memory_store):
        await self.service.create_post(memory_store, ALICE, {"title": "T", "content": "c"})
        self.service.logger.info.assert_called_once()
        assert self.service.logger.info.call_args.args[0] == "Post created"


class TestListPosts:

    def setup_method(self):
        self.service = PostService(logger=MagicMock())

    @pytest.mark.asyncio
    async def test_page_and_limit_become_skip_and_limit(self):
        store = AsyncMock()
        store.find.return_value = []

        await self.service.list_posts(store, page=2, limit=5)

        store.find.assert_awaited_once_with(POSTS, {}, skip=5, limit=5)

    @pytest.mark.asyncio
    async def test_first_page_skips_nothing(self):
        store = AsyncMock()
        store.find.return_value = []

        await self.service.list_posts(store, category="news", page=1, limit=10)

        store.find.assert_awaited_once_with(POSTS, {"category": "news"}, skip=0, limit=10)

    @pytest.mark.asyncio
    async def test_category_filter(self, memory_store):
        await self.service.create_post(memory_store, ALICE, {"title": "a", "content": "c", "category": "news"})
        await self.service.create_post(memory_store, ALICE, {"title": "b", "content": "c", "category": "tech"})

        posts = await self.service.list_posts(memory_store, category="tech")

        assert [p.title for p in posts] == ["b"]

    @pytest.mark.asyncio
    async def test_pages_partition_results(self, memory_store):
        for i in range(7):
            await self.service.create_post(memory_store, ALICE, {"title": f"p{i}", "content": "c"})

        first = await self.service.list_posts(memory_store, page=1, limit=5)
        second = await self.service.list_posts(memory_store, page=2, limit=5)

        assert [p.title for p in first] == ["p0", "p1", "p2", "p3", "p4"]
        assert [p.title for p in second] == ["p5", "p6"]
        assert all(isinstance(p.id, str) for p in first + second)


class TestGetPost:

    def setup_method(self):
        self.service = PostService(logger=MagicMock())

    @pytest.mark.asyncio
    async def test_found(self, memory_store):
        created = await self.service.create_post(memory_store, ALICE, {"title": "T", "content": "c"})
        fetched = await self.service.get_post(memory_store, created.id)
        assert fetched.id == created.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", [str(uuid.uuid4()), "not-a-uuid"])
    async def test_missing_or_malformed(self, memory_store, post_id):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_post(memory_store, post_id)
        assert exc_info.value.message == "Not found"


class TestUpdatePost:

    def setup_method(self):
        self.service = PostService(logger=MagicMock())

    async def _seed(self, store):
        return await self.service.create_post(store, ALICE, {"title": "Old", "content": "Old body"})

    @pytest.mark.asyncio
    async def test_owner_updates(self, memory_store):
        post = await self._seed(memory_store)
        updated = await self.service.update_post(memory_store, ALICE, post.id, {"title": "New"})
        assert updated.title == "New"
        assert updated.content == "Old body"
        assert updated.author == "alice"

    @pytest.mark.asyncio
    async def test_empty_values_do_not_overwrite(self, memory_store):
        post = await self._seed(memory_store)
        updated = await self.service.update_post(
            memory_store, ALICE, post.id, {"title": "", "content": None}
        )
        assert (updated.title, updated.content) == ("Old", "Old body")

    @pytest.mark.asyncio
    async def test_anonymous(self, memory_store):
        post = await self._seed(memory_store)
        writes = memory_store.writes
        with pytest.raises(UnauthorizedError):
            await self.service.update_post(memory_store, None, post.id, {"title": "x"})
        assert memory_store.writes == writes

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden_and_nothing_changes(self, memory_store):
        post = await self._seed(memory_store)
        writes = memory_store.writes

        with pytest.raises(ForbiddenError):
            await self.service.update_post(memory_store, BOB, post.id, {"title": "Hijacked"})

        assert memory_store.writes == writes
        stored = await self.service.get_post(memory_store, post.id)
        assert stored.title == "Old"

    @pytest.mark.asyncio
    async def test_not_found_before_ownership(self, memory_store):
        with pytest.raises(NotFoundError):
            await self.service.update_post(memory_store, BOB, str(uuid.uuid4()), {"title": "x"})


class TestDeletePost:

    def setup_method(self):
        self.service = PostService(logger=MagicMock())

    @pytest.mark.asyncio
    async def test_owner_deletes(self, memory_store):
        post = await self.service.create_post(memory_store, ALICE, {"title": "T", "content": "c"})

        result = await self.service.delete_post(memory_store, ALICE, post.id)

        assert result.success is True
        assert memory_store.count(POSTS) == 0

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, memory_store):
        post = await self.service.create_post(memory_store, ALICE, {"title": "T", "content": "c"})

        with pytest.raises(ForbiddenError):
            await self.service.delete_post(memory_store, BOB, post.id)

        assert memory_store.count(POSTS) == 1

    @pytest.mark.asyncio
    async def test_anonymous(self, memory_store):
        with pytest.raises(UnauthorizedError):
            await self.service.delete_post(memory_store, None, str(uuid.uuid4()))


class SlowStore(InMemoryDocumentStore):
    async def find(self, *args, **kwargs):
        await asyncio.sleep(1)
        return []


class TestStoreFailures:

    @pytest.mark.asyncio
    async def test_driver_error_becomes_database_error(self):
        logger = MagicMock()
        service = PostService(logger=logger)
        store = AsyncMock()
        store.find.side_effect = RuntimeError("connection reset")

        with pytest.raises(DatabaseError) as exc_info:
            await service.list_posts(store)

        assert exc_info.value.message == "Failed to retrieve posts"
        assert exc_info.value.context["error_type"] == "RuntimeError"
        logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_slow_store_times_out(self):
        service = PostService(logger=MagicMock(), store_timeout=0.01)

        with pytest.raises(StoreTimeoutError) as exc_info:
            await service.list_posts(SlowStore())

        assert "0.01 seconds" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_zero_timeout_waits(self):
        store = AsyncMock()
        store.find.return_value = []
        service = PostService(logger=MagicMock(), store_timeout=0)

        assert await service.list_posts(store) == []
        assert service.store_timeout == 0
