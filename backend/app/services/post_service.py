"""
Bugboard Backend — Post Service (Request Pipeline for /api/posts)
===================================================================

What:  Business rules for creating, listing, reading, updating and deleting
       posts.
Why:   Keeps authorization and ownership rules out of the route handlers so
       they can be tested without HTTP.
How:   Every operation runs the same pipeline:

    ┌──────────┐   ┌────────────┐   ┌───────────┐   ┌─────────┐   ┌───────────┐
    │ Identity │──▶│  Validate  │──▶│ Ownership │──▶│  Store  │──▶│ Normalize │
    │  (401)   │   │   (400)    │   │ (404/403) │   │  (500)  │   │  ids→str  │
    └──────────┘   └────────────┘   └───────────┘   └─────────┘   └───────────┘

Rules:
    - create/update/delete need a caller identity (401 otherwise)
    - update/delete need the caller to be the stored author (403 otherwise)
    - the 404 check runs before the ownership check
    - update is partial: only non-empty title/content overwrite
    - nothing is written when any check fails

Design Decision:
    PostService is stateless apart from its injected logger — it receives the
    document store for each call, exactly like the session-per-request model
    of the database layer.
"""

import re
from typing import Any, List, Mapping, Optional

from app.auth import CallerIdentity
from app.exceptions import ForbiddenError, NotFoundError, UnauthorizedError, ValidationError
from app.schemas.common import DeleteResponse
from app.schemas.post import PostResponse
from app.services.base import PipelineService
from app.services.normalize import normalize_id, post_to_response
from app.store.base import POSTS, DocumentStore
from app.validators import validate_post_input

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Lower-case the title and replace each whitespace run with a dash."""
    return _WHITESPACE_RUN.sub("-", (title or "").lower())


class PostService(PipelineService):
    """
    Responsibilities:
        - create_post(): identified caller becomes the author
        - list_posts():  optional category filter, page/limit pagination
        - get_post():    single post with not-found handling
        - update_post(): owner-only partial update
        - delete_post(): owner-only removal
    """

    async def create_post(
        self,
        store: DocumentStore,
        identity: Optional[CallerIdentity],
        payload: Mapping[str, Any],
    ) -> PostResponse:
        if identity is None:
            raise UnauthorizedError(context={"operation": "create_post"})

        result = validate_post_input(payload)
        if not result.is_valid:
            raise ValidationError(result.errors)

        title = payload["title"]
        fields = {
            "title": title,
            "content": payload["content"],
            "author": identity.id,
            "category": payload.get("category") or None,
            "slug": payload.get("slug") or slugify(title),
        }

        with self._store_failures("Failed to create post", user_id=identity.id):
            post = await self._store_call(store.create(POSTS, fields), "create")

        self.logger.info(
            "Post created",
            extra={
                "post_id": normalize_id(post.id),
                "user_id": identity.id,
                "title": post.title,
            },
        )
        return post_to_response(post)

    async def list_posts(
        self,
        store: DocumentStore,
        category: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> List[PostResponse]:
        """
        One page of posts in creation order.

        Pagination is offset-based and 1-based: skip = (page - 1) * limit.
        Example: page=2, limit=5 → skip 5, take 5.
        """
        query_filter = {"category": category} if category else {}
        skip = (page - 1) * limit

        with self._store_failures("Failed to retrieve posts"):
            posts = await self._store_call(
                store.find(POSTS, query_filter, skip=skip, limit=limit), "find"
            )

        normalized = [post_to_response(post) for post in posts]
        self.logger.info(
            "Posts retrieved",
            extra={"count": len(normalized), "page": page, "limit": limit},
        )
        return normalized

    async def get_post(self, store: DocumentStore, post_id: str) -> PostResponse:
        post = await self._load(store, post_id, "Failed to retrieve post")
        return post_to_response(post)

    async def update_post(
        self,
        store: DocumentStore,
        identity: Optional[CallerIdentity],
        post_id: str,
        payload: Mapping[str, Any],
    ) -> PostResponse:
        if identity is None:
            raise UnauthorizedError(context={"operation": "update_post", "post_id": post_id})

        post = await self._load(store, post_id, "Failed to update post")
        self._check_owner(post, identity, post_id)

        if payload.get("title"):
            post.title = payload["title"]
        if payload.get("content"):
            post.content = payload["content"]

        with self._store_failures("Failed to update post", post_id=post_id):
            post = await self._store_call(store.save(post), "save")

        self.logger.info("Post updated", extra={"post_id": post_id, "user_id": identity.id})
        return post_to_response(post)

    async def delete_post(
        self,
        store: DocumentStore,
        identity: Optional[CallerIdentity],
        post_id: str,
    ) -> DeleteResponse:
        if identity is None:
            raise UnauthorizedError(context={"operation": "delete_post", "post_id": post_id})

        post = await self._load(store, post_id, "Failed to delete post")
        self._check_owner(post, identity, post_id)

        with self._store_failures("Failed to delete post", post_id=post_id):
            await self._store_call(store.remove(post), "remove")

        self.logger.info("Post deleted", extra={"post_id": post_id, "user_id": identity.id})
        return DeleteResponse(success=True)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _load(self, store: DocumentStore, post_id: str, failure_message: str) -> Any:
        with self._store_failures(failure_message, post_id=post_id):
            post = await self._store_call(store.find_by_id(POSTS, post_id), "find_by_id")
        if post is None:
            raise NotFoundError(resource="post", resource_id=post_id)
        return post

    @staticmethod
    def _check_owner(post: Any, identity: CallerIdentity, post_id: str) -> None:
        # author is immutable, so this comparison is the whole ownership rule
        if normalize_id(post.author) != identity.id:
            raise ForbiddenError(context={"post_id": post_id, "user_id": identity.id})


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
