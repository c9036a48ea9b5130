"""
Bugboard Backend — Post Route Handlers
========================================

What:  HTTP surface for /api/posts.
How:   Thin handlers: pull identity, path/query params and body out of the
       request, call PostService, return the normalized result.

    POST   /api/posts        auth required      → 201
    GET    /api/posts        public             → 200 (array)
    GET    /api/posts/{id}   public             → 200 / 404
    PUT    /api/posts/{id}   auth + owner       → 200 / 401 / 403 / 404
    DELETE /api/posts/{id}   auth + owner       → 200 / 401 / 403 / 404

Mutating routes depend on require_identity: FastAPI resolves dependencies
before it reports body errors, so an anonymous caller gets 401 whatever
the body looks like. Bodies are optional; a missing body reaches the
validator as an empty payload.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.auth import CallerIdentity, require_identity
from app.config import settings
from app.schemas.common import DeleteResponse, ErrorResponse, ServerErrorResponse
from app.schemas.post import PostCreate, PostResponse, PostUpdate
from app.services.post_service import post_service
from app.store import DocumentStore, get_document_store

router = APIRouter(
    prefix="/api",
    tags=["Posts"],
    responses={500: {"description": "Unexpected failure", "model": ServerErrorResponse}},
)

_ERRORS = {
    400: {"description": "Invalid payload", "model": ErrorResponse},
    401: {"description": "No credential", "model": ErrorResponse},
    403: {"description": "Caller is not the author", "model": ErrorResponse},
    404: {"description": "Post not found", "model": ErrorResponse},
}


@router.post(
    "/posts",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={code: _ERRORS[code] for code in (400, 401)},
    summary="Create a post",
)
async def create_post(
    payload: Optional[PostCreate] = None,
    identity: CallerIdentity = Depends(require_identity),
    store: DocumentStore = Depends(get_document_store),
) -> PostResponse:
    body = (payload or PostCreate()).model_dump()
    return await post_service.create_post(store, identity, body)


@router.get(
    "/posts",
    response_model=List[PostResponse],
    summary="List posts",
    description="Optional category filter; 1-based page/limit pagination.",
)
async def list_posts(
    category: Optional[str] = Query(default=None, description="Category identifier"),
    page: int = Query(default=1, ge=1, description="1-based page index"),
    limit: int = Query(default=settings.default_page_size, ge=1, description="Page size"),
    store: DocumentStore = Depends(get_document_store),
) -> List[PostResponse]:
    return await post_service.list_posts(store, category=category, page=page, limit=limit)


@router.get(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={404: _ERRORS[404]},
    summary="Get a post by ID",
)
async def get_post(
    post_id: str,
    store: DocumentStore = Depends(get_document_store),
) -> PostResponse:
    return await post_service.get_post(store, post_id)


@router.put(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={code: _ERRORS[code] for code in (401, 403, 404)},
    summary="Update a post (author only)",
)
async def update_post(
    post_id: str,
    payload: Optional[PostUpdate] = None,
    identity: CallerIdentity = Depends(require_identity),
    store: DocumentStore = Depends(get_document_store),
) -> PostResponse:
    changes = payload.model_dump(exclude_unset=True) if payload else {}
    return await post_service.update_post(store, identity, post_id, changes)


@router.delete(
    "/posts/{post_id}",
    response_model=DeleteResponse,
    responses={code: _ERRORS[code] for code in (401, 403, 404)},
    summary="Delete a post (author only)",
)
async def delete_post(
    post_id: str,
    identity: CallerIdentity = Depends(require_identity),
    store: DocumentStore = Depends(get_document_store),
) -> DeleteResponse:
    return await post_service.delete_post(store, identity, post_id)
