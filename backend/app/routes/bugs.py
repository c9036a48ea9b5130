"""
Bugboard Backend — Bug Route Handlers
=======================================

What:  HTTP surface for /api/bugs. No route here requires a credential;
       when one is sent on create, it is recorded as the reporter.

    POST   /api/bugs        → 201 / 400
    GET    /api/bugs        → 200 (array)
    GET    /api/bugs/{id}   → 200 / 404
    PUT    /api/bugs/{id}   → 200 / 404
    DELETE /api/bugs/{id}   → 200 / 404
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from app.auth import CallerIdentity, get_identity
from app.schemas.bug import BugCreate, BugResponse, BugUpdate
from app.schemas.common import DeleteResponse, ErrorResponse, ServerErrorResponse
from app.services.bug_service import bug_service
from app.store import DocumentStore, get_document_store

router = APIRouter(
    prefix="/api",
    tags=["Bugs"],
    responses={500: {"description": "Unexpected failure", "model": ServerErrorResponse}},
)

_NOT_FOUND = {404: {"description": "Bug not found", "model": ErrorResponse}}


@router.post(
    "/bugs",
    response_model=BugResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid payload", "model": ErrorResponse}},
    summary="Report a bug",
)
async def create_bug(
    payload: Optional[BugCreate] = None,
    identity: Optional[CallerIdentity] = Depends(get_identity),
    store: DocumentStore = Depends(get_document_store),
) -> BugResponse:
    body = (payload or BugCreate()).model_dump()
    return await bug_service.create_bug(store, identity, body)


@router.get("/bugs", response_model=List[BugResponse], summary="List bugs")
async def list_bugs(
    store: DocumentStore = Depends(get_document_store),
) -> List[BugResponse]:
    return await bug_service.list_bugs(store)


@router.get(
    "/bugs/{bug_id}",
    response_model=BugResponse,
    responses=_NOT_FOUND,
    summary="Get a bug by ID",
)
async def get_bug(
    bug_id: str,
    store: DocumentStore = Depends(get_document_store),
) -> BugResponse:
    return await bug_service.get_bug(store, bug_id)


@router.put(
    "/bugs/{bug_id}",
    response_model=BugResponse,
    responses=_NOT_FOUND,
    summary="Update a bug (partial)",
    description="Unknown status values are ignored; the stored status is kept.",
)
async def update_bug(
    bug_id: str,
    payload: Optional[BugUpdate] = None,
    store: DocumentStore = Depends(get_document_store),
) -> BugResponse:
    changes = payload.model_dump(exclude_unset=True) if payload else {}
    return await bug_service.update_bug(store, bug_id, changes)


@router.delete(
    "/bugs/{bug_id}",
    response_model=DeleteResponse,
    responses=_NOT_FOUND,
    summary="Delete a bug",
)
async def delete_bug(
    bug_id: str,
    store: DocumentStore = Depends(get_document_store),
) -> DeleteResponse:
    return await bug_service.delete_bug(store, bug_id)
