"""
Bugboard Backend — Bug Service (Request Pipeline for /api/bugs)
=================================================================

What:  Business rules for the bug tracker.
How:   Same pipeline shape as PostService, with two deliberate differences
       that current clients rely on:

    1. No ownership: anyone (including anonymous callers) may report,
       update or delete a bug. The reporter is recorded but never checked.
    2. Status on update: an unknown status is silently ignored and the
       stored status is kept, whereas create rejects it with a 400.
"""

from typing import Any, List, Mapping, Optional

from app.auth import CallerIdentity
from app.exceptions import NotFoundError, ValidationError
from app.schemas.bug import BugResponse
from app.schemas.common import DeleteResponse
from app.services.base import PipelineService
from app.services.normalize import bug_to_response, normalize_id
from app.store.base import BUGS, DocumentStore
from app.validators import DEFAULT_BUG_STATUS, is_valid_bug_status, validate_bug_input


class BugService(PipelineService):

    async def create_bug(
        self,
        store: DocumentStore,
        identity: Optional[CallerIdentity],
        payload: Mapping[str, Any],
    ) -> BugResponse:
        result = validate_bug_input(payload)
        if not result.is_valid:
            raise ValidationError(result.errors)

        fields = {
            "title": payload["title"],
            "description": payload.get("description"),
            "status": payload.get("status") or DEFAULT_BUG_STATUS,
            "reporter": identity.id if identity else None,
        }

        with self._store_failures("Failed to create bug"):
            bug = await self._store_call(store.create(BUGS, fields), "create")

        self.logger.info(
            "Bug reported",
            extra={"bug_id": normalize_id(bug.id), "title": bug.title},
        )
        return bug_to_response(bug)

    async def list_bugs(self, store: DocumentStore) -> List[BugResponse]:
        with self._store_failures("Failed to retrieve bugs"):
            bugs = await self._store_call(store.find(BUGS, {}), "find")

        normalized = [bug_to_response(bug) for bug in bugs]
        self.logger.info("Bugs retrieved", extra={"count": len(normalized)})
        return normalized

    async def get_bug(self, store: DocumentStore, bug_id: str) -> BugResponse:
        bug = await self._load(store, bug_id, "Failed to retrieve bug")
        return bug_to_response(bug)

    async def update_bug(
        self,
        store: DocumentStore,
        bug_id: str,
        payload: Mapping[str, Any],
    ) -> BugResponse:
        """Partial update; see module docstring for the status rule."""
        bug = await self._load(store, bug_id, "Failed to update bug")

        if payload.get("title"):
            bug.title = payload["title"]
        if payload.get("description"):
            bug.description = payload["description"]
        status = payload.get("status")
        if status and is_valid_bug_status(status):
            bug.status = status

        with self._store_failures("Failed to update bug", bug_id=bug_id):
            bug = await self._store_call(store.save(bug), "save")

        self.logger.info("Bug updated", extra={"bug_id": bug_id, "status": bug.status})
        return bug_to_response(bug)

    async def delete_bug(self, store: DocumentStore, bug_id: str) -> DeleteResponse:
        bug = await self._load(store, bug_id, "Failed to delete bug")

        with self._store_failures("Failed to delete bug", bug_id=bug_id):
            await self._store_call(store.remove(bug), "remove")

        self.logger.info("Bug deleted", extra={"bug_id": bug_id})
        return DeleteResponse(success=True)

    async def _load(self, store: DocumentStore, bug_id: str, failure_message: str) -> Any:
        with self._store_failures(failure_message, bug_id=bug_id):
            bug = await self._store_call(store.find_by_id(BUGS, bug_id), "find_by_id")
        if bug is None:
            raise NotFoundError(resource="bug", resource_id=bug_id)
        return bug


bug_service = BugService()
