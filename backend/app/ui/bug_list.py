"""Read-only list of bugs with per-row status and delete controls."""

from typing import Any, Callable, Mapping, Sequence

from app.ui.dates import format_date_iso
from app.ui.rendering import render
from app.validators import BUG_STATUSES


class BugList:
    """
    Purely presentational: the rows come from `bugs` (API response dicts)
    and every action is forwarded to a callback. Nothing is cached between
    renders, so re-rendering after the parent updates `bugs` is enough.
    """

    def __init__(
        self,
        bugs: Sequence[Mapping[str, Any]],
        on_delete: Callable[[str], None],
        on_update_status: Callable[[str, str], None],
    ):
        self.bugs = bugs
        self.on_delete = on_delete
        self.on_update_status = on_update_status

    @property
    def status_options(self) -> Sequence[str]:
        return BUG_STATUSES

    def change_status(self, bug_id: str, status: str) -> None:
        """What the status <select> of row `bug_id` does on change."""
        self.on_update_status(bug_id, status)

    def delete(self, bug_id: str) -> None:
        self.on_delete(bug_id)

    def render(self) -> str:
        rows = [
            {
                "id": bug["id"],
                "title": bug.get("title", ""),
                "status": bug.get("status", ""),
                "description": bug.get("description"),
                "created": format_date_iso(bug["created_at"]) if bug.get("created_at") else "",
            }
            for bug in self.bugs
        ]
        return render("bug_list.html", bugs=rows, statuses=self.status_options)
