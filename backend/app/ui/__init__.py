"""
Bugboard — Bug Tracker UI Components
======================================

What:  Presentational components for the bug tracker, independent of any
       particular UI toolkit.
How:   Each component keeps its state in plain attributes, exposes the user
       actions as methods (submit, click, change_status, reset, ...) and
       renders an HTML fragment through Jinja2. Components never call the
       API themselves: they receive callbacks.

Component Inventory:
    - Button:         variant/size class list, click suppressed when disabled
    - BugForm:        title/description fields, submit → on_create
    - BugList:        bug rows with status select and delete control
    - ErrorBoundary:  NORMAL/FAULTED state machine around a child renderer
    - Toggle:         boolean state helper
    - format_date_iso: YYYY-MM-DD formatting for timestamps
"""

from app.ui.bug_form import BugForm
from app.ui.bug_list import BugList
from app.ui.button import Button
from app.ui.dates import format_date_iso
from app.ui.error_boundary import BoundaryState, ErrorBoundary
from app.ui.toggle import Toggle

__all__ = [
    "BoundaryState",
    "BugForm",
    "BugList",
    "Button",
    "ErrorBoundary",
    "Toggle",
    "format_date_iso",
]
