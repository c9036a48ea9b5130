"""
Bugboard Backend — Payload Validators
=======================================

What:  Pure functions checking required fields and enumerated values.
Why:   Route handlers need a field → message map to return with a 400,
       not a single exception message.
How:   Each validator collects every problem it finds and returns a
       ValidationResult. Validators never raise and never touch the store.

Rules:
    Post: title and content required (non-empty after stripping whitespace)
    Bug:  title required; status, when given, must be a tracker state;
          description is always optional
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# Tracker states in workflow order. The first one is the default.
BUG_STATUSES = ("open", "in-progress", "resolved")
DEFAULT_BUG_STATUS = BUG_STATUSES[0]


@dataclass(frozen=True)
class ValidationResult:
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_blank(value: Any) -> bool:
    """Missing, non-string, and whitespace-only values all count as blank."""
    return not isinstance(value, str) or not value.strip()


def is_valid_bug_status(value: Any) -> bool:
    return isinstance(value, str) and value in BUG_STATUSES


def validate_post_input(data: Optional[Mapping[str, Any]]) -> ValidationResult:
    data = data or {}
    errors: Dict[str, str] = {}
    if _is_blank(data.get("title")):
        errors["title"] = "Title is required"
    if _is_blank(data.get("content")):
        errors["content"] = "Content is required"
    return ValidationResult(errors=errors)


def validate_bug_input(data: Optional[Mapping[str, Any]]) -> ValidationResult:
    data = data or {}
    errors: Dict[str, str] = {}
    if _is_blank(data.get("title")):
        errors["title"] = "Title is required"
    status = data.get("status")
    # Falsy status means "use the default", matching the create path
    if status and not is_valid_bug_status(status):
        errors["status"] = "Invalid status"
    return ValidationResult(errors=errors)
