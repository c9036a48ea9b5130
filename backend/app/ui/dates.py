"""Date formatting for UI rows."""

from datetime import date, datetime, timezone
from typing import Any

INVALID_DATE = "Invalid Date"


def format_date_iso(value: Any) -> str:
    """
    YYYY-MM-DD for a date, datetime or ISO-8601 string.

    Aware datetimes are converted to UTC first. Anything that cannot be
    read as a date yields "Invalid Date" instead of raising.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return INVALID_DATE
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return INVALID_DATE
