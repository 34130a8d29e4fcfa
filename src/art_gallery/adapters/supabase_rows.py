"""Helpers for decoding Supabase rows."""

from datetime import datetime


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO timestamp column, tolerating nulls."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def optional_str(value: object) -> str | None:
    """Return a string column value or None."""
    if value is None:
        return None
    return str(value)
