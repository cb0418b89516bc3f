"""
Timestamp helpers for post creation times.

Posts store `created` as a UTC BSON date; responses carry it as an
ISO 8601 string ending in 'Z', at the millisecond precision MongoDB keeps.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Aware UTC timestamp for a newly created post"""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Attach or convert to UTC.

    PyMongo hands back naive datetimes unless the client is tz_aware, and
    those are always UTC, so naive values are tagged rather than shifted.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """
    Render a post timestamp for the API.

    Args:
        value: creation time; naive values are read as UTC

    Returns:
        String like "2024-05-01T09:15:00.250Z", or None when value is None
    """
    value = ensure_utc(value)
    if value is None:
        return None
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
