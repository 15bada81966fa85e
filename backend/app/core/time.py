"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for creation stamps."""
    return datetime.now(UTC)


def utc_today() -> date:
    return utc_now().date()
