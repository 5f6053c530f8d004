"""
Core Utilities.

Shared utility functions used across the service.
All modules should import utilities from this module.
"""

from datetime import datetime, timedelta, timezone

MILLISECOND = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """
    Return current UTC time truncated to millisecond precision.

    Note timestamps are exposed with millisecond resolution, so they are
    stored that way too. Comparing two stored values then gives the same
    answer as comparing their serialized forms.

    Returns:
        Current timezone-aware UTC time
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as ISO 8601 UTC with milliseconds and a Z suffix.

    Example: 2024-03-01T12:30:45.123Z
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
