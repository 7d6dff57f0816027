"""
Datetime helpers for timezone-aware UTC handling.
"""
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Return the current datetime in UTC.

    Services take a clock callable that defaults to this function so tests
    can pin time without patching.
    """
    return datetime.now(timezone.utc)


def ensure_timezone_aware(dt: Optional[datetime]) -> datetime:
    """
    Ensure a datetime object is timezone-aware (UTC).
    SQLite returns naive datetimes even for DateTime(timezone=True) columns.

    Raises:
        ValueError: If dt is None
    """
    if dt is None:
        raise ValueError("datetime cannot be None")
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def format_duration(total_seconds: int) -> str:
    minutes, seconds = divmod(max(int(total_seconds), 0), 60)
    return f"{minutes}m {seconds}s"


def format_wait(total_seconds: int) -> str:
    total_minutes = -(-max(int(total_seconds), 0) // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"
