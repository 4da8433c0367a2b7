"""UTC-everywhere time handling, with local dates only at display boundaries."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def now_utc() -> datetime:
    """
    Current time in UTC.

    Use this instead of datetime.now() everywhere.
    """
    return datetime.now(timezone.utc)


def to_local(dt: datetime, tz_name: str) -> datetime:
    """
    Convert a UTC datetime to a local timezone.

    ONLY use this at display boundaries, e.g. stamping the invoice date a
    person sees. Internal timestamps stay in UTC.

    Args:
        dt: UTC datetime
        tz_name: IANA timezone name (e.g., "Asia/Kolkata")

    Raises:
        ValueError: If datetime is naive or timezone name is invalid
    """
    if dt.tzinfo is None:
        raise ValueError(
            "Cannot convert naive datetime. Datetime must be timezone-aware."
        )

    try:
        local_tz = ZoneInfo(tz_name)
    except (KeyError, ValueError, ZoneInfoNotFoundError):
        raise ValueError(f"Unknown timezone: {tz_name}")

    return dt.astimezone(local_tz)


def today_local(tz_name: str) -> date:
    """Today's calendar date in the given timezone."""
    return to_local(now_utc(), tz_name).date()
