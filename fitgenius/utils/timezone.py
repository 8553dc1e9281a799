"""Timezone utility functions.

Central helper for the local-time questions the progress engine asks:
- Resolve the configured zone
- Hour of day and calendar date of a timestamp in that zone
"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger


def get_timezone(name: str | None) -> ZoneInfo:
    """Get configured timezone as ZoneInfo object.

    Args:
        name: IANA timezone name

    Returns:
        ZoneInfo for the name, defaults to UTC if invalid/missing
    """
    try:
        return ZoneInfo(name or "UTC")
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone '{name}', falling back to UTC")
        return ZoneInfo("UTC")


def to_local(dt: datetime, tz: ZoneInfo) -> datetime:
    """Convert datetime to the given zone.

    Naive datetimes are taken as already local.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def local_hour(dt: datetime, tz: ZoneInfo) -> int:
    return to_local(dt, tz).hour


def local_date(dt: datetime, tz: ZoneInfo) -> date:
    return to_local(dt, tz).date()


def now_local(tz: ZoneInfo) -> datetime:
    return datetime.now(timezone.utc).astimezone(tz)
