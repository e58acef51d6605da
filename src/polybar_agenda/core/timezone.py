"""
Viewer timezone resolution and datetime normalisation.
"""

from datetime import date, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone

from polybar_agenda.core.config import TIMEZONE


def resolve_timezone(name: str | None = TIMEZONE) -> tzinfo:
    """
    Resolve the viewer timezone.

    Empty or missing names resolve to the system local zone, with its
    DST rules, so local midnight is right on transition days.

    Raises:
        ValueError: if the name is not a known IANA zone
    """
    if not name:
        return get_localzone()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name!r}") from e


def to_local(value: date | datetime, tz: tzinfo) -> datetime:
    """Convert an iCalendar date/datetime value to an aware datetime in tz."""
    if not isinstance(value, datetime):
        # All-day values start at local midnight
        return datetime(value.year, value.month, value.day, tzinfo=tz)
    if value.tzinfo is None:
        # Floating time is wall-clock time wherever the viewer is
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def day_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Return [start, end) of the local calendar day containing now."""
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    end_of_day = datetime.combine(
        start_of_day.date() + timedelta(days=1), start_of_day.time(), tzinfo=now.tzinfo
    )
    return start_of_day, end_of_day
