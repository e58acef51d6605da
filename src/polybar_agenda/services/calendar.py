"""
Calendar file loading and recurrence expansion.

Parsing is done by icalendar and recurrence expansion by
recurring-ical-events. Each event series is expanded on its own so a
single malformed entry is skipped instead of failing the whole file.
"""

import logging
from collections import defaultdict
from collections.abc import Iterator
from datetime import datetime, timedelta, tzinfo
from pathlib import Path

import recurring_ical_events
from icalendar import Calendar, Component

from polybar_agenda.core.config import COMPONENT_TYPES
from polybar_agenda.core.timezone import day_bounds, to_local
from polybar_agenda.models.occurrences import Occurrence

logger = logging.getLogger(__name__)

# Calendar-level properties that affect how floating times are expanded
INHERITED_PROPERTIES = ("X-WR-TIMEZONE",)


class CalendarFileError(Exception):
    """The calendar file could not be read or is not an iCalendar file."""


def load_calendar(path: Path) -> Calendar:
    """
    Read and parse an .ics file.

    Raises:
        CalendarFileError: if the file is unreadable or not valid iCalendar
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CalendarFileError(f"cannot read {path}: {e}") from e

    try:
        calendar = Calendar.from_ical(content)
    except ValueError as e:
        raise CalendarFileError(f"cannot parse {path}: {e}") from e

    if calendar.name != "VCALENDAR":
        raise CalendarFileError(f"cannot parse {path}: expected VCALENDAR, got {calendar.name}")

    return calendar


def is_usable(component: Component) -> bool:
    """Check whether a component can be expanded, logging why not."""
    summary = component.get("SUMMARY", "")
    if component.errors:
        logger.warning("Skipping %s %r: %s", component.name, str(summary), component.errors)
        return False
    if component.get("DTSTART") is None:
        logger.warning("Skipping %s %r: missing DTSTART", component.name, str(summary))
        return False
    return True


def split_series(calendar: Calendar) -> Iterator[tuple[str, Calendar]]:
    """
    Split a calendar into one small calendar per UID.

    Recurrence overrides share the UID of their master event, so they stay
    together. Timezone definitions are copied into every part.
    """
    timezones = [c for c in calendar.subcomponents if c.name == "VTIMEZONE"]
    series: dict[str, list[Component]] = defaultdict(list)

    for index, component in enumerate(calendar.subcomponents):
        if component.name not in COMPONENT_TYPES or not is_usable(component):
            continue
        uid = str(component.get("UID", "")) or f"no-uid-{index}"
        series[uid].append(component)

    for uid, components in series.items():
        part = Calendar()
        for name in INHERITED_PROPERTIES:
            if name in calendar:
                part.add(name, calendar[name])
        for component in timezones + components:
            part.add_component(component)
        yield uid, part


def to_occurrence(component: Component, tz: tzinfo) -> Occurrence:
    """Convert one expanded component into an Occurrence in the viewer timezone."""
    start_value = component["DTSTART"].dt
    start = to_local(start_value, tz)

    end = None
    end_prop = component.get("DTEND", component.get("DUE"))
    if end_prop is not None:
        end = to_local(end_prop.dt, tz)
    elif component.get("DURATION") is not None:
        end = start + component["DURATION"].dt
    elif not isinstance(start_value, datetime):
        # All-day event without an end lasts the whole day
        end = start + timedelta(days=1)

    # Zero-length occurrences are point events
    if end == start:
        end = None

    return Occurrence(title=str(component.get("SUMMARY", "")), start=start, end=end)


def expand_occurrences(
    calendar: Calendar, range_start: datetime, range_end: datetime, tz: tzinfo
) -> list[Occurrence]:
    """
    Expand all events and to-dos overlapping [range_start, range_end).

    Series that fail to expand are logged and skipped.
    """
    occurrences = []

    for uid, part in split_series(calendar):
        try:
            expanded = recurring_ical_events.of(part, components=COMPONENT_TYPES).between(
                range_start, range_end
            )
            occurrences.extend(to_occurrence(component, tz) for component in expanded)
        except (recurring_ical_events.InvalidCalendar, ValueError) as e:
            logger.warning("Skipping series %s: %s", uid, e)

    logger.debug(
        "Expanded %d occurrence(s) between %s and %s", len(occurrences), range_start, range_end
    )
    return occurrences


def read_occurrences(path: Path, now: datetime) -> list[Occurrence]:
    """Load a calendar file and expand it over the local day containing now."""
    calendar = load_calendar(path)
    start_of_day, end_of_day = day_bounds(now)
    return expand_occurrences(calendar, start_of_day, end_of_day, now.tzinfo)
