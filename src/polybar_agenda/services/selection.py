"""
Occurrence selection: what is running now and what comes next today.
"""

from datetime import datetime

from polybar_agenda.core.timezone import day_bounds
from polybar_agenda.models.occurrences import Occurrence, SelectionResult


def overlaps_today(occurrence: Occurrence, now: datetime) -> bool:
    """Check whether an occurrence touches the local day containing now."""
    start_of_day, end_of_day = day_bounds(now)
    last_moment = occurrence.end or occurrence.start
    return occurrence.start < end_of_day and last_moment >= start_of_day


def select(occurrences: list[Occurrence], now: datetime) -> SelectionResult:
    """
    Pick the occurrences to show in the status bar.

    In-progress checks use absolute timestamps, so an event that started
    yesterday and is still running counts as current. Point events
    (no end) whose start has passed are treated as finished.

    Returns:
        SelectionResult with at most one current and one upcoming occurrence
    """
    today = [o for o in occurrences if overlaps_today(o, now)]

    in_progress = sorted((o for o in today if o.is_in_progress(now)), key=Occurrence.sort_key)
    upcoming = sorted((o for o in today if o.is_upcoming(now)), key=Occurrence.sort_key)

    return SelectionResult(
        current=in_progress[0] if in_progress else None,
        upcoming=upcoming[0] if upcoming else None,
    )
