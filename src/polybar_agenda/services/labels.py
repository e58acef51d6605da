"""
Label rendering for the status bar.
"""

from datetime import datetime, timedelta

from polybar_agenda.core.config import COMPACT_DELIMITER, SEPARATOR, TIME_FORMAT
from polybar_agenda.models.occurrences import (
    DisplayMode,
    FragmentState,
    Occurrence,
    SelectionResult,
)

# =============================================================================
# FRAGMENT TEMPLATES
# =============================================================================

# (mode, state) -> template. Placeholders: title, start, until, since, remaining
FRAGMENT_TEMPLATES = {
    (DisplayMode.DEFAULT, FragmentState.UPCOMING): "{title} {start} (in {until})",
    (DisplayMode.DEFAULT, FragmentState.IN_PROGRESS): "{title} {start} ({since} ago)",
    (DisplayMode.COMPACT, FragmentState.UPCOMING): "{title}" + COMPACT_DELIMITER + "{until}",
    (DisplayMode.COMPACT, FragmentState.IN_PROGRESS): (
        "{title}" + COMPACT_DELIMITER + "{since}/{remaining}"
    ),
}


def format_duration(d: timedelta) -> str:
    """Format a duration floored to its largest whole unit (e.g. '2h', '48m', '30s')."""
    seconds = max(int(d.total_seconds()), 0)
    if seconds >= 3600:
        return f"{seconds // 3600}h"
    if seconds >= 60:
        return f"{seconds // 60}m"
    return f"{seconds}s"


def format_start_time(start: datetime, now: datetime, time_format: str = TIME_FORMAT) -> str:
    """Format the start as wall-clock time in the viewer's timezone."""
    return start.astimezone(now.tzinfo).strftime(time_format)


def fragment_state(occurrence: Occurrence, now: datetime) -> FragmentState:
    if occurrence.is_in_progress(now):
        return FragmentState.IN_PROGRESS
    return FragmentState.UPCOMING


def render_fragment(
    occurrence: Occurrence,
    mode: DisplayMode,
    now: datetime,
    time_format: str = TIME_FORMAT,
) -> str:
    """Render one occurrence. All durations are measured from the same now."""
    template = FRAGMENT_TEMPLATES[(mode, fragment_state(occurrence, now))]
    end = occurrence.end or occurrence.start
    return template.format(
        title=occurrence.title,
        start=format_start_time(occurrence.start, now, time_format),
        until=format_duration(occurrence.start - now),
        since=format_duration(now - occurrence.start),
        remaining=format_duration(end - now),
    )


def render(
    selection: SelectionResult,
    mode: DisplayMode,
    now: datetime,
    time_format: str = TIME_FORMAT,
) -> str:
    """
    Render a selection into a single status-bar label.

    An empty selection renders to an empty string.
    """
    return SEPARATOR.join(
        render_fragment(occurrence, mode, now, time_format)
        for occurrence in selection.occurrences()
    )
