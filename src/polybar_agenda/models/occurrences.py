"""
Data models for calendar occurrences and agenda selections.

Occurrences are built fresh on every invocation from the expanded
calendar and discarded once the label has been printed.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class DisplayMode(Enum):
    """Label style, fixed at startup by --display-compact."""

    DEFAULT = "default"
    COMPACT = "compact"


class FragmentState(Enum):
    """Where an occurrence sits relative to now."""

    IN_PROGRESS = "in_progress"
    UPCOMING = "upcoming"


@dataclass(frozen=True)
class Occurrence:
    """One concrete instance of a calendar event, after recurrence expansion."""

    title: str
    start: datetime
    end: datetime | None = None  # None for point-in-time events

    def is_in_progress(self, now: datetime) -> bool:
        return self.end is not None and self.start <= now < self.end

    def is_upcoming(self, now: datetime) -> bool:
        return self.start > now

    def sort_key(self) -> tuple:
        """Earliest start, then title, then earliest end."""
        return (self.start, self.title, self.end or self.start)


@dataclass(frozen=True)
class SelectionResult:
    """The in-progress and upcoming occurrences chosen for display."""

    current: Occurrence | None = None
    upcoming: Occurrence | None = None

    def occurrences(self) -> list[Occurrence]:
        """Occurrences in display order: in-progress first, then upcoming."""
        return [o for o in (self.current, self.upcoming) if o is not None]

    def __len__(self) -> int:
        return len(self.occurrences())
