"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from polybar_agenda.models import Occurrence

# Fixed offset so tests do not depend on the host timezone database
CET = timezone(timedelta(hours=1))


def make_calendar(*components: str, properties: tuple[str, ...] = ()) -> str:
    """Wrap raw VTIMEZONE/VEVENT/VTODO blocks in a VCALENDAR."""
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", "PRODID:-//polybar-agenda//tests//EN", *properties]
    for component in components:
        lines.extend(line.strip() for line in component.strip().splitlines())
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines) + "\r\n"


def make_event(uid: str, summary: str, *properties: str) -> str:
    """Build a VEVENT block from raw property lines."""
    return "\n".join(
        ["BEGIN:VEVENT", f"UID:{uid}", f"SUMMARY:{summary}", *properties, "END:VEVENT"]
    )


@pytest.fixture
def now():
    """Friday 2025-11-07 14:00 at UTC+1."""
    return datetime(2025, 11, 7, 14, 0, tzinfo=CET)


@pytest.fixture
def occurrence(now):
    """Factory for occurrences relative to now, in minutes."""

    def _make(title: str, start_min: int, end_min: int | None = None) -> Occurrence:
        start = now + timedelta(minutes=start_min)
        end = now + timedelta(minutes=end_min) if end_min is not None else None
        return Occurrence(title=title, start=start, end=end)

    return _make


@pytest.fixture
def write_ics(tmp_path):
    """Write a calendar to a temporary .ics file and return its path."""

    def _write(content: str, name: str = "agenda.ics") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
