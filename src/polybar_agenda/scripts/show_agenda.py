#!/usr/bin/env python3
"""
Print today's current and next calendar event as a polybar label.

Reads a local .ics file, picks the event in progress (if any) and the next
upcoming one, and prints them on a single line. Meant to be called on an
interval by a polybar custom/script module.

Usage:
    polybar-agenda [--display-compact] <path-to-ics-file>

Example:
    polybar-agenda --display-compact ~/.calendars/personal.ics
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from polybar_agenda.core.config import EMPTY_TEXT, TIMEZONE
from polybar_agenda.core.logging import configure_logging
from polybar_agenda.core.timezone import resolve_timezone
from polybar_agenda.models.occurrences import DisplayMode
from polybar_agenda.services.calendar import CalendarFileError, read_occurrences
from polybar_agenda.services.labels import render
from polybar_agenda.services.selection import select

logger = logging.getLogger(__name__)


def run(path: Path, mode: DisplayMode, now: datetime) -> str:
    """Load, select and render. Returns the label to print."""
    occurrences = read_occurrences(path, now)
    selection = select(occurrences, now)
    logger.debug("Selected %d of %d occurrence(s)", len(selection), len(occurrences))
    return render(selection, mode, now) or EMPTY_TEXT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polybar-agenda",
        description="Show the current and next calendar event for a status bar",
    )
    parser.add_argument(
        "--display-compact",
        action="store_true",
        help="Use the compact format: 'Title · 48m/1h'",
    )
    parser.add_argument(
        "ics_file",
        type=Path,
        help="Path to the iCalendar (.ics) file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging()

    mode = DisplayMode.COMPACT if args.display_compact else DisplayMode.DEFAULT

    try:
        tz = resolve_timezone(TIMEZONE)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    try:
        label = run(args.ics_file, mode, datetime.now(tz))
    except CalendarFileError as e:
        logger.error("%s", e)
        return 1

    print(label)
    return 0


if __name__ == "__main__":
    sys.exit(main())
