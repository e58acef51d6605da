"""Stderr logging setup. Stdout is reserved for the status-bar label."""

import logging
import sys

from polybar_agenda.core.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send all log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
