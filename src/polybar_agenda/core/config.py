"""
Configuration constants and environment setup.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# DISPLAY CONFIGURATION
# =============================================================================

SEPARATOR = " » "  # Between the in-progress and upcoming fragments
COMPACT_DELIMITER = " · "  # Between title and durations in compact mode

TIME_FORMAT = os.environ.get("POLYBAR_AGENDA_TIME_FORMAT", "%H:%M")
EMPTY_TEXT = os.environ.get("POLYBAR_AGENDA_EMPTY_TEXT", "")

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

COMPONENT_TYPES = ("VEVENT", "VTODO")

# IANA zone name, e.g. "Europe/Berlin". Empty means the system local timezone.
TIMEZONE = os.environ.get("POLYBAR_AGENDA_TIMEZONE", "")

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.environ.get("POLYBAR_AGENDA_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "polybar-agenda: %(levelname)s: %(message)s"
