"""Status-bar label for today's current and next calendar event."""

__version__ = "0.0.2"
