"""Occurrence and selection models."""

from .occurrences import DisplayMode, FragmentState, Occurrence, SelectionResult

__all__ = ["DisplayMode", "FragmentState", "Occurrence", "SelectionResult"]
