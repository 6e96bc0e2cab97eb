"""Occurrence search over validated cron expressions."""

from .search import (
    OccurrenceSearch,
    SearchCursor,
    classify,
    day_matches,
    next_candidate,
    weekday_matches,
)

__all__ = [
    "OccurrenceSearch",
    "SearchCursor",
    "classify",
    "day_matches",
    "next_candidate",
    "weekday_matches",
]
