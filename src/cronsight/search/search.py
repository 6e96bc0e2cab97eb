"""Next-occurrence search for validated cron expressions."""

from __future__ import annotations

__all__ = [
    "OccurrenceSearch",
    "SearchCursor",
    "classify",
    "day_matches",
    "next_candidate",
    "weekday_matches",
]

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from cronsight.common import SearchState
from cronsight.logging import WithLogger
from cronsight.py_compatibility import assert_never
from cronsight.settings import CronSettings

if TYPE_CHECKING:
    from cronsight.expression.expression import CronExpression, CronField

_SUNDAY = 0
_SUNDAY_ALIAS = 7


@dataclass(frozen=True, slots=True)
class SearchCursor:
    """Immutable position of an occurrence search.

    :param instant: Candidate instant, always at minute resolution.
    :param horizon_year: Last calendar year the search may visit.
    :param iterations: Number of steps taken so far.
    """

    instant: datetime
    horizon_year: int
    iterations: int = 0

    @classmethod
    def start(cls, reference: datetime, horizon_years: int) -> SearchCursor:
        """Return a cursor at the first whole minute strictly after *reference*."""
        instant = reference.replace(second=0, microsecond=0) + timedelta(minutes=1)
        return cls(instant=instant, horizon_year=instant.year + horizon_years)

    @property
    def beyond_horizon(self) -> bool:
        return self.instant.year > self.horizon_year

    def advance(self, instant: datetime) -> SearchCursor:
        """Return a new cursor moved to *instant* with the iteration counter bumped."""
        return replace(self, instant=instant, iterations=self.iterations + 1)


def weekday_matches(field: CronField, instant: datetime) -> bool:
    """Return ``True`` when the weekday of *instant* matches *field*.

    Sunday matches a field that accepts either ``0`` or ``7``.
    """
    weekday = (instant.weekday() + 1) % 7
    if field.matches(weekday):
        return True
    return weekday == _SUNDAY and field.matches(_SUNDAY_ALIAS)


def day_matches(expression: CronExpression, instant: datetime) -> bool:
    """Apply the cron day-of-month / weekday rule to *instant*.

    With both fields restricted a day matches when *either* of them matches.
    """
    dom, dow = expression.dom, expression.dow
    if dom.is_wildcard and dow.is_wildcard:
        return True
    if dom.is_wildcard:
        return weekday_matches(dow, instant)
    if dow.is_wildcard:
        return dom.matches(instant.day)
    return dom.matches(instant.day) or weekday_matches(dow, instant)


def classify(expression: CronExpression, instant: datetime) -> SearchState:
    """Return the coarsest field that *instant* fails, or ``Found``."""
    if not expression.month.matches(instant.month):
        return SearchState.SeekMonth
    if not day_matches(expression, instant):
        return SearchState.SeekDay
    if not expression.hour.matches(instant.hour):
        return SearchState.SeekHour
    if not expression.minute.matches(instant.minute):
        return SearchState.SeekMinute
    return SearchState.Found


def next_candidate(instant: datetime, state: SearchState) -> datetime:
    """Return the next instant worth checking after *instant* failed in *state*.

    ``Found`` steps one minute forward like ``SeekMinute``.
    """
    match state:
        case SearchState.SeekMonth:
            years, month_index = divmod(instant.month, 12)
            return instant.replace(
                year=instant.year + years, month=month_index + 1, day=1, hour=0, minute=0
            )
        case SearchState.SeekDay:
            return instant.replace(hour=0, minute=0) + timedelta(days=1)
        case SearchState.SeekHour:
            return instant.replace(minute=0) + timedelta(hours=1)
        case SearchState.SeekMinute | SearchState.Found:
            return instant + timedelta(minutes=1)
        case _:
            raise assert_never(state)


class OccurrenceSearch(WithLogger):
    """Find the next instant at which a validated expression fires."""

    def __init__(self, settings: CronSettings | None = None) -> None:
        """Initialise the search with the bounds taken from *settings*."""
        self._settings = settings or CronSettings.load()

    def next_occurrence(self, expression: CronExpression, reference: datetime) -> datetime | None:
        """Return the first matching instant strictly after *reference*.

        :param expression: Validated expression to search for.
        :param reference: Instant to search from; its wall-clock fields are used as is.
        :returns: The occurrence, or ``None`` when the horizon or iteration cap is exhausted.
        """
        try:
            cursor = SearchCursor.start(reference, self._settings.horizon_years)
        except OverflowError:
            self._log_calendar_end(expression)
            return None

        while cursor.iterations < self._settings.max_iterations:
            if cursor.beyond_horizon:
                self._logger.debug(
                    "No occurrence of %s before the end of %d", expression, cursor.horizon_year
                )
                return None
            state = classify(expression, cursor.instant)
            if state is SearchState.Found and cursor.instant > reference:
                return cursor.instant
            try:
                candidate = next_candidate(cursor.instant, state)
            except (OverflowError, ValueError):
                # stepped past datetime.max
                self._log_calendar_end(expression)
                return None
            cursor = cursor.advance(candidate)

        self._logger.debug(
            "No occurrence of %s within %d iterations", expression, self._settings.max_iterations
        )
        return None

    def _log_calendar_end(self, expression: CronExpression) -> None:
        self._logger.debug("Search for %s ran past the supported calendar range", expression)
