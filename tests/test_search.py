"""Tests for the next-occurrence search."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from cronsight.common import SearchState
from cronsight.expression import parse_expression
from cronsight.search import OccurrenceSearch, SearchCursor, classify, day_matches, next_candidate
from cronsight.settings import CronSettings


@pytest.fixture
def search() -> OccurrenceSearch:
    return OccurrenceSearch(CronSettings(horizon_years=2, max_iterations=2_000_000))


@pytest.mark.parametrize(
    ("expression", "reference", "expected"),
    [
        pytest.param("0 14 * * *", datetime(2024, 1, 15, 10, 0), datetime(2024, 1, 15, 14, 0), id="same-day"),
        pytest.param("30 9 * * *", datetime(2024, 1, 15, 9, 30), datetime(2024, 1, 16, 9, 30), id="strictly-after"),
        pytest.param("30 9 * * *", datetime(2024, 1, 15, 9, 29, 59), datetime(2024, 1, 15, 9, 30), id="seconds"),
        pytest.param("* * * * *", datetime(2024, 1, 15, 10, 0, 30), datetime(2024, 1, 15, 10, 1), id="every-minute"),
        pytest.param("0 0 1 * 0", datetime(2024, 1, 15, 10, 0), datetime(2024, 1, 21, 0, 0), id="dom-or-dow"),
        pytest.param("0 0 1 1 *", datetime(2024, 12, 31, 23, 59), datetime(2025, 1, 1, 0, 0), id="year-rollover"),
        pytest.param("0 0 * * *", datetime(2024, 1, 31, 12, 0), datetime(2024, 2, 1, 0, 0), id="month-rollover"),
        pytest.param("0 8 31 * *", datetime(2024, 4, 1, 0, 0), datetime(2024, 5, 31, 8, 0), id="skips-30-day-month"),
        pytest.param("0 0 29 2 *", datetime(2024, 2, 28, 10, 0), datetime(2024, 2, 29, 0, 0), id="leap-day"),
        pytest.param("0 0 29 2 *", datetime(2023, 2, 28, 10, 0), datetime(2024, 2, 29, 0, 0), id="next-leap-day"),
        pytest.param("0 0 * * 5-7", datetime(2024, 1, 20, 10, 0), datetime(2024, 1, 21, 0, 0), id="range-to-7"),
        pytest.param("*/15 * * * *", datetime(2024, 1, 15, 10, 7), datetime(2024, 1, 15, 10, 15), id="step"),
        pytest.param("0 9-17/4 * * 1-5", datetime(2024, 1, 19, 17, 0), datetime(2024, 1, 22, 9, 0), id="weekdays"),
        pytest.param("@yearly", datetime(2024, 6, 1), datetime(2025, 1, 1), id="alias"),
    ],
)
def test_next_occurrence(
    search: OccurrenceSearch, expression: str, reference: datetime, expected: datetime
) -> None:
    """The search returns the earliest matching minute strictly after the reference."""
    assert search.next_occurrence(parse_expression(expression), reference) == expected


@pytest.mark.parametrize("weekday", ["0", "7"])
def test_sunday_aliases_are_equivalent(search: OccurrenceSearch, weekday: str) -> None:
    """Weekday 0 and 7 both select Sunday."""
    result = search.next_occurrence(parse_expression(f"* * * * {weekday}"), datetime(2024, 1, 15, 10, 0))
    assert result == datetime(2024, 1, 21, 0, 0)


@pytest.mark.parametrize(
    ("expression", "reference"),
    [
        pytest.param("0 0 30 2 *", datetime(2024, 1, 1), id="impossible-date"),
        pytest.param("0 0 31 4 *", datetime(2024, 1, 1), id="april-31"),
        pytest.param("0 0 29 2 *", datetime(2025, 2, 28, 10, 0), id="leap-day-past-horizon"),
        pytest.param("0 0 1 1 *", datetime(9999, 12, 31, 23, 0), id="end-of-calendar"),
        pytest.param("* * * * *", datetime(9999, 12, 31, 23, 59), id="start-past-calendar"),
    ],
)
def test_next_occurrence_not_found(search: OccurrenceSearch, expression: str, reference: datetime) -> None:
    """Exhausting the horizon or the calendar yields None."""
    assert search.next_occurrence(parse_expression(expression), reference) is None


def test_wider_horizon_reaches_further() -> None:
    """A larger horizon finds occurrences the default one misses."""
    search = OccurrenceSearch(CronSettings(horizon_years=3, max_iterations=2_000_000))
    result = search.next_occurrence(parse_expression("0 0 29 2 *"), datetime(2025, 2, 28, 10, 0))
    assert result == datetime(2028, 2, 29, 0, 0)


def test_iteration_cap() -> None:
    """The search gives up once the iteration cap is reached."""
    search = OccurrenceSearch(CronSettings(horizon_years=2, max_iterations=1))
    assert search.next_occurrence(parse_expression("0 0 1 1 *"), datetime(2024, 6, 1)) is None


def test_timezone_is_preserved(search: OccurrenceSearch) -> None:
    """Aware references yield aware results in the same zone."""
    reference = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    assert search.next_occurrence(parse_expression("0 14 * * *"), reference) == datetime(
        2024, 1, 15, 14, 0, tzinfo=timezone.utc
    )


def test_search_cursor_start() -> None:
    """The cursor starts at the next whole minute and fixes its horizon year."""
    cursor = SearchCursor.start(datetime(2024, 12, 31, 23, 59, 42, 7), horizon_years=2)

    assert cursor.instant == datetime(2025, 1, 1, 0, 0)
    assert cursor.horizon_year == 2027
    assert cursor.iterations == 0
    assert not cursor.beyond_horizon

    moved = cursor.advance(datetime(2028, 1, 1))
    assert moved.beyond_horizon
    assert moved.iterations == 1
    assert cursor.iterations == 0


@pytest.mark.parametrize(
    ("instant", "state", "expected"),
    [
        pytest.param(datetime(2024, 3, 15, 10, 30), SearchState.SeekMonth, datetime(2024, 4, 1), id="month"),
        pytest.param(datetime(2024, 12, 15, 10, 30), SearchState.SeekMonth, datetime(2025, 1, 1), id="december"),
        pytest.param(datetime(2024, 2, 29, 10, 30), SearchState.SeekDay, datetime(2024, 3, 1), id="day"),
        pytest.param(datetime(2024, 3, 15, 23, 30), SearchState.SeekHour, datetime(2024, 3, 16), id="hour"),
        pytest.param(
            datetime(2024, 3, 15, 10, 59), SearchState.SeekMinute, datetime(2024, 3, 15, 11, 0), id="minute"
        ),
        pytest.param(datetime(2024, 3, 15, 10, 30), SearchState.Found, datetime(2024, 3, 15, 10, 31), id="found"),
    ],
)
def test_next_candidate(instant: datetime, state: SearchState, expected: datetime) -> None:
    """Each failing state jumps to the start of the next unit."""
    assert next_candidate(instant, state) == expected


@pytest.mark.parametrize(
    ("instant", "expected"),
    [
        pytest.param(datetime(2024, 2, 1, 9, 0), SearchState.SeekMonth, id="wrong-month"),
        pytest.param(datetime(2024, 1, 2, 9, 0), SearchState.SeekDay, id="wrong-day"),
        pytest.param(datetime(2024, 1, 1, 8, 0), SearchState.SeekHour, id="wrong-hour"),
        pytest.param(datetime(2024, 1, 1, 9, 5), SearchState.SeekMinute, id="wrong-minute"),
        pytest.param(datetime(2024, 1, 1, 9, 0), SearchState.Found, id="match"),
    ],
)
def test_classify(instant: datetime, expected: SearchState) -> None:
    """Fields are checked from the coarsest to the finest."""
    assert classify(parse_expression("0 9 1 1 *"), instant) is expected


@pytest.mark.parametrize(
    ("expression", "instant", "expected"),
    [
        pytest.param("* * * * *", datetime(2024, 1, 16), True, id="both-wildcards"),
        pytest.param("* * 15 * *", datetime(2024, 1, 16), False, id="dom-only-miss"),
        pytest.param("* * * * 2", datetime(2024, 1, 16), True, id="dow-only-hit"),
        pytest.param("* * 15 * 1", datetime(2024, 1, 15), True, id="both-dom-hit"),
        pytest.param("* * 1 * 2", datetime(2024, 1, 16), True, id="both-dow-hit"),
        pytest.param("* * 1 * 3", datetime(2024, 1, 16), False, id="both-miss"),
        pytest.param("* * */1 * 3", datetime(2024, 1, 16), True, id="step-is-not-wildcard"),
    ],
)
def test_day_matches(expression: str, instant: datetime, expected: bool) -> None:
    """Restricted day-of-month and weekday combine with OR."""
    assert day_matches(parse_expression(expression), instant) is expected


def test_only_calendar_overflow_ends_the_search(
    search: OccurrenceSearch, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Errors outside the calendar arithmetic propagate instead of reading as no occurrence."""

    def broken_classify(*_: object) -> SearchState:
        msg = "broken matcher"
        raise ValueError(msg)

    monkeypatch.setattr("cronsight.search.search.classify", broken_classify)
    with pytest.raises(ValueError, match="broken matcher"):
        search.next_occurrence(parse_expression("* * * * *"), datetime(2024, 1, 1))
