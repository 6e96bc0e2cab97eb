"""Natural-language rendering of cron expressions."""

from __future__ import annotations

__all__ = ["describe", "describe_expression"]

from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple

from cronsight.common import (
    INVALID_DESCRIPTION,
    MONTH_NAMES,
    PREDEFINED_DESCRIPTIONS,
    WEEKDAY_NAMES,
    FieldEnum,
)
from cronsight.errors import CronSyntaxError
from cronsight.expression.expression import parse_expression
from cronsight.expression.terms import Range, Single, Step, Wildcard
from cronsight.py_compatibility import assert_never

if TYPE_CHECKING:
    from cronsight.cron_types import ExpressionText
    from cronsight.expression.expression import CronExpression, CronField
    from cronsight.expression.terms import FieldTerm


class _Wording(NamedTuple):
    """Phrases used to describe one field.

    Templates receive already formatted values. ``wildcard`` of ``None`` means a
    bare ``*`` adds no clause.
    """

    unit: str
    fmt: Callable[[int], str]
    wildcard: str | None
    single: str
    span: str
    many: str
    start: str
    span_fmt: Callable[[int], str] | None = None

    def format_span(self, start: int, end: int) -> str:
        fmt = self.span_fmt or self.fmt
        return self.span.format(fmt(start), fmt(end))


def _two_digits(value: int) -> str:
    return f"{value:02d}"


_WORDING: dict[FieldEnum, _Wording] = {
    FieldEnum.Minute: _Wording(
        unit="minute",
        fmt=_two_digits,
        wildcard="every minute",
        single="at minute {0}",
        span="from minute {0} to {1}",
        many="at minutes {0}",
        start="starting at minute {0}",
        span_fmt=str,
    ),
    FieldEnum.Hour: _Wording(
        unit="hour",
        fmt=_two_digits,
        wildcard=None,
        single="at hour {0}",
        span="from {0}:00 to {1}:59",
        many="at hours {0}",
        start="starting at {0}:00",
    ),
    FieldEnum.Day: _Wording(
        unit="day",
        fmt=str,
        wildcard=None,
        single="on day {0}",
        span="from day {0} to {1}",
        many="on days {0}",
        start="starting on day {0}",
    ),
    FieldEnum.Month: _Wording(
        unit="month",
        fmt=lambda value: MONTH_NAMES[value - 1],
        wildcard=None,
        single="in {0}",
        span="from {0} to {1}",
        many="in {0}",
        start="starting in {0}",
    ),
    FieldEnum.Weekday: _Wording(
        unit="weekday",
        fmt=lambda value: WEEKDAY_NAMES[value % 7],
        wildcard=None,
        single="on {0}",
        span="from {0} to {1}",
        many="on {0}",
        start="starting on {0}",
    ),
}


def describe(text: ExpressionText) -> str:
    """Return an English description of *text*.

    Predefined aliases map to fixed sentences and invalid input yields
    ``"Invalid cron expression"``; this function never raises for bad input.
    """
    try:
        expression = parse_expression(text)
    except CronSyntaxError:
        return INVALID_DESCRIPTION

    alias_description = PREDEFINED_DESCRIPTIONS.get(text.strip().lower())
    if alias_description is not None:
        return alias_description
    return describe_expression(expression)


def describe_expression(expression: CronExpression) -> str:
    """Build the description of an already validated expression."""
    date_clauses = [
        clause
        for clause in map(_field_clause, (expression.day, expression.month, expression.weekday))
        if clause
    ]

    match expression.minute.terms, expression.hour.terms:
        case (Single(value=at_minute),), (Single(value=at_hour),):
            return ", ".join([f"At {at_hour:02d}:{at_minute:02d}", *date_clauses])

    time_clauses = [
        clause for clause in map(_field_clause, (expression.minute, expression.hour)) if clause
    ]
    return ", ".join([*time_clauses, *date_clauses])


def _field_clause(field: CronField) -> str | None:
    wording = _WORDING[field.name]
    if len(field.terms) > 1:
        return wording.many.format(", ".join(_list_item(term, wording) for term in field.terms))

    (term,) = field.terms
    match term:
        case Wildcard():
            return wording.wildcard
        case Step(base=base, interval=interval):
            plural = "s" if interval > 1 else ""
            clause = f"every {interval} {wording.unit}{plural}"
            match base:
                case Range(start=start, end=end):
                    clause += " " + wording.format_span(start, end)
                case Single(value=start):
                    clause += " " + wording.start.format(wording.fmt(start))
            return clause
        case Range(start=start, end=end):
            return wording.format_span(start, end)
        case Single(value=value):
            return wording.single.format(wording.fmt(value))
        case _:
            raise assert_never(term)


def _list_item(term: FieldTerm, wording: _Wording) -> str:
    match term:
        case Single(value=value):
            return wording.fmt(value)
        case Range(start=start, end=end):
            return f"{wording.fmt(start)}-{wording.fmt(end)}"
        case _:
            return str(term)
