"""Cron expression normalisation, splitting and validation.

The pipeline runs in three stages:

* :func:`normalize` expands predefined aliases such as ``@daily``;
* :func:`split_fields` breaks the text into five raw field strings;
* :func:`validate_fields` parses every field into typed terms, short-circuiting
  on the first invalid field in minute, hour, day, month, weekday order.
"""

from __future__ import annotations

__all__ = [
    "CronExpression",
    "CronField",
    "RawFields",
    "normalize",
    "parse_expression",
    "split_fields",
    "validate_fields",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from cronsight.common import (
    EXPECTED_FIELD_COUNT,
    FIELD_COUNT_MESSAGE,
    FIELD_SPECS,
    PREDEFINED,
)
from cronsight.errors import FieldCountError
from cronsight.expression.terms import FieldTerm, Wildcard, matches, parse_field

if TYPE_CHECKING:
    from cronsight.common import FieldEnum, FieldSpec
    from cronsight.cron_types import ExpressionText, FieldText


class RawFields(NamedTuple):
    """The five raw field strings of an expression, not yet validated."""

    minute: FieldText
    hour: FieldText
    day: FieldText
    month: FieldText
    weekday: FieldText


@dataclass(frozen=True, slots=True)
class CronField:
    """A validated field: its domain, the raw text and the parsed terms.

    :param spec: Name and domain of the field.
    :param raw: Field text exactly as it appeared in the expression.
    :param terms: Non-empty tuple of terms, OR-combined.
    """

    spec: FieldSpec
    raw: FieldText
    terms: tuple[FieldTerm, ...]

    @property
    def name(self) -> FieldEnum:
        return self.spec.name

    @property
    def is_wildcard(self) -> bool:
        """Return ``True`` for a field written as a bare ``*``."""
        return self.terms == (Wildcard(),)

    def matches(self, value: int) -> bool:
        """Return ``True`` when *value* matches any term of the field."""
        return matches(value, self.terms)


class CronExpression(NamedTuple):
    """Structured representation of a fully valid five-field cron expression."""

    minute: CronField
    hour: CronField
    day: CronField
    month: CronField
    weekday: CronField

    @property
    def dom(self) -> CronField:
        """Alias for ``day`` property."""
        return self.day

    @property
    def dow(self) -> CronField:
        """Alias for ``weekday`` property."""
        return self.weekday

    def __str__(self) -> str:
        return " ".join(field.raw for field in self)


def normalize(text: ExpressionText) -> ExpressionText:
    """Expand a predefined alias into its canonical five-field form.

    Alias lookup ignores case and surrounding whitespace. Any other input is
    returned trimmed but otherwise untouched.
    """
    stripped = text.strip()
    return PREDEFINED.get(stripped.lower(), stripped)


def split_fields(text: ExpressionText) -> RawFields:
    """Split a normalised expression on whitespace runs into its five raw fields.

    :raises FieldCountError: If the text does not contain exactly five fields.
    """
    parts = text.split()
    if len(parts) != EXPECTED_FIELD_COUNT:
        raise FieldCountError(FIELD_COUNT_MESSAGE)
    return RawFields(*parts)


def validate_fields(raw: RawFields) -> CronExpression:
    """Parse every raw field into terms.

    :raises FieldError: For the first invalid field, in expression order.
    """
    return CronExpression(
        *(
            CronField(spec=spec, raw=text, terms=parse_field(text, spec))
            for spec, text in zip(FIELD_SPECS.values(), raw)
        )
    )


def parse_expression(text: ExpressionText) -> CronExpression:
    """Run the whole normalise, split and validate pipeline on *text*.

    :raises CronSyntaxError: If *text* is not a valid cron expression.
    """
    return validate_fields(split_fields(normalize(text)))
