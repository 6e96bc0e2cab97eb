"""Typed cron field terms together with their parser and matcher.

A field such as ``1-5,10,*/15`` is a comma-separated list of terms. Each term is
parsed exactly once into one of the immutable value types below; both the
validator and the occurrence search then work on those objects instead of
re-inspecting the raw text.
"""

from __future__ import annotations

__all__ = [
    "FieldTerm",
    "Range",
    "Single",
    "Step",
    "Wildcard",
    "matches",
    "parse_field",
    "parse_term",
    "term_matches",
]

from collections.abc import Iterable
from dataclasses import dataclass
import re
from typing import TYPE_CHECKING, Final, TypeAlias

from cronsight.errors import InvalidRangeError, InvalidStepError, InvalidValueError
from cronsight.py_compatibility import assert_never

if TYPE_CHECKING:
    from cronsight.common import FieldSpec
    from cronsight.cron_types import FieldText

_INTEGER: Final = re.compile(r"-?[0-9]+")


@dataclass(frozen=True, slots=True)
class Wildcard:
    """Any value of the field (``*``)."""

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True, slots=True)
class Single:
    """Exactly one value (``5``)."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive span of values (``1-5``)."""

    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True, slots=True)
class Step:
    """Every *interval*-th value of *base* (``*/15``, ``0-30/5``, ``10/5``)."""

    base: Wildcard | Single | Range
    interval: int

    def __str__(self) -> str:
        return f"{self.base}/{self.interval}"


FieldTerm: TypeAlias = Wildcard | Single | Range | Step


def parse_field(text: FieldText, spec: FieldSpec) -> tuple[FieldTerm, ...]:
    """Parse a comma-delimited field into its terms.

    :param text: Raw field text.
    :param spec: Field the text belongs to.
    :returns: One term per comma-separated part, in source order.
    :raises FieldError: On the first malformed or out-of-domain term.
    """
    return tuple(parse_term(part, spec) for part in text.split(","))


def parse_term(text: FieldText, spec: FieldSpec) -> FieldTerm:
    """Interpret a single cron term."""
    if text == "*":
        return Wildcard()
    if "/" in text:
        return _parse_step(text, spec)
    if "-" in text:
        return _parse_range(text, spec)
    return _parse_single(text, spec)


def _parse_step(text: FieldText, spec: FieldSpec) -> Step:
    base_text, _, step_text = text.partition("/")
    interval = _to_int(step_text)
    if interval is None or interval <= 0:
        msg = f"Invalid step value in {spec.name}"
        raise InvalidStepError(spec.name, msg)

    base: Wildcard | Single | Range
    if base_text == "*":
        base = Wildcard()
    elif "-" in base_text:
        base = _parse_range(base_text, spec)
    else:
        base = _parse_single(base_text, spec)
    return Step(base=base, interval=interval)


def _parse_range(text: FieldText, spec: FieldSpec) -> Range:
    start_text, _, end_text = text.partition("-")
    start, end = _to_int(start_text), _to_int(end_text)
    if start is None or end is None or not spec.minimum <= start <= end <= spec.maximum:
        msg = f"Invalid range in {spec.name}"
        raise InvalidRangeError(spec.name, msg)
    return Range(start=start, end=end)


def _parse_single(text: FieldText, spec: FieldSpec) -> Single:
    value = _to_int(text)
    if value is None or not spec.contains(value):
        msg = f"Invalid value in {spec.name}: {text}"
        raise InvalidValueError(spec.name, msg)
    return Single(value=value)


def _to_int(text: str) -> int | None:
    """Return the integer written in *text*, or ``None`` for anything but plain digits."""
    if _INTEGER.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter's int string conversion limit
        return None


def term_matches(value: int, term: FieldTerm) -> bool:
    """Return ``True`` when *value* belongs to *term*."""
    match term:
        case Wildcard():
            return True
        case Step(base=Wildcard(), interval=interval):
            return value % interval == 0
        case Step(base=Range(start=start, end=end), interval=interval):
            return start <= value <= end and (value - start) % interval == 0
        case Step(base=Single(value=start), interval=interval):
            return value >= start and (value - start) % interval == 0
        case Range(start=start, end=end):
            return start <= value <= end
        case Single(value=expected):
            return value == expected
        case _:
            raise assert_never(term)


def matches(value: int, terms: Iterable[FieldTerm]) -> bool:
    """Return ``True`` when *value* matches any of *terms*."""
    return any(term_matches(value, term) for term in terms)
