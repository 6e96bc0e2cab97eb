"""Parsing, validation and matching of cron expressions."""

from .expression import (
    CronExpression,
    CronField,
    RawFields,
    normalize,
    parse_expression,
    split_fields,
    validate_fields,
)
from .terms import FieldTerm, Range, Single, Step, Wildcard, matches, parse_field, parse_term

__all__ = [
    "CronExpression",
    "CronField",
    "FieldTerm",
    "Range",
    "RawFields",
    "Single",
    "Step",
    "Wildcard",
    "matches",
    "normalize",
    "parse_expression",
    "parse_field",
    "parse_term",
    "split_fields",
    "validate_fields",
]
