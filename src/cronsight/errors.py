"""Module containing cronsight errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cronsight.common import FieldEnum


class CronError(Exception):
    """Base class for all cronsight errors."""


class CronSyntaxError(CronError, ValueError):
    """Raised when a cron expression cannot be parsed or validated."""


class FieldCountError(CronSyntaxError):
    """Raised when an expression does not split into exactly five fields."""


class FieldError(CronSyntaxError):
    """Raised when a single field fails shape or domain validation.

    :param field: Field that was rejected.
    :param detail: Human-readable reason, also used as the exception message.
    """

    def __init__(self, field: FieldEnum, detail: str) -> None:
        super().__init__(detail)
        self.field = field
        self.detail = detail


class InvalidValueError(FieldError):
    """Raised for a bad integer literal or a value outside of the field domain."""


class InvalidRangeError(FieldError):
    """Raised for an inverted, malformed or out-of-domain range."""


class InvalidStepError(FieldError):
    """Raised for a non-numeric or non-positive step."""


class CronConfigError(CronError, ValueError):
    """Raised when settings provided through the environment are invalid."""


class CronApplicationError(CronError, AssertionError):
    """Raised when a cronsight development error occurred.

    Used for future-proofing of some functions to ensure code is working as expected during the development phase.
    """
