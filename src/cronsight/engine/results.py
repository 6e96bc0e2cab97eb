"""Result objects returned by the engine entry points."""

from __future__ import annotations

__all__ = ["ParseResult", "ValidationResult"]

import dataclasses
from typing import TYPE_CHECKING, Any

from cronsight.errors import FieldError

if TYPE_CHECKING:
    from cronsight.common import FieldEnum
    from cronsight.cron_types import FieldText
    from cronsight.errors import CronSyntaxError
    from cronsight.expression.expression import RawFields


def _without_nones(result: Any) -> dict[str, Any]:
    return {k: v for k, v in dataclasses.asdict(result).items() if v is not None}


@dataclasses.dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of splitting an expression into its raw fields.

    :param valid: ``True`` when the expression has exactly five fields.
    :param minute: Raw minute field, ``None`` when invalid.
    :param hour: Raw hour field, ``None`` when invalid.
    :param day: Raw day-of-month field, ``None`` when invalid.
    :param month: Raw month field, ``None`` when invalid.
    :param weekday: Raw weekday field, ``None`` when invalid.
    :param error: Reason of the failure, ``None`` when valid.
    """

    valid: bool
    minute: FieldText | None = None
    hour: FieldText | None = None
    day: FieldText | None = None
    month: FieldText | None = None
    weekday: FieldText | None = None
    error: str | None = None

    @classmethod
    def success(cls, raw: RawFields) -> ParseResult:
        return cls(valid=True, **raw._asdict())

    @classmethod
    def failure(cls, exc: CronSyntaxError) -> ParseResult:
        return cls(valid=False, error=str(exc))

    def as_dict(self) -> dict[str, Any]:
        """Return the populated attributes as a plain dictionary."""
        return _without_nones(self)


@dataclasses.dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a whole expression.

    :param valid: ``True`` when every field is valid.
    :param error: Reason of the first failure, ``None`` when valid.
    :param field: Field blamed for the failure; ``None`` for a field count error.
    """

    valid: bool
    error: str | None = None
    field: FieldEnum | None = None

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def failure(cls, exc: CronSyntaxError) -> ValidationResult:
        field = exc.field if isinstance(exc, FieldError) else None
        return cls(valid=False, error=str(exc), field=field)

    def as_dict(self) -> dict[str, Any]:
        """Return the populated attributes as a plain dictionary."""
        return _without_nones(self)
