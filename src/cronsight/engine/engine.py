"""Public entry points of the cron engine.

:class:`CronEngine` wires the settings into the individual stages and turns
every :class:`~cronsight.errors.CronSyntaxError` into result data, so callers
never need to catch exceptions for bad cron input. The module-level functions
build a fresh engine from the current settings on every call.
"""

from __future__ import annotations

__all__ = [
    "CronEngine",
    "generate_random_cron",
    "get_human_readable_description",
    "get_next_execution_time",
    "parse_cron_expression",
    "validate_cron_expression",
]

from datetime import datetime
from functools import cached_property
from typing import TYPE_CHECKING

from cronsight.description.description import describe
from cronsight.engine.results import ParseResult, ValidationResult
from cronsight.errors import CronSyntaxError
from cronsight.expression.expression import normalize, parse_expression, split_fields
from cronsight.generator.generator import random_expression
from cronsight.logging import WithLogger
from cronsight.search.search import OccurrenceSearch
from cronsight.settings import CronSettings

if TYPE_CHECKING:
    import random

    from cronsight.common import ShapeEnum
    from cronsight.cron_types import ExpressionText
    from cronsight.py_compatibility import Unpack
    from cronsight.settings import CronSettingsKwargs


class CronEngine(WithLogger):
    """Container binding :class:`~cronsight.settings.CronSettings` to the engine stages."""

    def __init__(self, **settings: Unpack[CronSettingsKwargs]) -> None:
        """Remember settings overrides; they are resolved on first use.

        :param settings: Keyword overrides passed directly to :meth:`CronSettings.load`.
            These overrides take precedence over environment variables and defaults.
        """
        self._overrides: CronSettingsKwargs = settings

    @cached_property
    def settings(self) -> CronSettings:
        """Settings loaded from defaults, ``CRONSIGHT_*`` environment variables and overrides.

        Only the occurrence search reads them, so a malformed environment does not
        affect parsing, validation or description.

        :raises CronConfigError: If an environment variable holds an invalid value.
        """
        return CronSettings.load(**self._overrides)

    @cached_property
    def _search(self) -> OccurrenceSearch:
        return OccurrenceSearch(self.settings)

    def parse(self, text: ExpressionText) -> ParseResult:
        """Normalise *text* and split it into raw fields without validating them."""
        try:
            raw = split_fields(normalize(text))
        except CronSyntaxError as exc:
            self._logger.debug("Rejected %r: %s", text, exc)
            return ParseResult.failure(exc)
        return ParseResult.success(raw)

    def validate(self, text: ExpressionText) -> ValidationResult:
        """Run the full validation pipeline, reporting the first failing field."""
        try:
            parse_expression(text)
        except CronSyntaxError as exc:
            self._logger.debug("Rejected %r: %s", text, exc)
            return ValidationResult.failure(exc)
        return ValidationResult.success()

    def next_execution_time(
        self, text: ExpressionText, from_instant: datetime | None = None
    ) -> datetime | None:
        """Return the next instant strictly after *from_instant* at which *text* fires.

        :param text: Cron expression or predefined alias.
        :param from_instant: Reference instant, the current local time when omitted.
        :returns: The occurrence, or ``None`` for invalid input or an exhausted search.
        """
        try:
            expression = parse_expression(text)
        except CronSyntaxError as exc:
            self._logger.debug("Rejected %r: %s", text, exc)
            return None
        if from_instant is None:
            from_instant = datetime.now()
        return self._search.next_occurrence(expression, from_instant)

    def describe(self, text: ExpressionText) -> str:
        """Return the English description of *text*."""
        return describe(text)

    def random_expression(
        self, rng: random.Random | None = None, *, shape: ShapeEnum | None = None
    ) -> ExpressionText:
        """Return a random valid expression."""
        return random_expression(rng, shape=shape)


def parse_cron_expression(text: ExpressionText) -> ParseResult:
    """Split *text* into raw fields, see :meth:`CronEngine.parse`."""
    return CronEngine().parse(text)


def validate_cron_expression(text: ExpressionText) -> ValidationResult:
    """Validate *text*, see :meth:`CronEngine.validate`."""
    return CronEngine().validate(text)


def get_next_execution_time(
    text: ExpressionText, from_instant: datetime | None = None
) -> datetime | None:
    """Return the next occurrence of *text*, see :meth:`CronEngine.next_execution_time`."""
    return CronEngine().next_execution_time(text, from_instant)


def get_human_readable_description(text: ExpressionText) -> str:
    """Describe *text*, see :meth:`CronEngine.describe`."""
    return CronEngine().describe(text)


def generate_random_cron(rng: random.Random | None = None) -> ExpressionText:
    """Return a random valid expression, see :meth:`CronEngine.random_expression`."""
    return CronEngine().random_expression(rng)
