"""Public interface for the cronsight cron expression engine."""

from __future__ import annotations

from .engine import (
    CronEngine,
    ParseResult,
    ValidationResult,
    generate_random_cron,
    get_human_readable_description,
    get_next_execution_time,
    parse_cron_expression,
    validate_cron_expression,
)
from .logging import configure_logging
from .settings import CronSettings

__all__ = [
    "CronEngine",
    "CronSettings",
    "ParseResult",
    "ValidationResult",
    "configure_logging",
    "generate_random_cron",
    "get_human_readable_description",
    "get_next_execution_time",
    "parse_cron_expression",
    "validate_cron_expression",
]
