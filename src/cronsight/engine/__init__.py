"""Engine facade and result objects."""

from .engine import (
    CronEngine,
    generate_random_cron,
    get_human_readable_description,
    get_next_execution_time,
    parse_cron_expression,
    validate_cron_expression,
)
from .results import ParseResult, ValidationResult

__all__ = [
    "CronEngine",
    "ParseResult",
    "ValidationResult",
    "generate_random_cron",
    "get_human_readable_description",
    "get_next_execution_time",
    "parse_cron_expression",
    "validate_cron_expression",
]
