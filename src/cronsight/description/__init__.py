"""Human-readable descriptions of cron expressions."""

from .description import describe, describe_expression

__all__ = ["describe", "describe_expression"]
