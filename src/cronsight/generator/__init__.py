"""Random generation of valid cron expressions."""

from .generator import KNOWN_SHAPES, random_expression

__all__ = ["KNOWN_SHAPES", "random_expression"]
