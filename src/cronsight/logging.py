"""Logging helpers shared by cronsight components."""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "WithLogger", "configure_logging", "resolve_level"]

from functools import cached_property
import logging
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class WithLogger:
    """Mixin providing a logger named after the concrete class."""

    _class_logger: logging.Logger | None = None

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        """Return the logger of this class, creating it on first use."""
        # looked up in the class dict so subclasses never reuse a parent logger
        logger = cls.__dict__.get("_class_logger")
        if logger is None:
            logger = logging.getLogger(cls.__name__)
            cls._class_logger = logger
        return logger

    @cached_property
    def _logger(self) -> logging.Logger:
        return self._get_logger()


def resolve_level(level: int | str) -> int:
    """Translate a level name such as ``"DEBUG"`` into its numeric value.

    :raises ValueError: If *level* is a string that is not a known level name.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        msg = f"{level!r} is not a valid logging level name"
        raise ValueError(msg)
    return resolved


def configure_logging(level: int | str = logging.INFO, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Set the root logger level and attach a stream handler when none is present.

    :param level: Numeric level or level name.
    :param fmt: Format string used for the installed handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level))
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        root_logger.addHandler(handler)
