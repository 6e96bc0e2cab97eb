"""Settings for the cron engine and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import os
from typing import Any, TypedDict

from cronsight.common import DEFAULT_HORIZON_YEARS, DEFAULT_MAX_ITERATIONS
from cronsight.errors import CronConfigError
from cronsight.py_compatibility import NotRequired, Unpack

ENV_PREFIX = "CRONSIGHT"


class CronSettingsKwargs(TypedDict):
    """Kwargs accepted by :meth:`CronSettings.load`."""

    horizon_years: NotRequired[int]
    max_iterations: NotRequired[int]


@dataclasses.dataclass
class CronSettings:
    """Strongly typed configuration holder for the cron engine.

    :param horizon_years: Calendar years past the starting year that an occurrence search may scan.
    :param max_iterations: Upper bound on search loop iterations.
    """

    horizon_years: int
    max_iterations: int

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "horizon_years": DEFAULT_HORIZON_YEARS,
            "max_iterations": DEFAULT_MAX_ITERATIONS,
        }

    @classmethod
    def load(cls, **settings: Unpack[CronSettingsKwargs]) -> CronSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
        :returns: A fully instantiated :class:`CronSettings` object.
        :raises CronConfigError: If an environment variable holds an invalid value.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update(settings)
        return cls(**final_settings)

    def update(self, **settings: Unpack[CronSettingsKwargs]) -> None:
        """Apply keyword overrides directly to the instance."""
        for k, v in settings.items():
            if hasattr(self, k):
                setattr(self, k, v)

    def as_dict(self) -> dict[str, Any]:
        """Return specified settings as a plain dictionary for serialisation."""
        return dataclasses.asdict(self)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONSIGHT_*`` environment variables."""
        coercers: dict[str, Any] = {
            "horizon_years": _to_positive_int,
            "max_iterations": _to_positive_int,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{ENV_PREFIX}_{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronConfigError(msg) from exc
        return to_return


def _to_positive_int(value: str) -> int:
    result = int(value)
    if result <= 0:
        msg = f"Must be a positive integer, got {value!r}"
        raise ValueError(msg)
    return result
