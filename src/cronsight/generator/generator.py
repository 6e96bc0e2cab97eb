"""Random generation of valid cron expressions from a fixed set of shapes."""

from __future__ import annotations

__all__ = ["KNOWN_SHAPES", "random_expression"]

import random
from typing import TYPE_CHECKING

from cronsight.common import ShapeEnum
from cronsight.errors import CronApplicationError
from cronsight.utils import make_specific_register_func

if TYPE_CHECKING:
    from cronsight.cron_types import ExpressionText, ShapeFunc

KNOWN_SHAPES: dict[ShapeEnum, ShapeFunc] = {}

_register = make_specific_register_func(KNOWN_SHAPES)

MINUTE_STEPS = (5, 10, 15, 30)
HOUR_STEPS = (1, 2, 3, 6, 12)
# days 29-31 do not exist in every month
MAX_MONTHLY_DAY = 28
MAX_RANGE_START_HOUR = 19


@_register(ShapeEnum.ExactTime)
def _exact_time(rng: random.Random) -> ExpressionText:
    return f"{rng.randint(0, 59)} {rng.randint(0, 23)} * * *"


@_register(ShapeEnum.StepMinutes)
def _step_minutes(rng: random.Random) -> ExpressionText:
    return f"*/{rng.choice(MINUTE_STEPS)} * * * *"


@_register(ShapeEnum.StepHours)
def _step_hours(rng: random.Random) -> ExpressionText:
    return f"0 */{rng.choice(HOUR_STEPS)} * * *"


@_register(ShapeEnum.Weekly)
def _weekly(rng: random.Random) -> ExpressionText:
    return f"0 {rng.randint(0, 23)} * * {rng.randint(0, 6)}"


@_register(ShapeEnum.Monthly)
def _monthly(rng: random.Random) -> ExpressionText:
    return f"0 {rng.randint(0, 23)} {rng.randint(1, MAX_MONTHLY_DAY)} * *"


@_register(ShapeEnum.HourRange)
def _hour_range(rng: random.Random) -> ExpressionText:
    start = rng.randint(0, MAX_RANGE_START_HOUR)
    end = rng.randint(start, 23)
    return f"0 {start}-{end} * * *"


def random_expression(
    rng: random.Random | None = None, *, shape: ShapeEnum | None = None
) -> ExpressionText:
    """Return a random, always valid, cron expression.

    :param rng: Source of randomness; a freshly seeded generator is used when omitted.
    :param shape: Force a particular shape instead of picking one uniformly.
    :raises CronApplicationError: If *shape* has no registered implementation.
    """
    rng = rng or random.Random()
    if shape is None:
        shape = rng.choice(sorted(KNOWN_SHAPES))
    if shape not in KNOWN_SHAPES:
        msg = (
            f"Found unregistered shape: {shape!r}. "
            f"If you are developer, ensure you register it in {__name__}."
        )
        raise CronApplicationError(msg)
    return KNOWN_SHAPES[shape](rng)
