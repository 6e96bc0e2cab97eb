"""Some common constants and objects which may be used in any modules."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, NamedTuple

from cronsight.py_compatibility import StrEnum

EXPECTED_FIELD_COUNT: Final[int] = 5
DEFAULT_HORIZON_YEARS: Final[int] = 2
DEFAULT_MAX_ITERATIONS: Final[int] = 2_000_000
INVALID_DESCRIPTION: Final[str] = "Invalid cron expression"
FIELD_COUNT_MESSAGE: Final[str] = f"Cron expression must have exactly {EXPECTED_FIELD_COUNT} fields"


class FieldEnum(StrEnum):
    """Enum of the cron fields, in the order they appear in an expression."""

    Minute = "minute"
    Hour = "hour"
    Day = "day"
    Month = "month"
    Weekday = "weekday"


class SearchState(StrEnum):
    """Enum of the states an occurrence search cursor may be in."""

    SeekMonth = "SeekMonth"
    SeekDay = "SeekDay"
    SeekHour = "SeekHour"
    SeekMinute = "SeekMinute"
    Found = "Found"


class ShapeEnum(StrEnum):
    """Enum of known random expression shapes."""

    ExactTime = "ExactTime"
    StepMinutes = "StepMinutes"
    StepHours = "StepHours"
    Weekly = "Weekly"
    Monthly = "Monthly"
    HourRange = "HourRange"


class FieldSpec(NamedTuple):
    """Name and inclusive numeric domain of a cron field."""

    name: FieldEnum
    minimum: int
    maximum: int

    def contains(self, value: int) -> bool:
        """Return ``True`` when *value* lies inside the field domain."""
        return self.minimum <= value <= self.maximum


# 0 and 7 both denote Sunday
FIELD_SPECS: Final = MappingProxyType(
    {
        FieldEnum.Minute: FieldSpec(FieldEnum.Minute, 0, 59),
        FieldEnum.Hour: FieldSpec(FieldEnum.Hour, 0, 23),
        FieldEnum.Day: FieldSpec(FieldEnum.Day, 1, 31),
        FieldEnum.Month: FieldSpec(FieldEnum.Month, 1, 12),
        FieldEnum.Weekday: FieldSpec(FieldEnum.Weekday, 0, 7),
    }
)

MONTH_NAMES: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
WEEKDAY_NAMES: Final[tuple[str, ...]] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

PREDEFINED: Final = MappingProxyType(
    {
        "@yearly": "0 0 1 1 *",
        "@annually": "0 0 1 1 *",
        "@monthly": "0 0 1 * *",
        "@weekly": "0 0 * * 0",
        "@daily": "0 0 * * *",
        "@hourly": "0 * * * *",
        "@minutely": "* * * * *",
    }
)

PREDEFINED_DESCRIPTIONS: Final = MappingProxyType(
    {
        "@yearly": "Once a year (January 1st at 00:00)",
        "@annually": "Once a year (January 1st at 00:00)",
        "@monthly": "Once a month (1st day at 00:00)",
        "@weekly": "Once a week (Sunday at 00:00)",
        "@daily": "Once a day (at 00:00)",
        "@hourly": "Once an hour (at minute 0)",
        "@minutely": "Every minute",
    }
)
