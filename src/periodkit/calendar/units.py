from __future__ import annotations

from enum import Enum, IntEnum


class TimePeriodSize(Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def is_calendar_unit(self) -> bool:
        """True for units whose length depends on the calendar (day and up)."""
        return self in _CALENDAR_UNITS


_CALENDAR_UNITS = frozenset(
    {TimePeriodSize.DAY, TimePeriodSize.WEEK, TimePeriodSize.MONTH, TimePeriodSize.YEAR}
)


class TimeCalculatingOperation(Enum):
    ADDING = "adding"
    SUBTRACTING = "subtracting"

    @property
    def sign(self) -> int:
        return 1 if self is TimeCalculatingOperation.ADDING else -1


class SecondsConstant(IntEnum):
    YEAR = 31556900
    MONTH28 = 2419200
    MONTH29 = 2505600
    MONTH30 = 2592000
    MONTH31 = 2678400
    WEEK = 604800
    DAY = 86400
    HOUR = 3600
    MINUTE = 60


class WeekdayName(IntEnum):
    """Day of the week, numbered like ``datetime.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]


_SHORT_NAMES = {
    WeekdayName.MONDAY: "Mon.",
    WeekdayName.TUESDAY: "Tues.",
    WeekdayName.WEDNESDAY: "Wed.",
    WeekdayName.THURSDAY: "Thur.",
    WeekdayName.FRIDAY: "Fri.",
    WeekdayName.SATURDAY: "Sat.",
    WeekdayName.SUNDAY: "Sun.",
}


class DateComponent(Enum):
    ERA = "era"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    WEEKDAY = "weekday"
    WEEKDAY_ORDINAL = "weekday_ordinal"
    QUARTER = "quarter"
    WEEK_OF_MONTH = "week_of_month"
    WEEK_OF_YEAR = "week_of_year"
    YEAR_FOR_WEEK_OF_YEAR = "year_for_week_of_year"
    DAY_OF_YEAR = "day_of_year"
