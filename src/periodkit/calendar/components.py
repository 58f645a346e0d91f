from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime

from .units import DateComponent


@dataclass(frozen=True, slots=True)
class DateComponents:
    """
    Broken-down view of a single instant.

    ``weekday`` follows ``datetime.weekday()`` (Monday is 0).  ``week_of_year``
    and ``year_for_week_of_year`` are ISO-8601 values; ``week_of_month``
    depends on the calendar's first weekday.
    """

    era: int
    year: int
    quarter: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int
    weekday_ordinal: int
    week_of_month: int
    week_of_year: int
    year_for_week_of_year: int
    day_of_year: int

    def get(self, component: DateComponent) -> int:
        return int(getattr(self, component.value))

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def components_of(instant: datetime, first_weekday: int = 0) -> DateComponents:
    iso = instant.isocalendar()
    first_of_month = instant.replace(day=1).weekday()
    offset = (first_of_month - first_weekday) % 7

    return DateComponents(
        era=1,  # datetime cannot represent years before 1 AD
        year=instant.year,
        quarter=(instant.month - 1) // 3 + 1,
        month=instant.month,
        day=instant.day,
        hour=instant.hour,
        minute=instant.minute,
        second=instant.second,
        weekday=instant.weekday(),
        weekday_ordinal=(instant.day - 1) // 7 + 1,
        week_of_month=(instant.day - 1 + offset) // 7 + 1,
        week_of_year=iso[1],
        year_for_week_of_year=iso[0],
        day_of_year=instant.timetuple().tm_yday,
    )
