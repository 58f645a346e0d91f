from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from ._exceptions import CalendarError
from .components import DateComponents, components_of
from .units import (
    DateComponent,
    SecondsConstant,
    TimeCalculatingOperation,
    TimePeriodSize,
    WeekdayName,
)

Number = Union[int, float]

_DELTA_KEYS: dict[TimePeriodSize, str] = {
    TimePeriodSize.SECOND: "seconds",
    TimePeriodSize.MINUTE: "minutes",
    TimePeriodSize.HOUR: "hours",
    TimePeriodSize.DAY: "days",
    TimePeriodSize.WEEK: "weeks",
    TimePeriodSize.MONTH: "months",
    TimePeriodSize.YEAR: "years",
}

_UNIT_SECONDS: dict[TimePeriodSize, int] = {
    TimePeriodSize.SECOND: 1,
    TimePeriodSize.MINUTE: int(SecondsConstant.MINUTE),
    TimePeriodSize.HOUR: int(SecondsConstant.HOUR),
}


def _check_unit(unit: object) -> None:
    if not isinstance(unit, TimePeriodSize):
        raise CalendarError(f"Unsupported unit {unit!r}.")


class Calendar:
    """
    Gregorian calendar arithmetic over ``datetime`` instants.

    Shifting by months or years clamps to the last day of the target month,
    so Jan 31 + 1 month is Feb 28 (Feb 29 in leap years).  A Calendar keeps no
    state besides its configuration and may be shared freely.
    """

    _WEEKEND: tuple[int, ...] = (WeekdayName.SATURDAY, WeekdayName.SUNDAY)

    def __init__(self, first_weekday: int = 0, tz: Optional[tzinfo] = None) -> None:
        if not 0 <= first_weekday <= 6:
            raise CalendarError(
                f"first_weekday must be in 0..6 (Monday..Sunday); got {first_weekday}."
            )
        self._first_weekday: int = int(first_weekday)
        self._tz: Optional[tzinfo] = tz

    # ── construction ─────────────────────────────────────────────────────

    def date(
        self,
        year: int = 1970,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> datetime:
        try:
            return datetime(year, month, day, hour, minute, second, tzinfo=self._tz)
        except ValueError as exc:
            raise CalendarError(str(exc)) from exc

    def now(self) -> datetime:
        return datetime.now(self._tz)

    # ── shifting ─────────────────────────────────────────────────────────

    def shift(
        self,
        instant: datetime,
        amount: int,
        unit: TimePeriodSize,
        operation: TimeCalculatingOperation = TimeCalculatingOperation.ADDING,
    ) -> datetime:
        _check_unit(unit)
        signed = operation.sign * int(amount)
        try:
            return instant + relativedelta(**{_DELTA_KEYS[unit]: signed})
        except (OverflowError, ValueError) as exc:
            raise CalendarError(
                f"Shifting {instant!r} by {signed} {unit.value}(s) leaves the "
                "representable date range."
            ) from exc

    def date_by_adding(self, amount: int, unit: TimePeriodSize, instant: datetime) -> datetime:
        return self.shift(instant, amount, unit, TimeCalculatingOperation.ADDING)

    def date_by_subtracting(self, amount: int, unit: TimePeriodSize, instant: datetime) -> datetime:
        return self.shift(instant, amount, unit, TimeCalculatingOperation.SUBTRACTING)

    # ── counting ─────────────────────────────────────────────────────────

    def counting(self, unit: TimePeriodSize, first: datetime, second: datetime) -> int:
        """Whole ``unit``s from ``second`` to ``first``; negative if ``first`` is earlier."""
        _check_unit(unit)
        if not unit.is_calendar_unit:
            return int(self.seconds(first, second) / _UNIT_SECONDS[unit])

        earliest, latest = (first, second) if first < second else (second, first)
        multiplier = -1 if first < second else 1

        if unit is TimePeriodSize.YEAR:
            value = relativedelta(latest, earliest).years
        elif unit is TimePeriodSize.MONTH:
            delta = relativedelta(latest, earliest)
            value = delta.months + 12 * delta.years
        elif unit is TimePeriodSize.WEEK:
            value = (latest - earliest).days // 7
        else:
            value = (latest - earliest).days
        return multiplier * value

    def years(self, first: datetime, second: datetime) -> int:
        return self.counting(TimePeriodSize.YEAR, first, second)

    def months(self, first: datetime, second: datetime) -> int:
        return self.counting(TimePeriodSize.MONTH, first, second)

    def weeks(self, first: datetime, second: datetime) -> int:
        return self.counting(TimePeriodSize.WEEK, first, second)

    def days(self, first: datetime, second: datetime) -> int:
        return self.counting(TimePeriodSize.DAY, first, second)

    def hours(self, first: datetime, second: datetime) -> float:
        return self.seconds(first, second) / SecondsConstant.HOUR

    def minutes(self, first: datetime, second: datetime) -> float:
        return self.seconds(first, second) / SecondsConstant.MINUTE

    def seconds(self, first: datetime, second: datetime) -> float:
        return (first - second).total_seconds()

    # ── one-sided distances ──────────────────────────────────────────────

    def later_than(self, first: datetime, second: datetime, unit: TimePeriodSize) -> Number:
        """How far ``first`` lies after ``second`` in ``unit``; 0 if it does not."""
        _check_unit(unit)
        if unit.is_calendar_unit:
            return max(self.counting(unit, first, second), 0)
        return max(self.seconds(first, second) / _UNIT_SECONDS[unit], 0.0)

    def earlier_than(self, first: datetime, second: datetime, unit: TimePeriodSize) -> Number:
        """How far ``first`` lies before ``second`` in ``unit``; 0 if it does not."""
        return self.later_than(second, first, unit)

    def distance(self, earlier: datetime, later: datetime, unit: TimePeriodSize) -> int:
        return int(self.later_than(later, earlier, unit))

    # ── components ───────────────────────────────────────────────────────

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)

    def components(self, instant: datetime) -> DateComponents:
        return components_of(instant, self._first_weekday)

    def component(self, instant: datetime, component: DateComponent) -> int:
        return self.components(instant).get(component)

    def weekday_name(self, instant: datetime) -> WeekdayName:
        return WeekdayName(instant.weekday())

    def days_in_month(self, instant: datetime) -> int:
        last = instant.replace(day=1) + relativedelta(months=1, days=-1)
        return last.day

    def days_in_year(self, instant: datetime) -> int:
        return 366 if self.is_in_leap_year(instant) else 365

    def is_in_leap_year(self, instant: datetime) -> bool:
        return self.is_leap_year(instant.year)

    def is_weekend(self, instant: datetime) -> bool:
        return instant.weekday() in self._WEEKEND

    def is_same_day(self, first: datetime, second: datetime) -> bool:
        return first.date() == second.date()

    def is_today(self, instant: datetime) -> bool:
        return self.is_same_day(instant, self.now())

    def is_tomorrow(self, instant: datetime) -> bool:
        return self.is_same_day(instant, self.date_by_adding(1, TimePeriodSize.DAY, self.now()))

    def is_yesterday(self, instant: datetime) -> bool:
        return self.is_same_day(instant, self.date_by_subtracting(1, TimePeriodSize.DAY, self.now()))

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def first_weekday(self) -> int:
        return self._first_weekday

    @property
    def tz(self) -> Optional[tzinfo]:
        return self._tz

    def __repr__(self) -> str:
        return f"Calendar(first_weekday={self._first_weekday}, tz={self._tz!r})"
