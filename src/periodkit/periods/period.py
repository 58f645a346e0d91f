from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from periodkit.calendar import Calendar, TimeCalculatingOperation, TimePeriodSize


class TimePeriodRelation(Enum):
    AFTER = "after"
    START_TOUCHING = "start_touching"
    START_INSIDE = "start_inside"
    INSIDE_START_TOUCHING = "inside_start_touching"
    ENCLOSING_START_TOUCHING = "enclosing_start_touching"
    ENCLOSING = "enclosing"
    ENCLOSING_END_TOUCHING = "enclosing_end_touching"
    EXACT_MATCH = "exact_match"
    INSIDE = "inside"
    INSIDE_END_TOUCHING = "inside_end_touching"
    END_INSIDE = "end_inside"
    END_TOUCHING = "end_touching"
    BEFORE = "before"
    NONE = "none"  # one of the periods is a moment or inverted


class TimePeriodInterval(Enum):
    """Whether boundary instants count as inside a period."""

    OPEN = "open"
    CLOSED = "closed"


class TimePeriodAnchor(Enum):
    """The boundary held fixed while lengthening or shortening."""

    START = "start"
    CENTER = "center"
    END = "end"


class TimePeriod:
    """
    A pair of boundary instants sharing a Calendar.

    Bounds are not validated: a period whose start equals its end is a
    "moment", and inverted periods (start after end) are accepted and report
    zero durations.  Only the shift / lengthen / shorten methods move the
    bounds after construction.
    """

    def __init__(
        self,
        start_date: datetime,
        end_date: datetime,
        calendar: Optional[Calendar] = None,
    ) -> None:
        self.start_date: datetime = start_date
        self.end_date: datetime = end_date
        self._calendar: Calendar = calendar if calendar is not None else Calendar()

    @classmethod
    def starting_at(
        cls,
        size: TimePeriodSize,
        date: datetime,
        amount: int = 1,
        calendar: Optional[Calendar] = None,
    ) -> TimePeriod:
        """``amount`` x ``size`` long period beginning at ``date``."""
        cal = calendar if calendar is not None else Calendar()
        return cls(date, cal.date_by_adding(amount, size, date), cal)

    @classmethod
    def ending_at(
        cls,
        size: TimePeriodSize,
        date: datetime,
        amount: int = 1,
        calendar: Optional[Calendar] = None,
    ) -> TimePeriod:
        """``amount`` x ``size`` long period finishing at ``date``."""
        cal = calendar if calendar is not None else Calendar()
        return cls(cal.date_by_subtracting(amount, size, date), date, cal)

    @classmethod
    def all_time(cls, calendar: Optional[Calendar] = None) -> TimePeriod:
        return cls(datetime.min, datetime.max, calendar)

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    def is_moment(self) -> bool:
        return self.start_date == self.end_date

    # ── durations ────────────────────────────────────────────────────────

    def duration_in(self, size: TimePeriodSize) -> int:
        return self._calendar.distance(self.start_date, self.end_date, size)

    @property
    def duration_in_years(self) -> int:
        return self.duration_in(TimePeriodSize.YEAR)

    @property
    def duration_in_months(self) -> int:
        return self.duration_in(TimePeriodSize.MONTH)

    @property
    def duration_in_weeks(self) -> int:
        return self.duration_in(TimePeriodSize.WEEK)

    @property
    def duration_in_days(self) -> int:
        return self.duration_in(TimePeriodSize.DAY)

    @property
    def duration_in_hours(self) -> float:
        return float(self._calendar.later_than(self.end_date, self.start_date, TimePeriodSize.HOUR))

    @property
    def duration_in_minutes(self) -> float:
        return float(self._calendar.later_than(self.end_date, self.start_date, TimePeriodSize.MINUTE))

    @property
    def duration_in_seconds(self) -> float:
        return float(self._calendar.later_than(self.end_date, self.start_date, TimePeriodSize.SECOND))

    # ── relationships ────────────────────────────────────────────────────

    def equals(self, period: TimePeriod) -> bool:
        return self.start_date == period.start_date and self.end_date == period.end_date

    def is_inside(self, period: TimePeriod) -> bool:
        return period.start_date <= self.start_date and period.end_date >= self.end_date

    def contains(self, period: TimePeriod) -> bool:
        return self.start_date <= period.start_date and self.end_date >= period.end_date

    def overlaps_with(self, period: TimePeriod) -> bool:
        """Shared time excluding a single shared boundary instant."""
        return (
            (period.start_date < self.start_date and period.end_date > self.start_date)
            or (period.start_date >= self.start_date and period.end_date <= self.end_date)
            or (period.start_date < self.end_date and period.end_date > self.end_date)
        )

    def intersects(self, period: TimePeriod) -> bool:
        """Shared time including a single shared boundary instant."""
        return (
            (period.start_date < self.start_date and period.end_date >= self.start_date)
            or (period.start_date >= self.start_date and period.end_date <= self.end_date)
            or (period.start_date <= self.end_date and period.end_date > self.end_date)
        )

    def relation_to(self, period: TimePeriod) -> TimePeriodRelation:
        """
        Classify ``period`` against this one.

        The checks run in a fixed order and the first match wins, so e.g. a
        candidate ending exactly at our start is START_TOUCHING even though it
        also lies entirely before us.
        """
        if not (self.start_date < self.end_date and period.start_date < period.end_date):
            return TimePeriodRelation.NONE

        start, end = self.start_date, self.end_date
        other_start, other_end = period.start_date, period.end_date

        if other_end < start:
            return TimePeriodRelation.AFTER
        if other_end == start:
            return TimePeriodRelation.START_TOUCHING
        if other_start < start and other_end < end:
            return TimePeriodRelation.START_INSIDE
        if other_start == start and other_end > end:
            return TimePeriodRelation.INSIDE_START_TOUCHING
        if other_start == start and other_end < end:
            return TimePeriodRelation.ENCLOSING_START_TOUCHING
        if other_start > start and other_end < end:
            return TimePeriodRelation.ENCLOSING
        if other_start > start and other_end == end:
            return TimePeriodRelation.ENCLOSING_END_TOUCHING
        if other_start == start and other_end == end:
            return TimePeriodRelation.EXACT_MATCH
        if other_start < start and other_end > end:
            return TimePeriodRelation.INSIDE
        if other_start < start and other_end == end:
            return TimePeriodRelation.INSIDE_END_TOUCHING
        if other_start < end and other_end > end:
            return TimePeriodRelation.END_INSIDE
        if other_start == end and other_end > end:
            return TimePeriodRelation.END_TOUCHING
        if other_start > end:
            return TimePeriodRelation.BEFORE
        return TimePeriodRelation.NONE

    def gap_between(self, period: TimePeriod) -> float:
        """Seconds separating the two periods; 0.0 when they intersect."""
        if self.end_date < period.start_date:
            return abs((period.start_date - self.end_date).total_seconds())
        if period.end_date < self.start_date:
            return abs((self.start_date - period.end_date).total_seconds())
        return 0.0

    def contains_date(
        self,
        date: datetime,
        interval: TimePeriodInterval = TimePeriodInterval.CLOSED,
    ) -> bool:
        if interval is TimePeriodInterval.OPEN:
            return self.start_date < date < self.end_date
        return self.start_date <= date <= self.end_date

    # ── mutation ─────────────────────────────────────────────────────────

    def shift_earlier(self, size: TimePeriodSize, amount: int = 1) -> None:
        self.start_date = self._move(self.start_date, size, amount, _SUB)
        self.end_date = self._move(self.end_date, size, amount, _SUB)

    def shift_later(self, size: TimePeriodSize, amount: int = 1) -> None:
        self.start_date = self._move(self.start_date, size, amount, _ADD)
        self.end_date = self._move(self.end_date, size, amount, _ADD)

    def lengthen(self, anchor: TimePeriodAnchor, size: TimePeriodSize, amount: int = 1) -> None:
        if anchor is TimePeriodAnchor.START:
            self.end_date = self._move(self.end_date, size, amount, _ADD)
        elif anchor is TimePeriodAnchor.CENTER:
            half = int(amount / 2)
            self.start_date = self._move(self.start_date, size, half, _SUB)
            self.end_date = self._move(self.end_date, size, half, _ADD)
        else:
            self.start_date = self._move(self.start_date, size, amount, _SUB)

    def shorten(self, anchor: TimePeriodAnchor, size: TimePeriodSize, amount: int = 1) -> None:
        if anchor is TimePeriodAnchor.START:
            self.end_date = self._move(self.end_date, size, amount, _SUB)
        elif anchor is TimePeriodAnchor.CENTER:
            half = int(amount / 2)
            self.start_date = self._move(self.start_date, size, half, _ADD)
            self.end_date = self._move(self.end_date, size, half, _SUB)
        else:
            self.start_date = self._move(self.start_date, size, amount, _ADD)

    def _move(
        self,
        date: datetime,
        size: TimePeriodSize,
        amount: int,
        operation: TimeCalculatingOperation,
    ) -> datetime:
        return self._calendar.shift(date, amount, size, operation)

    def copy(self) -> TimePeriod:
        # datetime values are immutable, so sharing them is a value copy.
        return TimePeriod(self.start_date, self.end_date, self._calendar)

    # ── comparison / repr ────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TimePeriod(start_date={self.start_date!r}, end_date={self.end_date!r})"


_ADD = TimeCalculatingOperation.ADDING
_SUB = TimeCalculatingOperation.SUBTRACTING
