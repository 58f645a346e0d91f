from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterator, Optional

from periodkit.calendar import Calendar, TimePeriodSize

from .period import TimePeriod


class TimePeriodGroup(ABC):
    """
    Shared behaviour of an ordered sequence of TimePeriods with overall bounds.

    Subclasses own ``_periods`` and decide how the aggregate ``start_date`` /
    ``end_date`` are derived by implementing ``_update_bounds``.  Every
    mutation routed through this base refreshes the bounds afterwards.
    """

    def __init__(self, calendar: Optional[Calendar] = None) -> None:
        self._calendar: Calendar = calendar if calendar is not None else Calendar()
        self._periods: list[TimePeriod] = []
        self._start_date: Optional[datetime] = None
        self._end_date: Optional[datetime] = None

    @abstractmethod
    def _update_bounds(self) -> None:
        ...

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def periods(self) -> list[TimePeriod]:
        # A shallow copy: structural edits must go through the group.
        return list(self._periods)

    @property
    def start_date(self) -> Optional[datetime]:
        return self._start_date

    @property
    def end_date(self) -> Optional[datetime]:
        return self._end_date

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    @property
    def count(self) -> int:
        return len(self._periods)

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[TimePeriod]:
        return iter(self._periods)

    def __getitem__(self, index: int) -> TimePeriod:
        return self._periods[index]

    def __setitem__(self, index: int, period: TimePeriod) -> None:
        self._periods[index] = period
        self._update_bounds()

    # ── durations ────────────────────────────────────────────────────────

    def duration_in(self, size: TimePeriodSize) -> int:
        if self._start_date is None or self._end_date is None:
            return 0
        return self._calendar.distance(self._start_date, self._end_date, size)

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
    def duration_in_hours(self) -> int:
        return self.duration_in(TimePeriodSize.HOUR)

    @property
    def duration_in_minutes(self) -> int:
        return self.duration_in(TimePeriodSize.MINUTE)

    @property
    def duration_in_seconds(self) -> int:
        return self.duration_in(TimePeriodSize.SECOND)

    # ── shifting ─────────────────────────────────────────────────────────

    def shift_later(self, size: TimePeriodSize, amount: int = 1) -> None:
        for period in self._periods:
            period.shift_later(size, amount)
        self._update_bounds()

    def shift_earlier(self, size: TimePeriodSize, amount: int = 1) -> None:
        for period in self._periods:
            period.shift_earlier(size, amount)
        self._update_bounds()

    # ── comparison ───────────────────────────────────────────────────────

    def has_same_characteristics_as(self, group: TimePeriodGroup) -> bool:
        """Same number of periods and, when non-empty, the same overall bounds."""
        if group.count != self.count:
            return False
        if group.count == 0:
            return True
        return group.start_date == self._start_date and group.end_date == self._end_date

    __hash__ = None  # type: ignore[assignment]
