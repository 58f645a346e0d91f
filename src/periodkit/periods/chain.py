from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from periodkit.calendar import Calendar, TimePeriodSize

from .group import TimePeriodGroup
from .period import TimePeriod

logger = logging.getLogger(__name__)


class TimePeriodChain(TimePeriodGroup):
    """
    Contiguous sequence of TimePeriods.

    For every ``i``, ``chain[i].end_date == chain[i + 1].start_date``.  Periods
    entering the chain are re-anchored (keeping their duration in whole
    seconds) and structural edits shift the periods after the edit point, so
    an insert or remove at index ``k`` touches every period from ``k`` on.
    """

    def __init__(self, calendar: Optional[Calendar] = None) -> None:
        super().__init__(calendar)

    @property
    def first(self) -> Optional[TimePeriod]:
        return self._periods[0] if self._periods else None

    @property
    def last(self) -> Optional[TimePeriod]:
        return self._periods[-1] if self._periods else None

    # ── mutation ─────────────────────────────────────────────────────────

    def add(self, period: TimePeriod) -> None:
        """Append ``period``, moved to start where the chain currently ends."""
        if self._periods:
            period = self._starting_at(self._periods[-1].end_date, self._seconds_of(period))
        self._periods.append(period)
        self._update_bounds()

    def insert(self, period: TimePeriod, index: int) -> None:
        """
        Insert ``period`` at ``index``; indices outside ``[0, count]`` are ignored.

        At index 0 the new period is placed to end where the chain starts.
        Anywhere else it starts at its predecessor's end and every period from
        ``index`` on moves later by its duration.
        """
        count = len(self._periods)
        if not 0 <= index <= count:
            logger.debug("insert ignored: index %d outside [0, %d]", index, count)
            return
        if count == 0:
            self.add(period)
            return

        seconds = self._seconds_of(period)
        if index == 0:
            modified = TimePeriod.ending_at(
                TimePeriodSize.SECOND, self._periods[0].start_date, seconds, self._calendar
            )
        else:
            for existing in self._periods[index:]:
                existing.shift_later(TimePeriodSize.SECOND, seconds)
            modified = self._starting_at(self._periods[index - 1].end_date, seconds)
            logger.debug("shifted %d period(s) later by %ds", count - index, seconds)

        self._periods.insert(index, modified)
        self._update_bounds()

    def remove(self, index: int) -> Optional[TimePeriod]:
        """Remove the period at ``index`` and close the gap it leaves behind."""
        if not 0 <= index < len(self._periods):
            logger.debug("remove ignored: index %d outside [0, %d)", index, len(self._periods))
            return None
        period = self._periods.pop(index)
        self._shift_earlier_from(index, self._seconds_of(period))
        self._update_bounds()
        return period

    def remove_latest_time_period(self) -> Optional[TimePeriod]:
        if not self._periods:
            return None
        period = self._periods.pop()
        self._update_bounds()
        return period

    def remove_earliest_time_period(self) -> Optional[TimePeriod]:
        """
        Remove the first period.

        The remaining periods all move earlier by the removed duration, so the
        chain keeps its start date while those periods move in absolute time.
        """
        if not self._periods:
            return None
        period = self._periods.pop(0)
        self._shift_earlier_from(0, self._seconds_of(period))
        self._update_bounds()
        return period

    # ── comparison / copy ────────────────────────────────────────────────

    def equals(self, chain: TimePeriodChain) -> bool:
        if not self.has_same_characteristics_as(chain):
            return False
        return all(mine.equals(theirs) for mine, theirs in zip(self._periods, chain))

    def copy(self) -> TimePeriodChain:
        chain = TimePeriodChain(self._calendar)
        for period in self._periods:
            chain.add(period.copy())
        return chain

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePeriodChain):
            return NotImplemented
        return self.equals(other)

    # ── helpers ──────────────────────────────────────────────────────────

    @staticmethod
    def _seconds_of(period: TimePeriod) -> int:
        return int(period.duration_in_seconds)

    def _starting_at(self, start: datetime, seconds: int) -> TimePeriod:
        return TimePeriod.starting_at(TimePeriodSize.SECOND, start, seconds, self._calendar)

    def _shift_earlier_from(self, index: int, seconds: int) -> None:
        for period in self._periods[index:]:
            period.shift_earlier(TimePeriodSize.SECOND, seconds)
        logger.debug(
            "shifted %d period(s) earlier by %ds", len(self._periods) - index, seconds
        )

    def _update_bounds(self) -> None:
        if not self._periods:
            self._start_date = None
            self._end_date = None
            return
        self._start_date = self._periods[0].start_date
        self._end_date = self._periods[-1].end_date

    def __repr__(self) -> str:
        return (
            f"TimePeriodChain(count={len(self._periods)}, "
            f"start_date={self._start_date!r}, "
            f"end_date={self._end_date!r})"
        )
