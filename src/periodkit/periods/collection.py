from __future__ import annotations

import logging
from datetime import datetime
from operator import attrgetter
from typing import Callable, Optional

import numpy as np

from periodkit.calendar import Calendar

from .group import TimePeriodGroup
from .period import TimePeriod, TimePeriodInterval

logger = logging.getLogger(__name__)


class TimePeriodCollection(TimePeriodGroup):
    """
    Unordered bag of TimePeriods.

    ``start_date`` / ``end_date`` are the earliest start and latest end of all
    periods, rescanned after every mutation, and ``None`` when empty.
    """

    def __init__(self, calendar: Optional[Calendar] = None) -> None:
        super().__init__(calendar)

    # ── mutation ─────────────────────────────────────────────────────────

    def add(self, period: TimePeriod) -> None:
        self._periods.append(period)
        self._update_bounds()

    def insert(self, period: TimePeriod, index: int) -> None:
        """Insert at ``index``; indices outside ``[0, count]`` are ignored."""
        if not 0 <= index <= len(self._periods):
            logger.debug("insert ignored: index %d outside [0, %d]", index, len(self._periods))
            return
        self._periods.insert(index, period)
        self._update_bounds()

    def remove(self, index: int) -> Optional[TimePeriod]:
        if not 0 <= index < len(self._periods):
            logger.debug("remove ignored: index %d outside [0, %d)", index, len(self._periods))
            return None
        period = self._periods.pop(index)
        self._update_bounds()
        return period

    # ── sorting ──────────────────────────────────────────────────────────

    def sort_by_start_ascending(self) -> None:
        self._sort_on("start_date", descending=False)

    def sort_by_start_descending(self) -> None:
        self._sort_on("start_date", descending=True)

    def sort_by_end_ascending(self) -> None:
        self._sort_on("end_date", descending=False)

    def sort_by_end_descending(self) -> None:
        self._sort_on("end_date", descending=True)

    def sort_by_duration_ascending(self) -> None:
        self._sort_by(self._durations(), descending=False)

    def sort_by_duration_descending(self) -> None:
        self._sort_by(self._durations(), descending=True)

    def _sort_on(self, attr: str, descending: bool) -> None:
        # Comparison only, so any totally ordered instant type sorts.
        self._periods = sorted(self._periods, key=attrgetter(attr), reverse=descending)
        self._update_bounds()

    def _durations(self) -> np.ndarray:
        return np.fromiter(
            (p.duration_in_seconds for p in self._periods),
            dtype=np.float64,
            count=len(self._periods),
        )

    def _sort_by(self, keys: np.ndarray, descending: bool) -> None:
        order = np.argsort(-keys if descending else keys, kind="stable")
        self._periods = [self._periods[i] for i in order]
        self._update_bounds()

    # ── queries ──────────────────────────────────────────────────────────

    def periods_inside(self, period: TimePeriod) -> TimePeriodCollection:
        return self._periods_matching(lambda p: p.is_inside(period))

    def periods_intersected_by_date(self, date: datetime) -> TimePeriodCollection:
        return self._periods_matching(
            lambda p: p.contains_date(date, TimePeriodInterval.CLOSED)
        )

    def periods_intersected_by_period(self, period: TimePeriod) -> TimePeriodCollection:
        return self._periods_matching(lambda p: p.intersects(period))

    def periods_overlapped_by_period(self, period: TimePeriod) -> TimePeriodCollection:
        """Periods sharing more than a single boundary instant with ``period``."""
        return self._periods_matching(lambda p: p.overlaps_with(period))

    def _periods_matching(self, predicate: Callable[[TimePeriod], bool]) -> TimePeriodCollection:
        collection = TimePeriodCollection(self._calendar)
        for period in self._periods:
            if predicate(period):
                collection.add(period.copy())
        return collection

    # ── comparison / copy ────────────────────────────────────────────────

    def equals(self, collection: TimePeriodCollection, consider_order: bool = False) -> bool:
        """
        Compare against ``collection``.

        With ``consider_order`` the periods must match position by position.
        Without it every period here needs some equal period in ``collection``;
        the reverse direction is not checked, so duplicates may make the
        comparison asymmetric.
        """
        if not self.has_same_characteristics_as(collection):
            return False
        if consider_order:
            return all(mine.equals(theirs) for mine, theirs in zip(self._periods, collection))
        return all(
            any(mine.equals(theirs) for theirs in collection) for mine in self._periods
        )

    def copy(self) -> TimePeriodCollection:
        collection = TimePeriodCollection(self._calendar)
        for period in self._periods:
            collection.add(period.copy())
        return collection

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePeriodCollection):
            return NotImplemented
        return self.equals(other)

    # ── bounds ───────────────────────────────────────────────────────────

    def _update_bounds(self) -> None:
        if not self._periods:
            self._start_date = None
            self._end_date = None
            return
        start = self._periods[0].start_date
        end = self._periods[0].end_date
        for period in self._periods[1:]:
            if period.start_date < start:
                start = period.start_date
            if period.end_date > end:
                end = period.end_date
        self._start_date = start
        self._end_date = end

    def __repr__(self) -> str:
        return (
            f"TimePeriodCollection(count={len(self._periods)}, "
            f"start_date={self._start_date!r}, "
            f"end_date={self._end_date!r})"
        )
