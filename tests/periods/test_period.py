"""
tests/periods/test_period.py

Covers:
  - Construction (explicit bounds, starting_at / ending_at, all_time)
  - Moments and inverted periods
  - Durations in every unit
  - Containment, overlap and intersection predicates
  - The 13-way relation classification and its precedence
  - Gaps and open / closed date containment
  - Shifting, lengthening and shortening
  - Copy and equality
"""

from datetime import datetime, timedelta

import pytest

from periodkit.calendar import Calendar, CalendarError, TimePeriodSize
from periodkit.periods import (
    TimePeriod,
    TimePeriodAnchor,
    TimePeriodInterval,
    TimePeriodRelation,
)

BASE = datetime(2024, 1, 1)


# ── Helpers ───────────────────────────────────────────────────────────────────

def at(seconds):
    return BASE + timedelta(seconds=seconds)


def span(start, end):
    """Period between two offsets (in seconds) from BASE."""
    return TimePeriod(at(start), at(end))


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def cal():
    return Calendar()


@pytest.fixture
def ref():
    """Reference period [10, 20)."""
    return span(10, 20)


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_explicit_bounds(self, cal):
        p = TimePeriod(at(0), at(10), cal)
        assert p.start_date == at(0)
        assert p.end_date == at(10)
        assert p.calendar is cal

    def test_default_calendar(self):
        assert isinstance(span(0, 1).calendar, Calendar)

    def test_starting_at(self, cal):
        p = TimePeriod.starting_at(TimePeriodSize.DAY, BASE, amount=3, calendar=cal)
        assert p.start_date == BASE
        assert p.end_date == datetime(2024, 1, 4)
        assert p.calendar is cal

    def test_starting_at_default_amount(self):
        p = TimePeriod.starting_at(TimePeriodSize.WEEK, BASE)
        assert p.end_date == datetime(2024, 1, 8)

    def test_ending_at(self):
        p = TimePeriod.ending_at(TimePeriodSize.HOUR, datetime(2024, 1, 1, 12), amount=2)
        assert p.start_date == datetime(2024, 1, 1, 10)
        assert p.end_date == datetime(2024, 1, 1, 12)

    def test_all_time(self):
        p = TimePeriod.all_time()
        assert p.start_date == datetime.min
        assert p.end_date == datetime.max
        assert p.contains(span(0, 10))

    def test_inverted_bounds_are_accepted(self):
        p = span(20, 10)
        assert p.start_date > p.end_date


# ── Moments ───────────────────────────────────────────────────────────────────

class TestMoment:

    def test_equal_bounds_is_moment(self):
        assert span(5, 5).is_moment()

    def test_non_degenerate_is_not_moment(self):
        assert not span(5, 6).is_moment()
        assert not span(6, 5).is_moment()


# ── Durations ─────────────────────────────────────────────────────────────────

class TestDurations:

    def test_two_years(self):
        p = TimePeriod.starting_at(TimePeriodSize.YEAR, BASE, amount=2)
        assert p.duration_in_years == 2
        assert p.duration_in_months == 24
        assert p.duration_in_days == 731
        assert p.duration_in_weeks == 104

    def test_fractional_sub_day_units(self):
        p = span(0, 5400)
        assert p.duration_in_hours == pytest.approx(1.5)
        assert p.duration_in_minutes == pytest.approx(90.0)
        assert p.duration_in_seconds == pytest.approx(5400.0)

    @pytest.mark.parametrize(
        "size, expected",
        [
            (TimePeriodSize.SECOND, 259200),
            (TimePeriodSize.MINUTE, 4320),
            (TimePeriodSize.HOUR, 72),
            (TimePeriodSize.DAY, 3),
            (TimePeriodSize.WEEK, 0),
            (TimePeriodSize.MONTH, 0),
            (TimePeriodSize.YEAR, 0),
        ],
    )
    def test_duration_in(self, size, expected):
        p = TimePeriod.starting_at(TimePeriodSize.DAY, BASE, amount=3)
        assert p.duration_in(size) == expected

    def test_duration_in_truncates(self):
        assert span(0, 5400).duration_in(TimePeriodSize.HOUR) == 1

    def test_inverted_period_has_zero_duration(self):
        p = span(20, 10)
        assert p.duration_in_seconds == 0.0
        for size in TimePeriodSize:
            assert p.duration_in(size) == 0

    def test_moment_has_zero_duration(self):
        assert span(3, 3).duration_in(TimePeriodSize.SECOND) == 0

    def test_duration_in_unsupported_unit_raises(self):
        with pytest.raises(CalendarError):
            span(0, 10).duration_in("second")


# ── Containment / overlap ─────────────────────────────────────────────────────

class TestContainment:

    def test_is_inside_and_contains(self, ref):
        inner = span(12, 18)
        assert inner.is_inside(ref)
        assert ref.contains(inner)
        assert not ref.is_inside(inner)
        assert not inner.contains(ref)

    def test_exact_match_is_inside_both_ways(self, ref):
        same = span(10, 20)
        assert same.is_inside(ref) and ref.is_inside(same)
        assert same.contains(ref) and ref.contains(same)

    @pytest.mark.parametrize(
        "other, overlaps, intersects",
        [
            ((0, 10), False, True),
            ((20, 30), False, True),
            ((5, 15), True, True),
            ((15, 25), True, True),
            ((12, 18), True, True),
            ((0, 30), True, True),
            ((0, 5), False, False),
            ((25, 30), False, False),
        ],
    )
    def test_overlaps_vs_intersects(self, ref, other, overlaps, intersects):
        candidate = span(*other)
        assert ref.overlaps_with(candidate) is overlaps
        assert ref.intersects(candidate) is intersects

    @pytest.mark.parametrize(
        "offset, open_, closed",
        [(10, False, True), (20, False, True), (15, True, True), (5, False, False), (25, False, False)],
    )
    def test_contains_date(self, ref, offset, open_, closed):
        assert ref.contains_date(at(offset), TimePeriodInterval.OPEN) is open_
        assert ref.contains_date(at(offset), TimePeriodInterval.CLOSED) is closed

    def test_contains_date_defaults_to_closed(self, ref):
        assert ref.contains_date(at(10))


# ── Relations ─────────────────────────────────────────────────────────────────

class TestRelation:

    @pytest.mark.parametrize(
        "other, expected",
        [
            ((0, 5), TimePeriodRelation.AFTER),
            ((0, 10), TimePeriodRelation.START_TOUCHING),
            ((5, 15), TimePeriodRelation.START_INSIDE),
            ((10, 25), TimePeriodRelation.INSIDE_START_TOUCHING),
            ((10, 15), TimePeriodRelation.ENCLOSING_START_TOUCHING),
            ((12, 18), TimePeriodRelation.ENCLOSING),
            ((15, 20), TimePeriodRelation.ENCLOSING_END_TOUCHING),
            ((10, 20), TimePeriodRelation.EXACT_MATCH),
            ((5, 25), TimePeriodRelation.INSIDE),
            ((5, 20), TimePeriodRelation.INSIDE_END_TOUCHING),
            ((15, 25), TimePeriodRelation.END_INSIDE),
            ((20, 30), TimePeriodRelation.END_TOUCHING),
            ((25, 30), TimePeriodRelation.BEFORE),
        ],
    )
    def test_every_relation(self, ref, other, expected):
        assert ref.relation_to(span(*other)) is expected

    def test_relation_to_self_is_exact_match(self, ref):
        assert ref.relation_to(ref) is TimePeriodRelation.EXACT_MATCH

    def test_moment_relation_to_self_is_none(self):
        m = span(5, 5)
        assert m.relation_to(m) is TimePeriodRelation.NONE

    def test_degenerate_candidate_is_none(self, ref):
        assert ref.relation_to(span(15, 15)) is TimePeriodRelation.NONE

    def test_inverted_reference_is_none(self):
        assert span(20, 10).relation_to(span(0, 5)) is TimePeriodRelation.NONE

    def test_inverted_candidate_is_none(self, ref):
        assert ref.relation_to(span(30, 25)) is TimePeriodRelation.NONE

    def test_every_state_is_reachable(self, ref):
        seen = {
            ref.relation_to(span(a, b))
            for a in range(0, 31)
            for b in range(0, 31)
        }
        assert seen == set(TimePeriodRelation)


# ── Gaps ──────────────────────────────────────────────────────────────────────

class TestGap:

    def test_gap_between_disjoint(self):
        assert span(0, 10).gap_between(span(20, 30)) == 10.0

    def test_gap_is_symmetric(self):
        assert span(20, 30).gap_between(span(0, 10)) == 10.0

    def test_touching_periods_have_no_gap(self):
        assert span(0, 10).gap_between(span(10, 20)) == 0.0

    def test_overlapping_periods_have_no_gap(self):
        assert span(0, 15).gap_between(span(10, 20)) == 0.0


# ── Mutation ──────────────────────────────────────────────────────────────────

class TestShift:

    def test_shift_later(self):
        p = TimePeriod(datetime(2024, 1, 1), datetime(2024, 1, 5))
        p.shift_later(TimePeriodSize.DAY, 2)
        assert (p.start_date, p.end_date) == (datetime(2024, 1, 3), datetime(2024, 1, 7))

    def test_shift_earlier_clamps_month_end(self):
        p = TimePeriod(datetime(2024, 3, 31), datetime(2024, 4, 30))
        p.shift_earlier(TimePeriodSize.MONTH)
        assert (p.start_date, p.end_date) == (datetime(2024, 2, 29), datetime(2024, 3, 30))

    def test_shift_preserves_second_duration(self):
        p = span(0, 10)
        p.shift_later(TimePeriodSize.SECOND, 100)
        assert p.equals(span(100, 110))


class TestLengthenShorten:

    H = 3600

    def test_lengthen_anchor_start(self):
        p = span(0, self.H)
        p.lengthen(TimePeriodAnchor.START, TimePeriodSize.HOUR, 2)
        assert p.equals(span(0, 3 * self.H))

    def test_lengthen_anchor_end(self):
        p = span(3 * self.H, 4 * self.H)
        p.lengthen(TimePeriodAnchor.END, TimePeriodSize.HOUR, 2)
        assert p.equals(span(self.H, 4 * self.H))

    def test_lengthen_anchor_center_rounds_half_toward_zero(self):
        p = span(10 * self.H, 12 * self.H)
        p.lengthen(TimePeriodAnchor.CENTER, TimePeriodSize.HOUR, 3)
        assert p.equals(span(9 * self.H, 13 * self.H))

    def test_shorten_anchor_start(self):
        p = span(0, 4 * self.H)
        p.shorten(TimePeriodAnchor.START, TimePeriodSize.HOUR)
        assert p.equals(span(0, 3 * self.H))

    def test_shorten_anchor_end(self):
        p = span(0, 4 * self.H)
        p.shorten(TimePeriodAnchor.END, TimePeriodSize.HOUR)
        assert p.equals(span(self.H, 4 * self.H))

    def test_shorten_anchor_center(self):
        p = span(0, 10 * self.H)
        p.shorten(TimePeriodAnchor.CENTER, TimePeriodSize.HOUR, 4)
        assert p.equals(span(2 * self.H, 8 * self.H))

    def test_shorten_past_start_inverts(self):
        p = span(0, self.H)
        p.shorten(TimePeriodAnchor.START, TimePeriodSize.HOUR, 2)
        assert p.start_date > p.end_date
        assert p.duration_in_seconds == 0.0


# ── Copy / equality ───────────────────────────────────────────────────────────

class TestCopyAndEquality:

    def test_copy_is_equal_and_independent(self, cal):
        p = TimePeriod(at(0), at(10), cal)
        c = p.copy()
        assert c == p
        assert c is not p
        assert c.calendar is cal
        c.shift_later(TimePeriodSize.SECOND, 5)
        assert p.equals(span(0, 10))

    def test_equality_operator(self):
        assert span(0, 10) == span(0, 10)
        assert span(0, 10) != span(0, 11)

    def test_not_equal_to_other_types(self):
        assert span(0, 10) != (at(0), at(10))

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(span(0, 10))

    def test_repr(self):
        assert repr(span(0, 0)).startswith("TimePeriod(start_date=")
