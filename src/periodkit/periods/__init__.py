"""
periodkit.periods
~~~~~~~~~~~~~~~~~

Time-interval algebra.  A TimePeriod is a pair of instants with relationship
queries (contains, overlaps, intersects, gap, 13-way relation); collections
and chains own sequences of periods and keep their aggregate bounds current.

Basic usage::

    from datetime import datetime
    from periodkit.calendar import TimePeriodSize
    from periodkit.periods import TimePeriod, TimePeriodChain

    week = TimePeriod.starting_at(TimePeriodSize.WEEK, datetime(2024, 1, 1))
    day = TimePeriod.starting_at(TimePeriodSize.DAY, datetime(2024, 1, 3))
    week.relation_to(day)            # → TimePeriodRelation.ENCLOSING

    chain = TimePeriodChain()
    chain.add(week)
    chain.add(day)                   # re-anchored to 2024-01-08 .. 2024-01-09
    chain.end_date                   # → datetime(2024, 1, 9)

Public API
----------
TimePeriod            A pair of boundary instants.
TimePeriodRelation    Result of TimePeriod.relation_to.
TimePeriodInterval    Open / closed boundary handling for contains_date.
TimePeriodAnchor      Fixed boundary for lengthen / shorten.
TimePeriodGroup       Base class shared by collections and chains.
TimePeriodCollection  Unordered bag of periods.
TimePeriodChain       Contiguous sequence of periods.
"""

from __future__ import annotations

from periodkit.periods.chain import TimePeriodChain
from periodkit.periods.collection import TimePeriodCollection
from periodkit.periods.group import TimePeriodGroup
from periodkit.periods.period import (
    TimePeriod,
    TimePeriodAnchor,
    TimePeriodInterval,
    TimePeriodRelation,
)

__all__ = [
    "TimePeriod",
    "TimePeriodAnchor",
    "TimePeriodChain",
    "TimePeriodCollection",
    "TimePeriodGroup",
    "TimePeriodInterval",
    "TimePeriodRelation",
]
