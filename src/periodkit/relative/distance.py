from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from periodkit.calendar import Calendar, TimePeriodSize

Number = Union[int, float]


def ago(
    date: datetime,
    unit: TimePeriodSize,
    now: Optional[datetime] = None,
    calendar: Optional[Calendar] = None,
) -> Number:
    """
    How many ``unit``s ``date`` lies before ``now``; 0 for dates not in the past.

    Calendar units (day and up) give an int, hours / minutes / seconds give a
    fractional float.
    """
    cal = calendar if calendar is not None else Calendar()
    reference = now if now is not None else cal.now()
    return cal.earlier_than(date, reference, unit)


def until(
    date: datetime,
    unit: TimePeriodSize,
    now: Optional[datetime] = None,
    calendar: Optional[Calendar] = None,
) -> Number:
    """How many ``unit``s remain until ``date``; 0 for dates not in the future."""
    cal = calendar if calendar is not None else Calendar()
    reference = now if now is not None else cal.now()
    return cal.later_than(date, reference, unit)
