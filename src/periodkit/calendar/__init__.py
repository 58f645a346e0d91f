"""
periodkit.calendar
~~~~~~~~~~~~~~~~~~

Gregorian calendar arithmetic over ``datetime`` instants.  A Calendar shifts
instants by whole units (seconds up to years, clamping month ends) and counts
whole units between two instants.  It is the collaborator every TimePeriod,
TimePeriodCollection and TimePeriodChain delegates to.

Basic usage::

    from periodkit.calendar import Calendar, TimePeriodSize

    cal = Calendar()
    due = cal.date_by_adding(1, TimePeriodSize.MONTH, cal.date(2024, 1, 31))
    # → 2024-02-29 00:00:00
    cal.distance(cal.date(2024, 1, 1), due, TimePeriodSize.DAY)   # → 59

Public API
----------
Calendar                  The calendar collaborator.
CalendarError             Base exception for all calendar-related errors.
DateComponents            Broken-down view of an instant.
TimePeriodSize            Unit of shifting and counting (second .. year).
TimeCalculatingOperation  Direction of a shift (adding / subtracting).
"""

from __future__ import annotations

from periodkit.calendar._exceptions import CalendarError
from periodkit.calendar.calendar import Calendar
from periodkit.calendar.components import DateComponents
from periodkit.calendar.units import (
    DateComponent,
    SecondsConstant,
    TimeCalculatingOperation,
    TimePeriodSize,
    WeekdayName,
)

__all__ = [
    "Calendar",
    "CalendarError",
    "DateComponent",
    "DateComponents",
    "SecondsConstant",
    "TimeCalculatingOperation",
    "TimePeriodSize",
    "WeekdayName",
]
