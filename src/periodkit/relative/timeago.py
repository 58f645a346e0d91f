from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta

from periodkit.calendar import Calendar, WeekdayName


class DateAgoFormat(Enum):
    LONG = "long"
    LONG_USING_NUMERIC_DATES_AND_TIMES = "long_using_numeric_dates_and_times"
    LONG_USING_NUMERIC_DATES = "long_using_numeric_dates"
    LONG_USING_NUMERIC_TIMES = "long_using_numeric_times"
    SHORT = "short"
    WEEK = "week"


class DateAgoUnit(Enum):
    YEARS = "year"
    MONTHS = "month"
    WEEKS = "week"
    DAYS = "day"
    HOURS = "hour"
    MINUTES = "minute"
    SECONDS = "second"


_SHORT_SUFFIX = {
    DateAgoUnit.YEARS: "y",
    DateAgoUnit.MONTHS: "M",
    DateAgoUnit.WEEKS: "w",
    DateAgoUnit.DAYS: "d",
    DateAgoUnit.HOURS: "h",
    DateAgoUnit.MINUTES: "m",
    DateAgoUnit.SECONDS: "s",
}

# Wording for a value of exactly one (or zero seconds) in the non-numeric formats.
_SINGULAR = {
    DateAgoUnit.YEARS: "Last year",
    DateAgoUnit.MONTHS: "Last month",
    DateAgoUnit.WEEKS: "Last week",
    DateAgoUnit.DAYS: "Yesterday",
    DateAgoUnit.HOURS: "An hour ago",
    DateAgoUnit.MINUTES: "A minute ago",
    DateAgoUnit.SECONDS: "Just now",
}

_DATE_UNITS = frozenset(
    {DateAgoUnit.YEARS, DateAgoUnit.MONTHS, DateAgoUnit.WEEKS, DateAgoUnit.DAYS}
)

_NUMERIC_DATES = frozenset(
    {DateAgoFormat.LONG_USING_NUMERIC_DATES, DateAgoFormat.LONG_USING_NUMERIC_DATES_AND_TIMES}
)
_NUMERIC_TIMES = frozenset(
    {DateAgoFormat.LONG_USING_NUMERIC_TIMES, DateAgoFormat.LONG_USING_NUMERIC_DATES_AND_TIMES}
)


def time_ago(
    date: datetime,
    since: Optional[datetime] = None,
    fmt: DateAgoFormat = DateAgoFormat.LONG,
    calendar: Optional[Calendar] = None,
) -> str:
    """
    Describe the distance between ``date`` and ``since`` in its largest unit.

    Below 24 hours the full date-times are compared (hours, minutes, then
    seconds).  From 24 hours on only the calendar days are compared, so
    23:00 yesterday and 01:00 today read as one day apart.
    """
    cal = calendar if calendar is not None else Calendar()
    reference = since if since is not None else cal.now()
    earliest, latest = (date, reference) if date <= reference else (reference, date)

    hours, remainder = divmod(int((latest - earliest).total_seconds()), 3600)
    if hours < 24:
        minutes, seconds = divmod(remainder, 60)
        if hours >= 1:
            return _phrase(fmt, DateAgoUnit.HOURS, hours, date)
        if minutes >= 1:
            return _phrase(fmt, DateAgoUnit.MINUTES, minutes, date)
        return _phrase(fmt, DateAgoUnit.SECONDS, seconds, date)

    delta = relativedelta(_midnight(latest), _midnight(earliest))
    if delta.years >= 1:
        return _phrase(fmt, DateAgoUnit.YEARS, delta.years, date)
    if delta.months >= 1:
        return _phrase(fmt, DateAgoUnit.MONTHS, delta.months, date)
    if delta.weeks >= 1:
        return _phrase(fmt, DateAgoUnit.WEEKS, delta.weeks, date)
    return _phrase(fmt, DateAgoUnit.DAYS, delta.days, date)


def time_ago_with(
    date: datetime,
    since: Optional[datetime] = None,
    numeric_dates: bool = False,
    numeric_times: bool = False,
    calendar: Optional[Calendar] = None,
) -> str:
    if numeric_dates and numeric_times:
        fmt = DateAgoFormat.LONG_USING_NUMERIC_DATES_AND_TIMES
    elif numeric_dates:
        fmt = DateAgoFormat.LONG_USING_NUMERIC_DATES
    elif numeric_times:
        fmt = DateAgoFormat.LONG_USING_NUMERIC_TIMES
    else:
        fmt = DateAgoFormat.LONG
    return time_ago(date, since, fmt, calendar)


def short_time_ago(
    date: datetime,
    since: Optional[datetime] = None,
    calendar: Optional[Calendar] = None,
) -> str:
    return time_ago(date, since, DateAgoFormat.SHORT, calendar)


def week_time_ago(
    date: datetime,
    since: Optional[datetime] = None,
    calendar: Optional[Calendar] = None,
) -> str:
    return time_ago(date, since, DateAgoFormat.WEEK, calendar)


def _midnight(instant: datetime) -> datetime:
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def _phrase(fmt: DateAgoFormat, unit: DateAgoUnit, value: int, date: datetime) -> str:
    if fmt is DateAgoFormat.SHORT:
        return f"{value}{_SHORT_SUFFIX[unit]}"
    if value >= 2:
        if unit is DateAgoUnit.DAYS and fmt is DateAgoFormat.WEEK and value <= 7:
            return WeekdayName(date.weekday()).full_name[:3]
        return f"{value} {unit.value}s ago"

    numeric = fmt in (_NUMERIC_DATES if unit in _DATE_UNITS else _NUMERIC_TIMES)
    if numeric:
        return f"1 {unit.value} ago"
    return _SINGULAR[unit]
