"""
periodkit.relative
~~~~~~~~~~~~~~~~~~

Relative time: English "time ago" phrases and one-sided distances measured
against now (or an explicit reference instant).

Basic usage::

    from datetime import datetime
    from periodkit.calendar import TimePeriodSize
    from periodkit.relative import ago, short_time_ago, time_ago

    now = datetime(2024, 5, 10, 12, 0)
    time_ago(datetime(2024, 5, 10, 10, 0), since=now)        # → "2 hours ago"
    short_time_ago(datetime(2024, 5, 7, 9, 0), since=now)     # → "3d"
    ago(datetime(2024, 5, 1), TimePeriodSize.DAY, now=now)    # → 9

Public API
----------
time_ago        Phrase in the largest convenient unit.
time_ago_with   Same, selecting the format through numeric_* flags.
short_time_ago  Compact form ("2h", "3d").
week_time_ago   Names the weekday for dates two to seven days away.
ago / until     One-sided distance in a given unit.
DateAgoFormat   Output format of time_ago.
DateAgoUnit     Unit a phrase was expressed in.
"""

from __future__ import annotations

from periodkit.relative.distance import ago, until
from periodkit.relative.timeago import (
    DateAgoFormat,
    DateAgoUnit,
    short_time_ago,
    time_ago,
    time_ago_with,
    week_time_ago,
)

__all__ = [
    "DateAgoFormat",
    "DateAgoUnit",
    "ago",
    "short_time_ago",
    "time_ago",
    "time_ago_with",
    "until",
    "week_time_ago",
]
