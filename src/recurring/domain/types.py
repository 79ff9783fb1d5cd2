"""Date/time primitives used by the interval and recurrence models.

Thin layer over :mod:`datetime`. All date-time values are tz-aware and
anchored to UTC; there is no time-zone conversion anywhere in the package.

INVARIANT: arithmetic that leaves the representable range returns None,
it never raises.
"""

from __future__ import annotations

import datetime as _dt
from typing import TypeVar

Date = _dt.date
DateTime = _dt.datetime
Time = _dt.time
Duration = _dt.timedelta

UTC = _dt.UTC

MIN_DATE: Date = _dt.date.min
MAX_DATE: Date = _dt.date.max
MIN_DATETIME: DateTime = _dt.datetime.combine(MIN_DATE, _dt.time.min, tzinfo=UTC)
MAX_DATETIME: DateTime = _dt.datetime.combine(MAX_DATE, _dt.time.max, tzinfo=UTC)

ONE_DAY = Duration(days=1)

_D = TypeVar("_D", Date, DateTime)


def checked_add(value: _D, delta: Duration) -> _D | None:
    """Return ``value + delta``, or None if the result is out of range."""
    try:
        return value + delta
    except OverflowError:
        return None


def at_time(day: Date, time_of_day: Time) -> DateTime:
    """Combine a calendar date and a time of day into a UTC date-time."""
    return _dt.datetime.combine(day, time_of_day.replace(tzinfo=None), tzinfo=UTC)


def time_difference(end: Time, start: Time) -> Duration:
    """Difference between two times of day, both taken on the same day."""
    return at_time(MIN_DATE, end) - at_time(MIN_DATE, start)
