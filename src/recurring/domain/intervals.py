"""Intervals bound to calendar dates, UTC date-times and times of day."""

from __future__ import annotations

from recurring.domain.interval import Interval, InvalidIntervalError
from recurring.domain.types import Date, DateTime, Duration, Time, time_difference


class DateInterval(Interval[Date]):
    """Interval between two calendar dates."""

    def duration(self) -> Duration:
        return self.end - self.start


class DateTimeInterval(Interval[DateTime]):
    """Interval between two UTC date-times; the unit of recurrence output.

    Both bounds must carry a zero UTC offset. Naive or offset date-times are
    rejected up front instead of failing later in a comparison.
    """

    def __post_init__(self) -> None:
        for name, value in (("start", self.start), ("end", self.end)):
            offset = value.utcoffset()
            if offset is None or offset != Duration(0):
                msg = (
                    f"invalid interval: {name} {value.isoformat()} is not a UTC date-time, "
                    "while both bounds should be timezone-aware UTC."
                )
                raise InvalidIntervalError(msg)
        super().__post_init__()

    def duration(self) -> Duration:
        return self.end - self.start


class TimeInterval(Interval[Time]):
    """Time-of-day span, e.g. the daily window 12:00-13:00.

    Any tzinfo on the bounds is ignored; occurrences are always placed in UTC.
    """

    def duration(self) -> Duration:
        return time_difference(self.end, self.start)
