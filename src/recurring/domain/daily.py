"""Daily recurrence: a time-of-day window repeated every K days.

Occurrences are clipped to a validity window. Stepping starts from a seed
interval that ends at the start of the validity window, so the first real
occurrence is found by the same arithmetic as every later one:

- aligned input (its times of day match the daily window) moves forward by
  the repetition interval;
- anything else (the seed, or foreign input) lands on the next date whose
  daily window has not started yet, relative to the input's end.

A candidate outside the validity window, or date arithmetic overflowing the
representable range, ends the sequence. Neither is an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from recurring.domain.interval import Edge, InvalidIntervalError
from recurring.domain.intervals import DateTimeInterval, TimeInterval
from recurring.domain.recurrence import RecurrenceIterator
from recurring.domain.types import MIN_DATETIME, ONE_DAY, Duration, Time, at_time, checked_add

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyRecurrence:
    """A daily window repeated every ``repetition_interval`` within ``valid_interval``.

    Attributes:
        valid_interval: Overall window occurrences must fall in, edge-aware.
        time_interval: Daily window; its edges become the occurrences' edges.
        repetition_interval: Step between occurrence dates, a whole number of days.
    """

    valid_interval: DateTimeInterval
    time_interval: TimeInterval
    repetition_interval: Duration = ONE_DAY

    def __post_init__(self) -> None:
        if self.repetition_interval < ONE_DAY or self.repetition_interval % ONE_DAY:
            msg = (
                f"invalid repetition_interval: repetition_interval is {self.repetition_interval}, "
                "while it should be a whole number of days, equal or larger than 1 day"
            )
            raise InvalidIntervalError(msg)
        logger.debug(
            "recurrence_created",
            extra={
                "window": str(self.time_interval),
                "valid": str(self.valid_interval),
                "step": str(self.repetition_interval),
            },
        )

    @classmethod
    def create(
        cls,
        valid_interval: DateTimeInterval,
        time_interval: TimeInterval,
        repetition_days: int = 1,
    ) -> DailyRecurrence:
        """Build a recurrence stepping *repetition_days* whole days at a time."""
        if repetition_days < 1:
            msg = (
                f"invalid repetition_interval: repetition_interval is {repetition_days}, "
                "while it should be equal or larger than 1"
            )
            raise InvalidIntervalError(msg)
        return cls(valid_interval, time_interval, Duration(days=repetition_days))

    @property
    def repetition_days(self) -> int:
        return self.repetition_interval.days

    @property
    def window_start(self) -> Time:
        """Daily window start as a naive time of day."""
        return self.time_interval.start.replace(tzinfo=None)

    @property
    def window_end(self) -> Time:
        """Daily window end as a naive time of day."""
        return self.time_interval.end.replace(tzinfo=None)

    def __iter__(self) -> RecurrenceIterator:
        return RecurrenceIterator(self)

    # --- Recurrence protocol ---

    def first_interval(self) -> DateTimeInterval | None:
        """Return the seed ``[MIN_DATETIME, valid_interval.start]``.

        Only used to anchor stepping; it is never emitted.
        """
        seed = DateTimeInterval(MIN_DATETIME, self.valid_interval.start, Edge.CLOSED, Edge.CLOSED)
        logger.debug("recurrence_seeded", extra={"seed": str(seed)})
        return seed

    def get_next_interval(self, interval: DateTimeInterval) -> DateTimeInterval | None:
        if interval.start.time() == self.window_start and interval.end.time() == self.window_end:
            candidate = DateTimeInterval.from_optional(
                checked_add(interval.start, self.repetition_interval),
                checked_add(interval.end, self.repetition_interval),
                self.time_interval.start_edge,
                self.time_interval.end_edge,
            )
            if candidate is None:
                self._log_overflow(interval, self.repetition_interval)
                return None
            return self._clip(candidate)

        step = self.repetition_interval
        if interval.end.time() < self.window_start:
            # today's window is still ahead, so today counts as the first day
            step = step - ONE_DAY

        next_date = checked_add(interval.end.date(), step)
        if next_date is None:
            self._log_overflow(interval, step)
            return None

        candidate = DateTimeInterval(
            at_time(next_date, self.window_start),
            at_time(next_date, self.window_end),
            self.time_interval.start_edge,
            self.time_interval.end_edge,
        )
        return self._clip(candidate)

    def _clip(self, candidate: DateTimeInterval) -> DateTimeInterval | None:
        if not self.valid_interval.contains(candidate):
            logger.debug(
                "occurrence_rejected",
                extra={"candidate": str(candidate), "valid": str(self.valid_interval)},
            )
            return None
        return candidate

    def _log_overflow(self, interval: DateTimeInterval, step: Duration) -> None:
        logger.debug("step_overflow", extra={"interval": str(interval), "step": str(step)})
