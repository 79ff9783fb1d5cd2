"""Recurrence capability and the lazy occurrence iterator.

A recurrence knows two things: where to start, and how to get from one
occurrence to the next. :class:`RecurrenceIterator` folds those two
operations into a forward-only sequence of :class:`DateTimeInterval`.

INVARIANT: the value returned by ``first_interval`` is a seed. It is fed to
``get_next_interval`` once and never emitted itself, so the first emitted
occurrence is the result of the first ``get_next_interval`` call.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from recurring.domain.intervals import DateTimeInterval

logger = logging.getLogger(__name__)


@runtime_checkable
class Recurrence(Protocol):
    """Anything that can seed and step a sequence of occurrences."""

    def first_interval(self) -> DateTimeInterval | None:
        """Return the seed occurrence, or None if the recurrence yields nothing."""
        ...

    def get_next_interval(self, interval: DateTimeInterval) -> DateTimeInterval | None:
        """Return the occurrence following *interval*, or None when exhausted."""
        ...


class RecurrenceIterator:
    """Pull-based iterator over the occurrences of a recurrence.

    Holds the last produced interval (the seed before the first pull) and
    replaces it on every :meth:`advance`. Once ``get_next_interval`` returns
    None the iterator is exhausted for good; it never asks again.

    Usage::

        it = RecurrenceIterator(recurrence)
        for occurrence in it:
            ...
    """

    def __init__(self, recurrence: Recurrence) -> None:
        self._recurrence = recurrence
        self._current = recurrence.first_interval()

    def __repr__(self) -> str:
        return f"RecurrenceIterator(recurrence={self._recurrence!r}, current={self._current!r})"

    @property
    def recurrence(self) -> Recurrence:
        return self._recurrence

    @property
    def current(self) -> DateTimeInterval | None:
        """Last produced interval, or None once exhausted."""
        return self._current

    @property
    def exhausted(self) -> bool:
        return self._current is None

    def advance(self) -> DateTimeInterval | None:
        """Step to the next occurrence and return it, or None when exhausted."""
        if self._current is None:
            return None
        self._current = self._recurrence.get_next_interval(self._current)
        if self._current is None:
            logger.debug("recurrence_exhausted", extra={"recurrence": repr(self._recurrence)})
        return self._current

    def __iter__(self) -> RecurrenceIterator:
        return self

    def __next__(self) -> DateTimeInterval:
        interval = self.advance()
        if interval is None:
            raise StopIteration
        return interval
