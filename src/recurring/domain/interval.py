"""Generic edge-typed intervals.

An interval runs from ``start`` till ``end`` and records for each boundary
whether that instant belongs to it (closed) or not (open). Containment is
edge-aware: two intervals touching at a boundary only share that point when
both agree on the edge type there.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, Self, TypeVar

T = TypeVar("T")


class InvalidIntervalError(ValueError):
    """Raised when an interval or recurrence is constructed with inconsistent bounds."""


class Edge(StrEnum):
    """Inclusion of a boundary instant."""

    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class Interval(Generic[T]):
    """An interval over any totally ordered type.

    INVARIANT: ``start <= end``. An interval with ``start == end`` is either
    empty (at least one open edge) or a point interval (both edges closed).

    Attributes:
        start: Lower bound.
        end: Upper bound.
        start_edge: Whether *start* itself is part of the interval.
        end_edge: Whether *end* itself is part of the interval.
    """

    start: T
    end: T
    start_edge: Edge
    end_edge: Edge

    def __post_init__(self) -> None:
        if self.start > self.end:  # type: ignore[operator]
            msg = (
                f"invalid interval: interval is from {self.start} till {self.end}, "
                "while from should be smaller or equal than till."
            )
            raise InvalidIntervalError(msg)

    def __str__(self) -> str:
        left = "[" if self.start_edge == Edge.CLOSED else "("
        right = "]" if self.end_edge == Edge.CLOSED else ")"
        return f"{left}{self.start}, {self.end}{right}"

    # --- Construction ---

    @classmethod
    def closed_interval(cls, start: T, end: T) -> Self:
        """Construct ``[start, end]``."""
        return cls(start, end, Edge.CLOSED, Edge.CLOSED)

    @classmethod
    def open_interval(cls, start: T, end: T) -> Self:
        """Construct ``(start, end)``."""
        return cls(start, end, Edge.OPEN, Edge.OPEN)

    @classmethod
    def from_optional(
        cls,
        start: T | None,
        end: T | None,
        start_edge: Edge,
        end_edge: Edge,
    ) -> Self | None:
        """Construct an interval if both bounds are present, else return None.

        A missing bound usually comes from date arithmetic that overflowed;
        absence propagates instead of raising.
        """
        if start is None or end is None:
            return None
        return cls(start, end, start_edge, end_edge)

    @classmethod
    def closed_from_optional(cls, start: T | None, end: T | None) -> Self | None:
        return cls.from_optional(start, end, Edge.CLOSED, Edge.CLOSED)

    @classmethod
    def open_from_optional(cls, start: T | None, end: T | None) -> Self | None:
        return cls.from_optional(start, end, Edge.OPEN, Edge.OPEN)

    # --- Containment ---

    def _contains_value(self, value: Any, edge: Edge) -> bool:
        if self.start < value < self.end:  # type: ignore[operator]
            return True
        if value == self.start:
            return self.start_edge == edge
        if value == self.end:
            return self.end_edge == edge
        return False

    def contains(self, other: Interval[T]) -> bool:
        """Check whether both endpoints of *other* lie within this interval.

        An endpoint equal to one of our bounds is only contained when its
        edge type matches ours at that bound.
        """
        return self._contains_value(other.start, other.start_edge) and self._contains_value(
            other.end, other.end_edge
        )

    def intersects(self, other: Interval[T]) -> bool:
        """Check whether the intervals nest or share at least one instant.

        Symmetric: ``a.intersects(b) == b.intersects(a)``. A single shared
        instant only counts when it is closed on both sides. An empty
        interval holds no instant, so it intersects nothing.
        """
        if self.is_empty() or other.is_empty():
            return False
        if self.contains(other) or other.contains(self):
            return True

        if self.start > other.start:  # type: ignore[operator]
            low, low_closed = self.start, self.is_start_closed()
        elif other.start > self.start:  # type: ignore[operator]
            low, low_closed = other.start, other.is_start_closed()
        else:
            low, low_closed = self.start, self.is_start_closed() and other.is_start_closed()

        if self.end < other.end:  # type: ignore[operator]
            high, high_closed = self.end, self.is_end_closed()
        elif other.end < self.end:  # type: ignore[operator]
            high, high_closed = other.end, other.is_end_closed()
        else:
            high, high_closed = self.end, self.is_end_closed() and other.is_end_closed()

        if low < high:  # type: ignore[operator]
            return True
        return low == high and low_closed and high_closed

    def duration(self) -> Any:
        """Length of the interval, ``end - start`` in the bound type's arithmetic."""
        return self.end - self.start  # type: ignore[operator]

    # --- Predicates ---

    def is_empty(self) -> bool:
        return self.start == self.end and not self.is_closed()

    def is_point_interval(self) -> bool:
        return self.start == self.end and self.is_closed()

    def is_start_closed(self) -> bool:
        return self.start_edge == Edge.CLOSED

    def is_start_open(self) -> bool:
        return self.start_edge == Edge.OPEN

    def is_end_closed(self) -> bool:
        return self.end_edge == Edge.CLOSED

    def is_end_open(self) -> bool:
        return self.end_edge == Edge.OPEN

    def is_closed(self) -> bool:
        return self.is_start_closed() and self.is_end_closed()

    def is_open(self) -> bool:
        return self.is_start_open() and self.is_end_open()
