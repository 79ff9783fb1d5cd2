"""Shared pytest fixtures and test helpers for recurring tests."""

from __future__ import annotations

from datetime import UTC, date, datetime, time

import pytest

from recurring.domain.daily import DailyRecurrence
from recurring.domain.interval import Edge
from recurring.domain.intervals import DateTimeInterval, TimeInterval


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """Shorthand for a UTC date-time."""
    return datetime(year, month, day, hour, minute, tzinfo=UTC)


def occurrence(day: date, start: time, end: time) -> DateTimeInterval:
    """Closed occurrence on *day* from *start* till *end*."""
    return DateTimeInterval.closed_interval(
        datetime.combine(day, start, tzinfo=UTC),
        datetime.combine(day, end, tzinfo=UTC),
    )


@pytest.fixture
def lunch_window() -> TimeInterval:
    """Daily window 12:00-13:00, closed on both ends."""
    return TimeInterval.closed_interval(time(12, 0), time(13, 0))


@pytest.fixture
def august_2018() -> DateTimeInterval:
    """Validity window [2018-08-01T00:00Z, 2018-09-01T00:00Z)."""
    return DateTimeInterval(utc(2018, 8, 1), utc(2018, 9, 1), Edge.CLOSED, Edge.OPEN)


@pytest.fixture
def basic_calendar(august_2018: DateTimeInterval, lunch_window: TimeInterval) -> DailyRecurrence:
    """Lunch every day of August 2018."""
    return DailyRecurrence.create(august_2018, lunch_window, 1)
