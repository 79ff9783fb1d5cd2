"""recurring — edge-aware time intervals and recurring occurrences."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from recurring.config.logging import configure_logging
from recurring.config.settings import RecurringSettings
from recurring.domain.daily import DailyRecurrence
from recurring.domain.interval import Edge, Interval, InvalidIntervalError
from recurring.domain.intervals import DateInterval, DateTimeInterval, TimeInterval
from recurring.domain.recurrence import Recurrence, RecurrenceIterator

__version__ = "0.1.0"

__all__ = [
    "DailyRecurrence",
    "DateInterval",
    "DateTimeInterval",
    "Edge",
    "Interval",
    "InvalidIntervalError",
    "Recurrence",
    "RecurrenceIterator",
    "RecurringSettings",
    "TimeInterval",
    "__version__",
    "configure",
]


def configure(config_path: str | Path | None = None, **overrides: Any) -> RecurringSettings:
    """Load settings and apply the logging configuration they describe."""
    settings = RecurringSettings.load(config_path=config_path, **overrides)
    configure_logging(verbose=settings.logging.verbose, log_json=settings.logging.log_json)
    return settings
