"""Weekday restriction for daily-cadence actions.

Stored ``frequency_days`` use application numbering (0=Monday ... 6=Sunday).
Platform-style numbering (0=Sunday ... 6=Saturday) is converted in exactly one
place, ``app_weekday``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional


def native_weekday(day: date | datetime) -> int:
    """Sunday-first weekday index of ``day``."""

    return day.isoweekday() % 7


def app_weekday(native: int) -> int:
    """Convert a Sunday-first index to the Monday-first application index."""

    return (native + 6) % 7


def allowed(day: date | datetime, frequency_days: Optional[Iterable[int]]) -> bool:
    """Return True when ``day`` falls on one of ``frequency_days``.

    Empty or missing ``frequency_days`` means no restriction.
    """

    if not frequency_days:
        return True
    return app_weekday(native_weekday(day)) in set(frequency_days)
