"""Period bucketing: map a date to the period it counts toward."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from habit_engine.schema import (
    FREQUENCY_DAILY,
    FREQUENCY_MONTHLY,
    FREQUENCY_ONCE,
    FREQUENCY_WEEKLY,
    ONCE_KEY,
    Completion,
)

WEEK_PREFIX = "W_"
MONTH_PREFIX = "M_"


def as_day(value: date | datetime) -> date:
    """Reduce a datetime to its local calendar date."""

    if isinstance(value, datetime):
        return value.date()
    return value


def week_start(day: date | datetime) -> date:
    """Return the Monday on or before ``day``."""

    day = as_day(day)
    return day - timedelta(days=day.weekday())


def period_key(day: date | datetime, frequency_type: str) -> str:
    """Return the canonical bucket identifier of ``day`` under a frequency.

    Unrecognized frequencies fall back to the daily scheme.
    """

    day = as_day(day)
    if frequency_type == FREQUENCY_WEEKLY:
        return f"{WEEK_PREFIX}{week_start(day).isoformat()}"
    if frequency_type == FREQUENCY_MONTHLY:
        return f"{MONTH_PREFIX}{day.year:04d}-{day.month:02d}"
    if frequency_type == FREQUENCY_ONCE:
        return ONCE_KEY
    return day.isoformat()


def target_period_keys(day: date | datetime) -> list[str]:
    """Keys of every cadence that a view of ``day`` needs to look up."""

    return [
        period_key(day, FREQUENCY_DAILY),
        period_key(day, FREQUENCY_WEEKLY),
        period_key(day, FREQUENCY_MONTHLY),
        ONCE_KEY,
    ]


def completion_id(user_id: str, key: str, action_id: str) -> str:
    """Deterministic record id, one per (user, period, action)."""

    return f"{user_id}_{key}_{action_id}"


def completed_periods(completions: Iterable[Completion], action_id: Optional[str] = None) -> dict[str, bool]:
    """Collapse completion records into a ``period_key -> True`` map."""

    periods: dict[str, bool] = {}
    for completion in completions:
        if action_id is not None and completion.action_id != action_id:
            continue
        periods[completion.period_key] = True
    return periods
