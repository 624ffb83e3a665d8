"""Streak helpers over daily completion history."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Mapping, Optional

MAX_STREAK_DAYS = 365


def current_streak(
    action_ids: Iterable[str],
    completed_by_day: Mapping[date, Iterable[str]],
    *,
    today: Optional[date] = None,
    limit: int = MAX_STREAK_DAYS,
) -> int:
    """Count consecutive days, back from today, on which every action was completed."""

    required = set(action_ids)
    if not required:
        return 0

    cursor = today or date.today()
    streak = 0
    while streak < limit:
        if not required.issubset(completed_by_day.get(cursor, ())):
            break
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(days: Iterable[date]) -> int:
    """Longest run of consecutive dates."""

    longest = 0
    run = 0
    last_day: Optional[date] = None
    for day in sorted(set(days)):
        if last_day is not None and day == last_day + timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = day
    return longest
