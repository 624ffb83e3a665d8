"""Due-state classification of actions for a date."""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime
from typing import Mapping

from habit_engine.periods import period_key
from habit_engine.schema import (
    DUE_STATES,
    FREQUENCY_DAILY,
    STATE_COMPLETED,
    STATE_DUE,
    STATE_NOT_DUE,
    STATUS_ARCHIVED,
    STATUS_PAUSED,
    Action,
)
from habit_engine.weekdays import allowed

_INACTIVE_STATUSES = {STATUS_PAUSED, STATUS_ARCHIVED}


def _is_live(action: Action) -> bool:
    return bool(action.active) and action.status not in _INACTIVE_STATUSES


def evaluate(action: Action, day: date | datetime, completions_by_period: Mapping[str, bool]) -> str:
    """Classify ``action`` on ``day`` as completed, due or not_due.

    A completed period wins over the weekday filter. ``frequency_days`` only
    restricts the daily cadence; weekly, monthly and once actions are due on
    any day of their period until completed.
    """

    if not _is_live(action):
        return STATE_NOT_DUE

    key = period_key(day, action.frequency_type)
    if completions_by_period.get(key):
        return STATE_COMPLETED

    if action.frequency_type == FREQUENCY_DAILY and not allowed(day, action.frequency_days):
        return STATE_NOT_DUE

    return STATE_DUE


def is_due(action: Action, day: date | datetime, completions_by_period: Mapping[str, bool]) -> bool:
    return evaluate(action, day, completions_by_period) == STATE_DUE


def can_record_completion(state: str) -> bool:
    """A new completion may be written only while the period is open."""

    return state != STATE_COMPLETED


def visible_actions(
    actions: list[Action],
    day: date | datetime,
    completions_for: Mapping[str, Mapping[str, bool]],
) -> list[Action]:
    """Actions to list for ``day``: due or already completed this period."""

    visible = []
    for action in actions:
        state = evaluate(action, day, completions_for.get(action.action_id, {}))
        if state != STATE_NOT_DUE:
            visible.append(action)
    return visible


def summarize_day(
    actions: list[Action],
    day: date | datetime,
    completions_for: Mapping[str, Mapping[str, bool]],
) -> dict[str, int]:
    """Count actions per due state."""

    counts = Counter(evaluate(action, day, completions_for.get(action.action_id, {})) for action in actions)
    return {state: counts.get(state, 0) for state in DUE_STATES}
