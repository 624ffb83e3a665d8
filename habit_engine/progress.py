"""Progress statistics over a trailing window of days."""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Iterable, Optional

import numpy as np

from habit_engine.schema import CheckIn, Completion

TREND_IMPROVING = "improving"
TREND_STABLE = "stable"
TREND_IRREGULAR = "irregular"
TREND_NO_PATTERN = "no_pattern"

RELATION_POSITIVE = "positive"
RELATION_UNCLEAR = "unclear"

MIN_COVERAGE = 3
MIN_RELATION_CHECK_INS = 4
TREND_THRESHOLD = 0.3
VARIABILITY_THRESHOLD = 0.6
RELATION_THRESHOLD = 0.3
RECENT_VALUES = 3


def dates_in_period(days: int, today: Optional[date] = None) -> list[str]:
    """ISO dates of the trailing ``days``-day window, oldest first."""

    today = today or date.today()
    return [(today - timedelta(days=offset)).isoformat() for offset in range(days - 1, -1, -1)]


def _mean(values) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def overview_stats(completions: Iterable[Completion], action_count: int, window: list[str]) -> dict:
    """Active days, total completions, presence ratio and plan load in the window."""

    period = set(window)
    in_window = [c for c in completions if c.completed_at.date().isoformat() in period]
    active_days = len({c.completed_at.date() for c in in_window})
    return {
        "active_days": active_days,
        "total_actions": len(in_window),
        "presence_ratio": active_days / len(window) if window else 0.0,
        "plan_load": action_count,
    }


def _classify_trend(coverage: int, trend_value: float, variability: float) -> str:
    if coverage < MIN_COVERAGE:
        return TREND_NO_PATTERN
    if trend_value > TREND_THRESHOLD and variability <= VARIABILITY_THRESHOLD:
        return TREND_IMPROVING
    if abs(trend_value) <= TREND_THRESHOLD:
        return TREND_STABLE
    if variability > VARIABILITY_THRESHOLD:
        return TREND_IRREGULAR
    return TREND_STABLE


def signal_stats(signal_id: str, check_ins: Iterable[CheckIn], window: list[str]) -> dict:
    """Coverage, half-window trend, variability and recent average of one signal."""

    period = set(window)
    selected = sorted(
        (c for c in check_ins if c.signal_id == signal_id and c.day.isoformat() in period),
        key=lambda c: c.day,
    )
    values = np.array([c.value for c in selected], dtype=float)
    coverage = len({c.day for c in selected})

    in_first_half = np.isin([c.day.isoformat() for c in selected], window[: len(window) // 2])
    first = values[in_first_half]
    second = values[~in_first_half]
    trend_value = _mean(second) - _mean(first) if len(first) and len(second) else 0.0

    variability = float(np.mean(np.abs(np.diff(values)))) if len(values) > 1 else 0.0

    return {
        "signal_id": signal_id,
        "coverage": coverage,
        "trend_value": trend_value,
        "variability": variability,
        "recent_avg": _mean(values[-RECENT_VALUES:]),
        "trend_type": _classify_trend(coverage, trend_value, variability),
        "values": values.tolist(),
    }


def aggregate_trend(stats: Iterable[dict]) -> str:
    """Most common trend among signals with enough coverage; ties resolve to stable."""

    counts = Counter(s["trend_type"] for s in stats if s["coverage"] >= MIN_COVERAGE)
    if not counts:
        return TREND_NO_PATTERN
    ranked = counts.most_common(2)
    if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
        return TREND_STABLE
    return ranked[0][0]


def action_relation(check_ins: Iterable[CheckIn], completed_days: Iterable[date], window: list[str]) -> dict:
    """Compare signal values on days with and without a completed action."""

    period = set(window)
    action_days = set(completed_days)
    selected = [c for c in check_ins if c.day.isoformat() in period]

    result = {
        "has_relation": False,
        "relation": RELATION_UNCLEAR,
        "delta": 0.0,
        "avg_with_action": 0.0,
        "avg_without_action": 0.0,
    }
    if len(selected) < MIN_RELATION_CHECK_INS:
        return result

    with_action = np.array([c.value for c in selected if c.day in action_days], dtype=float)
    without_action = np.array([c.value for c in selected if c.day not in action_days], dtype=float)
    result["avg_with_action"] = _mean(with_action)
    result["avg_without_action"] = _mean(without_action)
    if not len(with_action) or not len(without_action):
        return result

    delta = result["avg_with_action"] - result["avg_without_action"]
    result.update(
        has_relation=True,
        delta=delta,
        relation=RELATION_POSITIVE if delta >= RELATION_THRESHOLD else RELATION_UNCLEAR,
    )
    return result
