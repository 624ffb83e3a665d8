"""Remeasurement cadence for signals."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from habit_engine.periods import as_day
from habit_engine.schema import SignalMeasurement

SIGNAL_DAILY = "daily"
SIGNAL_TWO_THREE_WEEKLY = "2-3_weekly"
SIGNAL_WEEKLY = "weekly"

# Minimum whole days since the last measurement before asking again.
_MIN_GAP_DAYS = {
    SIGNAL_DAILY: 0,
    SIGNAL_TWO_THREE_WEEKLY: 2,
    "2-3 weekly": 2,
    SIGNAL_WEEKLY: 7,
}


def should_measure(
    frequency: Optional[str],
    day: date | datetime,
    last_measurement: Optional[date | datetime] = None,
    *,
    today: Optional[date | datetime] = None,
) -> bool:
    """Return True when a signal with ``frequency`` should be prompted on ``day``.

    Past days are never prompted. Unknown frequencies are never prompted.
    """

    if not frequency or frequency not in _MIN_GAP_DAYS:
        return False

    check_day = as_day(day)
    if check_day < as_day(today or date.today()):
        return False

    min_gap = _MIN_GAP_DAYS[frequency]
    if min_gap == 0 or last_measurement is None:
        return True
    return (check_day - as_day(last_measurement)).days >= min_gap


def next_signal_to_measure(
    signals: Iterable[SignalMeasurement],
    day: date | datetime,
    *,
    today: Optional[date] = None,
) -> Optional[SignalMeasurement]:
    """First signal, in input order, that should be prompted on ``day``."""

    for signal in signals:
        if should_measure(signal.frequency, day, signal.last_measured, today=today):
            return signal
    return None
