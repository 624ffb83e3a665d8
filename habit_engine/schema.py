"""Core data schema for actions, completions and signals."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

FREQUENCY_DAILY = "daily"
FREQUENCY_WEEKLY = "weekly"
FREQUENCY_MONTHLY = "monthly"
FREQUENCY_ONCE = "once"
FREQUENCY_TYPES = (FREQUENCY_DAILY, FREQUENCY_WEEKLY, FREQUENCY_MONTHLY, FREQUENCY_ONCE)

STATUS_ACTIVE = "active"
STATUS_PAUSED = "paused"
STATUS_ARCHIVED = "archived"
STATUSES = (STATUS_ACTIVE, STATUS_PAUSED, STATUS_ARCHIVED)

STATE_COMPLETED = "completed"
STATE_DUE = "due"
STATE_NOT_DUE = "not_due"
DUE_STATES = (STATE_COMPLETED, STATE_DUE, STATE_NOT_DUE)

ONCE_KEY = "ONCE"


@dataclass
class Action:
    """Recurring user action with a cadence.

    ``frequency_interval`` is reserved and always 1. ``frequency_days`` holds
    weekday indices with 0=Monday and 6=Sunday.
    """

    action_id: str
    frequency_type: str = FREQUENCY_DAILY
    frequency_interval: int = 1
    frequency_days: Optional[frozenset[int]] = None
    active: bool = True
    status: Optional[str] = None
    name: str = ""
    user_id: Optional[str] = None


@dataclass
class Completion:
    """A completion recorded against one period of an action."""

    action_id: str
    period_key: str
    completed_at: datetime
    user_id: Optional[str] = None


@dataclass
class SignalMeasurement:
    """Periodic measurement with its own cadence, independent of actions."""

    signal_id: str
    frequency: str
    last_measured: Optional[date] = None


@dataclass
class CheckIn:
    """One recorded signal value for a day."""

    signal_id: str
    day: date
    value: float
