"""Daily notification rule selection.

Picks which reminder, if any, to send today. Delivery and copy text belong to
the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from habit_engine.periods import as_day
from habit_engine.weekdays import native_weekday

NOTIFY_WEEKLY_SUMMARY = "weekly_summary"
NOTIFY_CHECKIN = "checkin"
NOTIFY_PRESENCE = "presence"

TRIAL_DAYS = 2
INACTIVE_DAYS = 3


@dataclass
class RuleContext:
    """Activity snapshot a notification decision is made from."""

    active_signals_count: int
    active_plans_count: int
    today_check_in_count: int
    days_since_last_action: int
    actions_last_7_days: int
    check_ins_last_7_days: int
    user_created_at: date | datetime
    last_notification_date: Optional[date | str] = None


@dataclass
class RuleDecision:
    notification_type: Optional[str]
    reason: str


def _already_sent(last_notification_date: Optional[date | str], today: date) -> bool:
    if last_notification_date is None:
        return False
    if isinstance(last_notification_date, str):
        return last_notification_date == today.isoformat()
    return as_day(last_notification_date) == today


def in_trial(user_created_at: date | datetime, today: date) -> bool:
    """True during the first ``TRIAL_DAYS`` calendar days of an account."""

    return abs((today - as_day(user_created_at)).days) < TRIAL_DAYS


def evaluate_daily_rule(ctx: RuleContext, *, today: Optional[date | datetime] = None) -> RuleDecision:
    """Return the highest-priority notification that applies today.

    At most one notification per day. Priority order: weekly summary on Sunday,
    then a check-in prompt, then a gentle presence reminder after inactivity.
    """

    today = as_day(today or date.today())
    if _already_sent(ctx.last_notification_date, today):
        return RuleDecision(None, "already sent a notification today")

    trial = in_trial(ctx.user_created_at, today)

    has_weekly_activity = ctx.actions_last_7_days > 0 or ctx.check_ins_last_7_days > 0
    if native_weekday(today) == 0 and has_weekly_activity and not trial:
        return RuleDecision(NOTIFY_WEEKLY_SUMMARY, "sunday with activity in the last 7 days")

    if ctx.active_signals_count > 0 and ctx.today_check_in_count == 0:
        return RuleDecision(NOTIFY_CHECKIN, "active signals without a check-in today")

    if ctx.days_since_last_action >= INACTIVE_DAYS and ctx.active_plans_count > 0 and not trial:
        return RuleDecision(NOTIFY_PRESENCE, f"inactive for {INACTIVE_DAYS}+ days with active plans")

    return RuleDecision(None, "no rules matched")
