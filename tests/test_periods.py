from datetime import date, datetime, timedelta

from habit_engine.periods import completed_periods, completion_id, period_key, target_period_keys
from habit_engine.schema import Completion


def test_daily_key_is_iso_date():
    assert period_key(date(2024, 3, 5), "daily") == "2024-03-05"
    assert period_key(datetime(2024, 3, 5, 23, 59), "daily") == "2024-03-05"


def test_weekly_key_anchors_on_monday():
    monday = date(2024, 3, 4)
    keys = {period_key(monday + timedelta(days=offset), "weekly") for offset in range(7)}
    assert keys == {"W_2024-03-04"}
    assert period_key(date(2024, 3, 11), "weekly") == "W_2024-03-11"


def test_weekly_key_across_year_boundary():
    assert period_key(date(2025, 1, 1), "weekly") == "W_2024-12-30"
    assert period_key(date(2024, 12, 30), "weekly") == period_key(date(2025, 1, 5), "weekly")


def test_monthly_key_covers_whole_month():
    keys = {period_key(date(2024, 2, day), "monthly") for day in range(1, 30)}
    assert keys == {"M_2024-02"}
    assert period_key(date(2024, 3, 1), "monthly") == "M_2024-03"


def test_once_key_is_constant():
    assert period_key(date(2020, 1, 1), "once") == "ONCE"
    assert period_key(date(2031, 7, 19), "once") == "ONCE"


def test_unknown_frequency_falls_back_to_daily():
    assert period_key(date(2024, 3, 5), "fortnightly") == "2024-03-05"


def test_target_period_keys_for_view():
    assert target_period_keys(date(2024, 3, 6)) == ["2024-03-06", "W_2024-03-04", "M_2024-03", "ONCE"]


def test_completion_id_is_stable_within_period():
    first = completion_id("u1", period_key(date(2024, 3, 4), "weekly"), "a1")
    second = completion_id("u1", period_key(date(2024, 3, 9), "weekly"), "a1")
    assert first == second == "u1_W_2024-03-04_a1"


def test_completed_periods_collapses_duplicates():
    completions = [
        Completion("a1", "M_2024-03", datetime(2024, 3, 2, 9)),
        Completion("a1", "M_2024-03", datetime(2024, 3, 3, 9)),
        Completion("a2", "2024-03-03", datetime(2024, 3, 3, 9)),
    ]
    assert completed_periods(completions, "a1") == {"M_2024-03": True}
    assert completed_periods(completions) == {"M_2024-03": True, "2024-03-03": True}
