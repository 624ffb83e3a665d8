from datetime import date, datetime, timedelta

from habit_engine.schema import SignalMeasurement
from habit_engine.signals import next_signal_to_measure, should_measure

TODAY = date(2024, 3, 6)


def test_daily_today_and_past():
    assert should_measure("daily", TODAY, today=TODAY)
    assert not should_measure("daily", TODAY - timedelta(days=1), today=TODAY)
    assert should_measure("daily", TODAY + timedelta(days=3), today=TODAY)


def test_defaults_to_system_clock():
    # Reads the real clock; can flip if run exactly across midnight.
    assert should_measure("daily", date.today())
    assert not should_measure("daily", date.today() - timedelta(days=1))


def test_weekly_threshold():
    assert should_measure("weekly", TODAY, today=TODAY)
    assert not should_measure("weekly", TODAY, TODAY - timedelta(days=6), today=TODAY)
    assert should_measure("weekly", TODAY, TODAY - timedelta(days=7), today=TODAY)


def test_two_three_weekly_threshold():
    assert should_measure("2-3_weekly", TODAY, today=TODAY)
    assert not should_measure("2-3_weekly", TODAY, TODAY - timedelta(days=1), today=TODAY)
    assert should_measure("2-3_weekly", TODAY, TODAY - timedelta(days=2), today=TODAY)
    assert should_measure("2-3 weekly", TODAY, TODAY - timedelta(days=2), today=TODAY)


def test_last_measurement_time_of_day_is_ignored():
    late = datetime(2024, 3, 4, 23, 30)
    assert should_measure("2-3_weekly", TODAY, late, today=TODAY)


def test_unknown_or_missing_frequency():
    assert not should_measure("monthly", TODAY, today=TODAY)
    assert not should_measure("", TODAY, today=TODAY)
    assert not should_measure(None, TODAY, today=TODAY)


def test_next_signal_to_measure():
    signals = [
        SignalMeasurement("energy", "weekly", last_measured=TODAY - timedelta(days=3)),
        SignalMeasurement("sleep", "2-3_weekly", last_measured=TODAY - timedelta(days=2)),
        SignalMeasurement("mood", "daily"),
    ]
    assert next_signal_to_measure(signals, TODAY, today=TODAY).signal_id == "sleep"
    assert next_signal_to_measure(signals[:1], TODAY, today=TODAY) is None


def test_today_may_be_a_datetime():
    assert should_measure("daily", TODAY, today=datetime(2024, 3, 6, 9, 0))
    assert not should_measure("daily", TODAY - timedelta(days=1), today=datetime(2024, 3, 6, 9, 0))
