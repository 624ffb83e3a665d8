"""Demo script for habit-engine."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from habit_engine.adapters.json_adapter import parse_actions, parse_completions
from habit_engine.due_state import evaluate, visible_actions
from habit_engine.periods import completed_periods
from habit_engine.schema import SignalMeasurement
from habit_engine.signals import next_signal_to_measure


def main() -> None:
    here = Path(__file__).resolve().parent
    actions = parse_actions(str(here / "sample_actions.json"))
    completions = parse_completions(str(here / "sample_completions.json"))
    day = date(2024, 3, 5)

    completions_for = {a.action_id: completed_periods(completions, a.action_id) for a in actions}
    for action in actions:
        print(f"{action.name:<20} {evaluate(action, day, completions_for[action.action_id])}")
    print("Visible:", [a.action_id for a in visible_actions(actions, day, completions_for)])

    signals = [
        SignalMeasurement("energy", "weekly", last_measured=date(2024, 3, 1)),
        SignalMeasurement("sleep", "2-3_weekly", last_measured=date(2024, 3, 2)),
    ]
    print("Ask about:", next_signal_to_measure(signals, day, today=day))


if __name__ == "__main__":
    main()
