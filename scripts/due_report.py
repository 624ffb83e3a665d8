"""Print the due state of every action for a date from exported records."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from habit_engine.adapters import csv_adapter, json_adapter
from habit_engine.due_state import evaluate, summarize_day
from habit_engine.periods import completed_periods, period_key

logger = logging.getLogger("habit_engine.due_report")


def _adapter_for(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter
    if suffix == ".json":
        return json_adapter
    raise ValueError("Unsupported input format, expected .csv or .json")


def build_report(actions: list, completions: list, day: date) -> dict:
    completions_for = {
        action.action_id: completed_periods(completions, action.action_id) for action in actions
    }
    rows = []
    for action in actions:
        rows.append(
            {
                "action_id": action.action_id,
                "name": action.name,
                "frequency_type": action.frequency_type,
                "period_key": period_key(day, action.frequency_type),
                "state": evaluate(action, day, completions_for[action.action_id]),
            }
        )
    return {
        "date": day.isoformat(),
        "actions": rows,
        "summary": summarize_day(actions, day, completions_for),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Report habit due states for a date")
    parser.add_argument("--actions", required=True, help="Path to CSV/JSON actions export")
    parser.add_argument("--completions", required=True, help="Path to CSV/JSON completions export")
    parser.add_argument("--date", default=None, help="ISO date to evaluate (default: today)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    actions_path = Path(args.actions)
    completions_path = Path(args.completions)
    actions = _adapter_for(actions_path).parse_actions(str(actions_path))
    completions = _adapter_for(completions_path).parse_completions(str(completions_path))
    day = date.fromisoformat(args.date) if args.date else date.today()
    logger.debug("Evaluating %d actions on %s", len(actions), day)

    print(json.dumps(build_report(actions, completions, day), indent=2))


if __name__ == "__main__":
    main()
