"""CSV adapter for exported actions and completions.

``frequency_days`` cells hold weekday indices separated by ``|``, e.g. ``0|2|4``.
"""

from __future__ import annotations

import csv
import logging
from datetime import datetime

from habit_engine.schema import FREQUENCY_TYPES, STATUSES, Action, Completion

logger = logging.getLogger(__name__)

_ACTION_FIELDS = {"id", "frequency_type"}
_COMPLETION_FIELDS = {"action_id", "period_key", "completed_at"}
_TRUE_VALUES = {"1", "true", "yes"}


def _parse_days(raw: str | None, row_number: int) -> frozenset[int] | None:
    if raw in (None, ""):
        return None
    try:
        days = frozenset(int(part) for part in raw.split("|") if part.strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: invalid frequency_days") from exc
    if any(day < 0 or day > 6 for day in days):
        raise ValueError(f"Row {row_number}: frequency_days must be within 0-6")
    return days


def _parse_action_row(row: dict, row_number: int) -> Action:
    missing = [field for field in _ACTION_FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    frequency_type = row["frequency_type"].strip()
    if frequency_type not in FREQUENCY_TYPES:
        raise ValueError(f"Row {row_number}: invalid frequency_type '{frequency_type}'")

    status = (row.get("status") or "").strip() or None
    if status is not None and status not in STATUSES:
        raise ValueError(f"Row {row_number}: invalid status '{status}'")

    active_raw = row.get("active")
    active = True if active_raw in (None, "") else active_raw.strip().lower() in _TRUE_VALUES

    return Action(
        action_id=row["id"].strip(),
        frequency_type=frequency_type,
        frequency_days=_parse_days(row.get("frequency_days"), row_number),
        active=active,
        status=status,
        name=(row.get("name") or "").strip(),
        user_id=(row.get("user_id") or "").strip() or None,
    )


def _parse_completion_row(row: dict, row_number: int) -> Completion:
    missing = [field for field in _COMPLETION_FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        completed_at = datetime.fromisoformat(row["completed_at"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: malformed completed_at") from exc

    return Completion(
        action_id=row["action_id"].strip(),
        period_key=row["period_key"].strip(),
        completed_at=completed_at,
        user_id=(row.get("user_id") or "").strip() or None,
    )


def _parse(file_path: str, parse_row) -> list:
    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        records = []
        for row_number, row in enumerate(reader, start=2):
            records.append(parse_row(row, row_number))
    logger.debug("Loaded %d rows from %s", len(records), file_path)
    return records


def parse_actions(file_path: str) -> list[Action]:
    """Parse a CSV file of actions."""

    return _parse(file_path, _parse_action_row)


def parse_completions(file_path: str) -> list[Completion]:
    """Parse a CSV file of completions."""

    return _parse(file_path, _parse_completion_row)
