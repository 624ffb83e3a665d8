"""JSON adapter for exported actions and completions."""

from __future__ import annotations

import json
import logging
from datetime import datetime

from habit_engine.schema import FREQUENCY_TYPES, STATUSES, Action, Completion

logger = logging.getLogger(__name__)

_ACTION_FIELDS = {"id", "frequency_type"}
_COMPLETION_FIELDS = {"actionId", "periodKey", "completedAt"}
_TRUE_VALUES = {"1", "true", "yes"}
_FALSE_VALUES = {"0", "false", "no"}


def _parse_days(raw, index: int) -> frozenset[int] | None:
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"Item {index}: frequency_days must be a list")
    try:
        days = frozenset(int(day) for day in raw)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: invalid frequency_days") from exc
    if any(day < 0 or day > 6 for day in days):
        raise ValueError(f"Item {index}: frequency_days must be within 0-6")
    return days


def _parse_active(raw, index: int) -> bool:
    if raw is None or isinstance(raw, bool):
        return raw is not False
    if isinstance(raw, str) and raw.strip().lower() in _TRUE_VALUES | _FALSE_VALUES:
        return raw.strip().lower() in _TRUE_VALUES
    raise ValueError(f"Item {index}: invalid active")


def _parse_interval(raw, index: int) -> int:
    if raw in (None, ""):
        return 1
    try:
        return int(raw)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: invalid frequency_interval") from exc


def _parse_action(item: dict, index: int) -> Action:
    missing = [field for field in _ACTION_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    frequency_type = str(item["frequency_type"]).strip()
    if frequency_type not in FREQUENCY_TYPES:
        raise ValueError(f"Item {index}: invalid frequency_type '{frequency_type}'")

    status = item.get("status")
    if status is not None and status not in STATUSES:
        raise ValueError(f"Item {index}: invalid status '{status}'")

    return Action(
        action_id=str(item["id"]).strip(),
        frequency_type=frequency_type,
        frequency_interval=_parse_interval(item.get("frequency_interval"), index),
        frequency_days=_parse_days(item.get("frequency_days"), index),
        active=_parse_active(item.get("active"), index),
        status=status,
        name=str(item.get("name") or ""),
        user_id=item.get("userId"),
    )


def _parse_completion(item: dict, index: int) -> Completion:
    missing = [field for field in _COMPLETION_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        completed_at = datetime.fromisoformat(item["completedAt"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: malformed completedAt") from exc

    return Completion(
        action_id=str(item["actionId"]).strip(),
        period_key=str(item["periodKey"]).strip(),
        completed_at=completed_at,
        user_id=item.get("userId"),
    )


def _load_list(file_path: str) -> list:
    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")
    return payload


def parse_actions(file_path: str) -> list[Action]:
    """Parse a JSON export of action documents."""

    actions = [_parse_action(item, i) for i, item in enumerate(_load_list(file_path), start=1)]
    logger.debug("Loaded %d actions from %s", len(actions), file_path)
    return actions


def parse_completions(file_path: str) -> list[Completion]:
    """Parse a JSON export of action completion documents."""

    completions = [_parse_completion(item, i) for i, item in enumerate(_load_list(file_path), start=1)]
    logger.debug("Loaded %d completions from %s", len(completions), file_path)
    return completions
