"""JSON-file store for weekly plan line items, keyed by user and week."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import settings
from .models import LineItem

logger = logging.getLogger(__name__)


def _target(path: Optional[Path]) -> Path:
    return Path(path) if path else settings.PLANS_PATH


def _read_store(path: Optional[Path] = None) -> Dict[str, Dict[str, List[Dict[str, Any]]]]:
    target = _target(path)
    if not target.exists():
        return {}
    try:
        with target.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable plan store %s: %s", target, exc)
        return {}
    if not isinstance(data, dict):
        return {}
    return {
        str(user): weeks
        for user, weeks in data.items()
        if isinstance(weeks, dict)
    }


def _write_store(store: Dict[str, Dict[str, List[Dict[str, Any]]]], path: Optional[Path] = None) -> None:
    target = _target(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open('w', encoding='utf-8') as handle:
        json.dump(store, handle, indent=2, sort_keys=True)


def upsert_plan(user_id: str, week_start: str, line_items: List[LineItem], path: Optional[Path] = None) -> None:
    """Replace the stored line items for ``(user_id, week_start)``."""
    store = _read_store(path)
    store.setdefault(str(user_id), {})[str(week_start)] = [item.to_dict() for item in line_items]
    _write_store(store, path)
    logger.debug("Stored %d line items for %s week %s", len(line_items), user_id, week_start)


def load_plan(user_id: str, week_start: str, path: Optional[Path] = None) -> List[LineItem]:
    rows = _read_store(path).get(str(user_id), {}).get(str(week_start)) or []
    return [LineItem.from_dict(row) for row in rows if isinstance(row, dict)]


def delete_plan(user_id: str, week_start: str, path: Optional[Path] = None) -> bool:
    """Remove a stored week. Returns False when nothing was stored."""
    store = _read_store(path)
    weeks = store.get(str(user_id), {})
    if str(week_start) not in weeks:
        return False
    del weeks[str(week_start)]
    if not weeks:
        store.pop(str(user_id), None)
    _write_store(store, path)
    return True


def list_weeks(user_id: str, path: Optional[Path] = None) -> List[str]:
    """Stored week starts for a user, most recent first."""
    return sorted(_read_store(path).get(str(user_id), {}), reverse=True)


def load_history(user_id: str, path: Optional[Path] = None) -> Dict[str, List[LineItem]]:
    """Every stored week for a user, for :func:`savestack.balance.weekly_history`."""
    weeks = _read_store(path).get(str(user_id), {})
    return {
        week: [LineItem.from_dict(row) for row in rows if isinstance(row, dict)]
        for week, rows in weeks.items()
    }
