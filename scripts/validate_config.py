#!/usr/bin/env python3
"""Lightweight validator for the engine defaults JSON."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

CONFIG_FILE = Path(__file__).resolve().parents[1] / "savestack" / "config" / "engine.json"


def validate_engine_config(data: Dict[str, Any]) -> List[str]:
    errors = []

    allocation = data.get("allocation")
    if not isinstance(allocation, dict):
        errors.append("missing 'allocation' block")
    else:
        save_rate = allocation.get("default_save_rate")
        if not isinstance(save_rate, (int, float)) or not 0 <= save_rate <= 1:
            errors.append("allocation.default_save_rate must be a number in [0, 1]")
        splits = allocation.get("default_splits")
        if not isinstance(splits, dict) or not splits:
            errors.append("allocation.default_splits must be a non-empty dictionary")
        else:
            negative = [name for name, pct in splits.items() if not isinstance(pct, (int, float)) or pct < 0]
            if negative:
                errors.append(f"allocation.default_splits has invalid percentages: {', '.join(negative)}")
            elif sum(splits.values()) <= 0:
                errors.append("allocation.default_splits must sum to a positive total")

    cadence = data.get("cadence", {})
    for key in ("weeks_per_month", "weeks_per_year", "days_per_week"):
        value = cadence.get(key)
        if not isinstance(value, (int, float)) or value <= 0:
            errors.append(f"cadence.{key} must be a positive number")

    limits = data.get("free_limits", {})
    for key in ("incomes", "fixed_expenses", "goals"):
        if not isinstance(limits.get(key), int) or limits[key] < 0:
            errors.append(f"free_limits.{key} must be a non-negative integer")

    projection = data.get("projection", {})
    for scenario in projection.get("scenarios", []):
        if "name" not in scenario or not isinstance(scenario.get("rate"), (int, float)):
            errors.append(f"projection scenario {scenario!r} needs a name and a numeric rate")

    return errors


def main(argv: List[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else CONFIG_FILE
    if not path.exists():
        print(f"Config file not found: {path}")
        return 1

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in {path}: {exc}")
        return 1

    errors = validate_engine_config(data)
    if errors:
        print(f"Config validation failed for {path.name}:")
        for message in errors:
            print(f"  - {message}")
        return 1

    print("Engine config validated successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
