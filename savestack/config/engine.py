"""Typed view of the engine defaults.

Every engine entry point takes an optional :class:`EngineConfig`; when it is
omitted the packaged ``engine.json`` is used, so callers and tests share one
source of truth for category splits, divisors and free-tier limits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

from .defaults import get_engine_settings


@dataclass
class EngineConfig:
    default_save_rate: float = 0.20
    default_splits: Dict[str, float] = field(default_factory=dict)
    weeks_per_month: float = 4.345
    weeks_per_year: float = 52.0
    days_per_week: int = 7
    free_limits: Dict[str, int] = field(default_factory=dict)
    trim_category: str = 'eating_out'
    trim_threshold: float = 100.0
    trim_rate: float = 0.05
    trim_cap: float = 20.0
    default_annual_rate: float = 0.08
    projection_horizons: Tuple[int, ...] = (1, 5, 10, 20, 30)
    scenarios: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngineConfig':
        allocation = data.get('allocation', {})
        cadence = data.get('cadence', {})
        tips = data.get('tips', {})
        projection = data.get('projection', {})
        return cls(
            default_save_rate=float(allocation.get('default_save_rate', 0.20)),
            default_splits={k: float(v) for k, v in allocation.get('default_splits', {}).items()},
            weeks_per_month=float(cadence.get('weeks_per_month', 4.345)),
            weeks_per_year=float(cadence.get('weeks_per_year', 52)),
            days_per_week=int(cadence.get('days_per_week', 7)),
            free_limits={k: int(v) for k, v in data.get('free_limits', {}).items()},
            trim_category=str(tips.get('trim_category', 'eating_out')),
            trim_threshold=float(tips.get('trim_threshold', 100)),
            trim_rate=float(tips.get('trim_rate', 0.05)),
            trim_cap=float(tips.get('trim_cap', 20)),
            default_annual_rate=float(projection.get('default_annual_rate', 0.08)),
            projection_horizons=tuple(int(h) for h in projection.get('horizons', (1, 5, 10, 20, 30))),
            scenarios=[dict(s) for s in projection.get('scenarios', [])],
        )


@lru_cache(maxsize=1)
def _packaged_config() -> EngineConfig:
    return EngineConfig.from_dict(get_engine_settings())


def get_engine_config(config: Optional[EngineConfig] = None) -> EngineConfig:
    """Return ``config`` when given, otherwise the packaged defaults."""
    return config if config is not None else _packaged_config()
