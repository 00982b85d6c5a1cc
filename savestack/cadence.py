"""Convert recurring amounts to weekly equivalents."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .config import EngineConfig, get_engine_config

logger = logging.getLogger(__name__)

CADENCES = ('weekly', 'biweekly', 'semimonthly', 'monthly', 'annual')

# Accepted spellings beyond the canonical keywords
CADENCE_ALIASES = {
    'yearly': 'annual',
    'daily': 'daily',
}

# Free-text labels from spreadsheets, checked in order
FREQUENCY_KEYWORDS = (
    ('semi', 'semimonthly'),
    ('twice a month', 'semimonthly'),
    ('bi', 'biweekly'),
    ('fortnight', 'biweekly'),
    ('every other week', 'biweekly'),
    ('week', 'weekly'),
    ('month', 'monthly'),
    ('annual', 'annual'),
    ('year', 'annual'),
    ('day', 'daily'),
    ('daily', 'daily'),
)


class InvalidCadence(ValueError):
    """Raised in strict mode for a cadence keyword the engine doesn't know."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unrecognized cadence {value!r}; expected one of {', '.join(CADENCES)}")
        self.value = value


def _weekly_factors(config: EngineConfig) -> Dict[str, float]:
    per_month = config.weeks_per_month
    return {
        'weekly': 1.0,
        'biweekly': 1 / 2,
        'semimonthly': 2 / per_month,
        'monthly': 1 / per_month,
        'annual': 1 / config.weeks_per_year,
        'daily': float(config.days_per_week),
    }


def parse_cadence(value: object) -> str:
    """Return the canonical cadence keyword for ``value``.

    Raises:
        InvalidCadence: if ``value`` is not a known cadence or alias.
    """
    key = str(value or '').strip().lower()
    key = CADENCE_ALIASES.get(key, key)
    if key in CADENCES or key == 'daily':
        return key
    raise InvalidCadence(value)


def normalize_to_weekly(
    amount: float,
    cadence: str,
    *,
    strict: bool = False,
    config: Optional[EngineConfig] = None,
) -> float:
    """Convert ``amount`` paid every ``cadence`` into a weekly amount.

    An unknown cadence passes ``amount`` through unchanged unless ``strict``
    is set, in which case :class:`InvalidCadence` is raised.

    Example:
        >>> round(normalize_to_weekly(2000, 'monthly'), 2)
        460.3
    """
    cfg = get_engine_config(config)
    try:
        key = parse_cadence(cadence)
    except InvalidCadence:
        if strict:
            raise
        logger.warning("Unknown cadence %r; treating %.2f as a weekly amount", cadence, amount)
        return amount
    return amount * _weekly_factors(cfg)[key]


def normalize_frequency(text: Optional[str], default: str = 'monthly') -> str:
    """Map a free-text frequency label ("Bi-Weekly", "Every month") to a cadence.

    Example:
        >>> normalize_frequency('Semi-Monthly')
        'semimonthly'
    """
    if not text or not str(text).strip():
        return default
    lowered = str(text).strip().lower()
    try:
        return parse_cadence(lowered)
    except InvalidCadence:
        pass
    for keyword, cadence in FREQUENCY_KEYWORDS:
        if keyword in lowered:
            return cadence
    return default
