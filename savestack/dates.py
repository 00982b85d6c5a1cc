"""Week arithmetic shared by the sinking-fund calculator and plan storage."""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Optional


def today_or(today: Optional[date] = None) -> date:
    return today if today is not None else date.today()


def weeks_until(due_date: date, today: Optional[date] = None) -> int:
    """Whole weeks from ``today`` until ``due_date``, never less than one.

    Example:
        >>> weeks_until(date(2024, 1, 15), today=date(2024, 1, 1))
        2
    """
    days = max(0, (due_date - today_or(today)).days)
    return max(1, math.ceil(days / 7))


def current_week_start(today: Optional[date] = None) -> date:
    """Monday of the week containing ``today``."""
    day = today_or(today)
    return day - timedelta(days=day.weekday())


def current_week_end(today: Optional[date] = None) -> date:
    """Sunday of the week containing ``today``."""
    return current_week_start(today) + timedelta(days=6)
