"""Heuristic 0-100 budget health score.

The score starts at 50 and each rule below adds or subtracts independently,
so one budget can collect several bonuses and penalties at once:

* income tier: > 1000 -> +20, > 500 -> +10
* expenses / income: < 0.5 -> +20, < 0.7 -> +10, > 0.9 -> -20
* savings / income: > 0.2 -> +15, > 0.1 -> +10, < 0.05 -> -15
* variance / expenses: < 0.1 -> +15, < 0.2 -> +5, > 0.5 -> -15
"""

from __future__ import annotations

import math
from typing import Optional

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100


def _ratio(numerator: float, denominator: float) -> Optional[float]:
    # Zero denominators: infinite for a positive numerator, otherwise no signal
    if denominator > 0:
        return numerator / denominator
    if numerator > 0:
        return math.inf
    return None


def _income_points(income: float) -> int:
    if income > 1000:
        return 20
    if income > 500:
        return 10
    return 0


def _expense_points(ratio: Optional[float]) -> int:
    if ratio is None:
        return 0
    if ratio < 0.5:
        return 20
    if ratio < 0.7:
        return 10
    if ratio > 0.9:
        return -20
    return 0


def _savings_points(ratio: Optional[float]) -> int:
    if ratio is None:
        return 0
    if ratio > 0.2:
        return 15
    if ratio > 0.1:
        return 10
    if ratio < 0.05:
        return -15
    return 0


def _accuracy_points(ratio: Optional[float]) -> int:
    if ratio is None:
        return 0
    if ratio < 0.1:
        return 15
    if ratio < 0.2:
        return 5
    if ratio > 0.5:
        return -15
    return 0


def score(income: float, expenses: float, savings: float, variance: float) -> int:
    """Score a budget from its planned totals and plan-vs-actual expense variance.

    Args:
        income: Planned income for the period
        expenses: Planned expenses for the period
        savings: Planned savings for the period
        variance: Absolute difference between actual and planned expenses

    Returns:
        Integer score clamped to [0, 100]

    Example:
        >>> score(1200, 500, 300, 20)
        100
        >>> score(0, 0, 0, 0)
        50
    """
    total = BASE_SCORE
    total += _income_points(income)
    total += _expense_points(_ratio(expenses, income))
    total += _savings_points(_ratio(savings, income))
    total += _accuracy_points(_ratio(abs(variance), expenses))
    return max(MIN_SCORE, min(MAX_SCORE, total))
