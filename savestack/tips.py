"""Status and advisory tips for a weekly plan."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .config import EngineConfig, get_engine_config
from .formatting import format_currency, round_half_up
from .models import Diagnostics, WeeklyPlan

SHORTFALL_TIP = 'Your fixed expenses exceed your income. Consider reducing bills or increasing income.'
TIGHT_BUDGET_TIP = 'Very tight budget. Look for ways to reduce fixed expenses.'
LOW_SAVINGS_TIP = 'Try to save at least 15% of your income for financial security.'
HEALTHY_TIP = 'Great job! You have a healthy budget with good savings.'

TIGHT_REMAINDER_RATIO = 0.2
MIN_SAVINGS_RATIO = 0.15


def is_paid_tier(plan_tier: Optional[str]) -> bool:
    return (plan_tier or 'free').strip().lower() != 'free'


def _status_and_tip(income: float, savings: float, remainder: float) -> Tuple[str, str]:
    if remainder <= 0:
        return 'critical', SHORTFALL_TIP
    if remainder < income * TIGHT_REMAINDER_RATIO:
        return 'warning', TIGHT_BUDGET_TIP
    if savings < income * MIN_SAVINGS_RATIO:
        return 'warning', LOW_SAVINGS_TIP
    return 'healthy', HEALTHY_TIP


def _evaluate(
    income: float,
    savings: float,
    remainder: float,
    plan_tier: Optional[str],
    variable_total: float,
    config: EngineConfig,
) -> Tuple[str, List[str]]:
    status, headline = _status_and_tip(income, savings, remainder)
    tips: List[str] = [headline]

    if is_paid_tier(plan_tier) and variable_total > config.trim_threshold:
        trim = min(config.trim_cap, round_half_up(variable_total * config.trim_rate))
        category = config.trim_category.replace('_', ' ')
        tips.append(
            f"Consider reducing {category} by {format_currency(trim, decimals=0)}/week to boost your savings."
        )
    return status, tips


def classify_status(income: float, savings: float, remainder: float) -> str:
    """First matching rule wins: critical, tight, low savings, healthy."""
    return _status_and_tip(income, savings, remainder)[0]


def generate_tips(
    income: float,
    fixed: float,
    savings: float,
    remainder: float,
    plan_tier: Optional[str],
    *,
    variable_total: Optional[float] = None,
    config: Optional[EngineConfig] = None,
) -> List[str]:
    """Advisory tips for a week's figures.

    ``fixed`` is accepted for parity with the plan record; the rules are driven
    by the remainder and savings relative to income. ``variable_total``
    defaults to ``remainder - savings``.
    """
    if variable_total is None:
        variable_total = max(0.0, remainder - savings)
    _, tips = _evaluate(income, savings, remainder, plan_tier, variable_total, get_engine_config(config))
    return tips


def diagnose(plan: WeeklyPlan, plan_tier: Optional[str], config: Optional[EngineConfig] = None) -> Diagnostics:
    # Status follows the cent-rounded figures the caller sees, so a sub-cent
    # remainder reads as critical.
    status, tips = _evaluate(
        plan.income,
        plan.save_amount,
        plan.remainder,
        plan_tier,
        plan.variable_total,
        get_engine_config(config),
    )
    return Diagnostics(status=status, tips=tips)
