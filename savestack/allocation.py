"""Weekly budget allocation.

This module turns a :class:`~savestack.models.BudgetInput` into a weekly
plan: every income and fixed expense is normalised to a weekly figure, goals
become sinking-fund requirements, and whatever is left is split between
savings and the variable spending categories.

Plan tiers gate which preferences are honoured. The ``free`` tier always uses
the default save rate and the built-in category splits; any other tier
applies the caller's preferences on top of the defaults.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional

from .cadence import normalize_to_weekly
from .config import EngineConfig, get_engine_config
from .formatting import category_label, round_money
from .models import (
    Allocation,
    BudgetInput,
    BudgetResult,
    LimitCheck,
    VariablePreferences,
    WeeklyPlan,
)
from .sinking_fund import total_weekly_requirement
from .tips import diagnose, is_paid_tier

logger = logging.getLogger(__name__)

LIMIT_REASONS = (
    ('incomes', 'INCOME_LIMIT'),
    ('fixed_expenses', 'BILL_LIMIT'),
    ('goals', 'GOAL_LIMIT'),
)


def resolve_save_rate(
    budget_input: BudgetInput,
    plan_tier: Optional[str],
    default_prefs: Optional[VariablePreferences] = None,
    config: Optional[EngineConfig] = None,
) -> float:
    """Save rate the engine will apply for ``plan_tier``.

    Free plans are locked to the configured default. Paid plans use the
    caller's rate, then ``default_prefs``, then the configured default.
    """
    cfg = get_engine_config(config)
    if not is_paid_tier(plan_tier):
        return cfg.default_save_rate
    preferred = budget_input.variable_preferences.save_rate
    if preferred is not None:
        return preferred
    if default_prefs is not None and default_prefs.save_rate is not None:
        return default_prefs.save_rate
    return cfg.default_save_rate


def resolve_splits(
    budget_input: BudgetInput,
    plan_tier: Optional[str],
    default_prefs: Optional[VariablePreferences] = None,
    config: Optional[EngineConfig] = None,
) -> Dict[str, float]:
    """Category percentages for the variable pool.

    Caller entries override matching default keys; defaults that aren't
    overridden stay in place and keep their order.

    Example:
        >>> prefs = VariablePreferences(splits={'fun': 0.3, 'pets': 0.1})
        >>> splits = resolve_splits(BudgetInput(variable_preferences=prefs), 'pro')
        >>> splits['fun'], splits['pets'], splits['groceries']
        (0.3, 0.1, 0.4)
    """
    cfg = get_engine_config(config)
    splits = dict(cfg.default_splits)
    if not is_paid_tier(plan_tier):
        return splits
    overrides = budget_input.variable_preferences.splits
    if not overrides and default_prefs is not None:
        overrides = default_prefs.splits
    splits.update(overrides or {})
    return splits


def _allocate(variable_total: float, splits: Dict[str, float]) -> List[Allocation]:
    total_pct = sum(splits.values())
    if not total_pct:
        logger.warning("Category splits sum to zero; normalising by 1")
        total_pct = 1
    return [
        Allocation(
            category=category,
            label=category_label(category),
            amount=round_money(variable_total * (pct / total_pct)),
        )
        for category, pct in splits.items()
    ]


def compute_weekly_plan(
    budget_input: BudgetInput,
    plan_tier: Optional[str],
    default_prefs: Optional[VariablePreferences] = None,
    *,
    today: Optional[date] = None,
    config: Optional[EngineConfig] = None,
) -> WeeklyPlan:
    """Compute the weekly plan for ``budget_input``.

    Args:
        budget_input: Incomes, fixed expenses, goals and preferences
        plan_tier: ``'free'`` or a paid tier name
        default_prefs: Fallback preferences for paid tiers
        today: Reference date for goal deadlines (defaults to today)
        config: Engine defaults (defaults to the packaged configuration)

    Returns:
        WeeklyPlan with figures rounded to cents. ``remainder`` is clamped
        to zero when obligations exceed income.

    Example:
        >>> from savestack.models import IncomeLine, ExpenseLine
        >>> budget = BudgetInput(
        ...     incomes=[IncomeLine(2000, 'monthly')],
        ...     fixed_expenses=[ExpenseLine('Rent', 800, 'monthly')],
        ... )
        >>> plan = compute_weekly_plan(budget, 'pro')
        >>> plan.income, plan.remainder, plan.save_amount
        (460.3, 276.18, 55.24)
    """
    cfg = get_engine_config(config)

    income = sum(normalize_to_weekly(line.amount, line.cadence, config=cfg) for line in budget_input.incomes)
    fixed = sum(normalize_to_weekly(line.amount, line.cadence, config=cfg) for line in budget_input.fixed_expenses)
    sinking = total_weekly_requirement(budget_input.goals, today=today)

    remainder = max(0.0, income - fixed - sinking)
    save_rate = resolve_save_rate(budget_input, plan_tier, default_prefs, cfg)
    save_amount = remainder * save_rate
    variable_total = remainder - save_amount

    splits = resolve_splits(budget_input, plan_tier, default_prefs, cfg)
    allocations = _allocate(variable_total, splits)

    logger.debug(
        "Weekly plan (%s): income=%.2f fixed=%.2f sinking=%.2f remainder=%.2f save_rate=%.2f",
        plan_tier, income, fixed, sinking, remainder, save_rate,
    )
    return WeeklyPlan(
        income=round_money(income),
        fixed=round_money(fixed),
        sinking=round_money(sinking),
        remainder=round_money(remainder),
        save_amount=round_money(save_amount),
        variable_total=round_money(variable_total),
        allocations=allocations,
    )


def build_budget(
    budget_input: BudgetInput,
    plan_tier: Optional[str],
    default_prefs: Optional[VariablePreferences] = None,
    *,
    today: Optional[date] = None,
    config: Optional[EngineConfig] = None,
) -> BudgetResult:
    """Run the full pipeline: weekly plan followed by status and tips."""
    plan = compute_weekly_plan(budget_input, plan_tier, default_prefs, today=today, config=config)
    return BudgetResult(plan=plan, diagnostics=diagnose(plan, plan_tier, config))


def check_free_limits(budget_input: BudgetInput, config: Optional[EngineConfig] = None) -> LimitCheck:
    """Check the input against free-tier line counts.

    Returns a result instead of raising so the caller can decide whether to
    block or just warn. Incomes are checked first, then bills, then goals.
    """
    cfg = get_engine_config(config)
    for attribute, reason in LIMIT_REASONS:
        limit = cfg.free_limits.get(attribute)
        if limit is not None and len(getattr(budget_input, attribute)) > limit:
            return LimitCheck(ok=False, reason=reason)
    return LimitCheck(ok=True)
