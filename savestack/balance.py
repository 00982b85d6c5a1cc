"""Balance-sheet view over persisted plan line items.

Line items created by :func:`plan_to_line_items` carry an explicit
:class:`~savestack.models.LineKind` and are bucketed by it. Items without a
kind (older stored plans, hand-entered rows) fall back to matching keywords in
the category name, which misfiles renamed categories such as "Nest Egg".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

from .cadence import normalize_to_weekly
from .config import EngineConfig, get_engine_config
from .formatting import to_cents
from .health import score
from .models import BudgetInput, LineItem, LineKind, WeeklyPlan
from .sinking_fund import weekly_requirement

INCOME_KEYWORDS = ('income',)
SAVINGS_KEYWORDS = ('save', 'stack')
SAVINGS_CATEGORY = 'Save n Stack'

ASSETS = 'assets'
LIABILITIES = 'liabilities'
SAVINGS = 'savings'


@dataclass
class BalanceBuckets:
    assets: List[LineItem] = field(default_factory=list)
    liabilities: List[LineItem] = field(default_factory=list)
    savings: List[LineItem] = field(default_factory=list)


@dataclass
class BucketTotals:
    items: List[LineItem]
    total_planned: float
    total_actual: float

    @property
    def variance(self) -> float:
        return round(self.total_actual - self.total_planned, 2)


@dataclass
class BalanceSheet:
    assets: BucketTotals
    liabilities: BucketTotals
    savings: BucketTotals
    net_worth_planned: float
    net_worth_actual: float
    savings_rate: float
    health_score: int

    def to_dict(self) -> Dict[str, Any]:
        def _bucket(totals: BucketTotals) -> Dict[str, Any]:
            return {
                'items': [
                    {'name': item.category, 'planned': item.planned, 'actual': item.actual}
                    for item in totals.items
                ],
                'total_planned': totals.total_planned,
                'total_actual': totals.total_actual,
                'variance': totals.variance,
            }

        return {
            'assets': _bucket(self.assets),
            'liabilities': _bucket(self.liabilities),
            'savings': _bucket(self.savings),
            'net_worth': {
                'planned': self.net_worth_planned,
                'actual': self.net_worth_actual,
                'savings_rate': self.savings_rate,
            },
            'health_score': self.health_score,
        }


def classify_line(item: LineItem) -> str:
    """Bucket name for a single line item.

    Example:
        >>> classify_line(LineItem('Side Income', 10000))
        'assets'
        >>> classify_line(LineItem('Save n Stack', 5000))
        'savings'
        >>> classify_line(LineItem('Salary', 10000, kind=LineKind.INCOME))
        'assets'
    """
    if item.kind is not None:
        if item.kind == LineKind.INCOME:
            return ASSETS
        if item.kind == LineKind.SAVINGS:
            return SAVINGS
        return LIABILITIES

    name = item.category.lower()
    if any(keyword in name for keyword in INCOME_KEYWORDS):
        return ASSETS
    if any(keyword in name for keyword in SAVINGS_KEYWORDS):
        return SAVINGS
    return LIABILITIES


def categorize(line_items: Iterable[LineItem]) -> BalanceBuckets:
    """Split line items into assets, liabilities and savings."""
    buckets = BalanceBuckets()
    for item in line_items:
        getattr(buckets, classify_line(item)).append(item)
    return buckets


def _totals(items: List[LineItem]) -> BucketTotals:
    return BucketTotals(
        items=items,
        total_planned=round(sum(item.planned for item in items), 2),
        total_actual=round(sum(item.actual for item in items), 2),
    )


def build_balance_sheet(line_items: Iterable[LineItem]) -> BalanceSheet:
    """Planned vs actual totals per bucket plus net worth and health score."""
    buckets = categorize(line_items)
    assets = _totals(buckets.assets)
    liabilities = _totals(buckets.liabilities)
    savings = _totals(buckets.savings)

    income = assets.total_planned
    savings_rate = (savings.total_planned / income) * 100 if income > 0 else 0.0
    return BalanceSheet(
        assets=assets,
        liabilities=liabilities,
        savings=savings,
        net_worth_planned=round(income - liabilities.total_planned, 2),
        net_worth_actual=round(assets.total_actual - liabilities.total_actual, 2),
        savings_rate=round(savings_rate, 2),
        health_score=score(
            income=income,
            expenses=liabilities.total_planned,
            savings=savings.total_planned,
            variance=abs(liabilities.total_actual - liabilities.total_planned),
        ),
    )


def plan_to_line_items(
    plan: WeeklyPlan,
    budget_input: BudgetInput,
    *,
    today: Optional[date] = None,
    config: Optional[EngineConfig] = None,
) -> List[LineItem]:
    """Line items to persist for a computed plan, tagged with their kind.

    One line per income source and fixed expense (weekly equivalents), one per
    variable allocation, one savings line per goal set-aside and the
    "Save n Stack" line. Pass the ``today`` and ``config`` the plan was
    computed with so the stored lines add up to the plan's income.
    """
    cfg = get_engine_config(config)
    items: List[LineItem] = []
    for index, income in enumerate(budget_input.incomes, start=1):
        items.append(LineItem(
            category=income.source or f"Income {index}",
            planned_cents=to_cents(normalize_to_weekly(income.amount, income.cadence, config=cfg)),
            kind=LineKind.INCOME,
        ))
    for expense in budget_input.fixed_expenses:
        items.append(LineItem(
            category=expense.name,
            planned_cents=to_cents(normalize_to_weekly(expense.amount, expense.cadence, config=cfg)),
            kind=LineKind.FIXED_EXPENSE,
        ))
    for allocation in plan.allocations:
        items.append(LineItem(
            category=allocation.label,
            planned_cents=to_cents(allocation.amount),
            kind=LineKind.VARIABLE,
        ))
    for goal in budget_input.goals:
        items.append(LineItem(
            category=goal.name,
            planned_cents=to_cents(weekly_requirement(goal, today=today)),
            kind=LineKind.SAVINGS,
        ))
    items.append(LineItem(
        category=SAVINGS_CATEGORY,
        planned_cents=to_cents(plan.save_amount),
        kind=LineKind.SAVINGS,
    ))
    return items


def weekly_history(budgets: Mapping[str, Iterable[LineItem]], weeks_back: Optional[int] = None) -> pd.DataFrame:
    """Summarise stored weekly plans, most recent week first.

    Args:
        budgets: Mapping of week start (ISO date) to that week's line items
        weeks_back: Keep only the most recent N weeks

    Returns:
        DataFrame with columns week, income, expenses, savings,
        savings_rate (percent) and net_worth
    """
    columns = ['week', 'income', 'expenses', 'savings', 'savings_rate', 'net_worth']
    rows = []
    for week, items in budgets.items():
        sheet = build_balance_sheet(items)
        rows.append({
            'week': week,
            'income': sheet.assets.total_planned,
            'expenses': sheet.liabilities.total_planned,
            'savings': sheet.savings.total_planned,
            'savings_rate': sheet.savings_rate,
            'net_worth': sheet.net_worth_planned,
        })
    history = pd.DataFrame(rows, columns=columns)
    if history.empty:
        return history
    history = history.sort_values('week', ascending=False).reset_index(drop=True)
    if weeks_back is not None:
        history = history.head(weeks_back)
    return history
