"""Planned vs actual analysis for a stored weekly plan.

Works on persisted line items: per-category variance, how much each
spending category could realistically be trimmed, a handful of what-if
scenarios and short insight strings. Line items are weekly, so monthly
figures shown to users are weekly values x 4.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import pandas as pd

from .balance import ASSETS, LIABILITIES, SAVINGS, classify_line
from .formatting import format_currency, round_half_up
from .models import LineItem

WEEKS_PER_MONTH_DISPLAY = 4

# (keywords, share of the planned amount that can be trimmed)
OPTIMIZATION_RULES = (
    (('eating out', 'eating_out', 'restaurant'), 0.5),
    (('fun', 'entertainment'), 0.3),
    (('groceries', 'food'), 0.15),
    (('misc', 'shopping'), 0.4),
    (('gas', 'transport'), 0.2),
)

ANALYSIS_COLUMNS = [
    'Category', 'Planned', 'Actual', 'Variance', 'Variance %', 'Optimization Potential', 'Overspending',
]


@dataclass
class Scenario:
    title: str
    description: str
    monthly_extra: int
    categories: List[str] = field(default_factory=list)
    achievability: str = 'moderate'


def optimization_potential(category: str, planned: float, variance: float) -> float:
    """How much of a category's weekly plan could be trimmed.

    Example:
        >>> optimization_potential('Eating Out', 40.0, 0.0)
        20.0
        >>> optimization_potential('Rent', 400.0, 25.0)
        25.0
    """
    lowered = category.lower()
    for keywords, share in OPTIMIZATION_RULES:
        if any(keyword in lowered for keyword in keywords):
            return planned * share
    return max(0.0, variance)


def _monthly(weekly: float) -> int:
    return round_half_up(weekly * WEEKS_PER_MONTH_DISPLAY)


class PlanAnalytics:
    """Planned vs actual analytics for one weekly plan."""

    def __init__(self, line_items: Iterable[LineItem]):
        self.items = list(line_items)
        self.data = self._frame()

    def _frame(self) -> pd.DataFrame:
        rows = [
            {
                'Category': item.category,
                'Bucket': classify_line(item),
                'Planned': item.planned,
                'Actual': item.actual,
            }
            for item in self.items
        ]
        df = pd.DataFrame(rows, columns=['Category', 'Bucket', 'Planned', 'Actual'])
        df['Variance'] = df['Actual'] - df['Planned']
        return df

    def totals(self) -> Dict[str, float]:
        planned = self.data.groupby('Bucket')['Planned'].sum()
        income = float(planned.get(ASSETS, 0.0))
        expenses = float(planned.get(LIABILITIES, 0.0))
        savings = float(planned.get(SAVINGS, 0.0))
        return {
            'income': income,
            'expenses': expenses,
            'savings': savings,
            'surplus': income - expenses - savings,
        }

    def category_analysis(self) -> pd.DataFrame:
        """Expense categories with variance and optimisation potential."""
        expenses = self.data[self.data['Bucket'] == LIABILITIES].copy()
        if expenses.empty:
            return pd.DataFrame(columns=ANALYSIS_COLUMNS)
        planned = expenses['Planned']
        expenses['Variance %'] = (expenses['Variance'] / planned.where(planned > 0) * 100).fillna(0.0)
        expenses['Optimization Potential'] = [
            optimization_potential(row['Category'], row['Planned'], row['Variance'])
            for _, row in expenses.iterrows()
        ]
        expenses['Overspending'] = expenses['Variance'] > 0
        return expenses[ANALYSIS_COLUMNS].reset_index(drop=True)

    def scenarios(self) -> List[Scenario]:
        """Up to three what-if scenarios for freeing up money each month."""
        analysis = self.category_analysis()
        totals = self.totals()
        scenarios: List[Scenario] = []

        overspending = analysis[analysis['Overspending'].astype(bool)]
        if not overspending.empty:
            worst = overspending.sort_values('Variance', ascending=False).iloc[0]
            scenarios.append(Scenario(
                title='Fix Overspending',
                description=f"Reduce {worst['Category']} back to planned amount",
                monthly_extra=_monthly(worst['Variance']),
                categories=[worst['Category']],
                achievability='easy',
            ))

        top = analysis.sort_values('Optimization Potential', ascending=False, kind='stable').head(2)
        if not top.empty:
            scenarios.append(Scenario(
                title='Smart Optimization',
                description=f"Optimize {' & '.join(top['Category'])}",
                monthly_extra=_monthly(top['Optimization Potential'].sum()),
                categories=list(top['Category']),
                achievability='moderate',
            ))

        potential = float(analysis['Optimization Potential'].sum()) if not analysis.empty else 0.0
        if totals['surplus'] > 0:
            scenarios.append(Scenario(
                title='Maximum Potential',
                description='Use surplus + optimize all categories',
                monthly_extra=_monthly(totals['surplus'] + potential * 0.5),
                categories=['All categories'],
                achievability='challenging',
            ))
        else:
            scenarios.append(Scenario(
                title='Deep Optimization',
                description='Optimize all spending categories',
                monthly_extra=_monthly(potential * 0.7),
                categories=list(analysis['Category']),
                achievability='challenging',
            ))

        if len(scenarios) < 3:
            scenarios.append(Scenario(
                title='Side Income',
                description='Add part-time income stream',
                monthly_extra=round_half_up(totals['income'] * 0.3),
                categories=['Income'],
                achievability='moderate',
            ))
        return scenarios[:3]

    def insights(self) -> List[str]:
        """At most three short observations about the plan."""
        analysis = self.category_analysis()
        totals = self.totals()
        insights: List[str] = []

        surplus = totals['surplus']
        if surplus > 0:
            insights.append(f"You have {format_currency(_monthly(surplus), decimals=0)}/month in unallocated income")
        elif surplus < -10:
            insights.append(f"Your budget is over by {format_currency(_monthly(abs(surplus)), decimals=0)}/month")

        if totals['income'] > 0:
            savings_rate = totals['savings'] / totals['income'] * 100
            if savings_rate < 10:
                insights.append(f"Your savings rate is {savings_rate:.1f}% - aim for 20%+")
            elif savings_rate > 25:
                insights.append(f"Great job! {savings_rate:.1f}% savings rate is excellent")

        overspending = analysis[analysis['Overspending'].astype(bool)]
        if not overspending.empty:
            overspend = _monthly(overspending['Variance'].sum())
            insights.append(
                f"You're overspending by {format_currency(overspend, decimals=0)}/month "
                f"in {len(overspending)} categories"
            )

        potential = float(analysis['Optimization Potential'].sum()) if not analysis.empty else 0.0
        if potential > 25:
            insights.append(
                f"You could potentially save {format_currency(_monthly(potential), decimals=0)}/month "
                "with smart optimizations"
            )
        return insights[:3]
