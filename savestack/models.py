"""Records exchanged with the budget engine.

Inputs mirror the JSON record callers send (``BudgetInput.from_dict``);
outputs serialise back to plain dictionaries with ``to_dict`` so they can be
stored or returned over an API unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional


def _parse_money(value: Any, field_name: str) -> float:
    if value is None or value == '':
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"'{field_name}' must be numeric, got {value!r}") from exc
    if amount < 0:
        raise ValueError(f"'{field_name}' must be non-negative, got {amount}")
    return amount


def _parse_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError as exc:
        raise ValueError(f"'{field_name}' must be an ISO date, got {value!r}") from exc


@dataclass
class IncomeLine:
    amount: float
    cadence: str
    source: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'IncomeLine':
        return cls(
            amount=_parse_money(data.get('amount'), 'amount'),
            cadence=str(data.get('cadence', 'monthly')),
            source=data.get('source'),
        )


@dataclass
class ExpenseLine:
    name: str
    amount: float
    cadence: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExpenseLine':
        return cls(
            name=str(data.get('name', '')),
            amount=_parse_money(data.get('amount'), 'amount'),
            cadence=str(data.get('cadence', 'monthly')),
        )


@dataclass
class GoalLine:
    name: str
    target_amount: float
    due_date: date

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GoalLine':
        return cls(
            name=str(data.get('name', '')),
            target_amount=_parse_money(data.get('target_amount'), 'target_amount'),
            due_date=_parse_date(data.get('due_date'), 'due_date'),
        )


@dataclass
class VariablePreferences:
    # None means "not supplied"; an explicit 0.0 is a real preference
    save_rate: Optional[float] = None
    splits: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'VariablePreferences':
        data = data or {}
        save_rate = data.get('save_rate')
        splits = data.get('splits') or {}
        if not isinstance(splits, dict):
            raise ValueError("'splits' must be a mapping of category to percentage")
        return cls(
            save_rate=None if save_rate is None else float(save_rate),
            splits={str(k): float(v) for k, v in splits.items()},
        )


@dataclass
class BudgetInput:
    incomes: List[IncomeLine] = field(default_factory=list)
    fixed_expenses: List[ExpenseLine] = field(default_factory=list)
    variable_preferences: VariablePreferences = field(default_factory=VariablePreferences)
    goals: List[GoalLine] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BudgetInput':
        """Build an input record from its JSON shape.

        Raises:
            ValueError: if a money field is non-numeric/negative or a due date
                is not an ISO date.
        """
        if not isinstance(data, dict):
            raise ValueError("Budget input must be a mapping")
        return cls(
            incomes=[IncomeLine.from_dict(row) for row in data.get('incomes') or []],
            fixed_expenses=[ExpenseLine.from_dict(row) for row in data.get('fixed_expenses') or []],
            variable_preferences=VariablePreferences.from_dict(data.get('variable_preferences')),
            goals=[GoalLine.from_dict(row) for row in data.get('goals') or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'incomes': [
                {'amount': i.amount, 'cadence': i.cadence, 'source': i.source}
                for i in self.incomes
            ],
            'fixed_expenses': [
                {'name': e.name, 'amount': e.amount, 'cadence': e.cadence}
                for e in self.fixed_expenses
            ],
            'variable_preferences': {
                'save_rate': self.variable_preferences.save_rate,
                'splits': dict(self.variable_preferences.splits),
            },
            'goals': [
                {'name': g.name, 'target_amount': g.target_amount, 'due_date': g.due_date.isoformat()}
                for g in self.goals
            ],
        }


@dataclass
class Allocation:
    category: str
    label: str
    amount: float


@dataclass
class WeeklyPlan:
    income: float
    fixed: float
    sinking: float
    remainder: float
    save_amount: float
    variable_total: float
    allocations: List[Allocation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'income': self.income,
            'fixed': self.fixed,
            'sinking': self.sinking,
            'remainder': self.remainder,
            'save_amount': self.save_amount,
            'variable_total': self.variable_total,
            'allocations': [
                {'category': a.category, 'label': a.label, 'amount': a.amount}
                for a in self.allocations
            ],
        }


@dataclass
class Diagnostics:
    status: str
    tips: List[str] = field(default_factory=list)


@dataclass
class BudgetResult:
    plan: WeeklyPlan
    diagnostics: Diagnostics

    def to_dict(self) -> Dict[str, Any]:
        return {
            'weekly': self.plan.to_dict(),
            'status': self.diagnostics.status,
            'tips': list(self.diagnostics.tips),
        }


@dataclass
class LimitCheck:
    ok: bool
    reason: Optional[str] = None


class LineKind(str, Enum):
    INCOME = 'income'
    FIXED_EXPENSE = 'fixed_expense'
    VARIABLE = 'variable'
    SAVINGS = 'savings'


@dataclass
class LineItem:
    """A persisted plan line: one category with planned/actual cents."""

    category: str
    planned_cents: int
    actual_cents: int = 0
    kind: Optional[LineKind] = None

    @property
    def planned(self) -> float:
        return self.planned_cents / 100

    @property
    def actual(self) -> float:
        return self.actual_cents / 100

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineItem':
        kind = data.get('kind')
        return cls(
            category=str(data.get('category', '')),
            planned_cents=int(data.get('planned_cents') or 0),
            actual_cents=int(data.get('actual_cents') or 0),
            kind=LineKind(kind) if kind else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'planned_cents': self.planned_cents,
            'actual_cents': self.actual_cents,
            'kind': self.kind.value if self.kind else None,
        }
