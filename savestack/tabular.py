"""Spreadsheet import template, import parsing and report export.

Import format (one row per line item)::

    Category,Type,Amount,Frequency,Description

``Type`` is Income, Fixed Expense or Goal. ``Frequency`` is a cadence
keyword, or for goals the ISO due date.

Export format (one row per stored category)::

    Category,Planned ($),Actual ($),Variance ($),Variance (%)
"""

from __future__ import annotations

import io
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from .cadence import normalize_frequency
from .dates import today_or
from .formatting import format_percent
from .models import (
    BudgetInput,
    ExpenseLine,
    GoalLine,
    IncomeLine,
    LineItem,
    VariablePreferences,
)

logger = logging.getLogger(__name__)

IMPORT_COLUMNS = ['Category', 'Type', 'Amount', 'Frequency', 'Description']
EXPORT_COLUMNS = ['Category', 'Planned ($)', 'Actual ($)', 'Variance ($)', 'Variance (%)']

ROW_TYPES = {
    'income': 'income',
    'fixed expense': 'fixed_expense',
    'fixed': 'fixed_expense',
    'expense': 'fixed_expense',
    'bill': 'fixed_expense',
    'goal': 'goal',
}

# (category, type, amount, frequency or days until due, description)
_TEMPLATE_ROWS = (
    ('Salary', 'Income', 4000, 'Monthly', 'Primary job salary'),
    ('Side Hustle', 'Income', 800, 'Monthly', 'Freelance work'),
    ('Rent', 'Fixed Expense', 1200, 'Monthly', 'Monthly apartment rent'),
    ('Car Payment', 'Fixed Expense', 350, 'Monthly', 'Auto loan payment'),
    ('Insurance', 'Fixed Expense', 200, 'Monthly', 'Auto and health insurance'),
    ('Phone', 'Fixed Expense', 80, 'Monthly', 'Cell phone bill'),
    ('Utilities', 'Fixed Expense', 150, 'Monthly', 'Electric gas water'),
    ('Internet', 'Fixed Expense', 60, 'Monthly', 'Internet service'),
    ('Emergency Fund', 'Goal', 10000, 365, '6 months expenses'),
    ('Vacation', 'Goal', 3000, 180, 'Summer vacation fund'),
    ('Laptop', 'Goal', 1500, 90, 'New work laptop'),
)


def budget_template(today: Optional[date] = None) -> str:
    """CSV template users fill in; goal due dates are relative to ``today``."""
    start = today_or(today)
    rows = []
    for category, row_type, amount, frequency, description in _TEMPLATE_ROWS:
        if row_type == 'Goal':
            frequency = (start + timedelta(days=frequency)).isoformat()
        rows.append([category, row_type, amount, frequency, description])
    df = pd.DataFrame(rows, columns=IMPORT_COLUMNS)
    return df.to_csv(index=False, lineterminator='\n')


def _read_frame(path_or_buffer) -> pd.DataFrame:
    if isinstance(path_or_buffer, str) and '\n' in path_or_buffer:
        path_or_buffer = io.StringIO(path_or_buffer)
    elif isinstance(path_or_buffer, str):
        path_or_buffer = Path(path_or_buffer)
    df = pd.read_csv(path_or_buffer, dtype=str, keep_default_na=False, skipinitialspace=True)
    df.columns = [str(col).strip() for col in df.columns]
    missing = [col for col in IMPORT_COLUMNS[:4] if col not in df.columns]
    if missing:
        raise ValueError(f"Budget table is missing required columns: {', '.join(missing)}")
    return df


def _parse_amount(raw: str, row_number: int) -> float:
    cleaned = ''.join(ch for ch in str(raw) if ch.isdigit() or ch in '.-')
    if not cleaned:
        return 0.0
    try:
        return float(cleaned)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: amount {raw!r} is not a number") from exc


def read_budget_table(path_or_buffer, default_prefs: Optional[VariablePreferences] = None) -> BudgetInput:
    """Parse an import table into a :class:`BudgetInput`.

    Args:
        path_or_buffer: File path, open text buffer, or CSV text
        default_prefs: Preferences to attach to the result (no splits and the
            engine default save rate when omitted)

    Raises:
        ValueError: on missing columns, unknown row types, bad amounts or
            goal rows without an ISO due date
    """
    df = _read_frame(path_or_buffer)
    incomes: List[IncomeLine] = []
    expenses: List[ExpenseLine] = []
    goals: List[GoalLine] = []

    # header is row 1
    for row_number, row in enumerate(df.to_dict('records'), start=2):
        category = str(row.get('Category', '')).strip() or f"Item {row_number - 1}"
        amount = _parse_amount(row.get('Amount', ''), row_number)
        if amount <= 0:
            logger.info("Skipping row %d (%s): amount is zero or blank", row_number, category)
            continue

        raw_type = str(row.get('Type', '')).strip().lower()
        row_type = ROW_TYPES.get(raw_type)
        if row_type is None:
            raise ValueError(f"Row {row_number}: unknown type {row.get('Type')!r}")

        frequency = str(row.get('Frequency', '')).strip()
        if row_type == 'income':
            incomes.append(IncomeLine(amount=amount, cadence=normalize_frequency(frequency), source=category))
        elif row_type == 'fixed_expense':
            expenses.append(ExpenseLine(name=category, amount=amount, cadence=normalize_frequency(frequency)))
        else:
            try:
                due = date.fromisoformat(frequency[:10])
            except ValueError as exc:
                raise ValueError(f"Row {row_number}: goal {category!r} needs an ISO due date, got {frequency!r}") from exc
            goals.append(GoalLine(name=category, target_amount=amount, due_date=due))

    logger.debug("Imported %d incomes, %d expenses, %d goals", len(incomes), len(expenses), len(goals))
    return BudgetInput(
        incomes=incomes,
        fixed_expenses=expenses,
        variable_preferences=default_prefs or VariablePreferences(),
        goals=goals,
    )


def report_frame(line_items: Iterable[LineItem]) -> pd.DataFrame:
    """Planned vs actual rows for the export, one per category."""
    rows = []
    for item in line_items:
        planned = item.planned
        actual = item.actual
        variance = actual - planned
        variance_pct = (variance / planned) * 100 if planned > 0 else 0.0
        rows.append({
            'Category': item.category,
            'Planned ($)': f"{planned:.2f}",
            'Actual ($)': f"{actual:.2f}",
            'Variance ($)': f"{variance:.2f}",
            'Variance (%)': format_percent(variance_pct),
        })
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_report(line_items: Iterable[LineItem]) -> str:
    """CSV report of planned vs actual per category."""
    return report_frame(line_items).to_csv(index=False, lineterminator='\n')
