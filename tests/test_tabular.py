import io
from datetime import date

import pytest

from savestack.models import LineItem
from savestack.tabular import budget_template, export_report, read_budget_table

TODAY = date(2024, 1, 1)

HEADER = 'Category,Type,Amount,Frequency,Description\n'


def test_template_parses_back_into_budget():
    template = budget_template(today=TODAY)
    assert template.startswith(HEADER)

    budget = read_budget_table(template)
    assert [i.source for i in budget.incomes] == ['Salary', 'Side Hustle']
    assert len(budget.fixed_expenses) == 6
    assert [g.name for g in budget.goals] == ['Emergency Fund', 'Vacation', 'Laptop']
    assert budget.goals[0].due_date == date(2024, 12, 31)
    assert all(g.due_date > TODAY for g in budget.goals)


def test_frequency_labels_and_currency_amounts():
    text = HEADER + (
        'Paycheck,Income,"$1,500.00",Bi-Weekly,\n'
        'Gym,Fixed Expense,40,Every month,\n'
        'Car Insurance,Fixed Expense,600,Annually,\n'
    )
    budget = read_budget_table(io.StringIO(text))
    assert budget.incomes[0].amount == 1500.0
    assert budget.incomes[0].cadence == 'biweekly'
    assert [e.cadence for e in budget.fixed_expenses] == ['monthly', 'annual']


def test_blank_and_zero_amounts_are_skipped():
    text = HEADER + 'Salary,Income,3000,Monthly,\nOld Bill,Fixed Expense,0,Monthly,\nTBD,Fixed Expense,,Monthly,\n'
    budget = read_budget_table(text)
    assert len(budget.incomes) == 1
    assert budget.fixed_expenses == []


def test_unknown_type_names_the_row():
    text = HEADER + 'Salary,Income,3000,Monthly,\nStocks,Investment,100,Monthly,\n'
    with pytest.raises(ValueError, match='Row 3'):
        read_budget_table(text)


def test_goal_without_date_is_rejected():
    text = HEADER + 'Trip,Goal,900,Monthly,\n'
    with pytest.raises(ValueError, match='ISO due date'):
        read_budget_table(text)


def test_missing_columns_are_rejected():
    with pytest.raises(ValueError, match='Frequency'):
        read_budget_table('Category,Type,Amount\nSalary,Income,10\n')


def test_read_from_file(tmp_path):
    path = tmp_path / 'budget.csv'
    path.write_text(budget_template(today=TODAY), encoding='utf-8')
    budget = read_budget_table(str(path))
    assert len(budget.incomes) == 2


def test_export_report_rows():
    items = [
        LineItem('Rent', 40000, 42000),
        LineItem('Groceries', 10000, 9000),
        LineItem('Bonus', 0, 5000),
    ]
    lines = export_report(items).splitlines()
    assert lines[0] == 'Category,Planned ($),Actual ($),Variance ($),Variance (%)'
    assert lines[1] == 'Rent,400.00,420.00,20.00,5.0%'
    assert lines[2] == 'Groceries,100.00,90.00,-10.00,-10.0%'
    assert lines[3] == 'Bonus,0.00,50.00,50.00,0.0%'


def test_export_report_empty():
    assert export_report([]).splitlines() == ['Category,Planned ($),Actual ($),Variance ($),Variance (%)']
