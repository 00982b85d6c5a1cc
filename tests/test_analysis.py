import pytest

from savestack.analysis import PlanAnalytics, optimization_potential
from savestack.models import LineItem, LineKind


def _items():
    return [
        LineItem('Paycheck', 100000, 100000, LineKind.INCOME),
        LineItem('Rent', 40000, 40000, LineKind.FIXED_EXPENSE),
        LineItem('Eating Out', 4000, 6000, LineKind.VARIABLE),
        LineItem('Groceries', 10000, 9000, LineKind.VARIABLE),
        LineItem('Save n Stack', 10000, 10000, LineKind.SAVINGS),
    ]


def test_optimization_potential_rules():
    assert optimization_potential('Eating Out', 40.0, 0.0) == pytest.approx(20.0)
    assert optimization_potential('Fun', 100.0, 0.0) == pytest.approx(30.0)
    assert optimization_potential('Gas', 50.0, 0.0) == pytest.approx(10.0)
    assert optimization_potential('Rent', 400.0, 25.0) == pytest.approx(25.0)
    assert optimization_potential('Rent', 400.0, -25.0) == 0.0


def test_totals_by_bucket():
    totals = PlanAnalytics(_items()).totals()
    assert totals == {'income': 1000.0, 'expenses': 540.0, 'savings': 100.0, 'surplus': 360.0}


def test_category_analysis():
    analysis = PlanAnalytics(_items()).category_analysis()
    assert list(analysis['Category']) == ['Rent', 'Eating Out', 'Groceries']

    eating_out = analysis[analysis['Category'] == 'Eating Out'].iloc[0]
    assert eating_out['Variance'] == pytest.approx(20.0)
    assert eating_out['Variance %'] == pytest.approx(50.0)
    assert eating_out['Optimization Potential'] == pytest.approx(20.0)
    assert bool(eating_out['Overspending'])

    assert analysis['Overspending'].sum() == 1


def test_scenarios():
    scenarios = PlanAnalytics(_items()).scenarios()
    assert [s.title for s in scenarios] == ['Fix Overspending', 'Smart Optimization', 'Maximum Potential']
    assert scenarios[0].monthly_extra == 80
    assert scenarios[0].categories == ['Eating Out']
    assert scenarios[1].monthly_extra == 140
    assert scenarios[1].categories == ['Eating Out', 'Groceries']
    assert scenarios[2].monthly_extra == 1510


def test_insights():
    insights = PlanAnalytics(_items()).insights()
    assert insights == [
        'You have $1,440/month in unallocated income',
        "You're overspending by $80/month in 1 categories",
        'You could potentially save $140/month with smart optimizations',
    ]


def test_empty_plan():
    analytics = PlanAnalytics([])
    assert analytics.category_analysis().empty
    assert [s.title for s in analytics.scenarios()] == ['Deep Optimization', 'Side Income']
    assert analytics.insights() == []
