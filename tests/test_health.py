import pytest

from savestack.health import score


def test_strong_budget_is_capped_at_100():
    assert score(income=1200, expenses=500, savings=300, variance=20) == 100


def test_empty_budget_is_neutral():
    assert score(0, 0, 0, 0) == 50


def test_expenses_without_income_are_penalised():
    # expense ratio is infinite; variance 0 of 100 still counts as accurate
    assert score(income=0, expenses=100, savings=0, variance=0) == 45


def test_weak_budget_is_clamped_at_zero():
    assert score(income=400, expenses=380, savings=10, variance=300) == 0


def test_rules_stack_independently():
    # +10 income, +10 expenses (0.6), +10 savings (0.15), +5 accuracy (0.15)
    assert score(income=800, expenses=480, savings=120, variance=72) == 85


@pytest.mark.parametrize(
    'income, expenses, savings, variance',
    [
        (0, 0, 0, 0),
        (0, 500, 100, 1000),
        (100000, 0, 0, 0),
        (50, 10000, 0, 10000),
        (2500, 2400, 50, -300),
    ],
)
def test_score_stays_in_bounds(income, expenses, savings, variance):
    assert 0 <= score(income, expenses, savings, variance) <= 100
