from savestack.allocation import compute_weekly_plan
from savestack.config import EngineConfig
from savestack.models import BudgetInput, IncomeLine, WeeklyPlan
from savestack.tips import (
    HEALTHY_TIP,
    LOW_SAVINGS_TIP,
    SHORTFALL_TIP,
    TIGHT_BUDGET_TIP,
    classify_status,
    diagnose,
    generate_tips,
    is_paid_tier,
)


def test_status_rules_in_order():
    assert classify_status(income=1000, savings=0, remainder=0) == 'critical'
    assert classify_status(income=1000, savings=100, remainder=150) == 'warning'
    assert classify_status(income=1000, savings=100, remainder=500) == 'warning'
    assert classify_status(income=1000, savings=200, remainder=500) == 'healthy'


def test_headline_tip_matches_status():
    assert generate_tips(1000, 1200, 0, 0, 'free') == [SHORTFALL_TIP]
    assert generate_tips(1000, 850, 30, 150, 'free') == [TIGHT_BUDGET_TIP]
    assert generate_tips(1000, 300, 100, 700, 'free') == [LOW_SAVINGS_TIP]
    assert generate_tips(1000, 300, 200, 700, 'free') == [HEALTHY_TIP]


def test_paid_tier_gets_capped_trim_tip():
    tips = generate_tips(1000, 300, 200, 700, 'pro')
    assert tips == [HEALTHY_TIP, 'Consider reducing eating out by $20/week to boost your savings.']


def test_trim_tip_needs_variable_spending_over_threshold():
    assert generate_tips(1000, 300, 200, 700, 'pro', variable_total=100) == [HEALTHY_TIP]
    tips = generate_tips(1000, 300, 200, 700, 'pro', variable_total=150)
    assert tips[-1] == 'Consider reducing eating out by $8/week to boost your savings.'


def test_trim_category_comes_from_config():
    config = EngineConfig(trim_category='fun')
    tips = generate_tips(1000, 300, 200, 700, 'pro', config=config)
    assert tips[-1] == 'Consider reducing fun by $20/week to boost your savings.'


def test_any_non_free_tier_is_paid():
    assert not is_paid_tier('free')
    assert not is_paid_tier(' FREE ')
    assert not is_paid_tier(None)
    assert is_paid_tier('pro')
    assert is_paid_tier('family')


def test_diagnose_uses_rounded_plan():
    budget = BudgetInput(incomes=[IncomeLine(1000, 'weekly')])
    plan = compute_weekly_plan(budget, 'free')
    diagnostics = diagnose(plan, 'free')
    assert diagnostics.status == 'healthy'
    assert diagnostics.tips == [HEALTHY_TIP]


def test_diagnose_treats_sub_cent_remainder_as_shortfall():
    plan = WeeklyPlan(income=100.0, fixed=100.0, sinking=0.0, remainder=0.0, save_amount=0.0, variable_total=0.0)
    assert diagnose(plan, 'pro').status == 'critical'
