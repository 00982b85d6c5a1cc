import pytest

from savestack.config import EngineConfig
from savestack.projection import (
    BREAKDOWN_COLUMNS,
    future_value,
    project_horizons,
    required_contribution,
    scenario_projections,
    simulate_contributions,
)


def test_future_value_compounds_yearly():
    assert future_value(100, 0.08, 1) == 108.0
    assert future_value(100, 0.08, 10) == 215.89


def test_future_value_defaults_to_configured_rate():
    assert future_value(100, years=1) == 108.0
    assert future_value(100, years=1, config=EngineConfig(default_annual_rate=0.05)) == 105.0


def test_zero_rate_or_zero_years_keeps_principal():
    assert future_value(250, 0.0, 30) == 250.0
    assert future_value(250, 0.08, 0) == 250.0


def test_project_horizons_uses_configured_horizons():
    values = project_horizons(100, annual_rate=0.08)
    assert list(values) == [1, 5, 10, 20, 30]
    assert values[1] == 108.0
    assert values[5] == 146.93
    assert values[10] == 215.89
    assert list(values.values()) == sorted(values.values())


def test_simulation_without_growth_sums_contributions():
    result = simulate_contributions(0, 100, 0.0, years=1)
    assert result.final_amount == 1200.0
    assert result.total_contributions == 1200.0
    assert result.total_growth == 0.0
    assert list(result.breakdown.columns) == BREAKDOWN_COLUMNS
    assert len(result.breakdown) == 1


def test_simulation_contributes_before_growth():
    result = simulate_contributions(0, 100, 0.12, years=1, periods_per_year=1)
    assert result.final_amount == 112.0
    assert result.total_growth == 12.0


def test_simulation_accepts_rate_per_year():
    result = simulate_contributions(1000, 0, 0.12, years=2, rates=[0.0])
    breakdown = result.breakdown
    assert breakdown.loc[0, 'yearly_growth'] == 0.0
    assert breakdown.loc[0, 'year_end_balance'] == 1000.0
    assert breakdown.loc[1, 'yearly_growth'] > 0
    assert result.final_amount == breakdown.loc[1, 'year_end_balance']


def test_required_contribution():
    assert required_contribution(1200, 1, 0.0) == 100.0
    assert required_contribution(500, 0) == 500.0
    with_growth = required_contribution(10000, 5, 0.06)
    assert 0 < with_growth < 10000 / 60


def test_scenarios_rank_by_rate():
    table = scenario_projections(1000, 100, 10)
    assert list(table['scenario']) == ['Conservative', 'Moderate', 'Aggressive']
    assert list(table['rate']) == pytest.approx([0.04, 0.07, 0.10])
    assert table['final_amount'].is_monotonic_increasing
    assert (table['total_contributions'] == 1000 + 100 * 12 * 10).all()
