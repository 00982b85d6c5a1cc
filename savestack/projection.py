"""Compound-growth projections.

``future_value`` is the closed-form estimate used for "what does this save
become" surfaces. ``simulate_contributions`` steps through every period
(contribution first, then growth) so a per-period contribution and a rate
per year can be modelled and audited row by row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

import pandas as pd

from .config import EngineConfig, get_engine_config
from .formatting import round_money

BREAKDOWN_COLUMNS = ['year', 'year_end_balance', 'yearly_growth', 'yearly_contributions']


@dataclass
class ContributionProjection:
    final_amount: float
    total_contributions: float
    total_growth: float
    breakdown: pd.DataFrame


def _rate(annual_rate: Optional[float], config: Optional[EngineConfig]) -> float:
    if annual_rate is None:
        return get_engine_config(config).default_annual_rate
    return annual_rate


def future_value(
    principal: float,
    annual_rate: Optional[float] = None,
    years: float = 1,
    *,
    config: Optional[EngineConfig] = None,
) -> float:
    """Grow ``principal`` at ``annual_rate`` compounded yearly for ``years``.

    Example:
        >>> future_value(100, 0.08, 10)
        215.89
    """
    rate = _rate(annual_rate, config)
    return round_money(principal * (1 + rate) ** years)


def project_horizons(
    principal: float,
    horizons: Optional[Iterable[int]] = None,
    annual_rate: Optional[float] = None,
    *,
    config: Optional[EngineConfig] = None,
) -> Dict[int, float]:
    """Future value of ``principal`` at each horizon (years).

    Example:
        >>> project_horizons(100, [1, 10], 0.08)
        {1: 108.0, 10: 215.89}
    """
    cfg = get_engine_config(config)
    years = list(horizons) if horizons is not None else list(cfg.projection_horizons)
    return {int(h): future_value(principal, annual_rate, h, config=cfg) for h in years}


def simulate_contributions(
    principal: float,
    contribution: float,
    annual_rate: Optional[float] = None,
    years: int = 10,
    *,
    periods_per_year: int = 12,
    rates: Optional[Sequence[float]] = None,
    config: Optional[EngineConfig] = None,
) -> ContributionProjection:
    """Simulate a starting balance plus a fixed contribution every period.

    Args:
        principal: Starting balance
        contribution: Amount added at the start of every period
        annual_rate: Annual growth rate (defaults to the configured rate)
        years: Number of whole years to simulate
        periods_per_year: 12 for monthly contributions, 52 for weekly
        rates: Optional annual rate per year; years beyond its length use
            ``annual_rate``

    Returns:
        ContributionProjection with a yearly breakdown DataFrame
    """
    base_rate = _rate(annual_rate, config)
    balance = float(principal)
    rows = []

    for year in range(1, int(years) + 1):
        year_rate = rates[year - 1] if rates is not None and year <= len(rates) else base_rate
        period_rate = year_rate / periods_per_year
        yearly_growth = 0.0
        yearly_contributions = 0.0

        for _ in range(periods_per_year):
            balance += contribution
            yearly_contributions += contribution
            growth = balance * period_rate
            balance += growth
            yearly_growth += growth

        rows.append({
            'year': year,
            'year_end_balance': round_money(balance),
            'yearly_growth': round_money(yearly_growth),
            'yearly_contributions': round_money(yearly_contributions),
        })

    total_contributions = principal + contribution * periods_per_year * int(years)
    return ContributionProjection(
        final_amount=round_money(balance),
        total_contributions=round_money(total_contributions),
        total_growth=round_money(balance - total_contributions),
        breakdown=pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS),
    )


def required_contribution(
    target: float,
    years: float,
    annual_rate: Optional[float] = None,
    *,
    periods_per_year: int = 12,
    config: Optional[EngineConfig] = None,
) -> float:
    """Per-period payment needed to reach ``target`` after ``years``.

    Example:
        >>> required_contribution(1200, 1, 0.0)
        100.0
    """
    periods = years * periods_per_year
    if periods <= 0:
        return round_money(target)
    period_rate = _rate(annual_rate, config) / periods_per_year
    if period_rate == 0:
        return round_money(target / periods)
    return round_money(target * period_rate / ((1 + period_rate) ** periods - 1))


def scenario_projections(
    principal: float,
    contribution: float,
    years: int,
    *,
    config: Optional[EngineConfig] = None,
) -> pd.DataFrame:
    """One row per configured growth scenario (name, rate, final amount, growth)."""
    cfg = get_engine_config(config)
    rows = []
    for scenario in cfg.scenarios:
        result = simulate_contributions(
            principal, contribution, float(scenario['rate']), years, config=cfg
        )
        rows.append({
            'scenario': scenario['name'],
            'rate': float(scenario['rate']),
            'final_amount': result.final_amount,
            'total_contributions': result.total_contributions,
            'total_growth': result.total_growth,
        })
    return pd.DataFrame(rows, columns=['scenario', 'rate', 'final_amount', 'total_contributions', 'total_growth'])
