"""Plotly figure builders for plans, projections and balance sheets.

Each function takes an engine result (a :class:`WeeklyPlan`, a projection
breakdown DataFrame, the scenario table or a :class:`BalanceSheet`) and
returns a ``plotly.graph_objects.Figure``. Nothing is rendered here; callers
decide whether to show, write or serialise the figure.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .balance import BalanceSheet
from .models import WeeklyPlan

OVER_PLAN_COLOR = '#d62728'
UNDER_PLAN_COLOR = '#2ca02c'


def _empty_figure(title: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title or "No data to display")
    return fig


def create_allocation_donut(plan: WeeklyPlan, title: str | None = None) -> go.Figure:
    """Donut of where a week's money goes.

    Parameters
    ----------
    plan : WeeklyPlan
        Computed weekly plan.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Slices for fixed expenses, goals, savings and every variable category
        with a positive amount.
    """
    title = title or "Weekly allocation"
    slices = [('Fixed Expenses', plan.fixed), ('Goals', plan.sinking), ('Savings', plan.save_amount)]
    slices.extend((allocation.label, allocation.amount) for allocation in plan.allocations)
    df = pd.DataFrame(slices, columns=['Category', 'Amount'])
    df = df[df['Amount'] > 0]
    if df.empty:
        return _empty_figure(title)
    fig = px.pie(df, names='Category', values='Amount', hole=0.5)
    fig.update_layout(title=title)
    return fig


def create_projection_chart(breakdown: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Stacked view of a contribution simulation.

    Parameters
    ----------
    breakdown : pandas.DataFrame
        ``ContributionProjection.breakdown`` (one row per year).
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Year-end balance line over cumulative contributions and growth bars.
    """
    title = title or "Projected growth"
    if breakdown is None or breakdown.empty:
        return _empty_figure(title)
    years = breakdown['year']
    fig = go.Figure()
    fig.add_trace(go.Bar(x=years, y=breakdown['yearly_contributions'].cumsum(), name='Contributions'))
    fig.add_trace(go.Bar(x=years, y=breakdown['yearly_growth'].cumsum(), name='Growth'))
    fig.add_trace(go.Scatter(x=years, y=breakdown['year_end_balance'], name='Balance', mode='lines+markers'))
    fig.update_layout(title=title, barmode='stack', xaxis_title='Year', yaxis_title='Amount ($)')
    return fig


def create_scenario_chart(scenarios: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Compare final amounts across growth scenarios."""
    title = title or "Growth scenarios"
    if scenarios is None or scenarios.empty:
        return _empty_figure(title)
    fig = px.bar(
        scenarios,
        x='scenario',
        y=['total_contributions', 'total_growth'],
        barmode='stack',
    )
    fig.update_layout(title=title, xaxis_title='Scenario', yaxis_title='Final amount ($)', legend_title='')
    return fig


def create_balance_sheet_chart(sheet: BalanceSheet, title: str | None = None) -> go.Figure:
    """Planned vs actual per bucket; actual bars are red when over plan."""
    title = title or "Planned vs actual"
    buckets = [('Assets', sheet.assets), ('Liabilities', sheet.liabilities), ('Savings', sheet.savings)]
    if not any(totals.items for _, totals in buckets):
        return _empty_figure(title)
    names = [name for name, _ in buckets]
    planned = np.array([totals.total_planned for _, totals in buckets])
    actual = np.array([totals.total_actual for _, totals in buckets])
    colors = np.where(actual > planned, OVER_PLAN_COLOR, UNDER_PLAN_COLOR)

    fig = go.Figure()
    fig.add_trace(go.Bar(x=names, y=planned, name='Planned', marker_color='#1f77b4'))
    fig.add_trace(go.Bar(x=names, y=actual, name='Actual', marker_color=colors.tolist()))
    fig.update_layout(title=title, barmode='group', yaxis_title='Weekly amount ($)')
    return fig
