"""Command line entry point (``savestack``).

Examples::

    savestack plan budget.json --tier pro
    savestack plan budget.csv --save alice
    savestack project 1000 --rate 0.07 --years 20 --contribution 200
    savestack template > budget.csv
    savestack report alice --week 2024-01-01
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from . import plan_storage, settings
from .allocation import build_budget, check_free_limits
from .balance import plan_to_line_items
from .dates import current_week_start
from .models import BudgetInput
from .projection import project_horizons, scenario_projections, simulate_contributions
from .tabular import budget_template, export_report, read_budget_table
from .tips import is_paid_tier

logger = logging.getLogger(__name__)


def load_budget_input(path: Path) -> BudgetInput:
    """Read a budget from a JSON record or a CSV import table."""
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    if path.suffix.lower() == '.csv':
        return read_budget_table(str(path))
    with path.open('r', encoding='utf-8') as handle:
        return BudgetInput.from_dict(json.load(handle))


def _cmd_plan(args: argparse.Namespace) -> int:
    budget_input = load_budget_input(Path(args.input))
    today = date.fromisoformat(args.today) if args.today else None

    if not is_paid_tier(args.tier):
        limits = check_free_limits(budget_input)
        if not limits.ok:
            print(f"Warning: input exceeds free plan limits ({limits.reason})", file=sys.stderr)

    result = build_budget(budget_input, args.tier, today=today)
    print(json.dumps(result.to_dict(), indent=2))

    if args.save:
        week = current_week_start(today).isoformat()
        plan_storage.upsert_plan(args.save, week, plan_to_line_items(result.plan, budget_input, today=today))
        print(f"Saved plan for {args.save} (week of {week})", file=sys.stderr)
    return 0


def _cmd_project(args: argparse.Namespace) -> int:
    if args.principal < 0:
        raise ValueError("Principal must be non-negative")

    if args.contribution is None:
        horizons = [args.years] if args.years is not None else None
        values = project_horizons(args.principal, horizons, args.rate)
        print(json.dumps({str(years): value for years, value in values.items()}, indent=2))
        return 0

    years = args.years if args.years is not None else 10
    projection = simulate_contributions(args.principal, args.contribution, args.rate, years)
    print(f"Final amount:        {projection.final_amount:,.2f}")
    print(f"Total contributions: {projection.total_contributions:,.2f}")
    print(f"Total growth:        {projection.total_growth:,.2f}")
    print()
    print(projection.breakdown.to_string(index=False))
    print()
    print(scenario_projections(args.principal, args.contribution, years).to_string(index=False))
    return 0


def _cmd_template(args: argparse.Namespace) -> int:
    sys.stdout.write(budget_template())
    return 0


def _cmd_report(args: argparse.Namespace) -> int:
    week = args.week
    if week is None:
        weeks = plan_storage.list_weeks(args.user)
        if not weeks:
            raise ValueError(f"No stored plans for {args.user}")
        week = weeks[0]
    items = plan_storage.load_plan(args.user, week)
    if not items:
        raise ValueError(f"No stored plan for {args.user} in week {week}")
    sys.stdout.write(export_report(items))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='savestack', description='Weekly budget allocation and projections.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    plan = subparsers.add_parser('plan', help='Compute a weekly plan from a JSON or CSV budget')
    plan.add_argument('input', help='Budget input (.json record or .csv import table)')
    plan.add_argument('--tier', default='free', help='Plan tier: free, pro or family')
    plan.add_argument('--save', metavar='USER', help='Store the plan line items for USER')
    plan.add_argument('--today', help='Reference date (YYYY-MM-DD) for goal deadlines')
    plan.set_defaults(func=_cmd_plan)

    project = subparsers.add_parser('project', help='Project compound growth')
    project.add_argument('principal', type=float, help='Starting balance')
    project.add_argument('--rate', type=float, default=None, help='Annual rate, e.g. 0.08')
    project.add_argument('--years', type=int, default=None, help='Years to project')
    project.add_argument('--contribution', type=float, default=None, help='Monthly contribution')
    project.set_defaults(func=_cmd_project)

    template = subparsers.add_parser('template', help='Print the CSV import template')
    template.set_defaults(func=_cmd_template)

    report = subparsers.add_parser('report', help='Export a stored plan as CSV')
    report.add_argument('user', help='User id the plan was saved under')
    report.add_argument('--week', help='Week start (YYYY-MM-DD); defaults to the latest stored week')
    report.set_defaults(func=_cmd_report)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format='%(levelname)s %(name)s: %(message)s',
    )
    try:
        return args.func(args)
    except (ValueError, FileNotFoundError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    raise SystemExit(main())
