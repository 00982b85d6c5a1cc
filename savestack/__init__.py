"""Top-level package for the SaveStack budget engine.

The engine is a set of pure functions that turn declared income, fixed
expenses, savings goals and category preferences into a weekly spending
plan, diagnostics and compound-growth projections. The primary modules are:

* ``allocation`` - the weekly plan (``build_budget``) and free-tier limits
* ``cadence`` / ``sinking_fund`` - weekly normalisation and goal set-asides
* ``tips`` / ``health`` - status, advisory tips and the 0-100 health score
* ``projection`` - compound growth, contribution simulation and scenarios
* ``balance`` / ``analysis`` - views over persisted plan line items
* ``tabular`` / ``plan_storage`` / ``visualization`` - CSV, storage and charts

From the command line::

    savestack plan budget.json --tier pro
"""

from .allocation import build_budget, check_free_limits, compute_weekly_plan
from .balance import build_balance_sheet, categorize, plan_to_line_items
from .cadence import InvalidCadence, normalize_to_weekly
from .health import score as health_score
from .models import BudgetInput, BudgetResult, LineItem, LineKind, WeeklyPlan
from .projection import future_value, project_horizons, simulate_contributions
from .sinking_fund import weekly_requirement
from .tips import classify_status, generate_tips

__version__ = "0.1.0"

__all__ = [
    "BudgetInput",
    "BudgetResult",
    "InvalidCadence",
    "LineItem",
    "LineKind",
    "WeeklyPlan",
    "build_balance_sheet",
    "build_budget",
    "categorize",
    "check_free_limits",
    "classify_status",
    "compute_weekly_plan",
    "future_value",
    "generate_tips",
    "health_score",
    "normalize_to_weekly",
    "plan_to_line_items",
    "project_horizons",
    "simulate_contributions",
    "weekly_requirement",
]
