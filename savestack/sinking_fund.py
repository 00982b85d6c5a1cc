"""Weekly set-asides needed to fund dated savings goals."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from .dates import today_or, weeks_until
from .models import GoalLine

logger = logging.getLogger(__name__)


def weekly_requirement(goal: GoalLine, *, today: Optional[date] = None) -> float:
    """Weekly contribution that reaches ``goal.target_amount`` by its due date.

    A goal due today or already overdue is spread over a single week, so the
    full target shows up as this week's requirement.

    Example:
        >>> goal = GoalLine('Laptop', 1500, date(2024, 6, 1))
        >>> weekly_requirement(goal, today=date(2024, 5, 4))
        375.0
    """
    current = today_or(today)
    if goal.due_date <= current:
        logger.warning(
            "Goal %r is due %s (today %s); requiring the full %.2f this week",
            goal.name, goal.due_date, current, goal.target_amount,
        )
    return goal.target_amount / weeks_until(goal.due_date, current)


def total_weekly_requirement(goals: Iterable[GoalLine], *, today: Optional[date] = None) -> float:
    return sum(weekly_requirement(goal, today=today) for goal in goals)
