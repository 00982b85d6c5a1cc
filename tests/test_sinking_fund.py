import logging
from datetime import date

import pytest

from savestack.dates import current_week_end, current_week_start, weeks_until
from savestack.models import GoalLine
from savestack.sinking_fund import total_weekly_requirement, weekly_requirement

TODAY = date(2024, 1, 1)


def _goal(target=1200.0, due=date(2024, 3, 25), name='Vacation'):
    return GoalLine(name=name, target_amount=target, due_date=due)


def test_goal_due_today_requires_full_target():
    assert weekly_requirement(_goal(due=TODAY), today=TODAY) == pytest.approx(1200.0)


def test_overdue_goal_is_clamped_to_one_week(caplog):
    with caplog.at_level(logging.WARNING, logger='savestack.sinking_fund'):
        result = weekly_requirement(_goal(due=date(2023, 12, 1)), today=TODAY)
    assert result == pytest.approx(1200.0)
    assert 'Vacation' in caplog.text


def test_partial_weeks_round_up():
    assert weeks_until(date(2024, 1, 15), today=TODAY) == 2
    assert weeks_until(date(2024, 1, 16), today=TODAY) == 3
    assert weeks_until(date(2024, 1, 2), today=TODAY) == 1
    assert weekly_requirement(_goal(target=300, due=date(2024, 1, 16)), today=TODAY) == pytest.approx(100.0)


def test_total_requirement_sums_goals():
    goals = [
        _goal(target=1200, due=date(2024, 3, 25)),  # 12 weeks
        _goal(target=1500, due=date(2024, 1, 29), name='Laptop'),  # 4 weeks
    ]
    assert total_weekly_requirement(goals, today=TODAY) == pytest.approx(100.0 + 375.0)
    assert total_weekly_requirement([], today=TODAY) == 0


def test_week_bounds_are_monday_to_sunday():
    wednesday = date(2024, 1, 3)
    assert current_week_start(wednesday) == date(2024, 1, 1)
    assert current_week_end(wednesday) == date(2024, 1, 7)
