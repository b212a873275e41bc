from datetime import date

import pytest

from runova.core.time_utils import plan_weeks, plan_window, sunday_of, week_days, workout_date


@pytest.mark.parametrize(
    "goal, weeks",
    [("5k", 8), ("10k", 10), ("half_marathon", 12), ("marathon", 16), ("custom", 12), ("ultra", 12), (None, 12)],
)
def test_plan_weeks(goal, weeks):
    assert plan_weeks(goal) == weeks


def test_plan_window_with_race_date_ends_on_race_day():
    start, end = plan_window(10, date(2025, 6, 1), today=date(2025, 1, 1))
    assert start == date(2025, 3, 23)
    assert end == date(2025, 6, 1)


def test_plan_window_without_race_date_starts_today():
    start, end = plan_window(16, None, today=date(2025, 3, 26))
    assert start == date(2025, 3, 26)
    assert end == date(2025, 7, 16)


def test_sunday_of():
    assert sunday_of(date(2025, 3, 23)) == date(2025, 3, 23)  # Sunday
    assert sunday_of(date(2025, 3, 26)) == date(2025, 3, 23)  # Wednesday
    assert sunday_of(date(2025, 3, 29)) == date(2025, 3, 23)  # Saturday
    assert sunday_of(date(2025, 3, 24)) == date(2025, 3, 23)  # Monday


def test_week_days_and_workout_date():
    days = week_days(date(2025, 3, 23))
    assert len(days) == 7
    assert days[0] == date(2025, 3, 23)
    assert days[-1] == date(2025, 3, 29)
    assert workout_date(date(2025, 3, 23), 1) == date(2025, 3, 23)
    assert workout_date(date(2025, 3, 23), 7) == date(2025, 3, 29)
