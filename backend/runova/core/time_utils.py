from datetime import date, timedelta

from runova.core.constants import DAYS_PER_WEEK, DEFAULT_PLAN_WEEKS, PLAN_DURATION_WEEKS


def plan_weeks(goal: str | None) -> int:
    """Plan length in weeks for a goal category; unknown goals get the default."""
    return PLAN_DURATION_WEEKS.get(goal or "", DEFAULT_PLAN_WEEKS)


def sunday_of(d: date) -> date:
    """Start of the calendar week containing `d`.

    Weeks start on Sunday (Sunday = day 1 of a plan week).
    Example: 2025-03-26 (Wed) -> 2025-03-23
    """
    # weekday(): Monday = 0 ... Sunday = 6
    return d - timedelta(days=(d.weekday() + 1) % DAYS_PER_WEEK)


def week_days(week_start: date) -> list[date]:
    """The seven dates of the week starting at `week_start`."""
    return [week_start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]


def plan_window(weeks: int, race_date: date | None, today: date) -> tuple[date, date]:
    """Return (start_date, end_date) for a plan of `weeks` weeks.

    With a race date the plan ends on race day; otherwise it starts today.
    Example: 10 weeks, race 2025-06-01 -> (2025-03-23, 2025-06-01)
    """
    span = timedelta(weeks=weeks)
    start = race_date - span if race_date is not None else today
    return start, start + span


def workout_date(week_anchor: date, day: int) -> date:
    """Date of a workout scheduled on `day` (1..7) of the week at `week_anchor`."""
    return week_anchor + timedelta(days=day - 1)
