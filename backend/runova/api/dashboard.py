from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from runova.api.deps import CurrentUser, get_current_user, get_today
from runova.core.time_utils import sunday_of, week_days
from runova.core.units import convert_between, format_distance
from runova.db import get_db
from runova.models.training_plan import TrainingPlan
from runova.models.workout_log import WorkoutLog
from runova.schemas.common import DistanceUnit
from runova.schemas.dashboard import CalendarDay, DashboardRead, PlanProgress
from runova.schemas.plan import PlanRead
from runova.schemas.workout import WorkoutRead


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def plan_progress(workouts: list[WorkoutLog]) -> PlanProgress:
    total = len(workouts)
    completed = sum(1 for w in workouts if w.completed)
    percentage = (completed / total) * 100 if total > 0 else 0.0
    return PlanProgress(completed=completed, total=total, percentage=round(percentage, 1))


def bucket_by_day(
    workouts: list[WorkoutLog],
    week_start: date,
    plan_unit: str,
    display_unit: str,
) -> list[CalendarDay]:
    """Group workouts into the seven days starting at `week_start`.

    Each day carries its total planned distance, converted from the plan's
    unit to `display_unit`.
    """
    by_date: dict[date, list[WorkoutLog]] = {d: [] for d in week_days(week_start)}
    for w in workouts:
        if w.date in by_date:
            by_date[w.date].append(w)

    days = []
    for d, items in by_date.items():
        distances = [w.planned_distance for w in items if w.planned_distance is not None]
        total = convert_between(sum(distances), plan_unit, display_unit) if distances else None
        days.append(
            CalendarDay(
                date=d,
                workouts=[WorkoutRead.model_validate(w) for w in items],
                planned_distance=format_distance(total, display_unit),
            )
        )
    return days


@router.get("/", response_model=DashboardRead)
def get_dashboard(
    week_start: Optional[date] = Query(None),
    unit: Optional[DistanceUnit] = Query(None),
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Active plan, one calendar week of its workouts, and overall progress.

      GET /dashboard?week_start=2025-03-23&unit=km
    Any date is snapped to the Sunday starting its week; defaults to this week.
    Day labels use `unit` if given, else the plan's own unit.
    """
    wk = sunday_of(week_start or today)

    plan = (
        db.query(TrainingPlan)
        .filter(TrainingPlan.user_id == user.id)
        .filter(TrainingPlan.is_active.is_(True))
        .order_by(TrainingPlan.created_at.desc())
        .first()
    )
    if not plan:
        return DashboardRead(plan=None, week_start=wk)

    workouts = (
        db.query(WorkoutLog)
        .filter(WorkoutLog.training_plan_id == plan.id)
        .filter(WorkoutLog.user_id == user.id)
        .order_by(WorkoutLog.date)
        .all()
    )

    display_unit = unit.value if unit else plan.distance_unit
    return DashboardRead(
        plan=PlanRead.model_validate(plan),
        week_start=wk,
        distance_unit=display_unit,
        days=bucket_by_day(workouts, wk, plan.distance_unit, display_unit),
        progress=plan_progress(workouts),
    )
