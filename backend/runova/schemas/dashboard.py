from datetime import date
from typing import Optional

from pydantic import BaseModel

from runova.schemas.common import DistanceUnit
from runova.schemas.plan import PlanRead
from runova.schemas.workout import WorkoutRead


class CalendarDay(BaseModel):
    date: date
    workouts: list[WorkoutRead] = []
    planned_distance: str = "-"  # e.g. "6.5 mi"; "-" when nothing has a distance


class PlanProgress(BaseModel):
    completed: int
    total: int
    percentage: float  # 0..100


class DashboardRead(BaseModel):
    plan: Optional[PlanRead] = None
    week_start: date
    distance_unit: Optional[DistanceUnit] = None  # unit of the day labels
    days: list[CalendarDay] = []
    progress: Optional[PlanProgress] = None
