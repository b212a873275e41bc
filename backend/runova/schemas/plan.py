from datetime import date, datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from runova.schemas.common import CamelModel, DistanceUnit, WorkoutType
from runova.schemas.workout import WorkoutRead


class PlanGenerateRequest(CamelModel):
    """Body of POST /generate-plan.

    Required fields are optional here so a missing one is reported as a 400
    naming the field rather than a generic schema error.
    """

    plan_name: Optional[str] = None
    goal: Optional[str] = None
    training_frequency: Optional[StrictInt] = None
    race_date: Optional[date] = None
    goal_time: Optional[str] = None
    personal_best_time: Optional[str] = None
    notes: Optional[str] = None
    special_events: Optional[str] = None
    injury_history: Optional[str] = None
    distance_unit: Optional[DistanceUnit] = None


class PlanUpdateRequest(CamelModel):
    """Body of PUT /update-plan. Only metadata; the schedule is never editable."""

    plan_id: Optional[UUID] = None
    plan_name: Optional[str] = None
    goal: Optional[str] = None
    training_frequency: Optional[StrictInt] = None
    race_date: Optional[date] = None
    goal_time: Optional[str] = None
    personal_best_time: Optional[str] = None
    notes: Optional[str] = None
    special_events: Optional[str] = None
    injury_history: Optional[str] = None


class PlanDeleteRequest(CamelModel):
    plan_id: Optional[UUID] = None


# --------- Completion service output --------- #

class GeneratedWorkout(CamelModel):
    day: int = Field(ge=1, le=7)
    type: WorkoutType
    distance: Optional[float] = Field(default=None, ge=0)
    duration: Optional[float] = Field(default=None, ge=0)  # minutes
    description: Optional[str] = None
    intensity: Optional[str] = None


class GeneratedWeek(CamelModel):
    week: int
    total_mileage: Optional[float] = None
    workouts: list[GeneratedWorkout] = []


class GeneratedPlan(CamelModel):
    plan_name: Optional[str] = None
    weekly_schedule: list[GeneratedWeek]
    recommendations: Optional[str] = None


# --------- Responses --------- #

class PlanRead(BaseModel):
    """A training plan as returned to the frontend."""

    id: UUID
    user_id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    plan_name: str
    goal: str
    training_frequency: int
    race_date: Optional[date] = None
    goal_time: Optional[str] = None
    personal_best_time: Optional[str] = None
    notes: Optional[str] = None
    special_events: Optional[str] = None
    injury_history: Optional[str] = None
    start_date: date
    end_date: date
    weekly_schedule: list[dict[str, Any]]
    ai_recommendations: Optional[str] = None
    is_active: bool
    distance_unit: DistanceUnit

    model_config = ConfigDict(from_attributes=True)


class PlanSummary(BaseModel):
    """Row shown in the plans list."""

    id: UUID
    created_at: Optional[datetime] = None
    plan_name: str
    goal: str
    race_date: Optional[date] = None
    start_date: date
    end_date: date
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class PlanDetail(PlanRead):
    workouts: list[WorkoutRead] = []


class PlanResponse(BaseModel):
    success: bool = True
    plan: PlanRead


class SuccessResponse(BaseModel):
    success: bool = True
