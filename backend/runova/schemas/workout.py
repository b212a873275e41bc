from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from runova.schemas.common import CamelModel, EffortLevel, WorkoutType


class WorkoutRead(BaseModel):
    id: UUID
    user_id: UUID
    training_plan_id: Optional[UUID] = None
    date: date
    workout_type: WorkoutType
    planned_distance: Optional[float] = None
    planned_duration: Optional[int] = None  # minutes
    actual_distance: Optional[float] = None
    actual_duration: Optional[int] = None  # minutes
    effort_level: Optional[EffortLevel] = None
    notes: Optional[str] = None
    completed: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class WorkoutLogRequest(CamelModel):
    """Result of a workout as entered by the runner. Every field may be blank."""

    actual_distance: Optional[float] = Field(default=None, ge=0)
    actual_duration: Optional[int] = Field(default=None, ge=0)
    effort_level: Optional[EffortLevel] = None
    notes: Optional[str] = None


class WorkoutSkipRequest(CamelModel):
    notes: Optional[str] = None


class WorkoutResponse(BaseModel):
    success: bool = True
    workout: WorkoutRead
