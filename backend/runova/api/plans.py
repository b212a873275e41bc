from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from runova.api.deps import CurrentUser, get_completion_client, get_current_user, get_today
from runova.db import get_db
from runova.models.training_plan import TrainingPlan
from runova.models.workout_log import WorkoutLog
from runova.schemas.plan import (
    PlanDeleteRequest,
    PlanDetail,
    PlanGenerateRequest,
    PlanRead,
    PlanResponse,
    PlanSummary,
    PlanUpdateRequest,
    SuccessResponse,
)
from runova.schemas.workout import WorkoutRead
from runova.services.completion import CompletionClient
from runova.services.plan_generator import generate_plan
from runova.services.plan_mutator import delete_plan, get_owned_plan, update_plan


router = APIRouter(tags=["plans"])


@router.post("/generate-plan", response_model=PlanResponse)
def generate_plan_route(
    payload: PlanGenerateRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    completion: CompletionClient = Depends(get_completion_client),
    today: date = Depends(get_today),
):
    plan = generate_plan(db, completion, user.id, payload, today=today)
    return PlanResponse(plan=PlanRead.model_validate(plan))


@router.put("/update-plan", response_model=PlanResponse)
def update_plan_route(
    payload: PlanUpdateRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    plan = update_plan(db, user.id, payload)
    return PlanResponse(plan=PlanRead.model_validate(plan))


@router.delete("/delete-plan", response_model=SuccessResponse)
def delete_plan_route(
    payload: PlanDeleteRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    delete_plan(db, user.id, payload.plan_id)
    return SuccessResponse()


@router.get("/plans", response_model=list[PlanSummary])
def list_plans(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The caller's plans, newest first."""
    return (
        db.query(TrainingPlan)
        .filter(TrainingPlan.user_id == user.id)
        .order_by(TrainingPlan.created_at.desc())
        .all()
    )


@router.get("/plans/{plan_id}", response_model=PlanDetail)
def get_plan(
    plan_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    plan = get_owned_plan(db, plan_id, user.id)
    workouts = (
        db.query(WorkoutLog)
        .filter(WorkoutLog.training_plan_id == plan.id)
        .filter(WorkoutLog.user_id == user.id)
        .order_by(WorkoutLog.date)
        .all()
    )
    return PlanDetail(
        **PlanRead.model_validate(plan).model_dump(),
        workouts=[WorkoutRead.model_validate(w) for w in workouts],
    )
