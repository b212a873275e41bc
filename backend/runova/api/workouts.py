import logging
from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from runova.api.deps import CurrentUser, get_current_user
from runova.core.constants import SKIPPED_WORKOUT_NOTE
from runova.core.errors import NotFound, StorageError
from runova.db import get_db
from runova.models.workout_log import WorkoutLog
from runova.schemas.workout import WorkoutLogRequest, WorkoutRead, WorkoutResponse, WorkoutSkipRequest


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


def _get_owned_workout(db: Session, workout_id: UUID, user_id: UUID) -> WorkoutLog:
    row = (
        db.query(WorkoutLog)
        .filter(WorkoutLog.id == workout_id)
        .filter(WorkoutLog.user_id == user_id)
        .first()
    )
    if not row:
        raise NotFound("Workout not found")
    return row


def _commit(db: Session, row: WorkoutLog) -> WorkoutLog:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Saving workout %s failed: %s", row.id, e)
        raise StorageError("Failed to save workout") from e
    db.refresh(row)
    return row


@router.get("/", response_model=list[WorkoutRead])
def list_workouts(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    plan_id: Optional[UUID] = Query(None),
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    List the caller's workouts, optionally filtered by plan and [start_date, end_date].

    Includes logs whose plan has since been deleted.
    """
    query = db.query(WorkoutLog).filter(WorkoutLog.user_id == user.id)

    if plan_id is not None:
        query = query.filter(WorkoutLog.training_plan_id == plan_id)
    if start_date is not None:
        query = query.filter(WorkoutLog.date >= start_date)
    if end_date is not None:
        query = query.filter(WorkoutLog.date <= end_date)

    return query.order_by(WorkoutLog.date).all()


@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(
    workout_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return _get_owned_workout(db, workout_id, user.id)


@router.put("/{workout_id}/log", response_model=WorkoutResponse)
def log_workout(
    workout_id: UUID,
    payload: WorkoutLogRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = _get_owned_workout(db, workout_id, user.id)

    row.actual_distance = payload.actual_distance
    row.actual_duration = payload.actual_duration
    row.effort_level = payload.effort_level.value if payload.effort_level else None
    row.notes = payload.notes or None
    row.completed = True

    row = _commit(db, row)
    logger.info("Logged workout %s", workout_id)
    return WorkoutResponse(workout=WorkoutRead.model_validate(row))


@router.put("/{workout_id}/skip", response_model=WorkoutResponse)
def skip_workout(
    workout_id: UUID,
    payload: Optional[WorkoutSkipRequest] = None,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = _get_owned_workout(db, workout_id, user.id)

    notes = payload.notes if payload is not None else None
    row.notes = notes or SKIPPED_WORKOUT_NOTE
    row.completed = True

    row = _commit(db, row)
    logger.info("Skipped workout %s", workout_id)
    return WorkoutResponse(workout=WorkoutRead.model_validate(row))
