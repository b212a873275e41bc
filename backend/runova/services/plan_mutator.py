"""Ownership-checked edits and deletes of a plan's metadata."""
import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from runova.core.constants import DAYS_PER_WEEK
from runova.core.errors import NotFound, StorageError, ValidationError
from runova.models.training_plan import TrainingPlan
from runova.schemas.plan import PlanUpdateRequest


logger = logging.getLogger(__name__)

# Request field -> column. Schedule, recommendations, dates and unit are never editable.
EDITABLE_FIELDS = (
    "plan_name",
    "goal",
    "training_frequency",
    "race_date",
    "goal_time",
    "personal_best_time",
    "notes",
    "special_events",
    "injury_history",
)

NON_NULLABLE_FIELDS = {
    "plan_name": "planName",
    "goal": "goal",
    "training_frequency": "trainingFrequency",
}


def get_owned_plan(db: Session, plan_id: UUID, user_id: UUID) -> TrainingPlan:
    """Fetch a plan by id for its owner; NotFound for missing and foreign plans alike."""
    plan = (
        db.query(TrainingPlan)
        .filter(TrainingPlan.id == plan_id)
        .filter(TrainingPlan.user_id == user_id)
        .first()
    )
    if plan is None:
        raise NotFound("Plan not found or unauthorized")
    return plan


def _require_plan_id(plan_id: UUID | None) -> UUID:
    if plan_id is None:
        raise ValidationError("Plan ID is required", field="planId")
    return plan_id


def update_plan(db: Session, user_id: UUID, payload: PlanUpdateRequest) -> TrainingPlan:
    plan_id = _require_plan_id(payload.plan_id)
    plan = get_owned_plan(db, plan_id, user_id)

    update_data = payload.model_dump(include=set(EDITABLE_FIELDS), exclude_unset=True)

    for key, name in NON_NULLABLE_FIELDS.items():
        if key not in update_data:
            continue
        value = update_data[key]
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{name} cannot be empty", field=name)
    if "training_frequency" in update_data and not 1 <= update_data["training_frequency"] <= DAYS_PER_WEEK:
        raise ValidationError("trainingFrequency must be between 1 and 7", field="trainingFrequency")

    for key, value in update_data.items():
        setattr(plan, key, value)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Updating plan %s failed: %s", plan_id, e)
        raise StorageError("Failed to update plan") from e

    db.refresh(plan)
    logger.info("Updated plan %s fields %s", plan_id, sorted(update_data))
    return plan


def delete_plan(db: Session, user_id: UUID, plan_id: UUID | None) -> None:
    """Delete the plan row only; its workout logs are kept for history."""
    plan_id = _require_plan_id(plan_id)
    get_owned_plan(db, plan_id, user_id)

    try:
        (
            db.query(TrainingPlan)
            .filter(TrainingPlan.id == plan_id)
            .filter(TrainingPlan.user_id == user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Deleting plan %s failed: %s", plan_id, e)
        raise StorageError("Failed to delete plan") from e

    logger.info("Deleted plan %s (workout logs preserved)", plan_id)
