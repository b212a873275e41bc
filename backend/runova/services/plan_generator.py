"""Plan generation: prompt, completion call, schedule expansion, persistence."""
import json
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from runova.core.constants import (
    COACH_SYSTEM_PROMPT,
    DAYS_PER_WEEK,
    DISTANCE_UNIT_NAMES,
    GOAL_LABELS,
    PLAN_REQUIREMENTS,
    PLAN_RESPONSE_SCHEMA,
)
from runova.core.config import settings
from runova.core.errors import GenerationError, StorageError, ValidationError
from runova.core.time_utils import plan_weeks, plan_window, sunday_of, workout_date
from runova.models.profile import Profile
from runova.models.training_plan import TrainingPlan
from runova.models.workout_log import WorkoutLog
from runova.schemas.plan import GeneratedPlan, GeneratedWeek, PlanGenerateRequest
from runova.services.completion import CompletionClient


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    ("plan_name", "planName"),
    ("goal", "goal"),
    ("training_frequency", "trainingFrequency"),
)


@dataclass
class ScheduledWorkout:
    """One dated session derived from the weekly schedule."""

    date: date
    workout_type: str
    planned_distance: float | None
    planned_duration: int | None


def validate_request(payload: PlanGenerateRequest) -> None:
    """Raise ValidationError for the first missing or out-of-range field."""
    for attr, name in REQUIRED_FIELDS:
        value = getattr(payload, attr)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{name} is required", field=name)
    if not 1 <= payload.training_frequency <= DAYS_PER_WEEK:
        raise ValidationError("trainingFrequency must be between 1 and 7", field="trainingFrequency")


def resolve_distance_unit(db: Session, user_id: UUID, payload: PlanGenerateRequest) -> str:
    """Unit for a new plan: the request, then the runner's profile, then the app default."""
    if payload.distance_unit is not None:
        return payload.distance_unit.value
    profile = db.get(Profile, user_id)
    if profile is not None and profile.distance_unit:
        return profile.distance_unit
    return settings.default_distance_unit


def _or(value, fallback: str) -> str:
    if value is None or value == "":
        return fallback
    return str(value)


def build_prompt(payload: PlanGenerateRequest, weeks: int, distance_unit: str) -> str:
    """Deterministic coaching prompt embedding every supplied field."""
    unit_name = DISTANCE_UNIT_NAMES.get(distance_unit, "miles")
    requirements = "\n".join(f"{i}. {r}" for i, r in enumerate(PLAN_REQUIREMENTS, start=1))
    schema = PLAN_RESPONSE_SCHEMA.replace("{unit_name}", unit_name)

    return f"""You are an expert running coach. Create a detailed {weeks}-week training plan with the following specifications:

Runner Profile:
- Goal: {GOAL_LABELS.get(payload.goal, payload.goal.replace('_', ' '))}
- Training Days Per Week: {payload.training_frequency}
- Target Race Date: {_or(payload.race_date and payload.race_date.isoformat(), 'Not specified')}
- Goal Time: {_or(payload.goal_time, 'Not specified')}
- Personal Best Time: {_or(payload.personal_best_time, 'Not specified')}
- Notes: {_or(payload.notes, 'None')}
- Special Events: {_or(payload.special_events, 'None')}
- Injury History: {_or(payload.injury_history, 'None')}
- Distance Unit: {unit_name}

Requirements:
{requirements}

Return a JSON response with this exact structure:
{schema}

Important: Return ONLY valid JSON, no markdown formatting or extra text."""


def parse_plan(raw: str) -> GeneratedPlan:
    """Parse and validate the completion text."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Plan generation returned invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise GenerationError("Plan generation returned invalid JSON: expected an object")
    try:
        return GeneratedPlan.model_validate(data)
    except PydanticValidationError as e:
        raise GenerationError(f"Plan generation returned an unexpected structure: {e}") from e


def expand_schedule(weeks: list[GeneratedWeek], start_date: date) -> list[ScheduledWorkout]:
    """Date every workout in the weekly schedule.

    The first week is anchored at the Sunday on or before `start_date`;
    each following week moves the anchor forward 7 days.
    """
    scheduled: list[ScheduledWorkout] = []
    anchor = sunday_of(start_date)
    for week in weeks:
        for w in week.workouts:
            scheduled.append(
                ScheduledWorkout(
                    date=workout_date(anchor, w.day),
                    workout_type=w.type.value,
                    planned_distance=w.distance,
                    planned_duration=round(w.duration) if w.duration is not None else None,
                )
            )
        anchor += timedelta(days=DAYS_PER_WEEK)
    return scheduled


def generate_plan(
    db: Session,
    completion: CompletionClient,
    user_id: UUID,
    payload: PlanGenerateRequest,
    today: date,
) -> TrainingPlan:
    """Generate a plan with the completion service and persist it with its workouts.

    The plan row and workout rows are written in one transaction; a storage
    failure leaves nothing behind.
    """
    validate_request(payload)
    distance_unit = resolve_distance_unit(db, user_id, payload)

    weeks = plan_weeks(payload.goal)
    start_date, end_date = plan_window(weeks, payload.race_date, today)
    logger.info(
        "Generating %s-week %s plan for user %s (%s -> %s)",
        weeks, payload.goal, user_id, start_date, end_date,
    )

    prompt = build_prompt(payload, weeks, distance_unit)
    generated = parse_plan(completion.complete_json(COACH_SYSTEM_PROMPT, prompt))
    scheduled = expand_schedule(generated.weekly_schedule, start_date)

    plan = TrainingPlan(
        user_id=user_id,
        plan_name=payload.plan_name,
        goal=payload.goal,
        training_frequency=payload.training_frequency,
        race_date=payload.race_date,
        goal_time=payload.goal_time or None,
        personal_best_time=payload.personal_best_time or None,
        notes=payload.notes or None,
        special_events=payload.special_events or None,
        injury_history=payload.injury_history or None,
        start_date=start_date,
        end_date=end_date,
        weekly_schedule=[w.model_dump(by_alias=True, mode="json") for w in generated.weekly_schedule],
        ai_recommendations=generated.recommendations,
        is_active=True,
        distance_unit=distance_unit,
    )

    try:
        db.add(plan)
        db.flush()  # assigns plan.id

        if scheduled:
            db.add_all(
                [
                    WorkoutLog(
                        user_id=user_id,
                        training_plan_id=plan.id,
                        date=s.date,
                        workout_type=s.workout_type,
                        planned_distance=s.planned_distance,
                        planned_duration=s.planned_duration,
                        completed=False,
                    )
                    for s in scheduled
                ]
            )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Saving plan for user %s failed: %s", user_id, e)
        raise StorageError("Failed to save training plan") from e

    db.refresh(plan)
    logger.info("Saved plan %s with %d workouts", plan.id, len(scheduled))
    return plan
