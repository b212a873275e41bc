"""Seed a demo runner with a 10K plan, without calling the completion service.

Usage:
  DATABASE_URL=... python scripts/seed_demo_plan.py [user-uuid]
"""
from datetime import date, timedelta
import random
import sys
import uuid

from runova.db import Base, SessionLocal, engine
from runova.core.time_utils import plan_weeks, plan_window
from runova.models.profile import Profile
from runova.models.training_plan import TrainingPlan
from runova.models.workout_log import WorkoutLog
from runova.schemas.plan import GeneratedWeek
from runova.services.plan_generator import expand_schedule


DEMO_USER_ID = uuid.UUID("00000000-0000-4000-8000-000000000001")


def demo_schedule(weeks: int) -> list[GeneratedWeek]:
    """Sun long run, Tue easy, Thu tempo/intervals, Fri recovery; taper the last two weeks."""
    schedule = []
    for week in range(1, weeks + 1):
        taper = week > weeks - 2
        easy = round(random.uniform(3.0, 5.0), 1)
        quality = round(random.uniform(4.0, 6.0), 1)
        long_run = round(min(5.0 + week * 0.5, 10.0) * (0.7 if taper else 1.0), 1)
        workouts = [
            {"day": 1, "type": "long_run", "distance": long_run, "duration": int(long_run * 10),
             "description": "Steady long run at conversational pace.", "intensity": "moderate"},
            {"day": 3, "type": "easy_run", "distance": easy, "duration": int(easy * 10),
             "description": "Easy aerobic miles.", "intensity": "easy"},
            {"day": 5, "type": "intervals" if week % 2 else "tempo", "distance": quality,
             "duration": int(quality * 9), "description": "Quality session.", "intensity": "hard"},
            {"day": 6, "type": "recovery", "distance": 2.0, "duration": 22,
             "description": "Very easy shakeout.", "intensity": "easy"},
        ]
        schedule.append(
            GeneratedWeek.model_validate(
                {"week": week, "totalMileage": sum(w["distance"] for w in workouts), "workouts": workouts}
            )
        )
    return schedule


def clear_demo_data(db, user_id: uuid.UUID) -> None:
    """Delete the demo user's plans and logs so we can reseed cleanly."""
    db.query(WorkoutLog).filter(WorkoutLog.user_id == user_id).delete()
    db.query(TrainingPlan).filter(TrainingPlan.user_id == user_id).delete()
    db.commit()


def seed_demo_plan(db, user_id: uuid.UUID) -> None:
    if not db.get(Profile, user_id):
        db.add(Profile(id=user_id, email="demo@runova.app", full_name="Demo Runner"))

    weeks = plan_weeks("10k")
    race_date = date.today() + timedelta(weeks=6)
    start_date, end_date = plan_window(weeks, race_date, date.today())
    schedule = demo_schedule(weeks)

    plan = TrainingPlan(
        user_id=user_id,
        plan_name="Demo 10K Build",
        goal="10k",
        training_frequency=4,
        race_date=race_date,
        start_date=start_date,
        end_date=end_date,
        weekly_schedule=[w.model_dump(by_alias=True, mode="json") for w in schedule],
        ai_recommendations="Keep easy days easy.",
        is_active=True,
    )
    db.add(plan)
    db.flush()

    scheduled = expand_schedule(schedule, start_date)
    db.add_all(
        [
            WorkoutLog(
                user_id=user_id,
                training_plan_id=plan.id,
                date=s.date,
                workout_type=s.workout_type,
                planned_distance=s.planned_distance,
                planned_duration=s.planned_duration,
                # Mark past sessions done so the dashboard shows progress
                completed=s.date < date.today(),
                actual_distance=s.planned_distance if s.date < date.today() else None,
            )
            for s in scheduled
        ]
    )
    db.commit()

    print(f"Seeded plan {plan.id} with {len(scheduled)} workouts for {user_id}")


def main():
    user_id = uuid.UUID(sys.argv[1]) if len(sys.argv) > 1 else DEMO_USER_ID
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_demo_data(db, user_id)
        seed_demo_plan(db, user_id)
    finally:
        db.close()


if __name__ == "__main__":
    main()
