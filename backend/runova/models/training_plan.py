import uuid

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, JSON, String, Uuid, true
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
from runova.db import Base


class TrainingPlan(Base):
    __tablename__ = "training_plans"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Owner (auth provider user id)
    user_id = Column(Uuid, nullable=False, index=True)

    plan_name = Column(String, nullable=False)
    goal = Column(String(20), nullable=False)  # 5k, 10k, half_marathon, marathon, custom
    training_frequency = Column(Integer, nullable=False)  # days per week, 1..7

    race_date = Column(Date, nullable=True)
    goal_time = Column(String, nullable=True)
    personal_best_time = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    special_events = Column(String, nullable=True)
    injury_history = Column(String, nullable=True)

    # start_date + plan_weeks(goal) == end_date at creation
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    # Generated schedule, immutable after creation:
    # [{week, totalMileage, workouts: [{day, type, distance, duration, description, intensity}]}]
    weekly_schedule = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False)
    ai_recommendations = Column(String, nullable=True)

    is_active = Column(Boolean, nullable=False, default=True, server_default=true())

    # Unit the schedule distances are expressed in, fixed at creation
    distance_unit = Column(String(2), nullable=False, default="mi", server_default="mi")

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
