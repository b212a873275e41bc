import uuid

from sqlalchemy import Boolean, Column, Date, DateTime, Float, ForeignKey, Integer, String, Uuid, false
from sqlalchemy.sql import func
from runova.db import Base


class WorkoutLog(Base):
    __tablename__ = "workout_logs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)

    # Weak link: logs outlive their plan and are kept for history
    training_plan_id = Column(
        Uuid,
        ForeignKey("training_plans.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    date = Column(Date, nullable=False, index=True)

    # easy_run, long_run, tempo, intervals, recovery, rest
    workout_type = Column(String(20), nullable=False)

    # Distances in the owning plan's unit, durations in minutes
    planned_distance = Column(Float, nullable=True)
    planned_duration = Column(Integer, nullable=True)
    actual_distance = Column(Float, nullable=True)
    actual_duration = Column(Integer, nullable=True)

    effort_level = Column(String(20), nullable=True)  # easy, moderate, hard, very_hard
    notes = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False, server_default=false())

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
