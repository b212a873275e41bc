"""create profiles, training_plans, workout_logs

Revision ID: 3e1f0b7c9a42
Revises:
Create Date: 2025-11-30 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3e1f0b7c9a42'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('distance_unit', sa.String(length=2), server_default='mi', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'training_plans',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('plan_name', sa.String(), nullable=False),
        sa.Column('goal', sa.String(length=20), nullable=False),
        sa.Column('training_frequency', sa.Integer(), nullable=False),
        sa.Column('race_date', sa.Date(), nullable=True),
        sa.Column('goal_time', sa.String(), nullable=True),
        sa.Column('personal_best_time', sa.String(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('special_events', sa.String(), nullable=True),
        sa.Column('injury_history', sa.String(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('weekly_schedule', postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column('ai_recommendations', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('distance_unit', sa.String(length=2), server_default='mi', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_training_plans_user_id', 'training_plans', ['user_id'])

    op.create_table(
        'workout_logs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('training_plan_id', sa.Uuid(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('workout_type', sa.String(length=20), nullable=False),
        sa.Column('planned_distance', sa.Float(), nullable=True),
        sa.Column('planned_duration', sa.Integer(), nullable=True),
        sa.Column('actual_distance', sa.Float(), nullable=True),
        sa.Column('actual_duration', sa.Integer(), nullable=True),
        sa.Column('effort_level', sa.String(length=20), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        # Logs are history: deleting a plan only detaches them
        sa.ForeignKeyConstraint(['training_plan_id'], ['training_plans.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_workout_logs_user_id', 'workout_logs', ['user_id'])
    op.create_index('ix_workout_logs_training_plan_id', 'workout_logs', ['training_plan_id'])
    op.create_index('ix_workout_logs_date', 'workout_logs', ['date'])


def downgrade() -> None:
    op.drop_index('ix_workout_logs_date', table_name='workout_logs')
    op.drop_index('ix_workout_logs_training_plan_id', table_name='workout_logs')
    op.drop_index('ix_workout_logs_user_id', table_name='workout_logs')
    op.drop_table('workout_logs')
    op.drop_index('ix_training_plans_user_id', table_name='training_plans')
    op.drop_table('training_plans')
    op.drop_table('profiles')
