"""create users, workouts, workout_exercises, sets, exercise_settings

Revision ID: 4b7e2c91d0a3
Revises:
Create Date: 2025-09-14 19:02:11.418305

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e2c91d0a3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # one row per user per calendar day
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('workout_date', sa.Date(), nullable=False),
        sa.UniqueConstraint('user_id', 'workout_date', name='uq_workouts_user_date'),
    )

    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise', sa.String(length=120), nullable=False),
        sa.Column('instance', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('seq', sa.Integer(), nullable=False, server_default='1'),
        sa.UniqueConstraint('workout_id', 'exercise', 'instance', name='uq_workout_exercises_instance'),
    )

    op.create_table(
        'sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_exercise_id', sa.Integer(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Integer(), nullable=False),
        sa.Column('set_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('round', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    )

    op.create_table(
        'exercise_settings',
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('exercise_name', sa.String(length=120), primary_key=True),
        sa.Column('rest_duration_seconds', sa.Integer(), nullable=False, server_default='120'),
        sa.Column('default_sets', sa.Integer(), nullable=True),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('exercise_settings')
    op.drop_table('sets')
    op.drop_table('workout_exercises')
    op.drop_table('workouts')
    op.drop_table('users')
