"""create catalog, users, workouts, workout_exercises

Revision ID: 4b1e2c7d9a10
Revises:
Create Date: 2026-10-17 10:12:31.402118

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

from fittrack.services.catalog import DEFAULT_CATALOG


# revision identifiers, used by Alembic.
revision: str = '4b1e2c7d9a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) reference data
    categories = op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False, unique=True),
    )
    exercises = op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=True, index=True),
        sa.Column('muscle_group', sa.String(length=100), nullable=True),
        sa.Column('difficulty', sa.String(length=20), nullable=True),
        sa.Column('calories_per_minute', sa.Numeric(6, 2), nullable=False, server_default='0'),
        sa.CheckConstraint('calories_per_minute >= 0', name='ck_exercises_rate_nonneg'),
    )

    # 2) accounts
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('username', sa.String(length=50), nullable=False, unique=True, index=True),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True, index=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('profile_image', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('last_login', sa.DateTime(timezone=True), nullable=True),
    )

    # 3) workouts + line items (line items die with their workout)
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('workout_date', sa.Date(), nullable=False, index=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('total_calories', sa.Numeric(10, 2), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=False, index=True),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight_kg', sa.Numeric(10, 2), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
        sa.Column('calories_burned', sa.Numeric(10, 2), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )

    # 4) seed the catalog; ids come from the database so its sequences stay in step
    op.bulk_insert(categories, [{'name': cat_name} for cat_name in DEFAULT_CATALOG])
    cat_ids = dict(
        (name, cat_id)
        for cat_id, name in op.get_bind().execute(sa.select(categories.c.id, categories.c.name))
    )
    ex_rows = []
    for cat_name, rows in DEFAULT_CATALOG.items():
        for name, muscle_group, difficulty, rate in rows:
            ex_rows.append({
                'name': name,
                'category_id': cat_ids[cat_name],
                'muscle_group': muscle_group,
                'difficulty': difficulty,
                'calories_per_minute': rate,
            })
    op.bulk_insert(exercises, ex_rows)


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('workout_exercises')
    op.drop_table('workouts')
    op.drop_table('users')
    op.drop_table('exercises')
    op.drop_table('categories')
