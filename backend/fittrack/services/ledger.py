# fittrack/services/ledger.py
"""
Per-user workout records and their exercise line items.

Ownership rule: any lookup scoped by `user_id` that misses (absent row or a
row owned by somebody else) raises the same NotFound, so callers cannot
probe for other users' workouts.

Snapshot rule: `Workout.duration_minutes` / `total_calories` are what the
statistics read. Adding or removing a line item recomputes them from the
remaining items in the same transaction.
"""
from __future__ import annotations
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from sqlalchemy.orm import Session

from fittrack.db import transaction
from fittrack.errors import NotFound, ValidationError
from fittrack.models import User, Workout, WorkoutExercise
from fittrack.repositories.catalog_repo import ExerciseRepository
from fittrack.repositories.workout_exercise_repo import WorkoutExerciseRepository
from fittrack.repositories.workout_repo import WorkoutRepository
from fittrack.services.catalog import estimate_calories, round_half_up

log = logging.getLogger(__name__)

WORKOUT_FIELDS = ("name", "workout_date", "duration_minutes", "total_calories", "notes")
ITEM_FIELDS = ("sets", "reps", "weight_kg", "duration_seconds", "calories_burned", "notes")


def _non_negative(name: str, value, *, integer: bool = False):
    """Parse a nullable number, rejecting junk, NaN/inf and negatives."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number")
    try:
        number = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{name} must be a number")
    if not number.is_finite():
        raise ValidationError(f"{name} must be a finite number")
    if number < 0:
        raise ValidationError(f"{name} must be >= 0")
    if integer:
        if number != number.to_integral_value():
            raise ValidationError(f"{name} must be a whole number")
        return int(number)
    return number


def _decimal(value) -> Decimal | None:
    if value is None:
        return None
    return Decimal(str(value))


def _as_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"invalid workout_date {value!r}")


class WorkoutLedger:
    def __init__(self, db: Session):
        self.db = db
        self.workouts = WorkoutRepository(db)
        self.items = WorkoutExerciseRepository(db)
        self.exercises = ExerciseRepository(db)

    # ---- workouts ----

    def create_workout(
        self,
        user_id: int,
        *,
        name: str,
        workout_date,
        duration_minutes: int | None = 0,
        total_calories=0,
        notes: str | None = None,
    ) -> Workout:
        fields = self._workout_fields(
            name=name, workout_date=workout_date, duration_minutes=duration_minutes,
            total_calories=total_calories, notes=notes,
        )
        with transaction(self.db):
            self._require_user(user_id)
            workout = self.workouts.create(user_id=user_id, **fields)
        log.info("created workout id=%s user=%s", workout.id, user_id)
        return workout

    def get_workout(self, workout_id: int, user_id: int) -> Workout:
        workout = self.workouts.get_owned(workout_id, user_id)
        if not workout:
            raise NotFound("Workout not found")
        return workout

    def list_workouts_for_user(self, user_id: int, *, limit: int | None = None) -> list[Workout]:
        return self.workouts.list_by_user(user_id, limit=limit)

    def update_workout(self, workout_id: int, user_id: int, fields: Mapping[str, Any]) -> Workout:
        """Overwrite name/date/duration/calories/notes; missing keys become null."""
        values = self._workout_fields(**{k: fields.get(k) for k in WORKOUT_FIELDS})
        with transaction(self.db):
            workout = self._locked(workout_id, user_id)
            for key, value in values.items():
                setattr(workout, key, value)
        log.info("updated workout id=%s user=%s", workout_id, user_id)
        self.db.refresh(workout)
        return workout

    def delete_workout(self, workout_id: int, user_id: int) -> None:
        with transaction(self.db):
            workout = self._locked(workout_id, user_id)
            self.workouts.delete(workout)
        log.info("deleted workout id=%s user=%s", workout_id, user_id)

    # ---- line items ----

    def add_exercise_to_workout(
        self,
        workout_id: int,
        *,
        exercise_id: int,
        sets: int | None = None,
        reps: int | None = None,
        weight_kg=None,
        duration_seconds: int | None = 0,
        calories_burned=None,
        notes: str | None = None,
        user_id: int | None = None,
    ) -> WorkoutExercise:
        """
        Attach a line item. Ownership of the parent is only verified when
        `user_id` is given. A supplied `calories_burned` is stored as-is.
        """
        with transaction(self.db):
            workout = self._parent(workout_id, user_id)
            item = self._add_item(
                workout,
                exercise_id=exercise_id, sets=sets, reps=reps, weight_kg=weight_kg,
                duration_seconds=duration_seconds, calories_burned=calories_burned, notes=notes,
            )
            self._refresh_snapshot(workout)
        log.info("added exercise=%s to workout id=%s as item id=%s", exercise_id, workout_id, item.id)
        return item

    def list_exercises_for_workout(self, workout_id: int, *, user_id: int | None = None) -> list[WorkoutExercise]:
        # A missing (or foreign) workout simply has no rows
        return self.items.list_by_workout(workout_id, user_id=user_id)

    def remove_exercise_from_workout(self, item_id: int, *, user_id: int | None = None) -> None:
        with transaction(self.db):
            item = self.items.get_with_workout(item_id)
            if not item or (user_id is not None and item.workout.user_id != user_id):
                raise NotFound("Workout exercise not found")
            workout = self._locked(item.workout_id, item.workout.user_id)
            self.items.delete(item)
            self._refresh_snapshot(workout)
        log.info("removed item id=%s from workout id=%s", item_id, workout.id)

    # ---- whole submission ----

    def log_workout(
        self,
        user_id: int,
        *,
        name: str,
        workout_date,
        notes: str | None = None,
        items: Iterable[Mapping[str, Any]],
    ) -> Workout:
        """
        Create a workout together with all of its line items in one
        transaction. Snapshots are summed from the items; if any item fails
        nothing is persisted.
        """
        items = list(items)
        if not items:
            raise ValidationError("a logged workout needs at least one exercise")
        fields = self._workout_fields(
            name=name, workout_date=workout_date, duration_minutes=0, total_calories=0, notes=notes,
        )
        with transaction(self.db):
            self._require_user(user_id)
            workout = self.workouts.create(user_id=user_id, **fields)
            for raw in items:
                self._add_item(workout, exercise_id=raw["exercise_id"], **{k: raw.get(k) for k in ITEM_FIELDS})
            self._refresh_snapshot(workout)
        log.info("logged workout id=%s user=%s with %d exercises", workout.id, user_id, len(items))
        self.db.refresh(workout)
        return workout

    # ---- helpers ----

    def _require_user(self, user_id: int) -> None:
        if self.db.get(User, user_id) is None:
            raise NotFound("User not found")

    def _locked(self, workout_id: int, user_id: int) -> Workout:
        workout = self.workouts.get_owned(workout_id, user_id, for_update=True)
        if not workout:
            raise NotFound("Workout not found")
        return workout

    def _parent(self, workout_id: int, user_id: int | None) -> Workout:
        if user_id is not None:
            return self._locked(workout_id, user_id)
        workout = self.workouts.get(workout_id)
        if not workout:
            raise NotFound("Workout not found")
        return workout

    def _workout_fields(self, *, name, workout_date, duration_minutes, total_calories, notes) -> dict:
        if not name or not str(name).strip():
            raise ValidationError("name is required")
        if workout_date is None:
            raise ValidationError("workout_date is required")
        return {
            "name": name,
            "workout_date": _as_date(workout_date),
            "duration_minutes": _non_negative("duration_minutes", duration_minutes, integer=True),
            "total_calories": _non_negative("total_calories", total_calories),
            "notes": notes,
        }

    def _add_item(self, workout: Workout, *, exercise_id: int, sets=None, reps=None, weight_kg=None,
                  duration_seconds=0, calories_burned=None, notes=None) -> WorkoutExercise:
        sets = _non_negative("sets", sets, integer=True)
        reps = _non_negative("reps", reps, integer=True)
        weight_kg = _non_negative("weight_kg", weight_kg)
        duration_seconds = _non_negative("duration_seconds", duration_seconds, integer=True)
        calories_burned = _non_negative("calories_burned", calories_burned)
        exercise = self.exercises.get(exercise_id)
        if not exercise:
            raise NotFound("Exercise not found")
        if calories_burned is None and duration_seconds:
            calories_burned = Decimal(estimate_calories(duration_seconds, exercise.calories_per_minute))
        return self.items.create(
            workout_id=workout.id,
            exercise_id=exercise.id,
            sets=sets,
            reps=reps,
            weight_kg=weight_kg,
            duration_seconds=duration_seconds,
            calories_burned=calories_burned,
            notes=notes,
        )

    def _refresh_snapshot(self, workout: Workout) -> None:
        rows = self.items.list_by_workout(workout.id)
        seconds = sum(r.duration_seconds or 0 for r in rows)
        workout.duration_minutes = round_half_up(Decimal(seconds) / 60)
        workout.total_calories = sum((_decimal(r.calories_burned) or Decimal(0) for r in rows), Decimal(0))
        self.db.flush()
