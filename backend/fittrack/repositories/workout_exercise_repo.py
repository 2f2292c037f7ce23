# fittrack/repositories/workout_exercise_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from fittrack.models import Exercise, Workout, WorkoutExercise
from fittrack.repositories.base import BaseRepository

class WorkoutExerciseRepository(BaseRepository[WorkoutExercise]):
    model = WorkoutExercise

    def get_with_workout(self, item_id: int) -> Optional[WorkoutExercise]:
        stmt = select(WorkoutExercise).options(joinedload(WorkoutExercise.workout))\
                                      .where(WorkoutExercise.id == item_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_workout(self, workout_id: int, *, user_id: int | None = None) -> list[WorkoutExercise]:
        stmt = select(WorkoutExercise).options(
            joinedload(WorkoutExercise.exercise).joinedload(Exercise.category)
        ).where(WorkoutExercise.workout_id == workout_id)
        if user_id is not None:
            stmt = stmt.join(Workout, Workout.id == WorkoutExercise.workout_id)\
                       .where(Workout.user_id == user_id)
        stmt = stmt.order_by(WorkoutExercise.id.asc())
        return list(self.db.execute(stmt).unique().scalars().all())

    def create(self, **fields) -> WorkoutExercise:
        return self.add_and_refresh(WorkoutExercise(**fields))

    def delete(self, item: WorkoutExercise) -> None:
        self.db.delete(item)
        self.db.flush()
