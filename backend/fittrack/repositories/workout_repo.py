# fittrack/repositories/workout_repo.py
from __future__ import annotations
from decimal import Decimal
from typing import Optional

from sqlalchemy import select, func

from fittrack.models import Workout
from fittrack.repositories.base import BaseRepository

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def get_owned(self, workout_id: int, user_id: int, *, for_update: bool = False) -> Optional[Workout]:
        """
        Fetch a workout only if `user_id` owns it. `for_update` takes a row
        lock so the check and the following write share one transaction.
        """
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(self, user_id: int, *, limit: int | None = None) -> list[Workout]:
        # Newest date first; same-day workouts keep insertion order
        stmt = select(Workout).where(Workout.user_id == user_id)\
                              .order_by(Workout.workout_date.desc(), Workout.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def totals_by_user(self, user_id: int) -> tuple[int, Decimal, int]:
        """(count, sum of total_calories, sum of duration_minutes); nulls count as 0."""
        stmt = select(
            func.count(Workout.id),
            func.coalesce(func.sum(Workout.total_calories), 0),
            func.coalesce(func.sum(Workout.duration_minutes), 0),
        ).where(Workout.user_id == user_id)
        count, calories, duration = self.db.execute(stmt).one()
        return int(count), Decimal(str(calories)), int(duration)

    def create(self, **fields) -> Workout:
        return self.add_and_refresh(Workout(**fields))

    def delete(self, workout: Workout) -> None:
        self.db.delete(workout)
        self.db.flush()
