# fittrack/repositories/catalog_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from fittrack.models import Category, Exercise
from fittrack.repositories.base import BaseRepository

class CategoryRepository(BaseRepository[Category]):
    model = Category

    def list(self) -> list[Category]:
        stmt = select(Category).order_by(Category.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get_by_name(self, name: str) -> Optional[Category]:
        return self.db.execute(select(Category).where(Category.name == name)).scalar_one_or_none()

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def _base_stmt(self):
        # Category is always needed for the category_name annotation
        return select(Exercise).options(joinedload(Exercise.category)).order_by(Exercise.id.asc())

    def get(self, exercise_id: int) -> Optional[Exercise]:
        stmt = self._base_stmt().where(Exercise.id == exercise_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list(self) -> list[Exercise]:
        return list(self.db.execute(self._base_stmt()).scalars().all())

    def list_by_category(self, category_id: int) -> list[Exercise]:
        stmt = self._base_stmt().where(Exercise.category_id == category_id)
        return list(self.db.execute(stmt).scalars().all())
