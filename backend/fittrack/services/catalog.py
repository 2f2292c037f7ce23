# fittrack/services/catalog.py
"""
Read-only exercise catalog plus the calorie-rate helper the ledger uses
when a line item arrives without a calorie figure.
"""
from __future__ import annotations
import logging
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.orm import Session

from fittrack.db import transaction
from fittrack.errors import NotFound
from fittrack.models import Category, Exercise
from fittrack.repositories.catalog_repo import CategoryRepository, ExerciseRepository

log = logging.getLogger(__name__)

# name -> [(exercise, muscle_group, difficulty, calories_per_minute)]
DEFAULT_CATALOG: dict[str, list[tuple[str, str, str, float]]] = {
    "Cardio": [
        ("Running", "Legs", "intermediate", 11.4),
        ("Cycling", "Legs", "beginner", 8.5),
        ("Jump Rope", "Full Body", "intermediate", 12.0),
        ("Rowing", "Back", "intermediate", 9.8),
    ],
    "Strength": [
        ("Bench Press", "Chest", "intermediate", 6.0),
        ("Squat", "Legs", "intermediate", 8.0),
        ("Deadlift", "Back", "advanced", 8.5),
        ("Pull-up", "Back", "intermediate", 7.5),
        ("Push-up", "Chest", "beginner", 7.0),
    ],
    "Flexibility": [
        ("Yoga", "Full Body", "beginner", 4.0),
        ("Stretching", "Full Body", "beginner", 2.5),
    ],
    "HIIT": [
        ("Burpees", "Full Body", "advanced", 10.0),
        ("Mountain Climbers", "Core", "intermediate", 9.0),
    ],
}


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def estimate_calories(duration_seconds: int | None, calories_per_minute) -> int:
    """round(minutes * rate), halves rounded up."""
    minutes = Decimal(duration_seconds or 0) / 60
    return round_half_up(minutes * Decimal(str(calories_per_minute or 0)))


class CatalogService:
    def __init__(self, db: Session):
        self.categories = CategoryRepository(db)
        self.exercises = ExerciseRepository(db)

    def list_categories(self) -> list[Category]:
        return self.categories.list()

    def get_category(self, category_id: int) -> Category:
        category = self.categories.get(category_id)
        if not category:
            raise NotFound("Category not found")
        return category

    def list_exercises(self) -> list[Exercise]:
        return self.exercises.list()

    def get_exercise(self, exercise_id: int) -> Exercise:
        exercise = self.exercises.get(exercise_id)
        if not exercise:
            raise NotFound("Exercise not found")
        return exercise

    def list_exercises_by_category(self, category_id: int) -> list[Exercise]:
        return self.exercises.list_by_category(category_id)


def seed_catalog(db: Session, catalog: dict | None = None) -> int:
    """Install missing categories/exercises. Returns the number of exercises added."""
    catalog = catalog or DEFAULT_CATALOG
    categories = CategoryRepository(db)
    added = 0
    with transaction(db):
        for cat_name, rows in catalog.items():
            category = categories.get_by_name(cat_name)
            if category is None:
                category = categories.add_and_refresh(Category(name=cat_name))
            existing = {e.name for e in category.exercises}
            for name, muscle_group, difficulty, rate in rows:
                if name in existing:
                    continue
                db.add(Exercise(
                    name=name,
                    category_id=category.id,
                    muscle_group=muscle_group,
                    difficulty=difficulty,
                    calories_per_minute=Decimal(str(rate)),
                ))
                added += 1
    if added:
        log.info("seeded %d catalog exercises", added)
    return added
