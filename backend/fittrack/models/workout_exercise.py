from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Numeric, Text
from fittrack.db import Base

class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), index=True, nullable=False)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id"), index=True, nullable=False)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight_kg: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    calories_burned: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True, default=0)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    workout = relationship("Workout", back_populates="exercises")
    exercise = relationship("Exercise", lazy="joined")

    # Catalog columns flattened for the enriched line-item view
    @property
    def exercise_name(self) -> str | None:
        return self.exercise.name if self.exercise else None

    @property
    def muscle_group(self) -> str | None:
        return self.exercise.muscle_group if self.exercise else None

    @property
    def difficulty(self) -> str | None:
        return self.exercise.difficulty if self.exercise else None

    @property
    def category_name(self) -> str | None:
        return self.exercise.category_name if self.exercise else None
