from datetime import date, datetime
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Date, DateTime, Numeric, Text, func
from fittrack.db import Base

class Workout(Base):
    __tablename__ = "workouts"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    workout_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    # Snapshot aggregates: written from the line items (or by the caller), read by stats
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    total_calories: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True, default=0)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="workouts")
    exercises = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutExercise.id",
    )
