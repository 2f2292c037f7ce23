from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Numeric, CheckConstraint
from fittrack.db import Base

class Exercise(Base):
    __tablename__ = "exercises"
    __table_args__ = (
        CheckConstraint("calories_per_minute >= 0", name="ck_exercises_rate_nonneg"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"), index=True, nullable=True)
    muscle_group: Mapped[str | None] = mapped_column(String(100), nullable=True)
    difficulty: Mapped[str | None] = mapped_column(String(20), nullable=True)
    calories_per_minute: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False, default=0)

    category = relationship("Category", back_populates="exercises")

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category else None
