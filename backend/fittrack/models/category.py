from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String
from fittrack.db import Base

class Category(Base):
    __tablename__ = "categories"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    exercises = relationship("Exercise", back_populates="category")
