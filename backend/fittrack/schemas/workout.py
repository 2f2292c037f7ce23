from typing import Annotated
from datetime import date
from pydantic import BaseModel, Field, StringConstraints

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
# Notes: trimmed, up to 1000 chars
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=1000)]
NonNegInt = Annotated[int, Field(ge=0)]
NonNegFloat = Annotated[float, Field(ge=0, le=100000)]

class WorkoutCreate(BaseModel):
    name: NameStr
    workout_date: date
    duration_minutes: NonNegInt | None = 0
    total_calories: NonNegFloat | None = 0
    notes: NotesStr | None = None

class WorkoutUpdate(BaseModel):
    """Full overwrite of the editable fields; omitted ones are stored as null."""
    name: NameStr
    workout_date: date
    duration_minutes: NonNegInt | None = None
    total_calories: NonNegFloat | None = None
    notes: NotesStr | None = None

class WorkoutRead(BaseModel):
    id: int
    user_id: int
    name: str
    workout_date: date
    duration_minutes: int | None = None
    total_calories: float | None = None
    notes: str | None = None

    model_config = {"from_attributes": True}

class WorkoutExerciseCreate(BaseModel):
    exercise_id: int
    sets: NonNegInt | None = None
    reps: NonNegInt | None = None
    weight_kg: Annotated[float, Field(ge=0, le=1000)] | None = None
    duration_seconds: NonNegInt | None = 0
    # Omit to have it estimated from the exercise's calorie rate
    calories_burned: NonNegFloat | None = None
    notes: NotesStr | None = None

class WorkoutExerciseRead(BaseModel):
    id: int
    workout_id: int
    exercise_id: int
    sets: int | None = None
    reps: int | None = None
    weight_kg: float | None = None
    duration_seconds: int | None = None
    calories_burned: float | None = None
    notes: str | None = None
    exercise_name: str | None = None
    muscle_group: str | None = None
    difficulty: str | None = None
    category_name: str | None = None

    model_config = {"from_attributes": True}

class WorkoutLog(BaseModel):
    name: NameStr
    workout_date: date
    notes: NotesStr | None = None
    exercises: Annotated[list[WorkoutExerciseCreate], Field(min_length=1)]

class WorkoutDetail(WorkoutRead):
    exercises: list[WorkoutExerciseRead] = []
