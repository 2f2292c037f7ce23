from typing import Literal
from pydantic import BaseModel
from fittrack.schemas.workout import WorkoutRead

Window = Literal["all", "week", "month"]

class StatsSummary(BaseModel):
    total_workouts: int
    total_calories_burned: float
    total_duration_minutes: int
    average_calories_per_workout: float
    recent_workouts: list[WorkoutRead]

class WindowTotals(BaseModel):
    total_workouts: int
    total_calories: float
    total_duration_minutes: int

class MonthGroup(BaseModel):
    label: str
    workouts: list[WorkoutRead]

class HistoryRead(BaseModel):
    window: Window
    totals: WindowTotals
    groups: list[MonthGroup]
