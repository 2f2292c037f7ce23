from fittrack.models.user import User
from fittrack.models.category import Category
from fittrack.models.exercise import Exercise
from fittrack.models.workout import Workout
from fittrack.models.workout_exercise import WorkoutExercise

__all__ = ["User", "Category", "Exercise", "Workout", "WorkoutExercise"]
