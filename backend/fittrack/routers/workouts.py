from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.schemas.workout import (
    WorkoutCreate, WorkoutDetail, WorkoutExerciseCreate, WorkoutExerciseRead,
    WorkoutLog, WorkoutRead, WorkoutUpdate,
)
from fittrack.schemas.stats import Window
from fittrack.services.ledger import WorkoutLedger
from fittrack.services.statistics import filter_by_window
from fittrack.deps.auth import get_current_user
from fittrack.models import User  # type only

router = APIRouter(prefix="/workouts", tags=["workouts"])
items_router = APIRouter(prefix="/workout-exercises", tags=["workout exercises"])

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    window: Window = Query("all"),
):
    workouts = WorkoutLedger(db).list_workouts_for_user(current.id)
    return filter_by_window(workouts, window)

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutLedger(db).create_workout(current.id, **payload.model_dump())

@router.post("/log", response_model=WorkoutDetail, status_code=status.HTTP_201_CREATED)
def log_workout(payload: WorkoutLog, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    """Create a workout and all of its exercises in one go."""
    return WorkoutLedger(db).log_workout(
        current.id,
        name=payload.name,
        workout_date=payload.workout_date,
        notes=payload.notes,
        items=[item.model_dump() for item in payload.exercises],
    )

@router.get("/{workout_id}", response_model=WorkoutDetail)
def get_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutLedger(db).get_workout(workout_id, current.id)

@router.put("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return WorkoutLedger(db).update_workout(workout_id, current.id, payload.model_dump())

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    WorkoutLedger(db).delete_workout(workout_id, current.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{workout_id}/exercises", response_model=list[WorkoutExerciseRead])
def list_workout_exercises(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutLedger(db).list_exercises_for_workout(workout_id, user_id=current.id)

@router.post("/{workout_id}/exercises", response_model=WorkoutExerciseRead, status_code=status.HTTP_201_CREATED)
def add_workout_exercise(
    workout_id: int,
    payload: WorkoutExerciseCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return WorkoutLedger(db).add_exercise_to_workout(workout_id, user_id=current.id, **payload.model_dump())

@items_router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_workout_exercise(item_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    WorkoutLedger(db).remove_exercise_from_workout(item_id, user_id=current.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
