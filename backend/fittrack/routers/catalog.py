from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.schemas.catalog import CategoryRead, ExerciseRead
from fittrack.services.catalog import CatalogService

categories_router = APIRouter(prefix="/categories", tags=["catalog"])
exercises_router = APIRouter(prefix="/exercises", tags=["catalog"])

@categories_router.get("", response_model=list[CategoryRead])
def list_categories(db: Session = Depends(get_db)):
    return CatalogService(db).list_categories()

@categories_router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: int, db: Session = Depends(get_db)):
    return CatalogService(db).get_category(category_id)

@exercises_router.get("", response_model=list[ExerciseRead])
def list_exercises(db: Session = Depends(get_db)):
    return CatalogService(db).list_exercises()

@exercises_router.get("/category/{category_id}", response_model=list[ExerciseRead])
def list_exercises_by_category(category_id: int, db: Session = Depends(get_db)):
    return CatalogService(db).list_exercises_by_category(category_id)

@exercises_router.get("/{exercise_id}", response_model=ExerciseRead)
def get_exercise(exercise_id: int, db: Session = Depends(get_db)):
    return CatalogService(db).get_exercise(exercise_id)
