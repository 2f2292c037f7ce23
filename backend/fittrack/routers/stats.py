from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from fittrack.db import get_db
from fittrack.schemas.stats import HistoryRead, StatsSummary, Window
from fittrack.services.statistics import StatisticsEngine
from fittrack.deps.auth import get_current_user
from fittrack.models import User

router = APIRouter(prefix="/stats", tags=["stats"])

@router.get("/summary", response_model=StatsSummary)
def summary(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return StatisticsEngine(db).summary_for_user(current.id)

@router.get("/history", response_model=HistoryRead)
def history(
    window: Window = Query("all"),
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return StatisticsEngine(db).history_for_user(current.id, window)
