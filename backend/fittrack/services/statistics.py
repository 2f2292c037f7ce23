# fittrack/services/statistics.py
"""
Aggregates over a user's workouts.

Everything here is computed on demand from the stored Workout snapshot
fields (`total_calories`, `duration_minutes`); line items are never
re-summed. The module-level helpers are pure and work on any sequence of
objects exposing `workout_date` / `total_calories` / `duration_minutes`.
"""
from __future__ import annotations
import calendar
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Sequence

from sqlalchemy.orm import Session

from fittrack.errors import ValidationError
from fittrack.repositories.workout_repo import WorkoutRepository
from fittrack.settings import get_settings

WINDOWS = ("all", "week", "month")


def _date_of(workout) -> date:
    value = workout.workout_date
    return value if isinstance(value, date) else date.fromisoformat(str(value))


def window_bounds(window: str, today: date) -> tuple[date, date] | None:
    """Inclusive (first, last) calendar days of `window`; None for "all"."""
    if window == "all":
        return None
    if window == "month":
        last_day = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last_day)
    if window == "week":
        # Weeks start on Sunday (date.weekday() has Monday == 0) and run through today
        sunday = today - timedelta(days=(today.weekday() + 1) % 7)
        return sunday, today
    raise ValidationError(f"unknown window {window!r}; expected one of {', '.join(WINDOWS)}")


def filter_by_window(workouts: Iterable, window: str, today: date | None = None) -> list:
    """
    Keep the workouts dated inside `window`: "week" is Sunday through today,
    "month" the whole current calendar month, "all" everything. `today`
    defaults to the local date at call time.
    """
    today = today or date.today()
    bounds = window_bounds(window, today)
    if bounds is None:
        return list(workouts)
    first, last = bounds
    return [w for w in workouts if first <= _date_of(w) <= last]


def group_by_calendar_month(workouts: Iterable) -> list[dict]:
    """
    [{"label": "January 2024", "workouts": [...]}, ...] in the order each
    month first appears in the input. Groups are not re-sorted.
    """
    groups: dict[tuple[int, int], dict] = {}
    for w in workouts:
        d = _date_of(w)
        key = (d.year, d.month)
        if key not in groups:
            groups[key] = {"label": f"{calendar.month_name[d.month]} {d.year}", "workouts": []}
        groups[key]["workouts"].append(w)
    return list(groups.values())


def average_calories_per_workout(total_calories, total_workouts: int) -> float:
    if total_workouts <= 0:
        return 0
    return float(total_calories) / total_workouts


def window_totals(workouts: Sequence) -> dict:
    calories = sum((Decimal(str(w.total_calories or 0)) for w in workouts), Decimal(0))
    return {
        "total_workouts": len(workouts),
        "total_calories": calories,
        "total_duration_minutes": sum(w.duration_minutes or 0 for w in workouts),
    }


class StatisticsEngine:
    def __init__(self, db: Session):
        self.workouts = WorkoutRepository(db)

    def summary_for_user(self, user_id: int) -> dict:
        count, calories, duration = self.workouts.totals_by_user(user_id)
        recent = self.workouts.list_by_user(user_id, limit=get_settings().RECENT_WORKOUTS_LIMIT)
        return {
            "total_workouts": count,
            "total_calories_burned": calories,
            "total_duration_minutes": duration,
            "average_calories_per_workout": average_calories_per_workout(calories, count),
            "recent_workouts": recent,
        }

    def history_for_user(self, user_id: int, window: str = "all", today: date | None = None) -> dict:
        workouts = filter_by_window(self.workouts.list_by_user(user_id), window, today)
        return {
            "window": window,
            "totals": window_totals(workouts),
            "groups": group_by_calendar_month(workouts),
        }
