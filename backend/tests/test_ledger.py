import uuid
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select

from fittrack.errors import NotFound, ValidationError
from fittrack.models import Exercise, WorkoutExercise
from fittrack.services.account import AccountService
from fittrack.services.ledger import WorkoutLedger

def new_user(db):
    tag = uuid.uuid4().hex[:8]
    return AccountService(db).register(username=f"l{tag}", email=f"l{tag}@example.com",
                                       password="StrongPassw0rd!").id

def exercise(db, name):
    return db.execute(select(Exercise).where(Exercise.name == name)).scalar_one()

def test_create_requires_existing_user(db):
    with pytest.raises(NotFound):
        WorkoutLedger(db).create_workout(987654321, name="Ghost", workout_date=date(2024, 1, 1))

def test_snapshots_are_stored_as_supplied(db):
    uid = new_user(db)
    w = WorkoutLedger(db).create_workout(uid, name="Manual", workout_date="2024-01-05",
                                         duration_minutes=30, total_calories=300)
    assert w.workout_date == date(2024, 1, 5)
    assert w.duration_minutes == 30
    assert w.total_calories == Decimal("300")

def test_list_order_date_desc_then_insertion(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    a = ledger.create_workout(uid, name="a", workout_date=date(2024, 1, 5))
    b = ledger.create_workout(uid, name="b", workout_date=date(2024, 1, 20))
    c = ledger.create_workout(uid, name="c", workout_date=date(2024, 1, 5))
    assert [w.id for w in ledger.list_workouts_for_user(uid)] == [b.id, a.id, c.id]

def test_list_contains_only_own_live_workouts(db):
    uid, other = new_user(db), new_user(db)
    ledger = WorkoutLedger(db)
    mine = ledger.create_workout(uid, name="mine", workout_date=date(2024, 1, 5))
    ledger.create_workout(other, name="theirs", workout_date=date(2024, 1, 5))
    gone = ledger.create_workout(uid, name="gone", workout_date=date(2024, 1, 6))
    ledger.delete_workout(gone.id, uid)
    assert [w.id for w in ledger.list_workouts_for_user(uid)] == [mine.id]

def test_non_owner_gets_not_found(db):
    uid, other = new_user(db), new_user(db)
    ledger = WorkoutLedger(db)
    w = ledger.create_workout(uid, name="private", workout_date=date(2024, 1, 5))
    with pytest.raises(NotFound):
        ledger.get_workout(w.id, other)
    with pytest.raises(NotFound):
        ledger.update_workout(w.id, other, {"name": "x", "workout_date": date(2024, 1, 1)})
    with pytest.raises(NotFound):
        ledger.delete_workout(w.id, other)
    assert ledger.get_workout(w.id, uid).name == "private"

def test_update_overwrites_all_fields(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    w = ledger.create_workout(uid, name="old", workout_date=date(2024, 1, 5),
                              duration_minutes=10, total_calories=100, notes="n")
    w = ledger.update_workout(w.id, uid, {"name": "new", "workout_date": "2024-02-01"})
    assert (w.name, w.workout_date, w.duration_minutes, w.total_calories, w.notes) == \
        ("new", date(2024, 2, 1), None, None, None)
    assert w.user_id == uid

def test_negative_values_rejected(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    with pytest.raises(ValidationError):
        ledger.create_workout(uid, name="neg", workout_date=date(2024, 1, 5), duration_minutes=-1)
    w = ledger.create_workout(uid, name="ok", workout_date=date(2024, 1, 5))
    with pytest.raises(ValidationError):
        ledger.add_exercise_to_workout(w.id, exercise_id=exercise(db, "Squat").id, reps=-3)

def test_malformed_numbers_rejected(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    with pytest.raises(ValidationError):
        ledger.create_workout(uid, name="x", workout_date=date(2024, 1, 1), duration_minutes="abc")
    with pytest.raises(ValidationError):
        ledger.create_workout(uid, name="x", workout_date=date(2024, 1, 1), total_calories=float("nan"))
    with pytest.raises(ValidationError):
        ledger.create_workout(uid, name="x", workout_date=date(2024, 1, 1), duration_minutes=2.5)
    w = ledger.create_workout(uid, name="ok", workout_date=date(2024, 1, 1), duration_minutes="45")
    assert w.duration_minutes == 45
    with pytest.raises(ValidationError):
        ledger.add_exercise_to_workout(w.id, exercise_id=exercise(db, "Squat").id, reps="x")
    with pytest.raises(ValidationError):
        ledger.add_exercise_to_workout(w.id, exercise_id=exercise(db, "Squat").id, weight_kg=float("inf"))
    assert ledger.list_exercises_for_workout(w.id) == []

def test_supplied_calories_are_kept_and_snapshot_recomputed(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    w = ledger.create_workout(uid, name="w", workout_date=date(2024, 1, 5))
    rate10 = exercise(db, "Burpees")   # 10 cal/min
    item = ledger.add_exercise_to_workout(w.id, exercise_id=rate10.id, duration_seconds=1800,
                                          calories_burned=300)
    assert item.calories_burned == Decimal("300")
    strength = ledger.add_exercise_to_workout(w.id, exercise_id=exercise(db, "Deadlift").id,
                                              sets=5, reps=5, weight_kg=100, duration_seconds=0,
                                              calories_burned=40)
    db.expire_all()
    w = ledger.get_workout(w.id, uid)
    assert w.total_calories == Decimal("340")
    assert w.duration_minutes == 30

    ledger.remove_exercise_from_workout(strength.id)
    db.expire_all()
    assert ledger.get_workout(w.id, uid).total_calories == Decimal("300")

def test_missing_calories_estimated_from_rate(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    w = ledger.create_workout(uid, name="w", workout_date=date(2024, 1, 5))
    item = ledger.add_exercise_to_workout(w.id, exercise_id=exercise(db, "Burpees").id, duration_seconds=1800)
    assert item.calories_burned == Decimal("300")

def test_add_without_user_skips_ownership_but_with_user_checks_it(db):
    uid, other = new_user(db), new_user(db)
    ledger = WorkoutLedger(db)
    w = ledger.create_workout(uid, name="w", workout_date=date(2024, 1, 5))
    ex_id = exercise(db, "Yoga").id
    assert ledger.add_exercise_to_workout(w.id, exercise_id=ex_id).workout_id == w.id
    with pytest.raises(NotFound):
        ledger.add_exercise_to_workout(w.id, exercise_id=ex_id, user_id=other)
    with pytest.raises(NotFound):
        ledger.add_exercise_to_workout(987654321, exercise_id=ex_id)
    with pytest.raises(NotFound):
        ledger.add_exercise_to_workout(w.id, exercise_id=987654321)

def test_enriched_rows_and_absent_workout(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    w = ledger.create_workout(uid, name="w", workout_date=date(2024, 1, 5))
    ledger.add_exercise_to_workout(w.id, exercise_id=exercise(db, "Pull-up").id, sets=3, reps=8)
    [row] = ledger.list_exercises_for_workout(w.id)
    assert (row.exercise_name, row.muscle_group, row.difficulty, row.category_name) == \
        ("Pull-up", "Back", "intermediate", "Strength")
    assert ledger.list_exercises_for_workout(987654321) == []

def test_delete_cascades(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    w = ledger.create_workout(uid, name="w", workout_date=date(2024, 1, 5))
    ex_id = exercise(db, "Rowing").id
    ledger.add_exercise_to_workout(w.id, exercise_id=ex_id, duration_seconds=300)
    ledger.add_exercise_to_workout(w.id, exercise_id=ex_id, duration_seconds=300)
    wid = w.id
    ledger.delete_workout(wid, uid)
    assert ledger.list_exercises_for_workout(wid) == []
    left = db.execute(select(WorkoutExercise).where(WorkoutExercise.workout_id == wid)).scalars().all()
    assert left == []

def test_remove_missing_item(db):
    with pytest.raises(NotFound):
        WorkoutLedger(db).remove_exercise_from_workout(987654321)

def test_log_workout_is_all_or_nothing(db):
    uid = new_user(db)
    ledger = WorkoutLedger(db)
    with pytest.raises(NotFound):
        ledger.log_workout(uid, name="bad", workout_date=date(2024, 1, 5), items=[
            {"exercise_id": exercise(db, "Running").id, "duration_seconds": 600},
            {"exercise_id": 987654321},
        ])
    assert ledger.list_workouts_for_user(uid) == []
    with pytest.raises(ValidationError):
        ledger.log_workout(uid, name="empty", workout_date=date(2024, 1, 5), items=[])

    w = ledger.log_workout(uid, name="good", workout_date=date(2024, 1, 5), items=[
        {"exercise_id": exercise(db, "Cycling").id, "duration_seconds": 1200},   # 20 * 8.5 = 170
        {"exercise_id": exercise(db, "Squat").id, "sets": 4, "reps": 8, "calories_burned": 35},
    ])
    assert w.total_calories == Decimal("205")
    assert w.duration_minutes == 20
    assert len(w.exercises) == 2
