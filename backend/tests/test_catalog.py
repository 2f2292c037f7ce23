import pytest
from fastapi.testclient import TestClient
from fittrack.main import app
from fittrack.errors import NotFound
from fittrack.services.catalog import CatalogService, estimate_calories, seed_catalog

client = TestClient(app)

def test_list_categories_and_get_one():
    r = client.get("/categories")
    assert r.status_code == 200
    cats = r.json()
    assert {"Cardio", "Strength"} <= {c["name"] for c in cats}
    first = cats[0]
    r = client.get(f"/categories/{first['id']}")
    assert r.status_code == 200
    assert r.json() == first

def test_missing_category_404():
    r = client.get("/categories/999999")
    assert r.status_code == 404
    assert r.json() == {"detail": "Category not found", "kind": "not_found"}

def test_exercises_carry_category_name():
    exercises = client.get("/exercises").json()
    assert exercises
    running = next(e for e in exercises if e["name"] == "Running")
    assert running["category_name"] == "Cardio"
    assert running["calories_per_minute"] == pytest.approx(11.4)
    r = client.get(f"/exercises/{running['id']}")
    assert r.status_code == 200
    assert r.json()["category_name"] == "Cardio"

def test_exercises_by_category():
    cardio = next(c for c in client.get("/categories").json() if c["name"] == "Cardio")
    rows = client.get(f"/exercises/category/{cardio['id']}").json()
    assert rows and all(e["category_id"] == cardio["id"] for e in rows)
    # unknown category is an empty list, not an error
    r = client.get("/exercises/category/999999")
    assert r.status_code == 200
    assert r.json() == []

def test_missing_exercise(db):
    assert client.get("/exercises/999999").status_code == 404
    with pytest.raises(NotFound):
        CatalogService(db).get_exercise(999999)

def test_seed_is_idempotent(db):
    assert seed_catalog(db) == 0

def test_estimate_calories():
    assert estimate_calories(1800, 10) == 300
    assert estimate_calories(90, 5) == 8        # 7.5 rounds half up
    assert estimate_calories(0, 12) == 0
    assert estimate_calories(None, 12) == 0
