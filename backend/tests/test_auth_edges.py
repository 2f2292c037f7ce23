from fastapi.testclient import TestClient
from fittrack.main import app
from fittrack.security import create_access_token
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"

def make_user():
    tag = uuid.uuid4().hex[:10]
    email = f"{tag}@example.com"
    client.post("/auth/register", json={"username": f"e{tag}", "email": email, "password": PWD})
    tok = client.post("/auth/login", json={"email": email, "password": PWD}).json()["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {tok}"}).json()
    return me["id"], email, tok

def test_token_expired():
    user_id, _, _ = make_user()
    # craft an already-expired token for the same user id
    expired = create_access_token(str(user_id), expires_minutes=-1)
    r = client.get("/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired"

def test_garbage_token():
    r = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401

def test_requires_auth():
    # no token -> 401
    assert client.get("/workouts").status_code == 401
    assert client.get("/stats/summary").status_code == 401

def test_deactivated_account_cannot_login_or_use_token():
    user_id, email, tok = make_user()
    h = {"Authorization": f"Bearer {tok}"}
    r = client.delete(f"/users/{user_id}", headers=h)
    assert r.status_code == 200
    assert r.json()["is_active"] is False

    r = client.post("/auth/login", json={"email": email, "password": PWD})
    assert r.status_code == 403
    assert r.json()["kind"] == "account_disabled"

    r = client.get("/auth/me", headers=h)
    assert r.status_code == 401
    assert r.json()["detail"] == "Account is deactivated"
