from fastapi.testclient import TestClient
from lifttrack.main import app
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"
def email(): return f"{uuid.uuid4().hex[:10]}@ex.com"

def token(e=None):
    e = e or email()
    client.post("/auth/register", json={"email": e, "name": "U", "password": PWD})
    return client.post("/auth/login", json={"email": e, "password": PWD}).json()["access_token"]

def test_requires_auth():
    assert client.get("/workouts").status_code in (401, 403)
    assert client.post("/exercises/Bench Press/session").status_code in (401, 403)
    assert client.delete("/sets/1").status_code in (401, 403)

def test_unknown_exercise_is_422():
    h = {"Authorization": f"Bearer {token()}"}
    assert client.post("/exercises/Deadlift/session", headers=h).status_code == 422

def test_log_set_404_for_missing_instance():
    h = {"Authorization": f"Bearer {token()}"}
    r = client.post("/workout-exercises/999999/sets", headers=h, json={"set_order": 0, "reps": 5, "weight": 10})
    assert r.status_code == 404

def test_delete_set_404_for_missing_set():
    h = {"Authorization": f"Bearer {token()}"}
    assert client.delete("/sets/999999", headers=h).status_code == 404

def test_negative_weight_is_422():
    h = {"Authorization": f"Bearer {token()}"}
    we = client.post("/exercises/Bench Press/instances", headers=h).json()
    r = client.post(f"/workout-exercises/{we['id']}/sets", headers=h, json={"set_order": 0, "reps": 5, "weight": -5})
    assert r.status_code == 422

def test_other_users_rows_are_off_limits():
    owner = {"Authorization": f"Bearer {token()}"}
    other = {"Authorization": f"Bearer {token()}"}
    we = client.post("/exercises/Bench Press/instances", headers=owner).json()
    r = client.post(f"/workout-exercises/{we['id']}/sets", headers=owner, json={"set_order": 0, "reps": 5, "weight": 95})
    assert r.status_code == 201
    set_id = r.json()["id"]

    r = client.post(f"/workout-exercises/{we['id']}/sets", headers=other, json={"set_order": 1, "reps": 5, "weight": 95})
    assert r.status_code == 403
    assert client.delete(f"/sets/{set_id}", headers=other).status_code == 403
    assert client.delete(f"/sets/{set_id}", headers=owner).status_code == 204
    assert client.get("/workouts", headers=other).json() == []

def test_transition_on_summary_is_409():
    h = {"Authorization": f"Bearer {token()}"}
    snap = {"exercise": "Bench Press", "view": "summary"}
    r = client.post("/session/add", headers=h, json={"snapshot": snap})
    assert r.status_code == 409
