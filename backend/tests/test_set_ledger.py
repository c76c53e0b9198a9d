from datetime import date
import uuid
import pytest
from lifttrack.errors import Forbidden, NotFound
from lifttrack.exercises import Exercise
from lifttrack.models import Workout, WorkoutExercise, WorkoutSet
from lifttrack.repositories.user_repo import UserRepository
from lifttrack.services.set_ledger import SetLedger
from lifttrack.services.workout_session import WorkoutSessionService

DAY = date(2025, 4, 2)

def _instance(db, user_id):
    return WorkoutSessionService(db).create_workout_exercise_instance(user_id, Exercise.bench_press, DAY)

def test_log_set_returns_persisted_row(db, user_id):
    we = _instance(db, user_id)
    s = SetLedger(db).log_set(user_id, we.id, set_order=0, reps=10, weight=135)
    assert s.id is not None
    assert s.created_at is not None
    assert (s.reps, s.weight, s.set_order, s.round) == (10, 135, 0, 1)

def test_log_then_delete_leaves_workout_and_instance(db, user_id):
    we = _instance(db, user_id)
    ledger = SetLedger(db)
    s = ledger.log_set(user_id, we.id, set_order=0, reps=5, weight=225)
    set_id, we_id, workout_id = s.id, we.id, we.workout_id
    ledger.delete_set(user_id, set_id)
    assert db.get(WorkoutSet, set_id) is None
    assert db.get(WorkoutExercise, we_id) is not None
    assert db.get(Workout, workout_id) is not None

def test_delete_does_not_renumber_siblings(db, user_id):
    we = _instance(db, user_id)
    ledger = SetLedger(db)
    ids = [ledger.log_set(user_id, we.id, set_order=i, reps=8, weight=100).id for i in range(3)]
    ledger.delete_set(user_id, ids[1])
    orders = [db.get(WorkoutSet, i).set_order for i in (ids[0], ids[2])]
    assert orders == [0, 2]

def test_missing_rows_are_not_found(db, user_id):
    ledger = SetLedger(db)
    with pytest.raises(NotFound):
        ledger.delete_set(user_id, 987654)
    with pytest.raises(NotFound):
        ledger.log_set(user_id, 987654, set_order=0, reps=1, weight=1)

def test_other_users_rows_are_forbidden(db, user_id):
    we = _instance(db, user_id)
    s = SetLedger(db).log_set(user_id, we.id, set_order=0, reps=1, weight=1)
    intruder = UserRepository(db).create(email=f"{uuid.uuid4().hex[:8]}@ex.com", name="X", password_hash="")
    ledger = SetLedger(db)
    with pytest.raises(Forbidden):
        ledger.delete_set(intruder.id, s.id)
    with pytest.raises(Forbidden):
        ledger.log_set(intruder.id, we.id, set_order=1, reps=1, weight=1)

def test_quick_add_appends_to_latest_instance(db, user_id):
    ledger = SetLedger(db)
    first = ledger.quick_add(user_id, Exercise.leg_press, DAY, reps=12, weight=300)
    second = ledger.quick_add(user_id, Exercise.leg_press, DAY, reps=10, weight=320)
    assert first.workout_exercise_id == second.workout_exercise_id
    assert (first.set_order, second.set_order) == (0, 1)
    assert db.get(WorkoutExercise, first.workout_exercise_id).instance == 1
