from datetime import date
from lifttrack.repositories.workout_repo import WorkoutRepository
from lifttrack.repositories.workout_exercise_repo import WorkoutExerciseRepository

DAY = date(2025, 3, 10)

def test_get_or_create_for_date_is_idempotent(db, user_id):
    repo = WorkoutRepository(db)
    first = repo.get_or_create_for_date(user_id, DAY)
    second = repo.get_or_create_for_date(user_id, DAY)
    assert first.id == second.id
    assert repo.get_for_date(user_id, date(2025, 3, 11)) is None

def test_day_created_concurrently_is_reused(db, user_id, monkeypatch):
    repo = WorkoutRepository(db)
    existing = repo.get_or_create_for_date(user_id, DAY)

    # First lookup misses as if another request had not committed yet
    real = repo.get_for_date
    calls = []
    def stale_once(uid, day):
        calls.append(day)
        return None if len(calls) == 1 else real(uid, day)
    monkeypatch.setattr(repo, "get_for_date", stale_once)

    again = repo.get_or_create_for_date(user_id, DAY)
    assert again.id == existing.id
    assert len(calls) == 2

def test_instances_number_from_one_without_gaps(db, user_id):
    workout = WorkoutRepository(db).get_or_create_for_date(user_id, DAY)
    repo = WorkoutExerciseRepository(db)
    made = [repo.create_next_instance(workout.id, "Bench Press").instance for _ in range(4)]
    assert made == [1, 2, 3, 4]
    # numbering is per exercise
    assert repo.create_next_instance(workout.id, "Leg Press").instance == 1
    assert repo.latest_instance(workout.id, "Bench Press").instance == 4

def test_instance_collision_is_retried(db, user_id, monkeypatch):
    workout = WorkoutRepository(db).get_or_create_for_date(user_id, DAY)
    repo = WorkoutExerciseRepository(db)
    repo.create_next_instance(workout.id, "Bench Press")

    # A stale read of the maximum makes the first insert collide with instance 1
    real = repo.max_instance
    reads = []
    def stale_then_real(workout_id, exercise):
        reads.append(1)
        return 0 if len(reads) == 1 else real(workout_id, exercise)
    monkeypatch.setattr(repo, "max_instance", stale_then_real)

    we = repo.create_next_instance(workout.id, "Bench Press")
    assert we.instance == 2
    assert len(reads) == 2

def test_latest_containing_skips_today_and_other_exercises(db, user_id):
    workouts = WorkoutRepository(db)
    instances = WorkoutExerciseRepository(db)
    old = workouts.get_or_create_for_date(user_id, date(2025, 3, 1))
    instances.create_next_instance(old.id, "Bench Press")
    newer = workouts.get_or_create_for_date(user_id, date(2025, 3, 5))
    instances.create_next_instance(newer.id, "Leg Press")
    today = workouts.get_or_create_for_date(user_id, DAY)
    instances.create_next_instance(today.id, "Bench Press")

    found = workouts.latest_containing(user_id, "Bench Press", before=DAY)
    assert found.id == old.id
    assert workouts.latest_containing(user_id, "Bench Press").id == today.id
    assert workouts.latest_containing(user_id, "Bicep Curl", before=DAY) is None

def test_list_with_sets_newest_first(db, user_id):
    workouts = WorkoutRepository(db)
    workouts.get_or_create_for_date(user_id, date(2025, 1, 1))
    workouts.get_or_create_for_date(user_id, date(2025, 2, 1))
    dates = [w.workout_date for w in workouts.list_with_sets(user_id)]
    assert dates == [date(2025, 2, 1), date(2025, 1, 1)]
