from datetime import date, datetime
from lifttrack.exercises import Exercise
from lifttrack.schemas.workout import WorkoutExerciseRead, WorkoutRead
from lifttrack.schemas.workout_set import SetRead
from lifttrack.services.progress import progress_series, workout_history

def _set(id, we_id, reps, weight, order, at):
    return SetRead(id=id, workout_exercise_id=we_id, reps=reps, weight=weight, set_order=order, round=1, created_at=at)

WORKOUTS = [
    WorkoutRead(id=2, workout_date=date(2025, 6, 2), workout_exercises=[
        WorkoutExerciseRead(id=20, workout_id=2, exercise="Bench Press", instance=1, sets=[
            _set(201, 20, 8, 145, 0, datetime(2025, 6, 2, 18, 5)),
            _set(202, 20, 8, 145, 1, None),
        ]),
        WorkoutExerciseRead(id=21, workout_id=2, exercise="Leg Press", instance=1, sets=[
            _set(211, 21, 12, 300, 0, datetime(2025, 6, 2, 18, 30)),
        ]),
    ]),
    WorkoutRead(id=1, workout_date=date(2025, 6, 1), workout_exercises=[
        WorkoutExerciseRead(id=10, workout_id=1, exercise="Bench Press", instance=1, sets=[
            _set(102, 10, 10, 135, 1, datetime(2025, 6, 1, 9, 4)),
            _set(101, 10, 10, 135, 0, datetime(2025, 6, 1, 9, 0)),
        ]),
    ]),
    WorkoutRead(id=3, workout_date=date(2025, 6, 3), workout_exercises=[]),
]

def test_progress_is_oldest_first_and_confirmed_only():
    points = progress_series(WORKOUTS, Exercise.bench_press)
    assert [p.set_id for p in points] == [101, 102, 201]
    stamps = [p.created_at for p in points]
    assert stamps == sorted(stamps)
    assert points[-1].volume == 8 * 145

def test_progress_empty_for_untrained_exercise():
    assert progress_series(WORKOUTS, Exercise.bicep_curl) == []

def test_history_groups_by_day_newest_first():
    days = workout_history(WORKOUTS, Exercise.bench_press)
    assert [d.workout_date for d in days] == [date(2025, 6, 2), date(2025, 6, 1)]
    assert [(s.reps, s.weight) for s in days[1].sets] == [(10, 135), (10, 135)]
    assert len(days[0].sets) == 2

def test_history_skips_days_without_the_exercise():
    days = workout_history(WORKOUTS, Exercise.leg_press)
    assert [d.workout_date for d in days] == [date(2025, 6, 2)]
