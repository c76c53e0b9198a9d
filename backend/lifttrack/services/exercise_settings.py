from __future__ import annotations
from sqlalchemy.orm import Session
from lifttrack.exercises import DEFAULT_REST_SECONDS, DEFAULT_SET_COUNT, Exercise
from lifttrack.repositories.exercise_settings_repo import ExerciseSettingsRepository
from lifttrack.schemas.exercise_settings import ExerciseSettingsRead


def get_exercise_settings(db: Session, user_id: int, exercise: Exercise) -> ExerciseSettingsRead:
    row = ExerciseSettingsRepository(db).get_for(user_id, exercise.value)
    rest = row.rest_duration_seconds if row and row.rest_duration_seconds else DEFAULT_REST_SECONDS
    return ExerciseSettingsRead(
        exercise_name=exercise,
        rest_duration_seconds=rest,
        default_sets=DEFAULT_SET_COUNT,
    )


def update_exercise_settings(
    db: Session, user_id: int, exercise: Exercise, *, rest_duration_seconds: int
) -> ExerciseSettingsRead:
    row = ExerciseSettingsRepository(db).upsert(
        user_id, exercise.value, rest_duration_seconds=rest_duration_seconds
    )
    return ExerciseSettingsRead(
        exercise_name=exercise,
        rest_duration_seconds=row.rest_duration_seconds,
        default_sets=DEFAULT_SET_COUNT,
    )
