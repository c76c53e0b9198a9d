from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from lifttrack.db import get_db
from lifttrack.deps.auth import get_current_user
from lifttrack.deps.clock import get_today
from lifttrack.exercises import DEFAULT_EXERCISE, Exercise, is_bodyweight
from lifttrack.models import User
from lifttrack.repositories.workout_repo import WorkoutRepository
from lifttrack.schemas.exercise_settings import ExerciseListRead, ExerciseSettingsRead, ExerciseSettingsUpdate
from lifttrack.schemas.progress import HistoryDay, ProgressPoint
from lifttrack.schemas.session import SessionSnapshot
from lifttrack.schemas.workout import WorkoutExerciseRead
from lifttrack.schemas.workout_set import QuickSetCreate, SetRead
from lifttrack.services.exercise_settings import get_exercise_settings, update_exercise_settings
from lifttrack.services.progress import progress_series, workout_history
from lifttrack.services.session_resolver import SessionResolver
from lifttrack.services.set_ledger import SetLedger
from lifttrack.services.workout_session import WorkoutSessionService

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=ExerciseListRead)
def list_exercises():
    return ExerciseListRead(
        exercises=list(Exercise),
        default=DEFAULT_EXERCISE,
        bodyweight=[e for e in Exercise if is_bodyweight(e)],
    )

@router.get("/{exercise}/settings", response_model=ExerciseSettingsRead)
def read_settings(exercise: Exercise, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return get_exercise_settings(db, current.id, exercise)

@router.put("/{exercise}/settings", response_model=ExerciseSettingsRead)
def write_settings(
    exercise: Exercise,
    payload: ExerciseSettingsUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return update_exercise_settings(db, current.id, exercise, rest_duration_seconds=payload.rest_duration_seconds)

@router.post("/{exercise}/instances", response_model=WorkoutExerciseRead, status_code=status.HTTP_201_CREATED)
def create_instance(
    exercise: Exercise,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    today: date = Depends(get_today),
):
    return WorkoutSessionService(db).create_workout_exercise_instance(current.id, exercise, today)

@router.get("/{exercise}/last", response_model=WorkoutExerciseRead)
def last_prior_instance(
    exercise: Exercise,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    today: date = Depends(get_today),
):
    we = SessionResolver(db).last_prior_instance(current.id, exercise, before=today)
    if we is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No earlier workout for this exercise")
    return we

@router.get("/{exercise}/progress", response_model=list[ProgressPoint])
def progress(exercise: Exercise, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return progress_series(WorkoutRepository(db).list_with_sets(current.id), exercise)

@router.get("/{exercise}/history", response_model=list[HistoryDay])
def history(exercise: Exercise, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return workout_history(WorkoutRepository(db).list_with_sets(current.id), exercise)

@router.post("/{exercise}/sets", response_model=SetRead, status_code=status.HTTP_201_CREATED)
def quick_add_set(
    exercise: Exercise,
    payload: QuickSetCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    today: date = Depends(get_today),
):
    return SetLedger(db).quick_add(current.id, exercise, today, reps=payload.reps, weight=payload.weight)

@router.post("/{exercise}/session", response_model=SessionSnapshot)
def enter_session(
    exercise: Exercise,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    today: date = Depends(get_today),
):
    return WorkoutSessionService(db).enter(current.id, exercise, today)

@router.post("/{exercise}/session/start", response_model=SessionSnapshot, status_code=status.HTTP_201_CREATED)
def start_new_workout(
    exercise: Exercise,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    today: date = Depends(get_today),
):
    return WorkoutSessionService(db).start_new_workout(current.id, exercise, today)
