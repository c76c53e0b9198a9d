from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from lifttrack.db import get_db
from lifttrack.deps.auth import get_current_user
from lifttrack.deps.clock import get_today
from lifttrack.models import User
from lifttrack.schemas.session import SessionSnapshot, SetEditRequest, SetIndexRequest, SnapshotRequest
from lifttrack.services import session_state
from lifttrack.services.workout_session import WorkoutSessionService

# Transitions on a snapshot the client posts back; see WorkoutSessionService
router = APIRouter(prefix="/session", tags=["session"])

@router.post("/log", response_model=SessionSnapshot)
def log_set(payload: SetIndexRequest, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutSessionService(db).log_set(current.id, payload.snapshot, payload.index)

@router.post("/delete", response_model=SessionSnapshot)
def delete_set(payload: SetIndexRequest, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutSessionService(db).delete_set(current.id, payload.snapshot, payload.index)

@router.post("/add", response_model=SessionSnapshot)
def add_set(payload: SnapshotRequest, current: User = Depends(get_current_user)):
    return session_state.add_row(payload.snapshot)

@router.post("/edit", response_model=SessionSnapshot)
def edit_set(payload: SetEditRequest, current: User = Depends(get_current_user)):
    return session_state.edit_row(payload.snapshot, payload.index, reps=payload.reps, weight=payload.weight)

@router.post("/timer-ended", response_model=SessionSnapshot)
def timer_ended(payload: SnapshotRequest, current: User = Depends(get_current_user)):
    return session_state.timer_ended(payload.snapshot)

@router.post("/complete", response_model=SessionSnapshot)
def complete_exercise(
    payload: SnapshotRequest,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    today: date = Depends(get_today),
):
    return WorkoutSessionService(db).complete_exercise(current.id, payload.snapshot, today)
