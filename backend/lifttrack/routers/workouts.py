from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from lifttrack.db import get_db
from lifttrack.deps.auth import get_current_user
from lifttrack.models import User
from lifttrack.repositories.workout_repo import WorkoutRepository
from lifttrack.schemas.workout import WorkoutRead

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    """Everything the dashboard needs: every day, instance and set, newest day first."""
    return WorkoutRepository(db).list_with_sets(current.id)
