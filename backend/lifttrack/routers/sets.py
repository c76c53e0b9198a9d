from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from lifttrack.db import get_db
from lifttrack.deps.auth import get_current_user
from lifttrack.models import User
from lifttrack.schemas.workout_set import SetCreate, SetRead
from lifttrack.services.set_ledger import SetLedger

router = APIRouter(tags=["sets"])

@router.post(
    "/workout-exercises/{workout_exercise_id}/sets",
    response_model=SetRead,
    status_code=status.HTTP_201_CREATED,
)
def log_set(
    workout_exercise_id: int,
    payload: SetCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return SetLedger(db).log_set(
        current.id,
        workout_exercise_id,
        set_order=payload.set_order,
        reps=payload.reps,
        weight=payload.weight,
    )

@router.delete("/sets/{set_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_set(set_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    SetLedger(db).delete_set(current.id, set_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
