from enum import Enum
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field
from lifttrack.exercises import DEFAULT_REST_SECONDS, Exercise
from lifttrack.schemas.workout import WorkoutExerciseRead

# Raw text as typed by the user; parsed only when the row is logged
InputStr = Annotated[str, Field(max_length=16)]
RowIndex = Annotated[int, Field(ge=0)]

class ViewState(str, Enum):
    loading = "loading"
    active = "active"
    summary = "summary"

class SetRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    reps: InputStr = ""
    weight: InputStr = ""
    logged: bool = False
    # Sent to the ledger, no confirmation yet
    pending: bool = False

class SessionSnapshot(BaseModel):
    """Everything the lift card needs to render; replaced, never mutated."""
    model_config = ConfigDict(frozen=True)

    exercise: Exercise
    view: ViewState = ViewState.loading
    workout_exercise_id: int | None = None
    instance: int | None = None
    sets: tuple[SetRow, ...] = ()
    rest_duration_seconds: int = DEFAULT_REST_SECONDS
    resting: bool = False
    # Recap shown in the summary view, lowest instance first
    todays_instances: tuple[WorkoutExerciseRead, ...] = ()

class SnapshotRequest(BaseModel):
    snapshot: SessionSnapshot

class SetIndexRequest(SnapshotRequest):
    index: RowIndex

class SetEditRequest(SetIndexRequest):
    reps: InputStr | None = None
    weight: InputStr | None = None
