from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

NonNegInt = Annotated[int, Field(ge=0)]
# Kept well inside a 32-bit INTEGER column
RepCount = Annotated[int, Field(ge=0, le=1000)]
WeightLbs = Annotated[int, Field(ge=0, le=2000)]

class SetCreate(BaseModel):
    # Position of the row in the client's list at the moment it was logged
    set_order: NonNegInt
    reps: RepCount
    weight: WeightLbs

class QuickSetCreate(BaseModel):
    reps: RepCount
    weight: WeightLbs

class SetRead(BaseModel):
    id: int
    workout_exercise_id: int
    reps: int
    weight: int
    set_order: int
    round: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
