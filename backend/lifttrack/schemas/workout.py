from datetime import date
from pydantic import BaseModel
from lifttrack.schemas.workout_set import SetRead

class WorkoutExerciseRead(BaseModel):
    id: int
    workout_id: int
    exercise: str
    instance: int
    sets: list[SetRead] = []

    model_config = {"from_attributes": True}

class WorkoutRead(BaseModel):
    id: int
    workout_date: date
    workout_exercises: list[WorkoutExerciseRead] = []

    model_config = {"from_attributes": True}
