from typing import Annotated
from pydantic import BaseModel, Field
from lifttrack.exercises import Exercise

RestSeconds = Annotated[int, Field(gt=0, le=3600)]

class ExerciseSettingsRead(BaseModel):
    exercise_name: Exercise
    rest_duration_seconds: int
    # Always the fixed default; stored values are ignored
    default_sets: int

class ExerciseSettingsUpdate(BaseModel):
    rest_duration_seconds: RestSeconds

class ExerciseListRead(BaseModel):
    exercises: list[Exercise]
    default: Exercise
    bodyweight: list[Exercise]
