from datetime import date, datetime
from pydantic import BaseModel

class ProgressPoint(BaseModel):
    set_id: int
    created_at: datetime
    reps: int
    weight: int
    volume: int

class HistorySet(BaseModel):
    reps: int
    weight: int

class HistoryDay(BaseModel):
    workout_date: date
    sets: list[HistorySet]
