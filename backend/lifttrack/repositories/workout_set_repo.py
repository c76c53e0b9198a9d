from __future__ import annotations
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from lifttrack.errors import StoreFailure
from lifttrack.exercises import DEFAULT_ROUND
from lifttrack.models import WorkoutExercise, WorkoutSet
from lifttrack.repositories.base import BaseRepository

class SetRepository(BaseRepository[WorkoutSet]):
    model = WorkoutSet

    def get_with_owner(self, set_id: int) -> Optional[WorkoutSet]:
        stmt = (
            select(WorkoutSet)
            .where(WorkoutSet.id == set_id)
            .options(selectinload(WorkoutSet.workout_exercise).selectinload(WorkoutExercise.workout))
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def next_set_order(self, workout_exercise_id: int) -> int:
        max_order = self.db.execute(
            select(func.max(WorkoutSet.set_order)).where(WorkoutSet.workout_exercise_id == workout_exercise_id)
        ).scalar_one()
        return 0 if max_order is None else max_order + 1

    def create(self, workout_exercise_id: int, *, reps: int, weight: int, set_order: int) -> WorkoutSet:
        s = WorkoutSet(
            workout_exercise_id=workout_exercise_id,
            reps=reps,
            weight=weight,
            set_order=set_order,
            round=DEFAULT_ROUND,
        )
        try:
            return self.add_and_refresh(s)
        except IntegrityError as e:
            raise StoreFailure("could not save set") from e

    def delete(self, s: WorkoutSet) -> None:
        self.delete_and_commit(s)
