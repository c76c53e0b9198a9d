from __future__ import annotations
import logging
from datetime import date
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from lifttrack.errors import StoreFailure
from lifttrack.models import Workout, WorkoutExercise
from lifttrack.repositories.base import BaseRepository

log = logging.getLogger(__name__)

class WorkoutExerciseRepository(BaseRepository[WorkoutExercise]):
    model = WorkoutExercise

    def get_with_owner(self, workout_exercise_id: int) -> Optional[WorkoutExercise]:
        stmt = (
            select(WorkoutExercise)
            .where(WorkoutExercise.id == workout_exercise_id)
            .options(selectinload(WorkoutExercise.workout))
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_for_day(self, user_id: int, exercise: str, day: date) -> list[WorkoutExercise]:
        """Instances of `exercise` logged on `day`, lowest instance first, sets loaded."""
        stmt = (
            select(WorkoutExercise)
            .join(Workout, Workout.id == WorkoutExercise.workout_id)
            .where(
                Workout.user_id == user_id,
                Workout.workout_date == day,
                WorkoutExercise.exercise == exercise,
            )
            .options(selectinload(WorkoutExercise.sets))
            .order_by(WorkoutExercise.instance.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def latest_instance(self, workout_id: int, exercise: str) -> Optional[WorkoutExercise]:
        stmt = (
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id == workout_id, WorkoutExercise.exercise == exercise)
            .options(selectinload(WorkoutExercise.sets))
            .order_by(WorkoutExercise.instance.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def max_instance(self, workout_id: int, exercise: str) -> int:
        stmt = select(func.max(WorkoutExercise.instance)).where(
            WorkoutExercise.workout_id == workout_id,
            WorkoutExercise.exercise == exercise,
        )
        return self.db.execute(stmt).scalar_one() or 0

    def create_next_instance(self, workout_id: int, exercise: str, *, retries: int = 3) -> WorkoutExercise:
        """
        Append instance max+1 for (workout_id, exercise).

        The unique constraint on (workout_id, exercise, instance) rejects a
        number another request took between our read and our insert; in that
        case the maximum is re-read and the insert retried.
        """
        for attempt in range(retries + 1):
            instance = self.max_instance(workout_id, exercise) + 1
            try:
                return self.add_and_refresh(
                    WorkoutExercise(workout_id=workout_id, exercise=exercise, instance=instance, seq=1)
                )
            except IntegrityError:
                log.warning(
                    "instance %s of %r in workout %s already taken (attempt %s)",
                    instance, exercise, workout_id, attempt + 1,
                )
        raise StoreFailure(f"could not allocate a new instance of {exercise}")
