from __future__ import annotations
import logging
from datetime import date
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from lifttrack.errors import StoreFailure
from lifttrack.models import Workout, WorkoutExercise
from lifttrack.repositories.base import BaseRepository

log = logging.getLogger(__name__)

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def get_for_date(self, user_id: int, day: date) -> Optional[Workout]:
        stmt = select(Workout).where(Workout.user_id == user_id, Workout.workout_date == day)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_or_create_for_date(self, user_id: int, day: date) -> Workout:
        existing = self.get_for_date(user_id, day)
        if existing:
            return existing
        try:
            return self.add_and_refresh(Workout(user_id=user_id, workout_date=day))
        except IntegrityError:
            # Lost the race against another request creating the same day
            log.info("workout for user=%s on %s created concurrently; reusing it", user_id, day)
            existing = self.get_for_date(user_id, day)
            if existing is None:
                raise StoreFailure("could not create or find today's workout")
            return existing

    def list_with_sets(self, user_id: int) -> list[Workout]:
        """All of a user's workouts, newest day first, instances and sets eager-loaded."""
        stmt = (
            select(Workout)
            .where(Workout.user_id == user_id)
            .options(selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.sets))
            .order_by(Workout.workout_date.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def latest_containing(self, user_id: int, exercise: str, *, before: date | None = None) -> Optional[Workout]:
        stmt = (
            select(Workout)
            .join(WorkoutExercise, WorkoutExercise.workout_id == Workout.id)
            .where(Workout.user_id == user_id, WorkoutExercise.exercise == exercise)
        )
        if before is not None:
            stmt = stmt.where(Workout.workout_date < before)
        stmt = stmt.order_by(Workout.workout_date.desc()).limit(1)
        return self.db.execute(stmt).scalars().first()
