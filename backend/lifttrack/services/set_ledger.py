from __future__ import annotations
import logging
from datetime import date
from sqlalchemy.orm import Session
from lifttrack.errors import Forbidden, NotFound
from lifttrack.exercises import Exercise
from lifttrack.models import WorkoutExercise, WorkoutSet
from lifttrack.repositories.workout_repo import WorkoutRepository
from lifttrack.repositories.workout_exercise_repo import WorkoutExerciseRepository
from lifttrack.repositories.workout_set_repo import SetRepository
from lifttrack.settings import get_settings

log = logging.getLogger(__name__)


class SetLedger:
    """Insert and delete persisted sets, scoped to the owning user."""

    def __init__(self, db: Session):
        self.sets = SetRepository(db)
        self.instances = WorkoutExerciseRepository(db)
        self.workouts = WorkoutRepository(db)

    def owned_instance(self, user_id: int, workout_exercise_id: int) -> WorkoutExercise:
        we = self.instances.get_with_owner(workout_exercise_id)
        if we is None:
            raise NotFound("Workout exercise not found")
        if we.workout.user_id != user_id:
            raise Forbidden("Not allowed for this workout exercise")
        return we

    def log_set(self, user_id: int, workout_exercise_id: int, *, set_order: int, reps: int, weight: int) -> WorkoutSet:
        self.owned_instance(user_id, workout_exercise_id)
        s = self.sets.create(workout_exercise_id, reps=reps, weight=weight, set_order=set_order)
        log.info("logged set id=%s instance=%s order=%s %sx%s", s.id, workout_exercise_id, set_order, reps, weight)
        return s

    def delete_set(self, user_id: int, set_id: int) -> None:
        s = self.sets.get_with_owner(set_id)
        if s is None:
            raise NotFound("Set not found")
        if s.workout_exercise.workout.user_id != user_id:
            raise Forbidden("Not allowed for this set")
        self.sets.delete(s)
        log.info("deleted set id=%s", set_id)

    def quick_add(self, user_id: int, exercise: Exercise, day: date, *, reps: int, weight: int) -> WorkoutSet:
        """
        Append a set to today's latest instance of `exercise`, creating the
        day and instance 1 when missing.
        """
        workout = self.workouts.get_or_create_for_date(user_id, day)
        we = self.instances.latest_instance(workout.id, exercise.value)
        if we is None:
            we = self.instances.create_next_instance(
                workout.id, exercise.value, retries=get_settings().INSTANCE_CREATE_RETRIES
            )
        set_order = self.sets.next_set_order(we.id)
        return self.sets.create(we.id, reps=reps, weight=weight, set_order=set_order)
