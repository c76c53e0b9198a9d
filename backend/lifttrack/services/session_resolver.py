"""
Picks the sets a new session is pre-filled from.

Same-day data wins: if the exercise was already done today, the latest of
today's instances is the template. Otherwise the latest instance from the most
recent earlier day is used.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional
from sqlalchemy.orm import Session
from lifttrack.exercises import Exercise
from lifttrack.models import WorkoutExercise
from lifttrack.repositories.workout_repo import WorkoutRepository
from lifttrack.repositories.workout_exercise_repo import WorkoutExerciseRepository


@dataclass(frozen=True, slots=True)
class TemplateSet:
    reps: int
    weight: int
    set_order: int


@dataclass(frozen=True, slots=True)
class Template:
    workout_exercise_id: int
    instance: int
    sets: tuple[TemplateSet, ...]


def template_from_instance(instance: Any) -> Template:
    """Works on ORM rows and on WorkoutExerciseRead alike."""
    ordered = sorted(instance.sets, key=lambda s: (s.set_order, s.id))
    return Template(
        workout_exercise_id=instance.id,
        instance=instance.instance,
        sets=tuple(TemplateSet(reps=s.reps, weight=s.weight, set_order=s.set_order) for s in ordered),
    )


class SessionResolver:
    def __init__(self, db: Session):
        self.workouts = WorkoutRepository(db)
        self.instances = WorkoutExerciseRepository(db)

    def last_prior_instance(self, user_id: int, exercise: Exercise, *, before: date) -> Optional[WorkoutExercise]:
        workout = self.workouts.latest_containing(user_id, exercise.value, before=before)
        if workout is None:
            return None
        return self.instances.latest_instance(workout.id, exercise.value)

    def resolve_template(
        self,
        user_id: int,
        exercise: Exercise,
        todays_instances: Iterable[Any],
        *,
        before: date,
    ) -> Optional[Template]:
        todays = list(todays_instances)
        if todays:
            return template_from_instance(max(todays, key=lambda we: we.instance))
        prior = self.last_prior_instance(user_id, exercise, before=before)
        if prior is None:
            return None
        return template_from_instance(prior)
