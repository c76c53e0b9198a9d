"""Read-only projections over a user's full workout list (ORM rows or WorkoutRead)."""
from __future__ import annotations
from typing import Any, Iterable
from lifttrack.exercises import Exercise
from lifttrack.schemas.progress import HistoryDay, HistorySet, ProgressPoint


def progress_series(workouts: Iterable[Any], exercise: Exercise) -> list[ProgressPoint]:
    """Every confirmed set of `exercise`, oldest first."""
    sets = [
        s
        for w in workouts
        for we in w.workout_exercises
        if we.exercise == exercise.value
        for s in we.sets
        if s.created_at is not None
    ]
    sets.sort(key=lambda s: s.created_at)
    return [
        ProgressPoint(set_id=s.id, created_at=s.created_at, reps=s.reps, weight=s.weight, volume=s.reps * s.weight)
        for s in sets
    ]


def workout_history(workouts: Iterable[Any], exercise: Exercise) -> list[HistoryDay]:
    """Sets of `exercise` grouped per workout day, most recent day first."""
    days = []
    for w in workouts:
        instances = sorted(
            (we for we in w.workout_exercises if we.exercise == exercise.value),
            key=lambda we: we.instance,
        )
        sets = [
            HistorySet(reps=s.reps, weight=s.weight)
            for we in instances
            for s in sorted(we.sets, key=lambda s: (s.set_order, s.id))
        ]
        if sets:
            days.append(HistoryDay(workout_date=w.workout_date, sets=sets))
    days.sort(key=lambda d: d.workout_date, reverse=True)
    return days
