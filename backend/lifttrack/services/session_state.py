"""
Pure transitions of the lift card state.

Every function takes a SessionSnapshot and returns a new one; nothing here
touches the database. The service in workout_session.py combines these with
repository calls.
"""
from __future__ import annotations
from typing import Iterable, Optional
from pydantic import TypeAdapter, ValidationError
from lifttrack.errors import InvalidTransition, ValidationFailure
from lifttrack.exercises import DEFAULT_SET_COUNT, Exercise
from lifttrack.schemas.session import SessionSnapshot, SetRow, ViewState
from lifttrack.schemas.workout import WorkoutExerciseRead
from lifttrack.schemas.workout_set import RepCount, WeightLbs
from lifttrack.services.session_resolver import Template


_COUNT_TYPES = {
    "reps": TypeAdapter(RepCount),
    "weight": TypeAdapter(WeightLbs),
}


def parse_count(value: str, field: str) -> int:
    """Whole ASCII digits only, within the same bounds the set endpoints enforce."""
    raw = value.strip()
    if not (raw.isascii() and raw.isdecimal()):
        raise ValidationFailure(f"{field} must be a whole number")
    try:
        return _COUNT_TYPES[field].validate_python(int(raw))
    except ValidationError:
        raise ValidationFailure(f"{field} is out of range")


def loading(exercise: Exercise) -> SessionSnapshot:
    return SessionSnapshot(exercise=exercise)


def summary(exercise: Exercise, todays_instances: Iterable[WorkoutExerciseRead]) -> SessionSnapshot:
    return SessionSnapshot(
        exercise=exercise,
        view=ViewState.summary,
        todays_instances=tuple(sorted(todays_instances, key=lambda we: we.instance)),
    )


def seed_rows(template: Optional[Template]) -> tuple[SetRow, ...]:
    if template is not None and template.sets:
        return tuple(SetRow(reps=str(s.reps), weight=str(s.weight)) for s in template.sets)
    return tuple(SetRow() for _ in range(DEFAULT_SET_COUNT))


def activate(
    exercise: Exercise,
    *,
    workout_exercise_id: int,
    instance: int,
    template: Optional[Template],
    rest_duration_seconds: int,
) -> SessionSnapshot:
    return SessionSnapshot(
        exercise=exercise,
        view=ViewState.active,
        workout_exercise_id=workout_exercise_id,
        instance=instance,
        sets=seed_rows(template),
        rest_duration_seconds=rest_duration_seconds,
        resting=False,
    )


def require_active(snap: SessionSnapshot) -> None:
    if snap.view is not ViewState.active or snap.workout_exercise_id is None:
        raise InvalidTransition("no active session for this exercise")


def _row(snap: SessionSnapshot, index: int) -> SetRow:
    if not 0 <= index < len(snap.sets):
        raise InvalidTransition(f"no set row at position {index}")
    return snap.sets[index]


def _replace_row(snap: SessionSnapshot, index: int, row: SetRow) -> SessionSnapshot:
    sets = snap.sets[:index] + (row,) + snap.sets[index + 1:]
    return snap.model_copy(update={"sets": sets})


def add_row(snap: SessionSnapshot) -> SessionSnapshot:
    require_active(snap)
    return snap.model_copy(update={"sets": snap.sets + (SetRow(),)})


def edit_row(snap: SessionSnapshot, index: int, *, reps: str | None = None, weight: str | None = None) -> SessionSnapshot:
    require_active(snap)
    row = _row(snap, index)
    if row.logged or row.pending:
        raise InvalidTransition("logged sets cannot be edited")
    update = {}
    if reps is not None:
        update["reps"] = reps
    if weight is not None:
        update["weight"] = weight
    return _replace_row(snap, index, row.model_copy(update=update))


def begin_log(snap: SessionSnapshot, index: int) -> tuple[SessionSnapshot, int, int]:
    """
    First phase of logging: validate the row and mark it pending.

    Returns the pending snapshot with the parsed reps and weight.
    """
    require_active(snap)
    if snap.resting:
        raise InvalidTransition("rest timer is still running")
    row = _row(snap, index)
    if row.logged or row.pending:
        raise InvalidTransition("set already logged")
    reps = parse_count(row.reps, "reps")
    weight = parse_count(row.weight, "weight")
    return _replace_row(snap, index, row.model_copy(update={"pending": True})), reps, weight


def confirm_log(snap: SessionSnapshot, index: int, set_id: int) -> SessionSnapshot:
    row = _row(snap, index)
    confirmed = row.model_copy(update={"id": set_id, "logged": True, "pending": False})
    return _replace_row(snap, index, confirmed).model_copy(update={"resting": True})


def rollback_log(snap: SessionSnapshot, index: int) -> SessionSnapshot:
    row = _row(snap, index)
    return _replace_row(snap, index, row.model_copy(update={"pending": False}))


def remove_row(snap: SessionSnapshot, index: int) -> SessionSnapshot:
    require_active(snap)
    if _row(snap, index).pending:
        raise InvalidTransition("set is still being saved")
    return snap.model_copy(update={"sets": snap.sets[:index] + snap.sets[index + 1:]})


def timer_ended(snap: SessionSnapshot) -> SessionSnapshot:
    return snap.model_copy(update={"resting": False})


def has_logged_sets(snap: SessionSnapshot) -> bool:
    return any(row.logged for row in snap.sets)
