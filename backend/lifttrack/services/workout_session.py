"""
Lifecycle of one exercise card: loading -> active | summary.

The caller holds the SessionSnapshot and hands it back on every transition;
the service never keeps state between calls.
"""
from __future__ import annotations
import logging
from datetime import date
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from lifttrack.errors import StoreFailure
from lifttrack.exercises import DEFAULT_REST_SECONDS, Exercise
from lifttrack.models import WorkoutExercise
from lifttrack.repositories.workout_repo import WorkoutRepository
from lifttrack.repositories.workout_exercise_repo import WorkoutExerciseRepository
from lifttrack.schemas.session import SessionSnapshot
from lifttrack.schemas.workout import WorkoutExerciseRead
from lifttrack.services import session_state
from lifttrack.services.exercise_settings import get_exercise_settings
from lifttrack.services.session_resolver import SessionResolver
from lifttrack.services.set_ledger import SetLedger
from lifttrack.settings import get_settings

log = logging.getLogger(__name__)


class WorkoutSessionService:
    def __init__(self, db: Session):
        self.db = db
        self.workouts = WorkoutRepository(db)
        self.instances = WorkoutExerciseRepository(db)
        self.resolver = SessionResolver(db)
        self.ledger = SetLedger(db)

    def todays_instances(self, user_id: int, exercise: Exercise, today: date) -> list[WorkoutExerciseRead]:
        rows = self.instances.list_for_day(user_id, exercise.value, today)
        return [WorkoutExerciseRead.model_validate(we) for we in rows]

    def enter(self, user_id: int, exercise: Exercise, today: date) -> SessionSnapshot:
        todays = self.todays_instances(user_id, exercise, today)
        if todays:
            return session_state.summary(exercise, todays)
        return self.start_new_workout(user_id, exercise, today, todays_instances=todays)

    def create_workout_exercise_instance(self, user_id: int, exercise: Exercise, today: date) -> WorkoutExercise:
        workout = self.workouts.get_or_create_for_date(user_id, today)
        we = self.instances.create_next_instance(
            workout.id, exercise.value, retries=get_settings().INSTANCE_CREATE_RETRIES
        )
        log.info("user=%s started %s #%s on %s", user_id, exercise.value, we.instance, today)
        return we

    def rest_duration(self, user_id: int, exercise: Exercise) -> int:
        try:
            return get_exercise_settings(self.db, user_id, exercise).rest_duration_seconds
        except SQLAlchemyError as e:
            self.db.rollback()
            log.warning("settings lookup for %s failed, using %ss rest: %s", exercise.value, DEFAULT_REST_SECONDS, e)
            return DEFAULT_REST_SECONDS

    def start_new_workout(
        self,
        user_id: int,
        exercise: Exercise,
        today: date,
        *,
        todays_instances: list[WorkoutExerciseRead] | None = None,
    ) -> SessionSnapshot:
        """
        Open a fresh instance of `exercise` for today and pre-fill its rows.

        If the instance cannot be created the error propagates and no session
        is produced.
        """
        if todays_instances is None:
            todays_instances = self.todays_instances(user_id, exercise, today)
        template = self.resolver.resolve_template(user_id, exercise, todays_instances, before=today)
        we = self.create_workout_exercise_instance(user_id, exercise, today)
        return session_state.activate(
            exercise,
            workout_exercise_id=we.id,
            instance=we.instance,
            template=template,
            rest_duration_seconds=self.rest_duration(user_id, exercise),
        )

    def log_set(self, user_id: int, snap: SessionSnapshot, index: int) -> SessionSnapshot:
        pending, reps, weight = session_state.begin_log(snap, index)
        try:
            saved = self.ledger.log_set(
                user_id, pending.workout_exercise_id, set_order=index, reps=reps, weight=weight
            )
        except StoreFailure as e:
            raise StoreFailure(e.detail, snapshot=session_state.rollback_log(pending, index)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreFailure("could not save set", snapshot=session_state.rollback_log(pending, index)) from e
        return session_state.confirm_log(pending, index, saved.id)

    def delete_set(self, user_id: int, snap: SessionSnapshot, index: int) -> SessionSnapshot:
        session_state.require_active(snap)
        row = snap.sets[index] if 0 <= index < len(snap.sets) else None
        if row is not None and row.id is not None:
            self.ledger.delete_set(user_id, row.id)
        return session_state.remove_row(snap, index)

    def complete_exercise(self, user_id: int, snap: SessionSnapshot, today: date) -> SessionSnapshot:
        """Re-derive the card once something was logged; otherwise nothing happens."""
        session_state.require_active(snap)
        if not session_state.has_logged_sets(snap):
            return snap
        todays = self.todays_instances(user_id, snap.exercise, today)
        if not todays:
            return session_state.loading(snap.exercise)
        return session_state.summary(snap.exercise, todays)
