from __future__ import annotations
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from lifttrack.errors import StoreFailure
from lifttrack.models import ExerciseSettings
from lifttrack.repositories.base import BaseRepository

class ExerciseSettingsRepository(BaseRepository[ExerciseSettings]):
    model = ExerciseSettings

    def get_for(self, user_id: int, exercise_name: str) -> Optional[ExerciseSettings]:
        stmt = select(ExerciseSettings).where(
            ExerciseSettings.user_id == user_id,
            ExerciseSettings.exercise_name == exercise_name,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert(self, user_id: int, exercise_name: str, *, rest_duration_seconds: int) -> ExerciseSettings:
        row = self.get_for(user_id, exercise_name)
        if row is None:
            try:
                return self.add_and_refresh(ExerciseSettings(
                    user_id=user_id,
                    exercise_name=exercise_name,
                    rest_duration_seconds=rest_duration_seconds,
                ))
            except IntegrityError:
                # Inserted by a parallel request; fall through and update it
                row = self.get_for(user_id, exercise_name)
                if row is None:
                    raise StoreFailure("could not save exercise settings")
        try:
            row.rest_duration_seconds = rest_duration_seconds
            self.db.commit()
            self.db.refresh(row)
            return row
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreFailure("could not save exercise settings") from e
