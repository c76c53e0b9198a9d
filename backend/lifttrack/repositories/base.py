# lifttrack/repositories/base.py
from __future__ import annotations
import logging
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from lifttrack.errors import StoreFailure

T = TypeVar("T")  # SQLAlchemy model type

log = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> Optional[T]:
        return self.db.get(self.model, entity_id)

    def add_and_refresh(self, entity: T) -> T:
        """
        Insert one row in its own transaction.

        IntegrityError is re-raised untouched (after rollback) so callers can
        treat a unique-constraint hit as "someone else created it first".
        Any other database error becomes StoreFailure.
        """
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except IntegrityError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("insert into %s failed: %s", self.model.__tablename__, e)
            raise StoreFailure(f"could not save {self.model.__tablename__} row") from e

    def delete_and_commit(self, entity: T) -> None:
        try:
            self.db.delete(entity)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("delete from %s failed: %s", self.model.__tablename__, e)
            raise StoreFailure(f"could not delete {self.model.__tablename__} row") from e
