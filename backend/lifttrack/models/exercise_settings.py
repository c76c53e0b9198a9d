from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String
from lifttrack.db import Base
from lifttrack.exercises import DEFAULT_REST_SECONDS

class ExerciseSettings(Base):
    __tablename__ = "exercise_settings"
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    exercise_name: Mapped[str] = mapped_column(String(120), primary_key=True)
    rest_duration_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=DEFAULT_REST_SECONDS)
    # Older clients stored a preferred row count here; it is no longer read.
    default_sets: Mapped[int | None] = mapped_column(Integer, nullable=True)

    user = relationship("User", back_populates="exercise_settings")
