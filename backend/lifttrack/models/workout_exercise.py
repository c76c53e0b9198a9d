from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, UniqueConstraint
from lifttrack.db import Base

class WorkoutExercise(Base):
    """The Nth time an exercise was trained within one workout day."""
    __tablename__ = "workout_exercises"
    __table_args__ = (
        UniqueConstraint("workout_id", "exercise", "instance", name="uq_workout_exercises_instance"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), index=True)
    exercise: Mapped[str] = mapped_column(String(120), nullable=False)
    instance: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # legacy ordering column, always 1
    seq: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    workout = relationship("Workout", back_populates="workout_exercises")
    sets = relationship(
        "WorkoutSet",
        back_populates="workout_exercise",
        cascade="all, delete-orphan",
        order_by="[WorkoutSet.set_order, WorkoutSet.id]",
    )
