from datetime import date
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, Date, UniqueConstraint
from lifttrack.db import Base

class Workout(Base):
    """One calendar day of training for a user."""
    __tablename__ = "workouts"
    __table_args__ = (UniqueConstraint("user_id", "workout_date", name="uq_workouts_user_date"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    workout_date: Mapped[date] = mapped_column(Date, nullable=False)

    user = relationship("User", back_populates="workouts")
    workout_exercises = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.instance",
    )
