from lifttrack.models.user import User
from lifttrack.models.workout import Workout
from lifttrack.models.workout_exercise import WorkoutExercise
from lifttrack.models.workout_set import WorkoutSet
from lifttrack.models.exercise_settings import ExerciseSettings

__all__ = ["User", "Workout", "WorkoutExercise", "WorkoutSet", "ExerciseSettings"]
