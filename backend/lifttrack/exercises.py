from enum import Enum

# Rest between sets when the user never saved a duration for the exercise
DEFAULT_REST_SECONDS = 120
# Empty rows offered when there is nothing to pre-populate from
DEFAULT_SET_COUNT = 5
# Reserved for supersets; every set is written in round 1
DEFAULT_ROUND = 1


class Exercise(str, Enum):
    low_row = "Low Row"
    lat_pulldown = "Lat Pulldown"
    bench_press = "Bench Press"
    pull_ups = "Pull-ups"
    leg_press = "Leg Press"
    bicep_curl = "Bicep Curl"


DEFAULT_EXERCISE = Exercise.bench_press

# Logged without added load; the UI hints 0 instead of a working weight
BODYWEIGHT_EXERCISES = frozenset({Exercise.pull_ups})


def is_bodyweight(exercise: Exercise) -> bool:
    return exercise in BODYWEIGHT_EXERCISES
