"""Personal records for an exercise."""

import logging
from typing import Iterable

from fittrack_mcp.analytics.calculations import calculate_workout_volume, estimate_set_1rm
from fittrack_mcp.analytics.matching import filter_by_exercise, round_half_up
from fittrack_mcp.analytics.models import BestSet, PersonalRecords, Workout

logger = logging.getLogger(__name__)


def get_personal_records(workouts: Iterable[Workout], exercise_name: str) -> PersonalRecords:
    """Best weight, reps, single-session volume and estimated 1RM for an exercise.

    Workouts are scanned in the order given, not by date: when two sets tie on
    weight, ``best_set`` is the one encountered first.
    """
    matching = filter_by_exercise(workouts, exercise_name)
    if not matching:
        return PersonalRecords()

    max_weight = 0.0
    max_reps = 0
    max_volume = 0.0
    estimated_1rm = 0.0
    best_set: BestSet | None = None

    for workout in matching:
        max_volume = max(max_volume, calculate_workout_volume(workout.sets))

        for s in workout.working_sets:
            if s.weight > max_weight or best_set is None:
                max_weight = s.weight
                best_set = BestSet(**s.model_dump(), date=workout.date)
            max_reps = max(max_reps, s.reps)
            estimated_1rm = max(estimated_1rm, estimate_set_1rm(s))

    logger.debug(
        "Records for %r across %d workouts: max weight %s", exercise_name, len(matching), max_weight
    )
    return PersonalRecords(
        max_weight=round_half_up(max_weight),
        max_reps=max_reps,
        max_volume=round_half_up(max_volume),
        estimated_1rm=round_half_up(estimated_1rm),
        best_set=best_set,
    )
