"""Volume and strength calculations."""

import logging
from typing import Iterable, Sequence

from fittrack_mcp.analytics.exceptions import InvalidInputError
from fittrack_mcp.analytics.matching import filter_by_exercise, round_half_up
from fittrack_mcp.analytics.models import (
    ExerciseSet, IntensityZone, PlateBreakdown, PlateCount, Workout,
)

logger = logging.getLogger(__name__)

DEFAULT_PERCENTAGES = (60, 65, 70, 75, 80, 85, 90, 95)
STANDARD_PLATES = (25, 20, 15, 10, 5, 2.5, 1.25)
OLYMPIC_BAR_KG = 20.0


def calculate_one_rep_max(weight: float, reps: int) -> float:
    """Estimate a one-rep max with the Epley formula: weight × (1 + reps/30).

    A single rep is already a max test, so its weight is returned as-is.
    """
    if weight <= 0 or reps <= 0:
        raise InvalidInputError(f"weight and reps must be positive (got {weight} x {reps})")
    if reps == 1:
        return weight
    return round_half_up(weight * (1 + reps / 30))


def calculate_reps_for_percentage(one_rm: float, percentage: float) -> int:
    """Reverse Epley: reps = 30 × (percentage/100 − 1).

    The result is 0 at 100% and negative below it; it is not clamped.
    """
    if one_rm <= 0 or percentage <= 0:
        raise InvalidInputError(
            f"one_rm and percentage must be positive (got {one_rm}, {percentage})"
        )
    weight = one_rm * (percentage / 100)
    return int(round_half_up(30 * (weight / one_rm - 1), 0))


def calculate_workout_volume(sets: Iterable[ExerciseSet]) -> float:
    return sum(s.reps * s.weight for s in sets if not s.is_warmup)


def calculate_total_volume_by_exercise(workouts: Iterable[Workout], exercise_name: str) -> float:
    return sum(
        calculate_workout_volume(w.sets) for w in filter_by_exercise(workouts, exercise_name)
    )


def estimate_set_1rm(exercise_set: ExerciseSet) -> float:
    """Epley estimate for a set; bodyweight sets (weight 0) carry no estimate."""
    if exercise_set.weight <= 0:
        return 0.0
    return calculate_one_rep_max(exercise_set.weight, exercise_set.reps)


def get_max_weight_for_exercise(workouts: Iterable[Workout], exercise_name: str) -> float:
    weights = [
        s.weight
        for w in filter_by_exercise(workouts, exercise_name)
        for s in w.working_sets
    ]
    return max(weights, default=0.0)


def get_estimated_1rm(workouts: Iterable[Workout], exercise_name: str) -> float:
    estimates = [
        estimate_set_1rm(s)
        for w in filter_by_exercise(workouts, exercise_name)
        for s in w.working_sets
    ]
    return round_half_up(max(estimates, default=0.0))


def _intensity_label(percentage: int) -> str:
    if percentage >= 90:
        return "Max effort"
    if percentage >= 80:
        return "Heavy"
    if percentage >= 70:
        return "Moderate"
    return "Light"


def build_percentage_table(
    one_rm: float,
    percentages: Sequence[int] = DEFAULT_PERCENTAGES,
) -> list[IntensityZone]:
    """Training weights at common percentages of a one-rep max."""
    if one_rm <= 0:
        raise InvalidInputError(f"one_rm must be positive (got {one_rm})")
    return [
        IntensityZone(
            percentage=p,
            weight=round_half_up(one_rm * p / 100),
            label=_intensity_label(p),
        )
        for p in percentages
    ]


def calculate_plates(
    target_weight: float,
    bar_weight: float = OLYMPIC_BAR_KG,
    available_plates: Sequence[float] = STANDARD_PLATES,
) -> PlateBreakdown:
    """Greedy per-side plate loading for a target barbell weight.

    Any remainder smaller than the lightest plate is reported as ``difference``.
    """
    if target_weight <= 0:
        raise InvalidInputError(f"target_weight must be positive (got {target_weight})")
    if bar_weight < 0:
        raise InvalidInputError(f"bar_weight cannot be negative (got {bar_weight})")

    plates: list[PlateCount] = []
    remaining = (target_weight - bar_weight) / 2
    if remaining > 0:
        for plate in sorted(available_plates, reverse=True):
            count = int(remaining // plate)
            if count > 0:
                plates.append(PlateCount(weight=plate, count=count))
                remaining = round_half_up(remaining - count * plate)

    actual = bar_weight + 2 * sum(p.weight * p.count for p in plates)
    logger.debug("Plates for %s kg on %s kg bar: %s", target_weight, bar_weight, plates)
    return PlateBreakdown(
        target_weight=target_weight,
        bar_weight=bar_weight,
        plates_per_side=plates,
        actual_weight=actual,
        difference=round_half_up(target_weight - actual),
    )
