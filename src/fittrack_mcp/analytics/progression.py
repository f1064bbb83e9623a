"""Next-session weight recommendations."""

import logging
from typing import Iterable

from fittrack_mcp.analytics.matching import (
    filter_by_exercise, latest_workout, round_to_increment, sort_newest_first,
)
from fittrack_mcp.analytics.models import ProgressiveOverloadSuggestion, Workout

logger = logging.getLogger(__name__)

PROGRESSION_REP_THRESHOLD = 8
HISTORY_WINDOW = 5

# (min avg reps, suggestion, weight multiplier, confidence cap, confidence boost)
# first match wins; None cap means the base confidence is used unchanged
_TIERS = (
    (10, "Increase weight", 1.05, 90, 20),
    (8, "Small weight increase", 1.025, 80, 10),
    (6, "Maintain weight", 1.0, None, 0),
    (0, "Reduce weight or check form", 0.9, 70, 5),
)

_REASONING = {
    "Increase weight": "Strong performance ({reps:.1f} avg reps). Ready for weight increase.",
    "Small weight increase": "Good performance ({reps:.1f} avg reps). Small increase recommended.",
    "Maintain weight": "Moderate performance ({reps:.1f} avg reps). Focus on form and consistency.",
    "Reduce weight or check form": "Low reps ({reps:.1f} avg). Consider deloading or form check.",
}


def suggest_next_weight(workouts: Iterable[Workout], exercise_name: str) -> float:
    """Weight for the next session, from the most recent workout's working sets.

    Averaging 8+ reps earns a 2.5% increase rounded to the nearest 0.25;
    otherwise the average weight is kept.
    """
    last = latest_workout(workouts, exercise_name)
    if last is None:
        return 0.0

    working = last.working_sets
    if not working:
        return 0.0

    avg_reps = sum(s.reps for s in working) / len(working)
    avg_weight = sum(s.weight for s in working) / len(working)

    if avg_reps >= PROGRESSION_REP_THRESHOLD:
        return round_to_increment(avg_weight * 1.025)
    return avg_weight


def _max_working_weight(workout: Workout) -> float | None:
    weights = [s.weight for s in workout.working_sets]
    return max(weights) if weights else None


def get_progressive_overload_suggestions(
    workouts: Iterable[Workout],
    exercise_name: str,
) -> ProgressiveOverloadSuggestion:
    recent = sort_newest_first(filter_by_exercise(workouts, exercise_name))[:HISTORY_WINDOW]

    if not recent:
        return ProgressiveOverloadSuggestion(
            suggestion="No data available",
            reasoning="Log some workouts to get progression suggestions",
            next_weight=0,
            confidence=0,
        )

    working = recent[0].working_sets
    if not working:
        return ProgressiveOverloadSuggestion(
            suggestion="Add working sets",
            reasoning="Mark some sets as working sets (not warmup) to get suggestions",
            next_weight=0,
            confidence=0,
        )

    avg_reps = sum(s.reps for s in working) / len(working)
    max_weight = max(s.weight for s in working)

    trend = "stable"
    confidence = 50
    if len(recent) >= 2:
        previous_max = _max_working_weight(recent[1])
        if previous_max is not None:
            if max_weight > previous_max:
                trend, confidence = "improving", 75
            elif max_weight < previous_max:
                trend, confidence = "declining", 60

    for min_reps, suggestion, multiplier, cap, boost in _TIERS:
        if avg_reps >= min_reps:
            break

    if cap is not None:
        confidence = min(cap, confidence + boost)

    logger.debug(
        "%s: avg reps %.1f, trend %s -> %s", exercise_name, avg_reps, trend, suggestion
    )
    return ProgressiveOverloadSuggestion(
        suggestion=suggestion,
        reasoning=_REASONING[suggestion].format(reps=avg_reps),
        next_weight=round_to_increment(max_weight * multiplier),
        confidence=confidence,
        trend=trend,
    )
