"""Exercise-name matching, ordering and rounding helpers shared by the analytics modules."""

import math
from datetime import datetime
from typing import Iterable

from fittrack_mcp.analytics.models import Workout


def normalize_exercise_name(name: str) -> str:
    return name.strip().casefold()


def filter_by_exercise(workouts: Iterable[Workout], exercise_name: str) -> list[Workout]:
    """Workouts for the given exercise, in their original order."""
    target = normalize_exercise_name(exercise_name)
    return [w for w in workouts if normalize_exercise_name(w.exercise_name) == target]


def sort_newest_first(workouts: Iterable[Workout]) -> list[Workout]:
    return sorted(workouts, key=lambda w: w.date, reverse=True)


def latest_workout(workouts: Iterable[Workout], exercise_name: str) -> Workout | None:
    matching = sort_newest_first(filter_by_exercise(workouts, exercise_name))
    return matching[0] if matching else None


def round_half_up(value: float, places: int = 2) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def round_to_increment(value: float, increment: float = 0.25) -> float:
    """Round to the nearest plate increment, halves rounding up."""
    return math.floor(value / increment + 0.5) * increment


def resolve_now(now: datetime | None = None) -> datetime:
    """Timezone-aware reference time; naive values are taken as local time."""
    if now is None:
        return datetime.now().astimezone()
    if now.tzinfo is None:
        return now.astimezone()
    return now
