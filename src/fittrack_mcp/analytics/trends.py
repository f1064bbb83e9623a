"""Weekly volume series."""

import logging
from datetime import datetime, time, timedelta
from typing import Iterable

from fittrack_mcp.analytics.calculations import calculate_workout_volume
from fittrack_mcp.analytics.matching import filter_by_exercise
from fittrack_mcp.analytics.models import Workout

logger = logging.getLogger(__name__)


def week_bounds(now: datetime, weeks_ago: int) -> tuple[datetime, datetime]:
    """Sunday 00:00 to Saturday 23:59:59.999999 of a calendar week.

    Boundaries are wall-clock times in now's timezone, or in local time when
    ``now`` is naive, so each week gets the UTC offset in force on that date.
    """
    days_since_sunday = (now.weekday() + 1) % 7
    start_day = now.date() - timedelta(days=weeks_ago * 7 + days_since_sunday)
    start = datetime.combine(start_day, time.min, tzinfo=now.tzinfo)
    end = datetime.combine(start_day + timedelta(days=6), time.max, tzinfo=now.tzinfo)
    if now.tzinfo is None:
        return start.astimezone(), end.astimezone()
    return start, end


def get_weekly_volume_trend(
    workouts: Iterable[Workout],
    exercise_name: str,
    weeks: int = 4,
    now: datetime | None = None,
) -> list[float]:
    """Per-week working volume for an exercise, oldest week first, ending with the current week."""
    if now is None:
        now = datetime.now()
    matching = filter_by_exercise(workouts, exercise_name)

    volumes: list[float] = []
    for weeks_ago in range(weeks - 1, -1, -1):
        start, end = week_bounds(now, weeks_ago)
        volumes.append(sum(
            calculate_workout_volume(w.sets)
            for w in matching
            if start <= w.date <= end
        ))
    logger.debug("Weekly volume for %r over %d weeks: %s", exercise_name, weeks, volumes)
    return volumes
