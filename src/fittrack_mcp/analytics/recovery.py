"""Muscle-group recovery tracking."""

import logging
from datetime import datetime, timedelta
from typing import Iterable

from fittrack_mcp.analytics.catalog import ExerciseCatalog, muscle_groups_for
from fittrack_mcp.analytics.matching import resolve_now, round_half_up, sort_newest_first
from fittrack_mcp.analytics.models import (
    OverallRecoveryStatus, RecoveryStatus, RecoverySummary, Workout,
)

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)
DEFAULT_DAYS_BETWEEN = 7.0
FREQUENCY_WINDOW = 8


def _classify(days_since: int) -> tuple[str, str, str]:
    """Status, recommendation and frequency advice for days since last session."""
    if days_since <= 1:
        return (
            "recovering",
            "Recently trained. Allow 24-48h recovery",
            "Rest or train other muscle groups",
        )
    if days_since <= 2:
        return (
            "recovering",
            "In recovery window. Can train lightly if feeling good",
            "Light training acceptable",
        )
    if days_since <= 4:
        return (
            "ready",
            "Fully recovered. Optimal training window",
            "Prime time for training",
        )
    return (
        "overdue",
        "Consider training soon to maintain gains",
        "Training recommended",
    )


def _average_days_between(recent: list[Workout]) -> float:
    dates = [w.date for w in recent[:FREQUENCY_WINDOW]]
    gaps = [(newer - older) // ONE_DAY for newer, older in zip(dates, dates[1:])]
    if not gaps:
        return DEFAULT_DAYS_BETWEEN
    return round_half_up(sum(gaps) / len(gaps), 1)


def get_muscle_group_recovery(
    workouts: Iterable[Workout],
    muscle_group: str,
    now: datetime | None = None,
    catalog: ExerciseCatalog | None = None,
) -> RecoveryStatus:
    """Recovery of one muscle group.

    Workouts logged without muscle groups are attributed through the exercise catalog.
    """
    now = resolve_now(now)
    relevant = sort_newest_first(
        w for w in workouts if muscle_group in muscle_groups_for(w, catalog)
    )

    if not relevant:
        return RecoveryStatus(
            muscle_group=muscle_group,
            status="ready",
            recommendation="Ready to train",
            optimal_frequency="2-3x per week",
        )

    last = relevant[0]
    days_since = (now - last.date) // ONE_DAY
    status, recommendation, frequency = _classify(days_since)
    logger.debug("%s last trained %d days ago: %s", muscle_group, days_since, status)

    return RecoveryStatus(
        muscle_group=muscle_group,
        status=status,
        last_trained=last.date,
        days_since_last_training=days_since,
        recommendation=recommendation,
        optimal_frequency=frequency,
        average_days_between=_average_days_between(relevant),
    )


def get_overall_recovery_status(
    workouts: Iterable[Workout],
    now: datetime | None = None,
    catalog: ExerciseCatalog | None = None,
) -> OverallRecoveryStatus:
    """Recovery status of every muscle group that appears in the history."""
    workouts = list(workouts)
    now = resolve_now(now)

    groups: list[str] = []
    for w in workouts:
        for group in muscle_groups_for(w, catalog):
            if group not in groups:
                groups.append(group)

    statuses = [get_muscle_group_recovery(workouts, g, now=now, catalog=catalog) for g in groups]
    summary = RecoverySummary(
        ready=sum(1 for s in statuses if s.status == "ready"),
        recovering=sum(1 for s in statuses if s.status == "recovering"),
        overdue=sum(1 for s in statuses if s.status == "overdue"),
        total=len(groups),
    )
    return OverallRecoveryStatus(muscle_groups=statuses, summary=summary)
