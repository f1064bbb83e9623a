"""fittrack MCP Server."""

import logging
from datetime import datetime

from mcp.server.fastmcp import FastMCP

from fittrack_mcp.config import Settings
from fittrack_mcp.analytics import (
    calculate_one_rep_max as _one_rep_max,
    calculate_plates as _plates,
    build_percentage_table,
    calculate_total_volume_by_exercise,
    get_estimated_1rm,
    get_max_weight_for_exercise,
    get_personal_records as _personal_records,
    get_muscle_group_recovery,
    get_overall_recovery_status,
    suggest_next_weight as _next_weight,
    get_progressive_overload_suggestions,
    get_weekly_volume_trend,
    build_insight_context,
    GeminiClient,
)
from fittrack_mcp.analytics.exceptions import AIUnavailableError, InsightServiceError
from fittrack_mcp.analytics.insights import INSIGHT_FALLBACK, INSIGHTS_UNAVAILABLE
from fittrack_mcp.analytics.catalog import default_catalog
from fittrack_mcp.analytics.matching import filter_by_exercise, latest_workout
from fittrack_mcp.analytics.models import RecoveryStatus, Workout

logger = logging.getLogger(__name__)

settings = Settings.from_env()
mcp = FastMCP("fittrack")
gemini = GeminiClient(
    settings.gemini_api_key,
    model=settings.gemini_model,
    timeout=settings.gemini_timeout_seconds,
)


def _kg(value: float) -> str:
    return f"{value:g}kg"


def _no_data(exercise_name: str) -> str:
    return f"No data available for {exercise_name} yet."


@mcp.tool()
async def calculate_one_rep_max(weight: float, reps: int) -> str:
    """Estimate a one-rep max (Epley formula) and list training weights by percentage.

    Args:
        weight: Weight lifted in kg.
        reps: Reps performed at that weight.
    """
    one_rm = _one_rep_max(weight, reps)
    lines = [f"Estimated 1RM: {one_rm:.1f} kg\n"]
    for zone in build_percentage_table(one_rm):
        lines.append(f"- {zone.percentage}%: {zone.weight:.1f} kg ({zone.label})")
    return "\n".join(lines)


@mcp.tool()
async def calculate_plates(target_weight: float, bar_weight: float = 20) -> str:
    """Work out which plates to load on each side of the bar.

    Args:
        target_weight: Total weight wanted on the bar, in kg.
        bar_weight: Weight of the empty bar (default 20kg).
    """
    breakdown = _plates(target_weight, bar_weight)
    if not breakdown.plates_per_side:
        return f"No plates needed: the {_kg(bar_weight)} bar covers {_kg(target_weight)}."

    lines = ["Per side:"]
    lines.extend(f"- {p.count} x {_kg(p.weight)}" for p in breakdown.plates_per_side)
    lines.append(f"Total on bar: {_kg(breakdown.actual_weight)}")
    if breakdown.difference:
        lines.append(f"Short of target by {_kg(breakdown.difference)}")
    return "\n".join(lines)


@mcp.tool()
async def get_exercise_stats(workouts: list[Workout], exercise_name: str) -> str:
    """Summarize max weight, estimated 1RM and total volume for an exercise.

    Args:
        workouts: Workout history.
        exercise_name: Exercise to summarize (case-insensitive).
    """
    matching = filter_by_exercise(workouts, exercise_name)
    if not matching:
        return _no_data(exercise_name)

    return "\n".join([
        f"## {exercise_name}",
        f"Sessions logged: {len(matching)}",
        f"Max weight: {_kg(get_max_weight_for_exercise(workouts, exercise_name))}",
        f"Estimated 1RM: {_kg(get_estimated_1rm(workouts, exercise_name))}",
        f"Total volume: {calculate_total_volume_by_exercise(workouts, exercise_name):.0f} kg",
    ])


@mcp.tool()
async def get_personal_records(workouts: list[Workout], exercise_name: str) -> str:
    """Personal records for an exercise (warmup sets excluded).

    Args:
        workouts: Workout history.
        exercise_name: Exercise to look up (case-insensitive).
    """
    records = _personal_records(workouts, exercise_name)
    if records.best_set is None:
        return _no_data(exercise_name)

    best = records.best_set
    return "\n".join([
        f"## {exercise_name} personal records",
        f"Max weight: {_kg(records.max_weight)}",
        f"Max reps: {records.max_reps}",
        f"Best session volume: {records.max_volume:.0f} kg",
        f"Estimated 1RM: {_kg(records.estimated_1rm)}",
        f"Best set: {_kg(best.weight)} x {best.reps} on {best.date:%Y-%m-%d}",
    ])


def _format_recovery(status: RecoveryStatus) -> str:
    if status.last_trained is None:
        return f"- **{status.muscle_group}**: {status.status} — {status.recommendation}"
    return (
        f"- **{status.muscle_group}**: {status.status} — {status.days_since_last_training} days since "
        f"last session ({status.recommendation}; every {status.average_days_between:g} days on average)"
    )


@mcp.tool()
async def get_recovery_status(workouts: list[Workout], muscle_group: str | None = None) -> str:
    """Recovery status per muscle group.

    Args:
        workouts: Workout history. Untagged workouts use the catalog muscle groups.
        muscle_group: Only report this muscle group. Omit for every trained group.
    """
    now = datetime.now().astimezone()
    if muscle_group:
        return _format_recovery(get_muscle_group_recovery(workouts, muscle_group, now=now))

    overall = get_overall_recovery_status(workouts, now=now)
    if not overall.muscle_groups:
        return "No muscle groups trained yet."

    s = overall.summary
    lines = [f"{s.ready} ready, {s.recovering} recovering, {s.overdue} overdue ({s.total} groups)\n"]
    lines.extend(_format_recovery(status) for status in overall.muscle_groups)
    return "\n".join(lines)


@mcp.tool()
async def find_exercise_substitutes(exercise_name: str, equipment: list[str] | None = None) -> str:
    """Alternatives for an exercise from the built-in catalog.

    Args:
        exercise_name: Exercise to replace (case-insensitive).
        equipment: Only suggest exercises using this equipment, e.g. ["Dumbbell"].
    """
    catalog = default_catalog()
    exercise = catalog.get_by_name(exercise_name)
    if exercise is None:
        return f"{exercise_name} is not in the exercise catalog."

    alternatives = catalog.suggest_alternatives(exercise.id, equipment=equipment)
    if not alternatives:
        return f"No substitutes found for {exercise.name}."

    lines = [f"Substitutes for {exercise.name} ({', '.join(exercise.muscle_groups)}):"]
    lines.extend(
        f"- {a.name}: {', '.join(a.muscle_groups)} [{', '.join(a.equipment)}]" for a in alternatives
    )
    return "\n".join(lines)


@mcp.tool()
async def suggest_next_weight(workouts: list[Workout], exercise_name: str) -> str:
    """Suggest the working weight for the next session of an exercise.

    Args:
        workouts: Workout history.
        exercise_name: Exercise to plan (case-insensitive).
    """
    if latest_workout(workouts, exercise_name) is None:
        return _no_data(exercise_name)
    return f"Next {exercise_name} session: {_kg(_next_weight(workouts, exercise_name))}"


@mcp.tool()
async def get_progression_suggestion(workouts: list[Workout], exercise_name: str) -> str:
    """Progressive overload recommendation based on the last five sessions.

    Args:
        workouts: Workout history.
        exercise_name: Exercise to analyze (case-insensitive).
    """
    s = get_progressive_overload_suggestions(workouts, exercise_name)
    lines = [f"**{s.suggestion}**", s.reasoning]
    if s.next_weight:
        lines.append(f"Next weight: {_kg(s.next_weight)} (trend: {s.trend}, confidence {s.confidence}%)")
    return "\n".join(lines)


@mcp.tool()
async def get_volume_trend(workouts: list[Workout], exercise_name: str, weeks: int = 4) -> str:
    """Weekly training volume for an exercise, oldest week first.

    Args:
        workouts: Workout history.
        exercise_name: Exercise to chart (case-insensitive).
        weeks: Number of calendar weeks, ending with the current one (default 4).
    """
    volumes = get_weekly_volume_trend(workouts, exercise_name, weeks)
    lines = [f"Weekly volume for {exercise_name}:"]
    for i, volume in enumerate(volumes):
        weeks_ago = len(volumes) - 1 - i
        label = "this week" if weeks_ago == 0 else f"{weeks_ago} week{'s' if weeks_ago > 1 else ''} ago"
        lines.append(f"- {label}: {volume:.0f} kg")
    return "\n".join(lines)


@mcp.tool()
async def generate_workout_plan(request: str) -> str:
    """Generate a training plan from a free-text request.

    Args:
        request: What the plan should target, e.g. "3-day beginner strength plan".
    """
    try:
        plan = await gemini.generate_workout_plan(request)
    except AIUnavailableError:
        return (
            "AI features are not available. Please configure the Gemini API key "
            "to use AI-powered workout generation."
        )
    except InsightServiceError as e:
        logger.error("Plan generation failed: %s", e)
        return "Failed to generate a workout plan. The AI service may be busy. Please try again later."

    lines = [f"# {plan.plan_name}"]
    for day in plan.days:
        lines.append(f"\n## {day.day}")
        lines.extend(f"- {ex.name}: {ex.sets} sets x {ex.reps} reps" for ex in day.exercises)
    return "\n".join(lines)


@mcp.tool()
async def get_workout_insights(
    workouts: list[Workout],
    planned_exercises: list[str],
    user_name: str = "Athlete",
    focus: str = "General training",
) -> str:
    """Short coaching insight for today's session based on previous performance.

    Args:
        workouts: Workout history.
        planned_exercises: Exercises planned for today.
        user_name: Name to address the user by.
        focus: Today's training focus, e.g. "Push day".
    """
    context = build_insight_context(workouts, planned_exercises, user_name=user_name, focus=focus)
    try:
        return await gemini.generate_workout_insights(context)
    except AIUnavailableError:
        return INSIGHTS_UNAVAILABLE
    except InsightServiceError as e:
        logger.error("Insight generation failed: %s", e)
        return INSIGHT_FALLBACK


def main():
    logging.basicConfig(level=settings.log_level)
    mcp.run()


if __name__ == "__main__":
    main()
