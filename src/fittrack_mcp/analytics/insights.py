"""Context payloads and prompts for the text-generation service."""

from typing import Iterable, Sequence

from fittrack_mcp.analytics.matching import latest_workout
from fittrack_mcp.analytics.models import InsightContext, PreviousPerformance, Workout
from fittrack_mcp.analytics.records import get_personal_records

INSIGHT_FALLBACK = "Ready for your workout! Focus on proper form and progressive overload today."
INSIGHTS_UNAVAILABLE = (
    "AI insights are not available. Configure the Gemini API key "
    "to get personalized workout recommendations."
)


def build_insight_context(
    workouts: Iterable[Workout],
    planned_exercises: Sequence[str],
    user_name: str = "Athlete",
    focus: str = "General training",
) -> InsightContext:
    workouts = list(workouts)
    previous = [
        PreviousPerformance(
            exercise=name,
            last_session=latest_workout(workouts, name),
            personal_records=get_personal_records(workouts, name),
        )
        for name in planned_exercises
    ]
    return InsightContext(
        user_name=user_name,
        total_workouts=len(workouts),
        focus=focus,
        planned_exercises=list(planned_exercises),
        previous_workouts=previous,
    )


def _describe_previous(perf: PreviousPerformance) -> str:
    session = perf.last_session
    if session is None:
        return f"- {perf.exercise}: No previous data"

    heaviest = max(session.working_sets, key=lambda s: s.weight, default=None)
    if heaviest is None:
        best = "N/A reps @ N/Akg"
    else:
        best = f"{heaviest.reps} reps @ {heaviest.weight:g}kg"
    line = f"- {perf.exercise}: Last session {session.date:%Y-%m-%d} - Best set: {best}"
    if perf.personal_records.estimated_1rm:
        line += f" (est. 1RM {perf.personal_records.estimated_1rm:g}kg)"
    if session.notes:
        line += f" (Note: {session.notes})"
    return line


def render_insight_prompt(context: InsightContext) -> str:
    previous = "\n".join(_describe_previous(p) for p in context.previous_workouts)
    return f"""You are an expert fitness coach AI. Analyze the following workout context and provide personalized insights and recommendations for today's session.

Context:
- User: {context.user_name}
- Total workouts completed: {context.total_workouts}
- Today's focus: {context.focus}
- Planned exercises: {", ".join(context.planned_exercises)}

Previous Performance Analysis:
{previous}

Instructions:
1. Provide a motivational greeting that acknowledges their progress
2. Give specific recommendations for today's workout based on their previous performance
3. If they had any issues in previous sessions (mentioned in notes), provide guidance to address them
4. Suggest realistic progression targets (weight increases, rep improvements)
5. Include any form cues or technique reminders if relevant
6. Keep the tone encouraging but professional
7. Limit response to 2-3 sentences maximum for quick reading

Focus on being practical and actionable rather than generic."""


def render_plan_prompt(request: str) -> str:
    return (
        f'Generate a workout plan based on the following user request: "{request}". '
        "Ensure the plan is well-structured, safe, and effective."
    )
