from fittrack_mcp.analytics.calculations import (
    calculate_one_rep_max, calculate_reps_for_percentage, calculate_workout_volume,
    calculate_total_volume_by_exercise, get_max_weight_for_exercise, get_estimated_1rm,
    build_percentage_table, calculate_plates,
)
from fittrack_mcp.analytics.records import get_personal_records
from fittrack_mcp.analytics.recovery import get_muscle_group_recovery, get_overall_recovery_status
from fittrack_mcp.analytics.progression import (
    suggest_next_weight, get_progressive_overload_suggestions,
)
from fittrack_mcp.analytics.trends import get_weekly_volume_trend
from fittrack_mcp.analytics.catalog import ExerciseCatalog, default_catalog, muscle_groups_for
from fittrack_mcp.analytics.insights import build_insight_context
from fittrack_mcp.analytics.gemini import GeminiClient
from fittrack_mcp.analytics.models import (
    Workout, ExerciseSet, PersonalRecords, RecoveryStatus, OverallRecoveryStatus,
    ProgressiveOverloadSuggestion, GeneratedPlan, Exercise,
)
from fittrack_mcp.analytics.exceptions import (
    AnalyticsError, InvalidInputError, InsightServiceError, AIUnavailableError,
)

__all__ = [
    "calculate_one_rep_max", "calculate_reps_for_percentage", "calculate_workout_volume",
    "calculate_total_volume_by_exercise", "get_max_weight_for_exercise", "get_estimated_1rm",
    "build_percentage_table", "calculate_plates",
    "get_personal_records",
    "get_muscle_group_recovery", "get_overall_recovery_status",
    "suggest_next_weight", "get_progressive_overload_suggestions",
    "get_weekly_volume_trend",
    "ExerciseCatalog", "default_catalog", "muscle_groups_for",
    "build_insight_context", "GeminiClient",
    "Workout", "ExerciseSet", "PersonalRecords", "RecoveryStatus", "OverallRecoveryStatus",
    "ProgressiveOverloadSuggestion", "GeneratedPlan", "Exercise",
    "AnalyticsError", "InvalidInputError", "InsightServiceError", "AIUnavailableError",
]
