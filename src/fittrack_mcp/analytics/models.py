"""Workout data models and derived analytics records."""

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseSet(BaseModel):
    """A single performed set."""
    model_config = ConfigDict(frozen=True)

    reps: int = Field(gt=0)
    weight: float = Field(ge=0)
    is_warmup: bool = False
    rpe: float | None = None
    rest_time_seconds: int | None = None
    notes: str | None = None

    @property
    def volume(self) -> float:
        return self.weight * self.reps


class Workout(BaseModel):
    """One logged exercise session: a single exercise, one or more sets."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    exercise_name: str
    sets: list[ExerciseSet] = []
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    duration_minutes: int | None = None
    notes: str | None = None
    muscle_groups: list[str] = []
    total_volume: float | None = None

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def working_sets(self) -> list[ExerciseSet]:
        return [s for s in self.sets if not s.is_warmup]

    @property
    def volume(self) -> float:
        return sum(s.volume for s in self.working_sets)


class BestSet(ExerciseSet):
    """The heaviest working set, tagged with the date it was performed."""
    date: datetime


class PersonalRecords(BaseModel):
    max_weight: float = 0
    max_reps: int = 0
    max_volume: float = 0
    estimated_1rm: float = 0
    best_set: BestSet | None = None


RecoveryState = Literal["ready", "recovering", "overdue"]


class RecoveryStatus(BaseModel):
    """Recovery classification for one muscle group."""
    muscle_group: str
    status: RecoveryState
    last_trained: datetime | None = None
    days_since_last_training: int = 0
    recommendation: str
    optimal_frequency: str
    average_days_between: float = 7.0


class RecoverySummary(BaseModel):
    ready: int = 0
    recovering: int = 0
    overdue: int = 0
    total: int = 0


class OverallRecoveryStatus(BaseModel):
    muscle_groups: list[RecoveryStatus] = []
    summary: RecoverySummary = RecoverySummary()


Trend = Literal["improving", "declining", "stable"]


class ProgressiveOverloadSuggestion(BaseModel):
    suggestion: str
    reasoning: str
    next_weight: float
    confidence: int
    trend: Trend = "stable"


class IntensityZone(BaseModel):
    """Working weight at a given percentage of a one-rep max."""
    percentage: int
    weight: float
    label: str


class PlateCount(BaseModel):
    weight: float
    count: int


class PlateBreakdown(BaseModel):
    """Plates to load on each side of the bar for a target weight."""
    target_weight: float
    bar_weight: float
    plates_per_side: list[PlateCount] = []
    actual_weight: float
    difference: float


ExerciseCategory = Literal["compound", "isolation", "cardio"]


class Exercise(BaseModel):
    """A catalog exercise: the muscle groups it trains and its substitutes (by id)."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    muscle_groups: list[str]
    equipment: list[str] = []
    category: ExerciseCategory
    instructions: str | None = None
    substitutes: list[str] = []


class GeneratedExercise(BaseModel):
    name: str = Field(description="The name of the exercise.")
    sets: str = Field(description='The recommended number of sets, e.g., "3-4".')
    reps: str = Field(description='The recommended rep range, e.g., "8-12".')


class GeneratedDay(BaseModel):
    day: str = Field(description='The focus for the day, e.g., "Day 1: Push (Chest, Shoulders, Triceps)"')
    exercises: list[GeneratedExercise] = Field(default=[], description="A list of exercises for the day.")


class GeneratedPlan(BaseModel):
    """A training plan produced by the text-generation service."""
    model_config = ConfigDict(populate_by_name=True)

    plan_name: str = Field(alias="planName", description="A creative and motivating name for the workout plan.")
    days: list[GeneratedDay] = Field(default=[], description="An array of workout days, typically 3 to 5.")


class PreviousPerformance(BaseModel):
    exercise: str
    last_session: Workout | None = None
    personal_records: PersonalRecords = PersonalRecords()


class InsightContext(BaseModel):
    """Context handed to the text-generation service for session insights."""
    user_name: str
    total_workouts: int
    focus: str
    planned_exercises: list[str] = []
    previous_workouts: list[PreviousPerformance] = []
