from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from fittrack_mcp.analytics.models import ExerciseSet, Workout

# A Wednesday; the current Sunday-based week starts 2024-05-12.
NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_workout():
    def _make(
        exercise_name="Bench Press",
        sets=((10, 80),),
        days_ago=0,
        warmups=(),
        muscle_groups=(),
        notes=None,
        date=None,
    ):
        all_sets = [ExerciseSet(reps=r, weight=w, is_warmup=True) for r, w in warmups]
        all_sets += [ExerciseSet(reps=r, weight=w) for r, w in sets]
        return Workout(
            exercise_name=exercise_name,
            sets=all_sets,
            date=date or NOW - timedelta(days=days_ago),
            muscle_groups=list(muscle_groups),
            notes=notes,
        )
    return _make


class FakeGenaiClient:
    """Stands in for genai.Client: ``aio.models.generate_content`` returns or raises ``outcome``."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []
        self.aio = SimpleNamespace(models=SimpleNamespace(generate_content=self._generate_content))

    async def _generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return SimpleNamespace(text=self.outcome)


@pytest.fixture
def fake_genai_client():
    return FakeGenaiClient
