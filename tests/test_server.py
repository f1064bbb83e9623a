"""Tests for the MCP tool output."""
from datetime import datetime, timezone

import pytest
from google.genai import errors as genai_errors

from fittrack_mcp import server
from fittrack_mcp.analytics.exceptions import InvalidInputError
from fittrack_mcp.analytics.gemini import GeminiClient
from fittrack_mcp.analytics.insights import INSIGHT_FALLBACK, INSIGHTS_UNAVAILABLE


@pytest.mark.asyncio
async def test_one_rep_max_table():
    text = await server.calculate_one_rep_max(100, 10)
    assert text.startswith("Estimated 1RM: 133.3 kg")
    assert "- 90%: 120.0 kg (Max effort)" in text


@pytest.mark.asyncio
async def test_one_rep_max_rejects_zero_weight():
    with pytest.raises(InvalidInputError):
        await server.calculate_one_rep_max(0, 5)


@pytest.mark.asyncio
async def test_plates():
    text = await server.calculate_plates(100)
    assert "- 1 x 25kg" in text
    assert "- 1 x 15kg" in text
    assert "Total on bar: 100kg" in text


@pytest.mark.asyncio
async def test_personal_records(make_workout):
    workouts = [make_workout("Squat", sets=[(5, 100)], warmups=[(5, 150)])]
    text = await server.get_personal_records(workouts, "squat")
    assert "Max weight: 100kg" in text
    assert "Best set: 100kg x 5" in text
    assert await server.get_personal_records([], "Squat") == "No data available for Squat yet."


@pytest.mark.asyncio
async def test_exercise_stats(make_workout):
    workouts = [make_workout("Squat", sets=[(5, 100), (5, 100)])]
    text = await server.get_exercise_stats(workouts, "Squat")
    assert "Sessions logged: 1" in text
    assert "Total volume: 1000 kg" in text


@pytest.mark.asyncio
async def test_recovery_status_summary(make_workout):
    workouts = [make_workout(date=datetime.now(timezone.utc), muscle_groups=["Chest"])]
    text = await server.get_recovery_status(workouts)
    assert text.startswith("0 ready, 1 recovering, 0 overdue (1 groups)")
    assert "**Chest**: recovering" in text
    assert await server.get_recovery_status([]) == "No muscle groups trained yet."


@pytest.mark.asyncio
async def test_progression(make_workout):
    workouts = [make_workout(sets=[(10, 80), (9, 80)])]
    assert await server.suggest_next_weight(workouts, "Bench Press") == "Next Bench Press session: 82kg"

    text = await server.get_progression_suggestion(workouts, "Bench Press")
    assert text.startswith("**Small weight increase**")
    assert "Next weight: 82kg" in text


@pytest.mark.asyncio
async def test_volume_trend_labels():
    text = await server.get_volume_trend([], "Squat", weeks=3)
    assert text.splitlines()[1:] == ["- 2 weeks ago: 0 kg", "- 1 week ago: 0 kg", "- this week: 0 kg"]


@pytest.mark.asyncio
async def test_insights_unconfigured(monkeypatch):
    monkeypatch.setattr(server, "gemini", GeminiClient(None))
    assert await server.get_workout_insights([], ["Squat"]) == INSIGHTS_UNAVAILABLE


@pytest.mark.asyncio
async def test_insights_fallback_on_failure(monkeypatch, fake_genai_client):
    error = genai_errors.ServerError(500, {"error": {"message": "internal", "status": "INTERNAL"}})
    failing = GeminiClient("key", client=fake_genai_client(error))
    monkeypatch.setattr(server, "gemini", failing)
    assert await server.get_workout_insights([], ["Squat"]) == INSIGHT_FALLBACK
    text = await server.generate_workout_plan("3 day split")
    assert text.startswith("Failed to generate a workout plan")


@pytest.mark.asyncio
async def test_bodyweight_next_weight_is_not_missing_data(make_workout):
    workouts = [make_workout("Pull-ups", sets=[(10, 0), (9, 0)])]
    assert await server.suggest_next_weight(workouts, "Pull-ups") == "Next Pull-ups session: 0kg"
    assert await server.suggest_next_weight([], "Pull-ups") == "No data available for Pull-ups yet."


@pytest.mark.asyncio
async def test_recovery_uses_catalog_muscle_groups(make_workout):
    workouts = [make_workout("Squat", sets=[(5, 100)], date=datetime.now(timezone.utc))]
    text = await server.get_recovery_status(workouts)
    assert text.startswith("0 ready, 3 recovering, 0 overdue (3 groups)")
    assert "**Quadriceps**: recovering" in text


@pytest.mark.asyncio
async def test_find_exercise_substitutes():
    text = await server.find_exercise_substitutes("bench press", equipment=["Dumbbell"])
    assert text.splitlines() == [
        "Substitutes for Bench Press (Chest, Shoulders, Triceps):",
        "- Dumbbell Press: Chest, Shoulders, Triceps [Dumbbell]",
    ]
    assert await server.find_exercise_substitutes("Zercher Carry") == (
        "Zercher Carry is not in the exercise catalog."
    )
    assert await server.find_exercise_substitutes("Bench Press", equipment=["Kettlebell"]) == (
        "No substitutes found for Bench Press."
    )
