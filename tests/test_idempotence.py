"""Repeated calls give identical results and leave the history untouched."""
import pytest

from fittrack_mcp.analytics import (
    calculate_total_volume_by_exercise,
    calculate_workout_volume,
    get_muscle_group_recovery,
    get_overall_recovery_status,
    get_progressive_overload_suggestions,
    get_weekly_volume_trend,
    suggest_next_weight,
)


@pytest.fixture
def history(make_workout):
    return [
        make_workout("Squat", sets=[(5, 100), (5, 100)], warmups=[(5, 60)], days_ago=2),
        make_workout("squat", sets=[(8, 95)], days_ago=6, muscle_groups=["Legs"]),
        make_workout("Bench Press", sets=[(10, 80), (9, 80)], days_ago=1, muscle_groups=["Chest"]),
        make_workout("Bench Press", sets=[(8, 77.5)], days_ago=9, muscle_groups=["Chest"]),
        make_workout("Pull-ups", sets=[(10, 0)], days_ago=20),
    ]


@pytest.mark.parametrize("compute", [
    pytest.param(lambda ws, now: get_muscle_group_recovery(ws, "Chest", now=now), id="muscle_group_recovery"),
    pytest.param(lambda ws, now: get_overall_recovery_status(ws, now=now), id="overall_recovery"),
    pytest.param(lambda ws, now: suggest_next_weight(ws, "Bench Press"), id="next_weight"),
    pytest.param(lambda ws, now: get_progressive_overload_suggestions(ws, "Bench Press"), id="overload"),
    pytest.param(lambda ws, now: get_weekly_volume_trend(ws, "Squat", 4, now=now), id="weekly_trend"),
    pytest.param(lambda ws, now: calculate_workout_volume(ws[0].sets), id="workout_volume"),
    pytest.param(lambda ws, now: calculate_total_volume_by_exercise(ws, "Squat"), id="total_volume"),
])
def test_repeat_calls_match_and_do_not_mutate(history, now, compute):
    snapshot = [w.model_dump() for w in history]
    order = [w.id for w in history]

    first = compute(history, now)
    second = compute(history, now)

    assert first == second
    assert [w.id for w in history] == order
    assert [w.model_dump() for w in history] == snapshot
