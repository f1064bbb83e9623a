"""Tests for weekly volume series."""
import time
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from fittrack_mcp.analytics.trends import get_weekly_volume_trend, week_bounds


def test_empty_history(now):
    assert get_weekly_volume_trend([], "Squat", 4, now=now) == [0, 0, 0, 0]


def test_week_bounds_start_on_sunday(now):
    start, end = week_bounds(now, 0)
    assert start == datetime(2024, 5, 12, tzinfo=timezone.utc)
    assert end.date() == datetime(2024, 5, 18).date()
    assert (end.hour, end.minute, end.second) == (23, 59, 59)

    start, _ = week_bounds(now, 3)
    assert start == datetime(2024, 4, 21, tzinfo=timezone.utc)


def test_volumes_bucketed_by_calendar_week(make_workout, now):
    sunday = datetime(2024, 5, 12, tzinfo=timezone.utc)
    workouts = [
        make_workout("Squat", sets=[(5, 100)], date=sunday),
        make_workout("squat", sets=[(5, 80)], date=sunday - timedelta(hours=1)),
        make_workout("Squat", sets=[(10, 50)], warmups=[(10, 40)], date=sunday - timedelta(days=8)),
        make_workout("Squat", sets=[(5, 200)], date=sunday - timedelta(days=40)),
        make_workout("Bench Press", sets=[(5, 60)], date=sunday),
    ]
    assert get_weekly_volume_trend(workouts, "SQUAT", 4, now=now) == [0, 500, 400, 500]


def test_week_count(now):
    assert len(get_weekly_volume_trend([], "Squat", 8, now=now)) == 8
    assert get_weekly_volume_trend([], "Squat", 0, now=now) == []


NEW_YORK = ZoneInfo("America/New_York")


@pytest.fixture
def new_york_local_time(monkeypatch):
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_week_bounds_follow_dst_in_zone():
    # DST starts 2024-03-10; the current week is already on EDT.
    now = datetime(2024, 3, 20, 12, tzinfo=NEW_YORK)
    start, end = week_bounds(now, 3)
    assert start.utcoffset() == timedelta(hours=-5)
    assert end.utcoffset() == timedelta(hours=-5)
    start, _ = week_bounds(now, 0)
    assert start.utcoffset() == timedelta(hours=-4)


def test_late_saturday_stays_in_its_week_across_dst(make_workout):
    now = datetime(2024, 3, 20, 12, tzinfo=NEW_YORK)
    saturday_night = datetime(2024, 3, 2, 23, 30, tzinfo=NEW_YORK)
    workouts = [make_workout("Squat", sets=[(5, 100)], date=saturday_night)]
    assert get_weekly_volume_trend(workouts, "Squat", 4, now=now) == [500, 0, 0, 0]


def test_naive_now_uses_local_offset_per_week(make_workout, new_york_local_time):
    saturday_night = datetime(2024, 3, 2, 23, 30, tzinfo=NEW_YORK)
    workouts = [make_workout("Squat", sets=[(5, 100)], date=saturday_night)]
    now = datetime(2024, 3, 20, 12)
    assert get_weekly_volume_trend(workouts, "Squat", 4, now=now) == [500, 0, 0, 0]
