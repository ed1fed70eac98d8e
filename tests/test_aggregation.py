"""Unit tests for volume and dashboard aggregation."""

from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

from vitalai.schemas.workout import ExerciseHistoryStats
from vitalai.services import aggregation


def _set(weight=None, reps=None, warmup=False):
    return SimpleNamespace(weight=weight, reps=reps, is_warmup=warmup)


def _workout(created_at, duration=None, completed=True, volume=None):
    return SimpleNamespace(
        created_at=created_at, duration=duration, is_completed=completed, total_volume=volume
    )


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestVolume:
    def test_working_set_volume_is_weight_times_reps(self):
        assert aggregation.set_volume(_set(100, 5)) == 500.0

    def test_warmup_and_incomplete_sets_have_no_volume(self):
        assert aggregation.set_volume(_set(60, 10, warmup=True)) == 0.0
        assert aggregation.set_volume(_set(100, None)) == 0.0
        assert aggregation.set_volume(_set(None, 8)) == 0.0

    def test_total_volume_spans_all_exercises(self):
        workout_exercises = [
            SimpleNamespace(sets=[_set(100, 5), _set(40, 10, warmup=True)]),
            SimpleNamespace(sets=[_set(20, 12), _set(22.5, 10)]),
            SimpleNamespace(sets=[]),
        ]
        assert aggregation.total_volume(workout_exercises) == 500 + 240 + 225

    def test_summarize_exercise_sets_skips_warmups(self):
        stats = aggregation.summarize_exercise_sets(
            [_set(60, 10, warmup=True), _set(100, 5), _set(110, 3), _set(None, 10)]
        )
        assert stats.max_weight == 110
        assert stats.total_sets == 2
        assert stats.total_reps == 8
        assert stats.total_volume == 830

    def test_zero_weight_or_reps_sets_are_not_counted(self):
        stats = aggregation.summarize_exercise_sets([_set(0, 10), _set(0, 12), _set(50, 5), _set(40, 0)])
        assert stats.total_sets == 1
        assert stats.total_reps == 5
        assert stats.max_weight == 50
        assert stats.total_volume == 250


class TestWorkoutMetrics:
    def test_metrics_for_mixed_workouts(self):
        now = _utc(2024, 3, 31, 12)
        workouts = [
            _workout(now - timedelta(days=2), duration=45, volume=1000),
            _workout(now - timedelta(days=10), duration=60, volume=500),
            _workout(now - timedelta(days=40), duration=30, volume=250),
            _workout(now - timedelta(days=1), duration=None, completed=False),
        ]
        metrics = aggregation.workout_metrics(workouts, now=now)
        assert metrics == {
            "total_workouts": 4,
            "recent_workouts": 2,
            "avg_duration": 34,
            "total_volume": 1750.0,
        }

    def test_empty_metrics(self):
        assert aggregation.workout_metrics([]) == {
            "total_workouts": 0,
            "recent_workouts": 0,
            "avg_duration": 0,
            "total_volume": 0.0,
        }

    def test_naive_created_at_is_treated_as_utc(self):
        now = _utc(2024, 3, 31, 12)
        workouts = [_workout(datetime(2024, 3, 30, 9), duration=20)]
        assert aggregation.workout_metrics(workouts, now=now)["recent_workouts"] == 1


class TestFrequency:
    def test_week_start_is_previous_sunday(self):
        assert aggregation.week_start(date(2024, 1, 10)) == date(2024, 1, 7)
        assert aggregation.week_start(date(2024, 1, 7)) == date(2024, 1, 7)
        assert aggregation.week_start(date(2024, 1, 13)) == date(2024, 1, 7)

    def test_weekly_frequency_oldest_first(self):
        workouts = [
            _workout(_utc(2024, 1, 8, 7)),
            _workout(_utc(2024, 1, 9, 18)),
            _workout(_utc(2024, 1, 2, 7)),
            _workout(_utc(2023, 12, 1, 7)),
        ]
        result = aggregation.weekly_frequency(workouts, weeks=2, today=date(2024, 1, 10))
        assert result == [
            {"week_start": date(2023, 12, 31), "count": 1},
            {"week_start": date(2024, 1, 7), "count": 2},
        ]

    def test_weekly_frequency_has_every_week(self):
        result = aggregation.weekly_frequency([], weeks=12, today=date(2024, 1, 10))
        assert len(result) == 12
        assert all(r["count"] == 0 for r in result)
        assert result[-1]["week_start"] == date(2024, 1, 7)

    def test_daily_distribution_starts_on_sunday(self):
        workouts = [
            _workout(_utc(2024, 1, 7, 9)),  # Sunday
            _workout(_utc(2024, 1, 8, 9)),  # Monday
            _workout(_utc(2024, 1, 15, 9)),  # Monday
            _workout(None),
        ]
        result = aggregation.daily_distribution(workouts)
        assert [r["day"] for r in result] == aggregation.DAY_NAMES
        assert result[0]["count"] == 1
        assert result[1]["count"] == 2
        assert sum(r["count"] for r in result) == 3


class TestExerciseProgress:
    def test_points_sorted_by_date_and_unweighted_entries_skipped(self):
        history = [
            SimpleNamespace(
                date=_utc(2024, 2, 10),
                exercise_data={"ex-1": ExerciseHistoryStats(max_weight=105)},
            ),
            SimpleNamespace(
                date=_utc(2024, 2, 3),
                exercise_data={"ex-1": ExerciseHistoryStats(max_weight=100)},
            ),
            SimpleNamespace(
                date=_utc(2024, 2, 5),
                exercise_data={"ex-1": ExerciseHistoryStats(max_weight=0)},
            ),
            SimpleNamespace(
                date=_utc(2024, 2, 6),
                exercise_data={"ex-2": ExerciseHistoryStats(max_weight=50)},
            ),
        ]
        points = aggregation.exercise_progress(history, "ex-1")
        assert [p["max_weight"] for p in points] == [100, 105]
        assert points[0]["date"] == _utc(2024, 2, 3)
