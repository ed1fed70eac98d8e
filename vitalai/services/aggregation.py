"""Volume and dashboard aggregation over workouts and sets.

Pure functions. Inputs are ORM rows or read models; only attribute access is
used (``weight``, ``reps``, ``is_warmup`` on sets, ``sets`` on workout
exercises, ``created_at``/``duration``/``is_completed`` on workouts).
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone
from typing import Any

from vitalai.core.constants import FREQUENCY_WEEKS, RECENT_WORKOUT_DAYS
from vitalai.core.timeutils import as_utc, utcnow
from vitalai.schemas.workout import ExerciseHistoryStats

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _counts(s: Any) -> bool:
    return not s.is_warmup and bool(s.weight) and bool(s.reps)


def set_volume(s: Any) -> float:
    """weight x reps for a working set; 0 for warm-ups or sets missing (or zero) weight or reps."""
    if not _counts(s):
        return 0.0
    return float(s.weight) * int(s.reps)


def total_volume(workout_exercises: Iterable[Any]) -> float:
    """Sum of set volume over every set of every exercise in a workout."""
    return sum(set_volume(s) for we in workout_exercises for s in (we.sets or []))


def summarize_exercise_sets(sets: Iterable[Any]) -> ExerciseHistoryStats:
    """max weight, set/rep counts and volume over the working sets of one exercise."""
    stats = ExerciseHistoryStats()
    for s in sets:
        if not _counts(s):
            continue
        weight = float(s.weight)
        stats.max_weight = max(stats.max_weight, weight)
        stats.total_sets += 1
        stats.total_reps += int(s.reps)
        stats.total_volume += weight * int(s.reps)
    return stats


def _workout_date(w: Any) -> datetime | None:
    return as_utc(getattr(w, "created_at", None))


def workout_metrics(
    workouts: Iterable[Any],
    now: datetime | None = None,
    days: int = RECENT_WORKOUT_DAYS,
) -> dict[str, Any]:
    """Headline numbers for the fitness dashboard.

    recent_workouts counts completed workouts created in the last ``days``;
    total_volume sums whatever ``total_volume`` each workout carries.
    """
    workouts = list(workouts)
    now = as_utc(now) or utcnow()
    cutoff = now - timedelta(days=days)
    total = len(workouts)
    total_duration = sum(w.duration or 0 for w in workouts)
    recent = []
    for w in workouts:
        d = _workout_date(w)
        if w.is_completed and d is not None and d >= cutoff:
            recent.append(w)
    return {
        "total_workouts": total,
        "recent_workouts": len(recent),
        "avg_duration": round(total_duration / total) if total else 0,
        "total_volume": float(sum(getattr(w, "total_volume", None) or 0 for w in workouts)),
    }


def week_start(d: date) -> date:
    """Sunday on or before d."""
    # date.weekday(): Monday=0 .. Sunday=6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def weekly_frequency(
    workouts: Iterable[Any],
    weeks: int = FREQUENCY_WEEKS,
    today: date | None = None,
) -> list[dict[str, Any]]:
    """Workout counts per Sunday-started week for the last ``weeks`` weeks, oldest first."""
    today = today or utcnow().date()
    current = week_start(today)
    buckets = {current - timedelta(weeks=i): 0 for i in range(weeks - 1, -1, -1)}
    for w in workouts:
        d = _workout_date(w)
        if d is None:
            continue
        start = week_start(d.date())
        if start in buckets:
            buckets[start] += 1
    return [{"week_start": start, "count": count} for start, count in buckets.items()]


def daily_distribution(workouts: Iterable[Any]) -> list[dict[str, Any]]:
    """Workout counts by day of week, Sunday first."""
    counts = [0] * 7
    for w in workouts:
        d = _workout_date(w)
        if d is None:
            continue
        counts[(d.weekday() + 1) % 7] += 1
    return [{"day": name, "count": counts[i]} for i, name in enumerate(DAY_NAMES)]


def exercise_progress(history: Iterable[Any], exercise_id: Any) -> list[dict[str, Any]]:
    """Max weight per history entry for one exercise, oldest first.

    ``history`` holds workout history entries (see get_workout_history); entries
    where the exercise has no weighted working set are skipped.
    """
    key = str(exercise_id)
    points = []
    for entry in history:
        data = {str(k): v for k, v in entry.exercise_data.items()}
        stats = data.get(key)
        if stats is None or stats.max_weight <= 0:
            continue
        points.append({"date": entry.date, "max_weight": stats.max_weight})
    points.sort(key=lambda p: as_utc(p["date"]) or _EPOCH)
    return points
