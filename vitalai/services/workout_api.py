"""Workout data access: exercises, workouts, sets, body measurements, history.

Every function takes an AsyncSession and does one query (plus eager loads),
returning read models so callers never touch lazy relationships. Missing rows
raise NotFoundError; database errors are logged and re-raised.
"""

from __future__ import annotations

import functools
import logging
import uuid
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from vitalai.core.errors import NotFoundError
from vitalai.core.timeutils import as_utc, utcnow
from vitalai.models.body_measurement import BodyMeasurement
from vitalai.models.exercise import Exercise, ExerciseCategory
from vitalai.models.workout import ExerciseSet, Workout, WorkoutExercise
from vitalai.schemas.body import BodyMeasurementCreate, BodyMeasurementRead
from vitalai.schemas.exercise import (
    ExerciseCategoryRead,
    ExerciseCreate,
    ExerciseRead,
    ExerciseUpdate,
)
from vitalai.schemas.workout import (
    ExerciseSetCreate,
    ExerciseSetRead,
    ExerciseSetUpdate,
    WorkoutCreate,
    WorkoutExerciseRead,
    WorkoutHistoryEntry,
    WorkoutRead,
    WorkoutReadWithExercises,
    WorkoutUpdate,
)
from vitalai.services.aggregation import summarize_exercise_sets, total_volume

logger = logging.getLogger(__name__)


def _logged(fn):
    """Log database failures with the operation name, then re-raise."""

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs):
        try:
            return await fn(*args, **kwargs)
        except SQLAlchemyError:
            logger.exception("%s failed", fn.__name__)
            raise

    return wrapper


# --- Mapping ---


def _exercise_read(ex: Exercise) -> ExerciseRead:
    return ExerciseRead(
        id=ex.id,
        name=ex.name,
        description=ex.description,
        category_id=ex.category_id,
        category_name=ex.category.name if ex.category else None,
        primary_muscles=ex.primary_muscles,
        secondary_muscles=ex.secondary_muscles,
        instructions=ex.instructions,
        image_url=ex.image_url,
        video_url=ex.video_url,
        is_default=ex.is_default,
        user_id=ex.user_id,
        created_at=ex.created_at,
        updated_at=ex.updated_at,
    )


def _workout_exercise_read(we: WorkoutExercise) -> WorkoutExerciseRead:
    sets = sorted(we.sets, key=lambda s: (s.set_number, str(s.id)))
    return WorkoutExerciseRead(
        id=we.id,
        workout_id=we.workout_id,
        exercise_id=we.exercise_id,
        order_index=we.order_index,
        notes=we.notes,
        exercise=_exercise_read(we.exercise) if we.exercise else None,
        sets=[ExerciseSetRead.model_validate(s) for s in sets],
        created_at=we.created_at,
        updated_at=we.updated_at,
    )


def _workout_fields(w: Workout) -> dict[str, Any]:
    return {
        "id": w.id,
        "user_id": w.user_id,
        "name": w.name,
        "notes": w.notes,
        "duration": w.duration,
        "is_completed": w.is_completed,
        "start_time": w.start_time,
        "end_time": w.end_time,
        "created_at": w.created_at,
        "updated_at": w.updated_at,
    }


def _workout_read(w: Workout) -> WorkoutRead:
    """Summary row. Needs workout_exercises and their sets loaded."""
    return WorkoutRead(
        **_workout_fields(w),
        exercises_count=len(w.workout_exercises),
        total_volume=total_volume(w.workout_exercises),
    )


def _workout_detail(w: Workout) -> WorkoutReadWithExercises:
    ordered = sorted(w.workout_exercises, key=lambda we: (we.order_index, str(we.id)))
    return WorkoutReadWithExercises(
        **_workout_fields(w),
        exercises_count=len(ordered),
        total_volume=total_volume(ordered),
        workout_exercises=[_workout_exercise_read(we) for we in ordered],
    )


def _minutes_between(start, end) -> int:
    delta = as_utc(end) - as_utc(start)
    return max(0, int(delta.total_seconds() // 60))


# --- Loaders (populate_existing so reloads after a flush see fresh children) ---


def _workout_stmt(user_id: uuid.UUID, workout_id: uuid.UUID, detail: bool = True):
    stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
    if detail:
        stmt = stmt.options(
            selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.sets),
            selectinload(Workout.workout_exercises)
            .selectinload(WorkoutExercise.exercise)
            .selectinload(Exercise.category),
        )
    else:
        stmt = stmt.options(
            selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.sets)
        )
    return stmt.execution_options(populate_existing=True)


async def _load_workout(
    db: AsyncSession, user_id: uuid.UUID, workout_id: uuid.UUID, detail: bool = True
) -> Workout:
    result = await db.execute(_workout_stmt(user_id, workout_id, detail))
    workout = result.scalar_one_or_none()
    if not workout:
        raise NotFoundError("Workout", workout_id)
    return workout


async def _load_exercise(db: AsyncSession, exercise_id: uuid.UUID) -> Exercise:
    result = await db.execute(
        select(Exercise)
        .where(Exercise.id == exercise_id)
        .options(selectinload(Exercise.category))
        .execution_options(populate_existing=True)
    )
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise NotFoundError("Exercise", exercise_id)
    return exercise


async def _load_own_exercise(db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID) -> Exercise:
    """Only the creator may change an exercise; defaults and other users' rows look missing."""
    exercise = await _load_exercise(db, exercise_id)
    if exercise.user_id != user_id:
        raise NotFoundError("Exercise", exercise_id)
    return exercise


async def _load_workout_exercise(
    db: AsyncSession, user_id: uuid.UUID, workout_exercise_id: uuid.UUID
) -> WorkoutExercise:
    result = await db.execute(
        select(WorkoutExercise)
        .join(Workout, WorkoutExercise.workout_id == Workout.id)
        .where(WorkoutExercise.id == workout_exercise_id, Workout.user_id == user_id)
        .options(
            selectinload(WorkoutExercise.sets),
            selectinload(WorkoutExercise.exercise).selectinload(Exercise.category),
        )
        .execution_options(populate_existing=True)
    )
    we = result.scalar_one_or_none()
    if not we:
        raise NotFoundError("Workout exercise", workout_exercise_id)
    return we


# --- Exercises ---


@_logged
async def get_exercise_categories(db: AsyncSession) -> list[ExerciseCategoryRead]:
    result = await db.execute(select(ExerciseCategory).order_by(ExerciseCategory.name))
    return [ExerciseCategoryRead.model_validate(c) for c in result.scalars().all()]


@_logged
async def get_exercises(
    db: AsyncSession,
    category_id: uuid.UUID | None = None,
    search_term: str | None = None,
) -> list[ExerciseRead]:
    """Exercises ordered by name; search_term is a case-insensitive substring match."""
    stmt = select(Exercise).options(selectinload(Exercise.category)).order_by(Exercise.name)
    if category_id:
        stmt = stmt.where(Exercise.category_id == category_id)
    if search_term:
        stmt = stmt.where(Exercise.name.ilike(f"%{search_term.strip()}%"))
    result = await db.execute(stmt)
    return [_exercise_read(ex) for ex in result.scalars().all()]


@_logged
async def get_exercise_by_id(db: AsyncSession, exercise_id: uuid.UUID) -> ExerciseRead | None:
    result = await db.execute(
        select(Exercise).where(Exercise.id == exercise_id).options(selectinload(Exercise.category))
    )
    exercise = result.scalar_one_or_none()
    return _exercise_read(exercise) if exercise else None


@_logged
async def create_exercise(
    db: AsyncSession, data: ExerciseCreate, user_id: uuid.UUID | None = None
) -> ExerciseRead:
    """User-created exercises are never defaults."""
    exercise = Exercise(**data.model_dump(), user_id=user_id, is_default=False)
    db.add(exercise)
    await db.flush()
    return _exercise_read(await _load_exercise(db, exercise.id))


@_logged
async def update_exercise(
    db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID, data: ExerciseUpdate
) -> ExerciseRead:
    exercise = await _load_own_exercise(db, user_id, exercise_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(exercise, k, v)
    await db.flush()
    return _exercise_read(await _load_exercise(db, exercise_id))


@_logged
async def delete_exercise(db: AsyncSession, user_id: uuid.UUID, exercise_id: uuid.UUID) -> None:
    # Load workout entries and their sets so the ORM cascade does not lazy-load
    result = await db.execute(
        select(Exercise)
        .where(Exercise.id == exercise_id, Exercise.user_id == user_id)
        .options(selectinload(Exercise.workout_entries).selectinload(WorkoutExercise.sets))
    )
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise NotFoundError("Exercise", exercise_id)
    await db.delete(exercise)
    await db.flush()


# --- Workouts ---


@_logged
async def get_workouts(db: AsyncSession, user_id: uuid.UUID) -> list[WorkoutRead]:
    """The user's workouts, newest first, with exercises_count and total_volume."""
    result = await db.execute(
        select(Workout)
        .where(Workout.user_id == user_id)
        .options(selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.sets))
        .order_by(Workout.created_at.desc())
        .execution_options(populate_existing=True)
    )
    return [_workout_read(w) for w in result.scalars().all()]


@_logged
async def get_workout_by_id(
    db: AsyncSession, user_id: uuid.UUID, workout_id: uuid.UUID
) -> WorkoutReadWithExercises | None:
    result = await db.execute(_workout_stmt(user_id, workout_id))
    workout = result.scalar_one_or_none()
    return _workout_detail(workout) if workout else None


@_logged
async def create_workout(db: AsyncSession, user_id: uuid.UUID, data: WorkoutCreate) -> WorkoutRead:
    fields = data.model_dump()
    if fields["start_time"] is None:
        fields["start_time"] = utcnow()
    if fields["end_time"] and fields["duration"] is None:
        fields["duration"] = _minutes_between(fields["start_time"], fields["end_time"])
    workout = Workout(user_id=user_id, **fields)
    db.add(workout)
    await db.flush()
    return _workout_read(await _load_workout(db, user_id, workout.id, detail=False))


@_logged
async def update_workout(
    db: AsyncSession, user_id: uuid.UUID, workout_id: uuid.UUID, data: WorkoutUpdate
) -> WorkoutRead:
    """Partial update. end_time without duration derives duration in minutes."""
    workout = await _load_workout(db, user_id, workout_id, detail=False)
    update = data.model_dump(exclude_unset=True)
    start = update.get("start_time") or workout.start_time
    if update.get("end_time") and start and "duration" not in update:
        update["duration"] = _minutes_between(start, update["end_time"])
    for k, v in update.items():
        setattr(workout, k, v)
    await db.flush()
    return _workout_read(await _load_workout(db, user_id, workout_id, detail=False))


@_logged
async def complete_workout(db: AsyncSession, user_id: uuid.UUID, workout_id: uuid.UUID) -> WorkoutRead:
    """Finish a workout: completed, end_time now, duration from start_time."""
    workout = await _load_workout(db, user_id, workout_id, detail=False)
    now = utcnow()
    workout.is_completed = True
    workout.end_time = now
    workout.duration = _minutes_between(workout.start_time or workout.created_at, now)
    await db.flush()
    return _workout_read(await _load_workout(db, user_id, workout_id, detail=False))


@_logged
async def delete_workout(db: AsyncSession, user_id: uuid.UUID, workout_id: uuid.UUID) -> None:
    workout = await _load_workout(db, user_id, workout_id, detail=False)
    await db.delete(workout)
    await db.flush()


# --- Workout exercises and sets ---


@_logged
async def add_exercise_to_workout(
    db: AsyncSession,
    user_id: uuid.UUID,
    workout_id: uuid.UUID,
    exercise_id: uuid.UUID,
    order_index: int | None = None,
    notes: str | None = None,
) -> WorkoutExerciseRead:
    """Append an exercise to a workout; order_index defaults to one past the last."""
    await _load_workout(db, user_id, workout_id, detail=False)
    await _load_exercise(db, exercise_id)
    if order_index is None:
        result = await db.execute(
            select(func.max(WorkoutExercise.order_index)).where(WorkoutExercise.workout_id == workout_id)
        )
        current = result.scalar()
        order_index = 0 if current is None else current + 1
    we = WorkoutExercise(workout_id=workout_id, exercise_id=exercise_id, order_index=order_index, notes=notes)
    db.add(we)
    await db.flush()
    return _workout_exercise_read(await _load_workout_exercise(db, user_id, we.id))


@_logged
async def remove_exercise_from_workout(
    db: AsyncSession, user_id: uuid.UUID, workout_exercise_id: uuid.UUID
) -> None:
    we = await _load_workout_exercise(db, user_id, workout_exercise_id)
    await db.delete(we)
    await db.flush()


@_logged
async def add_set_to_exercise(
    db: AsyncSession, user_id: uuid.UUID, workout_exercise_id: uuid.UUID, data: ExerciseSetCreate
) -> ExerciseSetRead:
    """Add a set; set_number defaults to one past the highest for the workout exercise."""
    await _load_workout_exercise(db, user_id, workout_exercise_id)
    fields = data.model_dump()
    if fields["set_number"] is None:
        result = await db.execute(
            select(func.max(ExerciseSet.set_number)).where(
                ExerciseSet.workout_exercise_id == workout_exercise_id
            )
        )
        fields["set_number"] = (result.scalar() or 0) + 1
    s = ExerciseSet(workout_exercise_id=workout_exercise_id, **fields)
    db.add(s)
    await db.flush()
    await db.refresh(s)
    return ExerciseSetRead.model_validate(s)


async def _load_set(db: AsyncSession, user_id: uuid.UUID, set_id: uuid.UUID) -> ExerciseSet:
    result = await db.execute(
        select(ExerciseSet)
        .join(WorkoutExercise, ExerciseSet.workout_exercise_id == WorkoutExercise.id)
        .join(Workout, WorkoutExercise.workout_id == Workout.id)
        .where(ExerciseSet.id == set_id, Workout.user_id == user_id)
    )
    s = result.scalar_one_or_none()
    if not s:
        raise NotFoundError("Set", set_id)
    return s


@_logged
async def update_set(
    db: AsyncSession, user_id: uuid.UUID, set_id: uuid.UUID, data: ExerciseSetUpdate
) -> ExerciseSetRead:
    s = await _load_set(db, user_id, set_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(s, k, v)
    await db.flush()
    await db.refresh(s)
    return ExerciseSetRead.model_validate(s)


@_logged
async def delete_set(db: AsyncSession, user_id: uuid.UUID, set_id: uuid.UUID) -> None:
    s = await _load_set(db, user_id, set_id)
    await db.delete(s)
    await db.flush()


# --- Body measurements ---


@_logged
async def get_body_measurements(db: AsyncSession, user_id: uuid.UUID) -> list[BodyMeasurementRead]:
    result = await db.execute(
        select(BodyMeasurement)
        .where(BodyMeasurement.user_id == user_id)
        .order_by(BodyMeasurement.measurement_date.desc(), BodyMeasurement.created_at.desc())
    )
    return [BodyMeasurementRead.model_validate(m) for m in result.scalars().all()]


@_logged
async def add_body_measurement(
    db: AsyncSession, user_id: uuid.UUID, data: BodyMeasurementCreate
) -> BodyMeasurementRead:
    m = BodyMeasurement(user_id=user_id, **data.model_dump())
    db.add(m)
    await db.flush()
    await db.refresh(m)
    return BodyMeasurementRead.model_validate(m)


@_logged
async def delete_body_measurement(db: AsyncSession, user_id: uuid.UUID, measurement_id: uuid.UUID) -> None:
    result = await db.execute(
        select(BodyMeasurement).where(
            BodyMeasurement.id == measurement_id, BodyMeasurement.user_id == user_id
        )
    )
    m = result.scalar_one_or_none()
    if not m:
        raise NotFoundError("Measurement", measurement_id)
    await db.delete(m)
    await db.flush()


# --- History ---


@_logged
async def get_workout_history(db: AsyncSession, user_id: uuid.UUID) -> list[WorkoutHistoryEntry]:
    """Completed workouts newest first, reduced to per-exercise volume stats.

    Only non-warm-up sets with both weight and reps are counted.
    """
    result = await db.execute(
        select(Workout)
        .where(Workout.user_id == user_id, Workout.is_completed.is_(True))
        .options(selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.sets))
        .order_by(Workout.created_at.desc())
        .execution_options(populate_existing=True)
    )
    history = []
    for w in result.scalars().all():
        exercise_data = {}
        for we in w.workout_exercises:
            stats = summarize_exercise_sets(we.sets)
            key = str(we.exercise_id)
            if key in exercise_data:
                # Same exercise added twice to one workout
                prev = exercise_data[key]
                stats.max_weight = max(stats.max_weight, prev.max_weight)
                stats.total_sets += prev.total_sets
                stats.total_reps += prev.total_reps
                stats.total_volume += prev.total_volume
            exercise_data[key] = stats
        history.append(
            WorkoutHistoryEntry(
                id=w.id,
                name=w.name,
                date=w.start_time or w.created_at,
                total_volume=total_volume(w.workout_exercises),
                exercise_data=exercise_data,
            )
        )
    return history
