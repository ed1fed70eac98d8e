"""Workout endpoints: workouts, their exercises and sets, history."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.api.deps import get_user_id
from vitalai.db.session import get_db
from vitalai.schemas.workout import (
    ExerciseSetCreate,
    ExerciseSetRead,
    ExerciseSetUpdate,
    WorkoutCreate,
    WorkoutExerciseCreate,
    WorkoutExerciseRead,
    WorkoutHistoryEntry,
    WorkoutRead,
    WorkoutReadWithExercises,
    WorkoutUpdate,
)
from vitalai.services import workout_api

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """The caller's workouts, newest first, with exercise counts."""
    return await workout_api.get_workouts(db, user_id)


@router.get("/history", response_model=list[WorkoutHistoryEntry])
async def workout_history(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Completed workouts with per-exercise max weight, sets, reps and volume."""
    return await workout_api.get_workout_history(db, user_id)


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await workout_api.create_workout(db, user_id, payload)


@router.get("/{workout_id}", response_model=WorkoutReadWithExercises)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """A workout with its exercises (in order), their sets and the total volume."""
    workout = await workout_api.get_workout_by_id(db, user_id, workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Partial update. Sets duration from start_time/end_time if not provided."""
    return await workout_api.update_workout(db, user_id, workout_id, payload)


@router.post("/{workout_id}/complete", response_model=WorkoutRead)
async def complete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await workout_api.complete_workout(db, user_id, workout_id)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Delete a workout with its exercises and sets."""
    await workout_api.delete_workout(db, user_id, workout_id)


# --- Exercises in a workout ---


@router.post("/{workout_id}/exercises", response_model=WorkoutExerciseRead, status_code=201)
async def add_exercise(
    workout_id: uuid.UUID,
    payload: WorkoutExerciseCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await workout_api.add_exercise_to_workout(
        db, user_id, workout_id, payload.exercise_id, payload.order_index, payload.notes
    )


@router.delete("/workout-exercises/{workout_exercise_id}", status_code=204)
async def remove_exercise(
    workout_exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    await workout_api.remove_exercise_from_workout(db, user_id, workout_exercise_id)


# --- Sets ---


@router.post("/workout-exercises/{workout_exercise_id}/sets", response_model=ExerciseSetRead, status_code=201)
async def add_set(
    workout_exercise_id: uuid.UUID,
    payload: ExerciseSetCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Add a set; set_number defaults to the next one for this exercise."""
    return await workout_api.add_set_to_exercise(db, user_id, workout_exercise_id, payload)


@router.patch("/sets/{set_id}", response_model=ExerciseSetRead)
async def update_set(
    set_id: uuid.UUID,
    payload: ExerciseSetUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await workout_api.update_set(db, user_id, set_id, payload)


@router.delete("/sets/{set_id}", status_code=204)
async def delete_set(
    set_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    await workout_api.delete_set(db, user_id, set_id)
