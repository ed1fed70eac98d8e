"""Exercise library endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.api.deps import get_user_id
from vitalai.db.session import get_db
from vitalai.schemas.exercise import ExerciseCategoryRead, ExerciseCreate, ExerciseRead, ExerciseUpdate
from vitalai.services import workout_api

router = APIRouter()


@router.get("/categories", response_model=list[ExerciseCategoryRead])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await workout_api.get_exercise_categories(db)


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    category_id: uuid.UUID | None = None,
    search: str | None = None,
):
    """List exercises ordered by name, optionally by category or name substring."""
    return await workout_api.get_exercises(db, category_id=category_id, search_term=search)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await workout_api.create_exercise(db, payload, user_id=user_id)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(exercise_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    exercise = await workout_api.get_exercise_by_id(db, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Update one of the caller's exercises (partial). Defaults are read-only."""
    return await workout_api.update_exercise(db, user_id, exercise_id, payload)


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    await workout_api.delete_exercise(db, user_id, exercise_id)
