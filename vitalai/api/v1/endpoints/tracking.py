"""Daily tracker endpoints: preferences, fasting, water, macros, heart health."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.api.deps import get_user_id
from vitalai.db.session import get_db
from vitalai.schemas.tracking import (
    FastingStart,
    FastingStatus,
    FoodEntryCreate,
    FoodEntryRead,
    HeartHealthCreate,
    HeartHealthRead,
    MacroSummary,
    PreferencesRead,
    PreferencesUpdate,
    WaterGoalUpdate,
    WaterIntakeCreate,
    WaterSummary,
)
from vitalai.services import tracking

router = APIRouter()


@router.get("/preferences", response_model=PreferencesRead)
async def get_preferences(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Stored preferences, or defaults for a fresh profile."""
    return await tracking.get_preferences(db, user_id)


@router.patch("/preferences", response_model=PreferencesRead)
async def update_preferences(
    payload: PreferencesUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await tracking.update_preferences(db, user_id, payload)


# --- Fasting ---


@router.get("/fasting", response_model=FastingStatus)
async def fasting_status(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await tracking.get_fasting_status(db, user_id)


@router.post("/fasting/start", response_model=FastingStatus, status_code=201)
async def start_fast(
    payload: FastingStart,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    try:
        return await tracking.start_fast(db, user_id, payload.target_hours)
    except tracking.TrackerError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/fasting/stop", response_model=FastingStatus)
async def stop_fast(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await tracking.stop_fast(db, user_id)


@router.post("/fasting/reset", status_code=204)
async def reset_fast(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Discard the running fast."""
    await tracking.reset_fast(db, user_id)


# --- Water ---


@router.get("/water", response_model=WaterSummary)
async def water_summary(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Today's intake in the preferred unit."""
    return await tracking.get_water_summary(db, user_id)


@router.post("/water", response_model=WaterSummary, status_code=201)
async def add_water(
    payload: WaterIntakeCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    await tracking.add_water(db, user_id, payload.amount, payload.unit)
    return await tracking.get_water_summary(db, user_id)


@router.put("/water/goal", response_model=PreferencesRead)
async def set_water_goal(
    payload: WaterGoalUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await tracking.set_water_goal(db, user_id, payload.goal, payload.unit)


# --- Macros ---


@router.get("/macros", response_model=MacroSummary)
async def macro_summary(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await tracking.get_macro_summary(db, user_id)


@router.post("/macros/entries", response_model=FoodEntryRead, status_code=201)
async def add_food_entry(
    payload: FoodEntryCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    try:
        return await tracking.add_food_entry(db, user_id, payload)
    except tracking.TrackerError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/macros/entries/{entry_id}", status_code=204)
async def delete_food_entry(
    entry_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    await tracking.delete_food_entry(db, user_id, entry_id)


# --- Heart health ---


@router.post("/heart-health", response_model=HeartHealthRead, status_code=201)
async def record_heart_health(
    payload: HeartHealthCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await tracking.record_heart_health(db, user_id, payload)


@router.get("/heart-health/latest", response_model=HeartHealthRead)
async def latest_heart_health(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Most recent check with good/normal/alert statuses."""
    check = await tracking.get_latest_heart_health(db, user_id)
    if not check:
        raise HTTPException(status_code=404, detail="No heart health check recorded")
    return check
