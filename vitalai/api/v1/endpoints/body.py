"""Body measurement endpoints."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.api.deps import get_user_id
from vitalai.db.session import get_db
from vitalai.schemas.body import BodyMeasurementCreate, BodyMeasurementRead
from vitalai.services import workout_api

router = APIRouter()


@router.get("/measurements", response_model=list[BodyMeasurementRead])
async def list_measurements(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Measurements newest first."""
    return await workout_api.get_body_measurements(db, user_id)


@router.post("/measurements", response_model=BodyMeasurementRead, status_code=201)
async def add_measurement(
    payload: BodyMeasurementCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await workout_api.add_body_measurement(db, user_id, payload)


@router.delete("/measurements/{measurement_id}", status_code=204)
async def delete_measurement(
    measurement_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    await workout_api.delete_body_measurement(db, user_id, measurement_id)
