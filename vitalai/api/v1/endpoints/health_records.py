"""Health record endpoints: metric readings, fitness goals, risk factors."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.api.deps import get_user_id
from vitalai.db.session import get_db
from vitalai.schemas.health import (
    FitnessGoalCreate,
    FitnessGoalRead,
    FitnessGoalUpdate,
    HealthMetricCreate,
    HealthMetricRead,
    HealthRiskFactorCreate,
    HealthRiskFactorRead,
)
from vitalai.services import health_records

router = APIRouter()


@router.get("/metrics", response_model=list[HealthMetricRead])
async def list_metrics(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await health_records.list_health_metrics(db, user_id)


@router.get("/metrics/latest", response_model=HealthMetricRead)
async def latest_metric(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    metric = await health_records.get_latest_health_metric(db, user_id)
    if not metric:
        raise HTTPException(status_code=404, detail="No health metrics recorded")
    return metric


@router.post("/metrics", response_model=HealthMetricRead, status_code=201)
async def add_metric(
    payload: HealthMetricCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await health_records.add_health_metric(db, user_id, payload)


@router.get("/goals", response_model=list[FitnessGoalRead])
async def list_goals(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Goals, newest first."""
    return await health_records.list_fitness_goals(db, user_id)


@router.post("/goals", response_model=FitnessGoalRead, status_code=201)
async def create_goal(
    payload: FitnessGoalCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await health_records.create_fitness_goal(db, user_id, payload)


@router.patch("/goals/{goal_id}", response_model=FitnessGoalRead)
async def update_goal(
    goal_id: uuid.UUID,
    payload: FitnessGoalUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await health_records.update_fitness_goal(db, user_id, goal_id, payload)


@router.get("/risk-factors", response_model=list[HealthRiskFactorRead])
async def list_risk_factors(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Risk factors, most severe first."""
    return await health_records.list_risk_factors(db, user_id)


@router.post("/risk-factors", response_model=HealthRiskFactorRead, status_code=201)
async def add_risk_factor(
    payload: HealthRiskFactorCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await health_records.add_risk_factor(db, user_id, payload)
