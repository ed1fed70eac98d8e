"""Health records: dated metric readings, fitness goals and risk factors."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.core.errors import NotFoundError
from vitalai.models.health import FitnessGoal, HealthMetric, HealthRiskFactor
from vitalai.schemas.health import (
    FitnessGoalCreate,
    FitnessGoalUpdate,
    HealthMetricCreate,
    HealthRiskFactorCreate,
)

logger = logging.getLogger(__name__)


async def _add(db: AsyncSession, row):
    db.add(row)
    await db.flush()
    await db.refresh(row)
    return row


# --- Metrics ---


async def list_health_metrics(db: AsyncSession, user_id: uuid.UUID, limit: int | None = None) -> list[HealthMetric]:
    """Readings, newest measurement date first."""
    stmt = (
        select(HealthMetric)
        .where(HealthMetric.user_id == user_id)
        .order_by(HealthMetric.measurement_date.desc(), HealthMetric.created_at.desc())
    )
    if limit:
        stmt = stmt.limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_latest_health_metric(db: AsyncSession, user_id: uuid.UUID) -> HealthMetric | None:
    rows = await list_health_metrics(db, user_id, limit=1)
    return rows[0] if rows else None


async def add_health_metric(db: AsyncSession, user_id: uuid.UUID, data: HealthMetricCreate) -> HealthMetric:
    return await _add(db, HealthMetric(user_id=user_id, **data.model_dump()))


# --- Fitness goals ---


async def list_fitness_goals(db: AsyncSession, user_id: uuid.UUID) -> list[FitnessGoal]:
    result = await db.execute(
        select(FitnessGoal).where(FitnessGoal.user_id == user_id).order_by(FitnessGoal.created_at.desc())
    )
    return list(result.scalars().all())


async def create_fitness_goal(db: AsyncSession, user_id: uuid.UUID, data: FitnessGoalCreate) -> FitnessGoal:
    goal = await _add(db, FitnessGoal(user_id=user_id, **data.model_dump()))
    logger.info("Created %s goal %s", goal.goal_type.value, goal.id)
    return goal


async def update_fitness_goal(
    db: AsyncSession, user_id: uuid.UUID, goal_id: uuid.UUID, data: FitnessGoalUpdate
) -> FitnessGoal:
    """Apply the fields that were sent; goals of other users are not found."""
    result = await db.execute(
        select(FitnessGoal).where(FitnessGoal.id == goal_id, FitnessGoal.user_id == user_id)
    )
    goal = result.scalar_one_or_none()
    if not goal:
        raise NotFoundError("Fitness goal", goal_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(goal, k, v)
    await db.flush()
    await db.refresh(goal)
    return goal


# --- Risk factors ---


async def list_risk_factors(db: AsyncSession, user_id: uuid.UUID) -> list[HealthRiskFactor]:
    """Most severe first."""
    result = await db.execute(
        select(HealthRiskFactor)
        .where(HealthRiskFactor.user_id == user_id)
        .order_by(HealthRiskFactor.severity.desc(), HealthRiskFactor.created_at.desc())
    )
    return list(result.scalars().all())


async def add_risk_factor(db: AsyncSession, user_id: uuid.UUID, data: HealthRiskFactorCreate) -> HealthRiskFactor:
    return await _add(db, HealthRiskFactor(user_id=user_id, **data.model_dump()))
