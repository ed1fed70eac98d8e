"""Fitness dashboard: loads a workout store and derives the charts."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from vitalai.api.deps import get_session_factory, get_user_id
from vitalai.db.session import get_db
from vitalai.schemas.dashboard import DashboardRead
from vitalai.services import aggregation
from vitalai.services.workout_store import WorkoutStore

router = APIRouter()


@router.get("", response_model=DashboardRead)
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """Workouts, history and measurements plus metrics, weekly/daily frequency and progress."""
    store = await WorkoutStore(db, user_id, session_factory=session_factory).load()
    return DashboardRead(
        workouts=store.workouts,
        history=store.history,
        measurements=store.measurements,
        metrics=store.metrics(),
        weekly_frequency=aggregation.weekly_frequency(store.workouts),
        daily_distribution=aggregation.daily_distribution(store.workouts),
        exercise_progress=store.exercise_progress(),
    )
