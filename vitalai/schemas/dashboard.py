"""Dashboard response: cached store collections plus derived charts."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from vitalai.schemas.body import BodyMeasurementRead
from vitalai.schemas.workout import WorkoutHistoryEntry, WorkoutRead


class WorkoutMetrics(BaseModel):
    total_workouts: int = 0
    recent_workouts: int = 0
    avg_duration: int = 0
    total_volume: float = 0.0


class WeeklyFrequency(BaseModel):
    week_start: date
    count: int


class DailyDistribution(BaseModel):
    day: str
    count: int


class ProgressPoint(BaseModel):
    date: datetime | None
    max_weight: float


class DashboardRead(BaseModel):
    workouts: list[WorkoutRead] = []
    history: list[WorkoutHistoryEntry] = []
    measurements: list[BodyMeasurementRead] = []
    metrics: WorkoutMetrics
    weekly_frequency: list[WeeklyFrequency] = []
    daily_distribution: list[DailyDistribution] = []
    exercise_progress: dict[UUID, list[ProgressPoint]] = {}
