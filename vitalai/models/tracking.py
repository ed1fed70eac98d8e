"""Daily tracker models: preferences, fasting, water, food, heart health."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vitalai.core.constants import (
    DEFAULT_CALORIE_GOAL,
    DEFAULT_CARBS_GOAL,
    DEFAULT_FAT_GOAL,
    DEFAULT_FASTING_HOURS,
    DEFAULT_FITNESS_LEVEL,
    DEFAULT_PROTEIN_GOAL,
    DEFAULT_WATER_GOAL_ML,
    DEFAULT_WORKOUT_DURATION,
    DEFAULT_WORKOUT_FREQUENCY,
)
from vitalai.db.base import Base, JSONType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserPreferences(Base):
    """One row per user: training profile plus water and macro goals."""

    __tablename__ = "user_preferences"

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    fitness_level: Mapped[str] = mapped_column(String(50), default=DEFAULT_FITNESS_LEVEL)
    workout_duration: Mapped[int] = mapped_column(Integer, default=DEFAULT_WORKOUT_DURATION)  # minutes
    workout_frequency: Mapped[int] = mapped_column(Integer, default=DEFAULT_WORKOUT_FREQUENCY)  # per week
    fitness_goals: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    available_equipment: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    water_goal_ml: Mapped[int] = mapped_column(Integer, default=DEFAULT_WATER_GOAL_ML)
    water_unit: Mapped[str] = mapped_column(String(2), default="ml")
    calorie_goal: Mapped[int] = mapped_column(Integer, default=DEFAULT_CALORIE_GOAL)
    protein_goal: Mapped[int] = mapped_column(Integer, default=DEFAULT_PROTEIN_GOAL)
    carbs_goal: Mapped[int] = mapped_column(Integer, default=DEFAULT_CARBS_GOAL)
    fat_goal: Mapped[int] = mapped_column(Integer, default=DEFAULT_FAT_GOAL)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


class FastingSession(Base):
    """An intermittent fast. At most one active session per user."""

    __tablename__ = "fasting_sessions"
    __table_args__ = (Index("ix_fasting_sessions_user_active", "user_id", "is_active"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    target_hours: Mapped[int] = mapped_column(Integer, default=DEFAULT_FASTING_HOURS)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class WaterIntake(Base):
    """A single drink, always stored in millilitres."""

    __tablename__ = "water_intake"
    __table_args__ = (Index("ix_water_intake_user_logged", "user_id", "logged_at"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    amount_ml: Mapped[int] = mapped_column(Integer, nullable=False)
    logged_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class FoodEntry(Base):
    """A food logged against the daily macro goals."""

    __tablename__ = "food_entries"
    __table_args__ = (Index("ix_food_entries_user_logged", "user_id", "logged_at"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    food: Mapped[str] = mapped_column(String(255), nullable=False)
    calories: Mapped[float] = mapped_column(Float, default=0)
    protein: Mapped[float] = mapped_column(Float, default=0)
    carbs: Mapped[float] = mapped_column(Float, default=0)
    fat: Mapped[float] = mapped_column(Float, default=0)
    logged_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class HeartHealthCheck(Base):
    """Self-reported heart health snapshot."""

    __tablename__ = "heart_health_checks"
    __table_args__ = (Index("ix_heart_health_checks_user_assessed", "user_id", "assessed_at"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    heart_rate: Mapped[int | None] = mapped_column(Integer, nullable=True)
    systolic: Mapped[int | None] = mapped_column(Integer, nullable=True)
    diastolic: Mapped[int | None] = mapped_column(Integer, nullable=True)
    stress_level: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-10
    sleep_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    assessed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
