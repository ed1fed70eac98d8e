"""Schemas for the daily trackers: preferences, fasting, water, macros, heart health."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from vitalai.core.constants import (
    DEFAULT_FASTING_HOURS,
    MAX_FASTING_HOURS,
    MIN_FASTING_HOURS,
)
from vitalai.core.enums import HealthStatus, WaterUnit


# --- Preferences ---


class PreferencesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    fitness_level: str
    workout_duration: int
    workout_frequency: int
    fitness_goals: list[str]
    available_equipment: list[str]
    water_goal_ml: int
    water_unit: WaterUnit
    calorie_goal: int
    protein_goal: int
    carbs_goal: int
    fat_goal: int


class PreferencesUpdate(BaseModel):
    fitness_level: str | None = None
    workout_duration: int | None = Field(None, ge=1)
    workout_frequency: int | None = Field(None, ge=1, le=14)
    fitness_goals: list[str] | None = None
    available_equipment: list[str] | None = None
    water_goal_ml: int | None = Field(None, gt=0)
    water_unit: WaterUnit | None = None
    calorie_goal: int | None = Field(None, ge=0)
    protein_goal: int | None = Field(None, ge=0)
    carbs_goal: int | None = Field(None, ge=0)
    fat_goal: int | None = Field(None, ge=0)


# --- Fasting ---


class FastingStart(BaseModel):
    target_hours: int = Field(DEFAULT_FASTING_HOURS, ge=MIN_FASTING_HOURS, le=MAX_FASTING_HOURS)


class FastingStatus(BaseModel):
    """Current fast. When no session exists everything but `active` is empty."""

    active: bool = False
    session_id: UUID | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    target_hours: int | None = None
    elapsed_seconds: int = 0
    remaining_seconds: int = 0
    progress_pct: float = 0.0


# --- Water ---


class WaterIntakeCreate(BaseModel):
    amount: float = Field(..., gt=0)
    unit: WaterUnit = WaterUnit.ML


class WaterIntakeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    amount_ml: int
    logged_at: datetime


class WaterHistoryItem(BaseModel):
    id: UUID
    amount: float
    time: datetime


class WaterSummary(BaseModel):
    """Today's intake in the preferred unit."""

    goal: float
    current: float
    unit: WaterUnit
    percentage: int
    history: list[WaterHistoryItem] = []


class WaterGoalUpdate(BaseModel):
    goal: float = Field(..., gt=0)
    unit: WaterUnit | None = None


# --- Macros ---


class FoodEntryCreate(BaseModel):
    food: str = Field(..., max_length=255)
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)


class FoodEntryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    food: str
    calories: float
    protein: float
    carbs: float
    fat: float
    logged_at: datetime


class MacroProgress(BaseModel):
    current: float
    goal: float
    percentage: int


class MacroSummary(BaseModel):
    calories: MacroProgress
    protein: MacroProgress
    carbs: MacroProgress
    fat: MacroProgress
    entries: list[FoodEntryRead] = []


# --- Heart health ---


class HeartHealthCreate(BaseModel):
    heart_rate: int | None = Field(None, gt=0, lt=300)
    systolic: int | None = Field(None, gt=0, lt=300)
    diastolic: int | None = Field(None, gt=0, lt=200)
    stress_level: int | None = Field(None, ge=1, le=10)
    sleep_hours: float | None = Field(None, ge=0, le=24)


class HeartHealthStatuses(BaseModel):
    heart_rate: HealthStatus
    blood_pressure: HealthStatus
    stress: HealthStatus
    sleep: HealthStatus
    messages: dict[str, str] = Field(default_factory=dict)


class HeartHealthRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    heart_rate: int | None = None
    systolic: int | None = None
    diastolic: int | None = None
    stress_level: int | None = None
    sleep_hours: float | None = None
    assessed_at: datetime
    status: HeartHealthStatuses | None = None
