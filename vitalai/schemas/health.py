"""Health record schemas: metrics, fitness goals, risk factors."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from vitalai.core.enums import GoalType, RiskFactorType


class HealthMetricCreate(BaseModel):
    measurement_date: date = Field(default_factory=date.today)
    blood_pressure_systolic: int | None = Field(None, gt=0, lt=300)
    blood_pressure_diastolic: int | None = Field(None, gt=0, lt=200)
    resting_heart_rate: int | None = Field(None, gt=0, lt=300)
    cholesterol_total: float | None = Field(None, gt=0, description="mg/dL")
    cholesterol_hdl: float | None = Field(None, gt=0)
    cholesterol_ldl: float | None = Field(None, gt=0)
    blood_glucose_level: float | None = Field(None, gt=0, description="mg/dL")
    hba1c_level: float | None = Field(None, gt=0, description="%")
    stress_level: int | None = Field(None, ge=1, le=10)
    anxiety_level: int | None = Field(None, ge=1, le=10)
    sleep_quality: int | None = Field(None, ge=1, le=10)
    sleep_hours: float | None = Field(None, ge=0, le=24)
    bmi: float | None = Field(None, gt=0)
    vo2_max: float | None = Field(None, gt=0)
    notes: str | None = None


class HealthMetricRead(HealthMetricCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    measurement_date: date
    created_at: datetime | None = None


class FitnessGoalCreate(BaseModel):
    goal_type: GoalType
    goal_description: str = Field(..., min_length=1, max_length=500)
    target_value: float | None = None
    current_value: float | None = None
    unit: str | None = Field(None, max_length=50)
    start_date: date = Field(default_factory=date.today)
    target_date: date | None = None
    is_achieved: bool = False
    notes: str | None = None


class FitnessGoalUpdate(BaseModel):
    goal_type: GoalType | None = None
    goal_description: str | None = Field(None, min_length=1, max_length=500)
    target_value: float | None = None
    current_value: float | None = None
    unit: str | None = Field(None, max_length=50)
    start_date: date | None = None
    target_date: date | None = None
    is_achieved: bool | None = None
    notes: str | None = None


class FitnessGoalRead(FitnessGoalCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None


class HealthRiskFactorCreate(BaseModel):
    factor_type: RiskFactorType
    factor_name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    severity: int = Field(..., ge=1, le=5)
    is_active: bool = True
    onset_date: date | None = None
    notes: str | None = None


class HealthRiskFactorRead(HealthRiskFactorCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    created_at: datetime | None = None
