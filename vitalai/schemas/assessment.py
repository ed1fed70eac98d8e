"""Risk assessment request and response schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from vitalai.core.enums import AssessmentCategory, RiskLevel


class CardiovascularInput(BaseModel):
    age: int = Field(..., ge=1, le=120)
    gender: str | None = None
    height: float = Field(..., gt=0, description="cm")
    weight: float = Field(..., gt=0, description="kg")
    systolic: int = Field(..., gt=0, lt=300)
    diastolic: int = Field(..., gt=0, lt=200)
    cholesterol: int = Field(1, ge=1, le=3, description="1 normal, 2 above normal, 3 well above normal")
    glucose: int = Field(1, ge=1, le=3)
    smoker: bool = False
    alcohol: bool = False
    active: bool = True


class DiabetesInput(BaseModel):
    age: int = Field(..., ge=1, le=120)
    gender: str | None = None
    hypertension: bool = False
    heart_disease: bool = False
    smoking_history: str | None = None
    bmi: float | None = Field(None, gt=0)
    hba1c_level: float = Field(..., gt=0)
    blood_glucose_level: float = Field(..., gt=0)


class MentalHealthInput(BaseModel):
    sleep_hours: float = Field(..., ge=0, le=24)
    stress_level: int = Field(..., ge=1, le=5)
    anxiety_frequency: int = Field(..., ge=1, le=5)
    social_support: int = Field(..., ge=1, le=5)
    work_life_balance: int = Field(..., ge=1, le=5)
    previous_diagnosis: bool = False


class SkinConditionInput(BaseModel):
    symptoms: str | None = None
    report: str | None = Field(None, description="Pre-written report; skips generation when given")


class AssessmentResult(BaseModel):
    """Output of one rule set before it is stored."""

    category: AssessmentCategory
    risk_level: RiskLevel
    risk_score: int
    recommendations: list[str]
    metrics: dict[str, Any] = {}


class AssessmentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    category: AssessmentCategory
    risk_level: RiskLevel
    risk_score: int
    metrics: dict[str, Any] | None = None
    recommendations: list[str] | None = None
    notes: str | None = None
    assessment_date: datetime


class AssessmentUpdate(BaseModel):
    """Partial update of a stored assessment; the category is fixed."""

    risk_level: RiskLevel | None = None
    risk_score: int | None = Field(None, ge=0, le=100)
    metrics: dict[str, Any] | None = None
    recommendations: list[str] | None = None
    notes: str | None = None
