"""Body measurement schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BodyMeasurementCreate(BaseModel):
    weight: Optional[float] = Field(None, gt=20, lt=400, description="Body weight in kg")
    body_fat: Optional[float] = Field(None, ge=2, le=60, description="Body fat %")
    measurement_date: date = Field(default_factory=date.today)
    notes: Optional[str] = Field(None, max_length=500)


class BodyMeasurementRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    weight: Optional[float] = None
    body_fat: Optional[float] = None
    measurement_date: date
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
