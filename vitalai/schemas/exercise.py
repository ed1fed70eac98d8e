"""Exercise and category schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ExerciseCategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    name: str
    created_at: datetime | None = None


class ExerciseCategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category_id: UUID | None = None
    primary_muscles: list[str] | None = None
    secondary_muscles: list[str] | None = None
    instructions: str | None = None
    image_url: str | None = None
    video_url: str | None = None


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category_id: UUID | None = None
    primary_muscles: list[str] | None = None
    secondary_muscles: list[str] | None = None
    instructions: str | None = None
    image_url: str | None = None
    video_url: str | None = None


class ExerciseRead(ExerciseBase):
    """Exercise with the joined category flattened to category_name."""

    model_config = ConfigDict(from_attributes=True)
    id: UUID
    category_name: str | None = None
    is_default: bool = False
    user_id: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
