"""AI feedback schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from vitalai.core.enums import FeedbackRating


class FeedbackCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response_id: str | None = Field(None, alias="responseId")
    response_type: str | None = Field(None, alias="responseType")
    rating: FeedbackRating | None = None
    comment: str = ""
    context: dict[str, Any] | None = None


class FeedbackRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    response_id: str = Field(..., alias="responseId")
    response_type: str = Field(..., alias="responseType")
    rating: FeedbackRating | None = None
    comment: str | None = None
    context: dict[str, Any] | None = None
    timestamp: datetime = Field(..., validation_alias="created_at")


class FeedbackList(BaseModel):
    feedback: list[FeedbackRead]
    count: int
