"""AIFeedback model - thumbs up/down on generated responses."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vitalai.core.enums import FeedbackRating
from vitalai.db.base import Base, JSONType


class AIFeedback(Base):
    __tablename__ = "ai_feedback"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    response_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    response_type: Mapped[str] = mapped_column(String(100), nullable=False)
    rating: Mapped[FeedbackRating | None] = mapped_column(Enum(FeedbackRating), nullable=True)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    context: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
