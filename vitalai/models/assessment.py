"""HealthRiskAssessment model - persisted output of the rule-based assessments."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vitalai.core.enums import AssessmentCategory, RiskLevel
from vitalai.db.base import Base, JSONType


class HealthRiskAssessment(Base):
    """Inputs (metrics), score, label and canned recommendations of one assessment run."""

    __tablename__ = "health_risk_assessments"
    __table_args__ = (Index("ix_health_risk_assessments_user_date", "user_id", "assessment_date"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    category: Mapped[AssessmentCategory] = mapped_column(Enum(AssessmentCategory), nullable=False)
    risk_level: Mapped[RiskLevel] = mapped_column(Enum(RiskLevel), nullable=False)
    risk_score: Mapped[int] = mapped_column(Integer, nullable=False)  # 0-100
    metrics: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    recommendations: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    assessment_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
