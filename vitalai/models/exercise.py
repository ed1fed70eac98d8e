"""Exercise and ExerciseCategory models - the shared exercise library plus user additions."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vitalai.db.base import Base, JSONType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExerciseCategory(Base):
    """Top-level grouping for the library (e.g. Strength, Cardio, Mobility)."""

    __tablename__ = "exercise_categories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    exercises: Mapped[list["Exercise"]] = relationship("Exercise", back_populates="category")


class Exercise(Base):
    """Exercise definition. Defaults (is_default, no owner) are shared by every user."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    category_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("exercise_categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    primary_muscles: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    secondary_muscles: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    category: Mapped["ExerciseCategory | None"] = relationship("ExerciseCategory", back_populates="exercises")
    workout_entries: Mapped[list["WorkoutExercise"]] = relationship(
        "WorkoutExercise", back_populates="exercise", cascade="all, delete-orphan"
    )
