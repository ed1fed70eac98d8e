"""Workout, WorkoutExercise and ExerciseSet schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from vitalai.schemas.exercise import ExerciseRead


class ExerciseSetBase(BaseModel):
    weight: float | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    duration: int | None = Field(None, ge=0)
    distance: float | None = Field(None, ge=0)
    notes: str | None = None
    is_completed: bool = False
    is_warmup: bool = False


class ExerciseSetCreate(ExerciseSetBase):
    set_number: int | None = Field(None, ge=1)


class ExerciseSetUpdate(BaseModel):
    set_number: int | None = Field(None, ge=1)
    weight: float | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    duration: int | None = Field(None, ge=0)
    distance: float | None = Field(None, ge=0)
    notes: str | None = None
    is_completed: bool | None = None
    is_warmup: bool | None = None


class ExerciseSetRead(ExerciseSetBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_exercise_id: UUID
    set_number: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class WorkoutExerciseCreate(BaseModel):
    exercise_id: UUID
    order_index: int | None = Field(None, ge=0)
    notes: str | None = None


class WorkoutExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_id: UUID
    exercise_id: UUID
    order_index: int
    notes: str | None = None
    exercise: ExerciseRead | None = None
    sets: list[ExerciseSetRead] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class WorkoutBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    notes: str | None = None
    duration: int | None = Field(None, ge=0, description="Minutes")
    is_completed: bool = False
    start_time: datetime | None = None
    end_time: datetime | None = None


class WorkoutCreate(WorkoutBase):
    pass


class WorkoutUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    notes: str | None = None
    duration: int | None = Field(None, ge=0)
    is_completed: bool | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None


class WorkoutRead(WorkoutBase):
    """Workout row plus the derived exercises_count / total_volume."""

    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None
    exercises_count: int = 0
    total_volume: float | None = None


class WorkoutReadWithExercises(WorkoutRead):
    """Workout with nested exercises and their sets (detail view)."""

    workout_exercises: list[WorkoutExerciseRead] = []
    total_volume: float = 0.0


class ExerciseHistoryStats(BaseModel):
    max_weight: float = 0.0
    total_sets: int = 0
    total_reps: int = 0
    total_volume: float = 0.0


class WorkoutHistoryEntry(BaseModel):
    """One completed workout reduced to volume figures for progress charts."""

    id: UUID
    name: str
    date: datetime | None = None
    total_volume: float = 0.0
    exercise_data: dict[str, ExerciseHistoryStats] = {}
