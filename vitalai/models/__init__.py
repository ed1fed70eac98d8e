"""ORM models - import all so Base.metadata is complete for migrations."""

from vitalai.models.assessment import HealthRiskAssessment
from vitalai.models.body_measurement import BodyMeasurement
from vitalai.models.exercise import Exercise, ExerciseCategory
from vitalai.models.feedback import AIFeedback
from vitalai.models.health import FitnessGoal, HealthMetric, HealthRiskFactor
from vitalai.models.tracking import (
    FastingSession,
    FoodEntry,
    HeartHealthCheck,
    UserPreferences,
    WaterIntake,
)
from vitalai.models.workout import ExerciseSet, Workout, WorkoutExercise

__all__ = [
    "AIFeedback",
    "BodyMeasurement",
    "Exercise",
    "ExerciseCategory",
    "ExerciseSet",
    "FastingSession",
    "FitnessGoal",
    "FoodEntry",
    "HealthMetric",
    "HealthRiskAssessment",
    "HealthRiskFactor",
    "HeartHealthCheck",
    "UserPreferences",
    "WaterIntake",
    "Workout",
    "WorkoutExercise",
]
