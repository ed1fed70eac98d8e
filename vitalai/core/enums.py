"""Shared enums for models and API."""

from enum import Enum


class RiskLevel(str, Enum):
    """Coarse label produced by the assessment rules."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class AssessmentCategory(str, Enum):
    """Which rule set produced a stored assessment."""

    CARDIOVASCULAR = "cardiovascular"
    DIABETES = "diabetes"
    MENTAL_HEALTH = "mental_health"
    SKIN = "skin"


class WaterUnit(str, Enum):
    ML = "ml"
    OZ = "oz"


class FeedbackRating(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class HealthStatus(str, Enum):
    """Traffic-light status used by the heart health card."""

    GOOD = "good"
    NORMAL = "normal"
    ALERT = "alert"
    UNKNOWN = "unknown"


class GoalType(str, Enum):
    WEIGHT = "weight"
    BODY_FAT = "body_fat"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    HEALTH_METRIC = "health_metric"
    OTHER = "other"


class RiskFactorType(str, Enum):
    """Origin of a tracked health risk factor."""

    LIFESTYLE = "lifestyle"
    MEDICAL = "medical"
    GENETIC = "genetic"
    ENVIRONMENTAL = "environmental"
