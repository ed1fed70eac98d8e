"""Rule-based health risk assessments.

Each assess_* function is pure: the same input always produces the same
level, score and recommendations. Scores are reported as 0-100 integers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from vitalai.core.enums import AssessmentCategory, RiskLevel
from vitalai.schemas.assessment import (
    AssessmentResult,
    CardiovascularInput,
    DiabetesInput,
    MentalHealthInput,
)

# --- Helpers ---


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 2)


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal weight"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def blood_pressure_category(systolic: int, diastolic: int) -> str:
    """AHA category; crisis is checked before the ordinary bands."""
    if systolic > 180 or diastolic > 120:
        return "Hypertensive Crisis"
    if systolic < 120 and diastolic < 80:
        return "Normal"
    if systolic < 130 and diastolic < 80:
        return "Elevated"
    if systolic < 140 and diastolic < 90:
        return "Hypertension Stage 1"
    return "Hypertension Stage 2"


def glucose_category(glucose: float) -> str:
    if glucose < 100:
        return "Normal"
    if glucose < 126:
        return "Prediabetes"
    return "Diabetes"


# --- Cardiovascular ---

CARDIO_RECOMMENDATIONS = {
    RiskLevel.HIGH: [
        "Schedule an appointment with a cardiologist for a comprehensive evaluation",
        "Monitor your blood pressure regularly",
        "Consider dietary changes to reduce cholesterol intake",
        "Start a gradual exercise program after consulting with your doctor",
        "If you smoke, consider a smoking cessation program",
        "Limit alcohol consumption",
        "Maintain a healthy weight",
    ],
    RiskLevel.MODERATE: [
        "Discuss your risk factors with your doctor at your next check-up",
        "Monitor your blood pressure and cholesterol periodically",
        "Reduce sodium, saturated fats, and processed foods",
        "Aim for at least 150 minutes of moderate exercise per week",
        "If you smoke, consider a smoking cessation program",
    ],
    RiskLevel.LOW: [
        "Continue with regular health check-ups",
        "Maintain a heart-healthy diet rich in fruits, vegetables, and whole grains",
        "Stay physically active with at least 150 minutes of moderate exercise per week",
        "Manage stress through relaxation techniques",
        "Ensure adequate sleep of 7-8 hours per night",
        "Limit sodium, saturated fats, and processed foods",
    ],
}


def cardiovascular_score(data: CardiovascularInput) -> float:
    score = 0.0
    if data.age > 50:
        score += 0.15
    if data.age > 60:
        score += 0.15
    if data.systolic >= 140 or data.diastolic >= 90:
        score += 0.3
    elif data.systolic >= 120 or data.diastolic >= 80:
        score += 0.15
    if data.cholesterol == 3:
        score += 0.25
    elif data.cholesterol == 2:
        score += 0.15
    if data.smoker:
        score += 0.15
    return round(score, 2)


def assess_cardiovascular(data: CardiovascularInput) -> AssessmentResult:
    """Hypertensive readings (>= 140 or >= 90) are high risk regardless of score."""
    score = cardiovascular_score(data)
    if data.systolic >= 140 or data.diastolic >= 90 or score > 0.4:
        level = RiskLevel.HIGH
    elif score >= 0.2:
        level = RiskLevel.MODERATE
    else:
        level = RiskLevel.LOW
    bmi = calculate_bmi(data.weight, data.height)
    return AssessmentResult(
        category=AssessmentCategory.CARDIOVASCULAR,
        risk_level=level,
        risk_score=round(min(score, 1.0) * 100),
        recommendations=list(CARDIO_RECOMMENDATIONS[level]),
        metrics={
            **data.model_dump(),
            "bmi": bmi,
            "bmi_category": bmi_category(bmi),
            "blood_pressure_category": blood_pressure_category(data.systolic, data.diastolic),
        },
    )


# --- Diabetes ---

DIABETES_RECOMMENDATIONS = {
    RiskLevel.HIGH: [
        "Schedule an appointment with a healthcare provider for a comprehensive diabetes evaluation",
        "Monitor blood glucose levels regularly",
        "Maintain a balanced, low-sugar diet",
        "Engage in regular physical activity",
        "Consider consulting with a diabetes educator",
    ],
    RiskLevel.MODERATE: [
        "Monitor blood glucose levels",
        "Make dietary modifications",
        "Increase physical activity",
        "Schedule follow-up assessment",
    ],
    RiskLevel.LOW: [
        "Maintain healthy lifestyle habits",
        "Continue regular exercise routine",
        "Follow a balanced diet",
        "Schedule regular check-ups",
    ],
}


def diabetes_score(data: DiabetesInput) -> float:
    glucose = data.blood_glucose_level
    hba1c = data.hba1c_level
    score = 0.5 if glucose >= 200 else 0.3 if glucose >= 140 else 0.1
    score += 0.5 if hba1c >= 6.5 else 0.3 if hba1c >= 5.7 else 0.1
    if data.hypertension and data.heart_disease:
        score += 0.2
    return round(score, 2)


def assess_diabetes(data: DiabetesInput) -> AssessmentResult:
    score = diabetes_score(data)
    glucose = data.blood_glucose_level
    hba1c = data.hba1c_level
    if glucose >= 200 or hba1c >= 6.5:
        level = RiskLevel.HIGH
    elif glucose >= 140 or hba1c >= 5.7:
        level = RiskLevel.MODERATE
    else:
        level = RiskLevel.LOW
    metrics = {**data.model_dump(), "glucose_category": glucose_category(glucose)}
    if data.bmi is not None:
        metrics["bmi_category"] = bmi_category(data.bmi)
    return AssessmentResult(
        category=AssessmentCategory.DIABETES,
        risk_level=level,
        risk_score=round(min(score, 1.0) * 100),
        recommendations=list(DIABETES_RECOMMENDATIONS[level]),
        metrics=metrics,
    )


# --- Mental health ---

MENTAL_HEALTH_RECOMMENDATIONS = {
    RiskLevel.HIGH: [
        "Consider scheduling an appointment with a mental health professional",
        "Establish a consistent sleep routine",
        "Practice daily stress management techniques",
        "Strengthen your social support network",
        "Set healthy boundaries between work and personal life",
    ],
    RiskLevel.MODERATE: [
        "Implement regular stress reduction activities",
        "Prioritize adequate sleep",
        "Engage in regular physical activity",
        "Nurture supportive relationships",
        "Consider mindfulness or meditation practices",
    ],
    RiskLevel.LOW: [
        "Maintain your current healthy habits",
        "Continue prioritizing good sleep hygiene",
        "Stay physically active",
        "Nurture your social connections",
        "Practice preventive self-care",
    ],
}


def mental_health_score(data: MentalHealthInput) -> int:
    """Risk percentage, 0-100."""
    score = 0.0
    if data.sleep_hours < 6:
        score += 0.2
    elif data.sleep_hours > 9:
        score += 0.1
    if data.stress_level >= 4:
        score += 0.2
    elif data.stress_level >= 3:
        score += 0.1
    if data.anxiety_frequency >= 4:
        score += 0.2
    elif data.anxiety_frequency >= 3:
        score += 0.1
    if data.social_support <= 2:
        score += 0.15
    if data.work_life_balance <= 2:
        score += 0.15
    if data.previous_diagnosis:
        score += 0.3
    return round(min(score * 100, 100))


def assess_mental_health(data: MentalHealthInput) -> AssessmentResult:
    pct = mental_health_score(data)
    if pct >= 70:
        level = RiskLevel.HIGH
    elif pct >= 40:
        level = RiskLevel.MODERATE
    else:
        level = RiskLevel.LOW
    return AssessmentResult(
        category=AssessmentCategory.MENTAL_HEALTH,
        risk_level=level,
        risk_score=pct,
        recommendations=list(MENTAL_HEALTH_RECOMMENDATIONS[level]),
        metrics=data.model_dump(),
    )


# --- Skin ---

DEFAULT_DIAGNOSIS = "Eczema (Atopic Dermatitis)"
DEFAULT_CAUSES = "Genetic factors, immune system dysfunction, environmental triggers, stress"
DEFAULT_STEPS = (
    "Moisturize regularly, avoid triggers, use prescribed medications, follow a gentle skincare routine"
)
DEFAULT_SKIN_REPORT = (
    f"Diagnosis: {DEFAULT_DIAGNOSIS}\n\n"
    f"Possible Causes: {DEFAULT_CAUSES}\n\n"
    f"Recommended Steps: {DEFAULT_STEPS}"
)
SKIN_CONFIDENCE = 85

_DIAGNOSIS_RE = re.compile(r"Diagnosis:?(.*?)(?=Possible Causes:|Recommended Steps:|$)", re.S)
_CAUSES_RE = re.compile(r"Possible Causes:?(.*?)(?=Recommended Steps:|$)", re.S)
_STEPS_RE = re.compile(r"Recommended Steps:?(.*)", re.S)


@dataclass
class SkinReport:
    diagnosis: str
    causes: str
    steps: str


def _section(pattern: re.Pattern, text: str, default: str) -> str:
    m = pattern.search(text or "")
    value = " ".join(m.group(1).split()) if m else ""
    return value or default


def parse_skin_report(text: str) -> SkinReport:
    """Split a free-text report into its three sections, falling back to the defaults."""
    return SkinReport(
        diagnosis=_section(_DIAGNOSIS_RE, text, DEFAULT_DIAGNOSIS),
        causes=_section(_CAUSES_RE, text, DEFAULT_CAUSES),
        steps=_section(_STEPS_RE, text, DEFAULT_STEPS),
    )


def assess_skin(report_text: str, symptoms: str | None = None) -> AssessmentResult:
    report = parse_skin_report(report_text)
    level = RiskLevel.HIGH if "severe" in report.diagnosis.lower() else RiskLevel.MODERATE
    steps = report.steps.lower()
    follow_up = "consult" in steps or "see a doctor" in steps
    return AssessmentResult(
        category=AssessmentCategory.SKIN,
        risk_level=level,
        risk_score=SKIN_CONFIDENCE,
        recommendations=[s.strip() for s in report.steps.split(",") if s.strip()],
        metrics={
            "symptoms": symptoms,
            "diagnosis": report.diagnosis,
            "causes": report.causes,
            "steps": report.steps,
            "confidence_score": SKIN_CONFIDENCE,
            "follow_up_required": follow_up,
        },
    )


def skin_report_prompt(symptoms: str) -> str:
    return (
        "You are a dermatology assistant. Based on the symptoms below, write a short report "
        "with exactly three sections, each on its own line:\n"
        "Diagnosis: <most likely condition>\n"
        "Possible Causes: <comma-separated causes>\n"
        "Recommended Steps: <comma-separated steps>\n"
        "If the condition may need professional care, include 'consult a dermatologist' in the steps.\n\n"
        f"Symptoms: {symptoms}"
    )
