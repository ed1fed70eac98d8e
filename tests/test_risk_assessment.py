"""Unit tests for the rule-based risk assessments."""

import pytest

from vitalai.core.enums import AssessmentCategory, RiskLevel
from vitalai.schemas.assessment import CardiovascularInput, DiabetesInput, MentalHealthInput
from vitalai.services import risk_assessment as ra


def _cardio(**overrides) -> CardiovascularInput:
    data = {
        "age": 30,
        "gender": "female",
        "height": 175,
        "weight": 70,
        "systolic": 115,
        "diastolic": 75,
        "cholesterol": 1,
        "smoker": False,
    }
    data.update(overrides)
    return CardiovascularInput(**data)


def _diabetes(**overrides) -> DiabetesInput:
    data = {"age": 45, "hba1c_level": 5.0, "blood_glucose_level": 90}
    data.update(overrides)
    return DiabetesInput(**data)


def _mental(**overrides) -> MentalHealthInput:
    data = {
        "sleep_hours": 8,
        "stress_level": 1,
        "anxiety_frequency": 1,
        "social_support": 5,
        "work_life_balance": 5,
    }
    data.update(overrides)
    return MentalHealthInput(**data)


class TestHelpers:
    def test_bmi(self):
        assert ra.calculate_bmi(70, 175) == 22.86
        assert ra.bmi_category(17.9) == "Underweight"
        assert ra.bmi_category(22.86) == "Normal weight"
        assert ra.bmi_category(27) == "Overweight"
        assert ra.bmi_category(31) == "Obese"

    @pytest.mark.parametrize(
        "systolic,diastolic,expected",
        [
            (118, 78, "Normal"),
            (125, 78, "Elevated"),
            (135, 85, "Hypertension Stage 1"),
            (135, 95, "Hypertension Stage 2"),
            (145, 85, "Hypertension Stage 2"),
            (185, 80, "Hypertensive Crisis"),
            (150, 125, "Hypertensive Crisis"),
        ],
    )
    def test_blood_pressure_category(self, systolic, diastolic, expected):
        assert ra.blood_pressure_category(systolic, diastolic) == expected

    def test_glucose_category(self):
        assert ra.glucose_category(95) == "Normal"
        assert ra.glucose_category(110) == "Prediabetes"
        assert ra.glucose_category(130) == "Diabetes"


class TestCardiovascular:
    def test_low_risk(self):
        result = ra.assess_cardiovascular(_cardio())
        assert result.category == AssessmentCategory.CARDIOVASCULAR
        assert result.risk_level == RiskLevel.LOW
        assert result.risk_score == 0
        assert result.recommendations == ra.CARDIO_RECOMMENDATIONS[RiskLevel.LOW]
        assert result.metrics["bmi"] == 22.86
        assert result.metrics["blood_pressure_category"] == "Normal"

    def test_moderate_risk_from_age_and_elevated_pressure(self):
        result = ra.assess_cardiovascular(_cardio(age=55, systolic=125, diastolic=78))
        assert result.risk_level == RiskLevel.MODERATE
        assert result.risk_score == 30

    def test_hypertensive_reading_is_high_regardless_of_score(self):
        result = ra.assess_cardiovascular(_cardio(systolic=145, diastolic=85))
        assert result.risk_level == RiskLevel.HIGH
        assert result.risk_score == 30

    def test_high_risk_from_score(self):
        result = ra.assess_cardiovascular(_cardio(age=65, cholesterol=3))
        assert result.risk_level == RiskLevel.HIGH
        assert result.risk_score == 55

    def test_deterministic(self):
        data = _cardio(age=58, cholesterol=2, smoker=True)
        assert ra.assess_cardiovascular(data) == ra.assess_cardiovascular(data)


class TestDiabetes:
    def test_low_risk(self):
        result = ra.assess_diabetes(_diabetes())
        assert result.risk_level == RiskLevel.LOW
        assert result.risk_score == 20
        assert result.metrics["glucose_category"] == "Normal"

    def test_moderate_from_glucose(self):
        result = ra.assess_diabetes(_diabetes(blood_glucose_level=150, hba1c_level=5.5))
        assert result.risk_level == RiskLevel.MODERATE

    def test_high_from_hba1c(self):
        result = ra.assess_diabetes(_diabetes(hba1c_level=6.8))
        assert result.risk_level == RiskLevel.HIGH
        assert result.recommendations == ra.DIABETES_RECOMMENDATIONS[RiskLevel.HIGH]

    def test_score_is_capped(self):
        result = ra.assess_diabetes(
            _diabetes(blood_glucose_level=220, hba1c_level=7.2, hypertension=True, heart_disease=True, bmi=32)
        )
        assert result.risk_score == 100
        assert result.metrics["bmi_category"] == "Obese"


class TestMentalHealth:
    def test_low_risk(self):
        result = ra.assess_mental_health(_mental())
        assert result.risk_level == RiskLevel.LOW
        assert result.risk_score == 0

    def test_moderate_risk(self):
        result = ra.assess_mental_health(_mental(sleep_hours=5, stress_level=4))
        assert result.risk_score == 40
        assert result.risk_level == RiskLevel.MODERATE

    def test_high_risk_is_capped_at_100(self):
        result = ra.assess_mental_health(
            _mental(
                sleep_hours=5,
                stress_level=5,
                anxiety_frequency=4,
                social_support=2,
                work_life_balance=2,
                previous_diagnosis=True,
            )
        )
        assert result.risk_level == RiskLevel.HIGH
        assert result.risk_score == 100


class TestSkin:
    REPORT = (
        "Diagnosis: Contact dermatitis\n"
        "Possible Causes: nickel, harsh soap\n"
        "Recommended Steps: avoid nickel, use a fragrance-free moisturizer, consult a dermatologist"
    )

    def test_parse_report_sections(self):
        report = ra.parse_skin_report(self.REPORT)
        assert report.diagnosis == "Contact dermatitis"
        assert report.causes == "nickel, harsh soap"
        assert report.steps.startswith("avoid nickel")

    def test_missing_sections_fall_back_to_defaults(self):
        report = ra.parse_skin_report("")
        assert report.diagnosis == ra.DEFAULT_DIAGNOSIS
        assert report.causes == ra.DEFAULT_CAUSES
        assert report.steps == ra.DEFAULT_STEPS

    def test_assess_skin(self):
        result = ra.assess_skin(self.REPORT, symptoms="itchy rash on wrist")
        assert result.category == AssessmentCategory.SKIN
        assert result.risk_level == RiskLevel.MODERATE
        assert result.risk_score == ra.SKIN_CONFIDENCE
        assert result.recommendations == [
            "avoid nickel",
            "use a fragrance-free moisturizer",
            "consult a dermatologist",
        ]
        assert result.metrics["follow_up_required"] is True
        assert result.metrics["symptoms"] == "itchy rash on wrist"

    def test_severe_diagnosis_is_high_risk(self):
        result = ra.assess_skin("Diagnosis: Severe psoriasis\nRecommended Steps: rest")
        assert result.risk_level == RiskLevel.HIGH
        assert result.metrics["follow_up_required"] is False

    def test_default_report_round_trips(self):
        result = ra.assess_skin(ra.DEFAULT_SKIN_REPORT)
        assert result.metrics["diagnosis"] == ra.DEFAULT_DIAGNOSIS
        assert result.metrics["causes"] == ra.DEFAULT_CAUSES
