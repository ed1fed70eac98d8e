"""Health records: metric readings, fitness goals, risk factors."""

import uuid
from datetime import date

import pytest

from vitalai.core.enums import GoalType, RiskFactorType
from vitalai.core.errors import NotFoundError
from vitalai.schemas.health import (
    FitnessGoalCreate,
    FitnessGoalUpdate,
    HealthMetricCreate,
    HealthRiskFactorCreate,
)
from vitalai.services import health_records

USER = uuid.UUID("66666666-6666-6666-6666-666666666666")
API = "/api/v1/health-records"


class TestMetrics:
    async def test_latest_is_newest_measurement_date(self, db):
        assert await health_records.get_latest_health_metric(db, USER) is None
        await health_records.add_health_metric(
            db, USER, HealthMetricCreate(measurement_date=date(2024, 5, 1), resting_heart_rate=64)
        )
        await health_records.add_health_metric(
            db, USER, HealthMetricCreate(measurement_date=date(2024, 3, 1), resting_heart_rate=70)
        )
        latest = await health_records.get_latest_health_metric(db, USER)
        assert latest.resting_heart_rate == 64
        metrics = await health_records.list_health_metrics(db, USER)
        assert [m.measurement_date for m in metrics] == [date(2024, 5, 1), date(2024, 3, 1)]

    async def test_metrics_are_per_user(self, db):
        await health_records.add_health_metric(db, USER, HealthMetricCreate(bmi=24.1))
        assert await health_records.list_health_metrics(db, uuid.uuid4()) == []


class TestGoals:
    async def test_update_applies_sent_fields_only(self, db):
        goal = await health_records.create_fitness_goal(
            db,
            USER,
            FitnessGoalCreate(goal_type=GoalType.WEIGHT, goal_description="Reach 75 kg", target_value=75, unit="kg"),
        )
        assert goal.is_achieved is False
        updated = await health_records.update_fitness_goal(
            db, USER, goal.id, FitnessGoalUpdate(current_value=76.5)
        )
        assert updated.current_value == 76.5
        assert updated.target_value == 75
        assert updated.goal_description == "Reach 75 kg"

    async def test_other_users_goal_is_not_found(self, db):
        goal = await health_records.create_fitness_goal(
            db, USER, FitnessGoalCreate(goal_type=GoalType.STRENGTH, goal_description="Bench 100 kg")
        )
        with pytest.raises(NotFoundError):
            await health_records.update_fitness_goal(db, uuid.uuid4(), goal.id, FitnessGoalUpdate(is_achieved=True))
        assert (await health_records.list_fitness_goals(db, USER))[0].is_achieved is False


async def test_risk_factors_most_severe_first(db):
    for name, severity in [("Sedentary job", 2), ("Family history of diabetes", 4), ("Smoking", 5)]:
        await health_records.add_risk_factor(
            db,
            USER,
            HealthRiskFactorCreate(factor_type=RiskFactorType.LIFESTYLE, factor_name=name, severity=severity),
        )
    factors = await health_records.list_risk_factors(db, USER)
    assert [f.severity for f in factors] == [5, 4, 2]
    assert all(f.is_active for f in factors)


class TestRoutes:
    async def test_metrics_flow(self, client):
        assert (await client.get(f"{API}/metrics/latest")).status_code == 404
        response = await client.post(
            f"{API}/metrics",
            json={"measurement_date": "2024-04-02", "blood_pressure_systolic": 122, "hba1c_level": 5.4},
        )
        assert response.status_code == 201
        latest = (await client.get(f"{API}/metrics/latest")).json()
        assert latest["hba1c_level"] == 5.4
        assert latest["measurement_date"] == "2024-04-02"
        assert len((await client.get(f"{API}/metrics")).json()) == 1

    async def test_goal_create_and_update(self, client):
        created = await client.post(
            f"{API}/goals", json={"goal_type": "endurance", "goal_description": "Run 10 km", "target_value": 10}
        )
        assert created.status_code == 201
        goal_id = created.json()["id"]
        patched = await client.patch(f"{API}/goals/{goal_id}", json={"is_achieved": True})
        assert patched.status_code == 200
        assert patched.json()["is_achieved"] is True
        assert patched.json()["target_value"] == 10

    async def test_goal_update_by_other_user_is_404(self, client):
        goal_id = (
            await client.post(f"{API}/goals", json={"goal_type": "other", "goal_description": "Sleep by 11"})
        ).json()["id"]
        other = {"X-User-Id": str(uuid.uuid4())}
        response = await client.patch(f"{API}/goals/{goal_id}", json={"is_achieved": True}, headers=other)
        assert response.status_code == 404
        assert (await client.get(f"{API}/goals")).json()[0]["is_achieved"] is False

    async def test_unknown_goal_type_is_rejected(self, client):
        response = await client.post(f"{API}/goals", json={"goal_type": "flexibility", "goal_description": "Splits"})
        assert response.status_code == 422

    async def test_risk_factor_severity_bounds(self, client):
        ok = await client.post(
            f"{API}/risk-factors", json={"factor_type": "genetic", "factor_name": "Hypertension in family", "severity": 3}
        )
        assert ok.status_code == 201
        too_high = await client.post(
            f"{API}/risk-factors", json={"factor_type": "medical", "factor_name": "Asthma", "severity": 6}
        )
        assert too_high.status_code == 422
        other = {"X-User-Id": str(uuid.uuid4())}
        assert (await client.get(f"{API}/risk-factors", headers=other)).json() == []
