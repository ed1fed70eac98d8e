"""Risk assessment routes: run, store, list, get, delete."""

import uuid

from vitalai.core.errors import LLMResponseError
from vitalai.services.risk_assessment import DEFAULT_DIAGNOSIS

API = "/api/v1/assessments"

CARDIO = {
    "age": 62,
    "gender": "male",
    "height": 178,
    "weight": 92,
    "systolic": 150,
    "diastolic": 95,
    "cholesterol": 2,
    "smoker": True,
}


async def test_cardiovascular_is_stored(client):
    response = await client.post(f"{API}/cardiovascular", json=CARDIO)
    assert response.status_code == 201
    body = response.json()
    assert body["category"] == "cardiovascular"
    assert body["risk_level"] == "high"
    assert body["metrics"]["blood_pressure_category"] == "Hypertension Stage 2"

    fetched = await client.get(f"{API}/{body['id']}")
    assert fetched.json()["risk_score"] == body["risk_score"]


async def test_list_filters_by_category(client):
    await client.post(f"{API}/cardiovascular", json=CARDIO)
    await client.post(f"{API}/diabetes", json={"age": 40, "hba1c_level": 5.9, "blood_glucose_level": 120})
    await client.post(
        f"{API}/mental-health",
        json={"sleep_hours": 7, "stress_level": 3, "anxiety_frequency": 2, "social_support": 4, "work_life_balance": 3},
    )
    assert len((await client.get(API)).json()) == 3
    diabetes = (await client.get(API, params={"category": "diabetes"})).json()
    assert [a["risk_level"] for a in diabetes] == ["moderate"]


async def test_delete_and_ownership(client):
    created = (await client.post(f"{API}/cardiovascular", json=CARDIO)).json()
    other = {"X-User-Id": str(uuid.uuid4())}
    assert (await client.get(f"{API}/{created['id']}", headers=other)).status_code == 404
    assert (await client.delete(f"{API}/{created['id']}")).status_code == 204
    assert (await client.get(f"{API}/{created['id']}")).status_code == 404


async def test_skin_with_given_report_skips_generation(client, fake_gemini):
    report = "Diagnosis: Rosacea\nPossible Causes: heat, spicy food\nRecommended Steps: avoid triggers, see a doctor"
    response = await client.post(f"{API}/skin", json={"report": report})
    assert response.status_code == 201
    body = response.json()
    assert body["metrics"]["diagnosis"] == "Rosacea"
    assert body["metrics"]["follow_up_required"] is True
    assert fake_gemini.prompts == []


async def test_skin_generates_report_from_symptoms(client, fake_gemini):
    fake_gemini.responses = ["Diagnosis: Acne vulgaris\nPossible Causes: hormones\nRecommended Steps: gentle cleanser"]
    response = await client.post(f"{API}/skin", json={"symptoms": "red bumps on cheeks"})
    body = response.json()
    assert body["metrics"]["diagnosis"] == "Acne vulgaris"
    assert "red bumps on cheeks" in fake_gemini.prompts[0]
    assert body["notes"] is None


async def test_skin_falls_back_to_default_report(client, fake_gemini):
    fake_gemini.responses = [LLMResponseError("Gemini API error: 503")]
    response = await client.post(f"{API}/skin", json={"symptoms": "dry patches"})
    assert response.status_code == 201
    body = response.json()
    assert body["metrics"]["diagnosis"] == DEFAULT_DIAGNOSIS
    assert body["notes"] is not None


async def test_skin_requires_input(client):
    assert (await client.post(f"{API}/skin", json={})).status_code == 400


async def test_invalid_input_is_rejected(client):
    response = await client.post(f"{API}/mental-health", json={"sleep_hours": 7, "stress_level": 9})
    assert response.status_code == 422


async def test_update_is_partial_and_owned(client):
    created = (await client.post(f"{API}/cardiovascular", json=CARDIO)).json()
    patched = await client.patch(
        f"{API}/{created['id']}", json={"notes": "Reviewed with GP", "risk_level": None}
    )
    assert patched.status_code == 200
    body = patched.json()
    assert body["notes"] == "Reviewed with GP"
    assert body["risk_level"] == created["risk_level"]
    assert body["recommendations"] == created["recommendations"]

    other = {"X-User-Id": str(uuid.uuid4())}
    response = await client.patch(f"{API}/{created['id']}", json={"risk_score": 5}, headers=other)
    assert response.status_code == 404
    assert (await client.get(f"{API}/{created['id']}")).json()["risk_score"] == created["risk_score"]


async def test_update_rejects_out_of_range_score(client):
    created = (await client.post(f"{API}/cardiovascular", json=CARDIO)).json()
    response = await client.patch(f"{API}/{created['id']}", json={"risk_score": 140})
    assert response.status_code == 422
