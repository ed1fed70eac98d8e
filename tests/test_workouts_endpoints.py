"""Workout, exercise, body and dashboard routes end to end."""

import uuid

import pytest

from vitalai.models.exercise import ExerciseCategory

API = "/api/v1"


@pytest.fixture
async def category_id(session_factory):
    async with session_factory() as session:
        category = ExerciseCategory(name="Legs")
        session.add(category)
        await session.commit()
        return str(category.id)


async def _exercise(client, name="Squat", category_id=None):
    response = await client.post(f"{API}/exercises", json={"name": name, "category_id": category_id})
    assert response.status_code == 201
    return response.json()


class TestExerciseRoutes:
    async def test_crud(self, client, category_id):
        created = await _exercise(client, category_id=category_id)
        assert created["category_name"] == "Legs"

        categories = (await client.get(f"{API}/exercises/categories")).json()
        assert [c["name"] for c in categories] == ["Legs"]

        found = (await client.get(f"{API}/exercises", params={"search": "squ"})).json()
        assert [e["id"] for e in found] == [created["id"]]

        patched = await client.patch(f"{API}/exercises/{created['id']}", json={"name": "Back Squat"})
        assert patched.json()["name"] == "Back Squat"

        assert (await client.delete(f"{API}/exercises/{created['id']}")).status_code == 204
        assert (await client.get(f"{API}/exercises/{created['id']}")).status_code == 404

    async def test_unknown_exercise_update_is_404(self, client):
        response = await client.patch(f"{API}/exercises/{uuid.uuid4()}", json={"name": "x"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Exercise not found"

    async def test_name_is_required(self, client):
        assert (await client.post(f"{API}/exercises", json={"name": ""})).status_code == 422


class TestWorkoutRoutes:
    async def test_session_flow(self, client):
        exercise = await _exercise(client)
        workout = (await client.post(f"{API}/workouts", json={"name": "Leg Day"})).json()
        assert workout["exercises_count"] == 0

        we = await client.post(f"{API}/workouts/{workout['id']}/exercises", json={"exercise_id": exercise["id"]})
        assert we.status_code == 201
        we_id = we.json()["id"]

        first = await client.post(f"{API}/workouts/workout-exercises/{we_id}/sets", json={"weight": 100, "reps": 5})
        await client.post(f"{API}/workouts/workout-exercises/{we_id}/sets", json={"weight": 60, "reps": 10, "is_warmup": True})
        assert first.json()["set_number"] == 1

        updated = await client.patch(f"{API}/workouts/sets/{first.json()['id']}", json={"reps": 6})
        assert updated.json()["reps"] == 6

        detail = (await client.get(f"{API}/workouts/{workout['id']}")).json()
        assert detail["total_volume"] == 600
        assert len(detail["workout_exercises"][0]["sets"]) == 2
        assert detail["workout_exercises"][0]["exercise"]["name"] == "Squat"

        completed = (await client.post(f"{API}/workouts/{workout['id']}/complete")).json()
        assert completed["is_completed"] is True

        history = (await client.get(f"{API}/workouts/history")).json()
        assert history[0]["exercise_data"][exercise["id"]]["max_weight"] == 100

        listed = (await client.get(f"{API}/workouts")).json()
        assert listed[0]["total_volume"] == 600

    async def test_delete_workout_and_set(self, client):
        exercise = await _exercise(client)
        workout = (await client.post(f"{API}/workouts", json={"name": "Short"})).json()
        we = (await client.post(f"{API}/workouts/{workout['id']}/exercises", json={"exercise_id": exercise["id"]})).json()
        s = (await client.post(f"{API}/workouts/workout-exercises/{we['id']}/sets", json={"reps": 20})).json()

        assert (await client.delete(f"{API}/workouts/sets/{s['id']}")).status_code == 204
        assert (await client.delete(f"{API}/workouts/sets/{s['id']}")).status_code == 404
        assert (await client.delete(f"{API}/workouts/workout-exercises/{we['id']}")).status_code == 204
        assert (await client.delete(f"{API}/workouts/{workout['id']}")).status_code == 204
        assert (await client.get(f"{API}/workouts/{workout['id']}")).status_code == 404

    async def test_workouts_belong_to_header_user(self, client):
        workout = (await client.post(f"{API}/workouts", json={"name": "Mine"})).json()
        other = {"X-User-Id": str(uuid.uuid4())}
        assert (await client.get(f"{API}/workouts/{workout['id']}", headers=other)).status_code == 404
        assert (await client.get(f"{API}/workouts", headers=other)).json() == []

    async def test_other_user_cannot_change_sets_or_exercises(self, client):
        exercise = await _exercise(client)
        workout = (await client.post(f"{API}/workouts", json={"name": "Mine"})).json()
        we = (await client.post(f"{API}/workouts/{workout['id']}/exercises", json={"exercise_id": exercise["id"]})).json()
        s = (await client.post(f"{API}/workouts/workout-exercises/{we['id']}/sets", json={"weight": 80, "reps": 8})).json()
        other = {"X-User-Id": str(uuid.uuid4())}

        add = await client.post(
            f"{API}/workouts/workout-exercises/{we['id']}/sets", json={"weight": 1, "reps": 1}, headers=other
        )
        assert add.status_code == 404
        assert (await client.patch(f"{API}/workouts/sets/{s['id']}", json={"reps": 1}, headers=other)).status_code == 404
        assert (await client.delete(f"{API}/workouts/sets/{s['id']}", headers=other)).status_code == 404
        assert (await client.delete(f"{API}/workouts/workout-exercises/{we['id']}", headers=other)).status_code == 404
        assert (
            await client.patch(f"{API}/exercises/{exercise['id']}", json={"name": "x"}, headers=other)
        ).status_code == 404
        assert (await client.delete(f"{API}/exercises/{exercise['id']}", headers=other)).status_code == 404

        detail = (await client.get(f"{API}/workouts/{workout['id']}")).json()
        assert detail["exercises_count"] == 1
        assert [(x["weight"], x["reps"]) for x in detail["workout_exercises"][0]["sets"]] == [(80, 8)]

    async def test_update_derives_duration(self, client):
        workout = (
            await client.post(f"{API}/workouts", json={"name": "Timed", "start_time": "2024-05-01T10:00:00Z"})
        ).json()
        updated = await client.patch(f"{API}/workouts/{workout['id']}", json={"end_time": "2024-05-01T10:50:00Z"})
        assert updated.json()["duration"] == 50


class TestBodyRoutes:
    async def test_measurements(self, client):
        created = await client.post(
            f"{API}/body/measurements", json={"weight": 78.4, "body_fat": 16.5, "measurement_date": "2024-04-01"}
        )
        assert created.status_code == 201
        listed = (await client.get(f"{API}/body/measurements")).json()
        assert listed[0]["weight"] == 78.4
        assert (await client.delete(f"{API}/body/measurements/{created.json()['id']}")).status_code == 204
        assert (await client.get(f"{API}/body/measurements")).json() == []

    async def test_weight_bounds(self, client):
        assert (await client.post(f"{API}/body/measurements", json={"weight": 5})).status_code == 422


class TestDashboard:
    async def test_empty_dashboard(self, client):
        body = (await client.get(f"{API}/dashboard")).json()
        assert body["metrics"]["total_workouts"] == 0
        assert len(body["weekly_frequency"]) == 12
        assert [d["day"] for d in body["daily_distribution"]] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert body["exercise_progress"] == {}

    async def test_dashboard_after_a_workout(self, client):
        exercise = await _exercise(client, name="Deadlift")
        workout = (await client.post(f"{API}/workouts", json={"name": "Pull"})).json()
        we = (await client.post(f"{API}/workouts/{workout['id']}/exercises", json={"exercise_id": exercise["id"]})).json()
        await client.post(f"{API}/workouts/workout-exercises/{we['id']}/sets", json={"weight": 180, "reps": 3})
        await client.post(f"{API}/workouts/{workout['id']}/complete")
        await client.post(f"{API}/body/measurements", json={"weight": 90})

        body = (await client.get(f"{API}/dashboard")).json()
        assert body["metrics"]["total_workouts"] == 1
        assert body["metrics"]["recent_workouts"] == 1
        assert body["metrics"]["total_volume"] == 540
        assert sum(w["count"] for w in body["weekly_frequency"]) == 1
        assert len(body["measurements"]) == 1
        assert body["exercise_progress"][exercise["id"]][0]["max_weight"] == 180
