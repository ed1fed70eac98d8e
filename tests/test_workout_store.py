"""WorkoutStore: cached collections patched after each mutation."""

import uuid
from datetime import date

import pytest

from vitalai.core.errors import NotFoundError
from vitalai.schemas.body import BodyMeasurementCreate
from vitalai.schemas.exercise import ExerciseCreate, ExerciseUpdate
from vitalai.schemas.workout import ExerciseSetCreate, ExerciseSetUpdate, WorkoutCreate, WorkoutUpdate
from vitalai.services import workout_api
from vitalai.services.workout_store import WorkoutStore

USER = uuid.UUID("88888888-8888-8888-8888-888888888888")


@pytest.fixture
async def store(db):
    return await WorkoutStore(db, USER).load()


@pytest.fixture
async def active(store):
    """Store with an active workout holding one exercise."""
    exercise = await store.create_exercise(ExerciseCreate(name="Deadlift"))
    workout = await store.create_workout(WorkoutCreate(name="Pull Day"))
    await store.fetch_workout_by_id(workout.id)
    we = await store.add_exercise_to_workout(workout.id, exercise.id)
    return store, workout, exercise, we


async def test_load_empty(store):
    assert store.workouts == []
    assert store.history == []
    assert store.measurements == []
    assert store.active_workout is None


async def test_load_with_isolated_sessions(db, session_factory):
    await workout_api.create_workout(db, USER, WorkoutCreate(name="Committed"))
    await workout_api.add_body_measurement(db, USER, BodyMeasurementCreate(weight=75))
    await db.commit()
    store = await WorkoutStore(db, USER, session_factory=session_factory).load()
    assert [w.name for w in store.workouts] == ["Committed"]
    assert len(store.measurements) == 1


async def test_create_workout_is_prepended(store):
    await store.create_workout(WorkoutCreate(name="First"))
    await store.create_workout(WorkoutCreate(name="Second"))
    assert [w.name for w in store.workouts] == ["Second", "First"]


async def test_add_then_delete_set_restores_state(active):
    store, workout, _, we = active
    await store.add_set_to_exercise(we.id, ExerciseSetCreate(weight=140, reps=5))
    before_sets = [s.id for s in store.active_workout.workout_exercises[0].sets]
    before_volume = store.active_workout.total_volume
    assert before_volume == 700

    extra = await store.add_set_to_exercise(we.id, ExerciseSetCreate(weight=150, reps=3))
    assert store.active_workout.total_volume == 1150
    assert store.workouts[0].total_volume == 1150

    await store.delete_set(extra.id)
    assert [s.id for s in store.active_workout.workout_exercises[0].sets] == before_sets
    assert store.active_workout.total_volume == before_volume
    assert store.workouts[0].total_volume == before_volume


async def test_cache_matches_refetch_after_mutations(active):
    store, workout, _, we = active
    s = await store.add_set_to_exercise(we.id, ExerciseSetCreate(weight=100, reps=5))
    await store.update_set(s.id, ExerciseSetUpdate(reps=8))
    cached = store.active_workout
    fresh = await workout_api.get_workout_by_id(store.db, USER, workout.id)
    assert cached.total_volume == fresh.total_volume == 800
    assert cached.exercises_count == fresh.exercises_count == 1
    assert [s.reps for s in cached.workout_exercises[0].sets] == [8]


async def test_remove_exercise_updates_counts(active):
    store, workout, _, we = active
    assert store.workouts[0].exercises_count == 1
    await store.remove_exercise_from_workout(we.id)
    assert store.active_workout.workout_exercises == []
    assert store.workouts[0].exercises_count == 0


async def test_add_exercise_to_inactive_workout_bumps_count(store):
    exercise = await store.create_exercise(ExerciseCreate(name="Row"))
    workout = await store.create_workout(WorkoutCreate(name="Back"))
    await store.add_exercise_to_workout(workout.id, exercise.id)
    assert store.active_workout is None
    assert store.workouts[0].exercises_count == 1


async def test_update_and_complete_patch_active(active):
    store, workout, _, _ = active
    await store.update_workout(workout.id, WorkoutUpdate(name="Heavy Pull"))
    assert store.workouts[0].name == "Heavy Pull"
    assert store.active_workout.name == "Heavy Pull"
    await store.complete_workout(workout.id)
    assert store.active_workout.is_completed is True
    assert len(store.active_workout.workout_exercises) == 1


async def test_delete_workout_clears_active(active):
    store, workout, _, _ = active
    await store.delete_workout(workout.id)
    assert store.workouts == []
    assert store.active_workout is None


async def test_exercise_library_patches(active):
    store, _, exercise, _ = active
    await store.create_exercise(ExerciseCreate(name="Bench Press"))
    assert [e.name for e in store.exercises] == ["Bench Press", "Deadlift"]
    await store.update_exercise(exercise.id, ExerciseUpdate(description="Conventional"))
    assert next(e for e in store.exercises if e.id == exercise.id).description == "Conventional"
    await store.delete_exercise(exercise.id)
    assert [e.name for e in store.exercises] == ["Bench Press"]
    assert store.active_workout.workout_exercises == []


async def test_delete_exercise_refreshes_inactive_workouts_and_history(active):
    store, workout, exercise, we = active
    await store.add_set_to_exercise(we.id, ExerciseSetCreate(weight=100, reps=5))
    await store.complete_workout(workout.id)
    other = await store.create_workout(WorkoutCreate(name="Accessory"))
    await store.add_exercise_to_workout(other.id, exercise.id)
    await store.fetch_workout_history()
    assert store.history[0].total_volume == 500

    await store.delete_exercise(exercise.id)
    counts = {w.id: (w.exercises_count, w.total_volume) for w in store.workouts}
    assert counts == {workout.id: (0, 0.0), other.id: (0, 0.0)}
    assert store.history[0].total_volume == 0
    assert store.history[0].exercise_data == {}


async def test_failed_mutation_leaves_cache_untouched(active):
    store, _, _, _ = active
    before = store.snapshot()
    with pytest.raises(NotFoundError):
        await store.update_workout(uuid.uuid4(), WorkoutUpdate(name="Ghost"))
    with pytest.raises(NotFoundError):
        await store.add_set_to_exercise(uuid.uuid4(), ExerciseSetCreate(weight=1, reps=1))
    assert store.snapshot() == before


async def test_metrics_and_progress(active):
    store, workout, exercise, we = active
    await store.add_set_to_exercise(we.id, ExerciseSetCreate(weight=120, reps=5))
    await store.complete_workout(workout.id)
    await store.fetch_workout_history()
    metrics = store.metrics()
    assert metrics["total_workouts"] == 1
    assert metrics["recent_workouts"] == 1
    assert metrics["total_volume"] == 600
    progress = store.exercise_progress()
    assert [p["max_weight"] for p in progress[str(exercise.id)]] == [120]


async def test_add_body_measurement_keeps_newest_first(store):
    await store.add_body_measurement(BodyMeasurementCreate(weight=80, measurement_date=date(2024, 3, 1)))
    await store.add_body_measurement(BodyMeasurementCreate(weight=82, measurement_date=date(2024, 1, 1)))
    assert [m.weight for m in store.measurements] == [80, 82]


async def test_snapshot_restore(active, db):
    store, _, _, we = active
    await store.add_set_to_exercise(we.id, ExerciseSetCreate(weight=100, reps=5))
    snapshot = store.snapshot()
    restored = WorkoutStore(db, USER)
    restored.restore(snapshot)
    assert restored.snapshot() == snapshot
    assert restored.active_workout.total_volume == 500
