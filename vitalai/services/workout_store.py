"""Per-session workout cache over the data-access layer.

WorkoutStore holds what a client session has fetched (workouts, history,
measurements, exercises, categories, the active workout) and patches those
collections after each successful mutation instead of refetching. A failed
call propagates and leaves the cache as it was.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from vitalai.schemas.body import BodyMeasurementCreate, BodyMeasurementRead
from vitalai.schemas.exercise import ExerciseCategoryRead, ExerciseCreate, ExerciseRead, ExerciseUpdate
from vitalai.schemas.workout import (
    ExerciseSetCreate,
    ExerciseSetRead,
    ExerciseSetUpdate,
    WorkoutCreate,
    WorkoutExerciseRead,
    WorkoutHistoryEntry,
    WorkoutRead,
    WorkoutReadWithExercises,
    WorkoutUpdate,
)
from vitalai.services import aggregation, workout_api

logger = logging.getLogger(__name__)


def _replace(items: list, item: Any) -> list:
    return [item if x.id == item.id else x for x in items]


def _drop(items: list, item_id: uuid.UUID) -> list:
    return [x for x in items if x.id != item_id]


class WorkoutStore:
    def __init__(
        self,
        db: AsyncSession,
        user_id: uuid.UUID,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ):
        self.db = db
        self.user_id = user_id
        # Separate sessions for the concurrent page-load batch
        self.session_factory = session_factory
        self.workouts: list[WorkoutRead] = []
        self.history: list[WorkoutHistoryEntry] = []
        self.measurements: list[BodyMeasurementRead] = []
        self.exercises: list[ExerciseRead] = []
        self.categories: list[ExerciseCategoryRead] = []
        self.active_workout: WorkoutReadWithExercises | None = None

    # --- Loading ---

    async def load(self) -> "WorkoutStore":
        """Page-load batch: workouts, history and measurements together, then the library."""
        readers = (
            workout_api.get_workouts,
            workout_api.get_workout_history,
            workout_api.get_body_measurements,
        )
        if self.session_factory is not None:
            results = await asyncio.gather(*(self._read_isolated(fn) for fn in readers))
        else:
            # A single AsyncSession cannot run queries concurrently
            results = [await fn(self.db, self.user_id) for fn in readers]
        self.workouts, self.history, self.measurements = results
        self.exercises = await workout_api.get_exercises(self.db)
        self.categories = await workout_api.get_exercise_categories(self.db)
        logger.debug(
            "Loaded store for %s: %d workouts, %d history, %d measurements",
            self.user_id,
            len(self.workouts),
            len(self.history),
            len(self.measurements),
        )
        return self

    async def _read_isolated(self, fn):
        async with self.session_factory() as session:
            return await fn(session, self.user_id)

    async def fetch_workouts(self) -> list[WorkoutRead]:
        self.workouts = await workout_api.get_workouts(self.db, self.user_id)
        return self.workouts

    async def fetch_workout_history(self) -> list[WorkoutHistoryEntry]:
        self.history = await workout_api.get_workout_history(self.db, self.user_id)
        return self.history

    async def fetch_body_measurements(self) -> list[BodyMeasurementRead]:
        self.measurements = await workout_api.get_body_measurements(self.db, self.user_id)
        return self.measurements

    async def fetch_exercises(
        self, category_id: uuid.UUID | None = None, search_term: str | None = None
    ) -> list[ExerciseRead]:
        self.exercises = await workout_api.get_exercises(self.db, category_id, search_term)
        return self.exercises

    async def fetch_categories(self) -> list[ExerciseCategoryRead]:
        self.categories = await workout_api.get_exercise_categories(self.db)
        return self.categories

    async def fetch_workout_by_id(self, workout_id: uuid.UUID) -> WorkoutReadWithExercises | None:
        """Fetch one workout in full and make it the active workout."""
        self.active_workout = await workout_api.get_workout_by_id(self.db, self.user_id, workout_id)
        return self.active_workout

    # --- Workouts ---

    async def create_workout(self, data: WorkoutCreate) -> WorkoutRead:
        workout = await workout_api.create_workout(self.db, self.user_id, data)
        self.workouts = [workout, *self.workouts]
        return workout

    async def update_workout(self, workout_id: uuid.UUID, data: WorkoutUpdate) -> WorkoutRead:
        workout = await workout_api.update_workout(self.db, self.user_id, workout_id, data)
        self._patch_workout(workout)
        return workout

    async def complete_workout(self, workout_id: uuid.UUID) -> WorkoutRead:
        workout = await workout_api.complete_workout(self.db, self.user_id, workout_id)
        self._patch_workout(workout)
        return workout

    async def delete_workout(self, workout_id: uuid.UUID) -> None:
        await workout_api.delete_workout(self.db, self.user_id, workout_id)
        self.workouts = _drop(self.workouts, workout_id)
        self.history = _drop(self.history, workout_id)
        if self.active_workout and self.active_workout.id == workout_id:
            self.active_workout = None

    def _patch_workout(self, workout: WorkoutRead) -> None:
        self.workouts = _replace(self.workouts, workout)
        if self.active_workout and self.active_workout.id == workout.id:
            nested = self.active_workout.workout_exercises
            self.active_workout = WorkoutReadWithExercises(
                **workout.model_dump(exclude={"total_volume"}),
                workout_exercises=nested,
                total_volume=aggregation.total_volume(nested),
            )

    # --- Exercise library ---

    async def create_exercise(self, data: ExerciseCreate) -> ExerciseRead:
        exercise = await workout_api.create_exercise(self.db, data, user_id=self.user_id)
        self.exercises = sorted([*self.exercises, exercise], key=lambda e: e.name)
        return exercise

    async def update_exercise(self, exercise_id: uuid.UUID, data: ExerciseUpdate) -> ExerciseRead:
        exercise = await workout_api.update_exercise(self.db, self.user_id, exercise_id, data)
        self.exercises = _replace(self.exercises, exercise)
        return exercise

    async def delete_exercise(self, exercise_id: uuid.UUID) -> None:
        """Delete an exercise; its workout entries cascade, so workouts and history are refetched."""
        await workout_api.delete_exercise(self.db, self.user_id, exercise_id)
        self.exercises = _drop(self.exercises, exercise_id)
        self.workouts = await workout_api.get_workouts(self.db, self.user_id)
        self.history = await workout_api.get_workout_history(self.db, self.user_id)
        if self.active_workout:
            kept = [we for we in self.active_workout.workout_exercises if we.exercise_id != exercise_id]
            self._set_active_exercises(kept)

    # --- Active workout contents ---

    def _set_active_exercises(self, workout_exercises: list[WorkoutExerciseRead]) -> None:
        active = self.active_workout
        active.workout_exercises = workout_exercises
        active.exercises_count = len(workout_exercises)
        active.total_volume = aggregation.total_volume(workout_exercises)
        self.workouts = [
            w.model_copy(update={"exercises_count": active.exercises_count, "total_volume": active.total_volume})
            if w.id == active.id
            else w
            for w in self.workouts
        ]

    def _patch_sets(self, workout_exercise_id: uuid.UUID, fn) -> None:
        if not self.active_workout:
            return
        patched = [
            we.model_copy(update={"sets": fn(we.sets)}) if we.id == workout_exercise_id else we
            for we in self.active_workout.workout_exercises
        ]
        self._set_active_exercises(patched)

    def _find_set_owner(self, set_id: uuid.UUID) -> uuid.UUID | None:
        if not self.active_workout:
            return None
        for we in self.active_workout.workout_exercises:
            if any(s.id == set_id for s in we.sets):
                return we.id
        return None

    async def add_exercise_to_workout(
        self,
        workout_id: uuid.UUID,
        exercise_id: uuid.UUID,
        order_index: int | None = None,
        notes: str | None = None,
    ) -> WorkoutExerciseRead:
        we = await workout_api.add_exercise_to_workout(
            self.db, self.user_id, workout_id, exercise_id, order_index, notes
        )
        if self.active_workout and self.active_workout.id == workout_id:
            self._set_active_exercises(
                sorted([*self.active_workout.workout_exercises, we], key=lambda x: x.order_index)
            )
        else:
            self.workouts = [
                w.model_copy(update={"exercises_count": w.exercises_count + 1}) if w.id == workout_id else w
                for w in self.workouts
            ]
        return we

    async def remove_exercise_from_workout(self, workout_exercise_id: uuid.UUID) -> None:
        await workout_api.remove_exercise_from_workout(self.db, self.user_id, workout_exercise_id)
        if self.active_workout:
            self._set_active_exercises(_drop(self.active_workout.workout_exercises, workout_exercise_id))

    async def add_set_to_exercise(
        self, workout_exercise_id: uuid.UUID, data: ExerciseSetCreate
    ) -> ExerciseSetRead:
        new_set = await workout_api.add_set_to_exercise(self.db, self.user_id, workout_exercise_id, data)
        self._patch_sets(
            workout_exercise_id, lambda sets: sorted([*sets, new_set], key=lambda s: s.set_number)
        )
        return new_set

    async def update_set(self, set_id: uuid.UUID, data: ExerciseSetUpdate) -> ExerciseSetRead:
        updated = await workout_api.update_set(self.db, self.user_id, set_id, data)
        owner = self._find_set_owner(set_id)
        if owner:
            self._patch_sets(owner, lambda sets: _replace(sets, updated))
        return updated

    async def delete_set(self, set_id: uuid.UUID) -> None:
        owner = self._find_set_owner(set_id)
        await workout_api.delete_set(self.db, self.user_id, set_id)
        if owner:
            self._patch_sets(owner, lambda sets: _drop(sets, set_id))

    # --- Body ---

    async def add_body_measurement(self, data: BodyMeasurementCreate) -> BodyMeasurementRead:
        m = await workout_api.add_body_measurement(self.db, self.user_id, data)
        self.measurements = sorted(
            [m, *self.measurements], key=lambda x: x.measurement_date, reverse=True
        )
        return m

    # --- Derived views ---

    def metrics(self) -> dict[str, Any]:
        return aggregation.workout_metrics(self.workouts)

    def exercise_progress(self) -> dict[str, list[dict[str, Any]]]:
        """Max-weight series for every exercise that appears in the history."""
        ids = {k for entry in self.history for k in entry.exercise_data}
        return {k: aggregation.exercise_progress(self.history, k) for k in sorted(ids)}

    # --- Snapshot ---

    def snapshot(self) -> dict[str, Any]:
        """JSON-serialisable copy of the cached collections."""
        return {
            "user_id": str(self.user_id),
            "workouts": [w.model_dump(mode="json") for w in self.workouts],
            "history": [h.model_dump(mode="json") for h in self.history],
            "measurements": [m.model_dump(mode="json") for m in self.measurements],
            "exercises": [e.model_dump(mode="json") for e in self.exercises],
            "categories": [c.model_dump(mode="json") for c in self.categories],
            "active_workout": self.active_workout.model_dump(mode="json") if self.active_workout else None,
        }

    def restore(self, snapshot: dict[str, Any]) -> None:
        self.workouts = [WorkoutRead.model_validate(w) for w in snapshot.get("workouts", [])]
        self.history = [WorkoutHistoryEntry.model_validate(h) for h in snapshot.get("history", [])]
        self.measurements = [BodyMeasurementRead.model_validate(m) for m in snapshot.get("measurements", [])]
        self.exercises = [ExerciseRead.model_validate(e) for e in snapshot.get("exercises", [])]
        self.categories = [ExerciseCategoryRead.model_validate(c) for c in snapshot.get("categories", [])]
        active = snapshot.get("active_workout")
        self.active_workout = WorkoutReadWithExercises.model_validate(active) if active else None
