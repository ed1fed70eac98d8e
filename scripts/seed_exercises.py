"""Seed the default exercise categories and library (is_default=True).

Idempotent: categories and exercises that already exist by name are skipped.
Run from the repo root: python scripts/seed_exercises.py
"""

import asyncio
import logging
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select

from vitalai.db.session import async_session_maker, engine
from vitalai.models.exercise import Exercise, ExerciseCategory

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("seed_exercises")

# category -> [(name, primary muscles, secondary muscles, instructions)]
DEFAULT_LIBRARY = {
    "Chest": [
        ("Bench Press", ["chest"], ["triceps", "shoulders"], "Lower the bar to mid-chest, press to lockout."),
        ("Incline Dumbbell Press", ["upper chest"], ["shoulders", "triceps"], "Press from a 30-45 degree bench."),
        ("Push-Up", ["chest"], ["triceps", "core"], "Keep a straight line from head to heels."),
    ],
    "Back": [
        ("Deadlift", ["lower back", "hamstrings"], ["glutes", "traps"], "Hinge at the hips, keep the bar close."),
        ("Pull-Up", ["lats"], ["biceps", "rear delts"], "Pull until the chin clears the bar."),
        ("Barbell Row", ["lats", "rhomboids"], ["biceps"], "Row to the lower chest with a flat back."),
    ],
    "Legs": [
        ("Squat", ["quadriceps", "glutes"], ["hamstrings", "core"], "Break at hips and knees, reach parallel."),
        ("Romanian Deadlift", ["hamstrings"], ["glutes", "lower back"], "Soft knees, push the hips back."),
        ("Walking Lunge", ["quadriceps", "glutes"], ["hamstrings"], "Step forward and drop the back knee."),
    ],
    "Shoulders": [
        ("Overhead Press", ["shoulders"], ["triceps", "upper chest"], "Press overhead, finish with the bar over mid-foot."),
        ("Lateral Raise", ["side delts"], [], "Raise the dumbbells to shoulder height."),
    ],
    "Arms": [
        ("Barbell Curl", ["biceps"], ["forearms"], "Keep the elbows pinned to your sides."),
        ("Triceps Pushdown", ["triceps"], [], "Extend fully at the bottom of each rep."),
    ],
    "Core": [
        ("Plank", ["core"], ["shoulders"], "Brace and hold a straight line."),
        ("Hanging Leg Raise", ["abs", "hip flexors"], [], "Raise the legs without swinging."),
    ],
    "Cardio": [
        ("Running", ["legs"], ["cardiovascular"], "Log duration and distance per set."),
        ("Rowing Machine", ["back", "legs"], ["cardiovascular"], "Drive with the legs, then pull."),
    ],
}


async def seed() -> None:
    async with async_session_maker() as session:
        result = await session.execute(select(ExerciseCategory))
        categories = {c.name: c for c in result.scalars().all()}
        result = await session.execute(select(Exercise.name).where(Exercise.is_default.is_(True)))
        existing = set(result.scalars().all())

        added = 0
        for category_name, exercises in DEFAULT_LIBRARY.items():
            category = categories.get(category_name)
            if category is None:
                category = ExerciseCategory(name=category_name)
                session.add(category)
                await session.flush()
                categories[category_name] = category
                logger.info("Added category %s", category_name)
            for name, primary, secondary, instructions in exercises:
                if name in existing:
                    continue
                session.add(
                    Exercise(
                        name=name,
                        category_id=category.id,
                        primary_muscles=primary,
                        secondary_muscles=secondary,
                        instructions=instructions,
                        is_default=True,
                    )
                )
                added += 1
        await session.commit()
        logger.info("Seeded %d default exercises", added)
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
