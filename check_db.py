import asyncio
import os
import sys

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Run from the repo root
sys.path.append(os.getcwd())

from vitalai.db.session import async_session_maker, engine

TABLES = [
    "exercise_categories",
    "exercises",
    "workouts",
    "workout_exercises",
    "exercise_sets",
    "body_measurements",
    "user_preferences",
    "fasting_sessions",
    "water_intake",
    "food_entries",
    "heart_health_checks",
    "health_risk_assessments",
    "health_metrics",
    "fitness_goals",
    "health_risk_factors",
    "ai_feedback",
]


async def check_data():
    async with async_session_maker() as session:
        print(f"Checking tables: {TABLES}")
        for table in TABLES:
            try:
                result = await session.execute(text(f"SELECT count(*) FROM {table}"))
                count = result.scalar()
                print(f"Table '{table}' row count: {count}")
                if count > 0:
                    key = "user_id" if table == "user_preferences" else "id"
                    sample = await session.execute(text(f"SELECT {key} FROM {table} LIMIT 1"))
                    print(f"  Sample {key} from {table}: {sample.scalar()}")
            except SQLAlchemyError as e:
                print(f"Error querying {table}: {e}")
                await session.rollback()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
