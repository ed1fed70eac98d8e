"""Daily trackers: preferences, fasting, water, macros, heart health."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, time, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.core.constants import (
    DEFAULT_CALORIE_GOAL,
    DEFAULT_CARBS_GOAL,
    DEFAULT_EQUIPMENT,
    DEFAULT_FAT_GOAL,
    DEFAULT_FITNESS_GOALS,
    DEFAULT_FITNESS_LEVEL,
    DEFAULT_PROTEIN_GOAL,
    DEFAULT_WATER_GOAL_ML,
    DEFAULT_WORKOUT_DURATION,
    DEFAULT_WORKOUT_FREQUENCY,
    ML_TO_OZ,
)
from vitalai.core.enums import HealthStatus, WaterUnit
from vitalai.core.errors import NotFoundError
from vitalai.core.timeutils import as_utc, utcnow
from vitalai.models.tracking import (
    FastingSession,
    FoodEntry,
    HeartHealthCheck,
    UserPreferences,
    WaterIntake,
)
from vitalai.schemas.tracking import (
    FastingStatus,
    FoodEntryCreate,
    FoodEntryRead,
    HeartHealthCreate,
    HeartHealthRead,
    HeartHealthStatuses,
    MacroProgress,
    MacroSummary,
    PreferencesRead,
    PreferencesUpdate,
    WaterHistoryItem,
    WaterSummary,
)

logger = logging.getLogger(__name__)


class TrackerError(ValueError):
    """Request conflicts with tracker state (e.g. a fast is already running)."""


# --- Unit conversion ---


def oz_to_ml(oz: float) -> int:
    return round(oz / ML_TO_OZ)


def ml_to_oz(ml: float) -> float:
    return round(ml * ML_TO_OZ, 1)


def _in_unit(ml: float, unit: WaterUnit) -> float:
    return ml_to_oz(ml) if unit == WaterUnit.OZ else ml


def _percentage(current: float, goal: float) -> int:
    if goal <= 0:
        return 0
    return min(100, round(current / goal * 100))


def _today_bounds(now: datetime | None = None) -> tuple[datetime, datetime]:
    now = as_utc(now) or utcnow()
    start = datetime.combine(now.date(), time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


# --- Preferences ---


def _default_preferences(user_id: uuid.UUID) -> UserPreferences:
    return UserPreferences(
        user_id=user_id,
        fitness_level=DEFAULT_FITNESS_LEVEL,
        workout_duration=DEFAULT_WORKOUT_DURATION,
        workout_frequency=DEFAULT_WORKOUT_FREQUENCY,
        fitness_goals=list(DEFAULT_FITNESS_GOALS),
        available_equipment=list(DEFAULT_EQUIPMENT),
        water_goal_ml=DEFAULT_WATER_GOAL_ML,
        water_unit=WaterUnit.ML.value,
        calorie_goal=DEFAULT_CALORIE_GOAL,
        protein_goal=DEFAULT_PROTEIN_GOAL,
        carbs_goal=DEFAULT_CARBS_GOAL,
        fat_goal=DEFAULT_FAT_GOAL,
    )


async def _get_or_create_preferences(db: AsyncSession, user_id: uuid.UUID) -> UserPreferences:
    result = await db.execute(select(UserPreferences).where(UserPreferences.user_id == user_id))
    prefs = result.scalar_one_or_none()
    if prefs is None:
        prefs = _default_preferences(user_id)
        db.add(prefs)
        await db.flush()
    return prefs


async def get_preferences(db: AsyncSession, user_id: uuid.UUID) -> PreferencesRead:
    """Stored preferences, or the defaults for a fresh profile (not persisted)."""
    result = await db.execute(select(UserPreferences).where(UserPreferences.user_id == user_id))
    prefs = result.scalar_one_or_none() or _default_preferences(user_id)
    return PreferencesRead.model_validate(prefs)


async def update_preferences(db: AsyncSession, user_id: uuid.UUID, data: PreferencesUpdate) -> PreferencesRead:
    """Merge the provided fields into the stored (or default) preferences."""
    prefs = await _get_or_create_preferences(db, user_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        if isinstance(v, WaterUnit):
            v = v.value
        setattr(prefs, k, v)
    await db.flush()
    await db.refresh(prefs)
    return PreferencesRead.model_validate(prefs)


# --- Fasting ---


async def _active_fast(db: AsyncSession, user_id: uuid.UUID) -> FastingSession | None:
    result = await db.execute(
        select(FastingSession)
        .where(FastingSession.user_id == user_id, FastingSession.is_active.is_(True))
        .order_by(FastingSession.start_time.desc())
    )
    return result.scalars().first()


async def _latest_fast(db: AsyncSession, user_id: uuid.UUID) -> FastingSession | None:
    result = await db.execute(
        select(FastingSession)
        .where(FastingSession.user_id == user_id)
        .order_by(FastingSession.start_time.desc())
    )
    return result.scalars().first()


def fasting_status(session: FastingSession | None, now: datetime | None = None) -> FastingStatus:
    """Elapsed/remaining/progress for a fast.

    Ended sessions are measured up to their end_time.
    """
    if session is None:
        return FastingStatus()
    now = as_utc(now) or utcnow()
    start = as_utc(session.start_time)
    end = as_utc(session.end_time)
    target = session.target_hours * 3600
    elapsed = int(((end if end and not session.is_active else now) - start).total_seconds())
    elapsed = max(0, elapsed)
    return FastingStatus(
        active=session.is_active,
        session_id=session.id,
        start_time=start,
        end_time=end,
        target_hours=session.target_hours,
        elapsed_seconds=elapsed,
        remaining_seconds=max(0, target - elapsed),
        progress_pct=round(min(100.0, elapsed / target * 100), 1) if target else 0.0,
    )


async def start_fast(db: AsyncSession, user_id: uuid.UUID, target_hours: int) -> FastingStatus:
    if await _active_fast(db, user_id):
        raise TrackerError("A fast is already in progress")
    session = FastingSession(user_id=user_id, start_time=utcnow(), target_hours=target_hours, is_active=True)
    db.add(session)
    await db.flush()
    await db.refresh(session)
    logger.info("Started %dh fast for %s", target_hours, user_id)
    return fasting_status(session)


async def stop_fast(db: AsyncSession, user_id: uuid.UUID) -> FastingStatus:
    session = await _active_fast(db, user_id)
    if not session:
        raise NotFoundError("Active fast", user_id)
    session.end_time = utcnow()
    session.is_active = False
    await db.flush()
    return fasting_status(session)


async def reset_fast(db: AsyncSession, user_id: uuid.UUID) -> None:
    session = await _active_fast(db, user_id)
    if not session:
        raise NotFoundError("Active fast", user_id)
    await db.delete(session)
    await db.flush()


async def get_fasting_status(
    db: AsyncSession, user_id: uuid.UUID, now: datetime | None = None
) -> FastingStatus:
    """Status of the current (or most recent) fast; completes it once the target is reached."""
    now = as_utc(now) or utcnow()
    session = await _latest_fast(db, user_id)
    if session and session.is_active:
        target_end = as_utc(session.start_time) + timedelta(hours=session.target_hours)
        if now >= target_end:
            session.end_time = target_end
            session.is_active = False
            await db.flush()
            logger.info("Fast %s reached its %dh target", session.id, session.target_hours)
    return fasting_status(session, now)


# --- Water ---


async def add_water(
    db: AsyncSession, user_id: uuid.UUID, amount: float, unit: WaterUnit = WaterUnit.ML
) -> WaterIntake:
    amount_ml = oz_to_ml(amount) if unit == WaterUnit.OZ else round(amount)
    entry = WaterIntake(user_id=user_id, amount_ml=amount_ml, logged_at=utcnow())
    db.add(entry)
    await db.flush()
    await db.refresh(entry)
    return entry


async def get_water_summary(db: AsyncSession, user_id: uuid.UUID, now: datetime | None = None) -> WaterSummary:
    """Today's intake, goal and history in the preferred unit."""
    prefs = await get_preferences(db, user_id)
    start, end = _today_bounds(now)
    result = await db.execute(
        select(WaterIntake)
        .where(WaterIntake.user_id == user_id, WaterIntake.logged_at >= start, WaterIntake.logged_at < end)
        .order_by(WaterIntake.logged_at.desc())
    )
    entries = result.scalars().all()
    unit = WaterUnit(prefs.water_unit)
    current_ml = sum(e.amount_ml for e in entries)
    return WaterSummary(
        goal=_in_unit(prefs.water_goal_ml, unit),
        current=_in_unit(current_ml, unit),
        unit=unit,
        percentage=_percentage(current_ml, prefs.water_goal_ml),
        history=[
            WaterHistoryItem(id=e.id, amount=_in_unit(e.amount_ml, unit), time=as_utc(e.logged_at))
            for e in entries
        ],
    )


async def set_water_goal(
    db: AsyncSession, user_id: uuid.UUID, goal: float, unit: WaterUnit | None = None
) -> PreferencesRead:
    """Store the goal in ml; ``unit`` says what ``goal`` is in and becomes the preferred unit."""
    prefs = await _get_or_create_preferences(db, user_id)
    unit = unit or WaterUnit(prefs.water_unit)
    prefs.water_goal_ml = oz_to_ml(goal) if unit == WaterUnit.OZ else round(goal)
    prefs.water_unit = unit.value
    await db.flush()
    await db.refresh(prefs)
    return PreferencesRead.model_validate(prefs)


# --- Macros ---


def validate_food_entry(data: FoodEntryCreate) -> None:
    """A food needs a name and at least one positive macro value."""
    if not data.food.strip():
        raise TrackerError("Food name is required")
    if not any(v > 0 for v in (data.calories, data.protein, data.carbs, data.fat)):
        raise TrackerError("At least one of calories, protein, carbs or fat must be positive")


async def add_food_entry(db: AsyncSession, user_id: uuid.UUID, data: FoodEntryCreate) -> FoodEntryRead:
    validate_food_entry(data)
    entry = FoodEntry(user_id=user_id, **data.model_dump(), logged_at=utcnow())
    entry.food = entry.food.strip()
    db.add(entry)
    await db.flush()
    await db.refresh(entry)
    return FoodEntryRead.model_validate(entry)


async def delete_food_entry(db: AsyncSession, user_id: uuid.UUID, entry_id: uuid.UUID) -> None:
    result = await db.execute(
        select(FoodEntry).where(FoodEntry.id == entry_id, FoodEntry.user_id == user_id)
    )
    entry = result.scalar_one_or_none()
    if not entry:
        raise NotFoundError("Food entry", entry_id)
    await db.delete(entry)
    await db.flush()


async def get_macro_summary(db: AsyncSession, user_id: uuid.UUID, now: datetime | None = None) -> MacroSummary:
    """Today's totals against the goals; each percentage is capped at 100."""
    prefs = await get_preferences(db, user_id)
    start, end = _today_bounds(now)
    result = await db.execute(
        select(FoodEntry)
        .where(FoodEntry.user_id == user_id, FoodEntry.logged_at >= start, FoodEntry.logged_at < end)
        .order_by(FoodEntry.logged_at.desc())
    )
    entries = result.scalars().all()

    def progress(field: str, goal: int) -> MacroProgress:
        current = round(sum(getattr(e, field) or 0 for e in entries), 1)
        return MacroProgress(current=current, goal=goal, percentage=_percentage(current, goal))

    return MacroSummary(
        calories=progress("calories", prefs.calorie_goal),
        protein=progress("protein", prefs.protein_goal),
        carbs=progress("carbs", prefs.carbs_goal),
        fat=progress("fat", prefs.fat_goal),
        entries=[FoodEntryRead.model_validate(e) for e in entries],
    )


# --- Heart health ---

NO_DATA = "No data available"

HEART_RATE_MESSAGES = {
    HealthStatus.GOOD: "Your resting heart rate is low, which is often a sign of good cardiovascular fitness.",
    HealthStatus.NORMAL: "Your heart rate is within normal range.",
    HealthStatus.ALERT: "Your heart rate is elevated. This could be due to stress, caffeine, or other factors.",
}
BLOOD_PRESSURE_MESSAGES = {
    HealthStatus.GOOD: "Your blood pressure is normal.",
    HealthStatus.NORMAL: "Your blood pressure is elevated but not high.",
    HealthStatus.ALERT: (
        "Your blood pressure is higher than recommended. Consider consulting a healthcare professional."
    ),
}
STRESS_MESSAGES = {
    HealthStatus.GOOD: "Your reported stress level is low.",
    HealthStatus.NORMAL: "You're experiencing moderate stress levels.",
    HealthStatus.ALERT: "Your stress level is high. Consider stress-reduction activities.",
}
SLEEP_MESSAGES = {
    HealthStatus.GOOD: "You're getting the recommended amount of sleep.",
    HealthStatus.NORMAL: "You're getting slightly less sleep than recommended.",
}


# Missing and zero readings are both "unknown"


def heart_rate_status(bpm: int | None) -> HealthStatus:
    if not bpm:
        return HealthStatus.UNKNOWN
    if bpm < 60:
        return HealthStatus.GOOD
    if bpm < 100:
        return HealthStatus.NORMAL
    return HealthStatus.ALERT


def blood_pressure_status(systolic: int | None, diastolic: int | None) -> HealthStatus:
    if not systolic or not diastolic:
        return HealthStatus.UNKNOWN
    if systolic < 120 and diastolic < 80:
        return HealthStatus.GOOD
    if systolic < 130 and diastolic < 80:
        return HealthStatus.NORMAL
    return HealthStatus.ALERT


def stress_status(level: int | None) -> HealthStatus:
    if not level:
        return HealthStatus.UNKNOWN
    if level <= 3:
        return HealthStatus.GOOD
    if level <= 7:
        return HealthStatus.NORMAL
    return HealthStatus.ALERT


def sleep_status(hours: float | None) -> HealthStatus:
    """7-9 h good, 6 to under 7 h normal, anything else alert."""
    if not hours:
        return HealthStatus.UNKNOWN
    if 7 <= hours <= 9:
        return HealthStatus.GOOD
    if 6 <= hours < 7:
        return HealthStatus.NORMAL
    return HealthStatus.ALERT


def sleep_message(hours: float | None, status: HealthStatus) -> str:
    if status == HealthStatus.UNKNOWN:
        return NO_DATA
    if status == HealthStatus.ALERT:
        return "You may not be getting enough sleep." if hours < 6 else "You might be oversleeping."
    return SLEEP_MESSAGES[status]


def heart_health_statuses(check: HeartHealthCheck) -> HeartHealthStatuses:
    heart_rate = heart_rate_status(check.heart_rate)
    blood_pressure = blood_pressure_status(check.systolic, check.diastolic)
    stress = stress_status(check.stress_level)
    sleep = sleep_status(check.sleep_hours)
    return HeartHealthStatuses(
        heart_rate=heart_rate,
        blood_pressure=blood_pressure,
        stress=stress,
        sleep=sleep,
        messages={
            "heart_rate": HEART_RATE_MESSAGES.get(heart_rate, NO_DATA),
            "blood_pressure": BLOOD_PRESSURE_MESSAGES.get(blood_pressure, NO_DATA),
            "stress": STRESS_MESSAGES.get(stress, NO_DATA),
            "sleep": sleep_message(check.sleep_hours, sleep),
        },
    )


def _heart_read(check: HeartHealthCheck) -> HeartHealthRead:
    read = HeartHealthRead.model_validate(check)
    read.status = heart_health_statuses(check)
    return read


async def record_heart_health(db: AsyncSession, user_id: uuid.UUID, data: HeartHealthCreate) -> HeartHealthRead:
    check = HeartHealthCheck(user_id=user_id, **data.model_dump(), assessed_at=utcnow())
    db.add(check)
    await db.flush()
    await db.refresh(check)
    return _heart_read(check)


async def get_latest_heart_health(db: AsyncSession, user_id: uuid.UUID) -> HeartHealthRead | None:
    result = await db.execute(
        select(HeartHealthCheck)
        .where(HeartHealthCheck.user_id == user_id)
        .order_by(HeartHealthCheck.assessed_at.desc())
    )
    check = result.scalars().first()
    return _heart_read(check) if check else None
