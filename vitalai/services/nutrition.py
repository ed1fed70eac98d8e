"""Fitness plan and food analysis through Groq."""

from __future__ import annotations

import json
import logging
import re
import uuid
from typing import Any

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.core.errors import LLMResponseError
from vitalai.schemas.recipes import FitnessPlan, FitnessPlanRequest, FoodAnalysis, FoodAnalysisRequest
from vitalai.schemas.tracking import FoodEntryCreate
from vitalai.services import tracking
from vitalai.services.llm import GroqClient

logger = logging.getLogger(__name__)

_CONTROL_CHARS_RE = re.compile(r"[\u0000-\u001F\u007F-\u009F]")
_LEADING_JSON_RE = re.compile(r"^json\s*")

FITNESS_PLAN_SYSTEM_PROMPT = """You are a professional fitness coach and nutritionist. You must respond ONLY with a valid JSON object, no additional text or explanation. The JSON must exactly match this structure:
{
  "dailyCalories": "2000",
  "macroSplit": {
    "protein": 30,
    "carbs": 40,
    "fats": 30
  },
  "workoutPlan": "<h4>Weekly Workout Schedule</h4><ul><li>Day 1: Workout details</li></ul>",
  "mealPlan": "<h4>Daily Meal Plan</h4><ul><li>Breakfast: Meal details</li></ul>",
  "tips": ["tip1", "tip2", "tip3"]
}"""

NUTRITION_SYSTEM_PROMPT = "You are a nutritionist. Respond only with valid JSON containing nutritional analysis."

VISION_PROMPT = (
    "Analyze this food image. List all visible food items, their approximate portions, and preparation methods."
)


def clean_llm_json(content: str) -> str:
    """Drop a leading ``json`` marker and control characters."""
    content = _LEADING_JSON_RE.sub("", content.strip())
    return _CONTROL_CHARS_RE.sub("", content).strip()


def fitness_plan_prompt(req: FitnessPlanRequest) -> str:
    return (
        "Based on these details, create a fitness plan (respond ONLY with the JSON object, no other text):\n"
        f"Age: {req.age}\n"
        f"Gender: {req.gender}\n"
        f"Weight: {req.weight}kg\n"
        f"Height: {req.height}cm\n"
        f"Activity Level: {req.activity_level}\n"
        f"Goal: {req.goal}"
    )


def parse_fitness_plan(content: str) -> FitnessPlan:
    """Parse and validate a plan; the macro split must sum to 100 (+/- 1)."""
    try:
        data = json.loads(clean_llm_json(content))
    except ValueError as e:
        raise LLMResponseError("Failed to parse fitness plan data") from e
    if not isinstance(data, dict):
        raise LLMResponseError("Invalid response format")
    try:
        plan = FitnessPlan.model_validate(data)
    except ValidationError as e:
        raise LLMResponseError("Missing required fields in response") from e
    split = plan.macro_split
    if abs(split.protein + split.carbs + split.fats - 100) > 1:
        raise LLMResponseError("Invalid macro split percentages")
    return plan


async def generate_fitness_plan(client: GroqClient, req: FitnessPlanRequest) -> FitnessPlan:
    content = await client.chat(
        [
            {"role": "system", "content": FITNESS_PLAN_SYSTEM_PROMPT},
            {"role": "user", "content": fitness_plan_prompt(req)},
        ],
        max_tokens=1500,
        temperature=0.3,
    )
    try:
        return parse_fitness_plan(content)
    except LLMResponseError:
        logger.error("Failed fitness plan content: %s", content[:500])
        raise


def _image_url(image: str) -> str:
    return image if image.startswith("data:") else f"data:image/jpeg;base64,{image}"


async def describe_food_image(client: GroqClient, image: str) -> str:
    return await client.chat(
        [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": VISION_PROMPT},
                    {"type": "image_url", "image_url": {"url": _image_url(image)}},
                ],
            }
        ],
        model=client.vision_model,
        max_tokens=1024,
        temperature=0.3,
    )


def _number(value: Any) -> float:
    """Models return numbers as strings ("350", "50g"); keep the leading number."""
    if isinstance(value, (int, float)):
        return float(value)
    m = re.search(r"\d+(?:\.\d+)?", str(value or ""))
    return float(m.group(0)) if m else 0.0


def parse_nutrition(content: str) -> dict[str, Any]:
    try:
        data = json.loads(clean_llm_json(content))
    except ValueError as e:
        raise LLMResponseError("Failed to analyze nutritional content") from e
    if not isinstance(data, dict):
        raise LLMResponseError("Failed to analyze nutritional content")
    return {
        "calories": _number(data.get("calories")),
        "protein": _number(data.get("protein")),
        "carbs": _number(data.get("carbs")),
        "fat": _number(data.get("fat")),
        "analysis": str(data.get("analysis") or ""),
    }


def scanned_food_name(description: str) -> str:
    first = description.split(".")[0].strip()
    return f"Scanned: {first}"[:255]


async def analyze_food(
    client: GroqClient,
    req: FoodAnalysisRequest,
    db: AsyncSession | None = None,
    user_id: uuid.UUID | None = None,
) -> FoodAnalysis:
    """Describe the food (vision model when an image is given), then estimate its macros.

    With ``req.log`` the estimate is also recorded as today's food entry.
    """
    if req.image:
        description = await describe_food_image(client, req.image)
    elif req.description and req.description.strip():
        description = req.description.strip()
    else:
        raise ValueError("Either description or image is required")

    content = await client.chat(
        [
            {"role": "system", "content": NUTRITION_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": (
                    "Analyze this food description and respond with a JSON object exactly in this format:\n"
                    '{"calories": "350", "protein": "50", "carbs": "15", "fat": "10", '
                    '"analysis": "<h4>Nutritional Analysis</h4><p>Analysis details here...</p>"}\n'
                    f"Food description: {description}"
                ),
            },
        ],
        max_tokens=1500,
        temperature=0.3,
    )
    result = FoodAnalysis(**parse_nutrition(content), description=description)

    if req.log and db is not None and user_id is not None:
        entry = FoodEntryCreate(
            food=scanned_food_name(description),
            calories=result.calories,
            protein=result.protein,
            carbs=result.carbs,
            fat=result.fat,
        )
        try:
            tracking.validate_food_entry(entry)
        except tracking.TrackerError:
            logger.warning("Skipping food log for %s: analysis has no positive macros", user_id)
        else:
            await tracking.add_food_entry(db, user_id, entry)
            result.logged = True
    return result
