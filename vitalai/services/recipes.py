"""Recipe generation through Gemini, with prompt building and response parsing."""

from __future__ import annotations

import copy
import json
import logging
import random
import re
import time
from typing import Any

from vitalai.core.errors import LLMError, LLMResponseError
from vitalai.core.recipe_data import INDIAN_FOOD_IMAGES, MOCK_INDIAN_RECIPES
from vitalai.schemas.recipes import IngredientRecipeRequest, RecipeSuggestionRequest
from vitalai.services.llm import GeminiClient

logger = logging.getLogger(__name__)

_FENCED_JSON_RE = re.compile(r"```json\n([\s\S]*?)\n```")
_FENCED_RE = re.compile(r"```\n([\s\S]*?)\n```")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")

_RECIPE_FORMAT = """. For each recipe, provide the following details:
    1. A creative recipe name
    2. Short description (1-2 sentences)
    3. Preparation time in minutes (just the number)
    4. Nutritional information: approximate calories, protein (g), carbs (g), fat (g)
    5. List of ingredients with quantities
    6. Step-by-step cooking instructions
    7. Tags (like "high-protein", "low-carb", "vegetarian", "spicy", etc.)
    8. Spice level (mild, medium, hot, or very hot)

    Format the response as valid JSON with this exact structure for each recipe:
    {
      "recipes": [
        {
          "title": "Recipe Name",
          "description": "Short description",
          "prepTime": prep_time_in_minutes,
          "calories": calories_number,
          "protein": protein_in_grams,
          "carbs": carbs_in_grams,
          "fat": fat_in_grams,
          "ingredients": ["ingredient 1", "ingredient 2", ...],
          "instructions": ["step 1", "step 2", ...],
          "tags": ["tag1", "tag2", ...],
          "spiceLevel": "mild/medium/hot/very hot"
        },
        ...
      ]
    }
"""


def build_recipe_prompt(req: RecipeSuggestionRequest) -> str:
    prompt = f"Generate 3 {req.cuisine} cuisine recipes"
    if req.diet_type:
        prompt += f" suitable for {', '.join(req.diet_type)} diet"
    if req.meal_type:
        prompt += f" for {req.meal_type}"
    if req.ingredients:
        prompt += f" using {', '.join(req.ingredients)}"
    if req.exclude_ingredients:
        prompt += f" without {', '.join(req.exclude_ingredients)}"
    if req.max_prep_time:
        prompt += f" that can be prepared in under {req.max_prep_time} minutes"
    prompt += _RECIPE_FORMAT
    prompt += (
        f"\n    Focus on authentic {req.cuisine} recipes only. "
        "Make sure all values are provided in the required format."
    )
    return prompt


def extract_json(text: str) -> Any:
    """Parse model output as JSON.

    Tries the whole text first, then a ```json fence, a bare fence, and
    finally the outermost {...} span.
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        pass
    for pattern in (_FENCED_JSON_RE, _FENCED_RE, _OBJECT_RE):
        m = pattern.search(text or "")
        if not m:
            continue
        candidate = m.group(1) if m.groups() else m.group(0)
        try:
            return json.loads(candidate)
        except ValueError:
            logger.warning("Failed to parse JSON candidate (%d chars)", len(candidate))
            continue
    raise LLMResponseError("No valid JSON found in API response")


def enrich_recipes(recipes: list[dict], now_ms: int | None = None, rng: random.Random | None = None) -> list[dict]:
    """Attach ``recipe-<epoch ms>-<i>`` ids and an image from the pool."""
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    rng = rng or random
    return [
        {**recipe, "id": f"recipe-{now_ms}-{i}", "imageUrl": rng.choice(INDIAN_FOOD_IMAGES)}
        for i, recipe in enumerate(recipes)
    ]


def mock_recipes(error: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"recipes": copy.deepcopy(MOCK_INDIAN_RECIPES), "_source": "mock"}
    if error:
        body["_error"] = error
    return body


async def suggest_recipes(client: GeminiClient, req: RecipeSuggestionRequest) -> dict[str, Any]:
    """Generated recipes, or the fallback set on any generation failure.

    The returned ``recipes`` list is never empty.
    """
    prompt = build_recipe_prompt(req)
    try:
        text = await client.generate_content(prompt, temperature=0.7, max_output_tokens=1024)
        data = extract_json(text)
        recipes = data.get("recipes") if isinstance(data, dict) else None
        if not isinstance(recipes, list) or not recipes:
            raise LLMResponseError("No recipes found in API response")
        if not all(isinstance(r, dict) for r in recipes):
            raise LLMResponseError("Recipes in API response are not objects")
        return {"recipes": enrich_recipes(recipes), "_source": "gemini"}
    except LLMError as e:
        logger.warning("Recipe generation failed, using mock recipes: %s", e)
        return mock_recipes(str(e))


# --- Recipes from ingredients ---


def build_ingredient_prompt(req: IngredientRecipeRequest) -> str:
    exclude = (
        f"Exclude these ingredients: {', '.join(req.exclude_ingredients)}" if req.exclude_ingredients else ""
    )
    return f"""
      As a professional nutritionist and chef, create 3 healthy recipes based on these ingredients: {', '.join(req.ingredients)}.

      Dietary preferences: {', '.join(req.dietary_preferences) or 'None specified'}
      Meal type: {req.meal_type}
      Health focus areas: {', '.join(req.health_focus) or 'None specified'}
      {exclude}

      For each recipe, provide:
      1. A creative recipe name
      2. A brief, appetizing description
      3. List of all ingredients with measurements
      4. Step-by-step cooking instructions
      5. Preparation time and cooking time
      6. Number of servings
      7. Detailed nutritional information (calories, protein, carbs, fat, fiber, vitamins, minerals)
      8. Health benefits related to the ingredients
      9. Possible ingredient substitutions for dietary restrictions
      10. Cooking tips for best results

      Format your response as JSON with this structure:
      {{
        "recipes": [
          {{
            "id": "unique-id-1",
            "name": "Recipe Name",
            "description": "Brief description",
            "prepTime": "15 minutes",
            "cookTime": "30 minutes",
            "servings": 4,
            "ingredients": ["1 cup ingredient 1", "2 tbsp ingredient 2"],
            "instructions": ["Step 1", "Step 2"],
            "nutritionalInfo": {{
              "calories": 350,
              "protein": "20g",
              "carbs": "30g",
              "fat": "15g",
              "fiber": "5g",
              "sugar": "10g",
              "sodium": "300mg",
              "vitamins": ["Vitamin A", "Vitamin C"],
              "minerals": ["Iron", "Calcium"]
            }},
            "healthBenefits": ["Benefit 1", "Benefit 2"],
            "substitutions": ["Sub 1", "Sub 2"],
            "tips": "Tips for the recipe",
            "imageUrl": "https://images.unsplash.com/photo-1546069901-ba9599a7e63c"
          }}
        ]
      }}

      For imageUrl, provide relevant high-quality food images from Unsplash that showcase healthy dishes similar to what you're describing.
      Make sure your response is valid JSON that can be parsed with JSON.parse().
    """


def strip_code_fences(text: str) -> str:
    return text.replace("```json", "").replace("```", "").strip()


async def recipes_from_ingredients(client: GeminiClient, req: IngredientRecipeRequest) -> dict[str, Any]:
    """Generate recipes from ingredients. No fallback: every failure raises LLMError."""
    logger.info("Generating recipes from ingredients: %s", req.ingredients)
    text = await client.generate_content(
        build_ingredient_prompt(req), temperature=0.7, max_output_tokens=4000, topP=0.8, topK=40
    )
    try:
        data = json.loads(strip_code_fences(text))
    except ValueError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", text[:500])
        raise LLMResponseError("The AI generated an invalid response") from e
    if not isinstance(data, dict):
        raise LLMResponseError("The AI generated an invalid response")
    recipes = data.get("recipes")
    if isinstance(recipes, list):
        data["recipes"] = [
            {**r, "id": r.get("id") or f"recipe-{req.response_id}-{i}"} if isinstance(r, dict) else r
            for i, r in enumerate(recipes)
        ]
    return data
