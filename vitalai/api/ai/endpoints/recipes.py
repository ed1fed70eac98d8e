"""Recipes generated from a list of ingredients."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from vitalai.core.constants import RECIPE_COOKIE_MAX_AGE, RECIPE_COOKIE_NAME
from vitalai.core.errors import LLMError, LLMResponseError
from vitalai.schemas.recipes import IngredientRecipeRequest
from vitalai.services import recipes
from vitalai.services.llm import GeminiClient, get_gemini_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/from-ingredients")
async def from_ingredients(
    payload: IngredientRecipeRequest,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Generate recipes from ingredients. Errors are returned as-is; there is no fallback set."""
    if not gemini.api_key:
        logger.error("Missing Gemini API key")
        return JSONResponse(status_code=500, content={"error": "Configuration error - missing API key"})
    if not payload.ingredients:
        return JSONResponse(status_code=400, content={"error": "Ingredients are required"})
    try:
        data = await recipes.recipes_from_ingredients(gemini, payload)
    except LLMResponseError as e:
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to parse AI response",
                "message": f"{e}. Please try again with different ingredients.",
            },
        )
    except LLMError as e:
        logger.error("Error generating recipes: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to generate recipes", "message": str(e)})

    response = JSONResponse(content=data)
    response.set_cookie(RECIPE_COOKIE_NAME, payload.response_id, max_age=RECIPE_COOKIE_MAX_AGE, path="/")
    return response
