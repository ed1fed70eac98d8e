"""Gemini recipe suggestions and key health check."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from vitalai.core.errors import LLMError
from vitalai.schemas.recipes import RecipeSuggestionRequest
from vitalai.services import recipes
from vitalai.services.llm import GeminiClient, get_gemini_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/gemini/recipes")
async def recipe_suggestions(
    payload: RecipeSuggestionRequest | None = None,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Three generated recipes; the fixed mock set (``_source: mock``) when generation fails."""
    return await recipes.suggest_recipes(gemini, payload or RecipeSuggestionRequest())


@router.post("/gemini/indian-cuisine")
async def indian_cuisine(
    payload: RecipeSuggestionRequest | None = None,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    payload = (payload or RecipeSuggestionRequest()).model_copy(update={"cuisine": "Indian"})
    return await recipes.suggest_recipes(gemini, payload)


@router.get("/health/gemini")
async def gemini_health(gemini: GeminiClient = Depends(get_gemini_client)):
    """Check the key is present, looks like a Google key, and can generate."""
    if not gemini.api_key:
        return JSONResponse(status_code=400, content={"error": "Gemini API key is missing", "status": "error"})
    if not gemini.api_key.startswith("AIza"):
        return JSONResponse(
            status_code=400, content={"error": "Gemini API key appears to be invalid", "status": "error"}
        )
    try:
        await gemini.generate_content("Hello world")
    except LLMError as e:
        logger.error("Gemini API verification failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={"error": "Gemini API key validation failed", "details": str(e), "status": "error"},
        )
    return {"status": "ok", "message": "Gemini API is configured correctly"}
