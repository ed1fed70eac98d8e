"""Groq-backed nutrition endpoints: fitness plan and food analysis."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.api.deps import get_user_id
from vitalai.core.errors import LLMError
from vitalai.db.session import get_db
from vitalai.schemas.recipes import FitnessPlan, FitnessPlanRequest, FoodAnalysis, FoodAnalysisRequest
from vitalai.services import nutrition
from vitalai.services.llm import GroqClient, get_groq_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/fitness-plan", response_model=FitnessPlan)
async def fitness_plan(
    payload: FitnessPlanRequest,
    groq: GroqClient = Depends(get_groq_client),
):
    """Calories, macro split, workout and meal plan for the given profile."""
    try:
        return await nutrition.generate_fitness_plan(groq, payload)
    except LLMError as e:
        logger.error("Fitness plan generation failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to generate plan: {e}")


@router.post("/analyze-food", response_model=FoodAnalysis)
async def analyze_food(
    payload: FoodAnalysisRequest,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
    groq: GroqClient = Depends(get_groq_client),
):
    """Estimate macros from a description or a photo; log=true records a food entry."""
    if not payload.image and not (payload.description and payload.description.strip()):
        raise HTTPException(status_code=400, detail="Either description or image is required")
    try:
        return await nutrition.analyze_food(groq, payload, db=db, user_id=user_id)
    except LLMError as e:
        logger.error("Food analysis failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Failed to analyze food: {e}")
