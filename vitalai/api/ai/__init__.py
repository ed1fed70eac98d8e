"""Root-mounted AI proxy routes (paths kept as the frontend calls them)."""

from fastapi import APIRouter

from vitalai.api.ai.endpoints import feedback, gemini, recipes

ai_router = APIRouter(prefix="/api")

ai_router.include_router(gemini.router, tags=["gemini"])
ai_router.include_router(recipes.router, prefix="/recipes", tags=["recipes"])
ai_router.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
