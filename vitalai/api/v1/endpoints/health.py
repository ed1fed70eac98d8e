"""Liveness and readiness for load balancers: database plus LLM provider keys."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.core.config import get_settings
from vitalai.db.session import get_db
from vitalai.services.llm import GeminiClient, GroqClient, get_gemini_client, get_groq_client

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health():
    """Liveness. Reports the environment, and built_at when BACKEND_BUILT_AT is set."""
    payload: dict = {"status": "ok", "environment": get_settings().environment}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(
    db: AsyncSession = Depends(get_db),
    gemini: GeminiClient = Depends(get_gemini_client),
    groq: GroqClient = Depends(get_groq_client),
):
    """Readiness: 500 only when the database is unreachable.

    A missing provider key is reported but does not fail the check.
    """
    llm = {
        "gemini": "configured" if gemini.api_key else "missing",
        "groq": "configured" if groq.api_key else "missing",
    }
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": str(e), "llm": llm},
        )
    if "missing" in llm.values():
        logger.warning("LLM provider keys missing: %s", llm)
    return {"status": "ok", "database": "connected", "llm": llm}
