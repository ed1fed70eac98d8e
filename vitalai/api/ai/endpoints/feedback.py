"""Thumbs up/down feedback on AI responses."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.db.session import get_db
from vitalai.models.feedback import AIFeedback
from vitalai.schemas.feedback import FeedbackCreate, FeedbackList, FeedbackRead

logger = logging.getLogger(__name__)

router = APIRouter()


def _read(row: AIFeedback) -> FeedbackRead:
    return FeedbackRead(
        id=row.id,
        response_id=row.response_id,
        response_type=row.response_type,
        rating=row.rating,
        comment=row.comment,
        context=row.context,
        timestamp=row.created_at,
    )


@router.post("")
async def record_feedback(payload: FeedbackCreate, db: AsyncSession = Depends(get_db)):
    if not payload.response_id or not payload.response_type:
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required fields: responseId or responseType"},
        )
    row = AIFeedback(
        response_id=payload.response_id,
        response_type=payload.response_type,
        rating=payload.rating,
        comment=payload.comment,
        context=payload.context or {},
    )
    db.add(row)
    await db.flush()
    logger.info(
        "Feedback recorded: %s - %s (id=%s, response=%s, comment_length=%d)",
        payload.response_type,
        payload.rating.value if payload.rating else None,
        row.id,
        payload.response_id,
        len(payload.comment or ""),
    )
    return {"success": True, "message": "Feedback recorded successfully", "feedbackId": str(row.id)}


@router.get("", response_model=FeedbackList)
async def list_feedback(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(AIFeedback).order_by(AIFeedback.created_at.desc()))
    rows = result.scalars().all()
    return FeedbackList(feedback=[_read(r) for r in rows], count=len(rows))
