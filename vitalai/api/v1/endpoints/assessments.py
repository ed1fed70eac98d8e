"""Risk assessment endpoints: run a rule set, store the result, list/get/delete."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vitalai.api.deps import get_user_id
from vitalai.core.enums import AssessmentCategory
from vitalai.core.errors import LLMError
from vitalai.db.session import get_db
from vitalai.models.assessment import HealthRiskAssessment
from vitalai.schemas.assessment import (
    AssessmentRead,
    AssessmentResult,
    AssessmentUpdate,
    CardiovascularInput,
    DiabetesInput,
    MentalHealthInput,
    SkinConditionInput,
)
from vitalai.services import risk_assessment
from vitalai.services.llm import GeminiClient, get_gemini_client

logger = logging.getLogger(__name__)

router = APIRouter()


async def _store(
    db: AsyncSession, user_id: uuid.UUID, result: AssessmentResult, notes: str | None = None
) -> HealthRiskAssessment:
    row = HealthRiskAssessment(
        user_id=user_id,
        category=result.category,
        risk_level=result.risk_level,
        risk_score=result.risk_score,
        metrics=result.metrics,
        recommendations=result.recommendations,
        notes=notes,
    )
    db.add(row)
    await db.flush()
    await db.refresh(row)
    return row


@router.post("/cardiovascular", response_model=AssessmentRead, status_code=201)
async def assess_cardiovascular(
    payload: CardiovascularInput,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await _store(db, user_id, risk_assessment.assess_cardiovascular(payload))


@router.post("/diabetes", response_model=AssessmentRead, status_code=201)
async def assess_diabetes(
    payload: DiabetesInput,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await _store(db, user_id, risk_assessment.assess_diabetes(payload))


@router.post("/mental-health", response_model=AssessmentRead, status_code=201)
async def assess_mental_health(
    payload: MentalHealthInput,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await _store(db, user_id, risk_assessment.assess_mental_health(payload))


@router.post("/skin", response_model=AssessmentRead, status_code=201)
async def assess_skin(
    payload: SkinConditionInput,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Parse the given report, or generate one from the symptoms (canned report on failure)."""
    report = payload.report
    notes = None
    if not report:
        if not payload.symptoms:
            raise HTTPException(status_code=400, detail="Either report or symptoms is required")
        try:
            report = await gemini.generate_content(
                risk_assessment.skin_report_prompt(payload.symptoms), temperature=0.4
            )
        except LLMError as e:
            logger.warning("Skin report generation failed, using default report: %s", e)
            report = risk_assessment.DEFAULT_SKIN_REPORT
            notes = "Generated report unavailable; default report used"
    result = risk_assessment.assess_skin(report, symptoms=payload.symptoms)
    return await _store(db, user_id, result, notes=notes)


@router.get("", response_model=list[AssessmentRead])
async def list_assessments(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
    category: AssessmentCategory | None = None,
):
    """Stored assessments, newest first."""
    stmt = select(HealthRiskAssessment).where(HealthRiskAssessment.user_id == user_id)
    if category:
        stmt = stmt.where(HealthRiskAssessment.category == category)
    result = await db.execute(stmt.order_by(HealthRiskAssessment.assessment_date.desc()))
    return list(result.scalars().all())


async def _get_owned(db: AsyncSession, user_id: uuid.UUID, assessment_id: uuid.UUID) -> HealthRiskAssessment:
    result = await db.execute(
        select(HealthRiskAssessment).where(
            HealthRiskAssessment.id == assessment_id, HealthRiskAssessment.user_id == user_id
        )
    )
    row = result.scalar_one_or_none()
    if not row:
        raise HTTPException(status_code=404, detail="Assessment not found")
    return row


@router.get("/{assessment_id}", response_model=AssessmentRead)
async def get_assessment(
    assessment_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    return await _get_owned(db, user_id, assessment_id)


@router.patch("/{assessment_id}", response_model=AssessmentRead)
async def update_assessment(
    assessment_id: uuid.UUID,
    payload: AssessmentUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    """Partial update, e.g. adding notes or revising the recommendations."""
    row = await _get_owned(db, user_id, assessment_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        # Level and score are required columns
        if v is None and k in ("risk_level", "risk_score"):
            continue
        setattr(row, k, v)
    await db.flush()
    await db.refresh(row)
    return row


@router.delete("/{assessment_id}", status_code=204)
async def delete_assessment(
    assessment_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_user_id),
):
    row = await _get_owned(db, user_id, assessment_id)
    await db.delete(row)
    await db.flush()
