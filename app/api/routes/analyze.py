"""Stateless analysis endpoint used by the demo dashboard and the data form."""
import logging

from fastapi import APIRouter, Body, Depends, HTTPException

from app.models.health_data import AnalysisResponse, HealthProfileIn
from app.services.analysis_service import analyze_profile
from app.services.insights_llm import InsightGenerator, get_insight_generator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analyze"])


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
)
def analyze(
    payload: HealthProfileIn = Body(...),
    generate: InsightGenerator = Depends(get_insight_generator),
):
    """Score a health profile and attach language-model insights. Nothing is stored."""
    try:
        return analyze_profile(payload, generate)
    except Exception as exc:
        logger.exception("Error analyzing health data")
        raise HTTPException(
            status_code=500, detail="Failed to analyze health data"
        ) from exc
