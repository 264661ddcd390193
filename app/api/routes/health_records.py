"""Health records routes.

Users submit health data; the backend scores it, asks the language model
for insights and stores the analysis in Firestore. The history, latest and
detail endpoints back the dashboard's metrics and history pages.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response

from app.api.deps import AuthUser, get_current_user
from app.models.health_data import HealthProfileIn, StoredAnalysisResponse
from app.services.analysis_service import analyze_profile
from app.services.health_store import MAX_HISTORY_LIMIT, HealthStore, get_health_store
from app.services.insights_llm import InsightGenerator, get_insight_generator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health_records", tags=["health_records"])


@router.post(
    "/",
    status_code=201,
    response_model=StoredAnalysisResponse,
    response_model_exclude_none=True,
)
def submit_record(
    payload: HealthProfileIn = Body(...),
    user: AuthUser = Depends(get_current_user),
    generate: InsightGenerator = Depends(get_insight_generator),
    store: HealthStore = Depends(get_health_store),
):
    """Analyze a submitted profile and save the result for the caller."""
    try:
        analysis = analyze_profile(payload, generate)
    except Exception as exc:
        logger.exception("Error analyzing health data")
        raise HTTPException(status_code=500, detail="Failed to analyze health data") from exc

    try:
        record_id = store.save_analysis(user.uid, payload, analysis)
    except Exception as exc:
        logger.exception("Error saving health data for %s", user.uid)
        raise HTTPException(status_code=500, detail="Failed to save health data") from exc

    logger.info("Saved analysis %s for %s", record_id, user.uid)
    return StoredAnalysisResponse(id=record_id, **analysis.model_dump())


@router.get("/", response_model=Dict[str, Any])
def list_records(
    limit: Optional[int] = Query(None, ge=1, le=MAX_HISTORY_LIMIT),
    user: AuthUser = Depends(get_current_user),
    store: HealthStore = Depends(get_health_store),
):
    """The caller's analyses, newest first."""
    return {"items": store.list_history(user.uid, limit)}


@router.get("/latest", response_model=Dict[str, Any])
def get_latest_record(
    user: AuthUser = Depends(get_current_user),
    store: HealthStore = Depends(get_health_store),
):
    return {"item": store.get_latest(user.uid)}


@router.get("/{record_id}", response_model=Dict[str, Any])
def get_record(
    record_id: str,
    user: AuthUser = Depends(get_current_user),
    store: HealthStore = Depends(get_health_store),
):
    record = store.get_record(user.uid, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return record


@router.delete("/{record_id}", status_code=204)
def delete_record(
    record_id: str,
    user: AuthUser = Depends(get_current_user),
    store: HealthStore = Depends(get_health_store),
):
    if not store.delete_record(user.uid, record_id):
        raise HTTPException(status_code=404, detail="Record not found")
    return Response(status_code=204)
