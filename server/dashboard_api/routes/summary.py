"""Activity summary API routes."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from activity_tracker import SummaryEngine, build_daily_report

from ..config import get_settings
from ..database import get_summary_engine
from ..models.summary import DailyReport, DailySummaryModel, MoodHistoryModel, WeeklySummaryModel

router = APIRouter(prefix="/api/activities", tags=["Activity Summary"])


def _patient_or_default(patient_id: Optional[str]) -> str:
    return patient_id or get_settings().default_patient_id


@router.get("/summary/daily", response_model=DailySummaryModel, response_model_by_alias=True)
async def get_daily_summary(
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    day: Optional[date] = Query(default=None, alias="date", description="Day to summarize (YYYY-MM-DD)"),
    engine: SummaryEngine = Depends(get_summary_engine),
):
    """
    Get the daily rollup for a patient.
    Includes category grouping, mood trend, engagement score, alerts and highlights.
    """
    summary = engine.daily_summary(_patient_or_default(patient_id), day)
    return DailySummaryModel.from_summary(summary)


@router.get("/summary/weekly", response_model=WeeklySummaryModel, response_model_by_alias=True)
async def get_weekly_summary(
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    engine: SummaryEngine = Depends(get_summary_engine),
):
    """Get the trailing seven-day rollup for a patient."""
    summary = engine.weekly_summary(_patient_or_default(patient_id))
    return WeeklySummaryModel.from_summary(summary)


@router.get("/mood", response_model=MoodHistoryModel, response_model_by_alias=True)
async def get_mood_history(
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    days: int = Query(default=7, ge=1, le=90, description="Number of days of history"),
    engine: SummaryEngine = Depends(get_summary_engine),
):
    """Get recent mood check-ins and the current mood trend."""
    history = engine.mood_history(_patient_or_default(patient_id), days)
    return MoodHistoryModel.from_history(history)


@router.get("/report", response_model=DailyReport, response_model_by_alias=True)
async def get_daily_report(
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    patient_name: Optional[str] = Query(default=None, alias="patientName"),
    engine: SummaryEngine = Depends(get_summary_engine),
):
    """Get today's markdown report for family members."""
    patient_id = _patient_or_default(patient_id)
    return DailyReport(
        patient_id=patient_id,
        content=build_daily_report(engine, patient_id, patient_name),
        generated_at=engine.now().isoformat(),
    )
