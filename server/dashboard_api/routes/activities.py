"""Activity log API routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from activity_tracker import ACTIVITY_TYPES, ActivityLog, SummaryEngine, seed_demo_activities

from ..config import get_settings
from ..database import get_activity_log, get_summary_engine
from ..models.activity import Activity, ActivityTypeEntry, SeedResult, TrackActivityRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/activities", tags=["Activities"])


@router.post("", response_model=Activity, response_model_by_alias=True, status_code=201)
async def track_activity(
    request: TrackActivityRequest,
    activity_log: ActivityLog = Depends(get_activity_log),
):
    """
    Log a new activity.
    Unknown activity types are accepted and filed under the "other" category.
    """
    patient_id = request.patient_id or get_settings().default_patient_id
    record = activity_log.append(request.type, request.metadata, patient_id)
    return Activity.from_record(record)


@router.get("", response_model=list[Activity], response_model_by_alias=True)
async def list_activities(
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    activity_log: ActivityLog = Depends(get_activity_log),
):
    """Get the full activity log, most recent first."""
    records = activity_log.all()
    if patient_id:
        records = [r for r in records if r.patient_id == patient_id]
    return [Activity.from_record(r) for r in records]


@router.get("/today", response_model=list[Activity], response_model_by_alias=True)
async def get_today_activities(
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    engine: SummaryEngine = Depends(get_summary_engine),
):
    """Get today's activities."""
    return [Activity.from_record(r) for r in engine.today(patient_id)]


@router.get("/recent", response_model=list[Activity], response_model_by_alias=True)
async def get_recent_activities(
    days: int = Query(default=7, ge=1, le=90, description="Number of days of history"),
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    engine: SummaryEngine = Depends(get_summary_engine),
):
    """Get activities logged within the last N days."""
    return [Activity.from_record(r) for r in engine.recent(days, patient_id)]


@router.get("/types", response_model=list[ActivityTypeEntry])
async def get_activity_types():
    """Get the activity type table."""
    return [
        ActivityTypeEntry(type=activity_type.value, **info.to_dict())
        for activity_type, info in ACTIVITY_TYPES.items()
    ]


@router.post("/seed", response_model=SeedResult, response_model_by_alias=True)
async def seed_demo_data(
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    activity_log: ActivityLog = Depends(get_activity_log),
):
    """Replace the activity log with a week of demo activities."""
    patient_id = patient_id or get_settings().demo_patient_id
    seeded = seed_demo_activities(activity_log, patient_id)
    return SeedResult(patient_id=patient_id, seeded=seeded)


@router.delete("", status_code=204)
async def clear_activities(activity_log: ActivityLog = Depends(get_activity_log)):
    """Remove every activity for every patient."""
    activity_log.clear()
    logger.info("Activity log cleared via API")
