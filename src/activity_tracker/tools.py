"""
Activity Tracker Tools.

Async tool functions that let a conversational agent ground itself on
the patient's recent activity and log new activities during a session.

Conventions:
- All tools are async functions
- Standard tool_context and tool_config parameters
- The activity log is passed in tool_config["activity_log"]
- Consistent return format with status field
"""

from typing import Any, Dict, Optional

from .log import ActivityLog
from .report import build_daily_report
from .summary import SummaryEngine


def _resolve_log(tool_config: Optional[Dict[str, Any]]) -> Optional[ActivityLog]:
    log = (tool_config or {}).get("activity_log")
    return log if isinstance(log, ActivityLog) else None


def _missing_log() -> Dict[str, Any]:
    return {
        "status": "error",
        "message": "No activity log configured for this tool",
    }


async def get_activity_summary(
    patient_id: str,
    patient_name: Optional[str] = None,
    tool_context: Optional[Any] = None,
    tool_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Get today's activity summary for a patient.

    Args:
        patient_id: Patient to summarize
        patient_name: Display name used in the report text
        tool_context: Agent tool context (optional)
        tool_config: Tool configuration holding the activity log

    Returns:
        Dict containing:
        - status: "success" or "error"
        - summary: Daily summary fields
        - report: Markdown daily report
        - message: One-line description for the agent
    """
    log = _resolve_log(tool_config)
    if log is None:
        return _missing_log()

    engine = SummaryEngine(log)
    summary = engine.daily_summary(patient_id)

    return {
        "status": "success",
        "summary": summary.to_dict(),
        "report": build_daily_report(engine, patient_id, patient_name),
        "message": (
            f"{summary.total_activities} activities today, mood {summary.latest_mood}"
            if summary.latest_mood
            else f"{summary.total_activities} activities today, no mood check-in yet"
        ),
    }


async def get_weekly_activity_report(
    patient_id: str,
    tool_context: Optional[Any] = None,
    tool_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Get the trailing seven-day activity rollup for a patient.

    Returns:
        Dict with status, the weekly summary and the mood trend
    """
    log = _resolve_log(tool_config)
    if log is None:
        return _missing_log()

    engine = SummaryEngine(log)
    weekly = engine.weekly_summary(patient_id)
    moods = engine.mood_history(patient_id)

    return {
        "status": "success",
        "summary": weekly.to_dict(),
        "mood_trend": moods.trend.value,
        "message": (
            f"{weekly.total_activities} activities in the last 7 days, "
            f"mostly in the {weekly.most_active_period.value}"
        ),
    }


async def log_activity(
    activity_type: str,
    patient_id: str,
    metadata: Optional[Dict[str, Any]] = None,
    tool_context: Optional[Any] = None,
    tool_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Record an activity observed during a conversation (e.g. a voice session).

    Args:
        activity_type: Activity tag such as VOICE_SESSION
        patient_id: Patient the activity belongs to
        metadata: Coarse context only, no health details

    Returns:
        Dict with status and the stored record
    """
    log = _resolve_log(tool_config)
    if log is None:
        return _missing_log()

    record = log.append(activity_type, metadata, patient_id)

    return {
        "status": "success",
        "activity": record.to_dict(),
        "message": f"Logged {record.type_info.label} for {record.patient_id}",
    }
