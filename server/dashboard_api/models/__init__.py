"""Pydantic models for activity API responses."""
from .activity import Activity, ActivityTypeEntry, SeedResult, TrackActivityRequest, TypeInfoModel
from .summary import (
    DailyReport,
    DailySummaryModel,
    MoodHistoryModel,
    SummaryAlertModel,
    WeeklySummaryModel,
)

__all__ = [
    "Activity",
    "ActivityTypeEntry",
    "SeedResult",
    "TrackActivityRequest",
    "TypeInfoModel",
    "DailyReport",
    "DailySummaryModel",
    "MoodHistoryModel",
    "SummaryAlertModel",
    "WeeklySummaryModel",
]
