"""
Activity Tracker.

Tracks caregiving engagement activities and derives daily and weekly
summaries, mood trends and highlights for family reports.
"""

from .activity_types import (
    ACTIVITY_TYPES,
    ActivityCategory,
    ActivityType,
    TypeInfo,
    resolve_type_info,
)
from .log import (
    DEFAULT_PATIENT_ID,
    MAX_ACTIVITIES,
    ActivityLog,
    ActivityRecord,
    day_key,
)
from .report import build_daily_report
from .seeder import DEMO_PATIENT_ID, build_demo_activities, seed_demo_activities
from .storage import (
    ActivityStorage,
    InMemoryStorage,
    SQLiteStorage,
    StorageError,
    StorageQuotaError,
)
from .summary import (
    DailySummary,
    MoodHistory,
    MoodTrend,
    SummaryEngine,
    TimeOfDay,
    WeeklySummary,
)

__all__ = [
    "ACTIVITY_TYPES",
    "ActivityCategory",
    "ActivityType",
    "TypeInfo",
    "resolve_type_info",
    "DEFAULT_PATIENT_ID",
    "MAX_ACTIVITIES",
    "ActivityLog",
    "ActivityRecord",
    "day_key",
    "build_daily_report",
    "DEMO_PATIENT_ID",
    "build_demo_activities",
    "seed_demo_activities",
    "ActivityStorage",
    "InMemoryStorage",
    "SQLiteStorage",
    "StorageError",
    "StorageQuotaError",
    "DailySummary",
    "MoodHistory",
    "MoodTrend",
    "SummaryEngine",
    "TimeOfDay",
    "WeeklySummary",
]
