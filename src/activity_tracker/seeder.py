"""
Demo data seeder.

Builds a week of realistic activity history for one patient and swaps it
in as the whole log. The shape is fixed (same activities at the same
local times each run) while ids vary.
"""

import logging
from datetime import datetime, time, timedelta
from typing import List, Optional

from .activity_types import ActivityType
from .log import ActivityLog, ActivityRecord

logger = logging.getLogger(__name__)

DEMO_PATIENT_ID = "patient_001"
DEMO_DAYS = 7

# Indexed by days ago
DEMO_MOODS = ["great", "good", "okay", "good", "great", "okay", "good"]

# No brain exercise on this day
EXERCISE_GAP_DAY = 3

# Evening dose missed on this day
MISSED_DOSE_DAY = 1


def _at(day, hour: int, minute: int) -> datetime:
    """Local wall-clock time on `day` as an aware datetime."""
    return datetime.combine(day, time(hour, minute)).astimezone()


def build_demo_activities(
    patient_id: str = DEMO_PATIENT_ID,
    now: Optional[datetime] = None,
) -> List[ActivityRecord]:
    """
    Generate the demo history for the seven days ending on `now`.

    Returns:
        Records ordered most recent first
    """
    now = now or datetime.now().astimezone()
    today = now.astimezone().date()
    records: List[ActivityRecord] = []

    def add(activity_type: ActivityType, moment: datetime, metadata: dict) -> None:
        records.append(
            ActivityRecord.create(activity_type, moment, metadata, patient_id, id_prefix="demo_")
        )

    for days_ago in range(DEMO_DAYS - 1, -1, -1):
        day = today - timedelta(days=days_ago)

        add(ActivityType.APP_OPENED, _at(day, 8, 30), {"page": "home"})

        checkin_time = _at(day, 8, 35)
        add(
            ActivityType.MOOD_CHECKIN,
            checkin_time,
            {"mood": DEMO_MOODS[days_ago], "time": checkin_time.strftime("%H:%M")},
        )

        add(ActivityType.MEDICATION_TAKEN, _at(day, 9, 0), {"medication": "Morning medication"})

        if days_ago != EXERCISE_GAP_DAY:
            add(
                ActivityType.COGNITIVE_EXERCISE,
                _at(day, 10, 15),
                {"exercise": "Word Association", "duration": "5 min"},
            )

        if days_ago % 2 == 0:
            add(
                ActivityType.VOICE_SESSION,
                _at(day, 14, 30),
                {"duration": "8 min", "topic": "Grounding conversation"},
            )

        if days_ago < 4:
            add(ActivityType.ARTICLE_READ, _at(day, 15, 45), {"article": "Daily Wellness Tips"})

        if days_ago != MISSED_DOSE_DAY:
            add(ActivityType.MEDICATION_TAKEN, _at(day, 20, 0), {"medication": "Evening medication"})

    records.sort(key=lambda r: r.moment, reverse=True)
    return records


def seed_demo_activities(log: ActivityLog, patient_id: str = DEMO_PATIENT_ID) -> int:
    """
    Replace the entire log with a week of demo activities.

    Args:
        log: Activity log to overwrite
        patient_id: Patient the demo history belongs to

    Returns:
        Number of records seeded
    """
    records = build_demo_activities(patient_id, log.now())
    count = log.replace(records)
    logger.info(f"[SEED] Seeded {count} demo activities for {patient_id}")
    return count
