"""
Summary Engine.

Read-only analytics over the activity log: day and window filters,
daily and weekly rollups, mood trend classification and the
human-readable highlights shown on the caregiver dashboard.

Summaries never raise on missing data; an empty log produces zeroed,
empty or default-valued results.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from .activity_types import ActivityType
from .log import ActivityLog, ActivityRecord, day_key

logger = logging.getLogger(__name__)

MOOD_SCALE = {
    "great": 5,
    "good": 4,
    "okay": 3,
    "low": 2,
    "struggling": 1,
}
NEUTRAL_MOOD_SCORE = 3

COGNITIVE_TYPES = (
    ActivityType.COGNITIVE_EXERCISE.value,
    ActivityType.MEMORY_GAME.value,
    ActivityType.PUZZLE_COMPLETED.value,
)

WEEK_DAYS = 7
TOP_CATEGORY_COUNT = 3
WEEKLY_PERIOD_LABEL = "Last 7 days"


class MoodTrend(str, Enum):
    """Direction of the two most recent mood check-ins."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class TimeOfDay(str, Enum):
    """Time-of-day buckets for activity timestamps."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"

    @classmethod
    def for_hour(cls, hour: int) -> "TimeOfDay":
        if hour < 12:
            return cls.MORNING
        if hour < 17:
            return cls.AFTERNOON
        return cls.EVENING


class AlertLevel(str, Enum):
    """Severity of a daily summary notice."""

    WARNING = "warning"
    ALERT = "alert"
    INFO = "info"


@dataclass(frozen=True)
class SummaryAlert:
    """Notice raised by a daily summary."""

    type: AlertLevel
    message: str

    def to_dict(self) -> dict:
        return {"type": self.type.value, "message": self.message}


@dataclass
class DailySummary:
    """Rollup of one patient's activities for one calendar day."""

    date: str
    patient_id: Optional[str]
    total_activities: int
    by_category: Dict[str, List[ActivityRecord]]
    latest_mood: Optional[str]
    mood_trend: MoodTrend
    engagement_score: int
    alerts: List[SummaryAlert]
    highlights: List[str]
    generated_at: datetime

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "date": self.date,
            "patient_id": self.patient_id,
            "total_activities": self.total_activities,
            "by_category": {
                category: [r.to_dict() for r in records]
                for category, records in self.by_category.items()
            },
            "latest_mood": self.latest_mood,
            "mood_trend": self.mood_trend.value,
            "engagement_score": self.engagement_score,
            "alerts": [a.to_dict() for a in self.alerts],
            "highlights": list(self.highlights),
            "generated_at": self.generated_at.isoformat(),
        }


@dataclass(frozen=True)
class MoodCheckin:
    """A mood check-in reduced to what the weekly view plots."""

    date: str
    mood: Optional[str]
    timestamp: str

    def to_dict(self) -> dict:
        return {"date": self.date, "mood": self.mood, "timestamp": self.timestamp}


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int

    def to_dict(self) -> dict:
        return {"category": self.category, "count": self.count}


@dataclass
class WeeklySummary:
    """Rollup of one patient's activities over the trailing seven days."""

    patient_id: Optional[str]
    period: str
    total_activities: int
    average_per_day: int
    daily_breakdown: Dict[str, int]
    mood_checkins: List[MoodCheckin]
    most_active_period: TimeOfDay
    top_categories: List[CategoryCount]
    generated_at: datetime

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "patient_id": self.patient_id,
            "period": self.period,
            "total_activities": self.total_activities,
            "average_per_day": self.average_per_day,
            "daily_breakdown": dict(self.daily_breakdown),
            "mood_checkins": [m.to_dict() for m in self.mood_checkins],
            "most_active_period": self.most_active_period.value,
            "top_categories": [c.to_dict() for c in self.top_categories],
            "generated_at": self.generated_at.isoformat(),
        }


@dataclass
class MoodHistory:
    """Recent mood check-ins with the trend between the latest two."""

    patient_id: Optional[str]
    days: int
    entries: List[dict] = field(default_factory=list)
    trend: MoodTrend = MoodTrend.STABLE

    def to_dict(self) -> dict:
        return {
            "patient_id": self.patient_id,
            "days": self.days,
            "entries": [dict(e) for e in self.entries],
            "trend": self.trend.value,
        }


def checkin_mood(activity: ActivityRecord) -> Optional[str]:
    """Mood label of a check-in; missing, empty or non-text moods read as None."""
    mood = activity.metadata.get("mood")
    return mood if isinstance(mood, str) and mood else None


def mood_score(mood) -> int:
    """Map a mood label onto the 1-5 scale; unknown or missing is neutral."""
    return MOOD_SCALE.get(mood, NEUTRAL_MOOD_SCORE) if isinstance(mood, str) else NEUTRAL_MOOD_SCORE


def mood_trend(moods: Sequence[Optional[str]]) -> MoodTrend:
    """
    Classify the trend from mood labels ordered most recent first.

    Only the latest two labels are compared; fewer than two is stable.
    """
    if len(moods) < 2:
        return MoodTrend.STABLE

    recent = mood_score(moods[0])
    previous = mood_score(moods[1])

    if recent > previous:
        return MoodTrend.IMPROVING
    if recent < previous:
        return MoodTrend.DECLINING
    return MoodTrend.STABLE


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def build_highlights(activities: Sequence[ActivityRecord]) -> List[str]:
    """Generate the highlight sentences for a day's activities."""
    highlights = []

    voice = sum(1 for a in activities if a.type == ActivityType.VOICE_SESSION.value)
    if voice:
        highlights.append(
            f"Had {voice} {_plural(voice, 'voice conversation', 'voice conversations')}"
        )

    cognitive = sum(1 for a in activities if a.type in COGNITIVE_TYPES)
    if cognitive:
        highlights.append(
            f"Completed {cognitive} {_plural(cognitive, 'brain exercise', 'brain exercises')}"
        )

    meds = sum(1 for a in activities if a.type == ActivityType.MEDICATION_TAKEN.value)
    if meds:
        highlights.append(f"Took medication {meds} {_plural(meds, 'time', 'times')}")

    articles = sum(1 for a in activities if a.type == ActivityType.ARTICLE_READ.value)
    if articles:
        highlights.append(f"Read {articles} {_plural(articles, 'article', 'articles')}")

    return highlights


def build_alerts(activities: Sequence[ActivityRecord], engagement_score: int) -> List[SummaryAlert]:
    """Evaluate the daily notices in their fixed order."""
    alerts = []

    if not any(a.type == ActivityType.MEDICATION_TAKEN.value for a in activities):
        alerts.append(SummaryAlert(AlertLevel.WARNING, "No medication taken today"))

    if any(a.type == ActivityType.MEDICATION_MISSED.value for a in activities):
        alerts.append(SummaryAlert(AlertLevel.ALERT, "Medication was missed"))

    if engagement_score < 20:
        alerts.append(SummaryAlert(AlertLevel.INFO, "Low engagement today"))

    return alerts


class SummaryEngine:
    """
    Derives summaries from an ActivityLog without ever writing to it.

    Day filters compare the records' `date` bucket with the bucket of the
    requested day, so both sides go through the same `day_key` rule.
    """

    def __init__(self, log: ActivityLog):
        self.log = log

    def now(self) -> datetime:
        return self.log.now()

    def for_date(
        self,
        day: Union[date, datetime],
        patient_id: Optional[str] = None,
    ) -> List[ActivityRecord]:
        """Activities logged on `day`, optionally for one patient only."""
        key = day_key(day)
        return [
            a for a in self.log.all()
            if a.date == key and (not patient_id or a.patient_id == patient_id)
        ]

    def today(self, patient_id: Optional[str] = None) -> List[ActivityRecord]:
        return self.for_date(self.now(), patient_id)

    def recent(self, days: int = WEEK_DAYS, patient_id: Optional[str] = None) -> List[ActivityRecord]:
        """Activities whose timestamp falls within the last `days` days."""
        cutoff = self.now() - timedelta(days=days)
        return [
            a for a in self.log.all()
            if a.moment >= cutoff and (not patient_id or a.patient_id == patient_id)
        ]

    def daily_summary(
        self,
        patient_id: Optional[str],
        day: Optional[Union[date, datetime]] = None,
    ) -> DailySummary:
        """
        Build the daily rollup for a patient.

        Args:
            patient_id: Patient to summarize
            day: Day to summarize (defaults to today)
        """
        day = day if day is not None else self.now()
        activities = self.for_date(day, patient_id)

        by_category: Dict[str, List[ActivityRecord]] = {}
        for activity in activities:
            by_category.setdefault(activity.category, []).append(activity)

        moods = [checkin_mood(a) for a in activities if a.type == ActivityType.MOOD_CHECKIN.value]
        latest_mood = moods[0] if moods else None

        engagement_score = min(100, len(activities) * 10)

        summary = DailySummary(
            date=day_key(day),
            patient_id=patient_id,
            total_activities=len(activities),
            by_category=by_category,
            latest_mood=latest_mood,
            mood_trend=mood_trend(moods),
            engagement_score=engagement_score,
            alerts=build_alerts(activities, engagement_score),
            highlights=build_highlights(activities),
            generated_at=self.now(),
        )

        logger.debug(
            f"[SUMMARY] Daily summary for {patient_id} on {summary.date}: "
            f"{summary.total_activities} activities, {len(summary.alerts)} alerts"
        )
        return summary

    def weekly_summary(self, patient_id: Optional[str]) -> WeeklySummary:
        """Build the trailing seven-day rollup for a patient."""
        now = self.now()
        activities = self.recent(WEEK_DAYS, patient_id)

        # Oldest day first
        daily_breakdown: Dict[str, int] = {}
        for days_ago in range(WEEK_DAYS - 1, -1, -1):
            key = day_key(now - timedelta(days=days_ago))
            daily_breakdown[key] = sum(1 for a in activities if a.date == key)

        mood_checkins = [
            MoodCheckin(date=a.date, mood=checkin_mood(a), timestamp=a.timestamp)
            for a in activities
            if a.type == ActivityType.MOOD_CHECKIN.value
        ]

        # Ties go to the period seen first while walking the log
        period_counts: Dict[TimeOfDay, int] = {}
        for activity in activities:
            period = TimeOfDay.for_hour(activity.moment.astimezone().hour)
            period_counts[period] = period_counts.get(period, 0) + 1
        most_active = (
            max(period_counts, key=period_counts.get) if period_counts else TimeOfDay.MORNING
        )

        summary = WeeklySummary(
            patient_id=patient_id,
            period=WEEKLY_PERIOD_LABEL,
            total_activities=len(activities),
            average_per_day=round(len(activities) / WEEK_DAYS),
            daily_breakdown=daily_breakdown,
            mood_checkins=mood_checkins,
            most_active_period=most_active,
            top_categories=top_categories(activities),
            generated_at=now,
        )

        logger.debug(
            f"[SUMMARY] Weekly summary for {patient_id}: "
            f"{summary.total_activities} activities, most active {most_active.value}"
        )
        return summary

    def mood_history(self, patient_id: Optional[str], days: int = WEEK_DAYS) -> MoodHistory:
        """Mood check-ins over the window, most recent first, with their trend."""
        entries = [
            {**a.metadata, "mood": checkin_mood(a), "date": a.date, "timestamp": a.timestamp}
            for a in self.recent(days, patient_id)
            if a.type == ActivityType.MOOD_CHECKIN.value
        ]
        return MoodHistory(
            patient_id=patient_id,
            days=days,
            entries=entries,
            trend=mood_trend([e.get("mood") for e in entries]),
        )


def top_categories(
    activities: Sequence[ActivityRecord],
    limit: int = TOP_CATEGORY_COUNT,
) -> List[CategoryCount]:
    """Most frequent categories, highest count first."""
    counts = Counter(a.category for a in activities)
    return [CategoryCount(category, count) for category, count in counts.most_common(limit)]
