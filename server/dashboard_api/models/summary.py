"""Activity summary models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List, Literal, Optional

from activity_tracker import DailySummary, MoodHistory, WeeklySummary

from .activity import Activity

MoodTrendValue = Literal["improving", "declining", "stable"]
TimeOfDay = Literal["morning", "afternoon", "evening"]
AlertLevel = Literal["warning", "alert", "info"]


class SummaryAlertModel(BaseModel):
    """Notice raised by a daily summary."""

    type: AlertLevel
    message: str


class DailySummaryModel(BaseModel):
    """Daily activity rollup for one patient."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    patient_id: Optional[str] = Field(serialization_alias="patientId")
    total_activities: int = Field(serialization_alias="totalActivities")
    by_category: Dict[str, List[Activity]] = Field(serialization_alias="byCategory")
    latest_mood: Optional[str] = Field(serialization_alias="latestMood")
    mood_trend: MoodTrendValue = Field(serialization_alias="moodTrend")
    engagement_score: int = Field(ge=0, le=100, serialization_alias="engagementScore")
    alerts: List[SummaryAlertModel]
    highlights: List[str]
    generated_at: str = Field(serialization_alias="generatedAt")

    @classmethod
    def from_summary(cls, summary: DailySummary) -> "DailySummaryModel":
        return cls(
            date=summary.date,
            patient_id=summary.patient_id,
            total_activities=summary.total_activities,
            by_category={
                category: [Activity.from_record(r) for r in records]
                for category, records in summary.by_category.items()
            },
            latest_mood=summary.latest_mood,
            mood_trend=summary.mood_trend.value,
            engagement_score=summary.engagement_score,
            alerts=[SummaryAlertModel(**a.to_dict()) for a in summary.alerts],
            highlights=summary.highlights,
            generated_at=summary.generated_at.isoformat(),
        )


class MoodCheckinModel(BaseModel):
    date: str
    mood: Optional[str] = None
    timestamp: str


class CategoryCountModel(BaseModel):
    category: str
    count: int


class WeeklySummaryModel(BaseModel):
    """Trailing seven-day activity rollup for one patient."""

    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field(serialization_alias="patientId")
    period: str
    total_activities: int = Field(serialization_alias="totalActivities")
    average_per_day: int = Field(serialization_alias="averagePerDay")
    daily_breakdown: Dict[str, int] = Field(serialization_alias="dailyBreakdown")
    mood_checkins: List[MoodCheckinModel] = Field(serialization_alias="moodCheckins")
    most_active_period: TimeOfDay = Field(serialization_alias="mostActivePeriod")
    top_categories: List[CategoryCountModel] = Field(serialization_alias="topCategories")
    generated_at: str = Field(serialization_alias="generatedAt")

    @classmethod
    def from_summary(cls, summary: WeeklySummary) -> "WeeklySummaryModel":
        return cls(**summary.to_dict())


class MoodHistoryModel(BaseModel):
    """Recent mood check-ins and their trend."""

    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field(serialization_alias="patientId")
    days: int
    entries: List[dict]
    trend: MoodTrendValue

    @classmethod
    def from_history(cls, history: MoodHistory) -> "MoodHistoryModel":
        return cls(**history.to_dict())


class DailyReport(BaseModel):
    """Markdown daily report for caregivers."""

    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field(serialization_alias="patientId")
    content: str
    generated_at: str = Field(serialization_alias="generatedAt")
