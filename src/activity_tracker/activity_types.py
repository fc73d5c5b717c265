"""
Activity Type Table.

Static mapping from activity type tags to their category, display label
and icon. Records snapshot their TypeInfo at creation time, so this table
may grow without rewriting history.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class ActivityCategory(str, Enum):
    """Coarse grouping of activity types."""

    WELLNESS = "wellness"
    COGNITIVE = "cognitive"
    COMMUNICATION = "communication"
    CARE = "care"
    LEARNING = "learning"
    ENGAGEMENT = "engagement"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> "ActivityCategory":
        """Parse a persisted category, mapping unknown values to OTHER."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class ActivityType(str, Enum):
    """Known activity tags."""

    # Mood & wellness
    MOOD_CHECKIN = "MOOD_CHECKIN"
    DAILY_CHECKIN = "DAILY_CHECKIN"

    # Cognitive
    COGNITIVE_EXERCISE = "COGNITIVE_EXERCISE"
    MEMORY_GAME = "MEMORY_GAME"
    PUZZLE_COMPLETED = "PUZZLE_COMPLETED"

    # Communication
    VOICE_SESSION = "VOICE_SESSION"
    CHAT_MESSAGE = "CHAT_MESSAGE"
    FAMILY_CALL = "FAMILY_CALL"

    # Care
    MEDICATION_TAKEN = "MEDICATION_TAKEN"
    MEDICATION_MISSED = "MEDICATION_MISSED"
    APPOINTMENT_REMINDER = "APPOINTMENT_REMINDER"

    # Content
    ARTICLE_READ = "ARTICLE_READ"
    VIDEO_WATCHED = "VIDEO_WATCHED"

    # Navigation
    APP_OPENED = "APP_OPENED"
    PAGE_VISITED = "PAGE_VISITED"


@dataclass(frozen=True)
class TypeInfo:
    """Descriptor resolved for an activity type."""

    category: ActivityCategory
    label: str
    icon: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "category": self.category.value,
            "label": self.label,
            "icon": self.icon,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TypeInfo":
        return cls(
            category=ActivityCategory.parse(data.get("category", "other")),
            label=str(data.get("label", "")),
            icon=str(data.get("icon", FALLBACK_ICON)),
        )


FALLBACK_ICON = "📌"

ACTIVITY_TYPES: Dict[ActivityType, TypeInfo] = {
    ActivityType.MOOD_CHECKIN: TypeInfo(ActivityCategory.WELLNESS, "Mood Check-in", "😊"),
    ActivityType.DAILY_CHECKIN: TypeInfo(ActivityCategory.WELLNESS, "Daily Check-in", "✅"),
    ActivityType.COGNITIVE_EXERCISE: TypeInfo(ActivityCategory.COGNITIVE, "Brain Exercise", "🧠"),
    ActivityType.MEMORY_GAME: TypeInfo(ActivityCategory.COGNITIVE, "Memory Game", "🎮"),
    ActivityType.PUZZLE_COMPLETED: TypeInfo(ActivityCategory.COGNITIVE, "Puzzle Completed", "🧩"),
    ActivityType.VOICE_SESSION: TypeInfo(ActivityCategory.COMMUNICATION, "Voice Conversation", "🎤"),
    ActivityType.CHAT_MESSAGE: TypeInfo(ActivityCategory.COMMUNICATION, "Chat Message", "💬"),
    ActivityType.FAMILY_CALL: TypeInfo(ActivityCategory.COMMUNICATION, "Family Call", "📞"),
    ActivityType.MEDICATION_TAKEN: TypeInfo(ActivityCategory.CARE, "Medication Taken", "💊"),
    ActivityType.MEDICATION_MISSED: TypeInfo(ActivityCategory.CARE, "Medication Missed", "⚠️"),
    ActivityType.APPOINTMENT_REMINDER: TypeInfo(ActivityCategory.CARE, "Appointment Reminder", "📅"),
    ActivityType.ARTICLE_READ: TypeInfo(ActivityCategory.LEARNING, "Article Read", "📖"),
    ActivityType.VIDEO_WATCHED: TypeInfo(ActivityCategory.LEARNING, "Video Watched", "🎬"),
    ActivityType.APP_OPENED: TypeInfo(ActivityCategory.ENGAGEMENT, "App Opened", "📱"),
    ActivityType.PAGE_VISITED: TypeInfo(ActivityCategory.ENGAGEMENT, "Page Visited", "👀"),
}


def type_name(activity_type: Union[ActivityType, str]) -> str:
    """Return the plain tag string for a type given as enum or string."""
    if isinstance(activity_type, ActivityType):
        return activity_type.value
    return str(activity_type)


def resolve_type_info(activity_type: Union[ActivityType, str]) -> TypeInfo:
    """
    Resolve the TypeInfo for an activity tag.

    Unrecognized tags never fail: they resolve to the "other" category
    with the tag itself as label.
    """
    name = type_name(activity_type)
    try:
        return ACTIVITY_TYPES[ActivityType(name)]
    except ValueError:
        return TypeInfo(ActivityCategory.OTHER, name, FALLBACK_ICON)
