"""
Unit tests for the activity type table.

Usage:
    pytest tests/test_activity_types.py -v
"""
from activity_tracker import ACTIVITY_TYPES, ActivityCategory, ActivityType, resolve_type_info
from activity_tracker.activity_types import TypeInfo


class TestActivityTypes:
    """Test type resolution and the static table."""

    def test_every_type_has_info(self):
        assert set(ACTIVITY_TYPES) == set(ActivityType)

    def test_categories(self):
        expected = {
            ActivityType.MOOD_CHECKIN: ActivityCategory.WELLNESS,
            ActivityType.MEMORY_GAME: ActivityCategory.COGNITIVE,
            ActivityType.FAMILY_CALL: ActivityCategory.COMMUNICATION,
            ActivityType.MEDICATION_MISSED: ActivityCategory.CARE,
            ActivityType.VIDEO_WATCHED: ActivityCategory.LEARNING,
            ActivityType.PAGE_VISITED: ActivityCategory.ENGAGEMENT,
        }
        for activity_type, category in expected.items():
            assert ACTIVITY_TYPES[activity_type].category == category

    def test_resolve_by_enum_and_string(self):
        assert resolve_type_info(ActivityType.VOICE_SESSION).label == "Voice Conversation"
        assert resolve_type_info("VOICE_SESSION").icon == "🎤"

    def test_resolve_unknown(self):
        info = resolve_type_info("SING_ALONG")
        assert info == TypeInfo(ActivityCategory.OTHER, "SING_ALONG", "📌")

    def test_category_parse_unknown(self):
        assert ActivityCategory.parse("care") == ActivityCategory.CARE
        assert ActivityCategory.parse("astrology") == ActivityCategory.OTHER

    def test_type_info_dict(self):
        info = ACTIVITY_TYPES[ActivityType.ARTICLE_READ]
        assert info.to_dict() == {"category": "learning", "label": "Article Read", "icon": "📖"}
        assert TypeInfo.from_dict(info.to_dict()) == info
