"""
Unit tests for the caregiver daily report.

Usage:
    pytest tests/test_report.py -v
"""
from activity_tracker import ActivityType, build_daily_report, day_key


class TestDailyReport:
    """Test markdown report rendering."""

    def test_empty_day(self, engine, clock):
        report = build_daily_report(engine, "patient_001", "Rose")

        assert report.startswith(f"📋 **Daily Report for Rose** ({day_key(clock())})")
        assert "No activities recorded yet today. Consider checking in with Rose." in report
        assert "Recommendations" not in report

    def test_default_name(self, engine):
        assert "Daily Report for the patient" in build_daily_report(engine, "patient_001")

    def test_active_day(self, engine, track):
        track(ActivityType.MOOD_CHECKIN, {"mood": "good"}, hour=8)
        track(ActivityType.MEDICATION_TAKEN, hour=9)
        track(ActivityType.VOICE_SESSION, hour=10)
        track(ActivityType.VOICE_SESSION, hour=11)
        track(ActivityType.MEMORY_GAME, hour=11, minute=30)

        report = build_daily_report(engine, "patient_001", "Rose")

        assert "**Engagement Level:** Active" in report
        assert "**Total Interactions:** 5" in report
        assert "**Current Mood:** 🙂 good" in report
        assert "• Had 2 voice conversations" in report
        assert "• Completed 1 brain exercise" in report
        assert "• Medication taken ✓" in report
        assert "consider asking how they're feeling" not in report
        assert "Encourage a voice session" not in report
        assert "Suggest a brain game" not in report

    def test_recommendations(self, engine, track):
        track(ActivityType.APP_OPENED, hour=8)

        report = build_daily_report(engine, "patient_001")

        assert "**Engagement Level:** Moderate" in report
        assert "Today's Highlights" not in report
        assert "• No mood check-in today - consider asking how they're feeling" in report
        assert "• Encourage a voice session for social engagement" in report
        assert "• Suggest a brain game or puzzle" in report

    def test_unknown_mood_emoji(self, engine, track):
        track(ActivityType.MOOD_CHECKIN, {"mood": "sleepy"}, hour=8)
        assert "**Current Mood:** ❓ sleepy" in build_daily_report(engine, "patient_001")

    def test_only_patient_activities(self, engine, track):
        track(ActivityType.APP_OPENED, patient_id="patient_002", hour=8)
        assert "No activities recorded yet today" in build_daily_report(engine, "patient_001")
