"""
Unit tests for the activity tracker agent tools.

These tests verify the tools return the standard status payloads and
report a configuration error when no activity log is supplied.

Usage:
    pytest tests/test_tools.py -v
"""
import pytest

from activity_tracker import ActivityType
from activity_tracker.tools import get_activity_summary, get_weekly_activity_report, log_activity


@pytest.fixture
def tool_config(activity_log):
    return {"activity_log": activity_log}


class TestActivityTools:
    """Test the async tool functions."""

    @pytest.mark.asyncio
    async def test_summary_without_log(self):
        result = await get_activity_summary("patient_001")
        assert result["status"] == "error"

    @pytest.mark.asyncio
    async def test_summary_with_mood(self, tool_config, track):
        track(ActivityType.MOOD_CHECKIN, {"mood": "great"}, hour=9)

        result = await get_activity_summary("patient_001", "Rose", tool_config=tool_config)

        assert result["status"] == "success"
        assert result["summary"]["latest_mood"] == "great"
        assert "Daily Report for Rose" in result["report"]
        assert result["message"] == "1 activities today, mood great"

    @pytest.mark.asyncio
    async def test_summary_without_mood(self, tool_config):
        result = await get_activity_summary("patient_001", tool_config=tool_config)
        assert result["message"] == "0 activities today, no mood check-in yet"

    @pytest.mark.asyncio
    async def test_weekly_report(self, tool_config, track):
        track(ActivityType.MOOD_CHECKIN, {"mood": "good"}, hour=9, days_ago=1)
        track(ActivityType.MOOD_CHECKIN, {"mood": "great"}, hour=18)

        result = await get_weekly_activity_report("patient_001", tool_config=tool_config)

        assert result["status"] == "success"
        assert result["summary"]["total_activities"] == 2
        assert result["mood_trend"] == "improving"

    @pytest.mark.asyncio
    async def test_log_activity(self, tool_config, activity_log):
        result = await log_activity(
            "VOICE_SESSION", "patient_001", {"duration": "6 min"}, tool_config=tool_config
        )

        assert result["status"] == "success"
        assert result["message"] == "Logged Voice Conversation for patient_001"
        assert activity_log.all()[0].id == result["activity"]["id"]

    @pytest.mark.asyncio
    async def test_log_activity_rejects_other_config(self):
        result = await log_activity("VOICE_SESSION", "patient_001", tool_config={"activity_log": "nope"})
        assert result["status"] == "error"
