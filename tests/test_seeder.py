"""
Unit tests for the demo data seeder.

These tests verify the shape of the seeded week: one mood check-in per
day, the deliberate exercise gap three days ago, the missed evening dose
yesterday, and that seeding swaps out the whole log.

Usage:
    pytest tests/test_seeder.py -v
"""
import pytest
from collections import Counter
from datetime import timedelta

from activity_tracker import ActivityType, build_demo_activities, day_key, seed_demo_activities
from activity_tracker.seeder import DEMO_MOODS


@pytest.fixture
def seeded(activity_log):
    """Seed the test log and return the seeded count."""
    return seed_demo_activities(activity_log, "patient_001")


class TestSeederShape:
    """Test the generated activity mix."""

    def test_seed_count(self, seeded, activity_log):
        assert seeded == 41
        assert len(activity_log.all()) == 41

    def test_type_counts(self, seeded, activity_log):
        counts = Counter(r.type for r in activity_log.all())

        assert counts == {
            "APP_OPENED": 7,
            "MOOD_CHECKIN": 7,
            "MEDICATION_TAKEN": 13,
            "COGNITIVE_EXERCISE": 6,
            "VOICE_SESSION": 4,
            "ARTICLE_READ": 4,
        }

    def test_one_mood_checkin_per_day(self, seeded, engine):
        checkins = [r for r in engine.recent(7, "patient_001") if r.type == "MOOD_CHECKIN"]

        assert len(checkins) == 7
        assert len({r.date for r in checkins}) == 7

    def test_mood_pattern(self, seeded, engine, clock):
        for days_ago, mood in enumerate(DEMO_MOODS):
            key = day_key(clock.start - timedelta(days=days_ago))
            moods = [
                r.metadata["mood"] for r in engine.for_date(clock.start - timedelta(days=days_ago))
                if r.type == "MOOD_CHECKIN"
            ]
            assert moods == [mood], key

    def test_exercise_gap(self, seeded, engine, clock):
        """Exactly one day (three days ago) has no brain exercise."""
        recent = engine.recent(7, "patient_001")
        days_without = [
            days_ago for days_ago in range(7)
            if not any(
                r.type == "COGNITIVE_EXERCISE"
                and r.date == day_key(clock.start - timedelta(days=days_ago))
                for r in recent
            )
        ]

        assert days_without == [3]

    def test_missed_evening_dose(self, seeded, engine, clock):
        yesterday = engine.for_date(clock.start - timedelta(days=1), "patient_001")
        meds = [r for r in yesterday if r.type == "MEDICATION_TAKEN"]

        assert [r.metadata["medication"] for r in meds] == ["Morning medication"]

    def test_fixed_times(self, seeded, activity_log):
        times = {
            (r.type, r.moment.astimezone().strftime("%H:%M"))
            for r in activity_log.all()
        }

        assert times == {
            ("APP_OPENED", "08:30"),
            ("MOOD_CHECKIN", "08:35"),
            ("MEDICATION_TAKEN", "09:00"),
            ("COGNITIVE_EXERCISE", "10:15"),
            ("VOICE_SESSION", "14:30"),
            ("ARTICLE_READ", "15:45"),
            ("MEDICATION_TAKEN", "20:00"),
        }

    def test_demo_ids_and_patient(self, seeded, activity_log):
        records = activity_log.all()

        assert all(r.id.startswith("demo_") for r in records)
        assert {r.patient_id for r in records} == {"patient_001"}
        assert len({r.id for r in records}) == len(records)


class TestSeederLog:
    """Test how seeding replaces the stored log."""

    def test_replaces_existing_log(self, activity_log):
        existing = activity_log.append(ActivityType.FAMILY_CALL, None, "patient_002")

        seed_demo_activities(activity_log, "patient_001")

        assert existing.id not in {r.id for r in activity_log.all()}

    def test_sorted_most_recent_first(self, seeded, activity_log):
        moments = [r.moment for r in activity_log.all()]
        assert moments == sorted(moments, reverse=True)

    def test_build_without_log(self, noon):
        records = build_demo_activities("patient_009", noon)
        assert len(records) == 41
        assert records[0].date == day_key(noon)


class TestSeededSummaries:
    """Test summaries over the seeded week."""

    def test_today_summary(self, seeded, engine):
        summary = engine.daily_summary("patient_001")

        assert summary.total_activities == 7
        assert summary.engagement_score == 70
        assert summary.alerts == []
        assert summary.latest_mood == DEMO_MOODS[0]
        assert summary.highlights == [
            "Had 1 voice conversation",
            "Completed 1 brain exercise",
            "Took medication 2 times",
            "Read 1 article",
        ]

    def test_weekly_summary(self, seeded, engine):
        summary = engine.weekly_summary("patient_001")

        assert summary.total_activities == 41
        assert summary.average_per_day == 6
        assert summary.most_active_period == "morning"
        assert len(summary.mood_checkins) == 7
        assert summary.top_categories[0].category == "care"
        assert [c.count for c in summary.top_categories] == [13, 7, 7]
        assert sum(summary.daily_breakdown.values()) == 41
