"""
Unit tests for the demo seeding script.

Usage:
    pytest tests/test_seed_script.py -v
"""
import sys
from pathlib import Path

# Add scripts directory to path for importing the CLI
scripts_path = Path(__file__).parent.parent / "scripts"
sys.path.insert(0, str(scripts_path))

from seed_demo_activities import build_parser, main  # noqa: E402

from activity_tracker import ActivityLog, SQLiteStorage  # noqa: E402


class TestSeedScript:
    """Test the seed CLI against a temporary database."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ACTIVITY_DEMO_PATIENT_ID", raising=False)
        args = build_parser().parse_args([])
        assert args.patient_id == "patient_001"
        assert args.clear is False

    def test_defaults_follow_environment(self, tmp_path, monkeypatch):
        """The CLI seeds the same store the dashboard API reads."""
        monkeypatch.setenv("ACTIVITY_DATA_PATH", str(tmp_path))
        monkeypatch.setenv("ACTIVITY_STORAGE_KEY", "demo_activities")

        assert main([]) == 0

        storage = SQLiteStorage(str(tmp_path / "activities.db"))
        assert len(ActivityLog(storage, storage_key="demo_activities").all()) == 41
        assert ActivityLog(storage).all() == []

    def test_seed(self, tmp_path, capsys):
        db_path = str(tmp_path / "activities.db")

        assert main(["--db-path", db_path, "--patient-id", "patient_003"]) == 0

        records = ActivityLog(SQLiteStorage(db_path)).all()
        assert len(records) == 41
        assert {r.patient_id for r in records} == {"patient_003"}
        assert "Seeded 41 demo activities for patient_003" in capsys.readouterr().out

    def test_clear(self, tmp_path):
        db_path = str(tmp_path / "activities.db")
        main(["--db-path", db_path])

        assert main(["--db-path", db_path, "--clear"]) == 0
        assert ActivityLog(SQLiteStorage(db_path)).all() == []
