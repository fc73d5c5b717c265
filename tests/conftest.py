"""
Pytest fixtures for Activity Tracker tests.
"""
import sys
import pytest
from datetime import datetime, timedelta
from pathlib import Path
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import activity_tracker.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from activity_tracker import ActivityLog, InMemoryStorage, SummaryEngine  # noqa: E402

# Load environment variables
load_dotenv()


class FrozenClock:
    """Controllable clock returning aware local datetimes."""

    def __init__(self, moment: datetime):
        self.start = moment
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment

    def set(self, moment: datetime) -> None:
        self.moment = moment

    def advance(self, **kwargs) -> datetime:
        self.moment = self.moment + timedelta(**kwargs)
        return self.moment

    def at(self, hour: int, minute: int = 0, days_ago: int = 0) -> datetime:
        """Move to a local wall-clock time relative to the starting day."""
        day = self.start.date() - timedelta(days=days_ago)
        self.moment = datetime(day.year, day.month, day.day, hour, minute).astimezone()
        return self.moment


@pytest.fixture
def noon():
    """Local noon today as an aware datetime."""
    now = datetime.now()
    return datetime(now.year, now.month, now.day, 12, 0).astimezone()


@pytest.fixture
def clock(noon):
    """Frozen clock starting at local noon today."""
    return FrozenClock(noon)


@pytest.fixture
def storage():
    """Empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def activity_log(storage, clock):
    """Activity log over in-memory storage with a frozen clock."""
    return ActivityLog(storage, clock=clock)


@pytest.fixture
def engine(activity_log):
    """Summary engine over the test activity log."""
    return SummaryEngine(activity_log)


@pytest.fixture
def track(activity_log, clock):
    """
    Factory fixture to log an activity at a given local time.

    Returns a function accepting (type, metadata, patient_id, hour,
    minute, days_ago) that appends and returns the record.
    """
    def _track(activity_type, metadata=None, patient_id="patient_001",
               hour=None, minute=0, days_ago=0):
        if hour is not None:
            clock.at(hour, minute, days_ago)
        return activity_log.append(activity_type, metadata, patient_id)

    return _track
