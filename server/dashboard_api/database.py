"""Activity store wiring for the dashboard API."""
import logging
from typing import Optional

from fastapi import Depends

from activity_tracker import ActivityLog, InMemoryStorage, SQLiteStorage, StorageError, SummaryEngine

from .config import get_settings

log = logging.getLogger(__name__)


class DatabaseManager:
    """
    Builds the activity log once per process on top of the SQLite store.

    Route handlers receive the log and summary engine through FastAPI
    dependencies, so tests can swap in an in-memory log. If the SQLite
    file cannot be opened the log runs on in-memory storage for the
    life of the process.
    """

    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self._activity_log: Optional[ActivityLog] = None

    def get_activity_log(self) -> ActivityLog:
        """Get the process-wide activity log, opening the store on first use."""
        if self._activity_log is None:
            try:
                storage = SQLiteStorage(
                    self.settings.activity_db_path,
                    max_bytes=self.settings.storage_max_bytes,
                )
                log.info(f"Activity log ready at {self.settings.activity_db_path}")
            except StorageError as e:
                log.error(f"Activity store unavailable, activities will not persist: {e}")
                storage = InMemoryStorage(max_bytes=self.settings.storage_max_bytes)
            self._activity_log = ActivityLog(
                storage,
                storage_key=self.settings.storage_key,
                max_activities=self.settings.max_activities,
                quota_trim_size=self.settings.quota_trim_size,
            )
        return self._activity_log


# Singleton instance
db_manager = DatabaseManager()


def get_activity_log() -> ActivityLog:
    """FastAPI dependency returning the activity log."""
    return db_manager.get_activity_log()


def get_summary_engine(activity_log: ActivityLog = Depends(get_activity_log)) -> SummaryEngine:
    """FastAPI dependency returning a summary engine over the activity log."""
    return SummaryEngine(activity_log)
