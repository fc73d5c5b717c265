"""
Activity Log Store.

Append-only, size-bounded log of activity events kept most-recent-first
under a single storage key. Durability is best effort: reads never raise
and writes degrade under quota pressure instead of failing the caller.
"""

import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .activity_types import ActivityType, TypeInfo, resolve_type_info, type_name
from .storage import ActivityStorage, InMemoryStorage, StorageError, StorageQuotaError

logger = logging.getLogger(__name__)

STORAGE_KEY = "caregiver_activities"
MAX_ACTIVITIES = 500
QUOTA_TRIM_SIZE = 100
DEFAULT_PATIENT_ID = "default"

Clock = Callable[[], datetime]
MetadataValue = Union[str, int, float, bool, None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def day_key(moment: Union[datetime, date]) -> str:
    """
    Calendar-day bucket for a moment, as an ISO date in local time.

    Aware datetimes are converted to the local zone first; plain dates
    are used as they are.
    """
    if isinstance(moment, datetime):
        return moment.astimezone().date().isoformat()
    return moment.isoformat()


def parse_timestamp(value: str) -> datetime:
    """Parse a stored ISO 8601 timestamp into an aware datetime."""
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def new_activity_id(moment: datetime, prefix: str = "") -> str:
    """Build a record id from the creation time plus a random suffix."""
    return f"{prefix}{int(moment.timestamp() * 1000)}_{uuid.uuid4().hex[:9]}"


def normalize_metadata(metadata: Any) -> Dict[str, MetadataValue]:
    """
    Copy metadata into a flat mapping of JSON scalars.

    Keys become strings. Values that are not str, int, float, bool or
    None (nested dicts, lists, datetimes) are kept as their string form.
    Anything other than a mapping reads as empty metadata.
    """
    if not isinstance(metadata, dict):
        return {}
    return {
        str(key): value if value is None or isinstance(value, (str, int, float, bool)) else str(value)
        for key, value in metadata.items()
    }


@dataclass(frozen=True)
class ActivityRecord:
    """A single logged activity."""

    id: str
    type: str
    type_info: TypeInfo
    timestamp: str
    date: str
    patient_id: str = DEFAULT_PATIENT_ID
    metadata: Dict[str, MetadataValue] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        activity_type: Union[ActivityType, str],
        moment: datetime,
        metadata: Optional[Dict[str, MetadataValue]] = None,
        patient_id: Optional[str] = None,
        id_prefix: str = "",
    ) -> "ActivityRecord":
        """Build a record stamped at `moment`, snapshotting its TypeInfo."""
        return cls(
            id=new_activity_id(moment, id_prefix),
            type=type_name(activity_type),
            type_info=resolve_type_info(activity_type),
            timestamp=moment.astimezone(timezone.utc).isoformat(),
            date=day_key(moment),
            patient_id=patient_id or DEFAULT_PATIENT_ID,
            metadata=normalize_metadata(metadata),
        )

    @property
    def moment(self) -> datetime:
        return parse_timestamp(self.timestamp)

    @property
    def category(self) -> str:
        return self.type_info.category.value

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "type": self.type,
            "type_info": self.type_info.to_dict(),
            "metadata": dict(self.metadata),
            "patient_id": self.patient_id,
            "timestamp": self.timestamp,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActivityRecord":
        """Rebuild a record from its persisted form, keeping its TypeInfo snapshot."""
        type_info = data.get("type_info")
        timestamp = str(data["timestamp"])
        parse_timestamp(timestamp)
        return cls(
            id=str(data["id"]),
            type=str(data["type"]),
            type_info=(
                TypeInfo.from_dict(type_info)
                if isinstance(type_info, dict)
                else resolve_type_info(data["type"])
            ),
            timestamp=timestamp,
            date=str(data["date"]),
            patient_id=str(data.get("patient_id") or DEFAULT_PATIENT_ID),
            metadata=normalize_metadata(data.get("metadata")),
        )


class ActivityLog:
    """
    Durable, bounded, most-recent-first log of activity records.

    The log is stored as one JSON list under `storage_key`. Appends
    prepend the new record, placing it after any records stamped later
    than now, and evict the oldest entries beyond `max_activities`. When the backend reports quota exhaustion, the
    log is cut to the most recent `quota_trim_size` entries and written
    once more; if that also fails the write is dropped.

    Multi-process deployments need a backend that makes the
    read-modify-write in append atomic; concurrent writers otherwise
    race and can lose records.
    """

    def __init__(
        self,
        storage: Optional[ActivityStorage] = None,
        storage_key: str = STORAGE_KEY,
        max_activities: int = MAX_ACTIVITIES,
        quota_trim_size: int = QUOTA_TRIM_SIZE,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the activity log.

        Args:
            storage: Backend holding the serialized log (defaults to in-memory)
            storage_key: Key the whole log is stored under
            max_activities: Retention cap
            quota_trim_size: Entries kept when retrying after a quota error
            clock: Callable returning the current aware datetime
        """
        self.storage = storage if storage is not None else InMemoryStorage()
        self.storage_key = storage_key
        self.max_activities = max_activities
        self.quota_trim_size = quota_trim_size
        self.clock = clock or utc_now

    def now(self) -> datetime:
        return self.clock()

    def all(self) -> List[ActivityRecord]:
        """
        Return every record, most recent first.

        A missing, unreadable or unparseable payload reads as an empty
        log. Individual malformed entries are skipped.
        """
        try:
            raw = self.storage.get(self.storage_key)
        except StorageError as e:
            logger.warning(f"[ACTIVITY] Storage unavailable, reading empty log: {e}")
            return []

        if not raw:
            return []

        try:
            entries = json.loads(raw)
        except ValueError:
            logger.warning("[ACTIVITY] Stored activity log is corrupt, reading empty log")
            return []

        if not isinstance(entries, list):
            logger.warning("[ACTIVITY] Stored activity log is not a list, reading empty log")
            return []

        records = []
        for entry in entries:
            try:
                records.append(ActivityRecord.from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.debug(f"[ACTIVITY] Skipping malformed entry: {entry!r}")
        return records

    def append(
        self,
        activity_type: Union[ActivityType, str],
        metadata: Optional[Dict[str, MetadataValue]] = None,
        patient_id: Optional[str] = None,
    ) -> ActivityRecord:
        """
        Log a new activity.

        Args:
            activity_type: Tag from ActivityType; unknown tags are accepted
            metadata: Coarse behavioural context, no health details
            patient_id: Whose activity this is (defaults to "default")

        Returns:
            The new record, even when it could not be persisted
        """
        records = self.all()
        taken = {r.id for r in records}

        record = ActivityRecord.create(activity_type, self.now(), metadata, patient_id)
        while record.id in taken:
            record = ActivityRecord.create(activity_type, self.now(), metadata, patient_id)

        # Goes to the front unless the log holds future-dated (seeded) records
        moment = record.moment
        position = next((i for i, r in enumerate(records) if r.moment <= moment), len(records))
        records.insert(position, record)
        self._write(records[: self.max_activities])

        logger.debug(
            f"[ACTIVITY] Tracked {record.type} for {record.patient_id} ({record.id})"
        )
        return record

    def replace(self, records: Iterable[ActivityRecord]) -> int:
        """
        Swap the whole log for `records` in a single write.

        Records are ordered most recent first and capped before writing.

        Returns:
            Number of records written
        """
        ordered = sorted(records, key=lambda r: r.moment, reverse=True)[: self.max_activities]
        self._write(ordered)
        return len(ordered)

    def clear(self) -> None:
        """Remove every record for every patient."""
        try:
            self.storage.remove(self.storage_key)
        except StorageError as e:
            logger.warning(f"[ACTIVITY] Failed to clear activity log: {e}")
            return
        logger.info("[ACTIVITY] Cleared activity log")

    def _write(self, records: List[ActivityRecord]) -> None:
        try:
            self.storage.set(self.storage_key, self._serialize(records))
            return
        except StorageQuotaError:
            logger.warning(
                f"[ACTIVITY] Storage full, keeping only the {self.quota_trim_size} "
                f"most recent activities"
            )
        except StorageError as e:
            logger.warning(f"[ACTIVITY] Dropping activity log write: {e}")
            return

        try:
            self.storage.set(self.storage_key, self._serialize(records[: self.quota_trim_size]))
        except StorageError as e:
            logger.warning(f"[ACTIVITY] Dropping activity log write after trim: {e}")

    @staticmethod
    def _serialize(records: List[ActivityRecord]) -> str:
        return json.dumps([r.to_dict() for r in records], ensure_ascii=False)
