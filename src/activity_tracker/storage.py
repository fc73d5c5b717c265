"""
Key-value storage backends for the activity log.

The whole log lives under a single key as one serialized value. Backends
are swappable: an in-memory store for tests and library callers, and a
SQLite file for the dashboard API. Every backend reports failures as
StorageError so callers never depend on a driver's exception types.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Dict, Generator, Optional

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a storage backend cannot complete an operation."""


class StorageQuotaError(StorageError):
    """Raised when a write would exceed the backend's size quota."""


class ActivityStorage:
    """
    Interface for a durable string key-value store.

    Implementations may raise StorageError from any operation; a write
    that would overflow the backend's capacity raises StorageQuotaError.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


def _payload_size(value: str) -> int:
    return len(value.encode("utf-8"))


class InMemoryStorage(ActivityStorage):
    """
    Process-local storage backed by a dict.

    Args:
        max_bytes: Optional quota across all keys, in UTF-8 bytes
    """

    def __init__(self, max_bytes: Optional[int] = None):
        self.max_bytes = max_bytes
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.max_bytes is not None:
            others = sum(_payload_size(v) for k, v in self._data.items() if k != key)
            needed = others + _payload_size(value)
            if needed > self.max_bytes:
                raise StorageQuotaError(
                    f"Writing {key!r} needs {needed} bytes, quota is {self.max_bytes}"
                )
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class SQLiteStorage(ActivityStorage):
    """
    SQLite-backed storage using a single kv_store table.

    Each operation opens its own connection, so the store can be shared
    by request handlers without holding a connection open.

    Args:
        db_path: Path to the SQLite database file
        max_bytes: Optional quota across all keys, in UTF-8 bytes
    """

    def __init__(self, db_path: str, max_bytes: Optional[int] = None):
        self.db_path = db_path
        self.max_bytes = max_bytes
        with self._connect() as conn:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS kv_store (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
            )
        logger.info(f"[STORAGE] Opened SQLite store at {db_path}")

    @contextmanager
    def _connect(self) -> Generator[sqlite3.Connection, None, None]:
        """Open a connection, commit on success and translate driver errors."""
        try:
            conn = sqlite3.connect(self.db_path, check_same_thread=False)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open {self.db_path}: {e}") from e
        try:
            with conn:
                yield conn
        except sqlite3.Error as e:
            raise StorageError(f"SQLite operation failed: {e}") from e
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        with self._connect() as conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self._connect() as conn:
            if self.max_bytes is not None:
                rows = conn.execute("SELECT value FROM kv_store WHERE key != ?", (key,)).fetchall()
                needed = sum(_payload_size(r[0]) for r in rows) + _payload_size(value)
                if needed > self.max_bytes:
                    raise StorageQuotaError(
                        f"Writing {key!r} needs {needed} bytes, quota is {self.max_bytes}"
                    )
            conn.execute(
                "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                (key, value),
            )

    def remove(self, key: str) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
