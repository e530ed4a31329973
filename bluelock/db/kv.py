"""Persistent key-value storage for Blue Lock Terminal.

Wraps a string-keyed storage facility and (de)serializes JSON documents.
Every failure path degrades to the caller's default; nothing raises.
"""

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


STORAGE_KEYS = {
    "ego": "bluelock_ego",
    "trades": "bluelock_trades",
    "drills": "bluelock_drills",
    "settings": "bluelock_settings",
}


class KeyValueBackend(ABC):
    """Abstract string-keyed storage facility."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the stored value for a key.

        Returns:
            Stored string, or None if the key is absent.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        pass


class MemoryBackend(KeyValueBackend):
    """Dict-backed storage, used for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SQLiteBackend(KeyValueBackend):
    """SQLite-backed storage in a single key/value table."""

    def __init__(self, db_path: Path):
        """Initialize the backend.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._initialized = False

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection, creating the schema on first use."""
        if not self._initialized:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        if not self._initialized:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()
            self._initialized = True
        return conn

    def get(self, key: str) -> Optional[str]:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()


class JsonStorage:
    """Best-effort JSON document storage over a key-value backend.

    A backend of None means no persistent storage is available in this
    context: loads return defaults and saves are dropped.
    """

    def __init__(self, backend: Optional[KeyValueBackend]):
        self.backend = backend

    def load(self, key: str, default: Any) -> Any:
        """Load and deserialize the document stored under key.

        Args:
            key: Storage key.
            default: Value returned when the key is absent, the stored
                text is not valid JSON, or storage is unavailable.

        Returns:
            The deserialized document or default, unchanged.
        """
        if self.backend is None:
            return default
        try:
            stored = self.backend.get(key)
        except Exception as e:
            logger.warning("Storage read failed for %s: %s", key, e)
            return default
        if not stored:
            return default
        try:
            return json.loads(stored)
        except ValueError as e:
            logger.warning("Discarding unparseable data under %s: %s", key, e)
            return default

    def save(self, key: str, value: Any) -> None:
        """Serialize value and store it under key.

        Failures are logged and swallowed; in-memory state is never
        rolled back by the caller.
        """
        if self.backend is None:
            return
        try:
            payload = json.dumps(value)
            self.backend.set(key, payload)
        except Exception as e:
            logger.error("Storage error for %s: %s", key, e)
