"""SQLite data store for TradePilot."""

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from tradepilot.exceptions import StorageError
from tradepilot.models import TradeEntry

logger = logging.getLogger(__name__)

JOURNAL_KEY = "journal.entries"


class DataStore:
    """SQLite-backed key-value store."""

    REQUIRED_TABLES = [
        "kv",
    ]

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise StorageError(f"Failed to list tables: {e}") from e
        finally:
            conn.close()

    # ==================== Key-Value ====================

    def set_value(self, key: str, value: str) -> None:
        """Store a value, replacing any previous value for the key.

        Args:
            key: Storage key.
            value: Serialized value.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT OR REPLACE INTO kv (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                (key, value, datetime.now().isoformat()),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write key '{key}': {e}") from e
        finally:
            conn.close()
        logger.debug("Stored %d bytes under '%s'", len(value), key)

    def get_value(self, key: str) -> Optional[str]:
        """Get a stored value.

        Args:
            key: Storage key.

        Returns:
            The value if present, None otherwise.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read key '{key}': {e}") from e
        finally:
            conn.close()

    def delete_value(self, key: str) -> None:
        """Delete a stored value.

        Args:
            key: Storage key.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to delete key '{key}': {e}") from e
        finally:
            conn.close()

    def keys(self) -> list[str]:
        """Get all stored keys, sorted."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT key FROM kv ORDER BY key")
            return [row["key"] for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise StorageError(f"Failed to list keys: {e}") from e
        finally:
            conn.close()

    # ==================== Stats ====================

    def get_stats(self) -> dict:
        """Get database statistics.

        Returns:
            Dictionary with table record counts.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            stats = {}
            for table in self.REQUIRED_TABLES:
                cursor.execute(f"SELECT COUNT(*) as count FROM {table}")
                stats[table] = cursor.fetchone()["count"]
            return stats
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read stats: {e}") from e
        finally:
            conn.close()


class JournalRepository(ABC):
    """Persistence contract for the journal entry collection.

    ``load`` is called once when a view opens; ``save`` once per mutation
    with the complete new collection.
    """

    @abstractmethod
    def load(self) -> list[TradeEntry]:
        """Load all entries, newest first."""
        pass

    @abstractmethod
    def save(self, entries: Sequence[TradeEntry]) -> None:
        """Replace the stored collection with ``entries``."""
        pass


class InMemoryJournalRepository(JournalRepository):
    """List-backed repository."""

    def __init__(self, entries: Optional[Sequence[TradeEntry]] = None):
        self._entries = list(entries or [])
        self.save_count = 0

    def load(self) -> list[TradeEntry]:
        return list(self._entries)

    def save(self, entries: Sequence[TradeEntry]) -> None:
        self._entries = list(entries)
        self.save_count += 1


class SqliteJournalRepository(JournalRepository):
    """Stores the journal as a JSON list under one key of a DataStore."""

    def __init__(self, store: DataStore, key: str = JOURNAL_KEY):
        """Initialize the repository.

        Args:
            store: Backing key-value store.
            key: Key holding the serialized entries.
        """
        self._store = store
        self._key = key

    def load(self) -> list[TradeEntry]:
        raw = self._store.get_value(self._key)
        if raw is None:
            return []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Journal data under '{self._key}' is not valid JSON") from e
        if not isinstance(records, list):
            raise StorageError(f"Journal data under '{self._key}' is not a list")

        entries = []
        for record in records:
            try:
                entries.append(TradeEntry.model_validate(record))
            except ValidationError as e:
                logger.warning("Skipping unreadable journal record: %s", e.errors()[:1])
        logger.debug("Loaded %d journal entries", len(entries))
        return entries

    def save(self, entries: Sequence[TradeEntry]) -> None:
        payload = json.dumps([entry.to_record() for entry in entries])
        self._store.set_value(self._key, payload)
        logger.info("Saved %d journal entries", len(entries))
