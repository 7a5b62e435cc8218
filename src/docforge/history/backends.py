"""
Key-value backends for version history.

The history state machine only needs two operations:

    get(key) -> str | None
    put(key, value) -> None

Three implementations:
  - InMemoryKeyValueStore: dict-backed, for tests and short-lived sessions
  - JsonFileKeyValueStore: one JSON file per key in a directory
  - SqliteKeyValueStore: single SQLite table, WAL mode, connection per call

Backends raise StorageError for I/O failures; callers decide what to do.

Keep this file under 200 lines.
"""

import logging
import os
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable
from urllib.parse import quote

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when a backend cannot read or write a value."""

    pass


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal persistence interface used by VersionStore."""

    def get(self, key: str) -> str | None: ...

    def put(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    """Dict-backed store. Contents vanish with the instance."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)


class JsonFileKeyValueStore:
    """
    One file per key under a directory.

    Keys are percent-encoded into file names, so "history:proj-1" becomes
    "history%3Aproj-1.json". Writes go to a temp file first and are moved
    into place, so a crash never leaves a half-written record.
    """

    def __init__(self, directory: Path):
        self._dir = Path(directory)

    def _path(self, key: str) -> Path:
        return self._dir / f"{quote(key, safe='')}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {path.name}: {e}") from e

    def put(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            raise StorageError(f"Cannot write {path.name}: {e}") from e
        logger.debug(f"[JsonFileStore] Wrote {len(value)} chars to {path.name}")


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def get_connection(db_path: Path) -> sqlite3.Connection:
    """Get a SQLite connection with WAL mode enabled."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    conn.row_factory = sqlite3.Row
    return conn


class SqliteKeyValueStore:
    """
    Key-value table in a SQLite file.

    Usage:
        store = SqliteKeyValueStore(Path("data/docforge.db"))
        store.put("history:proj-1", payload)
        payload = store.get("history:proj-1")
    """

    def __init__(self, db_path: Path):
        self._db_path = Path(db_path)
        self._initialize()

    def _initialize(self) -> None:
        try:
            conn = get_connection(self._db_path)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open {self._db_path}: {e}") from e
        try:
            conn.executescript(SCHEMA_SQL)
            conn.commit()
            logger.info(f"[SqliteStore] Initialized at {self._db_path}")
        except sqlite3.Error as e:
            raise StorageError(f"Cannot initialize {self._db_path}: {e}") from e
        finally:
            conn.close()

    def get(self, key: str) -> str | None:
        try:
            conn = get_connection(self._db_path)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open {self._db_path}: {e}") from e
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
            return row["value"] if row else None
        except sqlite3.Error as e:
            raise StorageError(f"Cannot read {key}: {e}") from e
        finally:
            conn.close()

    def put(self, key: str, value: str) -> None:
        try:
            conn = get_connection(self._db_path)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open {self._db_path}: {e}") from e
        try:
            conn.execute(
                """INSERT INTO kv_store (key, value, updated_at)
                   VALUES (?, ?, ?)
                   ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value, updated_at = excluded.updated_at""",
                (key, value, datetime.now().isoformat()),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot write {key}: {e}") from e
        finally:
            conn.close()
