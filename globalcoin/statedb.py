"""A persistent byte-keyed key/value store kept in a directory."""

from __future__ import annotations

import os
import sqlite3
import threading
from pathlib import Path

_DB_FILENAME = "state.sqlite3"


class StateDb:
    """Key/value store mapping bytes to bytes, persisted under ``path``."""

    def __init__(self, path: str | os.PathLike) -> None:
        self._path = Path(path)
        self._path.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._connection: sqlite3.Connection | None = sqlite3.connect(
            self._path / _DB_FILENAME,
            isolation_level=None,
            check_same_thread=False,
        )
        self._connection.execute("PRAGMA journal_mode=WAL")
        self._connection.execute(
            "CREATE TABLE IF NOT EXISTS kv (key BLOB PRIMARY KEY, value BLOB NOT NULL)"
        )

    @property
    def path(self) -> str:
        return str(self._path)

    def _conn(self) -> sqlite3.Connection:
        if self._connection is None:
            raise sqlite3.ProgrammingError("StateDb is closed")
        return self._connection

    def insert(self, key: bytes, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        with self._lock:
            self._conn().execute(
                "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                (bytes(key), bytes(value)),
            )

    def get(self, key: bytes) -> bytes | None:
        """Return the value stored under ``key``, or None."""
        with self._lock:
            row = self._conn().execute(
                "SELECT value FROM kv WHERE key = ?", (bytes(key),)
            ).fetchone()
        return None if row is None else bytes(row[0])

    def remove(self, key: bytes) -> None:
        """Delete ``key`` if present."""
        with self._lock:
            self._conn().execute("DELETE FROM kv WHERE key = ?", (bytes(key),))

    def flush(self) -> None:
        """Make all written data durable on disk."""
        with self._lock:
            self._conn().execute("PRAGMA wal_checkpoint(FULL)")

    def close(self) -> None:
        """Flush and release the underlying storage; further use raises."""
        with self._lock:
            if self._connection is None:
                return
            self._connection.execute("PRAGMA wal_checkpoint(FULL)")
            self._connection.close()
            self._connection = None

    def __enter__(self) -> StateDb:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()