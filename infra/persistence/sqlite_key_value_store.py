from __future__ import annotations

import json
import sqlite3
from typing import Any, Sequence

_DEFAULT_SUITE = "standard"


class SQLiteKeyValueStore:
    """
    SQLite-backed implementation of ``KeyValueStorePort``.

    Values are stored as JSON text, one row per ``(suite, key)``. Several
    suites can share a database file without seeing each other's entries.
    """

    _SCHEMA_SQL = """\
    CREATE TABLE IF NOT EXISTS entries (
        suite TEXT NOT NULL,
        key   TEXT NOT NULL,
        value TEXT NOT NULL,
        PRIMARY KEY (suite, key)
    );
    """

    def __init__(
        self,
        db_path: str = ":memory:",
        suite: str = _DEFAULT_SUITE,
    ) -> None:
        self._conn = sqlite3.connect(db_path)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.executescript(self._SCHEMA_SQL)
        self._suite = suite

    def __enter__(self) -> "SQLiteKeyValueStore":
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    @property
    def suite(self) -> str:
        return self._suite

    def get(self, key: str) -> Any | None:
        row = self._conn.execute(
            "SELECT value FROM entries WHERE suite = ? AND key = ?",
            (self._suite, key),
        ).fetchone()
        if row is None:
            return None
        try:
            return json.loads(row[0])
        except json.JSONDecodeError:
            return None

    def set(self, key: str, value: Any) -> None:
        if value is None:
            self.remove(key)
            return
        # json.dumps raises TypeError for unsupported values before anything is written.
        encoded = json.dumps(value, sort_keys=True)
        self._conn.execute(
            "INSERT INTO entries (suite, key, value) VALUES (?, ?, ?) "
            "ON CONFLICT(suite, key) DO UPDATE SET value=excluded.value",
            (self._suite, key, encoded),
        )
        self._conn.commit()

    def remove(self, key: str) -> None:
        self._conn.execute(
            "DELETE FROM entries WHERE suite = ? AND key = ?",
            (self._suite, key),
        )
        self._conn.commit()

    def keys(self) -> Sequence[str]:
        rows = self._conn.execute(
            "SELECT key FROM entries WHERE suite = ? ORDER BY key",
            (self._suite,),
        ).fetchall()
        return [row[0] for row in rows]

    def close(self) -> None:
        self._conn.close()
