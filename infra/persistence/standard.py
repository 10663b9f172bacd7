from __future__ import annotations

from infra.config import StoreSettings, load_store_settings

from .sqlite_key_value_store import SQLiteKeyValueStore

_standard: SQLiteKeyValueStore | None = None


def standard_store(settings: StoreSettings | None = None) -> SQLiteKeyValueStore:
    """Return the process-wide store, opening it on first use.

    ``settings`` only matters for the call that opens the store; later
    calls return the same instance regardless.
    """
    global _standard
    if _standard is None:
        resolved = settings or load_store_settings()
        _standard = SQLiteKeyValueStore(db_path=resolved.db_path, suite=resolved.suite)
    return _standard


def reset_standard_store() -> None:
    global _standard
    if _standard is not None:
        _standard.close()
    _standard = None
