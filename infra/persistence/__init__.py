"""SQLite-backed persistence adapters for the key-value store port."""

from .sqlite_key_value_store import SQLiteKeyValueStore
from .standard import reset_standard_store, standard_store

__all__ = [
    "SQLiteKeyValueStore",
    "standard_store",
    "reset_standard_store",
]
