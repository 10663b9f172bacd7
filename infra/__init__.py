"""Infrastructure adapters: concrete implementations of domain ports."""

from .config import StoreSettings, load_store_settings
from .defaults import KeyedDefault, KeyedDefaultAccessor
from .persistence import SQLiteKeyValueStore, reset_standard_store, standard_store
from .runtime import StructuredLogger

__all__ = [
    "StoreSettings",
    "load_store_settings",
    "KeyedDefaultAccessor",
    "KeyedDefault",
    "SQLiteKeyValueStore",
    "standard_store",
    "reset_standard_store",
    "StructuredLogger",
]
