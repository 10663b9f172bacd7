"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_key_value_store import InMemoryKeyValueStore
from .fake_runtime import InMemoryLogger

__all__ = [
    "InMemoryKeyValueStore",
    "InMemoryLogger",
]
