from __future__ import annotations

from typing import Any, Sequence

from domain import KeyValueStorePort


class InMemoryKeyValueStore:
    """Simple in-memory implementation of ``KeyValueStorePort``."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self.entries: dict[str, Any] = dict(initial or {})
        self.removed: list[str] = []

    def get(self, key: str) -> Any | None:
        return self.entries.get(key)

    def set(self, key: str, value: Any) -> None:
        if value is None:
            raise ValueError(f"Refusing to store None for {key!r}")
        self.entries[key] = value

    def remove(self, key: str) -> None:
        self.removed.append(key)
        self.entries.pop(key, None)

    def keys(self) -> Sequence[str]:
        return sorted(self.entries)


_store_protocol_check: KeyValueStorePort
_store_protocol_check = InMemoryKeyValueStore()
