from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class KeyValueStorePort(Protocol):
    """
    String-keyed persistence holding heterogeneous values.

    ``get`` returns ``None`` for a missing key and ``remove`` of a missing
    key is a no-op. Implementations never store ``None`` as a value.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> Sequence[str]:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "KeyValueStorePort",
    "LoggerPort",
]
