from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union, overload

from domain.models import key_name
from domain.ports import KeyValueStorePort, LoggerPort
from infra.persistence import standard_store

V = TypeVar("V")

TypeSpec = Union[type, tuple[type, ...]]

_MISMATCH = object()


class KeyedDefaultAccessor(Generic[V]):
    """
    Typed view of a single entry in a ``KeyValueStorePort``.

    Reads fall back to ``default`` when the entry is missing or holds a value
    of the wrong type. Writing ``None`` removes the entry instead of storing
    it, so an optional property reads back its default after being cleared.

    ``default`` may be a zero-argument callable; it is called once, here.
    Every read that falls back hands out a shallow copy of the default, so
    mutating a returned list or dict never changes later reads.
    ``value_type`` is inferred from the default when omitted. With neither a
    type nor a non-``None`` default, any stored value is returned as-is.

    When ``store`` is omitted the process-wide ``standard_store()`` is used,
    resolved on first access so that ``bind`` can attach another store
    before anything is opened.
    """

    def __init__(
        self,
        key: str | Enum,
        store: KeyValueStorePort | None = None,
        default: V | Callable[[], V] | None = None,
        *,
        value_type: TypeSpec | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        self._key = key_name(key)
        self._store = store
        self._rebound = False
        self._default: V = default() if callable(default) else default  # type: ignore[assignment]
        if value_type is None and self._default is not None:
            value_type = type(self._default)
        self._value_type = value_type
        self._logger = logger

    def __repr__(self) -> str:
        return f"KeyedDefaultAccessor(key={self._key!r}, default={self._default!r})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def default_value(self) -> V:
        return copy.copy(self._default)

    @property
    def store(self) -> KeyValueStorePort:
        if self._store is None:
            self._store = standard_store()
        return self._store

    def bind(self, store: KeyValueStorePort) -> None:
        """Attach the owner's store after construction. Allowed once."""
        if self._rebound:
            raise RuntimeError(f"Store for key {self._key!r} has already been rebound")
        self._store = store
        self._rebound = True

    def read(self) -> V:
        raw = self.store.get(self._key)
        if raw is None:
            return self.default_value
        value = self._coerce(raw)
        if value is _MISMATCH:
            if self._logger is not None:
                self._logger.warning(
                    "Stored value has unexpected type; using default",
                    key=self._key,
                    expected=_type_label(self._value_type),
                    actual=type(raw).__name__,
                )
            return self.default_value
        return value  # type: ignore[return-value]

    def write(self, new_value: V | None) -> None:
        if new_value is None:
            self.remove()
        else:
            self.store.set(self._key, new_value)

    def remove(self) -> None:
        self.store.remove(self._key)

    @property
    def value(self) -> V:
        return self.read()

    @value.setter
    def value(self, new_value: V | None) -> None:
        self.write(new_value)

    @value.deleter
    def value(self) -> None:
        self.remove()

    def _coerce(self, raw: Any) -> Any:
        if self._value_type is None:
            return raw
        types = self._value_type if isinstance(self._value_type, tuple) else (self._value_type,)
        # bool subclasses int, but a stored flag is never a valid count.
        if isinstance(raw, bool) and not any(t in (bool, object) for t in types):
            return _MISMATCH
        if isinstance(raw, types):
            return raw
        # JSON-backed stores hand back enums as their values and tuples as lists.
        for expected in types:
            if isinstance(expected, type) and issubclass(expected, Enum):
                try:
                    return expected(raw)
                except ValueError:
                    continue
            if expected is tuple and isinstance(raw, list):
                return tuple(raw)
            if expected is float and isinstance(raw, int):
                try:
                    return float(raw)
                except OverflowError:
                    continue
        return _MISMATCH


class KeyedDefault(Generic[V]):
    """
    Class-level declaration of a store-backed attribute.

    Each owner instance gets its own ``KeyedDefaultAccessor``, built on first
    access from the instance's ``store_attr`` attribute and rebuilt whenever
    that attribute points at another store. Reading before the owner assigns
    its store therefore does not pin the standard one. The owner only has to
    assign its store in ``__init__``::

        class SessionSettings:
            count = KeyedDefault(SettingKey.SESSION_COUNT, default=1)

            def __init__(self, store):
                self.store = store
    """

    _CACHE_ATTR = "_keyed_default_accessors"

    def __init__(
        self,
        key: str | Enum,
        default: V | Callable[[], V] | None = None,
        *,
        value_type: TypeSpec | None = None,
        store_attr: str = "store",
        logger_attr: str | None = "logger",
    ) -> None:
        self._key = key_name(key)
        if callable(default):
            self._default_supplier: Callable[[], V | None] = default
        else:
            self._default_supplier = lambda: copy.copy(default)
        self._value_type = value_type
        self._store_attr = store_attr
        self._logger_attr = logger_attr
        self._name = self._key

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    @property
    def key(self) -> str:
        return self._key

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> "KeyedDefault[V]":
        ...

    @overload
    def __get__(self, instance: object, owner: type | None = None) -> V:
        ...

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self._accessor_for(instance).read()

    def __set__(self, instance: object, value: V | None) -> None:
        self._accessor_for(instance).write(value)

    def __delete__(self, instance: object) -> None:
        self._accessor_for(instance).remove()

    @staticmethod
    def accessor(instance: object, name: str) -> KeyedDefaultAccessor[Any]:
        """Return the accessor behind ``instance.<name>``."""
        descriptor = getattr(type(instance), name, None)
        if not isinstance(descriptor, KeyedDefault):
            raise TypeError(f"{type(instance).__name__}.{name} is not a KeyedDefault attribute")
        return descriptor._accessor_for(instance)

    def _accessor_for(self, instance: object) -> KeyedDefaultAccessor[V]:
        cache: dict[str, tuple[Any, KeyedDefaultAccessor[Any]]] = instance.__dict__.setdefault(
            self._CACHE_ATTR, {},
        )
        owner_store = getattr(instance, self._store_attr, None)
        cached = cache.get(self._name)
        if cached is not None:
            built_with, accessor = cached
            if owner_store is None or owner_store is built_with:
                return accessor
        logger = getattr(instance, self._logger_attr, None) if self._logger_attr else None
        accessor = KeyedDefaultAccessor(
            self._key,
            store=owner_store,
            default=self._default_supplier,
            value_type=self._value_type,
            logger=logger,
        )
        cache[self._name] = (owner_store, accessor)
        return accessor


def _type_label(value_type: TypeSpec | None) -> str:
    if value_type is None:
        return "any"
    if isinstance(value_type, tuple):
        return " | ".join(t.__name__ for t in value_type)
    return value_type.__name__
