"""Typed, default-backed accessors over key-value stores."""

from .keyed_default import KeyedDefault, KeyedDefaultAccessor

__all__ = ["KeyedDefaultAccessor", "KeyedDefault"]
