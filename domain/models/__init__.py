from __future__ import annotations

from enum import Enum


class SettingKey(str, Enum):
    """
    Known storage keys for user-facing settings.

    Values are the exact strings written to the backing store, so renaming
    a member is safe but changing its value orphans existing entries.
    """

    SESSION_COUNT = "sessionCount"
    DID_SHOW_APP_ONBOARDING = "didShowAppOnboarding"
    DID_SHOW_FEATURE_ONBOARDING = "didShowFeatureOnboarding"


def key_name(key: str | Enum) -> str:
    """Canonical string form of a raw or enum-valued key."""
    if isinstance(key, Enum):
        return str(key.value)
    return key


__all__ = ["SettingKey", "key_name"]
