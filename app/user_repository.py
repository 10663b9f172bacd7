from __future__ import annotations

from domain.models import SettingKey
from domain.ports import KeyValueStorePort, LoggerPort
from infra.defaults import KeyedDefault
from infra.persistence import standard_store


class SessionSettings:
    """How many sessions the user has started."""

    count: KeyedDefault[int] = KeyedDefault(SettingKey.SESSION_COUNT, default=1)

    def __init__(
        self,
        store: KeyValueStorePort | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        self.store = store if store is not None else standard_store()
        self.logger = logger


class OnboardingSettings:
    """Flags recording which onboarding flows have been shown."""

    did_show_app_onboarding: KeyedDefault[bool] = KeyedDefault(
        SettingKey.DID_SHOW_APP_ONBOARDING, default=False,
    )
    did_show_feature_onboarding: KeyedDefault[bool] = KeyedDefault(
        SettingKey.DID_SHOW_FEATURE_ONBOARDING, default=False,
    )

    def __init__(
        self,
        store: KeyValueStorePort | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        self.store = store if store is not None else standard_store()
        self.logger = logger


class UserRepository:
    """
    Groups the user-facing settings over one store.

    Pass a store in tests; production code uses the process-wide one.
    """

    def __init__(
        self,
        store: KeyValueStorePort | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        self.store = store if store is not None else standard_store()
        self.session = SessionSettings(self.store, logger)
        self.onboarding = OnboardingSettings(self.store, logger)

    def reset(self) -> None:
        """Remove every known setting so each reads back its default."""
        for key in SettingKey:
            self.store.remove(key.value)
