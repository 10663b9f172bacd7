"""
Domain layer package.

This package contains the setting key catalogue and the ports that
storage and logging adapters implement. It has no infrastructure
dependencies.
"""

from .models import SettingKey, key_name  # noqa: F401
from .ports import KeyValueStorePort, LoggerPort  # noqa: F401

__all__ = [
    # Models
    "SettingKey",
    "key_name",
    # Ports
    "KeyValueStorePort",
    "LoggerPort",
]
