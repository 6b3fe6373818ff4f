"""Typed application settings registry.

This package provides:
- Registry: the static catalog of categories and options
- SettingsAccessor: typed get/set of option values with default fallback
- KeyValueStore backends and the static ServerConfig reader
"""

__version__ = "0.1.0"

from mediasettings.accessor import SettingsAccessor
from mediasettings.config import ConfigReader, ServerConfig
from mediasettings.errors import CatalogError, ConfigError, SettingsError, StoreError
from mediasettings.registry import REGISTRY, Category, Option, Registry, SettingType
from mediasettings.store import InMemoryStore, KeyValueStore, SqliteAdminStore

__all__ = [
    "REGISTRY",
    "CatalogError",
    "Category",
    "ConfigError",
    "ConfigReader",
    "InMemoryStore",
    "KeyValueStore",
    "Option",
    "Registry",
    "ServerConfig",
    "SettingType",
    "SettingsAccessor",
    "SettingsError",
    "SqliteAdminStore",
    "StoreError",
]
