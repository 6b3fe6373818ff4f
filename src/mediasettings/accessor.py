"""Typed read and write access to option values.

The accessor is the only place that reads or writes option values, and it
refuses to do so under the wrong declared type. Reads go to the store first
and fall back to the option's default resolver only when nothing is stored.
Failures are reported as sentinels (0, False, None) rather than exceptions.
"""

from __future__ import annotations

from typing import Optional, Union

from mediasettings.config.server import ConfigReader
from mediasettings.registry.catalog import REGISTRY, Registry
from mediasettings.registry.models import Option, SettingType
from mediasettings.store.protocols import KeyValueStore

SettingValue = Union[int, bool, str, None]


class SettingsAccessor:
    """Typed get/set of options against a key-value store.

    Examples:
        accessor = SettingsAccessor(SqliteAdminStore(db_path), ServerConfig.load())
        option = REGISTRY.find("artwork", "use_artwork_source_spotify")
        if accessor.get_bool(option):
            ...
    """

    def __init__(self, store: KeyValueStore, config: Optional[ConfigReader] = None):
        """Initialize with a store and the static configuration.

        Args:
            store: Backend holding user-set values, keyed by option name
            config: Static configuration handed to default resolvers
                (None behaves as an empty configuration)
        """
        self.store = store
        self.config = config

    # ---- getters ----
    def get_int(self, option: Optional[Option]) -> int:
        if option is None or option.type is not SettingType.INT:
            return 0

        value = self.store.get_int(option.name)
        if value is not None:
            return value

        if option.default_getint is not None:
            return option.default_getint(option, self.config)

        return 0

    def get_bool(self, option: Optional[Option]) -> bool:
        if option is None or option.type is not SettingType.BOOL:
            return False

        value = self.store.get_int(option.name)
        if value is not None:
            return value != 0

        if option.default_getbool is not None:
            return option.default_getbool(option, self.config)

        return False

    def get_str(self, option: Optional[Option]) -> Optional[str]:
        """Return the stored string, the resolver's default, or None.

        The store is read on every call; nothing is cached.
        """
        if option is None or option.type is not SettingType.STR:
            return None

        value = self.store.get_str(option.name)
        if value is not None:
            return value

        if option.default_getstr is not None:
            return option.default_getstr(option, self.config)

        return None

    def get(self, option: Optional[Option]) -> SettingValue:
        """Read an option through the getter that matches its declared type."""
        if option is None:
            return None
        if option.type is SettingType.INT:
            return self.get_int(option)
        if option.type is SettingType.BOOL:
            return self.get_bool(option)
        return self.get_str(option)

    # ---- setters ----
    def set_int(self, option: Optional[Option], value: int) -> bool:
        if option is None or option.type is not SettingType.INT:
            return False
        return self.store.set_int(option.name, value)

    def set_bool(self, option: Optional[Option], value: bool) -> bool:
        """Store a bool as the integer 1 or 0."""
        if option is None or option.type is not SettingType.BOOL:
            return False
        return self.store.set_int(option.name, 1 if value else 0)

    def set_str(self, option: Optional[Option], value: str) -> bool:
        if option is None or option.type is not SettingType.STR:
            return False
        return self.store.set_str(option.name, value)

    # ---- listing ----
    def snapshot(self, registry: Registry = REGISTRY) -> dict[str, dict[str, SettingValue]]:
        """Return the effective value of every option, grouped by category.

        Args:
            registry: Catalog to walk (default: the built-in catalog)

        Returns:
            Mapping of category name to a mapping of option name to value
        """
        return {
            category.name: {option.name: self.get(option) for option in category}
            for category in registry
        }
