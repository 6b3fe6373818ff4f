"""Data model for the settings catalog: option types, options and categories."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol

from mediasettings.errors import CatalogError

if TYPE_CHECKING:
    from mediasettings.config.server import ConfigReader


class SettingType(Enum):
    """Declared value type of an option. Fixed when the option is defined."""

    INT = "int"
    BOOL = "bool"
    STR = "str"


class IntResolver(Protocol):
    """Computes an integer default for an option with no stored value."""

    def __call__(self, option: Option, config: Optional[ConfigReader]) -> int: ...


class BoolResolver(Protocol):
    """Computes a boolean default for an option with no stored value."""

    def __call__(self, option: Option, config: Optional[ConfigReader]) -> bool: ...


class StrResolver(Protocol):
    """Computes a string default for an option with no stored value."""

    def __call__(self, option: Option, config: Optional[ConfigReader]) -> Optional[str]: ...


@dataclass(frozen=True)
class Option:
    """A single named, typed setting within a category.

    At most one default resolver may be given, and it must be the one that
    matches ``type``. Resolvers receive the option itself for context, but
    are free to ignore it.
    """

    name: str
    type: SettingType
    default_getint: Optional[IntResolver] = field(default=None, compare=False, repr=False)
    default_getbool: Optional[BoolResolver] = field(default=None, compare=False, repr=False)
    default_getstr: Optional[StrResolver] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise CatalogError("Option name cannot be empty")

        resolvers = {
            SettingType.INT: self.default_getint,
            SettingType.BOOL: self.default_getbool,
            SettingType.STR: self.default_getstr,
        }
        for setting_type, resolver in resolvers.items():
            if resolver is not None and setting_type is not self.type:
                raise CatalogError(
                    f"Option '{self.name}' is {self.type.value} but has a "
                    f"{setting_type.value} default resolver"
                )

    @property
    def has_default(self) -> bool:
        """Whether a default resolver is registered for this option."""
        return any(
            r is not None
            for r in (self.default_getint, self.default_getbool, self.default_getstr)
        )


@dataclass(frozen=True)
class Category:
    """A named, ordered group of options.

    Option order is declaration order and stays stable for index access.
    Option names must be unique within the category, ignoring case.
    """

    name: str
    options: tuple[Option, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise CatalogError("Category name cannot be empty")

        # Accept any sequence at definition time but always store a tuple
        object.__setattr__(self, "options", tuple(self.options))

        seen: set[str] = set()
        for option in self.options:
            key = option.name.casefold()
            if key in seen:
                raise CatalogError(
                    f"Duplicate option '{option.name}' in category '{self.name}'"
                )
            seen.add(key)

    def __iter__(self) -> Iterator[Option]:
        return iter(self.options)
