"""The settings catalog and lookup by name or position.

The catalog is static: it is built once at import time and never changes.
Name lookups are case-insensitive linear scans, which is plenty for a
catalog of a few dozen entries.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Final, Optional

from mediasettings.errors import CatalogError
from mediasettings.registry.defaults import (
    COVERARTARCHIVE_DEFAULT,
    DISCOGS_DEFAULT,
    SPOTIFY_DEFAULT,
)
from mediasettings.registry.models import Category, Option, SettingType


class Registry:
    """Read-only collection of categories.

    Examples:
        category = REGISTRY.category_by_name("artwork")
        option = REGISTRY.option_by_name(category, "use_artwork_source_spotify")
    """

    def __init__(self, categories: Iterable[Category]):
        """Initialize with the categories in declaration order.

        Raises:
            CatalogError: If two categories share a name (ignoring case)
        """
        self._categories: tuple[Category, ...] = tuple(categories)

        seen: set[str] = set()
        for category in self._categories:
            key = category.name.casefold()
            if key in seen:
                raise CatalogError(f"Duplicate category '{category.name}'")
            seen.add(key)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def category_count(self) -> int:
        """Total number of categories."""
        return len(self._categories)

    def category_by_index(self, index: int) -> Optional[Category]:
        """Return the category at ``index``, or None if out of range."""
        if index < 0 or index >= self.category_count():
            return None
        return self._categories[index]

    def category_by_name(self, name: Optional[str]) -> Optional[Category]:
        """Return the category called ``name`` (case-insensitive), or None."""
        if name is None:
            return None

        wanted = name.casefold()
        for category in self._categories:
            if category.name.casefold() == wanted:
                return category
        return None

    @staticmethod
    def option_count(category: Optional[Category]) -> int:
        """Number of options in ``category`` (0 for None)."""
        if category is None:
            return 0
        return len(category.options)

    @staticmethod
    def option_by_index(category: Optional[Category], index: int) -> Optional[Option]:
        """Return the option at ``index`` within ``category``, or None."""
        if category is None or index < 0 or index >= len(category.options):
            return None
        return category.options[index]

    @staticmethod
    def option_by_name(category: Optional[Category], name: Optional[str]) -> Optional[Option]:
        """Return the option called ``name`` within ``category``, or None."""
        if category is None or name is None:
            return None

        wanted = name.casefold()
        for option in category.options:
            if option.name.casefold() == wanted:
                return option
        return None

    def find(self, category_name: str, option_name: str) -> Optional[Option]:
        """Resolve an option by category and option name in one step."""
        return self.option_by_name(self.category_by_name(category_name), option_name)


# ── Catalog ───────────────────────────────────────────────────────────────────
WEBINTERFACE = Category(
    "webinterface",
    (
        Option("show_composer_now_playing", SettingType.BOOL),
        Option("show_composer_for_genre", SettingType.STR),
    ),
)

ARTWORK = Category(
    "artwork",
    (
        Option(
            "use_artwork_source_spotify",
            SettingType.BOOL,
            default_getbool=SPOTIFY_DEFAULT,
        ),
        Option(
            "use_artwork_source_discogs",
            SettingType.BOOL,
            default_getbool=DISCOGS_DEFAULT,
        ),
        Option(
            "use_artwork_source_coverartarchive",
            SettingType.BOOL,
            default_getbool=COVERARTARCHIVE_DEFAULT,
        ),
    ),
)

REGISTRY: Final = Registry((WEBINTERFACE, ARTWORK))


# Module-level shortcuts against the default catalog
def category_count() -> int:
    return REGISTRY.category_count()


def category_by_index(index: int) -> Optional[Category]:
    return REGISTRY.category_by_index(index)


def category_by_name(name: Optional[str]) -> Optional[Category]:
    return REGISTRY.category_by_name(name)


def option_count(category: Optional[Category]) -> int:
    return REGISTRY.option_count(category)


def option_by_index(category: Optional[Category], index: int) -> Optional[Option]:
    return REGISTRY.option_by_index(category, index)


def option_by_name(category: Optional[Category], name: Optional[str]) -> Optional[Option]:
    return REGISTRY.option_by_name(category, name)
