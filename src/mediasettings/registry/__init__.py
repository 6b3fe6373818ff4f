"""Registry package - holds the static settings catalog and its data model."""

from mediasettings.registry.catalog import (
    ARTWORK,
    REGISTRY,
    WEBINTERFACE,
    Registry,
    category_by_index,
    category_by_name,
    category_count,
    option_by_index,
    option_by_name,
    option_count,
)
from mediasettings.registry.defaults import ArtworkSourceDefault, artwork_source_enabled
from mediasettings.registry.models import Category, Option, SettingType

__all__ = [
    "ARTWORK",
    "REGISTRY",
    "WEBINTERFACE",
    "ArtworkSourceDefault",
    "Category",
    "Option",
    "Registry",
    "SettingType",
    "artwork_source_enabled",
    "category_by_index",
    "category_by_name",
    "category_count",
    "option_by_index",
    "option_by_name",
    "option_count",
]
