"""Built-in default resolvers.

A resolver is only consulted when the store holds no value for its option.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mediasettings.config.server import ConfigReader
    from mediasettings.registry.models import Option

LIBRARY_SECTION = "library"
ARTWORK_SOURCES_KEY = "artwork_online_sources"


def artwork_source_enabled(
    config: Optional[ConfigReader], source: str, fallback: bool
) -> bool:
    """Decide whether an online artwork source is enabled by configuration.

    With no allow-list configured every source gets its own fixed fallback.
    Once the list holds at least one entry, only membership counts and no
    source is treated specially.

    Args:
        config: Static configuration reader (None behaves as unconfigured)
        source: Source name to look for, compared case-insensitively
        fallback: Value returned when the allow-list is empty

    Returns:
        True if the source is enabled
    """
    if config is None:
        return fallback

    count = config.list_size(LIBRARY_SECTION, ARTWORK_SOURCES_KEY)
    if count == 0:
        return fallback

    wanted = source.casefold()
    for i in range(count):
        name = config.list_item(LIBRARY_SECTION, ARTWORK_SOURCES_KEY, i)
        if name is not None and name.casefold() == wanted:
            return True

    return False


@dataclass(frozen=True)
class ArtworkSourceDefault:
    """Bool resolver for the ``use_artwork_source_*`` options.

    The option passed in is ignored; the source name is fixed per resolver.
    """

    source: str
    fallback: bool = False

    def __call__(self, option: Option, config: Optional[ConfigReader]) -> bool:
        return artwork_source_enabled(config, self.source, self.fallback)


# Spotify is on when unconfigured; it only serves premium users anyway
SPOTIFY_DEFAULT = ArtworkSourceDefault("spotify", fallback=True)
DISCOGS_DEFAULT = ArtworkSourceDefault("discogs")
COVERARTARCHIVE_DEFAULT = ArtworkSourceDefault("coverartarchive")
