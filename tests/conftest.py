import pytest

from mediasettings.accessor import SettingsAccessor
from mediasettings.config.server import LibrarySection, ServerConfig
from mediasettings.store.protocols import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def accessor(store: InMemoryStore) -> SettingsAccessor:
    """Accessor over an empty store with no allow-list configured."""
    return SettingsAccessor(store, ServerConfig())


@pytest.fixture
def make_config():
    """Build a ServerConfig with the given artwork allow-list."""

    def _make(*sources: str) -> ServerConfig:
        return ServerConfig(library=LibrarySection(artwork_online_sources=list(sources)))

    return _make
