"""Store package - key-value backends that hold user-set option values."""

from mediasettings.store.protocols import FailingStore, InMemoryStore, KeyValueStore
from mediasettings.store.sqlite import SqliteAdminStore

__all__ = ["FailingStore", "InMemoryStore", "KeyValueStore", "SqliteAdminStore"]
