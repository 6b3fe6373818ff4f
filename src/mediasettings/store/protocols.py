# src/mediasettings/store/protocols.py
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol defining the interface for persistent settings storage.

    Values are keyed by option name. A getter returns None when no value is
    stored, which must stay distinguishable from a stored 0 or empty string.
    Setters return True on success and False when the write failed.
    """

    def get_int(self, name: str) -> Optional[int]:
        """Return the integer stored under ``name``, or None if absent."""
        ...

    def get_str(self, name: str) -> Optional[str]:
        """Return the string stored under ``name``, or None if absent."""
        ...

    def set_int(self, name: str, value: int) -> bool:
        """Store an integer under ``name``."""
        ...

    def set_str(self, name: str, value: str) -> bool:
        """Store a string under ``name``."""
        ...


class InMemoryStore:
    """Dict-backed implementation of KeyValueStore.

    Keeps integers and strings in one namespace, the same way a single admin
    table would, and records every successful write for inspection.
    """

    def __init__(self, initial: Optional[dict[str, int | str]] = None):
        self.values: dict[str, int | str] = dict(initial or {})
        self.write_calls: list[dict[str, object]] = []
        self.read_calls: list[str] = []

    def get_int(self, name: str) -> Optional[int]:
        self.read_calls.append(name)
        value = self.values.get(name)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    def get_str(self, name: str) -> Optional[str]:
        self.read_calls.append(name)
        value = self.values.get(name)
        if value is None:
            return None
        return str(value)

    def set_int(self, name: str, value: int) -> bool:
        self.values[name] = int(value)
        self.write_calls.append({"name": name, "value": int(value)})
        return True

    def set_str(self, name: str, value: str) -> bool:
        self.values[name] = value
        self.write_calls.append({"name": name, "value": value})
        return True

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.write_calls = []
        self.read_calls = []


class FailingStore(InMemoryStore):
    """Store that can simulate storage failures."""

    def __init__(
        self,
        initial: Optional[dict[str, int | str]] = None,
        fail_on_methods: Optional[list[str]] = None,
    ):
        """Initialize with optional methods that should fail.

        Args:
            initial: Values present before any write
            fail_on_methods: Method names that should fail (default: both setters)
        """
        super().__init__(initial)
        self.fail_on_methods = (
            fail_on_methods if fail_on_methods is not None else ["set_int", "set_str"]
        )

    def get_int(self, name: str) -> Optional[int]:
        if "get_int" in self.fail_on_methods:
            return None
        return super().get_int(name)

    def get_str(self, name: str) -> Optional[str]:
        if "get_str" in self.fail_on_methods:
            return None
        return super().get_str(name)

    def set_int(self, name: str, value: int) -> bool:
        if "set_int" in self.fail_on_methods:
            return False
        return super().set_int(name, value)

    def set_str(self, name: str, value: str) -> bool:
        if "set_str" in self.fail_on_methods:
            return False
        return super().set_str(name, value)
