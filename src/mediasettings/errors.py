"""Exception classes for the settings registry.

Only definition-time and setup problems raise. Reading or writing an option
under the wrong type, or looking up an unknown name, is reported through
sentinel return values instead.
"""

from __future__ import annotations

from typing import Optional


class SettingsError(Exception):
    """Base class for all settings registry errors."""


class CatalogError(SettingsError):
    """Raised when a category or option definition breaks a catalog invariant.

    Examples are duplicate names (compared case-insensitively) or a default
    resolver that does not match the option's declared type.
    """


class ConfigError(SettingsError, RuntimeError):
    """Raised when the static configuration file cannot be read or is invalid."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        """Initialize with configuration error details.

        Args:
            message: Description of the configuration problem
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class StoreError(SettingsError):
    """Raised when a persistent store cannot be opened or initialized."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.original_error = original_error
