"""Static server configuration loaded from a YAML file."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, ClassVar, Final, Optional, Protocol, runtime_checkable

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mediasettings.errors import ConfigError

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


@runtime_checkable
class ConfigReader(Protocol):
    """Read-only access to list values in the static configuration.

    Unknown sections or keys behave as an empty list.
    """

    def list_size(self, section: str, key: str) -> int:
        """Return the number of entries in the list ``section.key``."""
        ...

    def list_item(self, section: str, key: str, index: int) -> Optional[str]:
        """Return entry ``index`` of ``section.key``, or None if out of range."""
        ...


class GeneralSection(BaseModel):
    """General server settings."""

    model_config = ConfigDict(extra="allow")

    db_path: Path = Field(
        Path("~/.local/share/mediasettings/settings.db").expanduser(),
        description="SQLite database that holds user-set option values",
    )


class LibrarySection(BaseModel):
    """Library settings."""

    model_config = ConfigDict(extra="allow")

    artwork_online_sources: list[str] = Field(
        default_factory=list,
        description="Online artwork sources to enable; empty means per-source defaults",
    )

    @field_validator("artwork_online_sources", mode="before")
    @classmethod
    def allow_null_or_single(cls, v: Any) -> Any:
        # A bare scalar or an empty YAML key are both accepted
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class ServerConfig(BaseModel):
    """Static configuration of the media server.

    Only read at startup; user-changeable values live in the settings store.

    Examples:
        config = ServerConfig.load()
        config.list_size("library", "artwork_online_sources")
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("mediasettings.yaml"),
        Path("~/.config/mediasettings/config.yaml").expanduser(),
        Path("/etc/mediasettings/config.yaml"),
    ]

    model_config = ConfigDict(extra="allow")

    general: GeneralSection = Field(default_factory=GeneralSection)
    library: LibrarySection = Field(default_factory=LibrarySection)

    # ---- ConfigReader ----
    def _list(self, section: str, key: str) -> list[str]:
        sec = getattr(self, section, None)
        if not isinstance(sec, BaseModel):
            return []
        values = getattr(sec, key, None)
        if not isinstance(values, list):
            return []
        return [str(v) for v in values]

    def list_size(self, section: str, key: str) -> int:
        return len(self._list(section, key))

    def list_item(self, section: str, key: str, index: int) -> Optional[str]:
        values = self._list(section, key)
        if index < 0 or index >= len(values):
            return None
        return values[index]

    def list_values(self, section: str, key: str) -> list[str]:
        """Return a copy of the whole list ``section.key``."""
        return self._list(section, key)

    @classmethod
    def find_config_file(cls) -> Optional[Path]:
        """Locate a config file from the environment or the default paths.

        Returns:
            The path found, or None if no candidate exists

        Raises:
            FileNotFoundError: If MEDIASETTINGS_CONFIG points at a missing file
        """
        env_path = os.environ.get("MEDIASETTINGS_CONFIG")
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file from MEDIASETTINGS_CONFIG not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> ServerConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ServerConfig object

        Raises:
            FileNotFoundError: If no config file is found
            ConfigError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find_config_file()
            if path is None:
                raise FileNotFoundError(
                    "No configuration file found. Create mediasettings.yaml or set MEDIASETTINGS_CONFIG."
                )

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text(encoding="utf-8"))
            data = yaml.safe_load(raw)
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read config YAML: {exc}", exc) from exc

        logger.debug("Loaded configuration from %s", path)

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise ConfigError(f"Invalid configuration:\n{err}", err) from err
