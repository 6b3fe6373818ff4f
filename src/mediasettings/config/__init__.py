"""Static configuration - read once at startup, never written by the registry."""

from mediasettings.config.server import ConfigReader, GeneralSection, LibrarySection, ServerConfig

__all__ = ["ConfigReader", "GeneralSection", "LibrarySection", "ServerConfig"]
