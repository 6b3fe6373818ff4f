"""SQLite-backed settings store.

Values live in an ``admin`` key/value table, the same layout the media
server database uses for its administrative entries. Everything is stored
as text; integers are parsed on read.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path
from types import TracebackType
from typing import Final, Optional

from mediasettings.errors import StoreError

logger: Final = logging.getLogger(__name__)

_SCHEMA: Final = (
    "CREATE TABLE IF NOT EXISTS admin ("
    "key VARCHAR(32) PRIMARY KEY NOT NULL, "
    "value VARCHAR(255) NOT NULL)"
)
_SELECT: Final = "SELECT value FROM admin WHERE key = ?"
_UPSERT: Final = "INSERT OR REPLACE INTO admin (key, value) VALUES (?, ?)"


class SqliteAdminStore:
    """KeyValueStore implementation on top of a SQLite file.

    Calls from several threads are serialized on an internal lock.

    Examples:
        with SqliteAdminStore(Path("settings.db")) as store:
            store.set_int("use_artwork_source_discogs", 1)
    """

    def __init__(self, path: Path | str):
        """Open (and create if needed) the database at ``path``.

        Args:
            path: Database file, or ":memory:" for a private in-memory database

        Raises:
            StoreError: If the database cannot be opened or initialized
        """
        self.path = str(path)
        self._lock = threading.Lock()

        try:
            if self.path != ":memory:":
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
                self.path, check_same_thread=False
            )
            with self._conn:
                self._conn.execute(_SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            raise StoreError(f"Unable to open settings database {self.path}: {exc}", exc) from exc

        logger.debug("Opened settings database: %s", self.path)

    def __enter__(self) -> SqliteAdminStore:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection. Safe to call more than once."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("Closed settings database: %s", self.path)

    def _read(self, name: str) -> Optional[str]:
        with self._lock:
            if self._conn is None:
                logger.warning("settings: read of '%s' on closed database", name)
                return None
            try:
                row = self._conn.execute(_SELECT, (name,)).fetchone()
            except sqlite3.Error as exc:
                logger.error("settings: failed to read '%s' (%s)", name, exc)
                return None

        if row is None:
            return None
        return str(row[0])

    def _write(self, name: str, value: str) -> bool:
        with self._lock:
            if self._conn is None:
                logger.warning("settings: write of '%s' on closed database", name)
                return False
            try:
                with self._conn:
                    self._conn.execute(_UPSERT, (name, value))
            except sqlite3.Error as exc:
                logger.error("settings: failed to write '%s' (%s)", name, exc)
                return False

        logger.debug("settings: stored %s=%r", name, value)
        return True

    def get_int(self, name: str) -> Optional[int]:
        raw = self._read(name)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            logger.warning("settings: value of '%s' is not an integer: %r", name, raw)
            return None

    def get_str(self, name: str) -> Optional[str]:
        return self._read(name)

    def set_int(self, name: str, value: int) -> bool:
        return self._write(name, str(int(value)))

    def set_str(self, name: str, value: str) -> bool:
        return self._write(name, value)
