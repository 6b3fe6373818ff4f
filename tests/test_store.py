import sqlite3
import threading
from pathlib import Path

import pytest

from mediasettings.accessor import SettingsAccessor
from mediasettings.errors import StoreError
from mediasettings.registry import REGISTRY
from mediasettings.store import FailingStore, InMemoryStore, KeyValueStore, SqliteAdminStore


class TestInMemoryStore:
    def test_missing_is_distinct_from_zero(self) -> None:
        store = InMemoryStore()
        assert store.get_int("x") is None
        assert store.get_str("x") is None

        store.set_int("x", 0)
        store.set_str("y", "")
        assert store.get_int("x") == 0
        assert store.get_str("y") == ""

    def test_write_history(self) -> None:
        store = InMemoryStore()
        store.set_int("a", 1)
        store.set_str("b", "two")
        assert store.write_calls == [
            {"name": "a", "value": 1},
            {"name": "b", "value": "two"},
        ]

        store.reset_call_history()
        assert store.write_calls == []
        assert store.read_calls == []

    def test_non_numeric_string_reads_as_missing_int(self) -> None:
        store = InMemoryStore({"a": "abc"})
        assert store.get_int("a") is None

    def test_failing_store_keeps_values(self) -> None:
        store = FailingStore({"a": 3})
        assert store.set_int("a", 4) is False
        assert store.get_int("a") == 3

    def test_implementations_satisfy_protocol(self, tmp_path: Path) -> None:
        assert isinstance(InMemoryStore(), KeyValueStore)
        with SqliteAdminStore(tmp_path / "s.db") as db:
            assert isinstance(db, KeyValueStore)


class TestSqliteAdminStore:
    def test_round_trip_persists_across_connections(self, tmp_path: Path) -> None:
        db_path = tmp_path / "nested" / "settings.db"
        with SqliteAdminStore(db_path) as store:
            assert store.set_int("volume", 42) is True
            assert store.set_str("show_composer_for_genre", "classical") is True
            assert store.set_int("volume", -5) is True

        with SqliteAdminStore(db_path) as store:
            assert store.get_int("volume") == -5
            assert store.get_str("show_composer_for_genre") == "classical"
            assert store.get_int("missing") is None
            assert store.get_str("missing") is None

    def test_non_integer_text_reads_as_missing(self, tmp_path: Path) -> None:
        with SqliteAdminStore(tmp_path / "s.db") as store:
            store.set_str("volume", "loud")
            assert store.get_int("volume") is None
            assert store.get_str("volume") == "loud"

    def test_closed_store_reports_failure(self, tmp_path: Path) -> None:
        store = SqliteAdminStore(tmp_path / "s.db")
        store.set_int("a", 1)
        store.close()
        store.close()

        assert store.get_int("a") is None
        assert store.set_int("a", 2) is False

    def test_write_error_is_reported(self, tmp_path: Path) -> None:
        db_path = tmp_path / "s.db"
        with SqliteAdminStore(db_path) as store:
            conn = sqlite3.connect(db_path)
            conn.execute("DROP TABLE admin")
            conn.commit()
            conn.close()
            assert store.set_str("a", "b") is False
            assert store.get_str("a") is None

    def test_unopenable_database_raises(self, tmp_path: Path) -> None:
        with pytest.raises(StoreError):
            SqliteAdminStore(tmp_path)

    def test_parent_path_is_a_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(StoreError):
            SqliteAdminStore(blocker / "s.db")

    def test_in_memory_database(self) -> None:
        with SqliteAdminStore(":memory:") as store:
            assert store.set_int("a", 7) is True
            assert store.get_int("a") == 7

    def test_concurrent_writes(self, tmp_path: Path) -> None:
        with SqliteAdminStore(tmp_path / "s.db") as store:

            def writer(n: int) -> None:
                for i in range(20):
                    store.set_int(f"key{n}", i)

            threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

            assert [store.get_int(f"key{n}") for n in range(4)] == [19, 19, 19, 19]

    def test_accessor_over_sqlite(self, tmp_path: Path) -> None:
        option = REGISTRY.find("artwork", "use_artwork_source_spotify")
        with SqliteAdminStore(tmp_path / "s.db") as store:
            accessor = SettingsAccessor(store)
            assert accessor.get_bool(option) is True
            assert accessor.set_bool(option, False) is True
            assert store.get_int(option.name) == 0
            assert accessor.get_bool(option) is False
