from typing import Optional

import pytest

from mediasettings.accessor import SettingsAccessor
from mediasettings.config.server import ConfigReader
from mediasettings.registry import Option, SettingType
from mediasettings.store.protocols import FailingStore, InMemoryStore

VOLUME = Option("volume", SettingType.INT)
FLAG = Option("flag", SettingType.BOOL)
GENRES = Option("genres", SettingType.STR)


class CountingResolver:
    """Resolver that records how often it was consulted."""

    def __init__(self, value):
        self.value = value
        self.calls: list[Option] = []

    def __call__(self, option: Option, config: Optional[ConfigReader]):
        self.calls.append(option)
        return self.value


class TestTypeGating:
    def test_getters_on_wrong_type_return_sentinels(self, store: InMemoryStore) -> None:
        store.values.update({"volume": 7, "flag": 1, "genres": "classical"})
        accessor = SettingsAccessor(store)

        assert accessor.get_str(FLAG) is None
        assert accessor.get_int(GENRES) == 0
        assert accessor.get_bool(VOLUME) is False

    def test_getters_on_none(self, accessor: SettingsAccessor) -> None:
        assert accessor.get_int(None) == 0
        assert accessor.get_bool(None) is False
        assert accessor.get_str(None) is None
        assert accessor.get(None) is None

    def test_setters_on_wrong_type_do_not_write(self, store: InMemoryStore) -> None:
        accessor = SettingsAccessor(store)

        assert accessor.set_int(GENRES, 5) is False
        assert accessor.set_bool(VOLUME, True) is False
        assert accessor.set_str(FLAG, "yes") is False
        assert accessor.set_int(None, 1) is False
        assert store.write_calls == []
        assert store.values == {}


class TestDefaults:
    def test_no_value_no_resolver(self, accessor: SettingsAccessor) -> None:
        assert accessor.get_int(VOLUME) == 0
        assert accessor.get_bool(FLAG) is False
        assert accessor.get_str(GENRES) is None

    @pytest.mark.parametrize(
        "setting_type, field, value",
        [
            (SettingType.INT, "default_getint", 11),
            (SettingType.BOOL, "default_getbool", True),
            (SettingType.STR, "default_getstr", "jazz"),
        ],
    )
    def test_resolver_used_when_store_empty(
        self, accessor: SettingsAccessor, setting_type: SettingType, field: str, value
    ) -> None:
        resolver = CountingResolver(value)
        option = Option("computed", setting_type, **{field: resolver})

        assert accessor.get(option) == value
        assert resolver.calls == [option]

    def test_stored_value_wins_over_resolver(self, store: InMemoryStore) -> None:
        resolver = CountingResolver(True)
        option = Option("computed", SettingType.BOOL, default_getbool=resolver)
        store.set_int("computed", 0)

        assert SettingsAccessor(store).get_bool(option) is False
        assert resolver.calls == []

    def test_stored_zero_and_negative_returned_verbatim(self, store: InMemoryStore) -> None:
        resolver = CountingResolver(99)
        option = Option("offset", SettingType.INT, default_getint=resolver)
        accessor = SettingsAccessor(store)

        store.set_int("offset", 0)
        assert accessor.get_int(option) == 0
        store.set_int("offset", -3)
        assert accessor.get_int(option) == -3
        assert resolver.calls == []

    def test_stored_empty_string_is_a_value(self, store: InMemoryStore) -> None:
        option = Option("label", SettingType.STR, default_getstr=CountingResolver("x"))
        store.set_str("label", "")
        assert SettingsAccessor(store).get_str(option) == ""


class TestReadWrite:
    def test_int_round_trip(self, accessor: SettingsAccessor) -> None:
        assert accessor.set_int(VOLUME, 42) is True
        assert accessor.get_int(VOLUME) == 42

    def test_bool_stored_as_integer(self, store: InMemoryStore) -> None:
        accessor = SettingsAccessor(store)

        assert accessor.set_bool(FLAG, True) is True
        assert store.values["flag"] == 1
        assert accessor.get_bool(FLAG) is True

        accessor.set_bool(FLAG, False)
        assert store.values["flag"] == 0
        assert accessor.get_bool(FLAG) is False

    def test_nonzero_reads_as_true(self, store: InMemoryStore) -> None:
        store.values["flag"] = 5
        assert SettingsAccessor(store).get_bool(FLAG) is True

    def test_str_is_read_fresh_every_call(self, store: InMemoryStore) -> None:
        accessor = SettingsAccessor(store)
        accessor.set_str(GENRES, "classical")
        assert accessor.get_str(GENRES) == "classical"

        store.values["genres"] = "classical,opera"
        assert accessor.get_str(GENRES) == "classical,opera"
        assert store.read_calls.count("genres") == 2

    def test_store_failure_is_propagated(self) -> None:
        store = FailingStore()
        accessor = SettingsAccessor(store)

        assert accessor.set_int(VOLUME, 1) is False
        assert accessor.set_bool(FLAG, True) is False
        assert accessor.set_str(GENRES, "rock") is False
        assert store.values == {}

    def test_unreadable_store_falls_back_to_default(self) -> None:
        store = FailingStore({"computed": 0}, fail_on_methods=["get_int"])
        option = Option("computed", SettingType.BOOL, default_getbool=CountingResolver(True))
        assert SettingsAccessor(store).get_bool(option) is True


def test_snapshot_lists_every_option(store: InMemoryStore) -> None:
    store.set_str("show_composer_for_genre", "classical")
    accessor = SettingsAccessor(store)

    snapshot = accessor.snapshot()

    assert snapshot == {
        "webinterface": {
            "show_composer_now_playing": False,
            "show_composer_for_genre": "classical",
        },
        "artwork": {
            "use_artwork_source_spotify": True,
            "use_artwork_source_discogs": False,
            "use_artwork_source_coverartarchive": False,
        },
    }
