"""Unit tests for KitchenConfigStore."""

import re

import pytest

from kitchens.infrastructure import KitchenConfigNotFoundError, KitchenConfigStore
from kitchens.infrastructure.store import generate_config_id

ID_PATTERN = re.compile(r"^kitchen-\d+-[0-9a-z]{9}$")


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> KitchenConfigStore:
    return KitchenConfigStore(ttl_seconds=60, capacity=3, clock=clock)


class TestConfigIds:
    def test_id_format(self) -> None:
        config_id = generate_config_id(1_700_000_000.123)

        assert ID_PATTERN.match(config_id)
        assert config_id.startswith("kitchen-1700000000123-")

    def test_ids_are_unique(self, store: KitchenConfigStore) -> None:
        ids = {store.save({"n": i}, []).config_id for i in range(3)}
        assert len(ids) == 3


class TestSaveAndGet:
    def test_round_trip_is_verbatim(self, store: KitchenConfigStore) -> None:
        config = {"kitchenId": "k1", "layoutLines": []}
        modules = [{"id": "base-1", "children": []}]

        entry = store.get(store.save(config, modules, "Blue kitchen").config_id)

        assert entry.config == config
        assert entry.modules == modules
        assert entry.description == "Blue kitchen"
        assert entry.to_dict() == {
            "config": config,
            "modules": modules,
            "timestamp": "2023-11-14T22:13:20.000Z",
            "description": "Blue kitchen",
        }

    def test_description_omitted_when_absent(self, store: KitchenConfigStore) -> None:
        entry = store.get(store.save({}, []).config_id)
        assert "description" not in entry.to_dict()

    def test_unknown_id(self, store: KitchenConfigStore) -> None:
        with pytest.raises(KitchenConfigNotFoundError) as exc_info:
            store.get("kitchen-0-000000000")
        assert exc_info.value.config_id == "kitchen-0-000000000"


class TestExpiry:
    def test_entry_expires_after_ttl(
        self, store: KitchenConfigStore, clock: FakeClock
    ) -> None:
        config_id = store.save({}, []).config_id

        clock.advance(59)
        assert config_id in store
        clock.advance(1)
        assert config_id not in store
        with pytest.raises(KitchenConfigNotFoundError):
            store.get(config_id)

    def test_zero_ttl_never_expires(self, clock: FakeClock) -> None:
        store = KitchenConfigStore(ttl_seconds=0, clock=clock)
        config_id = store.save({}, []).config_id

        clock.advance(10 * 365 * 86400)
        assert store.get(config_id).config == {}

    def test_expired_entries_purged_from_len(
        self, store: KitchenConfigStore, clock: FakeClock
    ) -> None:
        store.save({}, [])
        clock.advance(30)
        store.save({}, [])
        clock.advance(30)

        assert len(store) == 1


class TestCapacity:
    def test_oldest_entry_evicted(self, store: KitchenConfigStore) -> None:
        ids = [store.save({"n": i}, []).config_id for i in range(4)]

        assert len(store) == 3
        assert ids[0] not in store
        assert all(config_id in store for config_id in ids[1:])

    def test_save_returns_entry_even_when_evicted(self, clock: FakeClock) -> None:
        store = KitchenConfigStore(ttl_seconds=60, capacity=1, clock=clock)
        first = store.save({"n": 1}, [], "First")
        store.save({"n": 2}, [])

        assert first.config_id not in store
        assert ID_PATTERN.match(first.config_id)
        assert first.config == {"n": 1}
        assert first.description == "First"
        assert first.timestamp == "2023-11-14T22:13:20.000Z"

    def test_clear(self, store: KitchenConfigStore) -> None:
        store.save({}, [])
        store.clear()
        assert len(store) == 0

    @pytest.mark.parametrize(
        "kwargs", [{"ttl_seconds": -1}, {"capacity": 0}]
    )
    def test_invalid_settings(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            KitchenConfigStore(**kwargs)
