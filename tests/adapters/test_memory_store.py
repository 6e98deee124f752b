"""Tests for the in-memory destination store."""

import asyncio
import json

import pytest

from destination_lookup.adapters.store import InMemoryDestinationStore
from destination_lookup.config import StoreConfig
from destination_lookup.domain.errors import LookupFailure


@pytest.fixture
def store():
    return InMemoryDestinationStore(StoreConfig())


def test_bundled_catalogue_loads(store):
    catalogue = store.list_destinations()

    assert len(catalogue) == 20
    assert len({d.id for d in catalogue}) == len(catalogue)


def test_search_is_case_insensitive_substring(store):
    results = asyncio.run(store.search_destinations("PAR"))

    assert [d.name for d in results] == ["Paris", "Parma"]


def test_search_with_no_match(store):
    assert asyncio.run(store.search_destinations("xyz")) == []


def test_details_by_exact_name(store):
    details = asyncio.run(store.get_destination_details("Lisbon"))

    assert details.country == "Portugal"
    assert details.currency == "Euro"


def test_details_not_found(store):
    with pytest.raises(LookupFailure) as excinfo:
        asyncio.run(store.get_destination_details("lisbon"))

    assert excinfo.value.message == "Destination not found"
    assert excinfo.value.operation == "details"


def test_failure_injection():
    store = InMemoryDestinationStore(StoreConfig(), fail_with="Service unavailable")

    with pytest.raises(LookupFailure, match="Service unavailable"):
        asyncio.run(store.search_destinations("par"))


def test_simulated_latency_does_not_block_the_loop():
    store = InMemoryDestinationStore(StoreConfig(latency_ms=30), destinations=[])
    ticks = []

    async def ticker():
        for _ in range(3):
            ticks.append(1)
            await asyncio.sleep(0.005)

    async def scenario():
        await asyncio.gather(store.search_destinations("a"), ticker())

    asyncio.run(scenario())

    assert len(ticks) == 3


def test_catalogue_from_custom_file(tmp_path):
    data_file = tmp_path / "catalogue.json"
    data_file.write_text(
        json.dumps([{"id": 1, "name": "Oslo", "latitude": 59.91, "longitude": 10.75}]),
        encoding="utf-8",
    )
    store = InMemoryDestinationStore(StoreConfig(data_file=data_file))

    results = asyncio.run(store.search_destinations("os"))

    assert [d.name for d in results] == ["Oslo"]


def test_unreadable_catalogue_is_a_lookup_failure(tmp_path):
    data_file = tmp_path / "broken.json"
    data_file.write_text("not json", encoding="utf-8")
    store = InMemoryDestinationStore(StoreConfig(data_file=data_file))

    with pytest.raises(LookupFailure, match="catalogue unavailable"):
        asyncio.run(store.search_destinations("os"))
