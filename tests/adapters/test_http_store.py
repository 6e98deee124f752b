"""Tests for the HTTP destination store adapter."""

import asyncio
from unittest.mock import MagicMock

import pytest
import requests

from destination_lookup.adapters.store import HttpDestinationStore
from destination_lookup.config import StoreConfig
from destination_lookup.domain.errors import LookupFailure

PARIS_JSON = {
    "id": 1,
    "name": "Paris",
    "country": "France",
    "description": "The City of Light",
    "climate": "Temperate",
    "currency": "Euro",
    "latitude": 48.8566,
    "longitude": 2.3522,
}


def _response(status=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def store(session):
    config = StoreConfig(base_url="https://api.example.com/v1/", timeout_seconds=3)
    return HttpDestinationStore(config, session=session)


class TestSearch:
    def test_builds_request_and_parses_results(self, store, session):
        session.get.return_value = _response(payload=[PARIS_JSON])

        results = asyncio.run(store.search_destinations("par"))

        assert [d.name for d in results] == ["Paris"]
        assert results[0].latitude == 48.8566
        session.get.assert_called_once_with(
            "https://api.example.com/v1/destinations",
            params={"q": "par"},
            timeout=3,
        )

    def test_non_list_payload_is_rejected(self, store, session):
        session.get.return_value = _response(payload={"results": []})

        with pytest.raises(LookupFailure, match="Malformed search response"):
            asyncio.run(store.search_destinations("par"))

    def test_string_ids_are_kept(self, store, session):
        session.get.return_value = _response(
            payload=[dict(PARIS_JSON, id="paris-fr"), dict(PARIS_JSON, id="parma-it")]
        )

        results = asyncio.run(store.search_destinations("par"))

        assert [d.id for d in results] == ["paris-fr", "parma-it"]

    def test_malformed_record_is_rejected(self, store, session):
        session.get.return_value = _response(payload=[{"name": "No id"}])

        with pytest.raises(LookupFailure) as excinfo:
            asyncio.run(store.search_destinations("par"))

        assert excinfo.value.message == "Malformed destination record"
        assert excinfo.value.operation == "search"

    def test_timeout_becomes_lookup_failure(self, store, session):
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(LookupFailure) as excinfo:
            asyncio.run(store.search_destinations("par"))

        assert excinfo.value.message == "Destination service unavailable"
        assert isinstance(excinfo.value.cause, requests.Timeout)

    def test_server_error_becomes_lookup_failure(self, store, session):
        session.get.return_value = _response(status=503)

        with pytest.raises(LookupFailure, match="HTTP 503"):
            asyncio.run(store.search_destinations("par"))

    def test_invalid_json_becomes_lookup_failure(self, store, session):
        session.get.return_value = _response(json_error=ValueError("no json"))

        with pytest.raises(LookupFailure, match="Malformed response"):
            asyncio.run(store.search_destinations("par"))


class TestDetails:
    def test_quotes_name_in_path(self, store, session):
        session.get.return_value = _response(
            payload=dict(PARIS_JSON, id=17, name="New York")
        )

        details = asyncio.run(store.get_destination_details("New York"))

        assert details.id == 17
        session.get.assert_called_once_with(
            "https://api.example.com/v1/destinations/New%20York",
            params=None,
            timeout=3,
        )

    def test_not_found(self, store, session):
        session.get.return_value = _response(status=404)

        with pytest.raises(LookupFailure) as excinfo:
            asyncio.run(store.get_destination_details("Atlantis"))

        assert excinfo.value.message == "Destination not found"
        assert excinfo.value.query == "Atlantis"
        assert excinfo.value.operation == "details"


class TestSession:
    def test_default_session_sends_user_agent(self):
        store = HttpDestinationStore(StoreConfig(user_agent="dlk-tests"))
        session = store.session

        assert session is not None
        assert session.headers["User-Agent"] == "dlk-tests"

        store.close()

    def test_close_releases_session(self, store, session):
        store.close()

        session.close.assert_called_once_with()
        assert store.session is None

    def test_closed_store_fails_lookups(self, store, session):
        store.close()

        with pytest.raises(LookupFailure) as excinfo:
            asyncio.run(store.search_destinations("par"))

        assert excinfo.value.message == "Destination store is closed"
        session.get.assert_not_called()
