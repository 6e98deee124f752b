"""HTTP destination store adapter.

Talks to a remote lookup service with a shared requests.Session:

- ``GET {base_url}/destinations?q=<query>`` returns a JSON list
- ``GET {base_url}/destinations/<name>`` returns a JSON object

requests is blocking, so each call runs in a worker thread through
asyncio.to_thread and the event loop keeps serving keystrokes.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence
from urllib.parse import quote

import requests

from ...config import StoreConfig, get_config
from ...domain.errors import LookupFailure
from ...domain.models import Destination


@dataclass
class HttpDestinationStore:
    """Destination store backed by a remote JSON API.

    This adapter implements DestinationStorePort. Every transport,
    HTTP status or payload problem is reported as LookupFailure.

    Attributes:
        config: Store configuration (base URL, timeout, user agent)
        session: Optional pre-built session (tests inject a mock)
    """

    config: StoreConfig = field(default_factory=lambda: get_config().store)
    session: Optional[requests.Session] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.session is None:
            self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        self._logger.debug(
            "Initializing HTTP session",
            extra={
                "base_url": self.config.base_url,
                "timeout": self.config.timeout_seconds,
            },
        )
        session = requests.Session()
        session.headers.update(
            {"User-Agent": self.config.user_agent, "Accept": "application/json"}
        )
        return session

    def close(self) -> None:
        """Close the HTTP session and release its pooled connections."""
        if self.session is not None:
            self.session.close()
            self.session = None

    async def search_destinations(self, query: str) -> Sequence[Destination]:
        payload = await asyncio.to_thread(
            self._get_json, "destinations", {"q": query}, query, "search"
        )
        if not isinstance(payload, list):
            raise LookupFailure(
                "Malformed search response", query=query, operation="search"
            )
        return [self._to_destination(item, query, "search") for item in payload]

    async def get_destination_details(self, name: str) -> Destination:
        path = f"destinations/{quote(name, safe='')}"
        payload = await asyncio.to_thread(self._get_json, path, None, name, "details")
        return self._to_destination(payload, name, "details")

    def _get_json(
        self,
        path: str,
        params: Optional[Dict[str, str]],
        query: str,
        operation: str,
    ) -> Any:
        if self.session is None:
            raise LookupFailure(
                "Destination store is closed", query=query, operation=operation
            )
        url = f"{self.config.base_url.rstrip('/')}/{path}"
        try:
            response = self.session.get(
                url, params=params, timeout=self.config.timeout_seconds
            )
        except (requests.Timeout, requests.ConnectionError) as e:
            self._logger.warning(
                "Destination service unreachable",
                extra={"url": url, "error": str(e)},
            )
            raise LookupFailure(
                "Destination service unavailable",
                cause=e,
                query=query,
                operation=operation,
            )
        except requests.RequestException as e:
            raise LookupFailure(
                "Destination lookup failed", cause=e, query=query, operation=operation
            )

        if response.status_code == 404:
            raise LookupFailure(
                "Destination not found", query=query, operation=operation
            )
        try:
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            self._logger.warning(
                "Destination service error",
                extra={"url": url, "status": response.status_code},
            )
            raise LookupFailure(
                f"Destination service returned HTTP {response.status_code}",
                cause=e,
                query=query,
                operation=operation,
            )
        except ValueError as e:
            raise LookupFailure(
                "Malformed response from destination service",
                cause=e,
                query=query,
                operation=operation,
            )

    @staticmethod
    def _to_destination(item: Any, query: str, operation: str) -> Destination:
        try:
            return Destination.from_dict(item)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise LookupFailure(
                "Malformed destination record",
                cause=e,
                query=query,
                operation=operation,
            )
