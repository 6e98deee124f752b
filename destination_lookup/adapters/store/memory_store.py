"""In-memory destination store backed by a JSON catalogue.

This adapter stands in for the remote lookup service during development
and tests. It answers asynchronously, after an optional simulated
latency, and can be told to fail so that error paths can be exercised.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ...config import StoreConfig, get_config
from ...domain.errors import LookupFailure
from ...domain.models import Destination


@dataclass
class InMemoryDestinationStore:
    """Destination store serving a fixed catalogue.

    This adapter implements DestinationStorePort. Searches are a
    case-insensitive substring match on the destination name, returned
    in catalogue order. Detail lookups need the exact name.

    Attributes:
        config: Store configuration (catalogue path, latency)
        destinations: Catalogue override; loaded from ``config.data_file``
            when not given
        fail_with: When set, every call raises LookupFailure with this
            message

    Example:
        store = InMemoryDestinationStore(destinations=[paris, lyon])
        results = await store.search_destinations("par")
    """

    config: StoreConfig = field(default_factory=lambda: get_config().store)
    destinations: Optional[Sequence[Destination]] = None
    fail_with: Optional[str] = None

    _catalogue: Optional[List[Destination]] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.destinations is not None:
            self._catalogue = list(self.destinations)

    async def search_destinations(self, query: str) -> Sequence[Destination]:
        """Return destinations whose name contains ``query``.

        Raises:
            LookupFailure: If failure injection is on or the catalogue
                cannot be loaded.
        """
        await self._simulate_latency()
        self._raise_if_failing(query, "search")

        needle = query.lower()
        results = [d for d in self._load() if needle in d.name.lower()]
        self._logger.debug(
            "Search answered", extra={"query": query, "results": len(results)}
        )
        return results

    async def get_destination_details(self, name: str) -> Destination:
        """Return the destination called ``name``.

        Raises:
            LookupFailure: If no destination has this exact name.
        """
        await self._simulate_latency()
        self._raise_if_failing(name, "details")

        for destination in self._load():
            if destination.name == name:
                return destination

        self._logger.debug("Destination not found", extra={"destination_name": name})
        raise LookupFailure("Destination not found", query=name, operation="details")

    def list_destinations(self) -> Sequence[Destination]:
        """List the whole catalogue, in file order."""
        return list(self._load())

    async def _simulate_latency(self) -> None:
        if self.config.latency_ms > 0:
            await asyncio.sleep(self.config.latency_ms / 1000)

    def _raise_if_failing(self, query: str, operation: str) -> None:
        if self.fail_with is not None:
            raise LookupFailure(self.fail_with, query=query, operation=operation)

    def _load(self) -> List[Destination]:
        if self._catalogue is not None:
            return self._catalogue

        path = Path(self.config.data_file)
        self._logger.debug("Loading catalogue", extra={"path": str(path)})
        try:
            with path.open(encoding="utf-8") as f:
                payload = json.load(f)
            catalogue = [Destination.from_dict(item) for item in payload]
        except (OSError, KeyError, TypeError, ValueError) as e:
            raise LookupFailure(
                "Destination catalogue unavailable",
                cause=e,
                operation="load",
            )

        self._catalogue = catalogue
        self._logger.info("Catalogue loaded", extra={"destinations": len(catalogue)})
        return catalogue
