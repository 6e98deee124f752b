"""Destination store port - Abstraction over the remote lookup service.

The store is an external collaborator: the client only knows that it
answers free-text searches and detail lookups, asynchronously, and that
it may fail.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Destination


class DestinationStorePort(Protocol):
    """Port for destination lookups.

    Implementations:
    - adapters/store/memory_store.py (InMemoryDestinationStore)
    - adapters/store/http_store.py (HttpDestinationStore)
    """

    async def search_destinations(self, query: str) -> Sequence[Destination]:
        """Search destinations matching free text.

        Args:
            query: The raw query text.

        Returns:
            Matching destinations, in store order.

        Raises:
            LookupFailure: If the lookup fails.
        """
        ...

    async def get_destination_details(self, name: str) -> Destination:
        """Get the full record of a destination.

        Args:
            name: The destination name, as shown in the option list.

        Returns:
            The destination with all fields filled in.

        Raises:
            LookupFailure: If nothing matches or the lookup fails.
        """
        ...
