"""Cache port - Injectable result cache abstraction.

The search coordinator memoizes query -> result-list mappings for the
lifetime of a session. The cache is owned by the coordinator and passed
in at construction, so two coordinators never share results unless the
caller hands them the same cache object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Destination


class ResultCachePort(Protocol):
    """Port for caching search results.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryResultCache) - Production
    - adapters/cache/null_cache.py (NullResultCache) - Testing

    Keys are the literal query string as typed: no trimming, no case
    folding. A cached result for "Par" never serves "Pari".
    """

    def get(self, query: str) -> Optional[tuple[Destination, ...]]:
        """Get the results stored for a query.

        Args:
            query: The exact query string.

        Returns:
            The cached results (possibly empty), or None if absent.
        """
        ...

    def put(self, query: str, results: Sequence[Destination]) -> None:
        """Store the results for a query, overwriting any previous entry.

        Args:
            query: The exact query string.
            results: The results returned by the store, in store order.
        """
        ...

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        ...

    def size(self) -> int:
        """Return the number of cached queries."""
        ...

    def keys(self) -> list[str]:
        """Return all cached queries."""
        ...

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss statistics."""
        ...
