"""In-memory result cache.

Entries live for the whole session: there is no TTL and no size bound.
The cache is only touched from event-loop callbacks, so no locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

if TYPE_CHECKING:
    from ...domain.models import Destination


@dataclass
class InMemoryResultCache:
    """Session-long query -> results cache.

    This cache implements the ResultCachePort protocol and is injected
    into the search coordinator.

    Attributes:
        name: Cache name for logging

    Example:
        cache = InMemoryResultCache(name="search")
        cache.put("Par", results)
        cache.get("Par")   # results
        cache.get("Pari")  # None
    """

    name: str = "results"

    _store: Dict[str, tuple[Destination, ...]] = field(
        default_factory=dict, repr=False
    )
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, query: str) -> Optional[tuple[Destination, ...]]:
        """Get the results stored for a query.

        Args:
            query: The exact query string.

        Returns:
            The cached results, or None if the query was never stored.
        """
        results = self._store.get(query)
        if results is None:
            self._misses += 1
            self._logger.debug("Cache miss", extra={"query": query})
            return None

        self._hits += 1
        self._logger.debug(
            "Cache hit", extra={"query": query, "results": len(results)}
        )
        return results

    def put(self, query: str, results: Sequence[Destination]) -> None:
        """Store results for a query, overwriting any previous entry.

        Args:
            query: The exact query string.
            results: Results in store order.
        """
        replaced = query in self._store
        self._store[query] = tuple(results)
        self._logger.debug(
            "Cache entry set",
            extra={"query": query, "results": len(results), "replaced": replaced},
        )

    def clear(self) -> int:
        """Clear all entries from the cache.

        Returns:
            Number of entries that were cleared.
        """
        count = len(self._store)
        self._store.clear()
        self._hits = 0
        self._misses = 0
        self._logger.info("Cache cleared", extra={"entries_cleared": count})
        return count

    def size(self) -> int:
        return len(self._store)

    def keys(self) -> list[str]:
        return list(self._store.keys())

    def stats(self) -> Dict[str, Any]:
        """Return cache statistics.

        Returns:
            Dictionary with hit/miss counts and size.
        """
        total = self._hits + self._misses
        hit_rate = (self._hits / total * 100) if total > 0 else 0.0
        return {
            "size": len(self._store),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate_percent": round(hit_rate, 1),
        }

    def __contains__(self, query: object) -> bool:
        return query in self._store
