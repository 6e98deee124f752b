"""Null result cache.

This cache always misses: every keystroke that survives the debounce
window reaches the store. Use it in tests that count store calls, or set
``DLK_SEARCH_CACHE_BACKEND=null`` to rule out caching while debugging.

Example:
    @pytest.fixture
    def coordinator(store):
        return SearchCoordinator(store=store, cache=NullResultCache())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Sequence

if TYPE_CHECKING:
    from ...domain.models import Destination


@dataclass
class NullResultCache:
    """No-op cache - always misses."""

    name: str = "null"

    def get(self, query: str) -> Optional[tuple[Destination, ...]]:
        """Always returns None (cache miss)."""
        return None

    def put(self, query: str, results: Sequence[Destination]) -> None:
        """Does nothing."""
        pass

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0

    def keys(self) -> list[str]:
        return []

    def stats(self) -> Dict[str, int]:
        """Return empty stats."""
        return {
            "size": 0,
            "hits": 0,
            "misses": 0,
            "hit_rate_percent": 0,
        }
