"""Cache adapters - Implementations of the ResultCachePort.

Available implementations:
- InMemoryResultCache: Session-long in-memory cache, no eviction
- NullResultCache: No-op cache for testing (always misses)
"""

from .memory_cache import InMemoryResultCache
from .null_cache import NullResultCache

__all__ = ["InMemoryResultCache", "NullResultCache"]
