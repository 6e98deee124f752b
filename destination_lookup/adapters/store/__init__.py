"""Store adapters - Implementations of DestinationStorePort.

Available implementations:
- InMemoryDestinationStore: Bundled JSON catalogue, optional latency
- HttpDestinationStore: Remote JSON API over requests
"""

from .http_store import HttpDestinationStore
from .memory_store import InMemoryDestinationStore

__all__ = ["InMemoryDestinationStore", "HttpDestinationStore"]
