"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the search pipeline and external
adapters. They enable dependency injection and make the system testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the application is driven (services)
- Output ports: How the application drives external systems (adapters)
"""

from .cache import ResultCachePort
from .navigation import DESTINATION_PARAM, NavigatorPort
from .store import DestinationStorePort

__all__ = [
    # Store
    "DestinationStorePort",
    # Cache
    "ResultCachePort",
    # Navigation
    "NavigatorPort",
    "DESTINATION_PARAM",
]
