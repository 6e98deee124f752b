"""Pure ranking functions used by the search coordinator.

This subpackage contains the prioritizer applied to every option list
and the haversine-based proximity ranker used once a destination is
selected.
"""

from .prioritize import prioritize
from .proximity import (
    DEFAULT_LIMIT,
    EARTH_RADIUS_KM,
    closest_destinations,
    distance_between,
    haversine_km,
)

__all__ = [
    "prioritize",
    "haversine_km",
    "distance_between",
    "closest_destinations",
    "EARTH_RADIUS_KM",
    "DEFAULT_LIMIT",
]
