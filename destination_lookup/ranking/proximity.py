"""Proximity ranking using great-circle distances.

The ranker only looks at the destinations it is given, in practice the
current option list: "closest" means closest among the visible search
results, not among every destination the store knows about.
"""

import math
from typing import List, Optional, Sequence

from ..domain.models import Destination, RankedDestination

EARTH_RADIUS_KM = 6371.0
DEFAULT_LIMIT = 5


def haversine_km(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Calculate the distance in km between two GPS coordinates.

    Uses the Haversine formula on a sphere of radius ``radius_km``.
    Coordinates are given in degrees.
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push a slightly outside [0, 1] for antipodal points
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius_km * c


def distance_between(
    origin: Destination,
    other: Destination,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Great-circle distance in km between two destinations."""
    return haversine_km(
        origin.latitude,
        origin.longitude,
        other.latitude,
        other.longitude,
        radius_km=radius_km,
    )


def closest_destinations(
    reference: Destination,
    options: Sequence[Destination],
    limit: Optional[int] = DEFAULT_LIMIT,
    radius_km: float = EARTH_RADIUS_KM,
) -> List[RankedDestination]:
    """Rank ``options`` by ascending distance from ``reference``.

    Parameters
    ----------
    reference:
        The selected destination. Options sharing its ``id`` are skipped.
    options:
        Candidate destinations, usually the current option list.
    limit:
        Maximum number of results; ``None`` returns every candidate.
    radius_km:
        Sphere radius used for the haversine formula.

    Returns
    -------
    list[RankedDestination]
        At most ``limit`` entries, nearest first. Equal distances keep
        the order they had in ``options``.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    ranked = [
        RankedDestination(
            destination=option,
            distance_km=distance_between(reference, option, radius_km=radius_km),
        )
        for option in options
        if option.id != reference.id
    ]
    ranked.sort(key=lambda entry: entry.distance_km)

    if limit is None:
        return ranked
    return ranked[:limit]
