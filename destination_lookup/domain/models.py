"""Domain models for the destination lookup client.

Destinations are frozen dataclasses with slots: once a store returns
one it is never mutated, so the same instance can sit in the result
cache, the option list and the selection at the same time.

SessionState is the only mutable model. It is owned by the search
coordinator and rewritten from event-loop callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Mapping, Optional, Union

DestinationId = Union[int, str]


class SearchPhase(Enum):
    """Where the search coordinator currently is in its lifecycle."""

    IDLE = auto()
    SEARCHING = auto()
    DISPLAYING = auto()
    SELECTED = auto()
    DETAIL_LOADED = auto()
    ERROR = auto()


@dataclass(frozen=True, slots=True)
class Destination:
    """A travel destination as returned by a destination store.

    Attributes:
        id: Identifier, unique per destination for the whole session.
            Stores may use integers or strings (slugs, UUIDs)
        name: Display label, also used for sorting and detail lookups
        country: Country display string
        description: Free-text description
        climate: Climate display string
        currency: Currency display string
        latitude: Degrees, signed
        longitude: Degrees, signed
    """

    id: DestinationId
    name: str
    country: str = ""
    description: str = ""
    climate: str = ""
    currency: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Destination:
        """Build a destination from a store payload.

        Raises:
            KeyError: If ``id`` or ``name`` is missing.
            TypeError: If ``id`` is neither an int nor a str.
            ValueError: If a field has the wrong type or range.
        """
        raw_id = data["id"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, (int, str)):
            raise TypeError(
                f"Destination id must be an int or a str, got {type(raw_id).__name__}"
            )
        return cls(
            id=raw_id,
            name=str(data["name"]),
            country=str(data.get("country", "")),
            description=str(data.get("description", "")),
            climate=str(data.get("climate", "")),
            currency=str(data.get("currency", "")),
            latitude=float(data.get("latitude", 0.0)),
            longitude=float(data.get("longitude", 0.0)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "country": self.country,
            "description": self.description,
            "climate": self.climate,
            "currency": self.currency,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True, slots=True)
class RankedDestination:
    """A destination paired with its distance to a reference point."""

    destination: Destination
    distance_km: float


@dataclass
class SessionState:
    """Session-long state of one search coordinator.

    Selection and details are set together. An error is displayed next
    to whatever was already there: it never clears options, selection
    or details.

    Attributes:
        input_text: Current text of the search box
        options: Current option list, already prioritized
        selected: Destination the user picked, if any
        details: Full detail record for the selection, once loaded
        error: Last displayable error message, if any
        phase: Lifecycle phase of the coordinator
    """

    input_text: str = ""
    options: tuple[Destination, ...] = field(default_factory=tuple)
    selected: Optional[Destination] = None
    details: Optional[Destination] = None
    error: Optional[str] = None
    phase: SearchPhase = SearchPhase.IDLE

    @property
    def has_options(self) -> bool:
        """Check if there is anything to show in the option list."""
        return len(self.options) > 0

    @property
    def option_names(self) -> list[str]:
        """Labels of the current option list, in display order."""
        return [option.name for option in self.options]
