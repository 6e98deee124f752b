"""Domain layer - Core models and errors.

This module contains the immutable destination model, the session
state owned by the search coordinator and the typed errors used
throughout the application. No external dependencies.
"""

from .errors import (
    UNKNOWN_ERROR_MESSAGE,
    ConfigurationError,
    DestinationLookupError,
    LookupFailure,
    display_message,
)
from .models import (
    Destination,
    DestinationId,
    RankedDestination,
    SearchPhase,
    SessionState,
)

__all__ = [
    # Models
    "Destination",
    "DestinationId",
    "RankedDestination",
    "SearchPhase",
    "SessionState",
    # Errors
    "DestinationLookupError",
    "LookupFailure",
    "ConfigurationError",
    "UNKNOWN_ERROR_MESSAGE",
    "display_message",
]
