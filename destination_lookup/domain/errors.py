"""Typed domain errors for the destination lookup client.

Every failure raised by a destination store is reported as a
LookupFailure. The search coordinator catches it at the call site and
turns it into a displayable message, so none of these errors are fatal.

All errors inherit from DestinationLookupError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


@dataclass
class DestinationLookupError(Exception):
    """Base error for the destination lookup domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class LookupFailure(DestinationLookupError):
    """A remote search or detail fetch was rejected.

    Attributes:
        query: The query text or destination name that was looked up
        operation: Which store call failed ("search" or "details")
    """

    query: str = ""
    operation: str = "search"

    @classmethod
    def wrap(cls, exc: BaseException, query: str, operation: str) -> LookupFailure:
        """Convert an arbitrary store exception into a LookupFailure."""
        if isinstance(exc, LookupFailure):
            return exc
        message = str(exc) or UNKNOWN_ERROR_MESSAGE
        cause = exc if isinstance(exc, Exception) else None
        return cls(message, cause=cause, query=query, operation=operation)


@dataclass
class ConfigurationError(DestinationLookupError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


def display_message(exc: BaseException) -> str:
    """Return the text shown to the user for a failed lookup."""
    if isinstance(exc, DestinationLookupError):
        return exc.message or UNKNOWN_ERROR_MESSAGE
    return str(exc) or UNKNOWN_ERROR_MESSAGE
