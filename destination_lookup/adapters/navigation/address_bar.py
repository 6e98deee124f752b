"""Address-bar navigator.

Keeps the current page address and rewrites its query string whenever
the search coordinator announces a selection. Other parameters and the
fragment are preserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


@dataclass
class AddressBar:
    """In-memory page address implementing NavigatorPort.

    Attributes:
        url: Current page address
        on_change: Optional callback receiving every new address

    Example:
        bar = AddressBar("http://localhost:3000/?lang=en")
        bar.set_query_param("destination", "New York")
        bar.url  # 'http://localhost:3000/?lang=en&destination=New+York'
    """

    url: str = "http://localhost:3000/"
    on_change: Optional[Callable[[str], None]] = field(default=None, repr=False)

    history: List[str] = field(default_factory=list, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def set_query_param(self, name: str, value: str) -> None:
        """Set ``name`` to ``value``, replacing any previous value."""
        parts = urlsplit(self.url)
        params = [
            (k, v)
            for k, v in parse_qsl(parts.query, keep_blank_values=True)
            if k != name
        ]
        params.append((name, value))

        new_url = urlunsplit(parts._replace(query=urlencode(params)))
        self.history.append(self.url)
        self.url = new_url
        self._logger.debug("Address updated", extra={"url": new_url})

        if self.on_change is not None:
            self.on_change(new_url)

    def get_query_param(self, name: str) -> Optional[str]:
        """Read a query parameter from the current address."""
        for key, value in parse_qsl(urlsplit(self.url).query, keep_blank_values=True):
            if key == name:
                return value
        return None


@dataclass
class NullNavigator:
    """Navigator that ignores every notification."""

    def set_query_param(self, name: str, value: str) -> None:
        pass
