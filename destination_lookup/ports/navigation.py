"""Navigation port - Deep-link notifications emitted on selection.

The coordinator never touches the page address itself. When the user
selects a destination it notifies a navigator, which decides what to do
with the ``destination`` query parameter.
"""

from __future__ import annotations

from typing import Protocol

DESTINATION_PARAM = "destination"


class NavigatorPort(Protocol):
    """Port for address-bar updates.

    Implementations:
    - adapters/navigation/address_bar.py (AddressBar)
    - adapters/navigation/address_bar.py (NullNavigator)
    """

    def set_query_param(self, name: str, value: str) -> None:
        """Set one query parameter on the current page address.

        Args:
            name: Parameter name (``destination`` for selections).
            value: Parameter value.
        """
        ...
