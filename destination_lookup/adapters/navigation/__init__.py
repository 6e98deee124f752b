"""Navigation adapters - Implementations of NavigatorPort.

Available implementations:
- AddressBar: Keeps a page address and rewrites its query string
- NullNavigator: Ignores deep-link notifications
"""

from .address_bar import AddressBar, NullNavigator

__all__ = ["AddressBar", "NullNavigator"]
