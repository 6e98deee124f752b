"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Destination stores (bundled JSON catalogue, remote HTTP service)
- Result caches (in-memory, null)
- Navigation (address bar query parameters)
"""
