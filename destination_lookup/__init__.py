"""Top-level package for the destination lookup client.

As the user types, the client queries a destination store (debounced),
caches the results for the session, prioritizes them for display and,
once a destination is selected, ranks the other visible results by
great-circle distance.
"""

__version__ = "0.1.0"
