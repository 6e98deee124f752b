"""Services layer - Application orchestration.

Available services:
- SearchCoordinator: Keystroke and selection handling for one session
"""

from .search_coordinator import SearchCoordinator, StateListener

__all__ = ["SearchCoordinator", "StateListener"]
