"""Search coordinator - Main orchestrator of the lookup client.

The coordinator is driven by two kinds of events:

1. Keystrokes (``on_input``): cache lookup, debounced store search,
   prioritization of the option list.
2. Selections (``select``): deep-link notification, detail fetch, and
   proximity ranking of the current options around the selection.

All state lives in one SessionState that is only touched from the event
loop. Each store call takes a sequence token; a response whose token is
no longer the latest one issued for that operation is discarded instead
of overwriting newer state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ..debounce import Debouncer
from ..domain.errors import LookupFailure, display_message
from ..domain.models import Destination, RankedDestination, SearchPhase, SessionState
from ..ports.cache import ResultCachePort
from ..ports.navigation import DESTINATION_PARAM, NavigatorPort
from ..ports.store import DestinationStorePort
from ..ranking import EARTH_RADIUS_KM, closest_destinations, prioritize

StateListener = Callable[[SessionState], None]


@dataclass
class SearchCoordinator:
    """Orchestrates debounce, cache, prioritization and proximity ranking.

    Phases: IDLE -> SEARCHING -> DISPLAYING -> SELECTED -> DETAIL_LOADED,
    with ERROR reachable from a failed search or detail fetch. An error
    never clears options, selection or details.

    Attributes:
        store: Remote destination lookups
        cache: Session-long query -> results cache, owned by this coordinator
        navigator: Receives the ``destination`` deep-link parameter on selection
        debounce_ms: Quiet period before a keystroke reaches the store
        proximity_limit: Maximum number of closest destinations
        earth_radius_km: Sphere radius for distance computations
        apply_stale_responses: Apply every response as it resolves, even
            when a newer request was issued after it (last-resolved-wins)
    """

    store: DestinationStorePort
    cache: ResultCachePort
    navigator: Optional[NavigatorPort] = None
    debounce_ms: float = 300
    proximity_limit: int = 5
    earth_radius_km: float = EARTH_RADIUS_KM
    apply_stale_responses: bool = False

    state: SessionState = field(default_factory=SessionState)

    _debouncer: Debouncer[str] = field(init=False, repr=False)
    _search_seq: int = field(default=0, init=False, repr=False)
    _detail_seq: int = field(default=0, init=False, repr=False)
    _listeners: List[StateListener] = field(
        default_factory=list, init=False, repr=False
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._debouncer = Debouncer(self.search, wait_ms=self.debounce_ms)

    # ------------------------------------------------------------------
    # Keystrokes
    # ------------------------------------------------------------------

    def on_input(self, text: str) -> None:
        """Handle a change of the search box text.

        Must be called from a running event loop: cache misses schedule
        a debounced search on it.
        """
        self.state.input_text = text

        if not text:
            self._debouncer.cancel()
            self._search_seq += 1
            self.state.options = ()
            self.state.selected = None
            self.state.details = None
            self.state.phase = SearchPhase.IDLE
            self._logger.debug("Input cleared")
            self._notify()
            return

        cached = self.cache.get(text)
        if cached is not None:
            # Supersede any debounced or in-flight search for older text
            self._debouncer.cancel()
            self._search_seq += 1
            self._show_results(text, cached)
            return

        # Results for older text still in flight must not replace this search
        self._search_seq += 1
        self.state.phase = SearchPhase.SEARCHING
        self._notify()
        self._debouncer(text)

    async def search(self, query: str) -> None:
        """Look up ``query`` and display the prioritized results.

        This is the debounced action. It can also be awaited directly to
        bypass the debounce window. Failures are stored as the session
        error; the previous option list stays on screen.
        """
        if not query:
            return

        self._search_seq += 1
        token = self._search_seq

        results = self.cache.get(query)
        if results is None:
            self._logger.info("Searching destinations", extra={"query": query})
            try:
                found = await self.store.search_destinations(query)
            except Exception as e:
                failure = LookupFailure.wrap(e, query, "search")
                if self._is_current(token, self._search_seq):
                    self._fail(failure)
                else:
                    self._logger.debug(
                        "Ignoring stale search failure", extra={"query": query}
                    )
                return

            results = tuple(found)
            self.cache.put(query, results)
            self._logger.info(
                "Search results received",
                extra={"query": query, "results": len(results)},
            )

        if not self._is_current(token, self._search_seq):
            self._logger.debug(
                "Discarding stale search results", extra={"query": query}
            )
            return

        self._show_results(query, results)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    async def select(self, destination: Destination) -> None:
        """Select ``destination`` and load its details.

        The selection is recorded before the detail fetch starts and is
        kept if the fetch fails.
        """
        self._detail_seq += 1
        token = self._detail_seq

        self.state.selected = destination
        self.state.phase = SearchPhase.SELECTED
        self._logger.info(
            "Destination selected",
            extra={"id": destination.id, "destination_name": destination.name},
        )
        if self.navigator is not None:
            self.navigator.set_query_param(DESTINATION_PARAM, destination.name)
        self._notify()

        try:
            details = await self.store.get_destination_details(destination.name)
        except Exception as e:
            failure = LookupFailure.wrap(e, destination.name, "details")
            if self._is_current(token, self._detail_seq):
                self._fail(failure)
            else:
                self._logger.debug(
                    "Ignoring stale detail failure",
                    extra={"destination_name": destination.name},
                )
            return

        if not self._is_current(token, self._detail_seq):
            self._logger.debug(
                "Discarding stale details",
                extra={"destination_name": destination.name},
            )
            return

        self.state.details = details
        self.state.error = None
        self.state.phase = SearchPhase.DETAIL_LOADED
        self._notify()

    def closest(self, limit: Optional[int] = None) -> List[RankedDestination]:
        """Rank the current options by distance to the selection.

        Only the current option list is considered. Returns an empty list
        when nothing is selected.
        """
        if self.state.selected is None:
            return []
        return closest_destinations(
            self.state.selected,
            self.state.options,
            limit=self.proximity_limit if limit is None else limit,
            radius_km=self.earth_radius_km,
        )

    # ------------------------------------------------------------------
    # Listeners and scheduling helpers
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` after every state change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def search_pending(self) -> bool:
        """Check if a debounced search is waiting for its timer."""
        return self._debouncer.pending

    async def flush(self) -> None:
        """Run the pending debounced search now and wait for it."""
        await self._debouncer.flush()

    async def wait_idle(self) -> None:
        """Wait for the debounce timer and the search it started."""
        await self._debouncer.wait_idle()

    def _show_results(self, query: str, results: Sequence[Destination]) -> None:
        self.state.options = tuple(prioritize(results, query))
        self.state.error = None
        self.state.phase = SearchPhase.DISPLAYING
        self._notify()

    def _fail(self, failure: LookupFailure) -> None:
        message = display_message(failure)
        self._logger.warning(
            "Lookup failed",
            extra={
                "operation": failure.operation,
                "query": failure.query,
                "error": str(failure),
            },
        )
        self.state.error = message
        self.state.phase = SearchPhase.ERROR
        self._notify()

    def _is_current(self, token: int, latest: int) -> bool:
        return self.apply_stale_responses or token == latest

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)
