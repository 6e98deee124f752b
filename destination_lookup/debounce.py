"""Timer-based debouncing on the asyncio event loop.

A Debouncer owns a single cancellable timer. Every call reschedules it,
so only the last call inside a debounce window runs the wrapped action;
earlier calls are dropped, not queued.

Construct one Debouncer per input stream and call it many times. A new
instance per keystroke has its own timer and debounces nothing.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


@dataclass
class Debouncer(Generic[T]):
    """Delay an async action until calls stop arriving for ``wait_ms``.

    The wrapped action takes a single argument and returns nothing the
    caller waits for: it reports its outcome through side effects.
    Exceptions escaping the action are logged, never raised into the
    event loop.

    Attributes:
        action: Coroutine function run with the last call's argument
        wait_ms: Quiet period in milliseconds
        loop: Event loop to schedule on (default: the loop running at
            call time)

    Example:
        debouncer = Debouncer(coordinator.search, wait_ms=300)
        debouncer("P")
        debouncer("Pa")
        debouncer("Par")  # only search("Par") runs, 300 ms from now
    """

    action: Callable[[T], Awaitable[None]]
    wait_ms: float = 300
    loop: Optional[asyncio.AbstractEventLoop] = field(default=None, repr=False)

    _handle: Optional[asyncio.TimerHandle] = field(
        default=None, init=False, repr=False
    )
    _task: Optional[asyncio.Task[None]] = field(default=None, init=False, repr=False)
    _last_arg: object = field(default=_MISSING, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.wait_ms < 0:
            raise ValueError(f"wait_ms must be non-negative, got {self.wait_ms}")
        self._logger = logging.getLogger(__name__)

    @property
    def pending(self) -> bool:
        """Check if a timer is scheduled and has not fired yet."""
        return self._handle is not None

    def __call__(self, arg: T) -> None:
        """Schedule the action, cancelling any timer still pending."""
        loop = self._get_loop()
        if self._handle is not None:
            self._handle.cancel()
            self._logger.debug("Debounce timer rescheduled")
        self._last_arg = arg
        self._handle = loop.call_later(self.wait_ms / 1000, self._fire)

    def cancel(self) -> bool:
        """Drop the pending call, if any.

        Returns:
            True if a timer was pending and got cancelled.
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        self._logger.debug("Debounce timer cancelled")
        return True

    async def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        self._start()
        await self.wait_idle()

    async def wait_idle(self) -> None:
        """Wait until no timer is pending and the last action has finished."""
        while True:
            if self._task is not None and not self._task.done():
                await self._task
            elif self._handle is not None:
                remaining = self._handle.when() - self._get_loop().time()
                await asyncio.sleep(max(remaining, 0))
            else:
                return

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self.loop is not None:
            return self.loop
        return asyncio.get_running_loop()

    def _fire(self) -> None:
        self._handle = None
        self._start()

    def _start(self) -> None:
        arg = self._last_arg
        if arg is _MISSING:
            return
        self._task = self._get_loop().create_task(
            self._run(arg)  # type: ignore[arg-type]
        )

    async def _run(self, arg: T) -> None:
        try:
            await self.action(arg)
        except asyncio.CancelledError:
            raise
        except Exception:
            self._logger.exception("Debounced action failed")
