"""
Debounce timer for the tour catalog.

Delays an action until input has been quiet for a fixed interval, so a
burst of search keystrokes triggers a single recompute.
"""

import asyncio
import logging
from typing import Any, Callable, Optional


logger = logging.getLogger(__name__)


class Debouncer:
    """
    Cancellable timer that keeps at most one scheduled call pending.

    Each schedule() cancels the pending call, if any, and replaces it, so
    only the last call in a burst runs.

    Attributes:
        wait_seconds: Quiet period before the scheduled call runs
        fire_count: Number of scheduled calls that actually ran
    """

    def __init__(self, wait_seconds: float = 0.3):
        """
        Initialize debouncer with its quiet period.

        Args:
            wait_seconds: Quiet period in seconds (default: 0.3)
        """
        self.wait_seconds = wait_seconds
        self.fire_count = 0
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: Callable[..., Any], *args: Any) -> None:
        """
        Schedule a call after the quiet period, replacing any pending one.

        Must be called from a running event loop.

        Args:
            callback: Callable to run
            *args: Positional arguments for the callable
        """
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.wait_seconds, self._fire, callback, args)

    def cancel(self) -> None:
        """Cancel the pending call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Cancelled pending debounced call")

    def _fire(self, callback: Callable[..., Any], args: tuple) -> None:
        self._handle = None
        self.fire_count += 1
        callback(*args)
