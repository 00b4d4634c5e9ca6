"""Repeating timer built on the running asyncio event loop."""

import logging
from asyncio import AbstractEventLoop, TimerHandle, get_running_loop
from collections.abc import Callable

logger = logging.getLogger(__name__)


class RecurringTimer:
    """Invoke a callback every ``interval`` seconds until cancelled.

    Each firing arms the next ``call_later`` before running the callback,
    so a callback that calls :meth:`cancel` stops all further firings.
    """

    __slots__ = ("_callback", "_handle", "_loop", "fire_count", "interval")

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")

        self.interval = interval
        self.fire_count = 0
        self._callback = callback
        self._handle: TimerHandle | None = None
        self._loop: AbstractEventLoop | None = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Arm the timer on the running loop (idempotent)."""
        if self._handle is not None:
            return
        self._loop = get_running_loop()
        self._schedule()
        logger.debug("armed %r", self)

    def cancel(self) -> None:
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        logger.debug("cancelled %r", self)

    def _schedule(self) -> None:
        assert self._loop is not None
        self._handle = self._loop.call_later(self.interval, self._fire)

    def _fire(self) -> None:
        self.fire_count += 1
        self._schedule()
        self._callback()

    def __repr__(self) -> str:
        return f"RecurringTimer(interval={self.interval}, active={self.active}, fires={self.fire_count})"
