"""Core Zep class — main entry point for the library."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any, NamedTuple

from zep.config import ZepConfig
from zep.timer import RecurringTimer

logger = logging.getLogger(__name__)

Handler = Callable[["Zep"], Any]
ErrorHandler = Callable[["Zep", Exception], Any]


class ZepStats(NamedTuple):
    """Snapshot of a Zep instance's counters."""

    invocations: int
    executions: int
    timers: int
    coalesced: float


class Zep:
    """Debounce a callback onto a recurring timer.

    Every :meth:`run` call records its arguments. With a positive period the
    first call arms a :class:`RecurringTimer`; each tick executes the
    callback once with the latest arguments, and the first tick that sees no
    ``run()`` since the previous one tears the timer down and fires
    ``on_completed``. Without a period the callback runs synchronously inside
    :meth:`run`.

    Debounced ``run()`` calls must happen inside a running event loop.

    Example::

        zep = Zep(save, 0.2).on_completed(lambda z: z.write_stats())

        for text in keystrokes:
            zep.run(text)
    """

    __slots__ = (
        "_abort_requested",
        "_callback",
        "_cancel_requested",
        "_config",
        "_execution_count",
        "_invocation_count",
        "_is_running",
        "_is_waiting",
        "_latest_args",
        "_latest_kwargs",
        "_on_aborted",
        "_on_after_run",
        "_on_before_run",
        "_on_cancelled",
        "_on_completed",
        "_on_error",
        "_timer",
        "_timers_count",
        "_was_aborted",
        "_was_cancelled",
    )

    def __init__(
        self,
        callback: Callable[..., Any],
        period: float | None = None,
        *,
        config: ZepConfig | None = None,
    ) -> None:
        if not callable(callback):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")
        if inspect.iscoroutinefunction(callback):
            raise TypeError("callback must be a regular function, not a coroutine function")
        if config is not None and period is not None:
            raise ValueError("pass either period or config, not both")

        self._callback = callback
        self._config = config or ZepConfig(period=period)
        self._timer: RecurringTimer | None = None

        self._invocation_count = 0
        self._execution_count = 0
        self._timers_count = 0

        self._is_running = False
        self._is_waiting = False
        self._cancel_requested = False
        self._was_cancelled = False
        self._abort_requested = False
        self._was_aborted = False

        self._latest_args: tuple[Any, ...] = ()
        self._latest_kwargs: dict[str, Any] = {}

        self._on_before_run: Handler | None = None
        self._on_after_run: Handler | None = None
        self._on_completed: Handler | None = None
        self._on_cancelled: Handler | None = None
        self._on_aborted: Handler | None = None
        self._on_error: ErrorHandler | None = None

    @property
    def config(self) -> ZepConfig:
        return self._config

    @property
    def period(self) -> float | None:
        return self._config.period

    @property
    def invocation_count(self) -> int:
        return self._invocation_count

    @property
    def execution_count(self) -> int:
        return self._execution_count

    @property
    def timers_count(self) -> int:
        """Number of timers created so far."""
        return self._timers_count

    @property
    def is_waiting(self) -> bool:
        """True while a timer is armed; ``run()`` won't create another one."""
        return self._is_waiting

    @property
    def is_running(self) -> bool:
        """True from a ``run()`` call until the tick that executes it."""
        return self._is_running

    @property
    def was_cancelled(self) -> bool:
        return self._was_cancelled

    @property
    def was_aborted(self) -> bool:
        return self._was_aborted

    # Handler registration

    def on_before_run(self, handler: Handler | None) -> Zep:
        self._on_before_run = handler
        return self

    def on_after_run(self, handler: Handler | None) -> Zep:
        self._on_after_run = handler
        return self

    def on_completed(self, handler: Handler | None) -> Zep:
        """Called once the timer observes a full idle period and shuts down."""
        self._on_completed = handler
        return self

    def on_cancelled(self, handler: Handler | None) -> Zep:
        self._on_cancelled = handler
        return self

    def on_aborted(self, handler: Handler | None) -> Zep:
        self._on_aborted = handler
        return self

    def on_error(self, handler: ErrorHandler | None) -> Zep:
        """Receives ``(zep, exc)`` for every exception raised by the callback."""
        self._on_error = handler
        return self

    # Control

    def cancel(self) -> None:
        """Request cancellation; takes effect on the next timer tick."""
        self._cancel_requested = True

    def abort(self) -> None:
        """Request an abort; the next ``run()`` destroys the timer and returns."""
        self._abort_requested = True

    def run(self, *args: Any, **kwargs: Any) -> Zep:
        """Execute the callback now, or debounce it onto the timer."""
        if self._abort_requested:
            self._destroy_timer()
            self._is_running = False
            self._is_waiting = False
            self._abort_requested = False
            self._was_aborted = True
            if self._on_aborted is not None:
                self._on_aborted(self)
            return self

        self._latest_args = args
        self._latest_kwargs = kwargs
        self._invocation_count += 1
        self._was_cancelled = False
        self._was_aborted = False
        self._is_waiting = True
        self._is_running = True

        if self._config.immediate:
            try:
                self._execute()
            finally:
                self._execution_count += 1
                self._is_waiting = False
                self._is_running = False
            return self

        if self._timer is None:
            assert self._config.period is not None
            timer = RecurringTimer(self._config.period, self._tick)
            timer.start()
            self._timer = timer
            self._timers_count += 1

        return self

    def _tick(self) -> None:
        if not self._is_running:
            self._destroy_timer()
            self._is_waiting = False
            if not self._was_cancelled and self._on_completed is not None:
                self._on_completed(self)
            return

        if self._cancel_requested:
            self._is_running = False
            self._cancel_requested = False
            self._was_cancelled = True
            if self._on_cancelled is not None:
                self._on_cancelled(self)
            if self._config.cancel_skips_run:
                self._is_waiting = False
                return

        executed = False
        try:
            if self._on_before_run is not None:
                self._on_before_run(self)

            executed = True
            self._execute()

            if self._on_after_run is not None:
                self._on_after_run(self)
        except Exception:
            # Stop ticking once a hook raises.
            self._destroy_timer()
            raise
        finally:
            if executed:
                self._execution_count += 1
            self._is_waiting = False
            self._is_running = False

    def _execute(self) -> None:
        try:
            self._callback(*self._latest_args, **self._latest_kwargs)
        except Exception as exc:
            if self._on_error is not None:
                self._on_error(self, exc)
            else:
                logger.debug("callback %r raised", self._callback, exc_info=True)

    def _destroy_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # Statistics

    @property
    def stats(self) -> ZepStats:
        invocations = self._invocation_count
        executions = self._execution_count
        if invocations == 0 or executions == 0:
            coalesced = 0.0
        else:
            coalesced = round(100 * (1 - executions / invocations), 2)
        return ZepStats(invocations, executions, self._timers_count, coalesced)

    def write_stats(self) -> None:
        """Log call, timer and execution counts at INFO level."""
        stats = self.stats
        logger.info(
            "[Zep]: calls: %d, timers created: %d, callback executions: %d, coalesced: %.2f%%.",
            stats.invocations,
            stats.timers,
            stats.executions,
            stats.coalesced,
        )

    def __repr__(self) -> str:
        return (
            f"Zep(period={self._config.period}, "
            f"calls={self._invocation_count}, "
            f"executions={self._execution_count}, "
            f"waiting={self._is_waiting}, "
            f"running={self._is_running})"
        )
