"""Repeating timer over an injectable clock.

Production code drives the timer from the asyncio loop (:class:`AsyncioClock`);
tests substitute a virtual clock exposing the same ``call_later`` method.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Protocol

_log = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    """Anything that can run *callback* once after *delay* seconds."""

    def call_later(self, delay: float, callback: Callable[[], Any]) -> TimerHandle: ...


class AsyncioClock:
    """Clock backed by the running event loop's ``call_later``."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class RepeatingTimer:
    """Run *callback* every *interval* seconds until :meth:`cancel`.

    The first call happens one interval after :meth:`start`.  The next tick
    is scheduled before the callback runs, so a callback that raises is
    logged and the timer keeps going.

    Args:
        interval: Seconds between ticks (must be positive).
        callback: Zero-argument callable invoked on each tick.
        clock: Scheduling backend; defaults to :class:`AsyncioClock`.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], Any],
        clock: Clock | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval!r}")
        self.interval = interval
        self._callback = callback
        self._clock = clock or AsyncioClock()
        self._handle: TimerHandle | None = None
        self.ticks = 0

    @property
    def is_active(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """Arm the timer.  Re-arming an active timer restarts its schedule."""
        self.cancel()
        self._schedule()

    def cancel(self) -> None:
        """Stop future ticks.  Safe to call when not armed."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self) -> None:
        self._handle = self._clock.call_later(self.interval, self._fire)

    def _fire(self) -> None:
        if self._handle is None:
            return
        self.ticks += 1
        self._schedule()
        try:
            self._callback()
        except Exception:
            _log.exception("Repeating timer callback %s raised", self._callback)
