"""Refresh controller — owns the fetch state and the auto-refresh timer.

Manual refreshes and timer ticks both become fetch-and-apply cycles that run
as independent asyncio tasks.  Cycles are not serialised: when two overlap,
the one that completes last wins unless ``discard_stale`` is set, in which
case a result older than the newest applied one is dropped.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any

from quoteboard.core import events
from quoteboard.core.event_bus import EventBus
from quoteboard.core.models.quote import Quote
from quoteboard.core.models.state import FetchState
from quoteboard.core.quote_source import QuoteSource
from quoteboard.core.scheduler import Clock, RepeatingTimer
from quoteboard.errors import FetchFailed
from quoteboard.log_config.logger import ContextualLogger

REFRESH_INTERVAL_SECONDS = 10.0


class RefreshController:
    """Mediates manual and automatic refreshes into :class:`QuoteSource` calls.

    Every state change is published on the event bus as
    ``quote.state.changed`` with the serialised :class:`FetchState` as
    payload; failed fetches additionally publish ``quote.fetch.failed``.

    Args:
        source: Where quotes come from.
        event_bus: Optional bus to publish state changes on.
        clock: Scheduling backend for the repeating timer.
        interval: Seconds between automatic refreshes.
        discard_stale: Drop results overtaken by a newer applied cycle.
        controller_id: Tag added to every published payload so several
            controllers can share one bus.
    """

    def __init__(
        self,
        source: QuoteSource,
        *,
        event_bus: EventBus | None = None,
        clock: Clock | None = None,
        interval: float = REFRESH_INTERVAL_SECONDS,
        discard_stale: bool = False,
        controller_id: str | None = None,
    ) -> None:
        self.controller_id = controller_id or uuid.uuid4().hex[:8]
        self._source = source
        self._bus = event_bus
        self._clock = clock
        self._interval = interval
        self._discard_stale = discard_stale

        self._state = FetchState()
        self._timer: RepeatingTimer | None = None
        self._generation = 0
        self._applied_generation = 0
        self._tasks: set[asyncio.Task[FetchState]] = set()
        self._log = ContextualLogger(logging.getLogger(__name__), controller=self.controller_id)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def current_quote(self) -> Quote | None:
        return self._state.current_quote

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        """True while the auto-refresh timer is armed."""
        return self._timer is not None and self._timer.is_active

    @property
    def pending(self) -> tuple[asyncio.Task[FetchState], ...]:
        """Cycles that have been started but not yet finished."""
        return tuple(self._tasks)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start(self) -> asyncio.Task[FetchState]:
        """Run one cycle now and arm the repeating timer.

        Calling ``start()`` again without ``stop()`` replaces the existing
        timer, so at most one timer is ever active.

        The timer is armed right away, not when the first fetch finishes,
        so ticks fall at multiples of the interval after ``start()``.  If the
        first fetch is slow the first tick can come less than one interval
        after it completes.

        Returns:
            The task running the immediate cycle.
        """
        if self._timer is not None:
            self._log.debug("Re-arming auto-refresh timer")
            self._timer.cancel()

        task = self._spawn("start")
        self._timer = RepeatingTimer(self._interval, self._on_tick, clock=self._clock)
        self._timer.start()
        self._log.info("Auto-refresh started (interval=%.1fs)", self._interval)
        return task

    def refresh_now(self) -> asyncio.Task[FetchState]:
        """Run one cycle outside the timer schedule (the schedule is untouched)."""
        return self._spawn("manual")

    def stop(self) -> None:
        """Cancel the timer.  In-flight cycles still complete and apply."""
        if self._timer is None:
            return
        self._timer.cancel()
        self._timer = None
        self._log.info("Auto-refresh stopped")

    async def wait_idle(self) -> None:
        """Wait for every cycle started so far (test and shutdown helper)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # ------------------------------------------------------------------
    # Cycle
    # ------------------------------------------------------------------

    def _on_tick(self) -> None:
        self._spawn("timer")

    def _spawn(self, trigger: str) -> asyncio.Task[FetchState]:
        self._generation += 1
        generation = self._generation
        task = asyncio.get_running_loop().create_task(
            self._run_cycle(generation, trigger),
            name=f"quote-refresh-{generation}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_cycle(self, generation: int, trigger: str) -> FetchState:
        log = self._log.bind(cycle=generation, trigger=trigger)
        quote: Quote | None = None
        try:
            self._state = self._state.model_copy(update={"is_loading": True})
            await self._publish_state(generation)
            quote = await self._source.fetch_random_quote()
        except FetchFailed as exc:
            log.warning("Quote fetch failed (%s): %s", type(exc).__name__, exc)
            await self._publish(
                events.QUOTE_FETCH_FAILED,
                {"generation": generation, "error": type(exc).__name__, "message": str(exc)},
            )
        finally:
            update: dict[str, Any] = {"is_loading": False}
            if quote is not None:
                if self._discard_stale and generation < self._applied_generation:
                    log.info(
                        "Discarding stale quote id=%d (newest applied cycle is %d)",
                        quote.id,
                        self._applied_generation,
                    )
                else:
                    self._applied_generation = max(self._applied_generation, generation)
                    update["current_quote"] = quote
                    log.debug("Applied quote id=%d", quote.id)
            self._state = self._state.model_copy(update=update)
            await self._publish_state(generation)

        return self._state

    async def _publish_state(self, generation: int) -> None:
        payload = self._state.model_dump(mode="json", by_alias=True)
        payload["generation"] = generation
        await self._publish(events.QUOTE_STATE_CHANGED, payload)

    async def _publish(self, event_type: str, payload: dict[str, Any]) -> None:
        if self._bus is not None:
            await self._bus.publish(event_type, {**payload, "controller_id": self.controller_id})
