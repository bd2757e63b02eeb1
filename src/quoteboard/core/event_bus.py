"""State event bus — carries ``quote.*`` events from controllers to panels.

Publishing never blocks the fetch cycle: events go onto a bounded
``asyncio.Queue`` and a consumer task hands them to subscribers.  Every
``quote.state.changed`` payload is a full :class:`FetchState` snapshot, so
when the queue is full the oldest event is dropped; later snapshots
supersede it anyway.

A subscriber that raises is removed, so one broken panel cannot stall
updates for the others.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable

from quoteboard.core.models.event import Event

_log = logging.getLogger(__name__)

Handler = Callable[[Event], Any]


@dataclass
class Subscription:
    """One handler for one event type, optionally narrowed by payload values."""

    event_type: str
    handler: Handler
    match: dict[str, Any] = field(default_factory=dict)
    sub_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def wants(self, event: Event) -> bool:
        return all(event.payload.get(k) == v for k, v in self.match.items())


class EventBus:
    """Queue-backed pub/sub for fetch state.

    Args:
        queue_size: Events held before the oldest one is dropped.
    """

    def __init__(self, queue_size: int = 1000) -> None:
        self._queue_size = queue_size
        self._queue: asyncio.Queue[Event] | None = None
        self._consumer: asyncio.Task[None] | None = None
        # event_type → {sub_id: Subscription}, in subscription order
        self._by_type: dict[str, dict[str, Subscription]] = {}

    @property
    def is_running(self) -> bool:
        return self._consumer is not None and not self._consumer.done()

    async def start(self) -> None:
        """Create the queue and the consumer task on the running loop."""
        self._queue = asyncio.Queue(maxsize=self._queue_size)
        self._consumer = asyncio.create_task(self._consume(), name="quote-event-consumer")
        _log.info("Event bus started (queue_size=%d)", self._queue_size)

    async def stop(self) -> None:
        """Cancel the consumer and drop every subscription."""
        if self._consumer is not None:
            self._consumer.cancel()
            try:
                await self._consumer
            except asyncio.CancelledError:
                pass
            self._consumer = None
        self._by_type.clear()
        _log.info("Event bus stopped")

    async def drain(self) -> None:
        """Return once every event published so far has been handled."""
        if self._queue is not None and self.is_running:
            await self._queue.join()

    async def publish(self, event_type: str, payload: dict[str, Any] | None = None) -> None:
        if self._queue is None:
            raise RuntimeError("EventBus.start() has not been called")
        event = Event(event_type=event_type, payload=payload or {})
        if self._queue.full():
            dropped = self._queue.get_nowait()
            self._queue.task_done()
            _log.warning("Event queue full, dropped %s", dropped.event_type)
        self._queue.put_nowait(event)

    def subscribe(
        self,
        event_type: str,
        handler: Handler,
        filter_dict: dict[str, Any] | None = None,
    ) -> str:
        """Call *handler* for *event_type* events whose payload contains *filter_dict*.

        Returns the id to pass to :meth:`unsubscribe`.
        """
        sub = Subscription(event_type, handler, dict(filter_dict or {}))
        self._by_type.setdefault(event_type, {})[sub.sub_id] = sub
        return sub.sub_id

    def unsubscribe(self, sub_id: str) -> None:
        """Remove a subscription; unknown ids are ignored."""
        for subs in self._by_type.values():
            if subs.pop(sub_id, None) is not None:
                return

    async def _consume(self) -> None:
        assert self._queue is not None
        while True:
            event = await self._queue.get()
            try:
                await self._deliver(event)
            finally:
                self._queue.task_done()

    async def _deliver(self, event: Event) -> None:
        subs = self._by_type.get(event.event_type, {})
        for sub in list(subs.values()):
            if sub.sub_id not in subs or not sub.wants(event):
                continue
            try:
                result = sub.handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                _log.exception("Subscriber %s failed on %s, removing it", sub.handler, event.event_type)
                subs.pop(sub.sub_id, None)
