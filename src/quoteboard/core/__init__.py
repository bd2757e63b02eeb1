"""Core services: event bus, quote source, refresh scheduling."""

from quoteboard.core.event_bus import EventBus
from quoteboard.core.quote_source import QuoteSource
from quoteboard.core.refresh_controller import RefreshController
from quoteboard.core.scheduler import AsyncioClock, RepeatingTimer

__all__ = [
    "AsyncioClock",
    "EventBus",
    "QuoteSource",
    "RefreshController",
    "RepeatingTimer",
]
