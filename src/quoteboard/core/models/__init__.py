"""Pydantic models for configuration, quotes, events, and fetch state."""
from quoteboard.core.models.config import HttpConfig, QuoteboardConfig, SystemConfig
from quoteboard.core.models.event import Event
from quoteboard.core.models.quote import Quote, QuoteResponse
from quoteboard.core.models.state import FetchState

__all__ = [
    "QuoteboardConfig",
    "HttpConfig",
    "SystemConfig",
    "Event",
    "Quote",
    "QuoteResponse",
    "FetchState",
]
