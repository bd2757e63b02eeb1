"""Shared pytest fixtures for Quoteboard tests."""

from __future__ import annotations

import pytest

from quoteboard.core.event_bus import EventBus
from quoteboard.core.models.config import QuoteboardConfig
from quoteboard.core.models.quote import Quote
from tests.helpers.clock import VirtualClock


@pytest.fixture
async def event_bus():
    """Provide a started EventBus that is stopped after the test."""
    bus = EventBus(queue_size=100)
    await bus.start()
    yield bus
    await bus.stop()


@pytest.fixture(scope="session")
def quoteboard_config() -> QuoteboardConfig:
    """Session-scoped default config (no file I/O)."""
    return QuoteboardConfig()


@pytest.fixture
def clock() -> VirtualClock:
    return VirtualClock()


@pytest.fixture
def quotes_payload() -> dict:
    """A trimmed-down ``GET /quotes`` body."""
    return {
        "quotes": [
            {"id": 1, "quote": "Life isn't about getting and having, it's about giving and being.", "author": "Kevin Kruse"},
            {"id": 2, "quote": "Whatever the mind of man can conceive and believe, it can achieve.", "author": "Napoleon Hill"},
            {"id": 3, "quote": "Strive not to be a success, but rather to be of value.", "author": "Albert Einstein"},
        ],
        "total": 1454,
        "skip": 0,
        "limit": 3,
    }


@pytest.fixture
def q1() -> Quote:
    return Quote(id=1, quote="First", author="Ada")


@pytest.fixture
def q2() -> Quote:
    return Quote(id=2, quote="Second", author="Grace")
