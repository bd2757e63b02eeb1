"""Scriptable stand-ins for the quote source."""

from __future__ import annotations

import asyncio
from collections import deque
from typing import Iterable

from quoteboard.core.models.quote import Quote


class FakeQuoteSource:
    """Returns (or raises) scripted outcomes in order.

    When the script runs out, the last outcome repeats.  If *gated* is true
    every call blocks until :meth:`release` is called for it, which lets a
    test decide the order in which overlapping fetches complete.
    """

    def __init__(self, outcomes: Iterable[Quote | Exception], *, gated: bool = False) -> None:
        self._outcomes = deque(outcomes)
        self._last: Quote | Exception | None = None
        self._gated = gated
        self.gates: list[asyncio.Event] = []
        self.calls = 0

    async def fetch_random_quote(self) -> Quote:
        self.calls += 1
        outcome = self._outcomes.popleft() if self._outcomes else self._last
        self._last = outcome
        if self._gated:
            gate = asyncio.Event()
            self.gates.append(gate)
            await gate.wait()
        if isinstance(outcome, Exception):
            raise outcome
        assert outcome is not None, "FakeQuoteSource has no outcomes"
        return outcome

    def release(self, index: int) -> None:
        self.gates[index].set()
