"""Tests for RepeatingTimer and AsyncioClock."""

from __future__ import annotations

import asyncio

import pytest

from quoteboard.core.scheduler import AsyncioClock, RepeatingTimer
from tests.helpers.clock import VirtualClock


class TestRepeatingTimer:
    def test_ticks_at_each_interval(self, clock: VirtualClock):
        hits: list[float] = []
        timer = RepeatingTimer(10, lambda: hits.append(clock.now), clock=clock)
        timer.start()

        clock.advance(35)

        assert hits == [10, 20, 30]
        assert timer.ticks == 3

    def test_cancel_prevents_further_ticks(self, clock: VirtualClock):
        hits: list[float] = []
        timer = RepeatingTimer(10, lambda: hits.append(clock.now), clock=clock)
        timer.start()
        clock.advance(10)

        timer.cancel()
        clock.advance(100)

        assert hits == [10]
        assert timer.is_active is False

    def test_cancel_when_not_armed(self, clock: VirtualClock):
        timer = RepeatingTimer(5, lambda: None, clock=clock)
        timer.cancel()
        assert timer.is_active is False

    def test_restart_replaces_schedule(self, clock: VirtualClock):
        hits: list[float] = []
        timer = RepeatingTimer(10, lambda: hits.append(clock.now), clock=clock)
        timer.start()
        clock.advance(6)
        timer.start()

        clock.advance(10)

        assert hits == [16]
        assert clock.pending == 1

    def test_raising_callback_keeps_timer_alive(self, clock: VirtualClock, caplog):
        calls = 0

        def boom():
            nonlocal calls
            calls += 1
            raise RuntimeError("boom")

        timer = RepeatingTimer(1, boom, clock=clock)
        timer.start()
        with caplog.at_level("ERROR"):
            clock.advance(3)

        assert calls == 3
        assert timer.is_active is True
        assert "raised" in caplog.text

    def test_non_positive_interval_rejected(self):
        with pytest.raises(ValueError):
            RepeatingTimer(0, lambda: None)


class TestAsyncioClock:
    async def test_runs_on_event_loop(self):
        fired = asyncio.Event()
        timer = RepeatingTimer(0.01, fired.set, clock=AsyncioClock())
        timer.start()
        try:
            await asyncio.wait_for(fired.wait(), timeout=2.0)
        finally:
            timer.cancel()
        assert timer.ticks >= 1
