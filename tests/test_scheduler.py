"""Tests for the timer facilities."""

import asyncio

import pytest

from bottles.singalong.scheduler import LoopScheduler, VirtualClock


class TestVirtualClock:
    """Deterministic simulated time."""

    def test_fires_when_due(self):
        clock = VirtualClock()
        calls = []
        clock.call_later(100, lambda: calls.append(clock.now))

        assert clock.advance(99) == 0
        assert calls == []
        assert clock.advance(1) == 1
        assert calls == [100]

    def test_cancelled_never_fires(self):
        clock = VirtualClock()
        calls = []
        handle = clock.call_later(10, lambda: calls.append("x"))
        handle.cancel()

        clock.advance(1000)
        assert calls == []
        assert handle.cancelled()
        assert clock.pending() == []

    def test_deadline_order_then_schedule_order(self):
        clock = VirtualClock()
        calls = []
        clock.call_later(20, lambda: calls.append("b"))
        clock.call_later(10, lambda: calls.append("a"))
        clock.call_later(20, lambda: calls.append("c"))

        clock.advance(20)
        assert calls == ["a", "b", "c"]

    def test_rescheduled_callback_fires_in_same_advance(self):
        clock = VirtualClock()
        calls = []

        def tick():
            calls.append(clock.now)
            if len(calls) < 3:
                clock.call_later(5, tick)

        clock.call_later(5, tick)
        clock.advance(15)
        assert calls == [5, 10, 15]

    def test_run_until_idle(self):
        clock = VirtualClock()
        calls = []
        clock.call_later(5000, lambda: calls.append(1))
        assert clock.run_until_idle() == 1
        assert clock.now == 5000

    def test_negative_values_rejected(self):
        clock = VirtualClock()
        with pytest.raises(ValueError):
            clock.call_later(-1, lambda: None)
        with pytest.raises(ValueError):
            clock.advance(-1)


class TestLoopScheduler:
    """asyncio-backed scheduling."""

    def test_fires_on_running_loop(self):
        async def scenario():
            fired = asyncio.Event()
            LoopScheduler().call_later(1, fired.set)
            await asyncio.wait_for(fired.wait(), timeout=1.0)
            return fired.is_set()

        assert asyncio.run(scenario()) is True

    def test_cancel(self):
        async def scenario():
            calls = []
            handle = LoopScheduler().call_later(1, lambda: calls.append(1))
            handle.cancel()
            await asyncio.sleep(0.02)
            return calls, handle.cancelled()

        calls, cancelled = asyncio.run(scenario())
        assert calls == []
        assert cancelled is True
