"""
Timer facilities for the sing-along controller.

The controller only needs ``call_later(delay_ms, callback)`` returning a
handle it can ``cancel()``.  Two implementations:

- ``VirtualClock``: deterministic simulated time, advanced explicitly.
  Used by tests and by anything that wants to replay a session.
- ``LoopScheduler``: wraps an asyncio event loop for real pacing.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from typing import Callable, List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...

    def cancelled(self) -> bool: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


# -----------------------------------------------------------------------------
# Simulated time
# -----------------------------------------------------------------------------

class VirtualTimer:
    """A pending callback on a ``VirtualClock``."""

    __slots__ = ("deadline", "callback", "_cancelled", "_fired")

    def __init__(self, deadline: int, callback: Callable[[], None]):
        self.deadline = deadline
        self.callback = callback
        self._cancelled = False
        self._fired = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def pending(self) -> bool:
        return not (self._cancelled or self._fired)


class VirtualClock:
    """Simulated millisecond clock.

    Timers fire in deadline order (ties in scheduling order) while
    ``advance`` moves time forward.  A callback may schedule new timers;
    those fire within the same ``advance`` if they fall due.
    """

    def __init__(self, start_ms: int = 0):
        self.now = start_ms
        self._queue: List[Tuple[int, int, VirtualTimer]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> VirtualTimer:
        if delay_ms < 0:
            raise ValueError(f"delay must be non-negative, got {delay_ms}")
        timer = VirtualTimer(self.now + delay_ms, callback)
        heapq.heappush(self._queue, (timer.deadline, next(self._seq), timer))
        return timer

    def pending(self) -> List[VirtualTimer]:
        """Timers that are neither cancelled nor fired."""
        return [t for _, _, t in self._queue if t.pending]

    def advance(self, ms: int) -> int:
        """Move time forward by *ms*; return how many callbacks ran."""
        if ms < 0:
            raise ValueError(f"cannot move time backwards ({ms} ms)")
        target = self.now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, timer = heapq.heappop(self._queue)
            if not timer.pending:
                continue
            self.now = deadline
            timer._fired = True
            timer.callback()
            fired += 1
        self.now = target
        return fired

    def run_until_idle(self, limit: int = 10_000) -> int:
        """Fire every pending timer in order, however far ahead it is."""
        fired = 0
        while fired < limit:
            live = self.pending()
            if not live:
                break
            next_deadline = min(t.deadline for t in live)
            fired += self.advance(next_deadline - self.now)
        return fired


# -----------------------------------------------------------------------------
# asyncio
# -----------------------------------------------------------------------------

class LoopScheduler:
    """Schedules callbacks on an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        logger.debug(f"Scheduling callback in {delay_ms} ms")
        return self.loop.call_later(delay_ms / 1000.0, callback)
