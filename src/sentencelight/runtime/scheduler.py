"""Deferred-task schedulers and per-trigger debouncing."""

import asyncio
import heapq
import itertools
from typing import Callable, Dict, List, Optional, Tuple

from ..core.abc import Scheduler, TaskHandle


class Debouncer:
    """
    Coalesces bursts of triggers into one deferred task per trigger kind.

    A later schedule call for a kind cancels that kind's unfired task. Kinds
    are independent, so a theme-change task and a view-change task can both
    be pending; they run one after the other on the host loop.
    """

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler
        self._pending: Dict[str, TaskHandle] = {}
        self._tokens: Dict[str, object] = {}

    def schedule(self, kind: str, delay_ms: int, task: Callable[[], None]) -> None:
        """
        Schedule task for kind, superseding an earlier unfired one.

        Args:
            kind: Trigger kind the task belongs to
            delay_ms: Delay before the task runs
            task: Zero-argument callable
        """
        previous = self._pending.pop(kind, None)
        if previous is not None:
            previous.cancel()

        # Schedulers may run a due task before schedule() returns.
        token = object()
        self._tokens[kind] = token

        def _fire():
            if self._tokens.get(kind) is token:
                del self._tokens[kind]
                self._pending.pop(kind, None)
            task()

        handle = self.scheduler.schedule(delay_ms, _fire)
        if self._tokens.get(kind) is token:
            self._pending[kind] = handle

    def cancel(self, kind: str) -> None:
        self._tokens.pop(kind, None)
        handle = self._pending.pop(kind, None)
        if handle is not None:
            handle.cancel()

    def cancel_all(self) -> None:
        """Cancel every unfired task."""
        for handle in self._pending.values():
            handle.cancel()
        self._pending.clear()
        self._tokens.clear()

    def pending(self) -> List[str]:
        """Trigger kinds with an unfired task."""
        return sorted(self._tokens)


class _ManualHandle:
    def __init__(self):
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Virtual-clock scheduler. Nothing runs until the clock is advanced.

    Tasks due at the same time run in scheduling order.
    """

    def __init__(self):
        self.now_ms = 0
        self._queue: List[Tuple[int, int, _ManualHandle, Callable[[], None]]] = []
        self._seq = itertools.count()

    def schedule(self, delay_ms: int, task: Callable[[], None]) -> _ManualHandle:
        handle = _ManualHandle()
        heapq.heappush(self._queue, (self.now_ms + max(0, delay_ms), next(self._seq), handle, task))
        return handle

    def advance(self, ms: int) -> int:
        """
        Move the clock forward, running every task that becomes due.

        Tasks scheduled by running tasks also run if they fall due in the window.

        Returns:
            int: Number of tasks run
        """
        target = self.now_ms + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, task = heapq.heappop(self._queue)
            self.now_ms = due
            if handle.cancelled:
                continue
            task()
            ran += 1
        self.now_ms = target
        return ran

    def run_all(self) -> int:
        """Run every pending task regardless of delay."""
        ran = 0
        while self._queue:
            last_due = max(entry[0] for entry in self._queue)
            ran += self.advance(max(0, last_due - self.now_ms))
        return ran

    @property
    def pending_count(self) -> int:
        return sum(1 for entry in self._queue if not entry[2].cancelled)


class AsyncioScheduler:
    """Scheduler backed by a single-threaded asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def schedule(self, delay_ms: int, task: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0, delay_ms) / 1000.0, task)
