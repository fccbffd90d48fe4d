"""Delayed-callback scheduling for debounced edits.

The screen model never talks to a timer directly. It asks a Scheduler to
run a callback later and keeps the returned handle so it can cancel it.
Two implementations are provided:

- ManualScheduler: a virtual clock advanced explicitly. Used by tests and
  by batch commands, where "wait one second" means advancing the clock.
- ThreadingScheduler: backed by threading.Timer for interactive hosts.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
from collections.abc import Callable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DEBOUNCE_DELAY_MS = 1000


@runtime_checkable
class ScheduledTask(Protocol):
    """Handle for a pending callback."""

    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        ...

    @property
    def cancelled(self) -> bool: ...


@runtime_checkable
class Scheduler(Protocol):
    """Runs callbacks after a delay."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Schedule ``callback`` to run ``delay_ms`` milliseconds from now."""
        ...


class _ManualTask:
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler:
    """Scheduler driven by an explicit virtual clock in milliseconds.

    Example:
        >>> scheduler = ManualScheduler()
        >>> fired = []
        >>> _ = scheduler.call_later(1000, lambda: fired.append(scheduler.now_ms))
        >>> _ = scheduler.advance(999)
        >>> fired
        []
        >>> _ = scheduler.advance(1)
        >>> fired
        [1000]
    """

    def __init__(self, start_ms: int = 0) -> None:
        self._now_ms = start_ms
        self._queue: list[tuple[int, int, _ManualTask]] = []
        self._sequence = itertools.count()

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending_count(self) -> int:
        """Number of scheduled callbacks that have not fired or been cancelled."""
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _ManualTask:
        if delay_ms < 0:
            raise ValueError("Delay cannot be negative")
        task = _ManualTask(self._now_ms + delay_ms, callback)
        heapq.heappush(self._queue, (task.due_ms, next(self._sequence), task))
        return task

    def advance(self, delta_ms: int) -> int:
        """Move the clock forward, running every callback that becomes due.

        Callbacks run in due-time order with the clock set to their due
        time, so a callback scheduled from another callback still fires in
        the same call if it falls inside the window.

        Args:
            delta_ms: Milliseconds to advance (non-negative).

        Returns:
            Number of callbacks that ran.
        """
        if delta_ms < 0:
            raise ValueError("Cannot move the clock backwards")
        target = self._now_ms + delta_ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due_ms, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            self._now_ms = due_ms
            task.callback()
            ran += 1
        self._now_ms = target
        return ran

    def advance_to(self, time_ms: int) -> int:
        """Advance the clock to an absolute time."""
        return self.advance(time_ms - self._now_ms)

    def run_pending(self) -> int:
        """Advance until no callbacks are left."""
        ran = 0
        while self.pending_count:
            next_due = min(due for due, _, task in self._queue if not task.cancelled)
            ran += self.advance_to(next_due)
        return ran


class _TimerTask:
    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ThreadingScheduler:
    """Scheduler backed by daemon ``threading.Timer`` instances.

    Callbacks run on the timer thread. Hosts with their own event loop
    should supply a Scheduler that posts to that loop instead.
    """

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _TimerTask:
        if delay_ms < 0:
            raise ValueError("Delay cannot be negative")
        timer = threading.Timer(delay_ms / 1000, callback)
        timer.daemon = True
        timer.start()
        logger.debug(f"Started timer for {delay_ms} ms")
        return _TimerTask(timer)
