"""Tests for the debounce schedulers."""

from __future__ import annotations

import threading

import pytest

from screenfit.domain.services import (
    ManualScheduler,
    ScheduledTask,
    Scheduler,
    ThreadingScheduler,
)


class TestManualScheduler:
    """Tests for ManualScheduler."""

    def test_satisfies_protocol(self) -> None:
        """ManualScheduler and its handles should satisfy the protocols."""
        scheduler = ManualScheduler()
        assert isinstance(scheduler, Scheduler)
        assert isinstance(scheduler.call_later(1, lambda: None), ScheduledTask)

    def test_fires_when_due(self) -> None:
        """A callback should run once the clock reaches its due time."""
        scheduler = ManualScheduler()
        fired: list[int] = []
        scheduler.call_later(1000, lambda: fired.append(scheduler.now_ms))

        assert scheduler.advance(999) == 0
        assert fired == []
        assert scheduler.advance(1) == 1
        assert fired == [1000]

    def test_cancelled_task_never_runs(self) -> None:
        """Cancelled callbacks should be skipped."""
        scheduler = ManualScheduler()
        fired: list[str] = []
        task = scheduler.call_later(10, lambda: fired.append("x"))
        task.cancel()

        assert task.cancelled
        assert scheduler.pending_count == 0
        assert scheduler.advance(100) == 0
        assert fired == []

    def test_runs_in_due_order(self) -> None:
        """Callbacks should run in due-time order with the clock set to each due time."""
        scheduler = ManualScheduler()
        fired: list[tuple[str, int]] = []
        scheduler.call_later(30, lambda: fired.append(("b", scheduler.now_ms)))
        scheduler.call_later(10, lambda: fired.append(("a", scheduler.now_ms)))

        scheduler.advance(50)

        assert fired == [("a", 10), ("b", 30)]
        assert scheduler.now_ms == 50

    def test_nested_scheduling_inside_window(self) -> None:
        """A callback scheduled by another callback fires in the same advance if due."""
        scheduler = ManualScheduler()
        fired: list[int] = []

        def first() -> None:
            scheduler.call_later(5, lambda: fired.append(scheduler.now_ms))

        scheduler.call_later(10, first)
        assert scheduler.advance(20) == 2
        assert fired == [15]

    def test_run_pending(self) -> None:
        """run_pending should drain every queued callback."""
        scheduler = ManualScheduler()
        scheduler.call_later(500, lambda: None)
        scheduler.call_later(2500, lambda: None)

        assert scheduler.run_pending() == 2
        assert scheduler.now_ms == 2500

    def test_negative_values_raise(self) -> None:
        """Negative delays and backwards moves should be rejected."""
        scheduler = ManualScheduler()
        with pytest.raises(ValueError):
            scheduler.call_later(-1, lambda: None)
        with pytest.raises(ValueError):
            scheduler.advance(-1)


class TestThreadingScheduler:
    """Tests for ThreadingScheduler."""

    def test_fires_on_timer_thread(self) -> None:
        """The callback should run after the delay."""
        done = threading.Event()
        ThreadingScheduler().call_later(10, done.set)
        assert done.wait(timeout=2.0)

    def test_cancel_prevents_callback(self) -> None:
        """Cancelling before the delay elapses should prevent the callback."""
        done = threading.Event()
        task = ThreadingScheduler().call_later(200, done.set)
        task.cancel()

        assert task.cancelled
        assert not done.wait(timeout=0.4)
