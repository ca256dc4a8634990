"""Tests for session_timer module."""

import threading
from unittest.mock import MagicMock

import pytest

from flashcard_challenge.services.session_timer import SessionTimer, ThreadingScheduler


@pytest.fixture
def on_expire():
    return MagicMock()


@pytest.fixture
def on_tick():
    return MagicMock()


@pytest.fixture
def timer(manual_scheduler, manual_clock, on_expire, on_tick):
    """A three-second timer driven by the manual scheduler."""
    return SessionTimer(
        3,
        manual_scheduler,
        on_expire=on_expire,
        on_tick=on_tick,
        clock=manual_clock,
    )


class TestSessionTimer:
    """Tests for SessionTimer countdown behavior."""

    def test_initial_state(self, timer, manual_scheduler):
        """A new timer holds the full duration and schedules nothing."""
        assert timer.time_left == 3
        assert not timer.is_active
        assert not timer.expired
        assert manual_scheduler.tasks == []

    def test_start_schedules_one_task(self, timer, manual_scheduler):
        """start() schedules a single repeating task at the tick interval."""
        timer.start()
        assert timer.is_active
        assert len(manual_scheduler.tasks) == 1
        assert manual_scheduler.tasks[0].interval == 1.0

    def test_start_twice_is_ignored(self, timer, manual_scheduler):
        """A timer only ever starts once."""
        timer.start()
        timer.start()
        assert len(manual_scheduler.tasks) == 1

    def test_tick_decrements(self, timer, manual_scheduler, on_tick):
        """Each tick removes one second and reports the time left."""
        timer.start()
        manual_scheduler.tick()
        assert timer.time_left == 2
        on_tick.assert_called_once_with(2)

    def test_expires_once_at_zero(self, timer, manual_scheduler, on_expire):
        """Reaching zero fires on_expire exactly once and stops ticking."""
        timer.start()
        manual_scheduler.tick(3)
        assert timer.time_left == 0
        assert timer.expired
        assert not timer.is_active
        on_expire.assert_called_once()

        # Late ticks from a task that already fired are ignored
        manual_scheduler.tasks[0].callback()
        on_expire.assert_called_once()
        assert timer.time_left == 0

    def test_cancel_stops_ticks(self, timer, manual_scheduler, on_tick, on_expire):
        """After cancel() no tick or expiry is delivered."""
        timer.start()
        timer.cancel()
        assert manual_scheduler.tasks[0].cancelled
        manual_scheduler.tasks[0].callback()
        on_tick.assert_not_called()
        on_expire.assert_not_called()
        assert timer.time_left == 3

    def test_cancel_is_idempotent(self, timer):
        """cancel() can be called any number of times, even before start()."""
        timer.cancel()
        timer.start()
        timer.cancel()
        timer.cancel()
        assert not timer.is_active

    def test_elapsed_since_mark(self, timer, manual_clock):
        """Elapsed time is measured from the last mark."""
        timer.start()
        manual_clock.advance(2.5)
        assert timer.elapsed_since_mark() == pytest.approx(2.5)
        timer.mark()
        manual_clock.advance(1.0)
        assert timer.elapsed_since_mark() == pytest.approx(1.0)

    def test_tick_holds_shared_lock(self, manual_scheduler, manual_clock):
        """Ticks run while holding the lock passed in by the owner."""
        lock = threading.RLock()
        seen = []

        def probe():
            acquired = lock.acquire(blocking=False)
            seen.append(acquired)
            if acquired:
                lock.release()

        def on_tick(_):
            other = threading.Thread(target=probe)
            other.start()
            other.join()

        timer = SessionTimer(
            5,
            manual_scheduler,
            on_expire=MagicMock(),
            on_tick=on_tick,
            clock=manual_clock,
            lock=lock,
        )
        timer.start()
        manual_scheduler.tick()
        assert seen == [False]


class TestThreadingScheduler:
    """Tests for ThreadingScheduler with real threads."""

    def test_repeats_until_cancelled(self):
        """Callbacks repeat on a background thread until cancelled."""
        calls = threading.Semaphore(0)
        task = ThreadingScheduler().schedule_repeating(0.01, calls.release)
        try:
            for _ in range(3):
                assert calls.acquire(timeout=2)
        finally:
            task.cancel()
        assert task.is_cancelled

    def test_timer_expires_on_real_thread(self):
        """A short timer driven by real threads reaches zero and expires."""
        expired = threading.Event()
        timer = SessionTimer(
            2, ThreadingScheduler(), on_expire=expired.set, interval=0.01
        )
        timer.start()
        assert expired.wait(timeout=2)
        assert timer.time_left == 0

    def test_failing_callback_cancels_task(self):
        """An exception in the callback stops the task instead of spinning."""
        done = threading.Event()

        def boom():
            done.set()
            raise RuntimeError("boom")

        task = ThreadingScheduler().schedule_repeating(0.01, boom)
        assert done.wait(timeout=2)
        task._thread.join(timeout=2)
        assert task.is_cancelled
