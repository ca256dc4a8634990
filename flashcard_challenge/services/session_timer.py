"""Cancellable countdown timer for challenge sessions."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from flashcard_challenge.interfaces import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)


class _ThreadTask:
    """Repeating task running on a daemon thread.

    Uses threading.Event as a thread-safe cancellation flag; waiting on the
    event doubles as the sleep between calls.
    """

    def __init__(self, interval: float, callback: Callable[[], None]):
        self._interval = interval
        self._callback = callback
        self._cancel_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name="challenge-timer", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._cancel_event.wait(self._interval):
            try:
                self._callback()
            except Exception:
                logger.exception("Timer callback failed")
                self._cancel_event.set()

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()


class ThreadingScheduler:
    """Scheduler running callbacks on background daemon threads."""

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> ScheduledTask:
        return _ThreadTask(interval, callback)


class SessionTimer:
    """Countdown clock driving the session lifecycle.

    Counts ``duration`` seconds down once per tick. Reaching zero fires
    ``on_expire`` exactly once. Also measures the time spent on the
    current card for response records.
    """

    def __init__(
        self,
        duration: int,
        scheduler: Scheduler,
        on_expire: Callable[[], None],
        on_tick: Callable[[int], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
        interval: float = 1.0,
        lock: threading.RLock | None = None,
    ):
        """Initialize the timer.

        Args:
            duration: Countdown length in seconds
            scheduler: Scheduler that delivers the ticks
            on_expire: Called once when the countdown reaches zero
            on_tick: Optional callback receiving the seconds left after each tick
            clock: Monotonic clock used for elapsed-time measurement
            interval: Seconds between ticks
            lock: Lock held while a tick is processed (shared with the owner)
        """
        self._time_left = duration
        self._scheduler = scheduler
        self._on_expire = on_expire
        self._on_tick = on_tick
        self._clock = clock
        self._interval = interval
        self._lock = lock or threading.RLock()
        self._task: ScheduledTask | None = None
        self._started = False
        self._expired = False
        self._mark = clock()

    @property
    def time_left(self) -> int:
        """Seconds left on the countdown."""
        return self._time_left

    @property
    def is_active(self) -> bool:
        """True while ticks are scheduled."""
        return self._task is not None

    @property
    def expired(self) -> bool:
        """True once the countdown has reached zero."""
        return self._expired

    def start(self) -> None:
        """Start the countdown. A timer only ever starts once."""
        if self._started:
            logger.debug("Timer already started, ignoring start()")
            return
        self._started = True
        self.mark()
        self._task = self._scheduler.schedule_repeating(self._interval, self._tick)

    def cancel(self) -> None:
        """Stop further ticks. Safe to call any number of times."""
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def mark(self) -> None:
        """Stamp the current time as the start of the current card."""
        self._mark = self._clock()

    def elapsed_since_mark(self) -> float:
        """Seconds since the last call to mark()."""
        return max(0.0, self._clock() - self._mark)

    def _tick(self) -> None:
        with self._lock:
            if self._task is None or self._expired:
                return
            self._time_left = max(0, self._time_left - 1)
            if self._on_tick:
                self._on_tick(self._time_left)
            if self._time_left == 0:
                self._expired = True
                self.cancel()
                self._on_expire()
