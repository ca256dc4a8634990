"""Protocols for scheduling repeating timer callbacks."""

from collections.abc import Callable
from typing import Protocol


class ScheduledTask(Protocol):
    """Handle for a scheduled repeating callback."""

    def cancel(self) -> None:
        """Stop further callbacks. Cancelling twice is a no-op."""
        ...


class Scheduler(Protocol):
    """Interface for anything that can call a function at a fixed interval.

    Lets the session timer run on a background thread (CLI), a Qt event
    loop (GUI), or under full manual control (tests).
    """

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> ScheduledTask:
        """Call ``callback`` every ``interval`` seconds until cancelled.

        Args:
            interval: Seconds between calls
            callback: Zero-argument function to call

        Returns:
            Handle used to cancel the schedule
        """
        ...
