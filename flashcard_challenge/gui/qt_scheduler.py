"""Scheduler backed by the Qt event loop."""

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer


class _QtTask:
    """Repeating QTimer handle. Ticks arrive on the GUI thread."""

    def __init__(self, timer: QTimer):
        self._timer = timer

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None

    @property
    def is_cancelled(self) -> bool:
        return self._timer is None


class QtScheduler:
    """Scheduler delivering timer ticks through QTimer.

    Implements Scheduler protocol. Because ticks and button clicks share the
    GUI thread, they are naturally processed one at a time.
    """

    def __init__(self, parent: QObject | None = None):
        """Initialize the scheduler.

        Args:
            parent: Optional QObject owning the created timers
        """
        self._parent = parent

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> _QtTask:
        timer = QTimer(self._parent)
        timer.setInterval(int(interval * 1000))
        timer.timeout.connect(callback)
        timer.start()
        return _QtTask(timer)
