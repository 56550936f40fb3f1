"""Qt-backed implementation of the reveal scheduler."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer

from reveal_app.core.services.scheduler import Scheduler, TimerHandle


class QtTimerHandle(TimerHandle):
    """Wraps a single-shot ``QTimer`` owned by the scheduler's parent object."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def _finished(self) -> None:
        if self._timer is not None:
            self._timer.deleteLater()
            self._timer = None


class QtScheduler(Scheduler):
    """Arms one-shot callbacks on the GUI thread's event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))
        handle = QtTimerHandle(timer)

        def on_timeout() -> None:
            handle._finished()
            callback()

        timer.timeout.connect(on_timeout)
        timer.start()
        return handle
