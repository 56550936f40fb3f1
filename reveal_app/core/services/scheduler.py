"""Timer abstraction shared by the reveal state machine and its consumers.

The core never talks to Qt directly. It asks a :class:`Scheduler` for a
one-shot callback and keeps the returned :class:`TimerHandle` as part of its
own state, so cancelling is always an explicit operation on that handle.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class TimerHandle(ABC):
    """A pending one-shot callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True until the callback has run or the handle was cancelled."""


class Scheduler(ABC):
    """Arms one-shot callbacks on the presenter's single logical thread."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""


class PendingTimer:
    """Holds at most one armed timer and drops callbacks that were superseded.

    A callback only runs if its handle is still the one held here, so a timer
    that was cancelled but still fires (or was replaced by a newer one) can
    never mutate the owner's state.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._handle: TimerHandle | None = None

    def arm(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.clear()
        handle: TimerHandle | None = None

        def fire() -> None:
            if self._handle is not handle:
                return
            self._handle = None
            callback()

        handle = self._scheduler.call_later(delay_ms, fire)
        self._handle = handle

    def clear(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    @property
    def armed(self) -> bool:
        return self._handle is not None
