"""Item-level reveal staging for each results panel.

Every consumer watches the orchestrator and, once its own phase becomes
active, reveals its items on a short local timer. Reveal progress belongs to
a single visit of the phase: it is rebuilt on activation and discarded (timer
cancelled) as soon as the phase is left or the consumer is disposed.

Consumers only read phase state; they never move the orchestrator.
"""

from __future__ import annotations

import logging
from typing import Callable

from reveal_app.constants.reveal_constants import (
    AWARDS_REVEAL_INTERVAL_MS,
    PODIUM_FIRST_REVEAL_MS,
    PODIUM_STAGGER_MS,
)
from reveal_app.core.ranking import PODIUM_SIZE
from reveal_app.core.services.phase_orchestrator import (
    PhaseOrchestrator,
    PhaseState,
    RevealPhase,
)
from reveal_app.core.services.scheduler import PendingTimer, Scheduler

logger = logging.getLogger(__name__)


class RevealConsumer:
    """Base class wiring a consumer to one phase of the orchestrator."""

    phase: RevealPhase

    def __init__(self, orchestrator: PhaseOrchestrator, scheduler: Scheduler) -> None:
        self._orchestrator = orchestrator
        self._timer = PendingTimer(scheduler)
        self._listeners: list[Callable[[], None]] = []
        self._active = False
        self._unsubscribe = orchestrator.subscribe(self._handle_state)
        if orchestrator.state is not None:
            self._handle_state(orchestrator.state)

    @property
    def active(self) -> bool:
        return self._active

    def add_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def dispose(self) -> None:
        self._timer.clear()
        self._unsubscribe()
        self._listeners.clear()

    def _handle_state(self, state: PhaseState) -> None:
        now_active = state.is_active(self.phase)
        if now_active == self._active:
            return
        self._active = now_active
        self._timer.clear()
        if now_active:
            if self._orchestrator.enabled:
                self._begin()
            else:
                self._reveal_all()
        else:
            self._reset()
        self._changed()

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _begin(self) -> None:
        self._reveal_all()

    def _reveal_all(self) -> None:
        raise NotImplementedError

    def _reset(self) -> None:
        raise NotImplementedError


class PodiumReveal(RevealConsumer):
    """Reveals 3rd place first, then 2nd, then the winner."""

    phase = RevealPhase.PODIUM

    def __init__(self, orchestrator: PhaseOrchestrator, scheduler: Scheduler) -> None:
        self._revealed: set[int] = set()
        super().__init__(orchestrator, scheduler)

    @property
    def revealed_ranks(self) -> frozenset[int]:
        return frozenset(self._revealed)

    def is_revealed(self, rank: int) -> bool:
        return rank in self._revealed

    def _begin(self) -> None:
        self._revealed = set()
        self._timer.arm(PODIUM_FIRST_REVEAL_MS, lambda: self._reveal_rank(PODIUM_SIZE))

    def _reveal_rank(self, rank: int) -> None:
        self._revealed.add(rank)
        if rank > 1:
            self._timer.arm(PODIUM_STAGGER_MS, lambda: self._reveal_rank(rank - 1))
        self._changed()

    def _reveal_all(self) -> None:
        self._revealed = set(range(1, PODIUM_SIZE + 1))

    def _reset(self) -> None:
        self._revealed = set()


class AwardsReveal(RevealConsumer):
    """Reveals one award per tick, in the same cadence the phase is timed by."""

    phase = RevealPhase.AWARDS

    def __init__(
        self,
        orchestrator: PhaseOrchestrator,
        scheduler: Scheduler,
        award_count: int = 0,
    ) -> None:
        self._award_count = award_count
        self._revealed_count = 0
        super().__init__(orchestrator, scheduler)

    @property
    def revealed_count(self) -> int:
        return self._revealed_count

    def set_award_count(self, award_count: int) -> None:
        self._award_count = max(0, award_count)
        self._revealed_count = min(self._revealed_count, self._award_count)
        if not self._active or self._revealed_count >= self._award_count:
            return
        # Awards added after the chain finished still get their cards.
        if not self._orchestrator.enabled:
            self._reveal_all()
            self._changed()
        elif not self._timer.armed:
            self._timer.arm(AWARDS_REVEAL_INTERVAL_MS, self._reveal_next)

    def is_revealed(self, index: int) -> bool:
        return index < self._revealed_count

    def _begin(self) -> None:
        self._revealed_count = 0
        if self._award_count > 0:
            self._timer.arm(AWARDS_REVEAL_INTERVAL_MS, self._reveal_next)

    def _reveal_next(self) -> None:
        self._revealed_count += 1
        logger.debug("Award %d of %d revealed", self._revealed_count, self._award_count)
        if self._revealed_count < self._award_count:
            self._timer.arm(AWARDS_REVEAL_INTERVAL_MS, self._reveal_next)
        self._changed()

    def _reveal_all(self) -> None:
        self._revealed_count = self._award_count

    def _reset(self) -> None:
        self._revealed_count = 0


class _ImmediateReveal(RevealConsumer):
    """Fully visible the moment its phase is active."""

    def __init__(self, orchestrator: PhaseOrchestrator, scheduler: Scheduler) -> None:
        self._visible = False
        super().__init__(orchestrator, scheduler)

    @property
    def visible(self) -> bool:
        return self._visible

    def _reveal_all(self) -> None:
        self._visible = True

    def _reset(self) -> None:
        self._visible = False


class LeaderboardReveal(_ImmediateReveal):
    phase = RevealPhase.LEADERBOARD


class StatsReveal(_ImmediateReveal):
    phase = RevealPhase.STATS
