"""Sound cues synchronized with the reveal phases.

Phase to cue mapping::

    splash      -> game_end     (immediate)
    podium      -> fanfare      (after 300 ms)
    awards      -> achievement  (immediately, then every 1500 ms per award)
    leaderboard -> celebration  (after 200 ms)
    stats       -> silent

Each phase plays at most once per run, and the phase already showing when the
dispatcher attaches never plays, so mounting mid-sequence cannot replay the
opening cue.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging

from reveal_app.constants.reveal_constants import (
    AWARDS_REVEAL_INTERVAL_MS,
    LEADERBOARD_SOUND_DELAY_MS,
    PODIUM_SOUND_DELAY_MS,
)
from reveal_app.constants.sound_constants import (
    CUE_ACHIEVEMENT,
    CUE_CELEBRATION,
    CUE_FANFARE,
    CUE_GAME_END,
)
from reveal_app.core.services.phase_orchestrator import (
    PhaseOrchestrator,
    PhaseState,
    RevealPhase,
)
from reveal_app.core.services.scheduler import PendingTimer, Scheduler

logger = logging.getLogger(__name__)


class SoundPlayer(ABC):
    """Plays a named cue without blocking."""

    @abstractmethod
    def play(self, cue: str) -> None:
        ...


class SoundCueDispatcher:
    """Turns phase transitions into fire-and-forget sound cues."""

    def __init__(
        self,
        player: SoundPlayer,
        scheduler: Scheduler,
        enabled: bool = True,
        awards_count: int = 0,
    ) -> None:
        self._player = player
        self._timer = PendingTimer(scheduler)
        self._enabled = enabled
        self._awards_count = awards_count
        self._previous_phase: RevealPhase | None = None
        self._attached = False
        self._played_phases: set[RevealPhase] = set()
        self._unsubscribe = None

    @property
    def played_phases(self) -> frozenset[RevealPhase]:
        return frozenset(self._played_phases)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        if not enabled:
            self._timer.clear()

    def set_awards_count(self, awards_count: int) -> None:
        self._awards_count = max(0, awards_count)

    def attach(self, orchestrator: PhaseOrchestrator) -> None:
        """Start following ``orchestrator``; its current phase stays silent."""
        self._attached = True
        self._previous_phase = orchestrator.current_phase
        self._unsubscribe = orchestrator.subscribe(self.handle_state)

    def dispose(self) -> None:
        self._timer.clear()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def play(self, cue: str) -> None:
        logger.debug("Playing sound cue %s", cue)
        self._player.play(cue)

    def handle_state(self, state: PhaseState) -> None:
        phase = state.phase
        if not self._attached:
            # First observation without attach(): record it silently.
            self._attached = True
            self._previous_phase = phase
            return
        if phase is self._previous_phase:
            return

        self._timer.clear()
        self._previous_phase = phase

        if not self._enabled or phase in self._played_phases:
            return
        self._played_phases.add(phase)
        self._cue_for(phase)

    def _cue_for(self, phase: RevealPhase) -> None:
        if phase is RevealPhase.SPLASH:
            self.play(CUE_GAME_END)
        elif phase is RevealPhase.PODIUM:
            self._timer.arm(PODIUM_SOUND_DELAY_MS, lambda: self._play_if_enabled(CUE_FANFARE))
        elif phase is RevealPhase.AWARDS:
            if self._awards_count > 0:
                self._play_achievement(1)
        elif phase is RevealPhase.LEADERBOARD:
            self._timer.arm(LEADERBOARD_SOUND_DELAY_MS, lambda: self._play_if_enabled(CUE_CELEBRATION))

    def _play_if_enabled(self, cue: str) -> None:
        if self._enabled:
            self.play(cue)

    def _play_achievement(self, played: int) -> None:
        if not self._enabled:
            return
        self.play(CUE_ACHIEVEMENT)
        if played < self._awards_count:
            self._timer.arm(AWARDS_REVEAL_INTERVAL_MS, lambda: self._play_achievement(played + 1))
