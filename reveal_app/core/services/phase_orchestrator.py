"""State machine driving the staged results reveal.

The reveal walks forward through a fixed phase order::

    splash -> podium -> awards -> leaderboard (+ stats)

``leaderboard`` is the presenter's resting point. It never auto-advances, but
shortly after it is entered the ``stats`` panel becomes active alongside it.
That combined terminal state is modelled explicitly by :class:`PhaseState`
instead of letting two phases both read as "current".

The orchestrator holds exactly one pending timer (via :class:`PendingTimer`).
Entering a phase always clears the previous timer before arming the next one,
and :meth:`PhaseOrchestrator.skip` / :meth:`PhaseOrchestrator.dispose` cancel
it synchronously.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Callable

from reveal_app.constants.reveal_constants import (
    AWARDS_EMPTY_DURATION_MS,
    AWARDS_HOLD_AFTER_MS,
    AWARDS_REVEAL_INTERVAL_MS,
    PODIUM_DURATION_MS,
    SPLASH_DURATION_MS,
    STATS_DELAY_MS,
)
from reveal_app.core.services.scheduler import PendingTimer, Scheduler

logger = logging.getLogger(__name__)


class RevealPhase(Enum):
    """Discrete steps of the reveal, in presentation order."""

    SPLASH = "splash"
    PODIUM = "podium"
    AWARDS = "awards"
    LEADERBOARD = "leaderboard"
    STATS = "stats"

    @property
    def index(self) -> int:
        return PHASE_ORDER.index(self)


PHASE_ORDER: tuple[RevealPhase, ...] = tuple(RevealPhase)


@dataclass(frozen=True, slots=True)
class PhaseState:
    """What the audience currently sees.

    ``stats_active`` is only ever set while ``primary_phase`` is
    ``LEADERBOARD``; together they form the terminal super-state.
    """

    primary_phase: RevealPhase
    stats_active: bool = False

    @property
    def phase(self) -> RevealPhase:
        """Most recently entered phase (``STATS`` once it has joined in)."""
        return RevealPhase.STATS if self.stats_active else self.primary_phase

    @property
    def is_terminal(self) -> bool:
        return self.primary_phase is RevealPhase.LEADERBOARD

    def is_active(self, phase: RevealPhase) -> bool:
        if phase is RevealPhase.STATS:
            return self.stats_active
        return phase is self.primary_phase


TERMINAL_STATE = PhaseState(RevealPhase.LEADERBOARD, stats_active=True)

PhaseListener = Callable[[PhaseState], None]


def awards_duration_ms(awards_count: int) -> int:
    """Awards hold long enough to reveal each award, plus a closing beat."""
    if awards_count <= 0:
        return AWARDS_EMPTY_DURATION_MS
    return awards_count * AWARDS_REVEAL_INTERVAL_MS + AWARDS_HOLD_AFTER_MS


def phase_duration_ms(phase: RevealPhase, awards_count: int = 0) -> int | None:
    """Auto-advance delay for ``phase``; ``None`` for the terminal phases."""
    if phase is RevealPhase.SPLASH:
        return SPLASH_DURATION_MS
    if phase is RevealPhase.PODIUM:
        return PODIUM_DURATION_MS
    if phase is RevealPhase.AWARDS:
        return awards_duration_ms(awards_count)
    if phase in (RevealPhase.LEADERBOARD, RevealPhase.STATS):
        return None
    raise ValueError(f"Unknown reveal phase: {phase!r}")


class PhaseOrchestrator:
    """Owns the current reveal phase for one presentation run."""

    def __init__(
        self,
        scheduler: Scheduler,
        enabled: bool = True,
        awards_count: int = 0,
        on_phase_change: Callable[[RevealPhase], None] | None = None,
    ) -> None:
        self._timer = PendingTimer(scheduler)
        self._listeners: list[PhaseListener] = []
        self._on_phase_change = on_phase_change
        self._awards_count = _validate_awards_count(awards_count)
        self._enabled = enabled
        # A run that begins disabled is already over; re-enabling cannot rewind it.
        self._started = not enabled
        self._disposed = False
        self._state: PhaseState | None = None if enabled else TERMINAL_STATE

    # ---------- Read side ----------

    @property
    def state(self) -> PhaseState | None:
        """Current state, or ``None`` before the run has started."""
        return self._state

    @property
    def current_phase(self) -> RevealPhase | None:
        return self._state.phase if self._state is not None else None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def awards_count(self) -> int:
        return self._awards_count

    @property
    def has_pending_timer(self) -> bool:
        return self._timer.armed

    def is_on_final_slide(self) -> bool:
        return self._state is not None and self._state.is_terminal

    def subscribe(self, listener: PhaseListener) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---------- Configuration ----------

    def set_awards_count(self, awards_count: int) -> None:
        """Applies to the next time the awards phase is entered."""
        self._awards_count = _validate_awards_count(awards_count)

    def set_enabled(self, enabled: bool) -> None:
        if self._disposed or enabled == self._enabled:
            return
        self._enabled = enabled
        if not enabled:
            self._short_circuit()

    # ---------- Transitions ----------

    def start(self) -> bool:
        """Enter ``splash``. Only happens once per run and only when enabled."""
        if self._disposed or self._started or not self._enabled:
            return False
        self._started = True
        logger.debug("Reveal run started")
        self._enter(RevealPhase.SPLASH)
        return True

    def skip(self) -> bool:
        """Manually advance to the next phase; no-op on the final slide."""
        if self._disposed or self._state is None or self._state.is_terminal:
            return False
        self._timer.clear()
        logger.debug("Skip requested during %s", self._state.phase.value)
        self._advance()
        return True

    def dispose(self) -> None:
        """Tear down the run: no callback may fire after this returns."""
        self._timer.clear()
        self._listeners.clear()
        self._on_phase_change = None
        self._disposed = True

    def _advance(self) -> None:
        if self._state is None:
            return
        next_index = min(self._state.primary_phase.index + 1, RevealPhase.LEADERBOARD.index)
        self._enter(PHASE_ORDER[next_index])

    def _enter(self, phase: RevealPhase) -> None:
        self._state = PhaseState(phase)
        if phase is RevealPhase.LEADERBOARD:
            self._timer.arm(STATS_DELAY_MS, self._activate_stats)
        else:
            duration = phase_duration_ms(phase, self._awards_count)
            self._timer.arm(duration, self._advance)
        logger.debug("Entered phase %s", phase.value)
        self._notify()

    def _activate_stats(self) -> None:
        self._state = TERMINAL_STATE
        logger.debug("Stats joined the leaderboard slide")
        self._notify()

    def _short_circuit(self) -> None:
        self._timer.clear()
        self._started = True
        if self._state == TERMINAL_STATE:
            return
        self._state = TERMINAL_STATE
        logger.debug("Animation disabled; jumping to the final slide")
        self._notify()

    def _notify(self) -> None:
        state = self._state
        for listener in list(self._listeners):
            listener(state)
        if self._on_phase_change is not None:
            self._on_phase_change(state.phase)


def _validate_awards_count(awards_count: int) -> int:
    if isinstance(awards_count, bool) or not isinstance(awards_count, int) or awards_count < 0:
        raise ValueError("awards_count must be a non-negative integer.")
    return awards_count
