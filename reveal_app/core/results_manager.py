"""Snapshot holder shared between the Qt presenter and the feed API."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from threading import Lock

from reveal_app.core.awards import AwardContext, compute_awards
from reveal_app.core.models import (
    Award,
    AwardRecipient,
    GameType,
    LeaderboardEntry,
    Quiz,
    SessionSnapshot,
    SessionStats,
)
from reveal_app.core.ranking import (
    compute_session_stats,
    rank_participants,
    top_performers,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SessionResults:
    """Derived results for one snapshot, tagged with the generation it came from."""

    generation: int
    snapshot: SessionSnapshot
    leaderboard: list[LeaderboardEntry]
    top_performers: list[AwardRecipient]
    awards: list[Award]
    stats: SessionStats

    @property
    def quiz(self) -> Quiz | None:
        return self.snapshot.quiz

    @property
    def is_group_win(self) -> bool:
        return self.snapshot.is_group_win

    @property
    def game_type(self) -> GameType:
        return GameType.BINGO if self.snapshot.is_group_win else GameType.QUIZ

    @property
    def participant_count(self) -> int:
        return len(self.snapshot.participants)


class ResultsManager:
    """Facade over the latest session snapshot.

    The feed thread replaces the snapshot; the GUI thread reads derived data.
    Every getter recomputes from the snapshot it sees, so nothing derived is
    ever reused across two different inputs.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._snapshot: SessionSnapshot | None = None
        self._generation: int = 0

    # --- Snapshot lifecycle ---

    def load_snapshot(self, snapshot: SessionSnapshot) -> int:
        with self._lock:
            self._snapshot = snapshot
            self._generation += 1
            logger.info(
                "Loaded snapshot with %d participants (generation %d)",
                len(snapshot.participants),
                self._generation,
            )
            return self._generation

    def clear(self) -> None:
        with self._lock:
            self._snapshot = None
            self._generation += 1

    def has_snapshot(self) -> bool:
        with self._lock:
            return self._snapshot is not None

    def get_generation(self) -> int:
        with self._lock:
            return self._generation

    def get_snapshot(self) -> SessionSnapshot | None:
        with self._lock:
            return self._snapshot

    def get_results(self) -> SessionResults | None:
        """Everything derived from one snapshot, or ``None`` before any load.

        Snapshot and generation are read under a single lock acquisition so a
        concurrent load can never mix two snapshots in one render.
        """
        with self._lock:
            snapshot = self._snapshot
            generation = self._generation
        if snapshot is None:
            return None
        return build_results(snapshot, generation)

    # --- Derived data ---

    def get_quiz(self) -> Quiz | None:
        snapshot = self.get_snapshot()
        return snapshot.quiz if snapshot else None

    def is_group_win(self) -> bool:
        snapshot = self.get_snapshot()
        return bool(snapshot and snapshot.is_group_win)

    def get_participant_count(self) -> int:
        snapshot = self.get_snapshot()
        return len(snapshot.participants) if snapshot else 0

    def get_leaderboard(self) -> list[LeaderboardEntry]:
        snapshot = self.get_snapshot()
        return _leaderboard(snapshot) if snapshot else []

    def get_top_performers(self, limit: int = 3) -> list[AwardRecipient]:
        return top_performers(self.get_leaderboard(), limit)

    def get_awards(self) -> list[Award]:
        snapshot = self.get_snapshot()
        return _awards(snapshot) if snapshot else []

    def get_session_stats(self) -> SessionStats:
        snapshot = self.get_snapshot()
        return _stats(snapshot) if snapshot else SessionStats()


def build_results(snapshot: SessionSnapshot, generation: int = 0) -> SessionResults:
    leaderboard = _leaderboard(snapshot)
    return SessionResults(
        generation=generation,
        snapshot=snapshot,
        leaderboard=leaderboard,
        top_performers=top_performers(leaderboard),
        awards=_awards(snapshot),
        stats=_stats(snapshot),
    )


def _leaderboard(snapshot: SessionSnapshot) -> list[LeaderboardEntry]:
    return rank_participants(snapshot.participants, snapshot.quiz, snapshot.is_group_win)


def _awards(snapshot: SessionSnapshot) -> list[Award]:
    return compute_awards(snapshot.participants, AwardContext(is_group_win=snapshot.is_group_win))


def _stats(snapshot: SessionSnapshot) -> SessionStats:
    return compute_session_stats(snapshot.participants, snapshot.quiz, snapshot.is_group_win)
