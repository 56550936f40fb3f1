"""Domain models for the presenter results screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GameType(str, Enum):
    """Closed set of game variants a session can run."""

    QUIZ = "quiz"
    BINGO = "bingo"


class AwardValueFormat(Enum):
    """How an award recipient value is rendered on screen."""

    PERCENT = "percent"
    SECONDS = "seconds"
    STREAK = "streak"
    MARGIN = "margin"
    DEVIATION = "deviation"
    POINTS = "points"
    DURATION = "duration"
    CELLS = "cells"
    LINES = "lines"


@dataclass(frozen=True, slots=True)
class Answer:
    """A single recorded answer; order within a participant is question order."""

    is_correct: bool
    time_spent: float = 0.0


@dataclass(slots=True)
class GameState:
    """Game-state snapshot written by the real-time data layer."""

    score: float | None = None
    answers: list[Answer] = field(default_factory=list)
    completed: bool = False
    game_type: GameType = GameType.QUIZ
    # Group-win (bingo) fields
    game_won: bool = False
    full_card_achieved: bool = False
    cells_marked: int = 0
    total_cells: int = 25
    lines_completed: int = 0
    best_streak: int = 0
    time_to_first_bingo: float | None = None
    time_spent: float = 0.0


@dataclass(slots=True)
class Participant:
    """Participant identity plus its latest game-state snapshot."""

    id: str
    name: str
    avatar: str | None = None
    completed: bool = False
    final_score: float | None = None
    game_state: GameState | None = None


@dataclass(slots=True)
class Quiz:
    """Minimal quiz definition needed to grade completion."""

    id: str
    title: str
    question_count: int
    description: str = ""


@dataclass(slots=True)
class SessionSnapshot:
    """Point-in-time view of a session handed over by the data layer."""

    quiz: Quiz | None
    participants: list[Participant]
    is_group_win: bool = False
    session_code: str | None = None


@dataclass(slots=True)
class LeaderboardEntry:
    """Derived leaderboard row. Recomputed on every read, never stored."""

    participant: Participant
    rank: int
    score: float
    percentage_correct: int
    average_answer_time: int
    best_streak: int
    answered_count: int
    correct_count: int
    total_questions: int
    is_completed: bool


@dataclass(slots=True)
class AwardRecipient:
    """One participant receiving an award."""

    participant_id: str
    participant_name: str
    value: float | str
    rank: int | None = None


@dataclass(slots=True)
class Award:
    """A superlative computed over participants; never rendered empty."""

    id: str
    name: str
    description: str
    icon: str
    color: str
    value_format: AwardValueFormat
    recipients: list[AwardRecipient]


@dataclass(slots=True)
class SessionStats:
    """Summary numbers shown next to the final leaderboard."""

    total_participants: int = 0
    average_score: int = 0
    completion_rate: int = 0
    average_time: int = 0
    completed_count: int = 0
    group_win_winners: int = 0
