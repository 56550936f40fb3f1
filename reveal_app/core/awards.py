"""Award calculation for completed sessions.

Every award is evaluated independently over the participant set. An award
collects *all* participants that reach the winning value, so ties produce
several recipients, and an award nobody qualifies for is left out entirely.
Recipients are listed in leaderboard order (score desc, average time asc).

Values are kept numeric; turning them into display strings is the job of
:func:`format_award_value` at render time.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable, Sequence

from reveal_app.core.models import (
    Award,
    AwardRecipient,
    AwardValueFormat,
    GameType,
    Participant,
)
from reveal_app.core.ranking import (
    best_streak,
    participant_answers,
    participant_score,
    round_half_up,
    sort_participants,
)

SPEED_DEMON_MIN_ACCURACY = 80
STREAK_MIN_LENGTH = 3
PHOTO_FINISH_MAX_MARGIN = 100
CONSISTENT_MIN_ANSWERS = 5
CONSISTENT_MIN_ACCURACY = 60
CONSISTENT_MAX_DEVIATION = 10
EXPERT_MIN_ACCURACY = 90


@dataclass(frozen=True, slots=True)
class AwardContext:
    """Session context that decides which award catalogue applies."""

    is_group_win: bool = False


@dataclass(slots=True)
class _AnswerStats:
    participant: Participant
    rank: int
    score: float
    accuracy: float
    average_time: float
    best_streak: int
    time_deviation: float
    answer_count: int


@dataclass(slots=True)
class _BingoStats:
    participant: Participant
    rank: int
    score: float
    total_cells: int
    lines_completed: int
    full_card_achieved: bool
    best_streak: int
    time_to_first_bingo: float | None
    game_won: bool


@dataclass(frozen=True, slots=True)
class _AwardTemplate:
    id: str
    name: str
    description: str
    icon: str
    color: str
    value_format: AwardValueFormat


_PERFECT_SCORE = _AwardTemplate(
    "perfect-score", "Perfect Score", "Answered every question correctly",
    "trophy", "#fbbf24", AwardValueFormat.PERCENT,
)
_SPEED_DEMON = _AwardTemplate(
    "speed-demon", "Speed Demon", "Fastest average response time with 80%+ accuracy",
    "clock", "#3b82f6", AwardValueFormat.SECONDS,
)
_STREAK_MASTER = _AwardTemplate(
    "streak-master", "Streak Master", "Longest streak of consecutive correct answers",
    "zap", "#f97316", AwardValueFormat.STREAK,
)
_PHOTO_FINISH = _AwardTemplate(
    "photo-finish", "Photo Finish", "Won by the narrowest margin",
    "target", "#8b5cf6", AwardValueFormat.MARGIN,
)
_CONSISTENT = _AwardTemplate(
    "consistent-performer", "Consistent Performer", "Most consistent response timing",
    "star", "#1e40af", AwardValueFormat.DEVIATION,
)
_KNOWLEDGE_EXPERT = _AwardTemplate(
    "knowledge-expert", "Knowledge Expert", "Achieved 90%+ accuracy",
    "medal", "#10b981", AwardValueFormat.PERCENT,
)
_BINGO_CHAMPION = _AwardTemplate(
    "bingo-champion", "BINGO Champion", "Highest score among bingo winners",
    "trophy", "#fbbf24", AwardValueFormat.POINTS,
)
_SPEED_BINGO = _AwardTemplate(
    "speed-bingo", "Speed Bingo", "Fastest to achieve BINGO",
    "clock", "#3b82f6", AwardValueFormat.DURATION,
)
_FULL_CARD = _AwardTemplate(
    "full-card", "Full Card", "Marked every cell on the bingo card",
    "target", "#8b5cf6", AwardValueFormat.CELLS,
)
_PATTERN_MASTER = _AwardTemplate(
    "pattern-master", "Pattern Master", "Most bingo lines completed",
    "star", "#f97316", AwardValueFormat.LINES,
)
_STREAK_STAR = _AwardTemplate(
    "streak-star", "Streak Star", "Longest consecutive marking streak",
    "zap", "#10b981", AwardValueFormat.STREAK,
)


def compute_awards(participants: Sequence[Participant], context: AwardContext | None = None) -> list[Award]:
    """Return every award that has at least one recipient."""
    context = context or AwardContext()
    if context.is_group_win:
        return _compute_bingo_awards(participants)
    return _compute_session_awards(participants)


# ---------- Standard quiz awards ----------

def _compute_session_awards(participants: Sequence[Participant]) -> list[Award]:
    stats = [
        _answer_stats(participant, rank)
        for rank, participant in enumerate(sort_participants(participants), start=1)
        if participant_answers(participant)
    ]
    if not stats:
        return []

    awards: list[Award] = []

    _append(awards, _PERFECT_SCORE, [s for s in stats if s.accuracy == 100], lambda s: 100)

    fast = [s for s in stats if s.accuracy >= SPEED_DEMON_MIN_ACCURACY]
    _append(awards, _SPEED_DEMON, _ties(fast, lambda s: s.average_time, lowest=True), lambda s: s.average_time)

    longest = max(s.best_streak for s in stats)
    if longest >= STREAK_MIN_LENGTH:
        _append(
            awards, _STREAK_MASTER,
            [s for s in stats if s.best_streak == longest], lambda s: s.best_streak,
        )

    if len(stats) >= 2:
        margin = stats[0].score - stats[1].score
        if 0 < margin <= PHOTO_FINISH_MAX_MARGIN:
            _append(awards, _PHOTO_FINISH, [stats[0]], lambda s: margin)

    steady = [
        s for s in stats
        if s.answer_count >= CONSISTENT_MIN_ANSWERS and s.accuracy >= CONSISTENT_MIN_ACCURACY
    ]
    most_steady = _ties(steady, lambda s: s.time_deviation, lowest=True)
    if most_steady and most_steady[0].time_deviation < CONSISTENT_MAX_DEVIATION:
        _append(awards, _CONSISTENT, most_steady, lambda s: s.time_deviation)

    experts = [s for s in stats if EXPERT_MIN_ACCURACY <= s.accuracy < 100]
    _append(awards, _KNOWLEDGE_EXPERT, experts, lambda s: round_half_up(s.accuracy))

    return awards


def _answer_stats(participant: Participant, rank: int) -> _AnswerStats:
    answers = participant_answers(participant)
    times = [answer.time_spent for answer in answers]
    correct = sum(1 for answer in answers if answer.is_correct)
    mean = sum(times) / len(times)
    variance = sum((t - mean) ** 2 for t in times) / len(times)
    return _AnswerStats(
        participant=participant,
        rank=rank,
        score=participant_score(participant),
        accuracy=correct / len(answers) * 100,
        average_time=mean,
        best_streak=best_streak(answers),
        time_deviation=math.sqrt(variance),
        answer_count=len(answers),
    )


# ---------- Group-win (bingo) awards ----------

def _compute_bingo_awards(participants: Sequence[Participant]) -> list[Award]:
    stats = [
        _bingo_stats(participant, rank)
        for rank, participant in enumerate(sort_participants(participants), start=1)
        if participant.game_state is not None and participant.game_state.game_type == GameType.BINGO
    ]
    if not stats:
        return []

    awards: list[Award] = []

    winners = [s for s in stats if s.game_won]
    _append(awards, _BINGO_CHAMPION, _ties(winners, lambda s: s.score), lambda s: s.score)

    timed = [s for s in stats if s.time_to_first_bingo is not None and s.time_to_first_bingo > 0]
    _append(
        awards, _SPEED_BINGO,
        _ties(timed, lambda s: s.time_to_first_bingo, lowest=True), lambda s: s.time_to_first_bingo,
    )

    _append(awards, _FULL_CARD, [s for s in stats if s.full_card_achieved], lambda s: s.total_cells)

    most_lines = max(s.lines_completed for s in stats)
    if most_lines >= 1:
        _append(
            awards, _PATTERN_MASTER,
            [s for s in stats if s.lines_completed == most_lines], lambda s: s.lines_completed,
        )

    longest = max(s.best_streak for s in stats)
    if longest >= STREAK_MIN_LENGTH:
        _append(
            awards, _STREAK_STAR,
            [s for s in stats if s.best_streak == longest], lambda s: s.best_streak,
        )

    return awards


def _bingo_stats(participant: Participant, rank: int) -> _BingoStats:
    state = participant.game_state
    return _BingoStats(
        participant=participant,
        rank=rank,
        score=participant_score(participant),
        total_cells=state.total_cells or 25,
        lines_completed=state.lines_completed or 0,
        full_card_achieved=state.full_card_achieved,
        best_streak=state.best_streak or 0,
        time_to_first_bingo=state.time_to_first_bingo,
        game_won=state.game_won,
    )


# ---------- Selection helpers ----------

def _ties(candidates: list, metric: Callable, lowest: bool = False) -> list:
    """All candidates sharing the best metric value, in leaderboard order."""
    if not candidates:
        return []
    values = [metric(c) for c in candidates]
    winning = min(values) if lowest else max(values)
    return [c for c, value in zip(candidates, values) if value == winning]


def _append(awards: list[Award], template: _AwardTemplate, winners: list, value: Callable) -> None:
    if not winners:
        return
    awards.append(
        Award(
            id=template.id,
            name=template.name,
            description=template.description,
            icon=template.icon,
            color=template.color,
            value_format=template.value_format,
            recipients=[
                AwardRecipient(
                    participant_id=w.participant.id,
                    participant_name=w.participant.name,
                    value=value(w),
                    rank=w.rank,
                )
                for w in winners
            ],
        )
    )


# ---------- Presentation formatting ----------

def format_score(value: float | str) -> str:
    """Thousands-separated score; strings pass through untouched."""
    if isinstance(value, str):
        return value
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def format_time(seconds: float | None) -> str:
    if not seconds:
        return "N/A"
    whole = int(seconds)
    minutes, secs = divmod(whole, 60)
    return f"{minutes}m {secs}s" if minutes > 0 else f"{secs}s"


def format_award_value(award: Award, value: float | str) -> str:
    if isinstance(value, str):
        return value
    kind = award.value_format
    if kind is AwardValueFormat.PERCENT:
        return f"{round_half_up(value)}%"
    if kind is AwardValueFormat.SECONDS:
        return f"{value:.1f}s avg"
    if kind is AwardValueFormat.STREAK:
        return f"{int(value)} streak"
    if kind is AwardValueFormat.MARGIN:
        return f"Won by {format_score(value)} pts"
    if kind is AwardValueFormat.DEVIATION:
        return f"±{value:.1f}s"
    if kind is AwardValueFormat.POINTS:
        return f"{format_score(value)} pts"
    if kind is AwardValueFormat.DURATION:
        return format_time(value)
    if kind is AwardValueFormat.CELLS:
        return f"{int(value)}/{int(value)} cells"
    if kind is AwardValueFormat.LINES:
        lines = int(value)
        return f"{lines} line{'' if lines == 1 else 's'}"
    raise ValueError(f"Unknown award value format: {kind!r}")


def recipient_lines(award: Award, limit: int = 3) -> list[str]:
    """Display lines for an award's recipients, collapsing the overflow into "+N more"."""
    lines = [
        f"{recipient.participant_name} · {format_award_value(award, recipient.value)}"
        for recipient in award.recipients[:limit]
    ]
    hidden = len(award.recipients) - limit
    if hidden > 0:
        lines.append(f"+{hidden} more")
    return lines
