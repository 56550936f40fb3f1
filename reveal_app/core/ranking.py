"""Leaderboard ranking and session statistics.

All functions here are pure: they read a participant snapshot and return
freshly built rows. Nothing is cached between calls, so the presenter can
recompute on every render while the data layer keeps replacing snapshots.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from reveal_app.core.models import (
    Answer,
    AwardRecipient,
    LeaderboardEntry,
    Participant,
    Quiz,
    SessionStats,
)

# Sorts participants without answers last among equal scores.
NO_ANSWERS_SENTINEL = float("inf")
PODIUM_SIZE = 3


def round_half_up(value: float) -> int:
    """Round like the browser's Math.round (0.5 always goes up)."""
    return int(math.floor(value + 0.5))


def participant_score(participant: Participant) -> float:
    state = participant.game_state
    if state is not None and state.score:
        return state.score
    return participant.final_score or 0


def participant_answers(participant: Participant) -> list[Answer]:
    if participant.game_state is None:
        return []
    return list(participant.game_state.answers)


def mean_answer_time(answers: Sequence[Answer]) -> float:
    """Unrounded mean time per answer; the sentinel when there are none."""
    if not answers:
        return NO_ANSWERS_SENTINEL
    return sum(answer.time_spent for answer in answers) / len(answers)


def average_answer_time(answers: Sequence[Answer]) -> int:
    if not answers:
        return 0
    return round_half_up(mean_answer_time(answers))


def best_streak(answers: Iterable[Answer]) -> int:
    """Longest run of consecutive correct answers."""
    best = 0
    current = 0
    for answer in answers:
        if answer.is_correct:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def ranking_key(participant: Participant) -> tuple[float, float]:
    """Sort key shared by the leaderboard and award recipient ordering."""
    return (-participant_score(participant), mean_answer_time(participant_answers(participant)))


def sort_participants(participants: Iterable[Participant]) -> list[Participant]:
    return sorted(participants, key=ranking_key)


def total_questions_for(quiz: Quiz | None) -> int:
    if quiz is None or quiz.question_count <= 0:
        return 1
    return quiz.question_count


def is_participant_completed(
    participant: Participant,
    total_questions: int,
    is_group_win: bool = False,
) -> bool:
    state = participant.game_state
    if participant.completed:
        return True
    if state is None:
        return False
    if state.completed or len(state.answers) >= total_questions:
        return True
    return is_group_win and (state.game_won or state.full_card_achieved)


def rank_participants(
    participants: Sequence[Participant],
    quiz: Quiz | None,
    is_group_win: bool = False,
) -> list[LeaderboardEntry]:
    """Build the display-ordered leaderboard.

    Ranks are assigned by position, so two participants with identical score
    and average time still receive different rank numbers (input order wins).
    """
    total = total_questions_for(quiz)
    entries: list[LeaderboardEntry] = []
    for index, participant in enumerate(sort_participants(participants)):
        answers = participant_answers(participant)
        correct = sum(1 for answer in answers if answer.is_correct)
        percentage = round_half_up(correct / total * 100) if answers else 0
        entries.append(
            LeaderboardEntry(
                participant=participant,
                rank=index + 1,
                score=participant_score(participant),
                percentage_correct=percentage,
                average_answer_time=average_answer_time(answers),
                best_streak=best_streak(answers),
                answered_count=len(answers),
                correct_count=correct,
                total_questions=total,
                is_completed=is_participant_completed(participant, total, is_group_win),
            )
        )
    return entries


def top_performers(entries: Sequence[LeaderboardEntry], limit: int = PODIUM_SIZE) -> list[AwardRecipient]:
    """Podium data: the first `limit` leaderboard rows valued by score."""
    return [
        AwardRecipient(
            participant_id=entry.participant.id,
            participant_name=entry.participant.name,
            value=entry.score,
            rank=entry.rank,
        )
        for entry in entries[:limit]
    ]


def compute_session_stats(
    participants: Sequence[Participant],
    quiz: Quiz | None,
    is_group_win: bool = False,
) -> SessionStats:
    if not participants:
        return SessionStats()

    total = total_questions_for(quiz)
    with_state = [p for p in participants if p.game_state is not None]
    scores = [p.game_state.score or 0 for p in with_state]
    average_score = sum(scores) / len(scores) if scores else 0

    completed = [p for p in participants if is_participant_completed(p, total, is_group_win)]
    completion_rate = len(completed) / len(participants) * 100

    all_answers = [answer for p in with_state for answer in p.game_state.answers]
    average_time = (
        sum(answer.time_spent for answer in all_answers) / len(all_answers) if all_answers else 0
    )

    winners = sum(1 for p in with_state if p.game_state.game_won) if is_group_win else 0

    return SessionStats(
        total_participants=len(participants),
        average_score=round_half_up(average_score),
        completion_rate=round_half_up(completion_rate),
        average_time=round_half_up(average_time),
        completed_count=len(completed),
        group_win_winners=winners,
    )
