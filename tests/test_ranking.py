"""
Tests for leaderboard ranking and session statistics
"""
import math

from conftest import make_answers, make_participant
from reveal_app.core.models import Answer, Quiz
from reveal_app.core.ranking import (
    NO_ANSWERS_SENTINEL,
    average_answer_time,
    best_streak,
    compute_session_stats,
    mean_answer_time,
    participant_score,
    rank_participants,
    round_half_up,
    top_performers,
)


def test_round_half_up_matches_browser_rounding():
    """0.5 always rounds toward positive infinity"""
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-0.5) == 0
    assert round_half_up(1.49) == 1


def test_best_streak_longest_run():
    """Longest run of consecutive correct answers"""
    assert best_streak(make_answers("TTFTTT")) == 3
    assert best_streak(make_answers("FFF")) == 0
    assert best_streak([]) == 0


def test_average_time_without_answers():
    """No answers averages to 0 for display but sorts last internally"""
    assert average_answer_time([]) == 0
    assert mean_answer_time([]) == NO_ANSWERS_SENTINEL
    assert math.isinf(mean_answer_time([]))


def test_average_time_rounds_half_up():
    answers = [Answer(True, 1.0), Answer(True, 2.0)]
    assert average_answer_time(answers) == 2


def test_score_prefers_game_state_then_final_score():
    """Game-state score wins when truthy, else final score, else zero"""
    assert participant_score(make_participant("a", 300, final_score=100)) == 300
    assert participant_score(make_participant("b", 0, final_score=100)) == 100
    assert participant_score(make_participant("c", with_state=False, final_score=40)) == 40
    assert participant_score(make_participant("d", with_state=False)) == 0


def test_rank_orders_by_score_then_time(quiz):
    """Higher score first; equal scores broken by faster average time"""
    slow = make_participant("slow", 100, make_answers("TT", 5.0))
    fast = make_participant("fast", 100, make_answers("TT", 3.0))
    low = make_participant("low", 50, make_answers("TF", 1.0))

    entries = rank_participants([slow, low, fast], quiz)

    assert [e.participant.id for e in entries] == ["fast", "slow", "low"]
    assert [e.rank for e in entries] == [1, 2, 3]


def test_exact_ties_get_distinct_ranks_in_input_order(quiz):
    """Identical score and time still produce ranks 1 and 2"""
    first = make_participant("first", 100, make_answers("TT", 4.0))
    second = make_participant("second", 100, make_answers("TT", 4.0))

    entries = rank_participants([first, second], quiz)

    assert [(e.participant.id, e.rank) for e in entries] == [("first", 1), ("second", 2)]


def test_participant_without_answers_sorts_after_equal_score(quiz):
    idle = make_participant("idle", 0)
    tried = make_participant("tried", 0, make_answers("F", 30.0))

    entries = rank_participants([idle, tried], quiz)

    assert [e.participant.id for e in entries] == ["tried", "idle"]


def test_zero_answer_entry_defaults(quiz):
    """A participant who never answered gets zeros, not errors"""
    entry = rank_participants([make_participant("a", with_state=False)], quiz)[0]

    assert entry.score == 0
    assert entry.percentage_correct == 0
    assert entry.average_answer_time == 0
    assert entry.best_streak == 0
    assert entry.answered_count == 0
    assert entry.is_completed is False


def test_percentage_uses_quiz_question_count(quiz):
    """3 correct out of a 5-question quiz is 60%"""
    entry = rank_participants([make_participant("a", 300, make_answers("TTTF"))], quiz)[0]

    assert entry.correct_count == 3
    assert entry.total_questions == 5
    assert entry.percentage_correct == 60


def test_missing_quiz_counts_one_question():
    entry = rank_participants([make_participant("a", 100, make_answers("T"))], None)[0]

    assert entry.total_questions == 1
    assert entry.percentage_correct == 100
    assert entry.is_completed is True


def test_completion_rules(quiz):
    """Completed via flag, full answer set, or a group-win result"""
    flagged = make_participant("flagged", 10, completed=True)
    answered_all = make_participant("all", 10, make_answers("TTTTT"))
    partial = make_participant("partial", 10, make_answers("TT"))
    winner = make_participant("winner", 10, game_won=True)

    plain = {e.participant.id: e.is_completed for e in rank_participants(
        [flagged, answered_all, partial, winner], quiz)}
    grouped = {e.participant.id: e.is_completed for e in rank_participants(
        [flagged, answered_all, partial, winner], quiz, is_group_win=True)}

    assert plain == {"flagged": True, "all": True, "partial": False, "winner": False}
    assert grouped["winner"] is True


def test_top_performers_takes_first_three(quiz):
    players = [make_participant(f"p{i}", 100 - i * 10, make_answers("T")) for i in range(5)]

    podium = top_performers(rank_participants(players, quiz))

    assert [(p.participant_id, p.rank, p.value) for p in podium] == [
        ("p0", 1, 100),
        ("p1", 2, 90),
        ("p2", 3, 80),
    ]


def test_top_performers_with_fewer_participants(quiz):
    podium = top_performers(rank_participants([make_participant("solo", 10)], quiz))
    assert len(podium) == 1


def test_session_stats():
    """Averages over participants with state; completion over everyone"""
    quiz = Quiz(id="q", title="Two", question_count=2)
    a = make_participant("a", 100, [Answer(True, 2.0), Answer(True, 4.0)])
    b = make_participant("b", 50, [Answer(False, 6.0)])
    c = make_participant("c", with_state=False)

    stats = compute_session_stats([a, b, c], quiz)

    assert stats.total_participants == 3
    assert stats.average_score == 75
    assert stats.completed_count == 1
    assert stats.completion_rate == 33
    assert stats.average_time == 4
    assert stats.group_win_winners == 0


def test_session_stats_empty():
    stats = compute_session_stats([], None)
    assert stats.total_participants == 0
    assert stats.average_score == 0
    assert stats.completion_rate == 0


def test_session_stats_counts_group_winners(quiz):
    players = [
        make_participant("a", 10, game_won=True),
        make_participant("b", 10, game_won=True),
        make_participant("c", 10),
    ]

    assert compute_session_stats(players, quiz, is_group_win=True).group_win_winners == 2
    assert compute_session_stats(players, quiz).group_win_winners == 0
