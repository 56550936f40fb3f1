"""
Tests for award selection and award value formatting
"""
import pytest

from conftest import make_answers, make_bingo_player, make_participant
from reveal_app.core.awards import (
    AwardContext,
    compute_awards,
    format_award_value,
    format_score,
    format_time,
    recipient_lines,
)
from reveal_app.core.models import Answer, Award, AwardRecipient, AwardValueFormat


def _by_id(awards):
    return {award.id: award for award in awards}


def test_no_participants_no_awards():
    assert compute_awards([]) == []
    assert compute_awards([], AwardContext(is_group_win=True)) == []


def test_participants_without_answers_are_ignored():
    assert compute_awards([make_participant("a", 100), make_participant("b", with_state=False)]) == []


def test_unqualified_awards_are_absent():
    """A lone all-wrong participant earns nothing"""
    assert compute_awards([make_participant("a", 0, make_answers("FF"))]) == []


def test_tied_perfect_scores_all_receive_award():
    a = make_participant("a", 500, make_answers("TTTTT", 2.0))
    b = make_participant("b", 500, make_answers("TTTTT", 3.0))
    c = make_participant("c", 300, make_answers("TTTFF", 4.0))

    awards = _by_id(compute_awards([c, b, a]))

    assert list(awards) == ["perfect-score", "speed-demon", "streak-master", "consistent-performer"]
    perfect = awards["perfect-score"]
    assert [(r.participant_id, r.rank, r.value) for r in perfect.recipients] == [
        ("a", 1, 100),
        ("b", 2, 100),
    ]
    assert [r.participant_id for r in awards["streak-master"].recipients] == ["a", "b"]
    assert awards["streak-master"].recipients[0].value == 5


def test_speed_demon_requires_accuracy_and_keeps_ties():
    """Fastest among 80%+ accuracy; equal averages share the award"""
    sloppy = make_participant("sloppy", 100, make_answers("TFFFF", 1.0))
    quick = make_participant("quick", 400, make_answers("TTTTF", 2.0))
    twin = make_participant("twin", 400, make_answers("TTTTF", 2.0))

    speed = _by_id(compute_awards([sloppy, quick, twin]))["speed-demon"]

    assert [r.participant_id for r in speed.recipients] == ["quick", "twin"]
    assert speed.recipients[0].value == 2.0


def test_photo_finish_margin_window():
    close = [
        make_participant("a", 550, make_answers("TF")),
        make_participant("b", 500, make_answers("TF")),
    ]
    wide = [
        make_participant("a", 650, make_answers("TF")),
        make_participant("b", 500, make_answers("TF")),
    ]

    photo = _by_id(compute_awards(close))["photo-finish"]
    assert [(r.participant_id, r.value) for r in photo.recipients] == [("a", 50)]
    assert "photo-finish" not in _by_id(compute_awards(wide))


def test_consistent_performer_needs_low_deviation():
    steady = make_participant("steady", 300, make_answers("TTTFT", 5.0))
    erratic = make_participant(
        "erratic",
        300,
        [Answer(True, t) for t in (1.0, 40.0, 2.0, 35.0, 3.0)],
    )

    awards = _by_id(compute_awards([steady, erratic]))

    consistent = awards["consistent-performer"]
    assert [r.participant_id for r in consistent.recipients] == ["steady"]
    assert consistent.recipients[0].value == 0


def test_knowledge_expert_excludes_perfect():
    expert = make_participant("expert", 900, make_answers("TTTTTTTTTF"))
    perfect = make_participant("perfect", 1000, make_answers("TTTTTTTTTT"))

    awards = _by_id(compute_awards([expert, perfect]))

    assert [r.participant_id for r in awards["knowledge-expert"].recipients] == ["expert"]
    assert awards["knowledge-expert"].recipients[0].value == 90
    assert [r.participant_id for r in awards["perfect-score"].recipients] == ["perfect"]


def test_bingo_awards():
    a = make_bingo_player(
        "a", 900, game_won=True, time_to_first_bingo=45.0, lines_completed=2,
        full_card_achieved=True, total_cells=25, best_streak=6,
    )
    b = make_bingo_player("b", 700, game_won=True, time_to_first_bingo=30.0, lines_completed=2, best_streak=2)
    c = make_bingo_player("c", 400)

    awards = _by_id(compute_awards([c, b, a], AwardContext(is_group_win=True)))

    assert list(awards) == ["bingo-champion", "speed-bingo", "full-card", "pattern-master", "streak-star"]
    assert [r.participant_id for r in awards["bingo-champion"].recipients] == ["a"]
    assert [(r.participant_id, r.value) for r in awards["speed-bingo"].recipients] == [("b", 30.0)]
    assert awards["full-card"].recipients[0].value == 25
    assert [r.participant_id for r in awards["pattern-master"].recipients] == ["a", "b"]
    assert [r.participant_id for r in awards["streak-star"].recipients] == ["a"]


def test_bingo_catalogue_ignores_quiz_players():
    quiz_player = make_participant("q", 900, make_answers("TTTTT"), game_won=True)
    assert compute_awards([quiz_player], AwardContext(is_group_win=True)) == []


def test_format_score_and_time():
    assert format_score(1234) == "1,234"
    assert format_score(12.5) == "12.5"
    assert format_score("n/a") == "n/a"
    assert format_time(65) == "1m 5s"
    assert format_time(45.7) == "45s"
    assert format_time(0) == "N/A"
    assert format_time(None) == "N/A"


def _award(kind: AwardValueFormat) -> Award:
    return Award("x", "X", "", "star", "#000000", kind, [])


@pytest.mark.parametrize(
    "kind, value, expected",
    [
        (AwardValueFormat.PERCENT, 90, "90%"),
        (AwardValueFormat.SECONDS, 2.0, "2.0s avg"),
        (AwardValueFormat.STREAK, 5, "5 streak"),
        (AwardValueFormat.MARGIN, 1500, "Won by 1,500 pts"),
        (AwardValueFormat.DEVIATION, 1.5, "±1.5s"),
        (AwardValueFormat.POINTS, 900, "900 pts"),
        (AwardValueFormat.DURATION, 30, "30s"),
        (AwardValueFormat.CELLS, 25, "25/25 cells"),
        (AwardValueFormat.LINES, 1, "1 line"),
        (AwardValueFormat.LINES, 3, "3 lines"),
    ],
)
def test_format_award_value(kind, value, expected):
    assert format_award_value(_award(kind), value) == expected


def test_format_award_value_unknown_format_fails_fast():
    with pytest.raises(ValueError):
        format_award_value(_award("bogus"), 1)


def test_recipient_lines_collapse_overflow():
    award = _award(AwardValueFormat.STREAK)
    award.recipients = [AwardRecipient(f"p{i}", f"P{i}", 4, i + 1) for i in range(5)]

    lines = recipient_lines(award, limit=3)

    assert lines == ["P0 · 4 streak", "P1 · 4 streak", "P2 · 4 streak", "+2 more"]
