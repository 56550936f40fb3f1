"""
Tests for theme lookups used by the presenter panels
"""
import pytest

from reveal_app.core.models import GameType
from reveal_app.core.services.phase_orchestrator import RevealPhase
from reveal_app.styling.color_palette import ColorPalette, Theme
from reveal_app.styling.styles import Styles, game_type_label


def test_every_phase_has_an_accent():
    for phase in RevealPhase:
        assert Styles.get_phase_accent(phase).startswith("#")


def test_unknown_phase_fails_fast():
    with pytest.raises(ValueError):
        Styles.get_phase_accent("intermission")


def test_rank_colors_and_badges():
    assert Styles.get_rank_color(1, Theme.LIGHT) == ColorPalette.GOLD.light
    assert Styles.get_rank_color(4) == ColorPalette.CARD_BACKGROUND.dark
    assert Styles.get_rank_badge(2) == "🥈"
    assert Styles.get_rank_badge(7) == "#7"
    with pytest.raises(ValueError):
        Styles.get_rank_badge(0)


def test_award_glyphs():
    assert Styles.get_award_glyph("trophy") == "🏆"
    with pytest.raises(ValueError):
        Styles.get_award_glyph("balloon")


def test_game_type_labels():
    assert game_type_label(GameType.QUIZ) == "Quiz"
    assert game_type_label(GameType.BINGO) == "Bingo"
    with pytest.raises(ValueError):
        game_type_label("scratch")
