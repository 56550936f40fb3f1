"""Stylesheet helpers for the presenter window and results panels."""

from reveal_app.core.models import GameType
from reveal_app.core.services.phase_orchestrator import RevealPhase

from .color_palette import ColorPalette, Theme, ThemeColors

_PHASE_ACCENTS: dict[RevealPhase, ThemeColors] = {
    RevealPhase.SPLASH: ColorPalette.SPLASH_ACCENT,
    RevealPhase.PODIUM: ColorPalette.PODIUM_ACCENT,
    RevealPhase.AWARDS: ColorPalette.AWARDS_ACCENT,
    RevealPhase.LEADERBOARD: ColorPalette.LEADERBOARD_ACCENT,
    RevealPhase.STATS: ColorPalette.STATS_ACCENT,
}

_RANK_COLORS: dict[int, ThemeColors] = {
    1: ColorPalette.GOLD,
    2: ColorPalette.SILVER,
    3: ColorPalette.BRONZE,
}

_RANK_MEDALS: dict[int, str] = {1: "🥇", 2: "🥈", 3: "🥉"}

_AWARD_GLYPHS: dict[str, str] = {
    "trophy": "🏆",
    "clock": "⏱️",
    "zap": "⚡",
    "target": "🎯",
    "star": "⭐",
    "medal": "🏅",
}

_GAME_TYPE_LABELS: dict[GameType, str] = {
    GameType.QUIZ: "Quiz",
    GameType.BINGO: "Bingo",
}


class Styles:
    """Generates Qt stylesheets for the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
        """

    @staticmethod
    def get_phase_accent(phase: RevealPhase, theme: Theme = Theme.DARK) -> str:
        """Accent color for a reveal phase; unknown phases are a programming error."""
        try:
            return _PHASE_ACCENTS[phase].get(theme)
        except KeyError:
            raise ValueError(f"No accent defined for phase {phase!r}") from None

    @staticmethod
    def get_rank_color(rank: int, theme: Theme = Theme.DARK) -> str:
        """Medal color for podium ranks, card color for everyone else."""
        if rank < 1:
            raise ValueError(f"Rank must be positive, got {rank}")
        colors = _RANK_COLORS.get(rank, ColorPalette.CARD_BACKGROUND)
        return colors.get(theme)

    @staticmethod
    def get_rank_badge(rank: int) -> str:
        if rank < 1:
            raise ValueError(f"Rank must be positive, got {rank}")
        return _RANK_MEDALS.get(rank, f"#{rank}")

    @staticmethod
    def get_award_glyph(icon: str) -> str:
        try:
            return _AWARD_GLYPHS[icon]
        except KeyError:
            raise ValueError(f"No glyph defined for award icon '{icon}'") from None

    @staticmethod
    def get_headline_style(phase: RevealPhase, font_size: int = 32, theme: Theme = Theme.DARK) -> str:
        accent = Styles.get_phase_accent(phase, theme)
        return f"font-size: {font_size}pt; font-weight: bold; color: {accent};"

    @staticmethod
    def get_card_style(border_color: str, theme: Theme = Theme.DARK) -> str:
        return (
            f"background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};"
            f"border: 2px solid {border_color}; border-radius: 10px; padding: 10px;"
        )

    @staticmethod
    def get_badge_style(color: ThemeColors, theme: Theme = Theme.DARK) -> str:
        return (
            f"background-color: {color.get(theme)}; color: {ColorPalette.TEXT_ON_ACCENT.get(theme)};"
            "border-radius: 8px; padding: 2px 8px; font-weight: bold;"
        )

    @staticmethod
    def get_secondary_text_style(font_size: int = 14, theme: Theme = Theme.DARK) -> str:
        return f"font-size: {font_size}pt; color: {ColorPalette.TEXT_SECONDARY.get(theme)};"


def game_type_label(game_type: GameType) -> str:
    """Display label for a game type; an unmapped type fails loudly."""
    try:
        return _GAME_TYPE_LABELS[game_type]
    except KeyError:
        raise ValueError(f"No label defined for game type {game_type!r}") from None
