"""Color palette for the presenter, with light and dark variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """A color with one value per theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the presenter screens."""

    # Text
    TEXT_PRIMARY = ThemeColors(light="#0F172A", dark="#F8FAFC")
    TEXT_SECONDARY = ThemeColors(light="#475569", dark="#94A3B8")
    TEXT_ON_ACCENT = ThemeColors(light="#FFFFFF", dark="#FFFFFF")

    # Stage backgrounds
    BACKGROUND_PRIMARY = ThemeColors(light="#F8FAFC", dark="#0F172A")
    BACKGROUND_SECONDARY = ThemeColors(light="#E2E8F0", dark="#1E293B")
    CARD_BACKGROUND = ThemeColors(light="#FFFFFF", dark="#334155")
    BORDER_PRIMARY = ThemeColors(light="#CBD5E1", dark="#475569")

    # Phase accents
    SPLASH_ACCENT = ThemeColors(light="#0284C7", dark="#38BDF8")    # sky
    PODIUM_ACCENT = ThemeColors(light="#D97706", dark="#FBBF24")    # amber
    AWARDS_ACCENT = ThemeColors(light="#7C3AED", dark="#A78BFA")    # violet
    LEADERBOARD_ACCENT = ThemeColors(light="#0F766E", dark="#2DD4BF")  # teal
    STATS_ACCENT = ThemeColors(light="#475569", dark="#CBD5E1")     # slate

    # Medals
    GOLD = ThemeColors(light="#F59E0B", dark="#FBBF24")
    SILVER = ThemeColors(light="#94A3B8", dark="#CBD5E1")
    BRONZE = ThemeColors(light="#B45309", dark="#D97706")

    # Badges
    STREAK = ThemeColors(light="#EA580C", dark="#FB923C")
    SUCCESS = ThemeColors(light="#15803D", dark="#4ADE80")
    ERROR = ThemeColors(light="#B91C1C", dark="#F87171")

    # Buttons
    BUTTON_PRIMARY_BG = ThemeColors(light="#0284C7", dark="#38BDF8")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#0F172A")
    BUTTON_SECONDARY_BG = ThemeColors(light="#E2E8F0", dark="#334155")
    BUTTON_HOVER_BG = ThemeColors(light="#CBD5E1", dark="#475569")
