"""Final slide: the complete ranked leaderboard."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

from reveal_app.constants.reveal_constants import STREAK_HIGHLIGHT_MIN
from reveal_app.constants.ui_constants import LEADERBOARD_HEADLINE, NO_PARTICIPANTS_MESSAGE
from reveal_app.core.awards import format_score
from reveal_app.core.models import LeaderboardEntry
from reveal_app.core.services.phase_orchestrator import RevealPhase
from reveal_app.core.services.reveal import LeaderboardReveal
from reveal_app.styling.color_palette import ColorPalette
from reveal_app.styling.styles import Styles
from reveal_app.ui.components.widget_helpers import clear_layout


def _build_row(entry: LeaderboardEntry, font_size: int, parent: QWidget) -> QWidget:
    row = QWidget(parent)
    row.setStyleSheet(Styles.get_card_style(Styles.get_rank_color(entry.rank)))
    layout = QHBoxLayout()
    row.setLayout(layout)

    text_style = f"font-size: {font_size}pt; border: none;"

    badge = QLabel(Styles.get_rank_badge(entry.rank), row)
    badge.setStyleSheet(text_style + "font-weight: bold;")
    badge.setMinimumWidth(font_size * 3)
    layout.addWidget(badge)

    name = QLabel(entry.participant.name, row)
    name.setStyleSheet(text_style + "font-weight: bold;")
    layout.addWidget(name, stretch=1)

    if entry.is_completed:
        done = QLabel("Done", row)
        done.setStyleSheet(Styles.get_badge_style(ColorPalette.SUCCESS))
        layout.addWidget(done)

    details = [
        f"{entry.percentage_correct}%",
        f"{entry.average_answer_time}s avg",
    ]
    for text in details:
        label = QLabel(text, row)
        label.setStyleSheet(text_style)
        layout.addWidget(label)

    if entry.best_streak >= STREAK_HIGHLIGHT_MIN:
        streak = QLabel(f"🔥 {entry.best_streak}", row)
        streak.setStyleSheet(Styles.get_badge_style(ColorPalette.STREAK))
        layout.addWidget(streak)

    score = QLabel(format_score(entry.score), row)
    score.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
    score.setMinimumWidth(font_size * 5)
    score.setStyleSheet(text_style + "font-weight: bold;")
    layout.addWidget(score)
    return row


class LeaderboardPanel(QWidget):
    """Scrollable list of every participant in leaderboard order."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._reveal: LeaderboardReveal | None = None
        self._entries: list[LeaderboardEntry] = []
        self._font_size = 18
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.headline_label = QLabel(f"📊 {LEADERBOARD_HEADLINE}", self)
        self.headline_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.headline_label)

        self.empty_label = QLabel(NO_PARTICIPANTS_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        self.rows_widget = QWidget(self.scroll_area)
        self.rows_layout = QVBoxLayout()
        self.rows_widget.setLayout(self.rows_layout)
        self.scroll_area.setWidget(self.rows_widget)
        layout.addWidget(self.scroll_area, stretch=1)

        self.apply_font_size(self._font_size)

    def set_reveal(self, reveal: LeaderboardReveal | None) -> None:
        self._reveal = reveal
        if reveal is not None:
            reveal.add_listener(self.refresh)
        self.refresh()

    def set_entries(self, entries: list[LeaderboardEntry]) -> None:
        self._entries = list(entries)
        self._rebuild_rows()

    def _rebuild_rows(self) -> None:
        clear_layout(self.rows_layout)
        for entry in self._entries:
            self.rows_layout.addWidget(_build_row(entry, self._font_size, self.rows_widget))
        self.rows_layout.addStretch()
        self.refresh()

    def refresh(self) -> None:
        visible = self._reveal is not None and self._reveal.visible
        self.empty_label.setVisible(visible and not self._entries)
        self.scroll_area.setVisible(visible and bool(self._entries))

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        self.headline_label.setStyleSheet(
            Styles.get_headline_style(RevealPhase.LEADERBOARD, int(font_size * 1.6))
        )
        self.empty_label.setStyleSheet(Styles.get_secondary_text_style(font_size))
        self._rebuild_rows()
