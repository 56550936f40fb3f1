"""Audience-facing stage that hosts one slide per reveal phase."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import (
    QAbstractButton,
    QAbstractSpinBox,
    QComboBox,
    QLabel,
    QLineEdit,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from reveal_app.constants.ui_constants import NO_RESULTS_MESSAGE
from reveal_app.core.services.phase_orchestrator import PhaseState, RevealPhase
from reveal_app.styling.styles import Styles
from reveal_app.ui.components.awards_panel import AwardsPanel
from reveal_app.ui.components.leaderboard_panel import LeaderboardPanel
from reveal_app.ui.components.podium_panel import PodiumPanel
from reveal_app.ui.components.splash_panel import SplashPanel
from reveal_app.ui.components.stats_panel import StatsPanel

# Clicks on these never count as "advance the presentation".
_INTERACTIVE_WIDGETS = (QAbstractButton, QLineEdit, QAbstractSpinBox, QComboBox)

_SLIDE_INDEX: dict[RevealPhase, int] = {
    RevealPhase.SPLASH: 1,
    RevealPhase.PODIUM: 2,
    RevealPhase.AWARDS: 3,
    RevealPhase.LEADERBOARD: 4,
}


class RevealStage(QStackedWidget):
    """Stacked slides; a click anywhere outside a control asks to skip."""

    skip_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        self.idle_label = QLabel(NO_RESULTS_MESSAGE, self)
        self.idle_label.setAlignment(Qt.AlignCenter)
        self.idle_label.setWordWrap(True)
        self.addWidget(self.idle_label)

        self.splash_panel = SplashPanel(self)
        self.podium_panel = PodiumPanel(self)
        self.awards_panel = AwardsPanel(self)
        self.addWidget(self.splash_panel)
        self.addWidget(self.podium_panel)
        self.addWidget(self.awards_panel)

        # Leaderboard and stats share the final slide.
        final_slide = QWidget(self)
        final_layout = QVBoxLayout()
        final_slide.setLayout(final_layout)
        self.leaderboard_panel = LeaderboardPanel(final_slide)
        self.stats_panel = StatsPanel(final_slide)
        final_layout.addWidget(self.leaderboard_panel, stretch=1)
        final_layout.addWidget(self.stats_panel)
        self.addWidget(final_slide)

        self.setCurrentIndex(0)

    def show_idle(self, message: str) -> None:
        self.idle_label.setText(message)
        self.setCurrentIndex(0)

    def show_state(self, state: PhaseState) -> None:
        self.setCurrentIndex(_SLIDE_INDEX[state.primary_phase])

    def apply_font_size(self, font_size: int) -> None:
        self.idle_label.setStyleSheet(Styles.get_secondary_text_style(font_size))
        self.splash_panel.apply_font_size(font_size)
        self.podium_panel.apply_font_size(font_size)
        self.awards_panel.apply_font_size(font_size)
        self.leaderboard_panel.apply_font_size(font_size)
        self.stats_panel.apply_font_size(font_size)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton and not self._is_on_control(event):
            self.skip_requested.emit()
            event.accept()
            return
        super().mousePressEvent(event)

    def _is_on_control(self, event: QMouseEvent) -> bool:
        widget = self.childAt(event.position().toPoint())
        while widget is not None and widget is not self:
            if isinstance(widget, _INTERACTIVE_WIDGETS):
                return True
            widget = widget.parentWidget()
        return False
