"""Opening slide: session title and a short description."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from reveal_app.constants.ui_constants import SPLASH_HEADLINE
from reveal_app.core.markdown_renderer import renderer
from reveal_app.core.models import GameType, Quiz
from reveal_app.core.services.phase_orchestrator import RevealPhase
from reveal_app.styling.styles import Styles, game_type_label


class SplashPanel(QWidget):
    """Shows the headline, quiz title and participant count."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._font_size = 18
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.headline_label = QLabel(SPLASH_HEADLINE, self)
        self.headline_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.headline_label)

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setTextFormat(Qt.RichText)
        layout.addWidget(self.title_label)

        self.description_label = QLabel("", self)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setTextFormat(Qt.RichText)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        self.participants_label = QLabel("", self)
        self.participants_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.participants_label)

        layout.addStretch()
        self.apply_font_size(self._font_size)

    def show_session(self, quiz: Quiz | None, participant_count: int, game_type: GameType) -> None:
        kind = game_type_label(game_type)
        self.title_label.setText(renderer.render_title(quiz.title if quiz else "", f"{kind} Results"))
        description = renderer.render_fragment(quiz.description) if quiz else ""
        self.description_label.setText(description)
        self.description_label.setVisible(bool(description))
        noun = "participant" if participant_count == 1 else "participants"
        self.participants_label.setText(f"{participant_count} {noun}")

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        self.headline_label.setStyleSheet(Styles.get_headline_style(RevealPhase.SPLASH, font_size * 2))
        self.title_label.setStyleSheet(f"font-size: {int(font_size * 1.4)}pt; font-weight: bold;")
        self.description_label.setStyleSheet(Styles.get_secondary_text_style(font_size))
        self.participants_label.setStyleSheet(Styles.get_secondary_text_style(font_size))
