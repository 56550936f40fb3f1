"""Awards slide: one card per award, revealed on a fixed cadence."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGridLayout, QLabel, QVBoxLayout, QWidget

from reveal_app.constants.reveal_constants import MAX_VISIBLE_RECIPIENTS
from reveal_app.constants.ui_constants import AWARDS_HEADLINE
from reveal_app.core.awards import recipient_lines
from reveal_app.core.models import Award
from reveal_app.core.services.phase_orchestrator import RevealPhase
from reveal_app.core.services.reveal import AwardsReveal
from reveal_app.styling.styles import Styles
from reveal_app.ui.components.widget_helpers import clear_layout

_COLUMNS = 3


class _AwardCard(QWidget):
    def __init__(self, award: Award, font_size: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        self.setLayout(layout)
        self.setStyleSheet(Styles.get_card_style(award.color))

        title = QLabel(f"{Styles.get_award_glyph(award.icon)} {award.name}", self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"font-size: {int(font_size * 1.2)}pt; font-weight: bold; color: {award.color};")
        layout.addWidget(title)

        description = QLabel(award.description, self)
        description.setAlignment(Qt.AlignCenter)
        description.setWordWrap(True)
        description.setStyleSheet(Styles.get_secondary_text_style(max(8, font_size - 4)))
        layout.addWidget(description)

        for line in recipient_lines(award, MAX_VISIBLE_RECIPIENTS):
            label = QLabel(line, self)
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(f"font-size: {font_size}pt;")
            layout.addWidget(label)


class AwardsPanel(QWidget):
    """Grid of award cards driven by an :class:`AwardsReveal`."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._reveal: AwardsReveal | None = None
        self._awards: list[Award] = []
        self._cards: list[_AwardCard] = []
        self._font_size = 18
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.headline_label = QLabel(f"🏅 {AWARDS_HEADLINE}", self)
        self.headline_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.headline_label)

        self.empty_label = QLabel("No awards this time. Everyone played their part!", self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

        self.grid = QGridLayout()
        layout.addLayout(self.grid, stretch=1)
        self.apply_font_size(self._font_size)

    def set_reveal(self, reveal: AwardsReveal | None) -> None:
        self._reveal = reveal
        if reveal is not None:
            reveal.set_award_count(len(self._awards))
            reveal.add_listener(self.refresh)
        self.refresh()

    def set_awards(self, awards: list[Award]) -> None:
        self._awards = list(awards)
        if self._reveal is not None:
            self._reveal.set_award_count(len(self._awards))
        self._rebuild_cards()

    def _rebuild_cards(self) -> None:
        clear_layout(self.grid)
        self._cards = []
        for index, award in enumerate(self._awards):
            card = _AwardCard(award, self._font_size, self)
            self.grid.addWidget(card, index // _COLUMNS, index % _COLUMNS)
            self._cards.append(card)
        self.refresh()

    def refresh(self) -> None:
        self.empty_label.setVisible(not self._awards)
        for index, card in enumerate(self._cards):
            card.setVisible(self._reveal is not None and self._reveal.is_revealed(index))

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        self.headline_label.setStyleSheet(Styles.get_headline_style(RevealPhase.AWARDS, int(font_size * 1.6)))
        self.empty_label.setStyleSheet(Styles.get_secondary_text_style(font_size))
        if self._awards:
            self._rebuild_cards()
