"""Podium slide: the top three, revealed third place first."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from reveal_app.constants.ui_constants import NO_PARTICIPANTS_MESSAGE
from reveal_app.core.awards import format_score
from reveal_app.core.models import AwardRecipient
from reveal_app.core.services.phase_orchestrator import RevealPhase
from reveal_app.core.services.reveal import PodiumReveal
from reveal_app.styling.styles import Styles

# Left to right: 2nd, 1st, 3rd. Heights give the classic stepped podium.
_PODIUM_ORDER: tuple[int, ...] = (2, 1, 3)
_BLOCK_HEIGHTS: dict[int, int] = {1: 260, 2: 200, 3: 150}


class _PodiumBlock(QWidget):
    def __init__(self, rank: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.rank = rank
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.name_label = QLabel("", self)
        self.name_label.setAlignment(Qt.AlignCenter)
        self.name_label.setWordWrap(True)
        layout.addWidget(self.name_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.block_label = QLabel(Styles.get_rank_badge(rank), self)
        self.block_label.setAlignment(Qt.AlignCenter)
        self.block_label.setFixedHeight(_BLOCK_HEIGHTS[rank])
        self.block_label.setStyleSheet(Styles.get_card_style(Styles.get_rank_color(rank)))
        layout.addWidget(self.block_label)

    def set_performer(self, performer: AwardRecipient | None) -> None:
        if performer is None:
            self.name_label.setText("")
            self.score_label.setText("")
            return
        self.name_label.setText(performer.participant_name)
        self.score_label.setText(f"{format_score(performer.value)} pts")

    def apply_font_size(self, font_size: int) -> None:
        self.name_label.setStyleSheet(f"font-size: {int(font_size * 1.3)}pt; font-weight: bold;")
        self.score_label.setStyleSheet(Styles.get_secondary_text_style(font_size))
        self.block_label.setStyleSheet(
            Styles.get_card_style(Styles.get_rank_color(self.rank)) + f"font-size: {font_size * 2}pt;"
        )


class PodiumPanel(QWidget):
    """Three stepped blocks whose visibility follows a :class:`PodiumReveal`."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._reveal: PodiumReveal | None = None
        self._performers: dict[int, AwardRecipient] = {}
        self._font_size = 18
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.headline_label = QLabel("🏆 Top Performers", self)
        self.headline_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.headline_label)

        self.empty_label = QLabel(NO_PARTICIPANTS_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

        blocks_row = QHBoxLayout()
        self.blocks: dict[int, _PodiumBlock] = {}
        for rank in _PODIUM_ORDER:
            block = _PodiumBlock(rank, self)
            self.blocks[rank] = block
            blocks_row.addWidget(block, alignment=Qt.AlignBottom)
        layout.addLayout(blocks_row, stretch=1)

        self.apply_font_size(self._font_size)
        self.refresh()

    def set_reveal(self, reveal: PodiumReveal | None) -> None:
        self._reveal = reveal
        if reveal is not None:
            reveal.add_listener(self.refresh)
        self.refresh()

    def set_performers(self, performers: list[AwardRecipient]) -> None:
        self._performers = {p.rank: p for p in performers if p.rank is not None}
        for rank, block in self.blocks.items():
            block.set_performer(self._performers.get(rank))
        self.refresh()

    def refresh(self) -> None:
        self.empty_label.setVisible(not self._performers)
        for rank, block in self.blocks.items():
            revealed = self._reveal is not None and self._reveal.is_revealed(rank)
            block.setVisible(revealed and rank in self._performers)

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        self.headline_label.setStyleSheet(Styles.get_headline_style(RevealPhase.PODIUM, int(font_size * 1.6)))
        self.empty_label.setStyleSheet(Styles.get_secondary_text_style(font_size))
        for block in self.blocks.values():
            block.apply_font_size(font_size)
