"""Summary statistics shown beside the final leaderboard."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from reveal_app.core.awards import format_score
from reveal_app.core.models import SessionStats
from reveal_app.core.services.phase_orchestrator import RevealPhase
from reveal_app.core.services.reveal import StatsReveal
from reveal_app.styling.styles import Styles


def stat_boxes(stats: SessionStats, is_group_win: bool) -> list[tuple[str, str]]:
    """(value, caption) pairs for the four summary boxes."""
    third = (
        (str(stats.group_win_winners), "BINGOs")
        if is_group_win
        else (f"{stats.completion_rate}%", "Completion")
    )
    return [
        (str(stats.total_participants), "Participants"),
        (format_score(stats.average_score), "Avg Score"),
        third,
        (f"{stats.average_time}s", "Avg Time"),
    ]


class _StatBox(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        self.setLayout(layout)
        self.value_label = QLabel("0", self)
        self.value_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.value_label)
        self.caption_label = QLabel("", self)
        self.caption_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.caption_label)

    def set_stat(self, value: str, caption: str) -> None:
        self.value_label.setText(value)
        self.caption_label.setText(caption)

    def apply_font_size(self, font_size: int) -> None:
        accent = Styles.get_phase_accent(RevealPhase.STATS)
        self.value_label.setStyleSheet(f"font-size: {int(font_size * 1.6)}pt; font-weight: bold; color: {accent};")
        self.caption_label.setStyleSheet(Styles.get_secondary_text_style(max(8, font_size - 4)))


class StatsPanel(QWidget):
    """Row of four stat boxes that appears shortly after the leaderboard."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._reveal: StatsReveal | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)
        self.boxes = [_StatBox(self) for _ in range(4)]
        for box in self.boxes:
            layout.addWidget(box)
        self.apply_font_size(18)
        self.refresh()

    def set_reveal(self, reveal: StatsReveal | None) -> None:
        self._reveal = reveal
        if reveal is not None:
            reveal.add_listener(self.refresh)
        self.refresh()

    def set_stats(self, stats: SessionStats, is_group_win: bool) -> None:
        for box, (value, caption) in zip(self.boxes, stat_boxes(stats, is_group_win)):
            box.set_stat(value, caption)

    def refresh(self) -> None:
        self.setVisible(self._reveal is not None and self._reveal.visible)

    def apply_font_size(self, font_size: int) -> None:
        for box in self.boxes:
            box.apply_font_size(font_size)
