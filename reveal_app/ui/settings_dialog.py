"""Settings dialog for presenter preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QSpinBox,
    QVBoxLayout,
)
from PySide6.QtCore import Qt


class SettingsDialog(QDialog):
    """Dialog for configuring reveal animation, sound and font sizes."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        game_font_size: int = 18,
        animation_enabled: bool = True,
        sounds_enabled: bool = True,
        volume: float = 0.7,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._game_font_size = game_font_size
        self._animation_enabled = animation_enabled
        self._sounds_enabled = sounds_enabled
        self._volume_percent = int(round(max(0.0, min(1.0, volume)) * 100))

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Presentation
        reveal_group = QGroupBox("Presentation")
        reveal_layout = QVBoxLayout()
        reveal_group.setLayout(reveal_layout)

        self.animation_checkbox = QCheckBox("Animate the reveal (splash, podium, awards)")
        self.animation_checkbox.setToolTip(
            "When disabled, starting the presentation goes straight to the final leaderboard."
        )
        self.animation_checkbox.setChecked(self._animation_enabled)
        reveal_layout.addWidget(self.animation_checkbox)

        self.sounds_checkbox = QCheckBox("Play sound cues")
        self.sounds_checkbox.setChecked(self._sounds_enabled)
        reveal_layout.addWidget(self.sounds_checkbox)

        volume_row = QHBoxLayout()
        volume_row.addWidget(QLabel("Volume:"))
        self.volume_slider = QSlider(Qt.Horizontal)
        self.volume_slider.setRange(0, 100)
        self.volume_slider.setValue(self._volume_percent)
        self.volume_value_label = QLabel(f"{self._volume_percent}%")
        self.volume_slider.valueChanged.connect(
            lambda value: self.volume_value_label.setText(f"{value}%")
        )
        volume_row.addWidget(self.volume_slider, stretch=1)
        volume_row.addWidget(self.volume_value_label)
        reveal_layout.addLayout(volume_row)

        layout.addWidget(reveal_group)

        # Font sizes
        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (toolbar, dialogs):")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        game_font_row = QHBoxLayout()
        game_font_label = QLabel("Stage Font Size (names, scores):")
        game_font_label.setToolTip("Base font size for the audience-facing results slides")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(10, 40)
        self.game_font_spinbox.setValue(self._game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        game_font_row.addWidget(game_font_label)
        game_font_row.addStretch()
        game_font_row.addWidget(self.game_font_spinbox)
        font_layout.addLayout(game_font_row)

        layout.addWidget(font_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        return self.ui_font_spinbox.value()

    def get_game_font_size(self) -> int:
        return self.game_font_spinbox.value()

    def get_animation_enabled(self) -> bool:
        return self.animation_checkbox.isChecked()

    def get_sounds_enabled(self) -> bool:
        return self.sounds_checkbox.isChecked()

    def get_volume(self) -> float:
        """Selected master volume in the 0.0-1.0 range."""
        return self.volume_slider.value() / 100
