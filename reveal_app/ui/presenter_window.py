"""Qt main window running the staged results presentation."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from reveal_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from reveal_app.constants.sound_constants import DEFAULT_VOLUME
from reveal_app.constants.ui_constants import (
    DEFAULT_SESSION_FILE,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    NO_RESULTS_MESSAGE,
    RESULTS_REFRESH_INTERVAL_MS,
    SKIP_BUTTON_TEXT,
    TOOLBAR_ABOUT_BUTTON,
    TOOLBAR_LOAD_BUTTON,
    TOOLBAR_RESTART_BUTTON,
    TOOLBAR_SETTINGS_BUTTON,
    TOOLBAR_START_BUTTON,
    WAITING_MESSAGE,
    WINDOW_TITLE,
)
from reveal_app.core.results_manager import ResultsManager, SessionResults
from reveal_app.core.services.phase_orchestrator import (
    PhaseOrchestrator,
    PhaseState,
    RevealPhase,
)
from reveal_app.core.services.reveal import (
    AwardsReveal,
    LeaderboardReveal,
    PodiumReveal,
    RevealConsumer,
    StatsReveal,
)
from reveal_app.core.services.sound_cues import SoundCueDispatcher
from reveal_app.core.session_importer import SessionImportError, load_session_from_file
from reveal_app.styling.styles import Styles
from reveal_app.ui.dialog_helpers import confirm_restart, show_error, show_info, show_warning
from reveal_app.ui.qt_scheduler import QtScheduler
from reveal_app.ui.qt_sound_player import QtSoundPlayer
from reveal_app.ui.reveal_stage import RevealStage
from reveal_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class PresenterMainWindow(QMainWindow):
    """Toolbar, reveal stage and the services that drive one presentation run."""

    def __init__(self, results_manager: ResultsManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.results_manager = results_manager

        self._ui_font_size: int = 10
        self._game_font_size: int = 18
        self._animation_enabled: bool = True
        self._sounds_enabled: bool = True
        self._volume: float = DEFAULT_VOLUME

        self.scheduler = QtScheduler(self)
        self.sound_player = QtSoundPlayer(self, volume=self._volume)

        # Per-run services; rebuilt by _start_presentation, torn down by _dispose_run.
        self._orchestrator: PhaseOrchestrator | None = None
        self._dispatcher: SoundCueDispatcher | None = None
        self._consumers: list[RevealConsumer] = []
        self._rendered_generation: int | None = None

        self._build_ui()
        self._configure_refresh_timer()
        self._apply_styles()
        self._auto_load_default_session()
        self._refresh_state()

    # ---------- Layout ----------

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_toolbar(root_layout)

        self.stage = RevealStage(self)
        self.stage.skip_requested.connect(self._handle_skip)
        root_layout.addWidget(self.stage, stretch=1)

        skip_row = QHBoxLayout()
        skip_row.addStretch()
        self.skip_button = QPushButton(SKIP_BUTTON_TEXT, self)
        self.skip_button.clicked.connect(self._handle_skip)
        self.skip_button.setVisible(False)
        skip_row.addWidget(self.skip_button)
        root_layout.addLayout(skip_row)

    def _build_toolbar(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.load_button = QPushButton(TOOLBAR_LOAD_BUTTON, self)
        self.load_button.clicked.connect(self._handle_load_results)
        button_row.addWidget(self.load_button)

        self.start_button = QPushButton(TOOLBAR_START_BUTTON, self)
        self.start_button.clicked.connect(self._handle_start)
        button_row.addWidget(self.start_button)

        button_row.addStretch()

        self.settings_button = QPushButton(TOOLBAR_SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.about_button = QPushButton(TOOLBAR_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(RESULTS_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    # ---------- Results rendering ----------

    def _refresh_state(self) -> None:
        if self.results_manager.get_generation() == self._rendered_generation:
            return
        self._render_results(self.results_manager.get_results())

    def _render_results(self, results: SessionResults | None) -> None:
        if results is None:
            self._rendered_generation = self.results_manager.get_generation()
            self.stage.show_idle(NO_RESULTS_MESSAGE)
            return

        self._rendered_generation = results.generation
        awards = results.awards
        self.stage.splash_panel.show_session(results.quiz, results.participant_count, results.game_type)
        self.stage.podium_panel.set_performers(results.top_performers)
        self.stage.awards_panel.set_awards(awards)
        self.stage.leaderboard_panel.set_entries(results.leaderboard)
        self.stage.stats_panel.set_stats(results.stats, results.is_group_win)

        if self._orchestrator is None:
            self.stage.show_idle(WAITING_MESSAGE)
            return
        # A run in progress keeps its phase; new awards apply from the next awards entry.
        self._orchestrator.set_awards_count(len(awards))
        if self._dispatcher is not None:
            self._dispatcher.set_awards_count(len(awards))

    # ---------- Presentation lifecycle ----------

    def _handle_start(self) -> None:
        if not self.results_manager.has_snapshot():
            show_warning(self, "No results", NO_RESULTS_MESSAGE)
            return
        running = self._orchestrator is not None and not self._orchestrator.is_on_final_slide()
        if running and not confirm_restart(self):
            return
        self._start_presentation()

    def _start_presentation(self) -> None:
        results = self.results_manager.get_results()
        if results is None:
            return
        self._dispose_run()
        self._render_results(results)
        awards_count = len(results.awards)

        orchestrator = PhaseOrchestrator(
            self.scheduler,
            enabled=self._animation_enabled,
            awards_count=awards_count,
            on_phase_change=self._handle_phase_change,
        )
        dispatcher = SoundCueDispatcher(
            self.sound_player,
            self.scheduler,
            enabled=self._sounds_enabled,
            awards_count=awards_count,
        )
        dispatcher.attach(orchestrator)

        podium = PodiumReveal(orchestrator, self.scheduler)
        awards = AwardsReveal(orchestrator, self.scheduler, awards_count)
        leaderboard = LeaderboardReveal(orchestrator, self.scheduler)
        stats = StatsReveal(orchestrator, self.scheduler)
        self.stage.podium_panel.set_reveal(podium)
        self.stage.awards_panel.set_reveal(awards)
        self.stage.leaderboard_panel.set_reveal(leaderboard)
        self.stage.stats_panel.set_reveal(stats)

        orchestrator.subscribe(self._apply_state)
        self._orchestrator = orchestrator
        self._dispatcher = dispatcher
        self._consumers = [podium, awards, leaderboard, stats]
        self.start_button.setText(TOOLBAR_RESTART_BUTTON)

        if not orchestrator.start() and orchestrator.state is not None:
            # Animation disabled: the run is born on the final slide.
            self._apply_state(orchestrator.state)

    def _dispose_run(self) -> None:
        for consumer in self._consumers:
            consumer.dispose()
        self._consumers = []
        self.stage.podium_panel.set_reveal(None)
        self.stage.awards_panel.set_reveal(None)
        self.stage.leaderboard_panel.set_reveal(None)
        self.stage.stats_panel.set_reveal(None)
        if self._dispatcher is not None:
            self._dispatcher.dispose()
            self._dispatcher = None
        if self._orchestrator is not None:
            self._orchestrator.dispose()
            self._orchestrator = None

    def _apply_state(self, state: PhaseState) -> None:
        self.stage.show_state(state)
        self.skip_button.setVisible(not state.is_terminal)

    def _handle_phase_change(self, phase: RevealPhase) -> None:
        logger.info("Presentation entered %s", phase.value)

    def _handle_skip(self) -> None:
        if self._orchestrator is None:
            return
        self._orchestrator.skip()

    # ---------- Toolbar actions ----------

    def _handle_load_results(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(Path.cwd()),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            imported = load_session_from_file(Path(file_path))
        except (OSError, SessionImportError) as exc:
            show_error(self, "Import failed", str(exc))
            return

        self._dispose_run()
        self.start_button.setText(TOOLBAR_START_BUTTON)
        self.skip_button.setVisible(False)
        self.results_manager.load_snapshot(imported.snapshot)
        self._refresh_state()
        show_info(
            self,
            "Results loaded",
            f"Loaded {len(imported.snapshot.participants)} participants. Press Start when ready.",
        )

    def _auto_load_default_session(self) -> None:
        default_path = Path(DEFAULT_SESSION_FILE)
        if not default_path.exists():
            return
        try:
            imported = load_session_from_file(default_path)
        except (OSError, SessionImportError) as exc:
            logger.warning("Could not auto-load %s: %s", default_path, exc)
            return
        self.results_manager.load_snapshot(imported.snapshot)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._ui_font_size)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._animation_enabled,
            self._sounds_enabled,
            self._volume,
        )
        if not dialog.exec():
            return
        self._ui_font_size = dialog.get_ui_font_size()
        self._game_font_size = dialog.get_game_font_size()
        self._animation_enabled = dialog.get_animation_enabled()
        self._sounds_enabled = dialog.get_sounds_enabled()
        self._volume = dialog.get_volume()

        self.sound_player.set_volume(self._volume)
        if self._dispatcher is not None:
            self._dispatcher.set_enabled(self._sounds_enabled)
        if self._orchestrator is not None:
            # Turning animation off mid-run jumps straight to the final slide.
            self._orchestrator.set_enabled(self._animation_enabled)
        self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (
            self.load_button,
            self.start_button,
            self.settings_button,
            self.about_button,
            self.skip_button,
        ):
            button.setStyleSheet(ui_style)
        self.stage.apply_font_size(self._game_font_size)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.refresh_timer.stop()
        self._dispose_run()
        super().closeEvent(event)
