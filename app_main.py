"""Application entry point for the RevealQt presenter."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from reveal_app.constants.about import APP_NAME
from reveal_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from reveal_app.core.results_manager import ResultsManager
from reveal_app.server.api_server import start_api_server
from reveal_app.ui.presenter_window import PresenterMainWindow
from reveal_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the snapshot feed, and launch the presenter UI."""
    logger = configure_logging()
    logger.info("Starting %s presenter", APP_NAME)

    results_manager = ResultsManager()
    start_api_server(results_manager=results_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    logger.info("Post session snapshots to http://<this-host>:%d/snapshot", DEFAULT_PORT)

    app = QApplication(sys.argv)
    window = PresenterMainWindow(results_manager=results_manager)
    window.resize(1280, 800)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
