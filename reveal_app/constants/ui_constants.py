"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "RevealQt Presenter"
RESULTS_REFRESH_INTERVAL_MS: int = 1000
DEFAULT_SESSION_FILE: str = "session_results.json"

TOOLBAR_LOAD_BUTTON: str = "Load Results"
TOOLBAR_START_BUTTON: str = "Start Presentation"
TOOLBAR_RESTART_BUTTON: str = "Restart Presentation"
TOOLBAR_SETTINGS_BUTTON: str = "Settings"
TOOLBAR_ABOUT_BUTTON: str = "About RevealQt"
SKIP_BUTTON_TEXT: str = "Skip ▶"

IMPORT_DIALOG_TITLE: str = "Select session results"
IMPORT_FILE_FILTER: str = "Session results (*.json);;All files (*.*)"

SPLASH_HEADLINE: str = "Session Complete!"
AWARDS_HEADLINE: str = "Session Awards"
LEADERBOARD_HEADLINE: str = "Final Leaderboard"
NO_PARTICIPANTS_MESSAGE: str = "No participants"
NO_RESULTS_MESSAGE: str = "Load session results to start the presentation."
WAITING_MESSAGE: str = "Press Start Presentation when the audience is ready."
