"""Qt UI components for the presenter application."""

from .dialog_helpers import confirm_restart, show_error, show_info, show_warning
from .presenter_window import PresenterMainWindow

__all__ = [
    "PresenterMainWindow",
    "confirm_restart",
    "show_error",
    "show_info",
    "show_warning",
]
