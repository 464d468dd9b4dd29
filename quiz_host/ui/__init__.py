"""Qt UI components for the host application."""

from .dialog_helpers import (
    confirm_action,
    confirm_kick_player,
    show_error,
    show_info,
    show_warning,
)
from .host_main_window import HostMainWindow
from .qt_bridge import QtDispatcher, QtScheduler

__all__ = [
    "HostMainWindow",
    "QtDispatcher",
    "QtScheduler",
    "confirm_action",
    "confirm_kick_player",
    "show_error",
    "show_info",
    "show_warning",
]
