"""Qt main window for hosting a live quiz room."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from quiz_host.config import HostConfig
from quiz_host.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from quiz_host.constants.ui_constants import STATE_REFRESH_INTERVAL_MS, WINDOW_TITLE
from quiz_host.core.host_controller import HostController
from quiz_host.net.socketio_channel import SocketIOChannel
from quiz_host.ui.components.live_panel import LivePanel
from quiz_host.ui.components.lobby_panel import LobbyPanel
from quiz_host.ui.components.question_panel import QuestionPanel
from quiz_host.ui.components.room_panel import RoomPanel
from quiz_host.ui.dialog_helpers import confirm_kick_player, show_info, show_warning
from quiz_host.ui.qt_bridge import QtScheduler


class HostMainWindow(QMainWindow):
    """Main Qt window: room setup, question editor, lobby and live view."""

    def __init__(self, channel: SocketIOChannel, config: HostConfig) -> None:
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} - {channel.server_url}")

        self.channel = channel
        self.controller = HostController(
            channel,
            QtScheduler(self),
            confirm=lambda message: confirm_kick_player(self, message),
            notify=lambda title, message: show_warning(self, title, message),
            capacity=config.default_capacity,
            question_count=config.default_question_count,
        )

        self._build_ui()
        self._configure_refresh_timer()
        self._refresh_state()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)
        button_row.addStretch(1)
        root_layout.addLayout(button_row)

        self.room_panel = RoomPanel(self.controller, self)
        root_layout.addWidget(self.room_panel)

        splitter = QSplitter(self)
        self.question_panel = QuestionPanel(self.controller, splitter)
        splitter.addWidget(self.question_panel)

        side = QWidget(splitter)
        side_layout = QVBoxLayout()
        side.setLayout(side_layout)
        self.lobby_panel = LobbyPanel(self.controller, side)
        side_layout.addWidget(self.lobby_panel)
        self.live_panel = LivePanel(self.controller, side)
        side_layout.addWidget(self.live_panel)
        splitter.addWidget(side)

        root_layout.addWidget(splitter, stretch=1)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(STATE_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    def _refresh_state(self) -> None:
        self.room_panel.refresh_state()
        self.question_panel.refresh_state()
        self.lobby_panel.refresh_participants()
        self.live_panel.update_stats()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.refresh_timer.stop()
        self.channel.disconnect()
        super().closeEvent(event)
