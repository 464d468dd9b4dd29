"""Application entry point for the QuizHost console."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_host.config import HostConfig
from quiz_host.constants.ui_constants import CONNECTION_ERROR_TITLE
from quiz_host.core.errors import ChannelError
from quiz_host.net.socketio_channel import SocketIOChannel
from quiz_host.ui.dialog_helpers import show_error
from quiz_host.ui.host_main_window import HostMainWindow
from quiz_host.ui.qt_bridge import QtDispatcher
from quiz_host.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, connect to the quiz server, and launch the Qt UI."""
    config = HostConfig.from_env()
    logger = configure_logging(config.log_level)
    logger.info("Starting QuizHost console")

    app = QApplication(sys.argv)
    dispatcher = QtDispatcher(app)
    channel = SocketIOChannel(config.server_url, dispatcher=dispatcher)

    # Handlers are registered by the window, so it must exist before connecting.
    window = HostMainWindow(channel=channel, config=config)
    window.show()
    try:
        channel.connect()
    except ChannelError as exc:
        show_error(window, CONNECTION_ERROR_TITLE, str(exc))

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
