"""Component for the player waiting lobby."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_host.constants.ui_constants import (
    CONNECTION_ERROR_TITLE,
    LOBBY_COUNT_TEMPLATE,
    LOBBY_EMPTY_STATE,
    LOBBY_KICK_BUTTON,
    LOBBY_TITLE,
)
from quiz_host.core.errors import ChannelError, SessionStateError
from quiz_host.core.host_controller import HostController
from quiz_host.ui.dialog_helpers import show_error, show_warning


class LobbyPanel(QWidget):
    """UI component listing joined players with a kick action."""

    def __init__(self, controller: HostController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._roster_generation: int = -1

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        layout.addWidget(QLabel(LOBBY_TITLE, self))

        self.count_label = QLabel(LOBBY_COUNT_TEMPLATE.format(count=0), self)
        layout.addWidget(self.count_label)

        self.participant_list = QListWidget(self)
        self.participant_list.setAlternatingRowColors(True)
        layout.addWidget(self.participant_list, stretch=1)

        self.empty_label = QLabel(LOBBY_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

        self.kick_button = QPushButton(LOBBY_KICK_BUTTON, self)
        self.kick_button.clicked.connect(self._handle_kick_click)
        layout.addWidget(self.kick_button)

    def _handle_kick_click(self) -> None:
        item = self.participant_list.currentItem()
        if item is None:
            show_warning(self, "No player selected", "Select a player to remove first.")
            return
        player_id = item.data(Qt.UserRole)
        try:
            self.controller.kick(player_id)
        except SessionStateError as exc:
            show_warning(self, "Cannot kick", str(exc))
        except ChannelError as exc:
            show_error(self, CONNECTION_ERROR_TITLE, str(exc))

    def refresh_participants(self) -> None:
        self.kick_button.setEnabled(self.controller.can_kick())
        generation = self.controller.get_roster_generation()
        if generation == self._roster_generation:
            return
        self._roster_generation = generation

        players = self.controller.get_players()
        self.participant_list.clear()
        for player in players:
            glyph = player.emoji or "👤"
            item = QListWidgetItem(f"{glyph} {player.display_name}", self.participant_list)
            item.setData(Qt.UserRole, player.player_id)
        count = len(players)
        self.count_label.setText(LOBBY_COUNT_TEMPLATE.format(count=count))
        self.empty_label.setVisible(count == 0)
