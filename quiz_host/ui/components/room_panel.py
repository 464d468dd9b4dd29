"""Component for choosing the room code and capacity and creating the room."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QWidget,
)

from quiz_host.constants.ui_constants import (
    CONNECTION_ERROR_TITLE,
    ROOM_CAPACITY_LABEL,
    ROOM_CODE_PLACEHOLDER,
    ROOM_CREATE_BUTTON,
    ROOM_STATUS_TEMPLATE,
    VALIDATION_ERROR_TITLE,
)
from quiz_host.core.errors import ChannelError, HostError
from quiz_host.core.host_controller import HostController
from quiz_host.core.models import SessionPhase
from quiz_host.ui.dialog_helpers import show_error, show_warning

_STATUS_TEXT = {
    SessionPhase.UNSET: "no room",
    SessionPhase.PENDING: "created (waiting for players)",
    SessionPhase.CREATED: "created",
    SessionPhase.RUNNING: "quiz running",
    SessionPhase.ENDED: "quiz finished",
}


class RoomPanel(QWidget):
    """UI component for the room code, capacity and the create button."""

    def __init__(self, controller: HostController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        self.code_input = QLineEdit(self)
        self.code_input.setPlaceholderText(ROOM_CODE_PLACEHOLDER)
        self.code_input.textChanged.connect(self._handle_code_changed)
        layout.addWidget(self.code_input, stretch=1)

        layout.addWidget(QLabel(ROOM_CAPACITY_LABEL, self))
        self.capacity_spin = QSpinBox(self)
        self.capacity_spin.setRange(1, 500)
        self.capacity_spin.setValue(self.controller.get_capacity())
        self.capacity_spin.valueChanged.connect(self._handle_capacity_changed)
        layout.addWidget(self.capacity_spin)

        self.create_button = QPushButton(ROOM_CREATE_BUTTON, self)
        self.create_button.clicked.connect(self._handle_create_click)
        layout.addWidget(self.create_button)

        self.status_label = QLabel(self)
        layout.addWidget(self.status_label)

    def _handle_code_changed(self, text: str) -> None:
        if not self.controller.phase.room_created:
            self.controller.set_room_code(text)
        self.refresh_state()

    def _handle_capacity_changed(self, value: int) -> None:
        if not self.controller.phase.room_created:
            self.controller.set_capacity(value)

    def _handle_create_click(self) -> None:
        try:
            self.controller.create_room()
        except ChannelError as exc:
            show_error(self, CONNECTION_ERROR_TITLE, str(exc))
        except HostError as exc:
            show_warning(self, VALIDATION_ERROR_TITLE, str(exc))
        self.refresh_state()

    def refresh_state(self) -> None:
        phase = self.controller.phase
        created = phase.room_created
        # A reverted room clears the stored code; mirror that in the input.
        if not created and self.code_input.text() != self.controller.get_candidate_code():
            self.code_input.blockSignals(True)
            self.code_input.setText(self.controller.get_candidate_code())
            self.code_input.blockSignals(False)
        self.code_input.setEnabled(not created)
        self.capacity_spin.setEnabled(not created)
        self.create_button.setEnabled(not created and bool(self.code_input.text().strip()))
        self.status_label.setText(ROOM_STATUS_TEMPLATE.format(status=_STATUS_TEXT[phase]))
