"""Component for editing the question batch and sending it."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from quiz_host.constants.quiz_constants import MAX_QUESTION_COUNT, OPTION_COUNT
from quiz_host.constants.ui_constants import (
    BULK_PASTE_BUTTON,
    BULK_PASTE_PLACEHOLDER,
    CONNECTION_ERROR_TITLE,
    CORRECT_PLACEHOLDER,
    OPTION_PLACEHOLDER_TEMPLATE,
    QUESTION_COUNT_LABEL,
    QUESTION_PLACEHOLDER,
    QUESTION_TITLE_TEMPLATE,
    SEND_QUESTIONS_BUTTON,
    TIME_LIMIT_LABEL,
    VALIDATION_ERROR_TITLE,
)
from quiz_host.core.errors import ChannelError, HostError
from quiz_host.core.host_controller import HostController
from quiz_host.core.models import QuestionDraft
from quiz_host.ui.dialog_helpers import show_error, show_warning


class QuestionEditor(QGroupBox):
    """Inputs for one question slot; every edit goes straight to the controller."""

    def __init__(self, controller: HostController, index: int, parent: QWidget | None = None) -> None:
        super().__init__(QUESTION_TITLE_TEMPLATE.format(number=index + 1), parent)
        self.controller = controller
        self.index = index
        self._build_ui()
        self.populate(controller.get_questions()[index])

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.text_input = QLineEdit(self)
        self.text_input.setPlaceholderText(QUESTION_PLACEHOLDER)
        self.text_input.textEdited.connect(
            lambda value: self.controller.edit_field(self.index, "text", value)
        )
        layout.addWidget(self.text_input)

        self.option_inputs: list[QLineEdit] = []
        for option_index in range(OPTION_COUNT):
            option_input = QLineEdit(self)
            option_input.setPlaceholderText(OPTION_PLACEHOLDER_TEMPLATE.format(number=option_index + 1))
            option_input.textEdited.connect(
                lambda value, j=option_index: self.controller.edit_option(self.index, j, value)
            )
            layout.addWidget(option_input)
            self.option_inputs.append(option_input)

        row = QHBoxLayout()
        self.correct_input = QLineEdit(self)
        self.correct_input.setPlaceholderText(CORRECT_PLACEHOLDER)
        self.correct_input.textEdited.connect(
            lambda value: self.controller.edit_field(self.index, "correct", value)
        )
        row.addWidget(self.correct_input, stretch=1)

        row.addWidget(QLabel(TIME_LIMIT_LABEL, self))
        self.time_limit_spin = QSpinBox(self)
        self.time_limit_spin.setRange(1, 600)
        self.time_limit_spin.setSuffix(" s")
        self.time_limit_spin.valueChanged.connect(
            lambda value: self.controller.edit_field(self.index, "time_limit", value)
        )
        row.addWidget(self.time_limit_spin)
        layout.addLayout(row)

        self.paste_input = QPlainTextEdit(self)
        self.paste_input.setPlaceholderText(BULK_PASTE_PLACEHOLDER)
        self.paste_input.setMaximumHeight(90)
        layout.addWidget(self.paste_input)

        self.paste_button = QPushButton(BULK_PASTE_BUTTON, self)
        self.paste_button.clicked.connect(self._handle_paste_click)
        layout.addWidget(self.paste_button)

    def _handle_paste_click(self) -> None:
        try:
            question = self.controller.apply_bulk_paste(self.index, self.paste_input.toPlainText())
        except HostError as exc:
            show_warning(self, VALIDATION_ERROR_TITLE, str(exc))
            return
        self.paste_input.clear()
        self.populate(question)

    def populate(self, question: QuestionDraft) -> None:
        self.text_input.setText(question.text)
        for option_input, value in zip(self.option_inputs, question.options):
            option_input.setText(value)
        self.correct_input.setText(question.correct)
        self.time_limit_spin.blockSignals(True)
        self.time_limit_spin.setValue(question.time_limit or self.time_limit_spin.minimum())
        self.time_limit_spin.blockSignals(False)

    def set_locked(self, locked: bool) -> None:
        for widget in (self.text_input, self.correct_input, self.time_limit_spin,
                       self.paste_input, self.paste_button, *self.option_inputs):
            widget.setEnabled(not locked)


class QuestionPanel(QWidget):
    """UI component for the question count, the editors and the send button."""

    def __init__(self, controller: HostController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.editors: list[QuestionEditor] = []

        self._build_ui()
        self._rebuild_editors()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        count_row = QHBoxLayout()
        count_row.addWidget(QLabel(QUESTION_COUNT_LABEL, self))
        self.count_spin = QSpinBox(self)
        self.count_spin.setRange(1, MAX_QUESTION_COUNT)
        self.count_spin.setValue(self.controller.get_question_count())
        self.count_spin.valueChanged.connect(self._handle_count_changed)
        count_row.addWidget(self.count_spin)
        count_row.addStretch(1)
        layout.addLayout(count_row)

        self.scroll_area = QScrollArea(self)
        self.scroll_area.setWidgetResizable(True)
        layout.addWidget(self.scroll_area, stretch=1)

        self.send_button = QPushButton(SEND_QUESTIONS_BUTTON, self)
        self.send_button.clicked.connect(self._handle_send_click)
        layout.addWidget(self.send_button)

    def _rebuild_editors(self) -> None:
        container = QWidget(self.scroll_area)
        container_layout = QVBoxLayout()
        container.setLayout(container_layout)
        self.editors = [
            QuestionEditor(self.controller, index, container)
            for index in range(self.controller.get_question_count())
        ]
        for editor in self.editors:
            container_layout.addWidget(editor)
        container_layout.addStretch(1)
        self.scroll_area.setWidget(container)

    def _handle_count_changed(self, value: int) -> None:
        try:
            self.controller.set_question_count(value)
        except HostError as exc:
            show_warning(self, VALIDATION_ERROR_TITLE, str(exc))
            return
        self._rebuild_editors()

    def _handle_send_click(self) -> None:
        try:
            self.controller.validate_and_submit()
        except ChannelError as exc:
            show_error(self, CONNECTION_ERROR_TITLE, str(exc))
        except HostError as exc:
            show_warning(self, VALIDATION_ERROR_TITLE, str(exc))
        self.refresh_state()

    def refresh_state(self) -> None:
        phase = self.controller.phase
        locked = not self.controller.can_edit_questions()
        self.count_spin.setEnabled(not locked)
        self.send_button.setEnabled(phase.room_created and not phase.started)
        for editor in self.editors:
            editor.set_locked(locked)
