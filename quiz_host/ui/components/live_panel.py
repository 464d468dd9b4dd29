"""Component showing the countdown and the leaderboard during the quiz."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from quiz_host.constants.ui_constants import (
    COUNTDOWN_IDLE,
    COUNTDOWN_TEMPLATE,
    LEADERBOARD_EMPTY_STATE,
    LEADERBOARD_FINAL_TITLE,
    LEADERBOARD_ROW_TEMPLATE,
    LEADERBOARD_TITLE,
    ROUND_TEMPLATE,
)
from quiz_host.core.host_controller import HostController
from quiz_host.core.models import RankedEntry


def _format_score(score: float) -> str:
    return str(int(score)) if float(score).is_integer() else f"{score:.1f}"


class LivePanel(QWidget):
    """UI component for the running quiz."""

    def __init__(self, controller: HostController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._last_ranking: list[RankedEntry] | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.round_label = QLabel(self)
        layout.addWidget(self.round_label)

        self.countdown_label = QLabel(COUNTDOWN_IDLE, self)
        self.countdown_label.setAlignment(Qt.AlignCenter)
        self.countdown_label.setStyleSheet("font-size: 20pt; font-weight: bold;")
        layout.addWidget(self.countdown_label)

        self.leaderboard_title = QLabel(LEADERBOARD_TITLE, self)
        layout.addWidget(self.leaderboard_title)

        self.leaderboard_list = QListWidget(self)
        layout.addWidget(self.leaderboard_list, stretch=1)

    def update_stats(self) -> None:
        remaining = self.controller.get_time_remaining()
        if remaining is None:
            self.countdown_label.setText(COUNTDOWN_IDLE)
        else:
            self.countdown_label.setText(COUNTDOWN_TEMPLATE.format(seconds=remaining))

        round_index = self.controller.get_round_index()
        if round_index is None:
            self.round_label.setText("")
        else:
            self.round_label.setText(
                ROUND_TEMPLATE.format(number=round_index + 1, total=self.controller.get_total_rounds())
            )

        final = self.controller.is_final()
        self.leaderboard_title.setText(LEADERBOARD_FINAL_TITLE if final else LEADERBOARD_TITLE)
        ranking = self.controller.get_ranking()
        if ranking == self._last_ranking:
            return
        self._last_ranking = ranking
        self.leaderboard_list.clear()
        if not ranking:
            self.leaderboard_list.addItem(LEADERBOARD_EMPTY_STATE)
            return
        for row in ranking:
            self.leaderboard_list.addItem(
                LEADERBOARD_ROW_TEMPLATE.format(
                    rank=row.rank,
                    glyph=f"{row.emoji} " if row.emoji else "",
                    name=row.display_name,
                    score=_format_score(row.score),
                )
            )
