"""Glue that keeps the controller on the Qt GUI thread."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from PySide6.QtCore import QObject, Qt, QTimer, Signal


class QtScheduledCall:
    """Handle for one pending single-shot timer."""

    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._release()

    def _release(self) -> None:
        if self._timer is not None:
            self._timer.deleteLater()
            self._timer = None


class QtScheduler:
    """Scheduler backed by single-shot ``QTimer`` objects owned by ``parent``."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtScheduledCall:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = QtScheduledCall(timer)

        def fire() -> None:
            handle._release()
            callback()

        timer.timeout.connect(fire)
        timer.start(delay_ms)
        return handle


class QtDispatcher(QObject):
    """Re-emits inbound socket events on the thread that owns this object."""

    _delivered = Signal(object, object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._delivered.connect(self._run, Qt.QueuedConnection)

    def __call__(self, handler: Callable[[Any], None], data: Any) -> None:
        self._delivered.emit(handler, data)

    def _run(self, handler: Callable[[Any], None], data: Any) -> None:
        handler(data)
