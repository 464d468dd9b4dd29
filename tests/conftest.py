from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from quiz_host.core.errors import ChannelError
from quiz_host.core.host_controller import HostController


class RecordingChannel:
    """In-memory stand-in for the Socket.IO channel."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, dict[str, Any]]] = []
        self.handlers: dict[str, Callable[[Any], None]] = {}
        self.connected = True
        self.fail_on: set[str] = set()

    def is_connected(self) -> bool:
        return self.connected

    def send(self, event: str, payload: dict[str, Any]) -> None:
        if event in self.fail_on:
            raise ChannelError(f"Could not send '{event}'")
        self.sent.append((event, payload))

    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        self.handlers[event] = handler

    def deliver(self, event: str, data: Any = None) -> None:
        self.handlers[event](data)

    def events(self) -> list[str]:
        return [event for event, _ in self.sent]

    def last(self, event: str) -> dict[str, Any] | None:
        for name, payload in reversed(self.sent):
            if name == event:
                return payload
        return None


class ManualCall:
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when the test advances it."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.calls: list[ManualCall] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualCall:
        call = ManualCall(self.now_ms + delay_ms, callback)
        self.calls.append(call)
        return call

    def pending(self) -> list[ManualCall]:
        return [c for c in self.calls if not c.cancelled and not c.fired]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [c for c in self.pending() if c.due_ms <= target]
            if not due:
                break
            call = min(due, key=lambda c: c.due_ms)
            self.now_ms = call.due_ms
            call.fired = True
            call.callback()
        self.now_ms = target


class Recorder:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.calls: list[tuple[Any, ...]] = []

    def confirm(self, message: str) -> bool:
        self.calls.append((message,))
        return self.answer

    def notify(self, title: str, message: str) -> None:
        self.calls.append((title, message))


@pytest.fixture()
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def confirmations() -> Recorder:
    return Recorder(answer=True)


@pytest.fixture()
def notices() -> Recorder:
    return Recorder()


@pytest.fixture()
def controller(channel, scheduler, confirmations, notices) -> HostController:
    return HostController(
        channel,
        scheduler,
        confirm=confirmations.confirm,
        notify=notices.notify,
        capacity=8,
        question_count=1,
    )


@pytest.fixture()
def fill_question() -> Callable[..., None]:
    def fill(controller: HostController, index: int = 0, *, correct: str = "0", time_limit: int = 15) -> None:
        controller.edit_field(index, "text", "Capital of France?")
        for option_index, value in enumerate(["Paris", "Rome", "Berlin", "Madrid"]):
            controller.edit_option(index, option_index, value)
        controller.edit_field(index, "correct", correct)
        controller.edit_field(index, "time_limit", time_limit)

    return fill
