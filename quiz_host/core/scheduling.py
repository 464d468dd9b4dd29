"""Deferred-call abstraction used by the countdown."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class ScheduledCall(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback once, roughly ``delay_ms`` from now, on the controller thread."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall: ...
