"""Per-question countdown driven by a self-rescheduling one-shot delay."""

from __future__ import annotations

import logging

from quiz_host.constants.quiz_constants import COUNTDOWN_TICK_INTERVAL_MS
from quiz_host.core.scheduling import ScheduledCall, Scheduler

logger = logging.getLogger(__name__)


class CountdownTimer:
    """Seconds remaining for the current question, or ``None`` when idle.

    At most one tick is pending at any time. Reaching zero only stops the
    rescheduling; the timer stays at 0 until ``stop`` or ``start`` is called.
    """

    def __init__(self, scheduler: Scheduler, interval_ms: int = COUNTDOWN_TICK_INTERVAL_MS) -> None:
        self._scheduler = scheduler
        self._interval_ms = interval_ms
        self._remaining: int | None = None
        self._pending: ScheduledCall | None = None

    @property
    def remaining(self) -> int | None:
        return self._remaining

    def is_running(self) -> bool:
        return self._remaining is not None

    def has_pending_tick(self) -> bool:
        return self._pending is not None

    def start(self, seconds: int) -> None:
        """Begin a fresh countdown, discarding any tick still in flight."""
        if seconds < 0:
            raise ValueError("Countdown cannot start below zero.")
        self._cancel_pending()
        self._remaining = seconds
        logger.debug("Countdown started at %ds", seconds)
        self._schedule_next()

    def stop(self) -> None:
        self._cancel_pending()
        if self._remaining is not None:
            logger.debug("Countdown stopped at %ds", self._remaining)
        self._remaining = None

    def _schedule_next(self) -> None:
        if self._remaining is None or self._remaining <= 0:
            return
        self._pending = self._scheduler.call_later(self._interval_ms, self._tick)

    def _tick(self) -> None:
        self._pending = None
        if self._remaining is None or self._remaining <= 0:
            return
        self._remaining -= 1
        self._schedule_next()

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
