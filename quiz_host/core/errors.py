"""Exceptions raised by the host controller."""

from __future__ import annotations


class HostError(Exception):
    """Base class for every error the host controller raises."""


class HostValidationError(HostError):
    """Operator input was rejected before anything was sent."""


class RoomValidationError(HostValidationError):
    """Room code or capacity is not acceptable."""


class QuestionValidationError(HostValidationError):
    """A question in the batch is incomplete or malformed."""

    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"Question {position}: {reason}")
        self.position = position
        self.reason = reason


class BulkPasteFormatError(HostValidationError):
    """Pasted text does not describe a full question."""


class SessionStateError(HostError):
    """The operation is not allowed in the current session phase."""


class ChannelError(HostError):
    """The connection to the coordinating service failed."""
