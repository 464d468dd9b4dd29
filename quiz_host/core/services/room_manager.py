"""Service owning the room identity and the session phase."""

from __future__ import annotations

import logging

from quiz_host.constants.quiz_constants import DEFAULT_ROOM_CAPACITY
from quiz_host.core.errors import RoomValidationError, SessionStateError
from quiz_host.core.models import SessionPhase

logger = logging.getLogger(__name__)


class RoomManager:
    """Tracks the room code, its capacity and where the session stands.

    Creation is optimistic: once ``create-room`` is sent the room counts as
    created (``PENDING``) and only an explicit remote error reverts it.
    """

    def __init__(self, capacity: int = DEFAULT_ROOM_CAPACITY) -> None:
        self._phase: SessionPhase = SessionPhase.UNSET
        self._candidate_code: str = ""
        self._room_code: str | None = None
        self._capacity: int = self._validate_capacity(capacity)

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    def is_created(self) -> bool:
        return self._phase.room_created

    def get_candidate_code(self) -> str:
        return self._candidate_code

    def get_room_code(self) -> str | None:
        return self._room_code

    def get_capacity(self) -> int:
        return self._capacity

    def set_room_code(self, code: str) -> None:
        if self.is_created():
            raise SessionStateError("The room code cannot change once the room is created.")
        self._candidate_code = code

    def set_capacity(self, capacity: int) -> None:
        if self.is_created():
            raise SessionStateError("Capacity cannot change once the room is created.")
        self._capacity = self._validate_capacity(capacity)

    def validate_new_room(self, code: str | None = None, capacity: int | None = None) -> tuple[str, int]:
        """Check a create request and return the trimmed code and capacity."""
        if self.is_created():
            raise SessionStateError("The room has already been created.")
        raw_code = self._candidate_code if code is None else code
        cleaned_code = (raw_code or "").strip()
        if not cleaned_code:
            raise RoomValidationError("Enter Room Code")
        checked_capacity = self._capacity if capacity is None else self._validate_capacity(capacity)
        return cleaned_code, checked_capacity

    def mark_pending(self, code: str, capacity: int) -> None:
        self._require(SessionPhase.UNSET)
        self._candidate_code = code
        self._room_code = code
        self._capacity = capacity
        self._phase = SessionPhase.PENDING
        logger.info("Room '%s' requested for %d player(s)", code, capacity)

    def confirm(self) -> bool:
        """Promote a pending room once the service shows it exists."""
        if self._phase is not SessionPhase.PENDING:
            return False
        self._phase = SessionPhase.CREATED
        logger.info("Room '%s' confirmed by the service", self._room_code)
        return True

    def mark_running(self) -> None:
        self._require(SessionPhase.PENDING, SessionPhase.CREATED)
        self._phase = SessionPhase.RUNNING

    def mark_ended(self) -> bool:
        """Record the terminal state; only the first end signal counts."""
        if self._phase is not SessionPhase.RUNNING:
            return False
        self._phase = SessionPhase.ENDED
        return True

    def revert(self) -> None:
        """Forget the room entirely so the operator can try another code."""
        logger.info("Reverting room '%s' (was %s)", self._room_code, self._phase.value)
        self._phase = SessionPhase.UNSET
        self._candidate_code = ""
        self._room_code = None

    def _require(self, *allowed: SessionPhase) -> None:
        if self._phase not in allowed:
            raise SessionStateError(
                f"Not allowed while the session is {self._phase.value}."
            )

    @staticmethod
    def _validate_capacity(capacity: int) -> int:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise RoomValidationError("Capacity must be a whole number of players.")
        if capacity < 1:
            raise RoomValidationError("Capacity must be at least 1 player.")
        return capacity
