"""Domain models for the host controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from quiz_host.constants.quiz_constants import DEFAULT_TIME_LIMIT_SECONDS, OPTION_COUNT


class SessionPhase(Enum):
    """Lifecycle of one hosted room, from no room to the final ranking."""

    UNSET = "unset"
    PENDING = "pending"  # create-room sent, nothing heard back yet
    CREATED = "created"
    RUNNING = "running"
    ENDED = "ended"

    @property
    def room_created(self) -> bool:
        return self is not SessionPhase.UNSET

    @property
    def started(self) -> bool:
        return self in (SessionPhase.RUNNING, SessionPhase.ENDED)


def _blank_options() -> list[str]:
    return [""] * OPTION_COUNT


@dataclass(slots=True)
class QuestionDraft:
    """Editable multiple-choice question as typed by the host.

    ``correct`` keeps the raw marker text; it is only checked on submission.
    """

    text: str = ""
    options: list[str] = field(default_factory=_blank_options)
    correct: str = ""
    time_limit: int | None = DEFAULT_TIME_LIMIT_SECONDS


@dataclass(slots=True, frozen=True)
class SubmittedQuestion:
    """Validated question with the correct option resolved to its text."""

    text: str
    options: tuple[str, ...]
    correct: str
    time_limit: int


@dataclass(slots=True, frozen=True)
class Player:
    """A participant waiting in (or playing in) the room."""

    player_id: str
    display_name: str
    emoji: str | None = None


@dataclass(slots=True, frozen=True)
class LeaderboardEntry:
    """Raw score line pushed by the coordinating service."""

    player_id: str
    display_name: str
    score: float
    emoji: str | None = None


@dataclass(slots=True, frozen=True)
class RankedEntry:
    """Display-ready leaderboard row."""

    rank: int
    player_id: str
    display_name: str
    score: float
    emoji: str | None = None
