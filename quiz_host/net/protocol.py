"""Payload schemas for messages exchanged with the coordinating service.

Field names on the wire are camelCase; the models expose snake_case
attributes and serialize with ``by_alias=True``.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from quiz_host.core.models import LeaderboardEntry, Player, SubmittedQuestion

logger = logging.getLogger(__name__)


class WireModel(BaseModel):
    """Base schema: accepts either field names or aliases, ignores extras."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Outbound ---


class CreateRoomPayload(WireModel):
    room_code: str = Field(alias="roomCode", min_length=1)
    max_players: int = Field(alias="maxPlayers", ge=1)


class JoinPayload(WireModel):
    name: str
    room_code: str = Field(alias="roomCode")


class QuestionPayload(WireModel):
    text: str
    options: list[str] = Field(min_length=4, max_length=4)
    correct: str
    time_limit: int = Field(alias="timeLimit", gt=0)

    @classmethod
    def from_question(cls, question: SubmittedQuestion) -> QuestionPayload:
        return cls(
            text=question.text,
            options=list(question.options),
            correct=question.correct,
            time_limit=question.time_limit,
        )


class QuestionBatchPayload(WireModel):
    room_code: str = Field(alias="roomCode")
    questions: list[QuestionPayload]


class StartQuizPayload(WireModel):
    room_code: str = Field(alias="roomCode")


class KickPlayerPayload(WireModel):
    room_code: str = Field(alias="roomCode")
    player_id: str = Field(alias="playerId")


# --- Inbound ---


class PlayerPayload(WireModel):
    id: str
    name: str = ""
    emoji: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def to_player(self) -> Player:
        return Player(player_id=self.id, display_name=self.name, emoji=self.emoji)


class LobbyUpdatePayload(WireModel):
    players: list[PlayerPayload]

    @field_validator("players", mode="before")
    @classmethod
    def _skip_bad_players(cls, value: Any) -> Any:
        return _valid_entries(PlayerPayload, value, "player")

    @classmethod
    def parse(cls, data: Any) -> LobbyUpdatePayload:
        # Some servers send the bare list instead of {"players": [...]}.
        if isinstance(data, list):
            data = {"players": data}
        return cls.model_validate(data)


class RoomErrorPayload(WireModel):
    message: str = "Unknown room error"

    @classmethod
    def parse(cls, data: Any) -> RoomErrorPayload:
        if isinstance(data, str):
            data = {"message": data}
        return cls.model_validate(data or {})


class ScoreEntryPayload(PlayerPayload):
    score: float = 0

    def to_entry(self) -> LeaderboardEntry:
        return LeaderboardEntry(
            player_id=self.id,
            display_name=self.name,
            score=self.score,
            emoji=self.emoji,
        )


class ScoreSnapshotPayload(WireModel):
    entries: list[ScoreEntryPayload]

    @field_validator("entries", mode="before")
    @classmethod
    def _skip_bad_entries(cls, value: Any) -> Any:
        return _valid_entries(ScoreEntryPayload, value, "score entry")

    @classmethod
    def parse(cls, data: Any) -> ScoreSnapshotPayload:
        if isinstance(data, dict):
            data = data.get("entries", data.get("scores", []))
        return cls.model_validate({"entries": data or []})


class NewQuestionPayload(WireModel):
    question_index: int | None = Field(default=None, alias="questionIndex", ge=0)
    time_limit: int | None = Field(default=None, alias="timeLimit", gt=0)

    @classmethod
    def parse(cls, data: Any) -> NewQuestionPayload:
        return cls.model_validate(data or {})


def _valid_entries(model: type[WireModel], items: Any, label: str) -> Any:
    """Validate list items one by one, dropping the ones that do not fit."""
    if not isinstance(items, list):
        return items
    valid = []
    for item in items:
        try:
            valid.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning("Skipping malformed %s %r: %s", label, item, exc.errors()[0]["msg"])
    return valid
