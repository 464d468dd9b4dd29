"""Session controller tying the host's actions to the coordinating service."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from pydantic import ValidationError

from quiz_host.constants.network_constants import (
    EVENT_CREATE_ROOM,
    EVENT_JOIN,
    EVENT_KICK_PLAYER,
    EVENT_LOBBY_UPDATE,
    EVENT_NEW_QUESTION,
    EVENT_ROOM_ERROR,
    EVENT_SCORE_SNAPSHOT,
    EVENT_SEND_QUESTIONS,
    EVENT_SESSION_ENDED,
    EVENT_START_QUIZ,
)
from quiz_host.constants.quiz_constants import (
    DEFAULT_QUESTION_COUNT,
    DEFAULT_ROOM_CAPACITY,
    DEFAULT_TIME_LIMIT_SECONDS,
    HOST_DISPLAY_NAME,
)
from quiz_host.constants.ui_constants import ROOM_ERROR_TITLE
from quiz_host.core.errors import ChannelError, SessionStateError
from quiz_host.core.models import (
    Player,
    QuestionDraft,
    RankedEntry,
    SessionPhase,
    SubmittedQuestion,
)
from quiz_host.core.scheduling import Scheduler
from quiz_host.core.services.countdown_timer import CountdownTimer
from quiz_host.core.services.leaderboard import Leaderboard
from quiz_host.core.services.question_set_builder import QuestionSetBuilder
from quiz_host.core.services.room_manager import RoomManager
from quiz_host.core.services.roster_manager import RosterManager
from quiz_host.net.protocol import (
    CreateRoomPayload,
    JoinPayload,
    KickPlayerPayload,
    LobbyUpdatePayload,
    NewQuestionPayload,
    QuestionBatchPayload,
    QuestionPayload,
    RoomErrorPayload,
    ScoreSnapshotPayload,
    StartQuizPayload,
)
from quiz_host.net.socketio_channel import MessageChannel

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]
NoticeCallback = Callable[[str, str], None]


def _log_notice(title: str, message: str) -> None:
    logger.warning("%s: %s", title, message)


class HostController:
    """Facade over the room, roster, question, countdown and leaderboard services.

    Every method is expected to run on one thread: operator actions directly,
    inbound events through the channel's dispatcher.
    """

    def __init__(
        self,
        channel: MessageChannel,
        scheduler: Scheduler,
        confirm: ConfirmCallback,
        notify: NoticeCallback = _log_notice,
        *,
        capacity: int = DEFAULT_ROOM_CAPACITY,
        question_count: int = DEFAULT_QUESTION_COUNT,
    ) -> None:
        self._channel = channel
        self._confirm = confirm
        self._notify = notify

        # Services
        self._room = RoomManager(capacity)
        self._roster = RosterManager()
        self._questions = QuestionSetBuilder(question_count)
        self._countdown = CountdownTimer(scheduler)
        self._leaderboard = Leaderboard()

        self._submitted: list[SubmittedQuestion] = []
        self._batch_sent = False
        self._round_index: int | None = None

        self._register_inbound_handlers()

    def _register_inbound_handlers(self) -> None:
        self._channel.on(EVENT_LOBBY_UPDATE, self.on_lobby_update)
        self._channel.on(EVENT_ROOM_ERROR, self.on_room_error)
        self._channel.on(EVENT_SCORE_SNAPSHOT, self.on_score_snapshot)
        self._channel.on(EVENT_SESSION_ENDED, self.on_session_ended)
        self._channel.on(EVENT_NEW_QUESTION, self.on_new_question)

    # --- Session state ---

    @property
    def phase(self) -> SessionPhase:
        return self._room.phase

    def get_room_code(self) -> str | None:
        return self._room.get_room_code()

    def get_candidate_code(self) -> str:
        return self._room.get_candidate_code()

    def get_capacity(self) -> int:
        return self._room.get_capacity()

    def get_round_index(self) -> int | None:
        return self._round_index

    def get_total_rounds(self) -> int:
        return len(self._submitted)

    def get_time_remaining(self) -> int | None:
        return self._countdown.remaining

    def is_countdown_running(self) -> bool:
        return self._countdown.is_running()

    # --- Room lifecycle ---

    def set_room_code(self, code: str) -> None:
        self._room.set_room_code(code)

    def set_capacity(self, capacity: int) -> None:
        self._room.set_capacity(capacity)

    def create_room(self, code: str | None = None, capacity: int | None = None) -> str:
        """Ask the service for a room and treat it as created right away."""
        room_code, max_players = self._room.validate_new_room(code, capacity)
        payload = CreateRoomPayload(room_code=room_code, max_players=max_players)
        self._channel.send(EVENT_CREATE_ROOM, payload.to_wire())
        self._room.mark_pending(room_code, max_players)
        return room_code

    def on_room_error(self, data: Any) -> None:
        try:
            payload = RoomErrorPayload.parse(data)
        except ValidationError:
            logger.warning("Malformed room-error payload: %r", data)
            payload = RoomErrorPayload()
        logger.warning("Room rejected by the service: %s", payload.message)
        self._countdown.stop()
        self._room.revert()
        self._roster.clear()
        self._leaderboard.clear()
        self._submitted = []
        self._batch_sent = False
        self._round_index = None
        self._notify(ROOM_ERROR_TITLE, payload.message)

    # --- Roster ---

    def get_players(self) -> list[Player]:
        return self._roster.get_players()

    def get_roster_generation(self) -> int:
        return self._roster.get_generation()

    def can_kick(self) -> bool:
        return self.phase in (SessionPhase.PENDING, SessionPhase.CREATED)

    def kick(self, player_id: str) -> bool:
        """Ask the operator, then request removal. The roster waits for the next lobby update."""
        if not self.can_kick():
            raise SessionStateError("Players can only be removed before the quiz starts.")
        player = self._roster.get_player(player_id)
        label = player.display_name if player is not None else player_id
        if not self._confirm(f"Remove {label} from room {self.get_room_code()}?"):
            logger.info("Kick of %s cancelled by the host", player_id)
            return False
        payload = KickPlayerPayload(room_code=self.get_room_code(), player_id=player_id)
        self._channel.send(EVENT_KICK_PLAYER, payload.to_wire())
        return True

    def on_lobby_update(self, data: Any) -> None:
        if not self.phase.room_created:
            logger.debug("Ignoring lobby update without a room")
            return
        try:
            payload = LobbyUpdatePayload.parse(data)
        except ValidationError as exc:
            logger.warning("Dropping malformed lobby update: %s", exc)
            return
        self._room.confirm()
        self._roster.replace(p.to_player() for p in payload.players)

    # --- Question batch ---

    def get_question_count(self) -> int:
        return self._questions.get_question_count()

    def get_questions(self) -> list[QuestionDraft]:
        return self._questions.get_questions()

    def can_edit_questions(self) -> bool:
        return not (self.phase.started or self._batch_sent)

    def set_question_count(self, count: int) -> None:
        self._require_editable()
        self._questions.set_question_count(count)

    def edit_field(self, index: int, field: str, value: object) -> None:
        self._require_editable()
        self._questions.edit_field(index, field, value)

    def edit_option(self, index: int, option_index: int, value: str) -> None:
        self._require_editable()
        self._questions.edit_option(index, option_index, value)

    def apply_bulk_paste(self, index: int, raw_text: str) -> QuestionDraft:
        self._require_editable()
        return self._questions.apply_bulk_paste(index, raw_text)

    def validate_and_submit(self) -> list[SubmittedQuestion]:
        """Send the validated batch, start the quiz and the first countdown.

        The batch goes out once. If ``start-quiz`` fails after the batch was
        delivered, a later call only resends ``start-quiz``.
        """
        if not self.phase.room_created:
            raise SessionStateError("Please create the room first.")
        if self.phase.started:
            raise SessionStateError("The quiz has already started.")
        if not self._channel.is_connected():
            raise ChannelError("Not connected to the quiz server.")

        room_code = self.get_room_code()
        if not self._batch_sent:
            submitted = self._questions.validate_and_submit()
            batch = QuestionBatchPayload(
                room_code=room_code,
                questions=[QuestionPayload.from_question(q) for q in submitted],
            )
            self._channel.send(EVENT_JOIN, JoinPayload(name=HOST_DISPLAY_NAME, room_code=room_code).to_wire())
            self._channel.send(EVENT_SEND_QUESTIONS, batch.to_wire())
            self._submitted = submitted
            self._batch_sent = True
        else:
            logger.info("Question batch already delivered, resending start only")
        self._channel.send(EVENT_START_QUIZ, StartQuizPayload(room_code=room_code).to_wire())

        self._room.mark_running()
        self._round_index = 0
        self._countdown.start(self._submitted[0].time_limit or DEFAULT_TIME_LIMIT_SECONDS)
        logger.info("Quiz started in room '%s' with %d question(s)", room_code, len(self._submitted))
        return list(self._submitted)

    def on_new_question(self, data: Any) -> None:
        if self.phase is not SessionPhase.RUNNING:
            logger.debug("Ignoring new-question outside a running quiz")
            return
        try:
            payload = NewQuestionPayload.parse(data)
        except ValidationError as exc:
            logger.warning("Dropping malformed new-question: %s", exc)
            return
        if payload.question_index is not None:
            next_index = payload.question_index
        else:
            next_index = (self._round_index or 0) + 1
        self._round_index = next_index

        time_limit = payload.time_limit
        if time_limit is None and next_index < len(self._submitted):
            time_limit = self._submitted[next_index].time_limit
        self._countdown.start(time_limit or DEFAULT_TIME_LIMIT_SECONDS)

    # --- Leaderboard ---

    def get_ranking(self, limit: int | None = None) -> list[RankedEntry]:
        return self._leaderboard.renderable_ranking(limit)

    def is_final(self) -> bool:
        return self._leaderboard.is_final()

    def on_score_snapshot(self, data: Any) -> None:
        try:
            payload = ScoreSnapshotPayload.parse(data)
        except ValidationError as exc:
            logger.warning("Dropping malformed score snapshot: %s", exc)
            return
        self._leaderboard.replace(e.to_entry() for e in payload.entries)

    def on_session_ended(self, data: Any = None) -> None:
        self._countdown.stop()
        if not self._room.mark_ended():
            logger.debug("Ignoring session-ended while %s", self.phase.value)
            return
        self._leaderboard.mark_final()
        self._roster.clear()
        logger.info("Quiz in room '%s' has ended", self.get_room_code())

    def _require_editable(self) -> None:
        if not self.can_edit_questions():
            raise SessionStateError("Questions cannot change once the batch has been sent.")
