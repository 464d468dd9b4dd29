import pytest

from quiz_host.core.errors import RoomValidationError, SessionStateError
from quiz_host.core.models import Player, SessionPhase
from quiz_host.core.services.room_manager import RoomManager
from quiz_host.core.services.roster_manager import RosterManager


def test_new_room_is_unset():
    room = RoomManager()
    assert room.phase is SessionPhase.UNSET
    assert not room.is_created()
    assert room.get_room_code() is None


def test_validate_new_room_trims_code():
    room = RoomManager(capacity=4)
    room.set_room_code("  ABC  ")
    assert room.validate_new_room() == ("ABC", 4)


@pytest.mark.parametrize("code", ["", "   ", "\t\n"])
def test_blank_code_is_rejected(code):
    room = RoomManager()
    with pytest.raises(RoomValidationError):
        room.validate_new_room(code)


@pytest.mark.parametrize("capacity", [0, -3, True, "5"])
def test_bad_capacity_is_rejected(capacity):
    room = RoomManager()
    with pytest.raises(RoomValidationError):
        room.set_capacity(capacity)


def test_capacity_and_code_frozen_once_created():
    room = RoomManager()
    room.mark_pending("ABC", 5)

    with pytest.raises(SessionStateError):
        room.set_capacity(6)
    with pytest.raises(SessionStateError):
        room.set_room_code("XYZ")
    with pytest.raises(SessionStateError):
        room.validate_new_room("XYZ", 5)
    assert room.get_capacity() == 5


def test_phase_walk():
    room = RoomManager()
    room.mark_pending("ABC", 5)
    assert room.phase is SessionPhase.PENDING
    assert room.confirm()
    assert not room.confirm()
    assert room.phase is SessionPhase.CREATED
    room.mark_running()
    assert room.phase is SessionPhase.RUNNING
    assert room.mark_ended()
    assert not room.mark_ended()
    assert room.phase is SessionPhase.ENDED


def test_running_requires_a_room():
    with pytest.raises(SessionStateError):
        RoomManager().mark_running()


def test_end_requires_running():
    room = RoomManager()
    room.mark_pending("ABC", 5)
    assert not room.mark_ended()
    assert room.phase is SessionPhase.PENDING


def test_revert_clears_code():
    room = RoomManager()
    room.set_room_code("ABC")
    room.mark_pending("ABC", 5)
    room.mark_running()

    room.revert()

    assert room.phase is SessionPhase.UNSET
    assert room.get_candidate_code() == ""
    assert room.get_room_code() is None
    room.set_capacity(9)


def test_roster_is_replaced_wholesale():
    roster = RosterManager()
    roster.replace([Player("1", "Ana"), Player("2", "Bo")])
    roster.replace([Player("3", "Cy")])

    assert [p.display_name for p in roster.get_players()] == ["Cy"]
    assert roster.get_player("1") is None
    assert roster.get_player_count() == 1


def test_roster_generation_moves_on_every_replace():
    roster = RosterManager()
    start = roster.get_generation()
    roster.replace([])
    roster.clear()
    assert roster.get_generation() == start + 2
