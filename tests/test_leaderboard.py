from quiz_host.core.models import LeaderboardEntry
from quiz_host.core.services.leaderboard import Leaderboard


def _entry(name, score, player_id=None, emoji=None):
    return LeaderboardEntry(player_id=player_id or name.lower(), display_name=name, score=score, emoji=emoji)


def test_ranking_sorts_by_descending_score():
    board = Leaderboard()
    board.replace([_entry("A", 1), _entry("B", 7), _entry("C", 3)])

    ranking = board.renderable_ranking()

    assert [(r.rank, r.display_name, r.score) for r in ranking] == [
        (1, "B", 7),
        (2, "C", 3),
        (3, "A", 1),
    ]


def test_equal_scores_keep_snapshot_order():
    board = Leaderboard()
    board.replace([_entry("A", 5), _entry("B", 5)])

    assert [r.display_name for r in board.renderable_ranking()] == ["A", "B"]


def test_host_entries_are_excluded_case_insensitively():
    board = Leaderboard()
    board.replace([_entry("Host", 100), _entry("HOST", 90), _entry("hoSt", 80), _entry("Hostess", 1)])

    assert [r.display_name for r in board.renderable_ranking()] == ["Hostess"]


def test_ranking_carries_glyph_and_id():
    board = Leaderboard()
    board.replace([_entry("Ana", 2, player_id="p-1", emoji="🦊")])

    (row,) = board.renderable_ranking()

    assert row.player_id == "p-1"
    assert row.emoji == "🦊"


def test_ranking_is_side_effect_free():
    board = Leaderboard()
    entries = [_entry("A", 1), _entry("B", 2)]
    board.replace(entries)

    first = board.renderable_ranking()
    second = board.renderable_ranking()

    assert first == second
    assert board.get_entries() == entries


def test_snapshot_replaces_previous_entries():
    board = Leaderboard()
    board.replace([_entry("A", 1), _entry("B", 2)])
    board.replace([_entry("C", 3)])

    assert [r.display_name for r in board.renderable_ranking()] == ["C"]


def test_limit_trims_after_ranking():
    board = Leaderboard()
    board.replace([_entry("A", 1), _entry("B", 9), _entry("C", 5)])

    assert [r.display_name for r in board.renderable_ranking(limit=2)] == ["B", "C"]


def test_final_flag_and_clear():
    board = Leaderboard()
    board.replace([_entry("A", 1)])
    board.mark_final()
    assert board.is_final()

    board.clear()
    assert not board.is_final()
    assert board.renderable_ranking() == []
