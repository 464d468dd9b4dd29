"""Service holding the latest score snapshot and ranking it for display."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_host.constants.quiz_constants import HOST_DISPLAY_NAME
from quiz_host.core.models import LeaderboardEntry, RankedEntry


class Leaderboard:
    """Keeps the scores exactly as the coordinating service last pushed them."""

    def __init__(self) -> None:
        self._entries: list[LeaderboardEntry] = []
        self._final: bool = False

    def replace(self, entries: Iterable[LeaderboardEntry]) -> None:
        self._entries = list(entries)

    def get_entries(self) -> list[LeaderboardEntry]:
        return list(self._entries)

    def mark_final(self) -> None:
        self._final = True

    def is_final(self) -> bool:
        return self._final

    def renderable_ranking(self, limit: int | None = None) -> list[RankedEntry]:
        """Return players by descending score, host excluded, ties in arrival order."""
        host_name = HOST_DISPLAY_NAME.casefold()
        competitors = [e for e in self._entries if e.display_name.casefold() != host_name]
        # sorted() is stable, so equal scores keep their snapshot order.
        ordered = sorted(competitors, key=lambda e: -e.score)
        if limit is not None:
            ordered = ordered[:limit]

        return [
            RankedEntry(
                rank=position,
                player_id=entry.player_id,
                display_name=entry.display_name,
                score=entry.score,
                emoji=entry.emoji,
            )
            for position, entry in enumerate(ordered, start=1)
        ]

    def clear(self) -> None:
        self._entries = []
        self._final = False
