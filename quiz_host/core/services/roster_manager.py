"""Service for the players waiting in the room."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_host.core.models import Player


class RosterManager:
    """Mirrors the lobby as last reported by the coordinating service."""

    def __init__(self) -> None:
        self._players: list[Player] = []
        self._generation: int = 0

    def replace(self, players: Iterable[Player]) -> None:
        """Swap in the authoritative player list. No merging."""
        self._players = list(players)
        self._generation += 1

    def get_players(self) -> list[Player]:
        return list(self._players)

    def get_player(self, player_id: str) -> Player | None:
        return next((p for p in self._players if p.player_id == player_id), None)

    def get_player_count(self) -> int:
        return len(self._players)

    def get_generation(self) -> int:
        """Counter bumped on every replacement so views can skip redraws."""
        return self._generation

    def clear(self) -> None:
        self.replace([])
