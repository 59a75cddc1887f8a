"""Core enumerations for positional games."""

from __future__ import annotations

from enum import StrEnum


class GameKind(StrEnum):
    """Which structure the players race to build."""

    PROGRESSION = "progression"
    CLIQUE = "clique"

    @property
    def minimum_objective(self) -> int:
        """Smallest objective that makes sense for this kind of game."""
        return _MINIMUM_OBJECTIVE[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_MINIMUM_OBJECTIVE: dict[GameKind, int] = {
    GameKind.PROGRESSION: 1,
    GameKind.CLIQUE: 2,
}

_DISPLAY_NAMES: dict[GameKind, str] = {
    GameKind.PROGRESSION: "Arithmetic progression game",
    GameKind.CLIQUE: "Clique game",
}
