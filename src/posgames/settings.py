"""User-configurable game settings."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from posgames.core.enums import GameKind
from posgames.game.interfaces import ChooserKind


def _default_roster() -> list[tuple[str, ChooserKind]]:
    return [("john", ChooserKind.RANDOM), ("ioan", ChooserKind.SMART)]


@dataclass
class GameSettings:
    """All knobs needed to set up and run one game."""

    kind: GameKind = GameKind.PROGRESSION

    # Board
    token_count: int = 10
    max_token_value: int = 15
    node_count: int = 8

    # Objective
    progression_size: int = 4
    clique_size: int = 3

    # Time
    duration: int = 1  # minutes
    tick_seconds: float = 60.0  # real seconds per minute

    # None = a fresh, unseeded game every time
    seed: int | None = None

    players: list[tuple[str, ChooserKind]] = field(default_factory=_default_roster)

    @property
    def objective(self) -> int:
        if self.kind is GameKind.PROGRESSION:
            return self.progression_size
        return self.clique_size

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
