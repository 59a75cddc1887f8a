"""TokenFactory - produces the initial contents of a board."""

from __future__ import annotations

import random
from itertools import combinations

from posgames.core.board import Board
from posgames.core.enums import GameKind
from posgames.core.tokens import EdgeToken, ProgressionToken, Token


class TokenFactory:
    """Generates token sets for both game kinds from an injectable RNG."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def progression_tokens(
        self, count: int, max_value: int
    ) -> set[ProgressionToken]:
        """Draw *count* distinct values from a random permutation of ``[0, max_value]``."""
        if max_value < 0:
            raise ValueError(f"Maximum token value must be >= 0 (got {max_value})")
        if not 0 <= count <= max_value + 1:
            raise ValueError(
                f"Cannot draw {count} distinct tokens from [0, {max_value}]"
            )
        permutation = list(range(max_value + 1))
        self._rng.shuffle(permutation)
        return {ProgressionToken(value) for value in permutation[:count]}

    @staticmethod
    def clique_tokens(node_count: int) -> set[EdgeToken]:
        """Every edge of the complete graph over nodes ``1..node_count``."""
        if node_count < 2:
            raise ValueError(f"A clique game needs at least 2 nodes (got {node_count})")
        return {
            EdgeToken(first, second)
            for first, second in combinations(range(1, node_count + 1), 2)
        }

    def board_for(
        self,
        kind: GameKind,
        *,
        token_count: int = 10,
        max_token_value: int = 15,
        node_count: int = 8,
    ) -> Board:
        tokens: set[Token]
        if kind is GameKind.PROGRESSION:
            tokens = set(self.progression_tokens(token_count, max_token_value))
        else:
            tokens = set(self.clique_tokens(node_count))
        return Board(tokens)
