"""Token value objects.

Two kinds of tokens exist, one per game kind:

* :class:`ProgressionToken` holds a number in ``[0, m]``; ``0`` is a blank
  (wildcard) token.
* :class:`EdgeToken` holds an unordered pair of node labels, i.e. one edge of
  the complete graph the clique game is played on.

Both are immutable, hashable and totally ordered.  Ordering exists only for
deterministic iteration and display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from posgames.core.errors import InvalidTokenValueError

WILDCARD_VALUE = 0


@dataclass(frozen=True, slots=True, order=True)
class ProgressionToken:
    """A numbered token for the arithmetic progression game."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise InvalidTokenValueError(
                f"Invalid token value {self.value}. Should be at least 0"
            )

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD_VALUE

    def __str__(self) -> str:
        return f"APToken({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class EdgeToken:
    """An edge between two distinct nodes, stored with ``first < second``."""

    first: int
    second: int

    def __post_init__(self) -> None:
        if self.first < 0 or self.second < 0:
            raise InvalidTokenValueError(
                f"Invalid node label in edge ({self.first}, {self.second}). "
                "Should be at least 0"
            )
        if self.first == self.second:
            raise InvalidTokenValueError(
                f"An edge needs two distinct nodes (got {self.first} twice)"
            )
        # Unordered pair: normalise so equality and ordering are structural.
        if self.first > self.second:
            first, second = self.second, self.first
            object.__setattr__(self, "first", first)
            object.__setattr__(self, "second", second)

    @property
    def nodes(self) -> tuple[int, int]:
        return (self.first, self.second)

    def __str__(self) -> str:
        return f"CGToken(N({self.first}),N({self.second}))"


Token: TypeAlias = ProgressionToken | EdgeToken
