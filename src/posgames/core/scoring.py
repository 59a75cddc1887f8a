"""Scoring strategies: map a player's claimed tokens to an objective score.

* Progression game: ``bonus + longest arithmetic progression`` where the
  bonus is 1 if the player holds at least one blank token.
* Clique game: node count of the largest clique in the graph formed by the
  player's edges.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from posgames.core.enums import GameKind
from posgames.core.errors import InvalidTokenValueError
from posgames.core.tokens import EdgeToken, ProgressionToken, Token


class IScoringStrategy(Protocol):
    """Protocol for per-player scoring used by the game engine."""

    def score(self, tokens: Sequence[Token]) -> int: ...


# ── Arithmetic progression ──────────────────────────────────────────────────


def longest_arithmetic_progression(values: Sequence[int]) -> int:
    """Length of the longest arithmetic progression in *values* (O(n²) DP).

    ``lengths[j][d]`` is the length of the longest progression ending at
    index *j* with common difference *d*.  Any one or two numbers trivially
    form a progression.
    """
    n = len(values)
    if n < 3:
        return n

    lengths: list[dict[int, int]] = [{} for _ in range(n)]
    best = 2
    for j in range(1, n):
        ending_here = lengths[j]
        for i in range(j):
            diff = values[j] - values[i]
            length = lengths[i].get(diff, 1) + 1
            if length > ending_here.get(diff, 0):
                ending_here[diff] = length
            if length > best:
                best = length
    return best


class ProgressionScoring:
    """Scores a set of :class:`ProgressionToken`."""

    __slots__ = ()

    def score(self, tokens: Sequence[Token]) -> int:
        values: list[int] = []
        bonus = 0
        for token in tokens:
            if not isinstance(token, ProgressionToken):
                raise InvalidTokenValueError(f"Not a progression token: {token}")
            if token.is_wildcard:
                bonus = 1
            else:
                values.append(token.value)
        # Tokens form a set; scan them in value order.
        values.sort()
        return bonus + longest_arithmetic_progression(values)


# ── Clique ──────────────────────────────────────────────────────────────────


def largest_clique_size(adjacency: Mapping[int, set[int]]) -> int:
    """Size of the maximum clique, via Bron–Kerbosch with pivoting.

    Branches that cannot beat the best clique found so far are pruned.
    An empty graph scores 0.
    """
    best = 0

    def expand(size: int, candidates: set[int], excluded: set[int]) -> None:
        nonlocal best
        if not candidates:
            best = max(best, size)
            return
        if size + len(candidates) <= best:
            return
        pivot = max(
            candidates | excluded,
            key=lambda node: len(adjacency[node] & candidates),
        )
        for node in sorted(candidates - adjacency[pivot]):
            neighbours = adjacency[node]
            expand(size + 1, candidates & neighbours, excluded & neighbours)
            candidates = candidates - {node}
            excluded = excluded | {node}

    expand(0, set(adjacency), set())
    return best


class CliqueGraph:
    """Undirected simple graph grown one claimed edge at a time."""

    __slots__ = ("_adjacency", "_edge_count")

    def __init__(self, edges: Iterable[EdgeToken] = ()) -> None:
        self._adjacency: dict[int, set[int]] = {}
        self._edge_count = 0
        for edge in edges:
            self.add_edge(edge)

    def add_edge(self, edge: EdgeToken) -> None:
        first, second = edge.nodes
        neighbours = self._adjacency.setdefault(first, set())
        if second in neighbours:
            return
        neighbours.add(second)
        self._adjacency.setdefault(second, set()).add(first)
        self._edge_count += 1

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def has_edge(self, first: int, second: int) -> bool:
        return second in self._adjacency.get(first, ())

    def largest_clique(self) -> int:
        if not self._edge_count:
            return 0
        return largest_clique_size(self._adjacency)


class CliqueScoring:
    """Scores a set of :class:`EdgeToken` by its largest clique."""

    __slots__ = ()

    def score(self, tokens: Sequence[Token]) -> int:
        graph = CliqueGraph()
        for token in tokens:
            if not isinstance(token, EdgeToken):
                raise InvalidTokenValueError(f"Not an edge token: {token}")
            graph.add_edge(token)
        return graph.largest_clique()


def scoring_for(kind: GameKind) -> IScoringStrategy:
    if kind is GameKind.PROGRESSION:
        return ProgressionScoring()
    return CliqueScoring()
