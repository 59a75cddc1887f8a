"""Tests for the scoring strategies."""

import random
from itertools import combinations

import pytest

from posgames.core.enums import GameKind
from posgames.core.errors import InvalidTokenValueError
from posgames.core.scoring import (
    CliqueGraph,
    CliqueScoring,
    ProgressionScoring,
    largest_clique_size,
    longest_arithmetic_progression,
    scoring_for,
)
from posgames.core.tokens import EdgeToken, ProgressionToken


def _ap(*values: int) -> int:
    return ProgressionScoring().score([ProgressionToken(v) for v in values])


def _cliques(*edges: tuple[int, int]) -> int:
    return CliqueScoring().score([EdgeToken(a, b) for a, b in edges])


class TestLongestArithmeticProgression:
    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ([], 0),
            ([5], 1),
            ([5, 9], 2),
            ([1, 3, 5, 7], 4),
            ([1, 2, 4, 8], 2),
            ([1, 7, 10, 13, 14, 19], 4),
            ([3, 6, 9, 12, 15, 18], 6),
        ],
    )
    def test_known_inputs(self, values: list[int], expected: int) -> None:
        assert longest_arithmetic_progression(values) == expected

    def test_negative_differences(self) -> None:
        assert longest_arithmetic_progression([9, 7, 5, 3]) == 4

    def test_zero_difference(self) -> None:
        assert longest_arithmetic_progression([4, 4, 4]) == 3

    def test_progression_skipping_elements(self) -> None:
        assert longest_arithmetic_progression([1, 2, 3, 5, 7, 9]) == 5


class TestProgressionScoring:
    def test_plain_progression(self) -> None:
        assert _ap(1, 3, 5, 7) == 4

    def test_no_progression_beyond_pairs(self) -> None:
        assert _ap(1, 2, 4, 8) == 2

    def test_empty(self) -> None:
        assert _ap() == 0

    def test_single(self) -> None:
        assert _ap(5) == 1

    def test_wildcard_bonus(self) -> None:
        assert _ap(0, 2, 4, 6) == 4

    def test_wildcard_alone(self) -> None:
        assert _ap(0) == 1

    def test_bonus_applies_once(self) -> None:
        scoring = ProgressionScoring()
        tokens = [ProgressionToken(0), ProgressionToken(0), ProgressionToken(2)]
        assert scoring.score(tokens) == 2

    def test_claim_order_does_not_matter(self) -> None:
        assert _ap(7, 1, 5, 3) == 4


class TestLargestCliqueSize:
    def test_empty_graph(self) -> None:
        assert largest_clique_size({}) == 0

    def test_triangle(self) -> None:
        assert _cliques((1, 2), (2, 3), (1, 3)) == 3

    def test_disjoint_edges_do_not_merge(self) -> None:
        assert _cliques((1, 2), (3, 4)) == 2

    def test_single_edge(self) -> None:
        assert _cliques((4, 7)) == 2

    def test_no_edges_scores_zero(self) -> None:
        assert _cliques() == 0

    def test_square_without_diagonals(self) -> None:
        assert _cliques((1, 2), (2, 3), (3, 4), (1, 4)) == 2

    def test_complete_graph(self) -> None:
        edges = list(combinations(range(1, 7), 2))
        assert _cliques(*edges) == 6

    def test_k4_plus_tail(self) -> None:
        edges = [*combinations(range(1, 5), 2), (4, 5), (5, 6), (4, 6)]
        assert _cliques(*edges) == 4

    def test_matches_brute_force_on_random_graphs(self) -> None:
        rng = random.Random(99)
        nodes = range(1, 9)
        for _ in range(25):
            edges = [e for e in combinations(nodes, 2) if rng.random() < 0.5]
            graph = CliqueGraph(EdgeToken(a, b) for a, b in edges)
            edge_set = set(edges)
            expected = 0
            for size in range(2, 9):
                for group in combinations(nodes, size):
                    if all(pair in edge_set for pair in combinations(group, 2)):
                        expected = size
                        break
            assert graph.largest_clique() == expected


class TestCliqueGraph:
    def test_incremental_growth(self) -> None:
        graph = CliqueGraph()
        graph.add_edge(EdgeToken(1, 2))
        assert graph.largest_clique() == 2
        graph.add_edge(EdgeToken(2, 3))
        assert graph.largest_clique() == 2
        graph.add_edge(EdgeToken(3, 1))
        assert graph.largest_clique() == 3

    def test_counts(self) -> None:
        graph = CliqueGraph([EdgeToken(1, 2), EdgeToken(2, 1), EdgeToken(2, 3)])
        assert graph.node_count == 3
        assert graph.edge_count == 2
        assert graph.has_edge(2, 1)
        assert not graph.has_edge(1, 3)


class TestScoringFor:
    def test_foreign_tokens_rejected(self) -> None:
        with pytest.raises(InvalidTokenValueError):
            ProgressionScoring().score([EdgeToken(1, 2)])
        with pytest.raises(InvalidTokenValueError):
            CliqueScoring().score([ProgressionToken(1)])

    def test_progression(self) -> None:
        assert isinstance(scoring_for(GameKind.PROGRESSION), ProgressionScoring)

    def test_clique(self) -> None:
        assert isinstance(scoring_for(GameKind.CLIQUE), CliqueScoring)
