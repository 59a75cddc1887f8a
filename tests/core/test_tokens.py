"""Tests for token value objects."""

import pytest

from posgames.core.errors import InvalidTokenValueError, PositionalGameError
from posgames.core.tokens import EdgeToken, ProgressionToken


class TestProgressionToken:
    def test_value(self) -> None:
        assert ProgressionToken(5).value == 5

    def test_zero_is_wildcard(self) -> None:
        assert ProgressionToken(0).is_wildcard
        assert not ProgressionToken(3).is_wildcard

    def test_negative_value_rejected(self) -> None:
        with pytest.raises(InvalidTokenValueError):
            ProgressionToken(-1)

    def test_error_kind_is_domain_and_value_error(self) -> None:
        with pytest.raises(PositionalGameError):
            ProgressionToken(-5)
        with pytest.raises(ValueError):
            ProgressionToken(-5)

    def test_structural_equality(self) -> None:
        assert ProgressionToken(4) == ProgressionToken(4)
        assert len({ProgressionToken(4), ProgressionToken(4)}) == 1

    def test_ordered_by_value(self) -> None:
        tokens = [ProgressionToken(v) for v in (9, 0, 4)]
        assert [t.value for t in sorted(tokens)] == [0, 4, 9]

    def test_immutable(self) -> None:
        token = ProgressionToken(2)
        with pytest.raises(AttributeError):
            token.value = 3  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(ProgressionToken(7)) == "APToken(7)"


class TestEdgeToken:
    def test_unordered_pair(self) -> None:
        assert EdgeToken(3, 1) == EdgeToken(1, 3)
        assert hash(EdgeToken(3, 1)) == hash(EdgeToken(1, 3))

    def test_normalised_nodes(self) -> None:
        assert EdgeToken(5, 2).nodes == (2, 5)

    def test_lexicographic_order(self) -> None:
        tokens = [EdgeToken(2, 3), EdgeToken(1, 4), EdgeToken(1, 2)]
        assert sorted(tokens) == [EdgeToken(1, 2), EdgeToken(1, 4), EdgeToken(2, 3)]

    def test_self_loop_rejected(self) -> None:
        with pytest.raises(InvalidTokenValueError):
            EdgeToken(2, 2)

    def test_negative_label_rejected(self) -> None:
        with pytest.raises(InvalidTokenValueError):
            EdgeToken(-1, 2)

    def test_str(self) -> None:
        assert str(EdgeToken(1, 2)) == "CGToken(N(1),N(2))"
