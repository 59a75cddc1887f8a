"""Board - the pool of tokens nobody has claimed yet."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from posgames.core.tokens import Token

_TOKENS_PER_ROW = 4
_RULE = "**************"


class Board:
    """Mutable set of unclaimed tokens.

    Duplicates collapse by token equality.  Iteration is in token order so
    that choosers seeded with the same random source see the same sequence.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: set[Token] = set(tokens)

    # -- Mutation -----------------------------------------------------------

    def add_tokens(self, *tokens: Token) -> None:
        """Bulk insert used while setting up a game."""
        self._tokens.update(tokens)

    def remove_token(self, token: Token) -> bool:
        """Remove *token* if present. Returns True when something was removed."""
        try:
            self._tokens.remove(token)
        except KeyError:
            return False
        return True

    # -- Queries ------------------------------------------------------------

    def snapshot(self) -> tuple[Token, ...]:
        """Sorted copy of the tokens currently on the board."""
        return tuple(sorted(self._tokens))

    @property
    def is_empty(self) -> bool:
        return not self._tokens

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"Board({len(self._tokens)} tokens)"

    def __str__(self) -> str:
        lines = [_RULE, "Board:"]
        tokens = self.snapshot()
        for start in range(0, len(tokens), _TOKENS_PER_ROW):
            row = tokens[start : start + _TOKENS_PER_ROW]
            lines.append(
                "   ".join(
                    f"{start + offset}. {token}" for offset, token in enumerate(row)
                )
            )
        lines.append(_RULE)
        return "\n".join(lines)
