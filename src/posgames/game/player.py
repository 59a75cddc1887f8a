"""Players and their token-choice strategies."""

from __future__ import annotations

import random
from collections.abc import Callable

from posgames.core.tokens import WILDCARD_VALUE, ProgressionToken, Token
from posgames.game.interfaces import ITokenChooser

TokenReader = Callable[[tuple[Token, ...]], Token | None]

_WILDCARD = ProgressionToken(WILDCARD_VALUE)


class RandomChooser(ITokenChooser):
    """Picks uniformly among the tokens currently on the board."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    @property
    def is_interactive(self) -> bool:
        return False

    def choose_token(self, board: tuple[Token, ...]) -> Token:
        return self._rng.choice(board)


class SmartChooser(RandomChooser):
    """Grabs a blank token whenever one is left, otherwise plays randomly."""

    __slots__ = ()

    def choose_token(self, board: tuple[Token, ...]) -> Token:
        if _WILDCARD in board:
            return _WILDCARD
        return super().choose_token(board)


class ManualChooser(ITokenChooser):
    """A human participant whose tokens come from an input collaborator.

    Args:
        read_token: ``(board) -> Token | None``, asked once per attempt.
            The returned token is not trusted; the engine validates it.
    """

    __slots__ = ("_read_token",)

    def __init__(self, read_token: TokenReader) -> None:
        self._read_token = read_token

    @property
    def is_interactive(self) -> bool:
        return True

    def choose_token(self, board: tuple[Token, ...]) -> Token | None:
        return self._read_token(board)


class Player:
    """A named participant. Identity is the name alone."""

    __slots__ = ("_name", "_chooser")

    def __init__(self, name: str, chooser: ITokenChooser) -> None:
        self._name = name
        self._chooser = chooser

    @property
    def name(self) -> str:
        return self._name

    @property
    def chooser(self) -> ITokenChooser:
        return self._chooser

    @property
    def is_interactive(self) -> bool:
        return self._chooser.is_interactive

    def choose_token(self, board: tuple[Token, ...]) -> Token | None:
        return self._chooser.choose_token(board)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Player({self._name!r}, {type(self._chooser).__name__})"
