"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator

import pytest

from posgames.core.board import Board
from posgames.core.enums import GameKind
from posgames.core.tokens import ProgressionToken
from posgames.game.engine import PositionalGame

_JOIN_MS = 5_000

GameFactory = Callable[..., PositionalGame]


@pytest.fixture(scope="session", autouse=True)
def qcore_app() -> Iterator[object]:
    """Provide a singleton QCoreApplication for the Qt threading primitives."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


def _default_board() -> Board:
    return Board(ProgressionToken(v) for v in range(16))


@pytest.fixture
def make_game(rng: random.Random) -> Iterator[GameFactory]:
    """Build games whose threads are always stopped and joined on teardown."""
    games: list[PositionalGame] = []

    def factory(
        board: Board | None = None,
        kind: GameKind = GameKind.PROGRESSION,
        objective: int = 4,
        duration: int = 1,
        **kwargs: object,
    ) -> PositionalGame:
        kwargs.setdefault("rng", rng)
        kwargs.setdefault("poll_interval_ms", 10)
        game = PositionalGame(
            board if board is not None else _default_board(),
            kind,
            objective,
            duration,
            **kwargs,  # type: ignore[arg-type]
        )
        games.append(game)
        return game

    yield factory

    for game in games:
        game.time_keeper.stop()
        for agent in game.agents:
            agent.requestInterruption()
        assert game.wait(_JOIN_MS), "game threads did not stop"
