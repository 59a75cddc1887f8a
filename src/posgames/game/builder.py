"""Turns :class:`GameSettings` into a ready-to-start game."""

from __future__ import annotations

import random

from posgames.core.factory import TokenFactory
from posgames.game.engine import PositionalGame
from posgames.game.interfaces import ChooserKind, ITokenChooser
from posgames.game.player import (
    ManualChooser,
    Player,
    RandomChooser,
    SmartChooser,
    TokenReader,
)
from posgames.settings import GameSettings


def make_player(
    name: str,
    kind: ChooserKind,
    *,
    rng: random.Random | None = None,
    read_token: TokenReader | None = None,
) -> Player:
    chooser: ITokenChooser
    if kind is ChooserKind.MANUAL:
        if read_token is None:
            raise ValueError(f"Manual player {name!r} needs a token reader")
        chooser = ManualChooser(read_token)
    elif kind is ChooserKind.SMART:
        chooser = SmartChooser(rng)
    else:
        chooser = RandomChooser(rng)
    return Player(name, chooser)


def build_game(
    settings: GameSettings,
    *,
    read_token: TokenReader | None = None,
) -> PositionalGame:
    """Generate the board, create the game and register the roster.

    One random source seeded from ``settings.seed`` feeds the board, the
    first turn and every random choice, so seeded games replay exactly.
    """
    rng = settings.make_rng()
    board = TokenFactory(rng).board_for(
        settings.kind,
        token_count=settings.token_count,
        max_token_value=settings.max_token_value,
        node_count=settings.node_count,
    )
    game = PositionalGame(
        board,
        settings.kind,
        settings.objective,
        settings.duration,
        rng=rng,
        tick_seconds=settings.tick_seconds,
    )
    game.add_players(
        *(
            make_player(name, kind, rng=rng, read_token=read_token)
            for name, kind in settings.players
        )
    )
    return game
