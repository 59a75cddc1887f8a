"""Game management layer: engine, players, turn coordination and clock.

Quick start::

    from posgames.core import GameKind, TokenFactory
    from posgames.game import Player, PositionalGame, RandomChooser

    board = TokenFactory().board_for(GameKind.PROGRESSION)
    game = PositionalGame(board, GameKind.PROGRESSION, objective=4, duration=1)
    game.add_players(Player("Alice", RandomChooser()), Player("Bob", RandomChooser()))
    game.start()
    game.wait()
"""

from posgames.game.agent import PlayerAgent
from posgames.game.clock import ClockEvents, TimeKeeper
from posgames.game.coordinator import NO_TURN, TurnCoordinator
from posgames.game.engine import GameEvents, GameOutcome, PlayerScore, PositionalGame
from posgames.game.interfaces import (
    ChooserKind,
    ClaimOutcome,
    GameEndReason,
    GamePhase,
    ITokenChooser,
)
from posgames.game.player import ManualChooser, Player, RandomChooser, SmartChooser

__all__ = [
    # Interfaces
    "ChooserKind",
    "ClaimOutcome",
    "GameEndReason",
    "GamePhase",
    "ITokenChooser",
    # Concrete
    "ClockEvents",
    "GameEvents",
    "GameOutcome",
    "ManualChooser",
    "NO_TURN",
    "Player",
    "PlayerAgent",
    "PlayerScore",
    "PositionalGame",
    "RandomChooser",
    "SmartChooser",
    "TimeKeeper",
    "TurnCoordinator",
]
