"""PlayerAgent - the thread that plays on behalf of one player."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QThread

from posgames.core.errors import TurnWaitInterrupted
from posgames.game.interfaces import ClaimOutcome

if TYPE_CHECKING:
    from posgames.game.engine import PositionalGame
    from posgames.game.player import Player

_LOGGER = logging.getLogger(__name__)


class PlayerAgent(QThread):
    """Repeats wait → choose → claim until the game reaches its end.

    Choosing happens outside the game lock (a human may take a while);
    the claim itself is one atomic step inside :meth:`PositionalGame.claim`.
    """

    def __init__(
        self,
        game: PositionalGame,
        player: Player,
        index: int,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._game = game
        self._player = player
        self._index = index
        self._rejected_choices = 0

    @property
    def player(self) -> Player:
        return self._player

    @property
    def index(self) -> int:
        return self._index

    @property
    def rejected_choices(self) -> int:
        """How many chosen tokens were not on the board (manual players only)."""
        return self._rejected_choices

    def run(self) -> None:
        coordinator = self._game.coordinator
        try:
            while coordinator.wait_for_turn(self._index):
                self._play_turn()
        except TurnWaitInterrupted:
            _LOGGER.error(
                "%s was interrupted while waiting for a turn; leaving the game",
                self._player.name,
            )
            self._game.leave(self._player)
        except Exception:
            _LOGGER.exception("%s stopped playing after an error", self._player.name)
            self._game.forfeit(self._player)
        else:
            _LOGGER.debug("%s leaves the finished game", self._player.name)

    def _play_turn(self) -> None:
        _LOGGER.info("%s, choose a token", self._player.name)
        while True:
            token = self._player.choose_token(self._game.board_snapshot())
            outcome = (
                self._game.claim(self._player, token)
                if token is not None
                else ClaimOutcome.NOT_ON_BOARD
            )
            if outcome is not ClaimOutcome.NOT_ON_BOARD:
                return
            self._rejected_choices += 1
            _LOGGER.warning(
                "There is no token %s on the board; %s must choose again",
                token,
                self._player.name,
            )
