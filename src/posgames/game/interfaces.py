"""Abstract interfaces and state enums for the game layer.

The engine depends on :class:`ITokenChooser`, not on concrete strategies,
so players can be scripted, random, or driven by a human at a console.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from posgames.core.tokens import Token


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a positional game."""

    NOT_STARTED = auto()
    RUNNING = auto()
    FINISHED = auto()  # absorbing


class GameEndReason(IntEnum):
    """Why a game finished, in the order the causes are checked."""

    NONE = 0
    BOARD_EXHAUSTED = auto()
    TIME_EXPIRED = auto()
    OBJECTIVE_REACHED = auto()
    PLAYER_FAILED = auto()  # a player thread crashed on its own turn


class ClaimOutcome(IntEnum):
    """Result of trying to claim a token."""

    ACCEPTED = auto()
    NOT_ON_BOARD = auto()
    NOT_YOUR_TURN = auto()


class ChooserKind(StrEnum):
    """Token-choice strategies a player can be configured with."""

    MANUAL = "manual"
    RANDOM = "random"
    SMART = "smart"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITokenChooser(ABC):
    """Strategy a player uses to pick the next token."""

    @property
    @abstractmethod
    def is_interactive(self) -> bool:
        """True when the choice comes from outside and may be off the board."""

    @abstractmethod
    def choose_token(self, board: tuple[Token, ...]) -> Token | None:
        """Pick a token given a sorted snapshot of the board.

        Non-interactive choosers must only return members of *board*.
        Interactive ones may return anything (``None`` for unreadable
        input); the engine re-prompts until a board token is produced.
        """
