"""Core domain layer: tokens, board and scoring, with no threads involved.

Quick start::

    from posgames.core import ProgressionScoring, ProgressionToken

    tokens = [ProgressionToken(v) for v in (0, 2, 4, 6)]
    ProgressionScoring().score(tokens)  # 4: blank bonus + 2, 4, 6
"""

from posgames.core.board import Board
from posgames.core.enums import GameKind
from posgames.core.errors import (
    InvalidCliqueSizeError,
    InvalidDurationError,
    InvalidObjectiveError,
    InvalidProgressionSizeError,
    InvalidTokenValueError,
    PlayerNotFoundError,
    PositionalGameError,
    RosterFrozenError,
    TurnWaitInterrupted,
)
from posgames.core.factory import TokenFactory
from posgames.core.scoring import (
    CliqueGraph,
    CliqueScoring,
    IScoringStrategy,
    ProgressionScoring,
    largest_clique_size,
    longest_arithmetic_progression,
    scoring_for,
)
from posgames.core.tokens import WILDCARD_VALUE, EdgeToken, ProgressionToken, Token

__all__ = [
    # Enums
    "GameKind",
    # Errors
    "InvalidCliqueSizeError",
    "InvalidDurationError",
    "InvalidObjectiveError",
    "InvalidProgressionSizeError",
    "InvalidTokenValueError",
    "PlayerNotFoundError",
    "PositionalGameError",
    "RosterFrozenError",
    "TurnWaitInterrupted",
    # Domain objects
    "Board",
    "EdgeToken",
    "ProgressionToken",
    "Token",
    "TokenFactory",
    "WILDCARD_VALUE",
    # Scoring
    "CliqueGraph",
    "CliqueScoring",
    "IScoringStrategy",
    "ProgressionScoring",
    "largest_clique_size",
    "longest_arithmetic_progression",
    "scoring_for",
]
