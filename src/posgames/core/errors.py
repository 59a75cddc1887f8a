"""Exceptions raised by the positional games domain."""

from __future__ import annotations


class PositionalGameError(Exception):
    """Base class for every error raised by this package."""


class InvalidTokenValueError(PositionalGameError, ValueError):
    """A token was built from a negative value or a degenerate edge."""


class InvalidDurationError(PositionalGameError, ValueError):
    """A game or time keeper was asked to last less than one minute."""

    def __init__(self, duration: int) -> None:
        super().__init__(f"A game should last at least 1 minute (got {duration})")
        self.duration = duration


class InvalidObjectiveError(PositionalGameError, ValueError):
    """The objective is below the minimum for its kind of game."""


class InvalidProgressionSizeError(InvalidObjectiveError):
    def __init__(self, size: int) -> None:
        super().__init__(
            f"The size of an arithmetic progression should be at least 1 (got {size})"
        )
        self.size = size


class InvalidCliqueSizeError(InvalidObjectiveError):
    def __init__(self, size: int) -> None:
        super().__init__(f"A clique should have a size of at least 2 (got {size})")
        self.size = size


class PlayerNotFoundError(PositionalGameError, LookupError):
    """The player is not registered with the game."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Player not found: {name}")
        self.name = name


class RosterFrozenError(PositionalGameError):
    """Players cannot join or leave once the game has started."""


class TurnWaitInterrupted(PositionalGameError):
    """Raised inside an actor whose turn wait was interrupted from outside."""
