"""Positional games: players race to claim a progression or a clique."""

__version__ = "0.1.0"
