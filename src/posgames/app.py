"""Application entry point.

Usage examples::

    # Arithmetic progression game between a random and a smart player
    python -m posgames.app --player alice:random --player bob:smart

    # Clique game on 6 nodes, reproducible, one human at the console
    python -m posgames.app --game clique --nodes 6 --seed 7 --player me:manual --player cpu:random
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from PyQt6.QtCore import QCoreApplication

from posgames.core.enums import GameKind
from posgames.core.errors import InvalidTokenValueError, PositionalGameError
from posgames.core.tokens import EdgeToken, ProgressionToken, Token
from posgames.game.builder import build_game
from posgames.game.engine import GameOutcome
from posgames.game.interfaces import ChooserKind
from posgames.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


def parse_token(kind: GameKind, text: str) -> Token | None:
    """Parse ``"5"`` (progression) or ``"2 7"`` (clique). None if unreadable."""
    parts = text.replace(",", " ").split()
    try:
        numbers = [int(part) for part in parts]
        if kind is GameKind.PROGRESSION and len(numbers) == 1:
            return ProgressionToken(numbers[0])
        if kind is GameKind.CLIQUE and len(numbers) == 2:
            return EdgeToken(numbers[0], numbers[1])
    except (ValueError, InvalidTokenValueError):
        return None
    return None


def console_reader(
    kind: GameKind,
    read_line: Callable[[str], str] = input,
) -> Callable[[tuple[Token, ...]], Token | None]:
    """Token reader for manual players that asks on stdin."""
    hint = "a value" if kind is GameKind.PROGRESSION else "two node labels"

    def read(board: tuple[Token, ...]) -> Token | None:
        del board  # already shown in the turn message
        return parse_token(kind, read_line(f"Choose a token ({hint}): "))

    return read


def _player_spec(text: str) -> tuple[str, ChooserKind]:
    name, _, kind = text.partition(":")
    if not name:
        raise argparse.ArgumentTypeError(f"Missing player name in {text!r}")
    try:
        return name, ChooserKind(kind or ChooserKind.RANDOM)
    except ValueError:
        choices = ", ".join(k.value for k in ChooserKind)
        raise argparse.ArgumentTypeError(
            f"Unknown player kind {kind!r} (choose from {choices})"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    defaults = GameSettings()
    parser = argparse.ArgumentParser(
        prog="posgames", description="Play a positional game."
    )
    parser.add_argument(
        "--game",
        type=GameKind,
        choices=list(GameKind),
        default=defaults.kind,
        help="which game to play",
    )
    parser.add_argument(
        "--player",
        dest="players",
        action="append",
        type=_player_spec,
        metavar="NAME:KIND",
        help="add a player (kind: manual, random or smart); repeatable",
    )
    parser.add_argument("--tokens", type=int, default=defaults.token_count)
    parser.add_argument("--max-value", type=int, default=defaults.max_token_value)
    parser.add_argument("--nodes", type=int, default=defaults.node_count)
    parser.add_argument(
        "--objective",
        type=int,
        default=None,
        help="progression length or clique size to reach",
    )
    parser.add_argument("--duration", type=int, default=defaults.duration)
    parser.add_argument(
        "--tick-seconds", type=float, default=defaults.tick_seconds
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    settings = GameSettings(
        kind=args.game,
        token_count=args.tokens,
        max_token_value=args.max_value,
        node_count=args.nodes,
        duration=args.duration,
        tick_seconds=args.tick_seconds,
        seed=args.seed,
    )
    if args.players:
        settings.players = list(args.players)
    if args.objective is not None:
        if settings.kind is GameKind.PROGRESSION:
            settings.progression_size = args.objective
        else:
            settings.clique_size = args.objective
    return settings


def format_outcome(outcome: GameOutcome) -> str:
    lines = [f"Game over: {outcome.reason.name.lower().replace('_', ' ')}"]
    lines.append(f"Winner: {outcome.winner or 'nobody'}")
    lines.extend(f"  {entry.name}: {entry.score} points" for entry in outcome.ranking)
    return "\n".join(lines)


def run(argv: Sequence[str] | None = None) -> int:
    """Build, play and report one game. Returns a process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(threadName)s %(levelname)s %(message)s"
    )
    settings = settings_from_args(args)

    # Qt threads and wait conditions expect a core application to exist.
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("posgames")

    try:
        game = build_game(settings, read_token=console_reader(settings.kind))
    except (PositionalGameError, ValueError) as exc:
        _LOGGER.error("%s", exc)
        return 2

    game.start()
    if game.outcome is None and not game.agents:
        # start() refused (too few players)
        return 2
    game.wait()

    if game.outcome is None:
        _LOGGER.error("The game stopped without an outcome")
        return 1
    print(format_outcome(game.outcome))
    return 0


def main() -> None:
    """Launch the console application."""
    sys.exit(run())


if __name__ == "__main__":
    main()
