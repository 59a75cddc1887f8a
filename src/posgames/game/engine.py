"""PositionalGame, the aggregate root of a running positional game.

Coordinates: Board, Players, ScoringStrategy, TurnCoordinator, TimeKeeper.
Emits events via simple callbacks so the console app / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from PyQt6.QtCore import QDeadlineTimer

from posgames.core.board import Board
from posgames.core.enums import GameKind
from posgames.core.errors import (
    InvalidCliqueSizeError,
    InvalidDurationError,
    InvalidProgressionSizeError,
    InvalidTokenValueError,
    PlayerNotFoundError,
    RosterFrozenError,
)
from posgames.core.scoring import IScoringStrategy, scoring_for
from posgames.core.tokens import EdgeToken, ProgressionToken, Token
from posgames.game.agent import PlayerAgent
from posgames.game.clock import TimeKeeper
from posgames.game.coordinator import NO_TURN, TurnCoordinator
from posgames.game.interfaces import ClaimOutcome, GameEndReason, GamePhase
from posgames.game.player import Player

_LOGGER = logging.getLogger(__name__)
_SEPARATOR = "-" * 63
_MIN_PLAYERS = 2
_TOKEN_TYPES: dict[GameKind, type] = {
    GameKind.PROGRESSION: ProgressionToken,
    GameKind.CLIQUE: EdgeToken,
}


@dataclass(frozen=True, slots=True)
class PlayerScore:
    name: str
    score: int


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """How a finished game ended."""

    reason: GameEndReason
    winner: str | None
    ranking: tuple[PlayerScore, ...]


# ── Event definitions ────────────────────────────────────────────────────────

StartedCallback = Callable[[int], None]  # first turn
ClaimCallback = Callable[[Player, Token], None]
TurnCallback = Callable[[int], None]  # next turn
GameOverCallback = Callable[[GameOutcome], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event.

    Handlers run on the acting thread while the game lock is held: they may
    use the read accessors but must not call ``claim``/``update``/``start``.
    """

    on_started: list[StartedCallback] = field(default_factory=list)
    on_token_claimed: list[ClaimCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class PositionalGame:
    """Players take turns claiming tokens until someone reaches the objective.

    The game ends when the board is empty, the time keeper expires, or the
    player who just moved scores at least the objective, checked in that
    order after every claim.

    Args:
        board: Initial tokens, produced by a ``TokenFactory``.
        kind: Progression or clique game; selects the scoring strategy.
        objective: Progression length (>= 1) or clique size (>= 2).
        duration: Time limit in minutes (>= 1).
        rng: Source of the random first turn.
        tick_seconds: Real length of a minute for the time keeper.
    """

    def __init__(
        self,
        board: Board,
        kind: GameKind,
        objective: int,
        duration: int,
        *,
        rng: random.Random | None = None,
        tick_seconds: float = 60.0,
        scoring: IScoringStrategy | None = None,
        poll_interval_ms: int = 100,
    ) -> None:
        if duration < 1:
            raise InvalidDurationError(duration)
        if objective < kind.minimum_objective:
            if kind is GameKind.PROGRESSION:
                raise InvalidProgressionSizeError(objective)
            raise InvalidCliqueSizeError(objective)
        for token in board:
            if not isinstance(token, _TOKEN_TYPES[kind]):
                raise InvalidTokenValueError(
                    f"{token} cannot be played in the {kind.value} game"
                )

        self._board = board
        self._kind = kind
        self._objective = objective
        self._duration = duration
        self._rng = rng or random.Random()
        self._scoring = scoring or scoring_for(kind)
        self._initial_token_count = len(board)

        self._players: list[Player] = []
        self._player_tokens: list[list[Token]] = []
        self._agents: list[PlayerAgent] = []
        self._departed: set[int] = set()
        self._phase = GamePhase.NOT_STARTED
        self._outcome: GameOutcome | None = None

        self._coordinator = TurnCoordinator(poll_interval_ms)
        # Created with the game, counts only once the game starts.
        self._time_keeper = TimeKeeper(duration, tick_seconds)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def kind(self) -> GameKind:
        return self._kind

    @property
    def objective(self) -> int:
        return self._objective

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.FINISHED

    @property
    def outcome(self) -> GameOutcome | None:
        return self._outcome

    @property
    def current_turn(self) -> int:
        return self._coordinator.current_turn

    @property
    def current_player(self) -> Player | None:
        turn = self._coordinator.current_turn
        return self._players[turn] if turn != NO_TURN else None

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def departed_players(self) -> tuple[Player, ...]:
        """Players whose threads stopped while the game was running."""
        return tuple(self._players[index] for index in sorted(self._departed))

    @property
    def initial_token_count(self) -> int:
        return self._initial_token_count

    @property
    def coordinator(self) -> TurnCoordinator:
        return self._coordinator

    @property
    def time_keeper(self) -> TimeKeeper:
        return self._time_keeper

    @property
    def agents(self) -> tuple[PlayerAgent, ...]:
        return tuple(self._agents)

    def board_snapshot(self) -> tuple[Token, ...]:
        return self._board.snapshot()

    def player_tokens(self, player: Player) -> tuple[Token, ...]:
        return tuple(self._player_tokens[self._index_of(player)])

    def score_of(self, player: Player) -> int:
        return self._scoring.score(self.player_tokens(player))

    def scores(self) -> tuple[PlayerScore, ...]:
        """Every player's score, in roster order, regardless of the objective."""
        return tuple(
            PlayerScore(player.name, self._scoring.score(tuple(tokens)))
            for player, tokens in zip(self._players, self._player_tokens)
        )

    # ── Roster ───────────────────────────────────────────────────────────

    def add_players(self, *players: Player) -> None:
        """Register players; a name already in the roster is ignored."""
        with self._coordinator.locked():
            self._ensure_roster_open()
            for player in players:
                if player not in self._players:
                    self._players.append(player)
                    self._player_tokens.append([])

    def remove_player(self, player: Player) -> None:
        with self._coordinator.locked():
            self._ensure_roster_open()
            index = self._index_of(player)
            del self._players[index]
            del self._player_tokens[index]

    def add_token_to_player(self, player: Player, token: Token) -> None:
        """Append *token* to *player*'s collection. Does not touch the board."""
        self._player_tokens[self._index_of(player)].append(token)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self, *, spawn_actors: bool = True) -> None:
        """Pick a random first player, start the clock and the player threads.

        Pass ``spawn_actors=False`` to drive turns from the calling thread
        through :meth:`claim` instead of one thread per player.
        """
        with self._coordinator.locked():
            if self._phase != GamePhase.NOT_STARTED:
                _LOGGER.warning("The game has already been started")
                return
            if len(self._players) < _MIN_PLAYERS:
                _LOGGER.warning(
                    "The game needs at least two players in order to start"
                )
                return

            self._welcome_message()
            first = self._rng.randrange(len(self._players))
            self._phase = GamePhase.RUNNING
            self._coordinator.hand_over_locked(first)
            for cb in self.events.on_started:
                cb(first)

            if self._board.is_empty:
                self._finish_locked(GameEndReason.BOARD_EXHAUSTED)
                return

            self._player_turn_message(first)
            if spawn_actors:
                self._agents = [
                    PlayerAgent(self, player, index)
                    for index, player in enumerate(self._players)
                ]
                for agent in self._agents:
                    agent.start()
            self._time_keeper.start()

    def claim(self, player: Player, token: Token) -> ClaimOutcome:
        """Move *token* from the board to *player*, then pass the turn on.

        Verify, remove, assign and advance happen under one lock hold.
        """
        with self._coordinator.locked():
            if self._phase != GamePhase.RUNNING or self.current_player != player:
                return ClaimOutcome.NOT_YOUR_TURN
            if not self._board.remove_token(token):
                return ClaimOutcome.NOT_ON_BOARD
            self.add_token_to_player(player, token)
            _LOGGER.info(
                "Player %s selected the following token: %s", player.name, token
            )
            for cb in self.events.on_token_claimed:
                cb(player, token)
            self._update_locked()
        return ClaimOutcome.ACCEPTED

    def update(self) -> None:
        """Finish the game or hand the turn to the next player.

        Does nothing unless the game is running, so calling it again after
        the end leaves the state untouched.
        """
        with self._coordinator.locked():
            self._update_locked()

    def forfeit(self, player: Player) -> None:
        """End the game because *player*'s thread can no longer make moves.

        Only the player holding the turn can stall the others, so the call
        is ignored for anyone else.
        """
        with self._coordinator.locked():
            if self._phase != GamePhase.RUNNING or self.current_player != player:
                return
            _LOGGER.error("%s can no longer play; ending the game", player.name)
            self._finish_locked(GameEndReason.PLAYER_FAILED)

    def leave(self, player: Player) -> None:
        """Take *player* out of the turn order because its thread has stopped.

        The remaining players keep their round-robin order and skip the
        departed seat. Once fewer than two players are left the game ends
        with ``PLAYER_FAILED``.
        """
        with self._coordinator.locked():
            if self._phase != GamePhase.RUNNING:
                return
            index = self._index_of(player)
            if index in self._departed:
                return
            self._departed.add(index)
            _LOGGER.warning("%s left the game", player.name)
            if len(self._players) - len(self._departed) < _MIN_PLAYERS:
                self._finish_locked(GameEndReason.PLAYER_FAILED)
            elif self._coordinator.current_turn == index:
                self._hand_over_locked(self._next_turn(index))

    def game_over(self) -> bool:
        """Whether a termination condition currently holds."""
        with self._coordinator.locked():
            return self.is_game_over or self._end_reason() is not GameEndReason.NONE

    def wait(self, timeout_ms: int | None = None) -> bool:
        """Join the player threads and the time keeper.

        Returns False if any thread was still running when *timeout_ms*
        elapsed.
        """
        deadline = (
            QDeadlineTimer(QDeadlineTimer.ForeverConstant.Forever)
            if timeout_ms is None
            else QDeadlineTimer(timeout_ms)
        )
        threads = [*self._agents, self._time_keeper]
        return all(thread.wait(deadline) for thread in threads)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _update_locked(self) -> None:
        if self._phase != GamePhase.RUNNING:
            return
        reason = self._end_reason()
        if reason is not GameEndReason.NONE:
            self._finish_locked(reason)
            return
        self._hand_over_locked(self._next_turn(self._coordinator.current_turn))

    def _next_turn(self, turn: int) -> int:
        count = len(self._players)
        for step in range(1, count + 1):
            candidate = (turn + step) % count
            if candidate not in self._departed:
                return candidate
        return NO_TURN

    def _hand_over_locked(self, turn: int) -> None:
        self._coordinator.hand_over_locked(turn)
        self._player_turn_message(turn)
        for cb in self.events.on_turn_changed:
            cb(turn)

    def _end_reason(self) -> GameEndReason:
        if self._board.is_empty:
            return GameEndReason.BOARD_EXHAUSTED
        if self._time_keeper.is_expired:
            return GameEndReason.TIME_EXPIRED
        mover = self._coordinator.current_turn
        if mover != NO_TURN:
            score = self._scoring.score(tuple(self._player_tokens[mover]))
            if score >= self._objective:
                return GameEndReason.OBJECTIVE_REACHED
        return GameEndReason.NONE

    def _finish_locked(self, reason: GameEndReason) -> None:
        ranking = self.scores()
        if reason is GameEndReason.OBJECTIVE_REACHED:
            winner: str | None = self._players[self._coordinator.current_turn].name
        else:
            winner = _unique_leader(ranking)

        self._outcome = GameOutcome(reason=reason, winner=winner, ranking=ranking)
        self._phase = GamePhase.FINISHED
        self._coordinator.finish_locked()
        self._time_keeper.stop()

        _LOGGER.info(_SEPARATOR)
        if reason is GameEndReason.OBJECTIVE_REACHED:
            _LOGGER.info("%s won", winner)
        _LOGGER.info("Game over (%s)", reason.name.lower().replace("_", " "))
        _LOGGER.info("Scores:")
        for entry in ranking:
            _LOGGER.info("%s: %d points", entry.name, entry.score)

        for cb in self.events.on_game_over:
            cb(self._outcome)

    def _index_of(self, player: Player) -> int:
        try:
            return self._players.index(player)
        except ValueError:
            raise PlayerNotFoundError(player.name) from None

    def _ensure_roster_open(self) -> None:
        if self._phase != GamePhase.NOT_STARTED:
            raise RosterFrozenError("Players cannot join or leave a started game")

    def _welcome_message(self) -> None:
        if self._kind is GameKind.PROGRESSION:
            goal = f"an arithmetic progression of length {self._objective}"
        else:
            goal = f"a clique of size {self._objective}"
        _LOGGER.info("Welcome to %s", self._kind.display_name)
        _LOGGER.info("Your goal is to be the first to achieve %s", goal)

    def _player_turn_message(self, turn: int) -> None:
        if not _LOGGER.isEnabledFor(logging.INFO):
            return
        _LOGGER.info(_SEPARATOR)
        _LOGGER.info("%s's turn", self._players[turn].name)
        _LOGGER.info("%s", self._board)
        _LOGGER.info(
            "Your tokens: %s",
            ", ".join(str(token) for token in self._player_tokens[turn]) or "none",
        )


def _unique_leader(ranking: tuple[PlayerScore, ...]) -> str | None:
    if not ranking:
        return None
    top = max(entry.score for entry in ranking)
    leaders = [entry.name for entry in ranking if entry.score == top]
    return leaders[0] if len(leaders) == 1 else None
