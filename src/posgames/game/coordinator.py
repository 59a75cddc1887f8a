"""TurnCoordinator - one player at a time, enforced with a monitor.

A single :class:`QMutex` guards the shared game state; a
:class:`QWaitCondition` is broadcast whenever the turn changes.  Each
player's actor waits in a guarded loop until the turn is its own or the
game has ended, so spurious wakeups are harmless.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from PyQt6.QtCore import QMutex, QThread, QWaitCondition

from posgames.core.errors import TurnWaitInterrupted

_LOGGER = logging.getLogger(__name__)

NO_TURN = -1
_DEFAULT_POLL_MS = 100


class TurnCoordinator:
    """Owns the game lock, the turn index and the turn-changed condition.

    ``current_turn`` is a roster index while a game runs and ``NO_TURN``
    before it starts and after it ends.  Once :meth:`finish` is called the
    turn stays ``NO_TURN`` for good.

    Methods ending in ``_locked`` expect the caller to hold :meth:`locked`.
    """

    __slots__ = ("_mutex", "_turn_changed", "_current_turn", "_finished", "_poll_ms")

    def __init__(self, poll_interval_ms: int = _DEFAULT_POLL_MS) -> None:
        self._mutex = QMutex()
        self._turn_changed = QWaitCondition()
        self._current_turn = NO_TURN
        self._finished = False
        self._poll_ms = poll_interval_ms

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the game lock for the duration of the ``with`` block."""
        self._mutex.lock()
        try:
            yield
        finally:
            self._mutex.unlock()

    # ── State ────────────────────────────────────────────────────────────

    @property
    def current_turn(self) -> int:
        return self._current_turn

    @property
    def is_finished(self) -> bool:
        return self._finished

    def hand_over_locked(self, index: int) -> None:
        """Give the turn to *index* and wake every waiting actor."""
        if self._finished:
            return
        self._current_turn = index
        self._turn_changed.wakeAll()

    def finish_locked(self) -> None:
        """Enter the terminal state and release every waiting actor."""
        self._finished = True
        self._current_turn = NO_TURN
        self._turn_changed.wakeAll()

    # ── Waiting ──────────────────────────────────────────────────────────

    def wait_for_turn(self, index: int) -> bool:
        """Block until it is *index*'s turn (True) or the game ended (False).

        Raises:
            TurnWaitInterrupted: the calling ``QThread`` was asked to stop
                while waiting.
        """
        thread = QThread.currentThread()
        with self.locked():
            while not self._finished and self._current_turn != index:
                if thread is not None and thread.isInterruptionRequested():
                    raise TurnWaitInterrupted(
                        f"Turn wait of player #{index} was interrupted"
                    )
                self._turn_changed.wait(self._mutex, self._poll_ms)
                _LOGGER.debug(
                    "Player #%d woke up (turn=%d)", index, self._current_turn
                )
            return not self._finished
