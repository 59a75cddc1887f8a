"""TimeKeeper - countdown thread bounding the length of a game."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from PyQt6.QtCore import QObject, QThread

from posgames.core.errors import InvalidDurationError

_LOGGER = logging.getLogger(__name__)

TickCallback = Callable[[int, int], None]  # minutes passed, minutes remaining
ExpiredCallback = Callable[[], None]


@dataclass
class ClockEvents:
    """Observable callbacks, invoked on the time keeper's own thread."""

    on_tick: list[TickCallback] = field(default_factory=list)
    on_expired: list[ExpiredCallback] = field(default_factory=list)


class TimeKeeper(QThread):
    """Counts down the game duration one tick ("minute") at a time.

    Expiry is an explicit flag set once, after the last tick; the engine
    reads :attr:`is_expired` instead of asking whether the thread is alive.
    :meth:`stop` ends the countdown early without marking it expired.

    Args:
        duration: Number of minutes the game may last (at least 1).
        tick_seconds: Real length of one minute. Tests shrink it.
    """

    def __init__(
        self,
        duration: int,
        tick_seconds: float = 60.0,
        parent: QObject | None = None,
    ) -> None:
        if duration < 1:
            raise InvalidDurationError(duration)
        super().__init__(parent)
        self._duration = duration
        self._tick_seconds = tick_seconds
        self._expired = threading.Event()
        self._stop_requested = threading.Event()
        self.events = ClockEvents()

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def tick_seconds(self) -> float:
        return self._tick_seconds

    @property
    def is_expired(self) -> bool:
        return self._expired.is_set()

    def stop(self) -> None:
        """Ask the countdown to end early. Safe to call from any thread."""
        self._stop_requested.set()

    def expire_now(self) -> None:
        """Mark the time limit as reached (for testing / administrative stop)."""
        if not self._expired.is_set():
            self._expired.set()
            self._emit_expired()

    # ── QThread ──────────────────────────────────────────────────────────

    def run(self) -> None:
        for passed in range(self._duration):
            remaining = self._duration - passed
            _LOGGER.info(
                "%d minutes passed. %d minutes remaining.", passed, remaining
            )
            for cb in self.events.on_tick:
                cb(passed, remaining)
            if self._stop_requested.wait(self._tick_seconds):
                _LOGGER.debug("Time keeper stopped with %d minutes left", remaining)
                return
        if self._stop_requested.is_set() or self._expired.is_set():
            return
        _LOGGER.warning("Limit time exceeded. This game will be over soon")
        self._expired.set()
        self._emit_expired()

    def _emit_expired(self) -> None:
        for cb in self.events.on_expired:
            cb()
