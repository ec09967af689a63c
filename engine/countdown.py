"""
Countdown Timer - short answer countdown shown after a clue is read.

The countdown is a visual cue only. Running out does not score or forfeit
anything.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Qt, Signal, QTimer

from config import TIMER_SETTINGS

logger = logging.getLogger(__name__)


class CountdownTimer(QObject):
    """
    One-shot countdown of a fixed number of ticks.

    Emits tick with the remaining count (starting with the full count) and
    expired when it reaches zero. Only one countdown is ever live: start()
    cancels a running one first.

    Usage:
        countdown = CountdownTimer()
        countdown.tick.connect(on_tick)
        countdown.start()

        # Call on every path that leaves the active question
        countdown.cancel()
    """

    # Signals
    tick = Signal(int)        # ticks remaining
    expired = Signal()        # reached zero
    cancelled = Signal()      # stopped before reaching zero

    def __init__(self, ticks: int = None, interval_ms: int = None):
        """
        Initialize the countdown.

        Args:
            ticks: Number of ticks (default: 3)
            interval_ms: Milliseconds between ticks (default: 1000)

        Raises:
            ValueError: if ticks or interval_ms is below 1
        """
        super().__init__()

        self._ticks = TIMER_SETTINGS.countdown_ticks if ticks is None else ticks
        self._interval_ms = (
            TIMER_SETTINGS.tick_interval_ms if interval_ms is None else interval_ms
        )
        if self._ticks < 1:
            raise ValueError(f"Countdown needs at least one tick, got {self._ticks}")
        if self._interval_ms < 1:
            raise ValueError(f"Tick interval must be positive, got {self._interval_ms}")
        self._remaining: Optional[int] = None

        self._timer = QTimer(self)
        self._timer.setInterval(self._interval_ms)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_tick)

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def remaining(self) -> Optional[int]:
        """Ticks left, or None when no countdown is showing."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        """Start a fresh countdown, replacing any running one."""
        if self.is_running:
            self.cancel()

        self._remaining = self._ticks
        self._timer.start()
        logger.debug("Countdown started at %d", self._remaining)

        # Emit initial tick
        self.tick.emit(self._remaining)

    def cancel(self) -> None:
        """Stop the countdown and clear it. Safe to call when idle."""
        was_active = self._remaining is not None
        self._timer.stop()
        self._remaining = None
        if was_active:
            logger.debug("Countdown cancelled")
            self.cancelled.emit()

    def _on_tick(self) -> None:
        """Handle one interval elapsing."""
        if self._remaining is None:
            self._timer.stop()
            return

        self._remaining -= 1

        if self._remaining <= 0:
            self._timer.stop()
            self._remaining = None
            self.tick.emit(0)
            self.expired.emit()
            return

        self.tick.emit(self._remaining)
