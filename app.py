"""
QuizBoard Application Controller

Top-level controller that wires together all application components.
"""

import logging
import random
from typing import Optional

from PySide6.QtCore import QObject

from config import TEAM_SETTINGS
from services.event_bus import EventBus
from services.narration import Narrator
from engine.controller import SelectionController
from engine.special_selector import SpecialQuestionSelector
from models.schemas import BoardTemplate

logger = logging.getLogger(__name__)


class QuizBoardApp(QObject):
    """
    Top-level application controller.
    Wires together all application components.
    """

    def __init__(self, template: BoardTemplate, seed: Optional[int] = None,
                 narration: bool = True, show_window: bool = True):
        super().__init__()

        # Core services
        self.event_bus = EventBus()
        self.narrator = Narrator(enabled=narration)

        # Game session
        self.controller = SelectionController(
            template,
            narrator=self.narrator,
            selector=SpecialQuestionSelector(rng=random.Random(seed)),
        )
        self._connect_signals()

        # Main window (omitted for headless use)
        self.main_window = None
        if show_window:
            from gui.main_window import MainWindow
            self.main_window = MainWindow(self.event_bus, self.controller)

    def _connect_signals(self) -> None:
        """Forward engine and narrator signals onto the event bus."""
        c = self.controller
        bus = self.event_bus

        c.state_changed.connect(bus.state_changed.emit)
        c.selection_changed.connect(bus.selection_changed.emit)
        c.wager_requested.connect(bus.wager_requested.emit)
        c.wager_recorded.connect(bus.wager_recorded.emit)
        c.answer_revealed.connect(bus.answer_revealed.emit)
        c.question_consumed.connect(bus.question_consumed.emit)
        c.score_updated.connect(bus.score_updated.emit)
        c.countdown_tick.connect(bus.countdown_tick.emit)
        c.countdown_cleared.connect(bus.countdown_cleared.emit)
        c.board_cleared.connect(bus.board_cleared.emit)
        c.game_reset.connect(bus.game_reset.emit)
        c.snapshot_updated.connect(bus.snapshot_updated.emit)
        c.narration_requested.connect(bus.narration_started.emit)

        self.narrator.finished.connect(lambda _token: bus.narration_finished.emit())
        self.narrator.unavailable.connect(bus.narration_unavailable.emit)

        c.board_cleared.connect(self._on_board_cleared)

    def _on_board_cleared(self) -> None:
        leader = self.controller.ledger.leader()
        if leader is None:
            self.event_bus.emit_message("info", "Board cleared - it's a tie!")
        else:
            self.event_bus.emit_message(
                "info", f"Board cleared - {TEAM_SETTINGS.display_name(leader)} wins!"
            )

    def show(self) -> None:
        """Show the main application window."""
        if self.main_window is not None:
            self.main_window.show()

    def new_game(self, template: Optional[BoardTemplate] = None) -> None:
        """Start a new game on the current (or a replacement) board."""
        logger.info("Starting new game")
        self.controller.new_game(template)
