"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
keeping the game engine, the narrator and the GUI loosely coupled.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for QuizBoard.

    The EventBus acts as a mediator between all application components:
    - SelectionController emits question and scoring events
    - GUI components listen and update displays
    - Narrator reports when a clue has been read

    Usage:
        # In QuizBoardApp
        controller.score_updated.connect(self.event_bus.score_updated.emit)

        # In ScoreboardWidget
        self.event_bus.score_updated.connect(self._on_score_updated)
    """

    # ============ Game Lifecycle ============
    game_reset = Signal()
    board_cleared = Signal()

    # ============ Question Lifecycle ============
    state_changed = Signal(str)           # "idle", "selected", "revealed"
    selection_changed = Signal(object)    # ActiveSelection or None
    wager_requested = Signal(object)      # ActiveSelection awaiting a wager
    wager_recorded = Signal(int)          # wager amount
    answer_revealed = Signal(str)         # answer text
    question_consumed = Signal(int, int)  # category, row
    snapshot_updated = Signal(object)     # SessionSnapshot

    # ============ Scoring Events ============
    score_updated = Signal(dict)          # {team_id: score}

    # ============ Timer Events ============
    countdown_tick = Signal(int)          # ticks remaining
    countdown_cleared = Signal()

    # ============ Narration Events ============
    narration_started = Signal(str)       # clue text
    narration_finished = Signal()
    narration_unavailable = Signal()

    # ============ System Events ============
    system_message = Signal(str, str)     # (level, message) - e.g., ("info", "Wager recorded")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
