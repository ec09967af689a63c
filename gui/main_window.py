"""
Main Window - Host Console

The host's view of the game: board on top, the question in play below it and
the scoreboard at the bottom.
"""

from PySide6.QtWidgets import (
    QMainWindow, QToolBar, QStatusBar, QWidget, QVBoxLayout, QLabel, QMessageBox
)
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction, QKeySequence

from config import APP_NAME, UI_SETTINGS
from services.event_bus import EventBus
from engine.controller import SelectionController, SessionSnapshot
from engine.errors import InvalidStateError, WagerValidationError
from gui.styles import theme


class MainWindow(QMainWindow):
    """
    Host console.

    Widgets never touch game state directly: clicks become controller
    commands, and the display follows event bus signals.
    """

    def __init__(self, event_bus: EventBus, controller: SelectionController):
        super().__init__()
        self.event_bus = event_bus
        self.controller = controller

        self.setWindowTitle(f"{APP_NAME} — Host Console")
        self.setMinimumSize(UI_SETTINGS.min_width, UI_SETTINGS.min_height)
        self.setStyleSheet(
            f"background-color: {theme.SURFACE_MAIN}; color: {theme.TEXT_PRIMARY};"
        )

        # Import widgets here to avoid circular imports
        from gui.widgets.board_grid import BoardGridWidget
        from gui.widgets.question_panel import QuestionPanel
        from gui.widgets.scoreboard import ScoreboardWidget

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(theme.SPACING_LG)

        self.board_grid = BoardGridWidget()
        layout.addWidget(self.board_grid, stretch=3)

        self.question_panel = QuestionPanel()
        layout.addWidget(self.question_panel, stretch=2)

        self.scoreboard = ScoreboardWidget()
        layout.addWidget(self.scoreboard)

        self.setCentralWidget(central)

        self._build_toolbar()
        self._build_statusbar()
        self._connect_signals()

        self.board_grid.set_board(controller.board)
        self.scoreboard.update_scores(controller.scores)

    def _build_toolbar(self) -> None:
        """Build the game toolbar."""
        tb = QToolBar("Game")
        tb.setMovable(False)
        self.addToolBar(Qt.ToolBarArea.TopToolBarArea, tb)

        self.action_new_game = QAction("New Game", self)
        self.action_new_game.setShortcut(QKeySequence("Ctrl+N"))
        self.action_new_game.triggered.connect(self._confirm_new_game)
        tb.addAction(self.action_new_game)

        self.action_show_answer = QAction("Show Answer", self)
        self.action_show_answer.setShortcut(QKeySequence("Space"))
        self.action_show_answer.triggered.connect(lambda: self.controller.show_answer())
        tb.addAction(self.action_show_answer)

    def _build_statusbar(self) -> None:
        """Build the status bar."""
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready - pick a question")

        self.status_remaining = QLabel("")
        self.status_bar.addPermanentWidget(self.status_remaining)

    def _connect_signals(self) -> None:
        """Connect widget commands and event bus signals."""
        # Commands
        self.board_grid.question_clicked.connect(self.controller.select_question)
        self.question_panel.show_answer_clicked.connect(self.controller.show_answer)
        self.question_panel.wager_submitted.connect(self._submit_wager)
        self.scoreboard.score_requested.connect(self._commit_score)

        # Display
        self.event_bus.snapshot_updated.connect(self._on_snapshot)
        self.event_bus.selection_changed.connect(self.board_grid.set_selection)
        self.event_bus.question_consumed.connect(self.board_grid.mark_consumed)
        self.event_bus.score_updated.connect(self.scoreboard.update_scores)
        self.event_bus.countdown_tick.connect(self.question_panel.set_countdown)
        self.event_bus.countdown_cleared.connect(lambda: self.question_panel.set_countdown(None))
        self.event_bus.game_reset.connect(self._on_game_reset)
        self.event_bus.narration_unavailable.connect(self._on_narration_unavailable)
        self.event_bus.system_message.connect(self._on_system_message)

    @Slot(str)
    def _submit_wager(self, text: str) -> None:
        try:
            self.controller.submit_wager(text)
        except WagerValidationError as e:
            self.event_bus.emit_message("warning", str(e))

    @Slot(str, bool)
    def _commit_score(self, team: str, is_add: bool) -> None:
        try:
            self.controller.commit_score(team, is_add)
        except InvalidStateError as e:
            self.event_bus.emit_message("warning", str(e))

    @Slot(object)
    def _on_snapshot(self, snapshot: SessionSnapshot) -> None:
        self.question_panel.render(snapshot)
        self.status_remaining.setText(f"{snapshot.remaining_questions} questions left")

    @Slot()
    def _on_game_reset(self) -> None:
        self.board_grid.set_board(self.controller.board)
        self.status_bar.showMessage("New game started", 5000)

    @Slot()
    def _on_narration_unavailable(self) -> None:
        self.status_bar.showMessage("Narration unavailable - read the clue aloud", 5000)

    @Slot(str, str)
    def _on_system_message(self, level: str, message: str) -> None:
        """Display system message in status bar."""
        self.status_bar.showMessage(f"[{level.upper()}] {message}", 5000)

    def _confirm_new_game(self) -> None:
        reply = QMessageBox.question(
            self,
            "New Game",
            "Start a new game? Scores and the board will be reset.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No
        )
        if reply == QMessageBox.StandardButton.Yes:
            self.controller.new_game()
