"""
Selection Controller - the game state machine.

The SelectionController runs independently of the GUI. It owns the whole
game session: the board, the Daily Double coordinates, the score ledger and
the transient state of the question being played.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from PySide6.QtCore import QObject, Signal

from engine.countdown import CountdownTimer
from engine.errors import InvalidStateError, WagerValidationError
from engine.ledger import ScoreLedger
from engine.special_selector import SpecialQuestionSelector
from engine.wager import WagerFlow
from models.board import BoardModel, Coordinate
from models.schemas import BoardTemplate

logger = logging.getLogger(__name__)


class SelectionState(Enum):
    """State machine states for the question lifecycle."""
    IDLE = "idle"
    SELECTED = "selected"
    REVEALED = "revealed"


@dataclass(frozen=True)
class ActiveSelection:
    """The question currently in play."""
    category: int
    row: int
    clue: str
    answer: str
    value: int
    is_special: bool

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.category, self.row)


@dataclass
class SessionSnapshot:
    """
    Snapshot of everything the presentation layer renders.
    Emitted after every completed command.
    """
    state: SelectionState = SelectionState.IDLE
    active: Optional[ActiveSelection] = None
    revealed_answer: Optional[str] = None
    wager: Optional[int] = None
    awaiting_wager: bool = False
    countdown: Optional[int] = None
    scores: dict[str, int] = field(default_factory=dict)
    remaining_questions: int = 0
    is_board_cleared: bool = False


class SelectionController(QObject):
    """
    Drives one game: selection, wagers, narration, countdown and scoring.
    Emits Qt Signals so GUI layers can react without polling.

    Commands that do not apply in the current state are ignored and return
    False. The exceptions are committing a Daily Double before its wager
    (InvalidStateError) and malformed wager input (WagerValidationError).

    The narrator, when given, must provide ``speak(text, token)``,
    ``stop()`` and a ``finished(int)`` signal echoing the token.
    """

    # Signals
    state_changed = Signal(str)              # new state name
    selection_changed = Signal(object)       # ActiveSelection or None
    wager_requested = Signal(object)         # ActiveSelection awaiting a wager
    wager_recorded = Signal(int)             # wager amount
    narration_requested = Signal(str)        # clue text
    answer_revealed = Signal(str)            # answer text
    score_updated = Signal(dict)             # {team: score}
    question_consumed = Signal(int, int)     # category, row
    countdown_tick = Signal(int)             # ticks remaining
    countdown_cleared = Signal()
    board_cleared = Signal()
    game_reset = Signal()
    snapshot_updated = Signal(object)        # SessionSnapshot

    def __init__(self, template: BoardTemplate, narrator=None,
                 selector: Optional[SpecialQuestionSelector] = None,
                 countdown: Optional[CountdownTimer] = None,
                 ledger: Optional[ScoreLedger] = None):
        """
        Initialize the controller and start a game.

        Args:
            template: Validated board template; never mutated
            narrator: Optional narration collaborator
            selector: Daily Double selector (inject a seeded one for tests)
            countdown: Countdown timer (inject a short one for tests)
            ledger: Score ledger
        """
        super().__init__()
        self._template = template
        self._narrator = narrator
        self._selector = selector or SpecialQuestionSelector()
        self._countdown = countdown or CountdownTimer()
        self._ledger = ledger or ScoreLedger()
        self._wager_flow = WagerFlow()

        self._countdown.tick.connect(self._on_countdown_tick)
        self._countdown.expired.connect(self._on_countdown_cleared)
        self._countdown.cancelled.connect(self._on_countdown_cleared)

        if self._narrator is not None:
            self._narrator.finished.connect(self.on_narration_finished)

        self._narration_token = 0
        self._pending_narration: Optional[int] = None
        self._state = SelectionState.IDLE
        self._active: Optional[ActiveSelection] = None
        self._revealed_answer: Optional[str] = None

        self._board = BoardModel.from_template(template)
        self._specials = self._selector.select(self._board)

    # ============ Observable State ============

    @property
    def state(self) -> SelectionState:
        """Current state of the question lifecycle."""
        return self._state

    @state.setter
    def state(self, new_state: SelectionState) -> None:
        """Set the state and emit signal."""
        if new_state != self._state:
            logger.debug("State %s -> %s", self._state.value, new_state.value)
        self._state = new_state
        self.state_changed.emit(new_state.value)

    @property
    def board(self) -> BoardModel:
        return self._board

    @property
    def special_coordinates(self) -> frozenset[Coordinate]:
        return self._specials

    @property
    def ledger(self) -> ScoreLedger:
        return self._ledger

    @property
    def scores(self) -> dict[str, int]:
        return self._ledger.scores()

    @property
    def active(self) -> Optional[ActiveSelection]:
        return self._active

    @property
    def revealed_answer(self) -> Optional[str]:
        return self._revealed_answer

    @property
    def wager(self) -> Optional[int]:
        return self._wager_flow.wager

    @property
    def awaiting_wager(self) -> bool:
        return self._active is not None and self._wager_flow.is_open

    @property
    def countdown_remaining(self) -> Optional[int]:
        return self._countdown.remaining

    @property
    def is_narrating(self) -> bool:
        return self._pending_narration is not None

    def is_special(self, category: int, row: int) -> bool:
        return Coordinate(category, row) in self._specials

    def snapshot(self) -> SessionSnapshot:
        """Build a snapshot of the observable state."""
        return SessionSnapshot(
            state=self._state,
            active=self._active,
            revealed_answer=self._revealed_answer,
            wager=self._wager_flow.wager,
            awaiting_wager=self.awaiting_wager,
            countdown=self._countdown.remaining,
            scores=self._ledger.scores(),
            remaining_questions=self._board.remaining_count,
            is_board_cleared=self._board.is_cleared,
        )

    # ============ Commands ============

    def select_question(self, category: int, row: int) -> bool:
        """
        Put a question into play.

        Ignored while another question is active or if the slot is empty.
        Ordinary questions are read aloud straight away; Daily Doubles wait
        for a wager.

        Returns:
            True if the question was selected
        """
        if self._state != SelectionState.IDLE:
            logger.debug("Ignoring selection of (%d, %d): question already active",
                         category, row)
            return False

        question = self._board.get(category, row)
        if question is None:
            logger.debug("Ignoring selection of empty slot (%d, %d)", category, row)
            return False

        # New selection cycle; nothing from the last question may linger
        self._cancel_narration()
        self._countdown.cancel()

        is_special = self.is_special(category, row)
        self._active = ActiveSelection(
            category=category,
            row=row,
            clue=question.clue,
            answer=question.answer,
            value=question.value,
            is_special=is_special,
        )
        self._revealed_answer = None
        self._wager_flow.begin(is_special)
        self.state = SelectionState.SELECTED

        logger.info("Selected %s for %d%s", self._board.category_names[category],
                    question.value, " (Daily Double)" if is_special else "")

        self.selection_changed.emit(self._active)
        if is_special:
            self.wager_requested.emit(self._active)
        else:
            self._narrate(question.clue)

        self._emit_snapshot()
        return True

    def submit_wager(self, amount: Union[int, str]) -> bool:
        """
        Record the wager for the active Daily Double and read the clue.

        Returns:
            True if the wager was recorded, False if no wager is expected

        Raises:
            WagerValidationError: if amount is not a non-negative whole number
        """
        if self._active is None or not self._wager_flow.is_open:
            logger.debug("Ignoring wager: no Daily Double awaiting a wager")
            return False

        try:
            wager = self._wager_flow.submit(amount)
        except WagerValidationError:
            logger.warning("Rejected wager input %r", amount)
            raise

        self.wager_recorded.emit(wager)
        self._narrate(self._active.clue)
        self._emit_snapshot()
        return True

    def show_answer(self) -> bool:
        """
        Reveal the answer of the active question.

        Ignored with nothing active, or on a Daily Double still awaiting its
        wager.

        Returns:
            True if the answer is now revealed
        """
        if self._active is None or self._state == SelectionState.IDLE:
            logger.debug("Ignoring reveal: no active question")
            return False
        if self._wager_flow.is_open:
            logger.debug("Ignoring reveal: wager not recorded")
            return False

        self._revealed_answer = self._active.answer
        self.state = SelectionState.REVEALED
        self.answer_revealed.emit(self._revealed_answer)
        self._emit_snapshot()
        return True

    def commit_score(self, team: str, is_add: bool) -> bool:
        """
        Score the active question for a team and take it off the board.

        The score change, the consumption of the slot and the reset of all
        transient state happen together; observers are only notified once
        all three are done.

        Args:
            team: Team identifier
            is_add: True to award the points, False to deduct them

        Returns:
            True if a score was applied, False if nothing was active

        Raises:
            InvalidStateError: Daily Double selected but no wager recorded
            ValueError: unknown team
        """
        if self._state == SelectionState.IDLE or self._active is None:
            logger.debug("Ignoring commit: no active question")
            return False

        active = self._active
        if active.is_special and self._wager_flow.wager is None:
            raise InvalidStateError("Enter a wager before scoring this Daily Double")
        self._ledger.validate_team(team)

        points = self._wager_flow.wager if active.is_special else active.value
        delta = points * (1 if is_add else -1)

        # Transaction: nothing below may fail
        self._ledger.apply(team, delta, active.coordinate, active.is_special)
        self._board.consume(active.category, active.row)
        self._state = SelectionState.IDLE
        self._clear_transient()

        logger.info("%s %+d for %s", team, delta, active.coordinate)

        self.state_changed.emit(self._state.value)
        self.selection_changed.emit(None)
        self.question_consumed.emit(active.category, active.row)
        self.score_updated.emit(self._ledger.scores())
        if self._board.is_cleared:
            logger.info("Board cleared; leader: %s", self._ledger.leader() or "tie")
            self.board_cleared.emit()
        self._emit_snapshot()
        return True

    def new_game(self, template: Optional[BoardTemplate] = None) -> None:
        """
        Start over with a fresh board, new Daily Doubles and zero scores.

        Args:
            template: Optional replacement template; defaults to the current one
        """
        if template is not None:
            self._template = template

        self._board = BoardModel.from_template(self._template)
        self._specials = self._selector.select(self._board)
        self._ledger.reset()
        self._state = SelectionState.IDLE
        self._clear_transient()
        self.state_changed.emit(self._state.value)

        logger.info("New game: %d categories x %d rows",
                    self._board.category_count, self._board.row_count)

        self.game_reset.emit()
        self.selection_changed.emit(None)
        self.score_updated.emit(self._ledger.scores())
        self._emit_snapshot()

    # ============ Narration ============

    def on_narration_finished(self, token: int = None) -> None:
        """
        Handle the narrator finishing a clue.

        Starts the countdown if the narration belongs to the question still
        in play and its answer is not yet revealed. Completions for earlier
        questions are dropped.
        """
        if self._pending_narration is None:
            return
        if token is not None and token != self._pending_narration:
            logger.debug("Dropping stale narration completion %s", token)
            return

        self._pending_narration = None
        if self._state != SelectionState.SELECTED:
            logger.debug("Answer already revealed; no countdown")
            return
        self._countdown.start()

    def _narrate(self, clue: str) -> None:
        self._narration_token += 1
        self._pending_narration = self._narration_token
        self.narration_requested.emit(clue)
        if self._narrator is not None:
            self._narrator.speak(clue, self._pending_narration)

    def _cancel_narration(self) -> None:
        pending, self._pending_narration = self._pending_narration, None
        if pending is not None and self._narrator is not None:
            self._narrator.stop()

    # ============ Internal ============

    def _clear_transient(self) -> None:
        """Drop the active question and everything hanging off it."""
        self._active = None
        self._revealed_answer = None
        self._wager_flow.clear()
        self._cancel_narration()
        self._countdown.cancel()

    def _on_countdown_tick(self, remaining: int) -> None:
        self.countdown_tick.emit(remaining)

    def _on_countdown_cleared(self) -> None:
        self.countdown_cleared.emit()

    def _emit_snapshot(self) -> None:
        self.snapshot_updated.emit(self.snapshot())
