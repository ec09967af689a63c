"""
QuizBoard Game Engine

Core game logic for the trivia board.
This module contains no GUI dependencies.
"""

from engine.controller import SelectionController, SelectionState, ActiveSelection, SessionSnapshot
from engine.countdown import CountdownTimer
from engine.errors import QuizBoardError, InvalidStateError, WagerValidationError, BoardTemplateError
from engine.ledger import ScoreLedger, ScoreDelta
from engine.special_selector import SpecialQuestionSelector
from engine.wager import WagerFlow

__all__ = [
    "SelectionController",
    "SelectionState",
    "ActiveSelection",
    "SessionSnapshot",
    "CountdownTimer",
    "QuizBoardError",
    "InvalidStateError",
    "WagerValidationError",
    "BoardTemplateError",
    "ScoreLedger",
    "ScoreDelta",
    "SpecialQuestionSelector",
    "WagerFlow",
]
