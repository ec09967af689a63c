"""
QuizBoard GUI Widgets

Reusable widget components for the host console.
"""

from gui.widgets.board_grid import BoardGridWidget
from gui.widgets.question_panel import QuestionPanel
from gui.widgets.scoreboard import ScoreboardWidget

__all__ = [
    "BoardGridWidget",
    "QuestionPanel",
    "ScoreboardWidget",
]
