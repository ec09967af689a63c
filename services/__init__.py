"""
QuizBoard Services

Application services for event handling, narration and board loading.
"""

from services.event_bus import EventBus
from services.narration import Narrator, check_speech_support
from services.board_loader import load_template, parse_template

__all__ = ["EventBus", "Narrator", "check_speech_support", "load_template", "parse_template"]
