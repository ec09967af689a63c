"""
Clue Narration

Reads clues aloud through Qt's text-to-speech module. Hosts without a speech
engine get a narrator that stays silent and never reports completion, so the
countdown simply does not auto-start there.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

# Try to import Qt's speech module (an optional PySide6 add-on)
try:
    from PySide6.QtTextToSpeech import QTextToSpeech
    HAS_TEXT_TO_SPEECH = True
except ImportError:
    HAS_TEXT_TO_SPEECH = False

logger = logging.getLogger(__name__)


def check_speech_support() -> bool:
    """Check whether a text-to-speech engine is available on this host."""
    if not HAS_TEXT_TO_SPEECH:
        return False
    return bool(QTextToSpeech.availableEngines())


class Narrator(QObject):
    """
    Fire-and-forget clue narration.

    speak() returns immediately. When the utterance ends, finished is
    emitted exactly once with the token passed to speak(). Stopping or
    replacing an utterance drops its token, so no completion is reported
    for it.
    """

    finished = Signal(int)      # token of the completed narration
    unavailable = Signal()      # speech requested but no engine present

    def __init__(self, enabled: bool = True):
        super().__init__()
        self._speech = None
        self._token: Optional[int] = None
        self._speaking = False

        if enabled and check_speech_support():
            self._speech = QTextToSpeech(self)
            self._speech.stateChanged.connect(self._on_state_changed)
            logger.info("Narration using engine %s", self._speech.engine())
        elif enabled:
            logger.warning("No text-to-speech engine found; clues will not be read aloud")
        else:
            logger.info("Narration disabled")

    @property
    def is_available(self) -> bool:
        return self._speech is not None

    def speak(self, text: str, token: int) -> None:
        """Start reading text aloud."""
        if self._speech is None:
            logger.debug("Skipping narration of %r", text)
            self.unavailable.emit()
            return

        self._token = token
        self._speaking = False
        self._speech.say(text)

    def stop(self) -> None:
        """Stop the current utterance without reporting completion."""
        self._token = None
        self._speaking = False
        if self._speech is not None:
            self._speech.stop()

    def _on_state_changed(self, state) -> None:
        if state == QTextToSpeech.State.Speaking:
            self._speaking = True
        elif state == QTextToSpeech.State.Ready and self._speaking:
            self._speaking = False
            token, self._token = self._token, None
            if token is not None:
                self.finished.emit(token)
        elif state == QTextToSpeech.State.Error:
            logger.warning("Narration failed: %s", self._speech.errorString())
            self._speaking = False
            self._token = None
