"""
Shared fixtures for QuizBoard tests.
"""

import sys

import pytest
from PySide6.QtCore import QCoreApplication, QEventLoop, QObject, QTimer, Signal

from models.schemas import BoardTemplate


# Create QCoreApplication for Qt event loop (required for QTimer)
@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Create a QCoreApplication instance for the test session."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    yield app


def wait_ms(ms: int) -> None:
    """Run the Qt event loop for roughly ms milliseconds."""
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


def make_template(values=(100, 200, 300, 400, 500), names=("Science",)) -> BoardTemplate:
    """Board with one question per value in each named category."""
    return BoardTemplate.model_validate([
        {
            "name": name,
            "questions": [
                {"clue": f"{name} clue {value}", "answer": f"{name} answer {value}", "value": value}
                for value in values
            ],
        }
        for name in names
    ])


class FakeNarrator(QObject):
    """Records narration requests; tests decide when narration finishes."""

    finished = Signal(int)

    def __init__(self):
        super().__init__()
        self.spoken: list[tuple[str, int]] = []
        self.stop_count = 0

    def speak(self, text: str, token: int) -> None:
        self.spoken.append((text, token))

    def stop(self) -> None:
        self.stop_count += 1

    def finish(self, index: int = -1) -> None:
        """Report completion of a recorded narration (the latest by default)."""
        self.finished.emit(self.spoken[index][1])


@pytest.fixture
def science_template() -> BoardTemplate:
    return make_template()


@pytest.fixture
def narrator() -> FakeNarrator:
    return FakeNarrator()
