"""
Tests for the wager entry pattern used by the question panel.
"""

import pytest
from PySide6.QtCore import QRegularExpression

from gui.widgets.question_panel import WAGER_INPUT_PATTERN


def _accepts(text: str) -> bool:
    pattern = QRegularExpression(QRegularExpression.anchoredPattern(WAGER_INPUT_PATTERN))
    return pattern.match(text).hasMatch()


class TestWagerInputPattern:
    """The wager box accepts any whole number the engine accepts."""

    @pytest.mark.parametrize("text", ["", "0", "250", "1000000", "5000000", "99999999999"])
    def test_accepts_digits_without_cap(self, text):
        assert _accepts(text)

    @pytest.mark.parametrize("text", ["-5", "12.5", "abc", "1e3"])
    def test_rejects_non_digits(self, text):
        assert not _accepts(text)
