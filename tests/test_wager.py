"""
Tests for the WagerFlow.
"""

import pytest

from engine.errors import WagerValidationError
from engine.wager import WagerFlow


class TestWagerFlow:
    """Tests for opening, recording and clearing wagers."""

    def setup_method(self):
        self.flow = WagerFlow()

    def test_closed_for_ordinary_question(self):
        """Ordinary questions never wait for a wager."""
        self.flow.begin(is_special=False)

        assert not self.flow.is_open
        assert self.flow.wager is None

    def test_open_for_daily_double(self):
        """A Daily Double waits until a wager is recorded."""
        self.flow.begin(is_special=True)

        assert self.flow.is_open

    def test_submit_records_and_closes(self):
        """A valid wager is stored and closes the flow."""
        self.flow.begin(is_special=True)

        assert self.flow.submit("250") == 250
        assert self.flow.wager == 250
        assert not self.flow.is_open

    def test_invalid_wager_keeps_flow_open(self):
        """Malformed input raises and records nothing."""
        self.flow.begin(is_special=True)

        with pytest.raises(WagerValidationError, match="whole number"):
            self.flow.submit("lots")

        assert self.flow.wager is None
        assert self.flow.is_open

    def test_validation_error_is_value_error(self):
        """Callers may catch wager failures as ValueError."""
        with pytest.raises(ValueError):
            WagerFlow.parse("")

    def test_superscript_digit_gets_friendly_message(self):
        with pytest.raises(WagerValidationError) as exc_info:
            WagerFlow.parse("²")

        assert str(exc_info.value) == "Wager must be a whole number"

    def test_begin_discards_previous_wager(self):
        """Each new question starts without a wager."""
        self.flow.begin(is_special=True)
        self.flow.submit(500)

        self.flow.begin(is_special=True)

        assert self.flow.wager is None
        assert self.flow.is_open

    def test_clear(self):
        """clear() resets everything."""
        self.flow.begin(is_special=True)
        self.flow.submit(100)
        self.flow.clear()

        assert self.flow.wager is None
        assert not self.flow.is_open
