"""
Wager Flow - gates Daily Double questions on a recorded wager.
"""

import logging
from typing import Optional, Union

from pydantic import ValidationError

from engine.errors import WagerValidationError
from models.schemas import WagerInput

logger = logging.getLogger(__name__)


class WagerFlow:
    """
    Tracks the wager for the active question.

    The flow is open only while a Daily Double is selected and no wager has
    been taken. Until then the clue is not read, the answer cannot be shown
    and the question cannot be scored.
    """

    def __init__(self):
        self._is_special = False
        self._wager: Optional[int] = None

    @property
    def wager(self) -> Optional[int]:
        return self._wager

    @property
    def is_open(self) -> bool:
        """True while a Daily Double is waiting for its wager."""
        return self._is_special and self._wager is None

    def begin(self, is_special: bool) -> None:
        """Prepare for a newly selected question."""
        self._is_special = is_special
        self._wager = None

    @staticmethod
    def parse(amount: Union[int, str]) -> int:
        """
        Validate raw wager input.

        Raises:
            WagerValidationError: if the input is not a non-negative whole number
        """
        try:
            return WagerInput(amount=amount).amount
        except ValidationError as e:
            message = e.errors()[0].get("msg", "Invalid wager")
            raise WagerValidationError(message.removeprefix("Value error, ")) from e

    def submit(self, amount: Union[int, str]) -> int:
        """
        Record the wager.

        Returns:
            The recorded amount

        Raises:
            WagerValidationError: on malformed input; nothing is recorded
        """
        value = self.parse(amount)
        self._wager = value
        logger.info("Wager recorded: %d", value)
        return value

    def clear(self) -> None:
        self._is_special = False
        self._wager = None
