"""
Daily Double selection.

Picks the special coordinates once at the start of a game by sampling
without replacement from every slot that still holds a question.
"""

import logging
import random
from typing import Optional

from config import BOARD_SETTINGS
from models.board import BoardModel, Coordinate

logger = logging.getLogger(__name__)


class SpecialQuestionSelector:
    """
    Draws the Daily Double coordinates for a board.

    Usage:
        selector = SpecialQuestionSelector(rng=random.Random(42))
        specials = selector.select(board)
    """

    def __init__(self, count: int = BOARD_SETTINGS.special_count,
                 rng: Optional[random.Random] = None):
        """
        Args:
            count: Number of Daily Doubles to draw
            rng: Random source; a fresh unseeded Random is used if omitted
        """
        if count < 0:
            raise ValueError("Daily Double count cannot be negative")
        self.count = count
        self._rng = rng or random.Random()

    def select(self, board: BoardModel) -> frozenset[Coordinate]:
        """
        Draw distinct coordinates uniformly from the present slots.

        Boards with fewer present slots than ``count`` get all of them.
        """
        candidates = board.present_coordinates()
        k = min(self.count, len(candidates))
        chosen = frozenset(self._rng.sample(candidates, k))
        if k < self.count:
            logger.warning("Board has only %d question(s); drew %d Daily Double(s)",
                           len(candidates), k)
        logger.debug("Daily Doubles at %s", sorted(chosen))
        return chosen
