"""
Board model - the grid of categories and questions.

The board is built once per game from a validated template. After that the
only mutation allowed is consuming a slot, which is permanent.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from models.schemas import BoardTemplate


class Coordinate(NamedTuple):
    """Position of a question on the board."""
    category: int
    row: int


@dataclass(frozen=True)
class Question:
    """A single clue with its answer and face value."""
    clue: str
    answer: str
    value: int


@dataclass
class Category:
    """A named column of questions. Consumed slots hold None."""
    name: str
    questions: list[Optional[Question]] = field(default_factory=list)


class BoardModel:
    """
    Owns the categories of a game and tracks which questions remain.

    Every category has the same number of rows. A consumed slot stays
    consumed for the rest of the game; consuming it again does nothing.
    """

    def __init__(self, categories: list[Category]):
        self._categories = categories
        self._row_count = len(categories[0].questions) if categories else 0

    @classmethod
    def from_template(cls, template: "BoardTemplate") -> "BoardModel":
        """
        Build a board from a template.

        The template is never shared with the board: every category and
        question list is copied so consuming slots leaves the template intact.
        """
        categories = []
        for cat in template.categories:
            questions: list[Optional[Question]] = [
                Question(clue=q.clue, answer=q.answer, value=q.value) if q is not None else None
                for q in cat.questions
            ]
            categories.append(Category(name=cat.name, questions=questions))
        return cls(categories)

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories)

    @property
    def category_names(self) -> list[str]:
        return [cat.name for cat in self._categories]

    @property
    def category_count(self) -> int:
        return len(self._categories)

    @property
    def row_count(self) -> int:
        return self._row_count

    def get(self, category: int, row: int) -> Optional[Question]:
        """Return the question at a slot, or None if consumed or off the board."""
        if not (0 <= category < len(self._categories)):
            return None
        if not (0 <= row < self._row_count):
            return None
        return self._categories[category].questions[row]

    def consume(self, category: int, row: int) -> bool:
        """
        Remove a question from play.

        Returns:
            True if a question was removed, False if the slot was already empty
        """
        if self.get(category, row) is None:
            return False
        self._categories[category].questions[row] = None
        return True

    def present_coordinates(self) -> list[Coordinate]:
        """All slots that still hold a question, in column-major order."""
        return [
            Coordinate(cat_idx, row_idx)
            for cat_idx, cat in enumerate(self._categories)
            for row_idx, question in enumerate(cat.questions)
            if question is not None
        ]

    @property
    def remaining_count(self) -> int:
        return len(self.present_coordinates())

    @property
    def is_cleared(self) -> bool:
        """True once every question has been played."""
        return self.remaining_count == 0
