"""
QuizBoard Data Models

Board types and pydantic validation schemas.
"""

from models.board import BoardModel, Category, Coordinate, Question
from models.schemas import BoardTemplate, CategoryTemplate, QuestionTemplate, WagerInput

__all__ = [
    "BoardModel",
    "Category",
    "Coordinate",
    "Question",
    "BoardTemplate",
    "CategoryTemplate",
    "QuestionTemplate",
    "WagerInput",
]
