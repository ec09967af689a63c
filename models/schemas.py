"""
Pydantic schemas for data validation.
"""

import re
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

_WHOLE_NUMBER = re.compile(r"\d+", re.ASCII)


# ============ Board Template Schemas ============

class QuestionTemplate(BaseModel):
    """Schema for one question in a board template."""
    clue: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    value: int = Field(..., ge=0)

    @field_validator("clue", "answer")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text cannot be blank")
        return v.strip()


class CategoryTemplate(BaseModel):
    """Schema for a category column."""
    name: str = Field(..., min_length=1, max_length=100)
    questions: list[Optional[QuestionTemplate]] = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Category name cannot be empty")
        return v.strip()


class BoardTemplate(BaseModel):
    """
    Schema for a full board.

    Accepts either ``{"categories": [...]}`` or a bare list of categories,
    which is the layout of the bundled ``categories.json``.
    """
    categories: list[CategoryTemplate] = Field(..., min_length=1)

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_list(cls, data):
        if isinstance(data, list):
            return {"categories": data}
        return data

    @model_validator(mode="after")
    def rows_are_uniform(self) -> "BoardTemplate":
        lengths = {len(cat.questions) for cat in self.categories}
        if len(lengths) > 1:
            raise ValueError(
                f"All categories must have the same number of questions, got {sorted(lengths)}"
            )
        return self

    @property
    def row_count(self) -> int:
        return len(self.categories[0].questions)


# ============ Wager Schemas ============

class WagerInput(BaseModel):
    """
    Schema for a Daily Double wager.

    Accepts an integer or a numeric string. Anything else is rejected rather
    than read as zero.
    """
    amount: int = Field(..., ge=0)

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, v: Union[int, str, float]) -> Union[int, float]:
        if isinstance(v, bool):
            raise ValueError("Wager must be a whole number")
        if isinstance(v, str):
            text = v.strip()
            if not text:
                raise ValueError("Wager is required")
            if text.startswith("-") and _WHOLE_NUMBER.fullmatch(text[1:]):
                raise ValueError("Wager cannot be negative")
            if not _WHOLE_NUMBER.fullmatch(text):
                raise ValueError("Wager must be a whole number")
            return int(text)
        return v
