"""
Engine exceptions.

Commands that are merely out of place (selecting an empty slot, committing
with nothing selected) are ignored and never raise. Only the failures below
are reported to the caller.
"""


class QuizBoardError(Exception):
    """Base class for errors surfaced to the presentation layer."""


class InvalidStateError(QuizBoardError, RuntimeError):
    """A command cannot run yet, e.g. scoring a Daily Double before the wager."""


class WagerValidationError(QuizBoardError, ValueError):
    """A wager was not a non-negative whole number."""


class BoardTemplateError(QuizBoardError, ValueError):
    """A board template could not be read or failed validation."""
