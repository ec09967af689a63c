"""
Board Template Loading

Reads a JSON board template from disk and validates it.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from config import PATHS
from engine.errors import BoardTemplateError
from models.schemas import BoardTemplate

logger = logging.getLogger(__name__)


def load_template(path: Union[str, Path, None] = None) -> BoardTemplate:
    """
    Load and validate a board template.

    Args:
        path: Template file; defaults to the user's board if present,
              otherwise the bundled one

    Raises:
        BoardTemplateError: file missing, not JSON, or not a valid board
    """
    path = Path(path) if path is not None else default_template_path()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise BoardTemplateError(f"Cannot read board template {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise BoardTemplateError(f"Board template {path} is not valid JSON: {e}") from e

    template = parse_template(data)
    logger.info("Loaded board %s (%d categories)", path, len(template.categories))
    return template


def parse_template(data) -> BoardTemplate:
    """Validate already-decoded template data."""
    try:
        return BoardTemplate.model_validate(data)
    except ValidationError as e:
        raise BoardTemplateError(f"Invalid board template: {e}") from e


def default_template_path() -> Path:
    """The user's board if one exists, otherwise the bundled board."""
    if PATHS.user_board.exists():
        return PATHS.user_board
    return PATHS.default_board
