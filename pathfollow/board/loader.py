"""Loading boards from text files."""

import logging
from pathlib import Path
from typing import Optional, Union

from .models import BoardDefinition, BoardValidationError
from .parsing import parse_board, split_board_text

logger = logging.getLogger("pathfollow")


def ensure_board_file(path: Optional[Union[str, Path]]) -> Path:
    """
    Check that ``path`` points at an existing board file.

    Raises BoardValidationError (FILE_NOT_FOUND) for a missing or blank path.
    """
    if path is None or not str(path).strip():
        raise BoardValidationError.single("FILE_NOT_FOUND", "Board file path cannot be empty")

    board_file = Path(path)
    if not board_file.is_file():
        raise BoardValidationError.single("FILE_NOT_FOUND", f"Board file not found: '{path}'")

    return board_file


def load_board_file(path: Optional[Union[str, Path]]) -> BoardDefinition:
    """
    Read, normalize and validate a board file.

    Raises BoardValidationError if the file is missing, unreadable, empty or
    holds an invalid board.
    """
    board_file = ensure_board_file(path)

    try:
        text = board_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BoardValidationError.single(
            "FILE_INVALID",
            f"Board file is invalid, empty, or has the wrong encoding: '{path}' ({e})"
        ) from e

    lines = split_board_text(text)
    if not lines:
        raise BoardValidationError.single("FILE_INVALID", f"Board file is empty: '{path}'")

    board = parse_board(lines)
    logger.debug("Loaded board %s (%dx%d)", board_file, board.width, board.height)
    return board
