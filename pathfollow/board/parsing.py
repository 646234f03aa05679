"""Board normalization and validation."""

import re
from typing import Iterable, List, Optional

from .grid import find_tunnels
from .models import (
    BoardDefinition,
    BoardIssue,
    BoardValidationError,
    LEGAL_SYMBOLS,
    Position,
    Symbol,
    ValidationResult,
)


def split_board_text(text: str) -> List[str]:
    """Split raw board text into lines, dropping line terminators only."""
    return text.splitlines()


def normalize_lines(lines: Iterable[str]) -> List[str]:
    """
    Right-pad every line with blanks to the length of the longest line.

    Line terminators are stripped first; no other content is touched.
    """
    stripped = [line.rstrip('\r\n') for line in lines]
    if not stripped:
        return []

    width = max(len(line) for line in stripped)
    return [line.ljust(width, Symbol.BLANK.value) for line in stripped]


def validate_lines(lines: Iterable[str]) -> ValidationResult:
    """
    Validate raw board lines, collecting every problem.

    Each line is checked for illegal characters first and then scanned for
    entry/exit markers. Missing markers are reported after the full scan.

    Returns a ValidationResult with the normalized lines and, when found,
    the entry and exit coordinates.
    """
    normalized = normalize_lines(lines)
    errors: List[BoardIssue] = []

    if not normalized:
        errors.append(BoardIssue(
            code="EMPTY_BOARD",
            message="Board is empty"
        ))
        return ValidationResult(valid=False, errors=errors)

    entry: Optional[Position] = None
    exit_position: Optional[Position] = None

    for y, line in enumerate(normalized):
        for x, ch in enumerate(line):
            if ch not in LEGAL_SYMBOLS:
                errors.append(BoardIssue(
                    code="INVALID_CHARACTER",
                    message=f"Line {y + 1} contains invalid character '{ch}'",
                    line=y + 1,
                    column=x + 1,
                    character=ch
                ))

        for x, ch in enumerate(line):
            if ch == Symbol.ENTRY.value:
                if entry is not None:
                    errors.append(BoardIssue(
                        code="DUPLICATE_ENTRY",
                        message=f"Entry position is defined more than once (line {y + 1}, column {x + 1})",
                        line=y + 1,
                        column=x + 1,
                        character=ch
                    ))
                    continue
                entry = Position(x, y)
            elif ch == Symbol.EXIT.value:
                if exit_position is not None:
                    errors.append(BoardIssue(
                        code="DUPLICATE_EXIT",
                        message=f"Exit position is defined more than once (line {y + 1}, column {x + 1})",
                        line=y + 1,
                        column=x + 1,
                        character=ch
                    ))
                    continue
                exit_position = Position(x, y)

    if entry is None:
        errors.append(BoardIssue(
            code="ENTRY_NOT_FOUND",
            message="Entry position not found"
        ))

    if exit_position is None:
        errors.append(BoardIssue(
            code="EXIT_NOT_FOUND",
            message="Exit position not found"
        ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        lines=normalized,
        entry=entry,
        exit=exit_position,
    )


def parse_board(lines: Iterable[str]) -> BoardDefinition:
    """
    Turn raw board lines into a validated BoardDefinition.

    Raises BoardValidationError if any check fails; nothing is built in
    that case.
    """
    result = validate_lines(lines)
    if not result.valid:
        raise BoardValidationError(result.errors)

    return BoardDefinition(
        grid=result.lines,
        width=len(result.lines[0]),
        height=len(result.lines),
        entry=result.entry,
        exit=result.exit,
        tunnels=find_tunnels(result.lines),
    )


def load_board(lines: Iterable[str]) -> BoardDefinition:
    """Alias of parse_board for callers that think in terms of loading."""
    return parse_board(lines)


def validate_target_word(word: Optional[str]) -> str:
    """
    Normalize a target word to upper case and check it.

    Raises BoardValidationError for a missing, blank or non-alphabetic word.
    """
    if word is None or not word.strip():
        raise BoardValidationError.single("EMPTY_WORD", "Target word cannot be empty")

    # Checked before upper-casing: some letters expand ('ß' -> 'SS')
    stripped = word.strip()
    if not re.fullmatch(r'[A-Za-z]+', stripped):
        raise BoardValidationError.single(
            "INVALID_WORD",
            f"Target word must contain only letters A-Z: '{word}'"
        )

    return stripped.upper()
