"""Data models for maze boards."""

import string
from enum import Enum
from typing import List, Optional, NamedTuple, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Symbol(str, Enum):
    """Special characters that control movement and positions on a board."""
    ENTRY = '@'
    EXIT = 'x'
    JUNCTION = '+'
    HORIZONTAL = '-'
    VERTICAL = '|'
    BLANK = ' '


class CellKind(Enum):
    """Closed classification of every legal board character."""
    ENTRY = "entry"
    EXIT = "exit"
    JUNCTION = "junction"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    LETTER = "letter"
    BLANK = "blank"


LETTERS = frozenset(string.ascii_uppercase)
MOVEMENT_SYMBOLS = frozenset({Symbol.JUNCTION.value, Symbol.HORIZONTAL.value, Symbol.VERTICAL.value})
TRAVERSABLE_SYMBOLS = LETTERS | MOVEMENT_SYMBOLS | {Symbol.ENTRY.value, Symbol.EXIT.value}
LEGAL_SYMBOLS = TRAVERSABLE_SYMBOLS | {Symbol.BLANK.value}

_SYMBOL_KINDS = {
    Symbol.ENTRY.value: CellKind.ENTRY,
    Symbol.EXIT.value: CellKind.EXIT,
    Symbol.JUNCTION.value: CellKind.JUNCTION,
    Symbol.HORIZONTAL.value: CellKind.HORIZONTAL,
    Symbol.VERTICAL.value: CellKind.VERTICAL,
    Symbol.BLANK.value: CellKind.BLANK,
}


def cell_kind(ch: str) -> Optional[CellKind]:
    """Classify a board character, or return None if it is not legal."""
    if ch in LETTERS:
        return CellKind.LETTER
    return _SYMBOL_KINDS.get(ch)


class Position(NamedTuple):
    """A cell coordinate on the board (column x, row y)."""
    x: int
    y: int


TunnelMask = Tuple[Tuple[bool, ...], ...]


class BoardIssue(BaseModel):
    """A single board or input validation problem."""
    code: str
    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    character: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of validating raw board lines."""
    valid: bool
    errors: List[BoardIssue] = Field(default_factory=list)
    lines: List[str] = Field(default_factory=list)  # Normalized lines
    entry: Optional[Position] = None
    exit: Optional[Position] = None


class BoardValidationError(ValueError):
    """Raised when a board, board source or target word is rejected.

    ``code`` and ``message`` describe the first problem found; ``errors``
    holds every problem that was collected.
    """

    def __init__(self, errors: List[BoardIssue]):
        if not errors:
            raise ValueError("BoardValidationError requires at least one issue")
        self.errors = list(errors)
        self.code = errors[0].code
        self.message = errors[0].message
        super().__init__(self.message)

    @classmethod
    def single(cls, code: str, message: str, **details) -> "BoardValidationError":
        return cls([BoardIssue(code=code, message=message, **details)])


class SearchInProgressError(RuntimeError):
    """Raised when a second search is started on a board that is being searched."""


class BoardDefinition(BaseModel):
    """
    A validated maze board together with its search masks.

    Attributes:
        grid: Normalized board rows, all of equal width
        width: Number of columns
        height: Number of rows
        entry: Coordinate of the entry marker
        exit: Coordinate of the exit marker
        tunnels: Cells where a perpendicular path may cross (never changes)
        solution: Cells on the in-progress or found path, indexed [y][x]
        target_word: Word the path has to spell, when one has been assigned
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    grid: List[str]
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    entry: Position
    exit: Position
    tunnels: TunnelMask
    solution: List[List[bool]] = Field(default_factory=list)
    target_word: Optional[str] = Field(None, min_length=1, pattern=r'^[A-Z]+$')
    _search_active: bool = False

    def model_post_init(self, __context) -> None:
        """Allocate an empty solution mask when none was given."""
        if not self.solution:
            self.reset_solution()

    def reset_solution(self) -> None:
        """Clear every mark from the solution mask."""
        self.solution = [[False] * self.width for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def symbol_at(self, x: int, y: int) -> str:
        return self.grid[y][x]

    def is_tunnel(self, x: int, y: int) -> bool:
        return self.tunnels[y][x]

    def is_visited(self, x: int, y: int) -> bool:
        return self.solution[y][x]

    @property
    def search_active(self) -> bool:
        """Whether a search currently owns this board's solution mask."""
        return self._search_active
