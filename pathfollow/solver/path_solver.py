from pathlib import Path
from typing import Iterable, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from ..board.loader import ensure_board_file, load_board_file
from ..board.models import BoardDefinition
from ..board.parsing import parse_board, validate_target_word
from .backtracking import BacktrackingSolver
from .models import SolveResult, SolverConfig, VisitCallback


class PathFollowingSolver(BaseModel):
    """
    A board paired with the word its path has to spell.

    Validates its inputs on construction, so an instance always holds a
    usable board and a well-formed target word.

    Attributes:
        board: The validated board definition
        target_word: Upper-case word the path must spell
        config: Node/time budget for each search
        on_visit: Optional callback receiving every search step
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    board: BoardDefinition
    target_word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    config: SolverConfig = Field(default_factory=SolverConfig)
    on_visit: Optional[VisitCallback] = None

    def model_post_init(self, __context) -> None:
        """Record the target word on the board as well."""
        self.board.target_word = self.target_word

    @classmethod
    def create(
        cls,
        board_path: Optional[Union[str, Path]],
        target_word: Optional[str],
        config: Optional[SolverConfig] = None,
        on_visit: Optional[VisitCallback] = None,
    ) -> "PathFollowingSolver":
        """
        Factory method building a solver from a board file.

        The path is checked first, then the word, then the board itself.

        Args:
            board_path: Path to the board text file
            target_word: Word the path must spell (case-insensitive)
            config: Optional search budget
            on_visit: Optional per-step callback

        Returns:
            A ready PathFollowingSolver

        Raises:
            BoardValidationError: If the file, the word or the board is invalid
        """
        ensure_board_file(board_path)
        word = validate_target_word(target_word)
        board = load_board_file(board_path)

        return cls(
            board=board,
            target_word=word,
            config=config or SolverConfig(),
            on_visit=on_visit,
        )

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        target_word: Optional[str],
        config: Optional[SolverConfig] = None,
        on_visit: Optional[VisitCallback] = None,
    ) -> "PathFollowingSolver":
        """Factory method building a solver from in-memory board lines."""
        word = validate_target_word(target_word)
        board = parse_board(lines)

        return cls(
            board=board,
            target_word=word,
            config=config or SolverConfig(),
            on_visit=on_visit,
        )

    def solve(self) -> SolveResult:
        """Run a fresh search on the board."""
        solver = BacktrackingSolver(
            self.board,
            on_visit=self.on_visit,
            config=self.config,
        )
        return solver.find_solution(self.board.entry, self.board.exit, self.target_word)
