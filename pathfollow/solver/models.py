"""
Pydantic models for the solver layer.

This module contains the solver configuration, search results and the
batch-run configuration read by the command line entry point. The search
itself lives in backtracking.py.
"""

from typing import Callable, List, Optional, Literal
from pydantic import BaseModel, Field

from ..board.models import BoardDefinition, Position


# Type aliases
SolveStatus = Literal["found", "not_found", "budget_exhausted"]
VisitCallback = Callable[[BoardDefinition, str, str], None]


class SolverConfig(BaseModel):
    """Limits applied to a single search. None means unbounded."""
    max_nodes: Optional[int] = Field(None, ge=1)
    time_budget_s: Optional[float] = Field(None, gt=0)


class SolveResult(BaseModel):
    """Outcome of one search."""
    found: bool
    status: SolveStatus
    solution_word: str = ""
    path_word: str = ""
    path_cells: List[Position] = Field(default_factory=list)
    nodes_visited: int = 0
    elapsed_seconds: float = 0.0


class PuzzleConfig(BaseModel):
    """A board (file path or bundled board name) and the word to spell on it."""
    board: str
    word: Optional[str] = None
    name: Optional[str] = None


class RunConfig(BaseModel):
    """Configuration for a batch of puzzles."""
    puzzles: List[PuzzleConfig] = Field(default_factory=list)
    solver: SolverConfig = Field(default_factory=SolverConfig)
    animate: bool = False
    frame_delay_s: float = Field(0.01, ge=0)


class PuzzleResult(BaseModel):
    """Result of solving one configured puzzle."""
    name: str
    board: str
    word: Optional[str] = None
    result: Optional[SolveResult] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class RunResult(BaseModel):
    """Results of a complete run."""
    puzzles: List[PuzzleResult] = Field(default_factory=list)
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0

    @property
    def solved(self) -> int:
        """Number of puzzles with a found path."""
        return sum(1 for p in self.puzzles if p.result is not None and p.result.found)
