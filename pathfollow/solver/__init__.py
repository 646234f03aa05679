"""Path search for pathfollow."""

from .models import (
    SolveStatus,
    VisitCallback,
    SolverConfig,
    SolveResult,
    PuzzleConfig,
    RunConfig,
    PuzzleResult,
    RunResult,
)
from .backtracking import BacktrackingSolver, letters_only, solve, ALL_DIRECTIONS, HORIZONTAL_DIRECTIONS, VERTICAL_DIRECTIONS
from .path_solver import PathFollowingSolver

__all__ = [
    "SolveStatus",
    "VisitCallback",
    "SolverConfig",
    "SolveResult",
    "PuzzleConfig",
    "RunConfig",
    "PuzzleResult",
    "RunResult",
    "BacktrackingSolver",
    "letters_only",
    "solve",
    "ALL_DIRECTIONS",
    "HORIZONTAL_DIRECTIONS",
    "VERTICAL_DIRECTIONS",
    "PathFollowingSolver",
]
