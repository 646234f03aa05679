"""
Main entry point for solving path-following boards.

Usage:
    python -m pathfollow.main board1
    python -m pathfollow.main boards/maze.txt ABCD --animate
    python -m pathfollow.main --config puzzles.yaml --output results/run1.json --verbose
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml

from .board.loader import load_board_file
from .board.models import BoardValidationError
from .boards import BUILTIN_BOARDS, available_boards, board_path
from .solver import PathFollowingSolver, PuzzleConfig, PuzzleResult, RunConfig, RunResult
from .utils.board_presenter import BoardPresenter

logger = logging.getLogger("pathfollow")


def load_config(config_path: str) -> RunConfig:
    """Load a run configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return RunConfig(**data)


def resolve_board(board: str, base_dir: Optional[Path] = None) -> Tuple[Path, Optional[str]]:
    """
    Resolve a board reference to a file path and its default word.

    ``board`` is either a path to a board file (relative paths are looked up
    against ``base_dir`` when given) or the name of a bundled board.
    """
    candidate = Path(board)
    if base_dir is not None and not candidate.is_absolute():
        candidate = base_dir / candidate

    if candidate.is_file():
        return candidate, None

    if board in available_boards():
        return board_path(board), BUILTIN_BOARDS.get(board)

    # Let the loader report the missing file
    return candidate, None


def solve_puzzle(
    puzzle: PuzzleConfig,
    config: RunConfig,
    base_dir: Optional[Path] = None,
) -> PuzzleResult:
    """Solve one configured puzzle, turning validation failures into an error entry."""
    path, default_word = resolve_board(puzzle.board, base_dir)
    word = puzzle.word or default_word
    name = puzzle.name or puzzle.board

    presenter = BoardPresenter(delay_s=config.frame_delay_s) if config.animate else None

    try:
        if word is None:
            # No word to check yet, so report problems with the board itself first
            load_board_file(path)
        solver = PathFollowingSolver.create(path, word, config=config.solver, on_visit=presenter)
    except BoardValidationError as e:
        logger.error("Puzzle %s rejected: [%s] %s", name, e.code, e.message)
        return PuzzleResult(name=name, board=str(path), word=word, error=e.message, error_code=e.code)

    result = solver.solve()
    return PuzzleResult(name=name, board=str(path), word=solver.target_word, result=result)


def run(config: RunConfig, base_dir: Optional[Path] = None, verbose: bool = False) -> RunResult:
    """Solve every puzzle in ``config`` in order."""
    started_at = datetime.now()
    results = []

    for puzzle in config.puzzles:
        if verbose:
            print(f"Board: {puzzle.board}")
            print(f"Target word: {puzzle.word or BUILTIN_BOARDS.get(puzzle.board, '')}")
            print("Attempting to solve...")

        puzzle_result = solve_puzzle(puzzle, config, base_dir)
        results.append(puzzle_result)
        print_puzzle_result(puzzle_result)

    ended_at = datetime.now()
    return RunResult(
        puzzles=results,
        started_at=started_at.isoformat(),
        ended_at=ended_at.isoformat(),
        duration_seconds=(ended_at - started_at).total_seconds(),
    )


def print_puzzle_result(puzzle_result: PuzzleResult) -> None:
    """Print the outcome of one puzzle."""
    print()
    print(f"=== {puzzle_result.name} ===")

    if puzzle_result.error:
        print(f"Error: {puzzle_result.error}", file=sys.stderr)
        return

    result = puzzle_result.result
    if result.found:
        print("Solution Found!")
        print(f"FINAL WORD: {result.solution_word}")
        print(f"FINAL PATH: {result.path_word}")
    elif result.status == "budget_exhausted":
        print(f"No solution found within budget ({result.nodes_visited} nodes explored).")
    else:
        print("Unfortunately solution could not be found.")


def save_result(result: RunResult, path: Union[str, Path]) -> None:
    """Save the run result to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(result.model_dump(mode="json"), f, indent=2)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find a path through an ASCII maze that spells a word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Bundled boards: board1, board2, board3, complex_board

Example puzzles.yaml:
  solver:
    max_nodes: 100000
    time_budget_s: 5
  puzzles:
    - board: board3
    - board: mazes/custom.txt
      word: ABCD
        """
    )
    parser.add_argument(
        "board",
        nargs="?",
        help="Board file or bundled board name (not needed with --config)"
    )
    parser.add_argument(
        "word",
        nargs="?",
        help="Word the path must spell (defaults to the bundled board's word)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to a YAML file listing puzzles to solve"
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Print every search step"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to pause between animation frames (default: 0.01)"
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        help="Give up after visiting this many search nodes"
    )
    parser.add_argument(
        "--time-budget",
        type=float,
        default=None,
        help="Give up after this many seconds per puzzle"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and log solver activity"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    base_dir = None
    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
        base_dir = Path(args.config).resolve().parent
    elif args.board:
        config = RunConfig(puzzles=[PuzzleConfig(board=args.board, word=args.word)])
    else:
        print("Error: a board (or --config) is required", file=sys.stderr)
        return 1

    # Command line flags override the file
    overrides = {}
    if args.animate:
        overrides["animate"] = True
    if args.delay is not None:
        overrides["frame_delay_s"] = args.delay

    solver_overrides = {}
    if args.max_nodes is not None:
        solver_overrides["max_nodes"] = args.max_nodes
    if args.time_budget is not None:
        solver_overrides["time_budget_s"] = args.time_budget
    if solver_overrides:
        overrides["solver"] = {**config.solver.model_dump(), **solver_overrides}

    try:
        config = RunConfig.model_validate({**config.model_dump(), **overrides})
    except ValueError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    if args.verbose and args.config:
        print(f"Config: {args.config}")
        print(f"Puzzles: {len(config.puzzles)}")

    result = run(config, base_dir=base_dir, verbose=args.verbose)

    if args.output:
        save_result(result, args.output)
        if args.verbose:
            print()
            print(f"Results saved to: {args.output}")

    if any(p.error for p in result.puzzles):
        return 1
    if result.solved < len(result.puzzles):
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
