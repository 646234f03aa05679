"""
Backtracking search for a path that spells a target word.

The search is a depth-first walk from the entry marker. Every cell restricts
the directions that may follow it, letters are collected in visitation
order, and a branch is pruned as soon as the collected letters stop being a
prefix of the target word. Cells on the active branch are marked in the
board's solution mask; tunnel cells keep their mark after backtracking so a
crossing path can still use them.

Frames are kept on an explicit stack instead of the call stack, so deep
boards cannot overflow the interpreter's recursion limit.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..board.models import (
    BoardDefinition,
    LETTERS,
    Position,
    SearchInProgressError,
    Symbol,
    TRAVERSABLE_SYMBOLS,
    TunnelMask,
)
from ..board.parsing import validate_target_word
from .models import SolveResult, SolverConfig, VisitCallback

logger = logging.getLogger("pathfollow")

Direction = Tuple[int, int]

# Exploration order is fixed: it decides which path is found first.
ALL_DIRECTIONS: Tuple[Direction, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))  # right, down, left, up
HORIZONTAL_DIRECTIONS: Tuple[Direction, ...] = ((-1, 0), (1, 0))  # left, right
VERTICAL_DIRECTIONS: Tuple[Direction, ...] = ((0, -1), (0, 1))  # up, down

MOVES = {
    Symbol.HORIZONTAL.value: HORIZONTAL_DIRECTIONS,
    Symbol.VERTICAL.value: VERTICAL_DIRECTIONS,
    Symbol.JUNCTION.value: ALL_DIRECTIONS,
    Symbol.ENTRY.value: ALL_DIRECTIONS,
}


def letters_only(word: str) -> str:
    """Return the letters of ``word`` in order, dropping every other symbol."""
    return ''.join(ch for ch in word if ch in LETTERS)


@dataclass
class _Frame:
    """A cell on the active branch and the directions still left to try."""
    x: int
    y: int
    movement: str
    word: str
    path: str
    directions: Tuple[Direction, ...]
    next_direction: int = 0


class _BudgetExhausted(Exception):
    """Internal signal that the node or time budget ran out."""


class BacktrackingSolver:
    """
    Depth-first path search over a single board.

    Args:
        board: The board to search; its solution mask is reset and then
            mutated during the search
        tunnels: Tunnel mask to use (defaults to the board's own)
        on_visit: Optional callback invoked for every search node
        config: Optional node/time budget
    """

    def __init__(
        self,
        board: BoardDefinition,
        tunnels: Optional[TunnelMask] = None,
        on_visit: Optional[VisitCallback] = None,
        config: Optional[SolverConfig] = None,
    ):
        self.board = board
        self.tunnels = tunnels if tunnels is not None else board.tunnels
        self.on_visit = on_visit
        self.config = config or SolverConfig()

        self._target = ""
        self._exit = Position(-1, -1)
        self._nodes = 0
        self._deadline: Optional[float] = None
        self._found: Optional[Tuple[str, str]] = None

    def find_solution(self, entry: Position, exit_position: Position, target_word: str) -> SolveResult:
        """
        Search for a path from ``entry`` to ``exit_position`` spelling ``target_word``.

        The word is matched case-insensitively. Returns a SolveResult; "no path"
        and an exhausted budget are normal outcomes, not errors. Raises
        BoardValidationError for a missing or non-alphabetic target word and
        SearchInProgressError if another search currently owns the board.
        Exceptions raised by the visit callback propagate and abort the search.
        """
        target_word = validate_target_word(target_word)

        if self.board.search_active:
            raise SearchInProgressError("A search is already running on this board")

        self.board._search_active = True
        try:
            return self._run(Position(*entry), Position(*exit_position), target_word)
        finally:
            self.board._search_active = False

    def _run(self, entry: Position, exit_position: Position, target_word: str) -> SolveResult:
        self.board.reset_solution()
        self._target = target_word
        self._exit = exit_position
        self._nodes = 0
        self._found = None

        started = time.perf_counter()
        budget = self.config.time_budget_s
        self._deadline = started + budget if budget is not None else None

        logger.debug(
            "Searching %dx%d board for '%s' from %s to %s",
            self.board.width, self.board.height, target_word, tuple(entry), tuple(exit_position)
        )

        stack: List[_Frame] = []
        status = "not_found"
        try:
            self._search(entry, stack)
            if self._found is not None:
                status = "found"
        except _BudgetExhausted:
            status = "budget_exhausted"
            logger.warning(
                "Search budget exhausted after %d nodes (max_nodes=%s, time_budget_s=%s)",
                self._nodes, self.config.max_nodes, self.config.time_budget_s
            )

        elapsed = time.perf_counter() - started

        if status == "found":
            solution_word, path_word = self._found
            cells = [Position(frame.x, frame.y) for frame in stack] + [exit_position]
            logger.info("Found '%s' after %d nodes: %s", solution_word, self._nodes, path_word)
            return SolveResult(
                found=True,
                status="found",
                solution_word=solution_word,
                path_word=path_word,
                path_cells=cells,
                nodes_visited=self._nodes,
                elapsed_seconds=elapsed,
            )

        if status == "not_found":
            logger.info("No path spells '%s' (%d nodes explored)", target_word, self._nodes)

        return SolveResult(
            found=False,
            status=status,
            nodes_visited=self._nodes,
            elapsed_seconds=elapsed,
        )

    def _search(self, entry: Position, stack: List[_Frame]) -> None:
        """Drive the frame stack until a solution is found or it empties."""
        frame = self._visit(entry.x, entry.y, Symbol.BLANK.value, "", "")
        if frame is not None:
            stack.append(frame)

        while stack and self._found is None:
            top = stack[-1]

            if top.next_direction < len(top.directions):
                dx, dy = top.directions[top.next_direction]
                top.next_direction += 1
                child = self._visit(top.x + dx, top.y + dy, top.movement, top.word, top.path)
                if child is not None:
                    stack.append(child)
                continue

            # Every direction failed: backtrack, keeping tunnel marks
            stack.pop()
            if not self.tunnels[top.y][top.x]:
                self.board.solution[top.y][top.x] = False

    def _visit(self, x: int, y: int, prev_movement: str, word: str, path: str) -> Optional[_Frame]:
        """
        Process one search node.

        Returns a new frame when the cell extends the branch, or None when
        the branch dead-ends here or the solution was just recorded.
        """
        self._count_node()

        if self.on_visit is not None:
            self.on_visit(self.board, word, path)

        collected = letters_only(word)

        if collected == self._target and (x, y) == self._exit:
            self.board.solution[y][x] = True
            self._found = (word, path + self.board.grid[y][x])
            return None

        if not self._is_valid_position(x, y, collected):
            return None

        symbol = self.board.grid[y][x]
        movement = self._movement_for(x, y, prev_movement)

        if symbol in LETTERS and not self.board.solution[y][x]:
            word += symbol

        self.board.solution[y][x] = True
        return _Frame(x, y, movement, word, path + symbol, MOVES.get(movement, ()))

    def _is_valid_position(self, x: int, y: int, collected: str) -> bool:
        """Check bounds, symbol, revisits and the word prefix, in that order."""
        if not self.board.in_bounds(x, y):
            return False

        if self.board.grid[y][x] not in TRAVERSABLE_SYMBOLS:
            return False

        # Revisiting is only allowed where paths may cross
        if self.board.solution[y][x] and not self.tunnels[y][x]:
            return False

        if not self._target.startswith(collected):
            return False

        return True

    def _movement_for(self, x: int, y: int, prev_movement: str) -> str:
        """
        Decide which movement rule governs the next step from (x, y).

        Letters act as junctions, a tunnel that is already on the path keeps
        the previous movement so the crossing path continues straight, and
        every other cell uses its own symbol.
        """
        symbol = self.board.grid[y][x]

        if symbol in LETTERS:
            return Symbol.JUNCTION.value

        if self.board.solution[y][x] and self.tunnels[y][x]:
            return prev_movement

        return symbol

    def _count_node(self) -> None:
        max_nodes = self.config.max_nodes
        if max_nodes is not None and self._nodes >= max_nodes:
            raise _BudgetExhausted()

        if self._deadline is not None and time.perf_counter() > self._deadline:
            raise _BudgetExhausted()

        self._nodes += 1


def solve(
    board: BoardDefinition,
    tunnels: TunnelMask,
    entry_position: Position,
    exit_position: Position,
    target_word: str,
    on_visit: Optional[VisitCallback] = None,
    config: Optional[SolverConfig] = None,
) -> SolveResult:
    """Find a path on ``board`` that spells ``target_word``."""
    solver = BacktrackingSolver(board, tunnels=tunnels, on_visit=on_visit, config=config)
    return solver.find_solution(entry_position, exit_position, target_word)
