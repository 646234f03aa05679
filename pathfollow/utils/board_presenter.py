import sys
import time
from typing import Optional, TextIO

from ..board.grid import render_trail
from ..board.models import BoardDefinition

CLEAR_SCREEN = "\033[2J\033[H"


def render_frame(board: BoardDefinition, current_word: str, path_word: str) -> str:
    """Render one search step: the current trail followed by the word and path so far."""
    return f"{render_trail(board)}\n\nWORD: {current_word}\nPATH: {path_word}"


class BoardPresenter:
    """
    Search observer that prints every step of the solver.

    Pass an instance as ``on_visit`` to watch the path being built. Printing
    happens synchronously inside the search, so ``delay_s`` directly slows
    the solver down.
    """

    def __init__(self, stream: Optional[TextIO] = None, delay_s: float = 0.01, clear: bool = True):
        self.stream = stream or sys.stdout
        self.delay_s = delay_s
        self.clear = clear
        self.frames = 0

    def __call__(self, board: BoardDefinition, current_word: str, path_word: str) -> None:
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        print(render_frame(board, current_word, path_word), file=self.stream, flush=True)
        self.frames += 1

        if self.delay_s > 0:
            time.sleep(self.delay_s)


if __name__ == '__main__':
    from ..boards import BUILTIN_BOARDS, board_path
    from ..solver.path_solver import PathFollowingSolver

    name = sys.argv[1] if len(sys.argv) > 1 else "board1"
    solver = PathFollowingSolver.create(
        board_path(name),
        BUILTIN_BOARDS[name],
        on_visit=BoardPresenter(delay_s=0.05),
    )
    result = solver.solve()

    print()
    print(f"FINAL WORD: {result.solution_word}")
    print(f"FINAL PATH: {result.path_word}")
