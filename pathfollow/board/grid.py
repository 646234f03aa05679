"""Grid analysis and rendering utilities."""

from typing import List, Sequence

from .models import BoardDefinition, CellKind, Position, Symbol, TunnelMask, cell_kind


def in_bounds(grid: Sequence[str], x: int, y: int) -> bool:
    """Check whether (x, y) lies inside a rectangular grid."""
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def _flanked_vertically(grid: Sequence[str], x: int, y: int) -> bool:
    """Both the cell above and the cell below are vertical segments."""
    return (
        in_bounds(grid, x, y - 1)
        and in_bounds(grid, x, y + 1)
        and grid[y - 1][x] == Symbol.VERTICAL.value
        and grid[y + 1][x] == Symbol.VERTICAL.value
    )


def _flanked_horizontally(grid: Sequence[str], x: int, y: int) -> bool:
    """Both the cell to the left and the cell to the right are horizontal segments."""
    return (
        in_bounds(grid, x - 1, y)
        and in_bounds(grid, x + 1, y)
        and grid[y][x - 1] == Symbol.HORIZONTAL.value
        and grid[y][x + 1] == Symbol.HORIZONTAL.value
    )


def is_tunnel(grid: Sequence[str], x: int, y: int) -> bool:
    """
    Decide whether a second path may cross the cell at (x, y).

    A horizontal segment is a tunnel when it sits between two vertical
    segments, a vertical segment when it sits between two horizontal ones,
    and a letter only when both hold (a four-way crossing). Markers,
    junctions and blanks never are.
    """
    kind = cell_kind(grid[y][x])

    if kind is CellKind.HORIZONTAL:
        return _flanked_vertically(grid, x, y)
    if kind is CellKind.VERTICAL:
        return _flanked_horizontally(grid, x, y)
    if kind is CellKind.LETTER:
        return _flanked_vertically(grid, x, y) and _flanked_horizontally(grid, x, y)
    return False


def find_tunnels(grid: Sequence[str]) -> TunnelMask:
    """Compute the tunnel mask of a normalized grid, indexed [y][x]."""
    return tuple(
        tuple(is_tunnel(grid, x, y) for x in range(len(row)))
        for y, row in enumerate(grid)
    )


def compute_tunnels(board: BoardDefinition) -> TunnelMask:
    """Compute the tunnel mask for a loaded board."""
    return find_tunnels(board.grid)


def tunnel_positions(tunnels: TunnelMask) -> List[Position]:
    """List the (x, y) coordinates flagged in a tunnel mask."""
    return [
        Position(x, y)
        for y, row in enumerate(tunnels)
        for x, flagged in enumerate(row)
        if flagged
    ]


def render_grid(board: BoardDefinition) -> str:
    """Render the board to a string."""
    return '\n'.join(board.grid)


def render_trail(board: BoardDefinition, filler: str = Symbol.BLANK.value) -> str:
    """Render only the cells currently marked in the solution mask."""
    lines = [
        ''.join(
            board.grid[y][x] if board.solution[y][x] else filler
            for x in range(board.width)
        ).rstrip()
        for y in range(board.height)
    ]

    return '\n'.join(lines)


def visualize(text: str) -> str:
    """
    Quick visualization of a board's tunnels.

    Parses the board and returns it with every tunnel cell replaced by '#'.
    Raises BoardValidationError if parsing fails.
    """
    from .parsing import parse_board, split_board_text

    board = parse_board(split_board_text(text))

    lines = [
        ''.join(
            '#' if board.tunnels[y][x] else board.grid[y][x]
            for x in range(board.width)
        ).rstrip()
        for y in range(board.height)
    ]

    return '\n'.join(lines)
