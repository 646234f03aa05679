"""Board loading, validation and grid analysis for pathfollow."""

from .models import (
    Symbol,
    CellKind,
    Position,
    TunnelMask,
    BoardIssue,
    ValidationResult,
    BoardValidationError,
    SearchInProgressError,
    BoardDefinition,
    LETTERS,
    LEGAL_SYMBOLS,
    TRAVERSABLE_SYMBOLS,
    cell_kind,
)
from .parsing import (
    split_board_text,
    normalize_lines,
    validate_lines,
    parse_board,
    load_board,
    validate_target_word,
)
from .grid import is_tunnel, find_tunnels, compute_tunnels, tunnel_positions, render_grid, render_trail, visualize
from .loader import ensure_board_file, load_board_file

__all__ = [
    # Models
    "Symbol",
    "CellKind",
    "Position",
    "TunnelMask",
    "BoardIssue",
    "ValidationResult",
    "BoardValidationError",
    "SearchInProgressError",
    "BoardDefinition",
    "LETTERS",
    "LEGAL_SYMBOLS",
    "TRAVERSABLE_SYMBOLS",
    "cell_kind",
    # Parsing
    "split_board_text",
    "normalize_lines",
    "validate_lines",
    "parse_board",
    "load_board",
    "validate_target_word",
    # Grid utilities
    "is_tunnel",
    "find_tunnels",
    "compute_tunnels",
    "tunnel_positions",
    "render_grid",
    "render_trail",
    "visualize",
    # Files
    "ensure_board_file",
    "load_board_file",
]
