"""
Test suite for tunnel detection.

Tests the crossing rules for horizontal segments, vertical segments and
letters, plus the tunnels found on the bundled boards.
"""

import pytest

from pathfollow.board import (
    CellKind,
    Position,
    cell_kind,
    compute_tunnels,
    find_tunnels,
    is_tunnel,
    load_board_file,
    parse_board,
    tunnel_positions,
    visualize,
)
from pathfollow.boards import board_path


class TestCellKind:
    """Tests for character classification."""

    @pytest.mark.parametrize("ch,kind", [
        ("@", CellKind.ENTRY),
        ("x", CellKind.EXIT),
        ("+", CellKind.JUNCTION),
        ("-", CellKind.HORIZONTAL),
        ("|", CellKind.VERTICAL),
        ("Q", CellKind.LETTER),
        (" ", CellKind.BLANK),
    ])
    def test_legal_characters(self, ch, kind):
        assert cell_kind(ch) is kind

    @pytest.mark.parametrize("ch", ["a", "*", "#", "\t"])
    def test_illegal_characters(self, ch):
        assert cell_kind(ch) is None


class TestTunnelRules:
    """Tests for is_tunnel on small grids."""

    def test_horizontal_between_verticals(self):
        """'-' with '|' above and below is a crossing."""
        assert is_tunnel([" | ", "---", " | "], 1, 1) is True

    def test_horizontal_missing_vertical(self):
        """Changing one neighbour removes the flag."""
        assert is_tunnel(["   ", "---", " | "], 1, 1) is False
        assert is_tunnel([" + ", "---", " | "], 1, 1) is False

    def test_vertical_between_horizontals(self):
        """'|' with '-' left and right is a crossing."""
        assert is_tunnel([" | ", "-|-", " | "], 1, 1) is True

    def test_vertical_missing_horizontal(self):
        assert is_tunnel([" | ", " |-", " | "], 1, 1) is False
        assert is_tunnel([" | ", "-|+", " | "], 1, 1) is False

    def test_letter_needs_both(self):
        """A letter is only a tunnel at a four-way crossing."""
        assert is_tunnel([" | ", "-A-", " | "], 1, 1) is True
        assert is_tunnel([" | ", " A-", " | "], 1, 1) is False
        assert is_tunnel(["   ", "-A-", " | "], 1, 1) is False

    @pytest.mark.parametrize("ch", ["+", "@", "x", " "])
    def test_other_cells_never_tunnels(self, ch):
        """Junctions, markers and blanks never cross."""
        assert is_tunnel([" | ", f"-{ch}-", " | "], 1, 1) is False

    def test_edge_cells(self):
        """Neighbours outside the grid never count."""
        assert is_tunnel(["---", " | "], 1, 0) is False
        assert is_tunnel(["|-", "  "], 0, 0) is False

    def test_symmetry(self):
        """Flipping any flanking cell toggles the flag off and back on."""
        grid = [" | ", "---", " | "]
        assert is_tunnel(grid, 1, 1) is True

        for y in (0, 2):
            flipped = list(grid)
            flipped[y] = "   "
            assert is_tunnel(flipped, 1, 1) is False

    def test_find_tunnels_shape(self):
        """The mask covers every cell, indexed [y][x]."""
        grid = [" |  ", "----", " |  "]
        mask = find_tunnels(grid)
        assert len(mask) == 3
        assert all(len(row) == 4 for row in mask)
        assert tunnel_positions(mask) == [Position(1, 1)]


class TestBundledBoardTunnels:
    """Tunnels found on the reference boards."""

    def test_board1_has_none(self):
        board = load_board_file(board_path("board1"))
        assert tunnel_positions(board.tunnels) == []

    def test_board2(self):
        board = load_board_file(board_path("board2"))
        assert tunnel_positions(board.tunnels) == [Position(4, 3)]

    def test_board3(self):
        """A vertical crossing and a letter crossing."""
        board = load_board_file(board_path("board3"))
        assert tunnel_positions(board.tunnels) == [Position(6, 2), Position(3, 6)]
        assert board.grid[6][3] == "E"

    def test_complex_board(self):
        board = load_board_file(board_path("complex_board"))
        assert tunnel_positions(board.tunnels) == [Position(2, 4)]

    def test_compute_tunnels_matches_board(self):
        """Recomputing gives the mask stored at load time."""
        board = load_board_file(board_path("board3"))
        assert compute_tunnels(board) == board.tunnels


class TestVisualize:
    """Tests for the tunnel visualization helper."""

    def test_marks_tunnels(self):
        text = board_path("board2").read_text(encoding="utf-8")
        lines = visualize(text).split("\n")
        assert lines[3] == "  +-#-B--+"

    def test_invalid_board_raises(self):
        with pytest.raises(ValueError):
            visualize("+--")

    def test_parsed_board_tunnels(self):
        board = parse_board([" | ", "---", "@|x"])
        assert board.tunnels[1][1] is True
