"""
Test suite for loading boards from files.

Tests FILE_NOT_FOUND / FILE_INVALID handling and the bundled boards.
"""

import pytest

from pathfollow.board import BoardValidationError, Position, ensure_board_file, load_board_file
from pathfollow.boards import BUILTIN_BOARDS, available_boards, board_path


class TestBoardFiles:
    """Tests for reading board files."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_text("@-A\n  |\nx-+\n", encoding="utf-8")
        board = load_board_file(path)
        assert board.grid == ["@-A", "  |", "x-+"]
        assert board.entry == Position(0, 0)
        assert board.exit == Position(0, 2)

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_text("@-x", encoding="utf-8")
        assert load_board_file(str(path)).width == 3

    def test_windows_line_endings(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_bytes(b"@-+\r\n  x\r\n")
        assert load_board_file(path).grid == ["@-+", "  x"]

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_path(self, value):
        with pytest.raises(BoardValidationError) as exc:
            load_board_file(value)
        assert exc.value.code == "FILE_NOT_FOUND"

    def test_missing_file(self, tmp_path):
        with pytest.raises(BoardValidationError) as exc:
            load_board_file(tmp_path / "nope.txt")
        assert exc.value.code == "FILE_NOT_FOUND"
        assert "nope.txt" in exc.value.message

    def test_directory_is_not_a_board(self, tmp_path):
        with pytest.raises(BoardValidationError) as exc:
            ensure_board_file(tmp_path)
        assert exc.value.code == "FILE_NOT_FOUND"

    def test_wrong_encoding(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_bytes(b"@-\xff\xfe-x")
        with pytest.raises(BoardValidationError) as exc:
            load_board_file(path)
        assert exc.value.code == "FILE_INVALID"
        assert isinstance(exc.value.__cause__, UnicodeDecodeError)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_text("", encoding="utf-8")
        with pytest.raises(BoardValidationError) as exc:
            load_board_file(path)
        assert exc.value.code == "FILE_INVALID"

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_text("@---+\n    |\n    +\n", encoding="utf-8")
        with pytest.raises(BoardValidationError) as exc:
            load_board_file(path)
        assert exc.value.code == "EXIT_NOT_FOUND"


class TestBundledBoards:
    """Tests for the boards shipped with the package."""

    def test_every_reference_board_loads(self):
        for name in BUILTIN_BOARDS:
            board = load_board_file(board_path(name))
            assert board.grid[board.entry.y][board.entry.x] == "@"
            assert board.grid[board.exit.y][board.exit.x] == "x"

    def test_available_boards(self):
        names = available_boards()
        assert set(BUILTIN_BOARDS) <= set(names)
        assert "invalid_board" in names

    def test_invalid_board(self):
        with pytest.raises(BoardValidationError) as exc:
            load_board_file(board_path("invalid_board"))
        assert exc.value.code == "DUPLICATE_ENTRY"

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            board_path("no_such_board")
