"""Reference boards shipped with pathfollow."""

from pathlib import Path
from typing import Dict, List

BOARDS_DIR = Path(__file__).parent

# Bundled board name -> the word its path spells
BUILTIN_BOARDS: Dict[str, str] = {
    "board1": "ACB",
    "board2": "ABCD",
    "board3": "BEEFCAKE",
    "complex_board": "ABCDEFG",
}


def board_path(name: str) -> Path:
    """
    Return the path of a bundled board file.

    Raises KeyError if no board with that name is bundled.
    """
    path = BOARDS_DIR / f"{name}.txt"
    if not path.is_file():
        raise KeyError(f"Unknown bundled board: '{name}'")
    return path


def available_boards() -> List[str]:
    """Names of every bundled board file."""
    return sorted(p.stem for p in BOARDS_DIR.glob("*.txt"))
