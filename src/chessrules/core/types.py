"""Square type alias and coordinate helpers.

Board layout (row-major, Black at the top):
    (0, 0)=a8, (0, 1)=b8, ..., (0, 7)=h8
    ...
    (7, 0)=a1, (7, 1)=b1, ..., (7, 7)=h1
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8
_FILES = "abcdefgh"


def is_on_board(row: int, col: int) -> bool:
    """Whether (row, col) lies inside the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_valid_square(sq: object) -> bool:
    """Check whether *sq* is a well-formed on-board ``(row, col)`` pair."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    row, col = sq
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    return is_on_board(row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 4) → 'e1', (0, 0) → 'a8'."""
    row, col = sq
    return _FILES[col] + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), _FILES.index(name[0]))
