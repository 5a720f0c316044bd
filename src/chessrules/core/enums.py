"""Core enumerations for the rules domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn step: White moves up the grid (toward row 0)."""
        return -1 if self is Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class GameStatus(IntEnum):
    """State of a game from the point of view of the side to move."""

    IN_PROGRESS = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    PROMOTION = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)
