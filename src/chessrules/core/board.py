"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chessrules.core.enums import Color, PieceKind
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, is_valid_square

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """8x8 grid of ``Piece | None`` with value semantics.

    Rules code only reads a board; every simulated move goes through
    :meth:`moved`, which returns an independent copy.  Callers may still
    place pieces with item assignment while setting up a position.
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise ValueError(f"Square off the board: {sq!r}")
        row, col = sq
        return self._rows[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_valid_square(sq):
            raise ValueError(f"Square off the board: {sq!r}")
        row, col = sq
        self._rows[row][col] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` when empty or off the board."""
        if not is_valid_square(sq):
            return None
        row, col = sq
        return self._rows[row][col]

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for row, cells in enumerate(self._rows):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield (row, col), piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, row-major."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self.occupied():
            if piece.kind == PieceKind.KING and piece.color == color:
                return sq
        return None

    def rows(self) -> list[list[Piece | None]]:
        """Fresh nested-list snapshot of the grid."""
        return [cells.copy() for cells in self._rows]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._rows = [cells.copy() for cells in self._rows]
        return b

    def moved(self, from_sq: Square, to_sq: Square) -> Board:
        """New board with the piece on *from_sq* relocated to *to_sq*.

        Whatever stood on *to_sq* is overwritten.  ``self`` is left untouched.
        """
        b = self.copy()
        b[to_sq] = self[from_sq]
        b[from_sq] = None
        return b

    def clear(self) -> None:
        self._rows = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, Black on rows 0-1."""
        b = cls()
        for col, kind in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(Color.BLACK, kind)
            b[(1, col)] = Piece(Color.BLACK, PieceKind.PAWN)
            b[(6, col)] = Piece(Color.WHITE, PieceKind.PAWN)
            b[(7, col)] = Piece(Color.WHITE, kind)
        return b

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[Piece | None]]) -> Board:
        """Clone a caller-owned 8x8 grid into a new board."""
        if len(grid) != BOARD_SIZE or any(len(cells) != BOARD_SIZE for cells in grid):
            raise ValueError("Board grid must be 8x8")
        b = cls()
        b._rows = [list(cells) for cells in grid]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        lines: list[str] = []
        for row, cells in enumerate(self._rows):
            line = " ".join(str(p) if p else "." for p in cells)
            lines.append(f"{BOARD_SIZE - row} {line}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
