"""FEN piece-placement parsing and serialization.

Only the placement field is meaningful here: castling, en passant and move
clocks are not part of the rules model.  A full FEN string is accepted and
everything after the first field is ignored.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_fen(fen: str) -> Board:
    """Parse the placement field of a FEN string into a :class:`Board`."""
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    # FEN lists rank 8 first, which is row 0 of the grid.
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise *board* to a FEN placement field."""
    rows: list[str] = []
    for cells in board.rows():
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
