"""Pseudo-legal and legal move generation + attack detection.

Layers build strictly upward: piece movement rules, then attack detection on
top of them, then the self-check filter on top of attack detection.
"""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceKind
from chessrules.core.options import DEFAULT_OPTIONS, RulesOptions
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_on_board, is_valid_square

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDING_DIRS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.ROOK: ROOK_DIRS,
    PieceKind.BISHOP: BISHOP_DIRS,
    PieceKind.QUEEN: QUEEN_DIRS,
}

_STEP_OFFSETS: dict[PieceKind, tuple[tuple[int, int], ...]] = {
    PieceKind.KNIGHT: KNIGHT_OFFSETS,
    PieceKind.KING: KING_OFFSETS,
}

_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


class MoveGenerator:
    """Move rules evaluated against a single :class:`Board`.

    The generator never mutates the board it was given; legality checks run
    on copies produced by :meth:`Board.moved`.
    """

    __slots__ = ("_board", "_options")

    def __init__(self, board: Board, options: RulesOptions | None = None) -> None:
        self._board = board
        self._options = options or DEFAULT_OPTIONS

    # -- Pseudo-legal moves -------------------------------------------------

    def pseudo_moves(self, sq: Square) -> list[Square]:
        """Destinations for the piece on *sq*, ignoring self-check."""
        piece = self._board.piece_at(sq)
        if piece is None:
            return []

        kind = piece.kind
        if kind == PieceKind.PAWN:
            return self._gen_pawn(sq, piece)
        if kind in _SLIDING_DIRS:
            return self._gen_sliding(sq, piece, _SLIDING_DIRS[kind])
        return self._gen_steps(sq, piece, _STEP_OFFSETS[kind])

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        if not is_valid_square(sq):
            return False

        for from_sq, piece in self._board.occupied():
            if piece.color != by_color:
                continue
            if piece.kind == PieceKind.PAWN and not self._options.pawn_push_attacks:
                if sq in self._pawn_attack_squares(from_sq, piece.color):
                    return True
                continue
            if sq in self.pseudo_moves(from_sq):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A board without a king for *color* is never in check.
        """
        king_sq = self._board.find_king(color)
        if king_sq is None:
            _LOGGER.debug("No %s king on board; treating as not in check", color.name)
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Legal moves --------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Square]:
        """Pseudo-moves of the piece on *sq* that keep its own king safe."""
        piece = self._board.piece_at(sq)
        if piece is None:
            return []

        options = self._options
        legal: list[Square] = []
        for to_sq in self.pseudo_moves(sq):
            after = MoveGenerator(self._board.moved(sq, to_sq), options)
            if not after.is_in_check(piece.color):
                legal.append(to_sq)
        return legal

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the piece on *from_sq* may legally move to *to_sq*."""
        return to_sq in self.legal_moves(from_sq)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece) -> list[Square]:
        board = self._board
        row, col = sq
        step = piece.color.forward
        moves: list[Square] = []

        one_step = (row + step, col)
        if is_on_board(*one_step) and board.is_empty(one_step):
            moves.append(one_step)
            if row == _PAWN_START_ROW[piece.color]:
                two_step = (row + 2 * step, col)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for cap_sq in self._pawn_attack_squares(sq, piece.color):
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                moves.append(cap_sq)
        return moves

    @staticmethod
    def _pawn_attack_squares(sq: Square, color: Color) -> list[Square]:
        row, col = sq
        ahead = row + color.forward
        return [
            (ahead, col + side)
            for side in (-1, 1)
            if is_on_board(ahead, col + side)
        ]

    def _gen_steps(
        self,
        sq: Square,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Square]:
        board = self._board
        row, col = sq
        moves: list[Square] = []
        for dr, dc in offsets:
            to_row, to_col = row + dr, col + dc
            if not is_on_board(to_row, to_col):
                continue
            target = board[(to_row, to_col)]
            if target is None or target.color != piece.color:
                moves.append((to_row, to_col))
        return moves

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Square]:
        board = self._board
        row, col = sq
        moves: list[Square] = []
        for dr, dc in directions:
            to_row, to_col = row + dr, col + dc
            while is_on_board(to_row, to_col):
                target = board[(to_row, to_col)]
                if target is None:
                    moves.append((to_row, to_col))
                    to_row += dr
                    to_col += dc
                    continue
                if target.color != piece.color:
                    moves.append((to_row, to_col))
                break
        return moves


# -- Functional API ---------------------------------------------------------


def pseudo_moves(
    square: Square, board: Board, options: RulesOptions | None = None
) -> list[Square]:
    """Destinations reachable by the piece on *square*, ignoring self-check."""
    return MoveGenerator(board, options).pseudo_moves(square)


def is_attacked(
    square: Square, by_color: Color, board: Board, options: RulesOptions | None = None
) -> bool:
    """Whether any piece of *by_color* attacks *square*."""
    return MoveGenerator(board, options).is_square_attacked(square, by_color)


def is_king_in_check(
    color: Color, board: Board, options: RulesOptions | None = None
) -> bool:
    """Whether *color*'s king is attacked; ``False`` when it has no king."""
    return MoveGenerator(board, options).is_in_check(color)


def legal_moves(
    square: Square, board: Board, options: RulesOptions | None = None
) -> list[Square]:
    """Destinations for the piece on *square* that do not expose its king."""
    return MoveGenerator(board, options).legal_moves(square)
