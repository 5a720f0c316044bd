"""Game state machine — turn order, status transitions, captures, promotion."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus, PieceKind
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.options import DEFAULT_OPTIONS, RulesOptions
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, is_valid_square, square_name

_LOGGER = logging.getLogger(__name__)

PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)

_PROMOTION_ROWS = (0, 7)


class IllegalMoveError(ValueError):
    """Raised when a move is not legal for the side to move."""


def _no_captures() -> dict[Color, list[Piece]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    promotion: PieceKind | None = None


@dataclass
class GameState:
    """Drives a game between two local players on top of :class:`Rules`.

    This is a pure data/logic class — no threading, no UI.  The board is
    replaced, never mutated, on every transition.
    """

    options: RulesOptions = DEFAULT_OPTIONS
    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    status: GameStatus = field(default=GameStatus.IN_PROGRESS, init=False)
    captured: dict[Color, list[Piece]] = field(default_factory=_no_captures, init=False)
    promotion_square: Square | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, board: Board | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game, optionally from a custom board."""
        self.board = Board.initial() if board is None else board.copy()
        self.side_to_move = side_to_move
        self.captured = _no_captures()
        self.promotion_square = None
        self.move_history.clear()
        self._update_status()

    def reset(self) -> None:
        self.setup()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def awaiting_promotion(self) -> bool:
        return self.status == GameStatus.PROMOTION

    @property
    def king_in_check_square(self) -> Square | None:
        """Square of the side to move's king while it stands in check."""
        if self.status not in (GameStatus.CHECK, GameStatus.CHECKMATE):
            return None
        return self.board.find_king(self.side_to_move)

    def legal_moves(self, sq: Square) -> list[Square]:
        """Legal destinations for the side to move's piece on *sq*."""
        if self.is_game_over or self.awaiting_promotion:
            return []
        piece = self.board.piece_at(sq)
        if piece is None or piece.color != self.side_to_move:
            return []
        return MoveGenerator(self.board, self.options).legal_moves(sq)

    # ── Transitions ──────────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Validate and play a move for the side to move.

        A pawn reaching the last row leaves the game in PROMOTION with the
        turn unchanged until :meth:`promote` is called.
        """
        if to_sq not in self.legal_moves(from_sq):
            raise IllegalMoveError(
                f"Illegal move for {self.side_to_move}: "
                f"{_describe(from_sq)}-{_describe(to_sq)}"
            )

        piece = self.board.piece_at(from_sq)
        captured = self.board.piece_at(to_sq)
        if captured is not None:
            self.captured[captured.color].append(captured)

        self.board = self.board.moved(from_sq, to_sq)
        record = MoveRecord(from_sq, to_sq, piece, captured)
        self.move_history.append(record)

        if piece.kind == PieceKind.PAWN and to_sq[0] in _PROMOTION_ROWS:
            self.promotion_square = to_sq
            self.status = GameStatus.PROMOTION
            _LOGGER.debug("Promotion pending on %s", square_name(to_sq))
            return record

        self._end_turn()
        return record

    def promote(self, kind: PieceKind) -> None:
        """Replace the pending pawn with *kind* and hand the turn over."""
        if self.promotion_square is None:
            raise ValueError("No promotion is pending")
        if kind not in PROMOTION_KINDS:
            raise ValueError(f"Cannot promote to {kind.name}")

        board = self.board.copy()
        board[self.promotion_square] = Piece(self.side_to_move, kind)
        self.board = board
        self.move_history[-1].promotion = kind
        self.promotion_square = None
        self._end_turn()

    # ── Internal ─────────────────────────────────────────────────────────

    def _end_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite
        self._update_status()

    def _update_status(self) -> None:
        self.status = Rules.status(self.side_to_move, self.board, self.options)
        _LOGGER.debug("%s to move: %s", self.side_to_move, self.status.name)


def _describe(sq: Square) -> str:
    return square_name(sq) if is_valid_square(sq) else repr(sq)
