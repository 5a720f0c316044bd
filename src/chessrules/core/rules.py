"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.options import RulesOptions


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a color.

    Callers evaluate these against the opponent of the player who just
    moved.  Draws by repetition or the fifty-move rule are not detected.
    """

    @staticmethod
    def is_in_check(
        color: Color, board: Board, options: RulesOptions | None = None
    ) -> bool:
        return MoveGenerator(board, options).is_in_check(color)

    @staticmethod
    def has_any_legal_move(
        color: Color, board: Board, options: RulesOptions | None = None
    ) -> bool:
        """Whether any piece of *color* has at least one legal move."""
        gen = MoveGenerator(board, options)
        return any(gen.legal_moves(sq) for sq in board.all_pieces(color))

    @staticmethod
    def is_checkmate(
        color: Color, board: Board, options: RulesOptions | None = None
    ) -> bool:
        if not Rules.is_in_check(color, board, options):
            return False
        return not Rules.has_any_legal_move(color, board, options)

    @staticmethod
    def is_stalemate(
        color: Color, board: Board, options: RulesOptions | None = None
    ) -> bool:
        if Rules.is_in_check(color, board, options):
            return False
        return not Rules.has_any_legal_move(color, board, options)

    @staticmethod
    def status(
        color: Color, board: Board, options: RulesOptions | None = None
    ) -> GameStatus:
        """Classify the position for *color*, the side about to move."""
        in_check = Rules.is_in_check(color, board, options)
        if Rules.has_any_legal_move(color, board, options):
            return GameStatus.CHECK if in_check else GameStatus.IN_PROGRESS
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE


# -- Functional API ---------------------------------------------------------


def has_any_legal_move(
    color: Color, board: Board, options: RulesOptions | None = None
) -> bool:
    """Whether *color* can make at least one legal move."""
    return Rules.has_any_legal_move(color, board, options)


def is_checkmate(
    color: Color, board: Board, options: RulesOptions | None = None
) -> bool:
    """*color* is in check and has no legal move."""
    return Rules.is_checkmate(color, board, options)


def is_stalemate(
    color: Color, board: Board, options: RulesOptions | None = None
) -> bool:
    """*color* is not in check and has no legal move."""
    return Rules.is_stalemate(color, board, options)
