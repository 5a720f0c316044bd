"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, legal_moves, is_checkmate, parse_square

    board = Board.initial()
    print(legal_moves(parse_square("g1"), board))
    print(is_checkmate(Color.WHITE, board))
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus, PieceKind
from chessrules.core.move_generator import (
    MoveGenerator,
    is_attacked,
    is_king_in_check,
    legal_moves,
    pseudo_moves,
)
from chessrules.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from chessrules.core.options import DEFAULT_OPTIONS, RulesOptions
from chessrules.core.piece import Piece
from chessrules.core.rules import (
    Rules,
    has_any_legal_move,
    is_checkmate,
    is_stalemate,
)
from chessrules.core.types import (
    Square,
    is_on_board,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceKind",
    # Types / helpers
    "Square",
    "is_on_board",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Options
    "DEFAULT_OPTIONS",
    "RulesOptions",
    # Rules API
    "has_any_legal_move",
    "is_attacked",
    "is_checkmate",
    "is_king_in_check",
    "is_stalemate",
    "legal_moves",
    "pseudo_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
]
