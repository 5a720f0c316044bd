"""Game layer — turn order, status transitions, captures and promotion.

Quick start::

    from chessrules.core import PieceKind, parse_square
    from chessrules.game import GameState

    game = GameState()
    game.setup()
    game.apply_move(parse_square("e2"), parse_square("e4"))
    if game.awaiting_promotion:
        game.promote(PieceKind.QUEEN)
"""

from chessrules.game.state import (
    PROMOTION_KINDS,
    GameState,
    IllegalMoveError,
    MoveRecord,
)

__all__ = [
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
    "PROMOTION_KINDS",
]
