"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceKind

# FEN character ↔ (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "R": (Color.WHITE, PieceKind.ROOK),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "r": (Color.BLACK, PieceKind.ROOK),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    kind: PieceKind

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, kind)
