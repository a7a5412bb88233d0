"""Defines the types of pieces that can appear in a solitaire chess puzzle"""

from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    EMPTY = auto()
    BISHOP = auto()
    KING = auto()
    KNIGHT = auto()
    PAWN = auto()
    QUEEN = auto()
    ROOK = auto()

    @classmethod
    def from_glyph(cls, glyph: str) -> Self:
        """Raises KeyError for characters that do not denote a piece (or an empty square)."""
        return cls(GLYPH_TO_PIECE[glyph])

    @property
    def glyph(self) -> str:
        return PIECE_TO_GLYPH[self]


# One character per piece when rendering / loading a board. No colors in solitaire chess.
GLYPH_TO_PIECE: dict[str, PieceType] = {
    "B": PieceType.BISHOP,
    "K": PieceType.KING,
    "N": PieceType.KNIGHT,
    "P": PieceType.PAWN,
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "-": PieceType.EMPTY,
}

PIECE_TO_GLYPH: dict[PieceType, str] = {
    value: key for key, value in GLYPH_TO_PIECE.items()
}
