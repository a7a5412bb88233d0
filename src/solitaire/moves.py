"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement geometry for each piece type.
Each rule only looks at the displacement (delta_row, delta_col) of a move.

The sliding pieces (bishop, rook, queen) additionally need a clear line of sight, which is checked
separately by `has_collision()`. Whether the target square holds a piece to capture is checked by the Board.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from src.solitaire.pieces import PieceType
from src.solitaire.square import Square


class Board(Protocol):
    """Just the parts the collision check needs"""

    def piece(self, square: Square) -> PieceType: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """A capture: the piece on `from_square` takes the piece on `to_square`"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_notation(cls, notation: str) -> Move:
        """
        Notation: '<from row>,<from col>-<to row>,<to col>'

        example:
        * "2,2-1,1": the piece on row 2, column 2 captures the piece one square up and to the left
        """
        from_part, to_part = notation.split("-")
        return cls(Square.from_notation(from_part), Square.from_notation(to_part))

    def to_notation(self) -> str:
        return f"{self.from_square.to_notation()}-{self.to_square.to_notation()}"

    @property
    def delta(self) -> Vector:
        return (
            self.to_square.row - self.from_square.row,
            self.to_square.col - self.from_square.col,
        )


def build_notation(from_square: str, to_square: str) -> str:
    """Glue two squares in 'row,col' notation into the notation of a move"""
    return f"{from_square}-{to_square}"


# --- MOVEMENT RULES ---
def king_rule(delta_row: int, delta_col: int) -> bool:
    """The king moves a single square in any direction"""
    return abs(delta_row) <= 1 and abs(delta_col) <= 1


def knight_rule(delta_row: int, delta_col: int) -> bool:
    """Knights jump in an L-shape: two squares along one axis, one along the other"""
    return (abs(delta_row), abs(delta_col)) in ((1, 2), (2, 1))


def pawn_rule(delta_row: int, delta_col: int) -> bool:
    """
    Pawns only ever capture here: one square diagonally forward.
    Forward means up the board (decreasing row).
    """
    return delta_row == -1 and abs(delta_col) == 1


def bishop_rule(delta_row: int, delta_col: int) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return delta_row != 0 and abs(delta_row) == abs(delta_col)


def rook_rule(delta_row: int, delta_col: int) -> bool:
    """Rooks move either horizontally or vertically (exactly one of the two coordinates changes)"""
    return (delta_row == 0) != (delta_col == 0)


def queen_rule(delta_row: int, delta_col: int) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return rook_rule(delta_row, delta_col) or bishop_rule(delta_row, delta_col)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[int, int], bool]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.BISHOP: bishop_rule,
    PieceType.KING: king_rule,
    PieceType.KNIGHT: knight_rule,
    PieceType.PAWN: pawn_rule,
    PieceType.QUEEN: queen_rule,
    PieceType.ROOK: rook_rule,
}

# Pieces whose path can be blocked. King, knight and pawn moves have no squares in between.
SLIDING_PIECES: frozenset[PieceType] = frozenset(
    {PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}
)


# --- COLLISIONS ---
def unit_direction(from_square: Square, to_square: Square) -> Vector:
    """One of the 8 unit steps pointing from one square to the other (along a straight line or diagonal)"""
    delta_row = to_square.row - from_square.row
    delta_col = to_square.col - from_square.col
    is_straight = (delta_row == 0) != (delta_col == 0)
    is_diagonal = delta_row != 0 and abs(delta_row) == abs(delta_col)
    if not (is_straight or is_diagonal):
        raise ValueError(
            f"Squares do not share a row, column or diagonal. \n from: {from_square}\n to:{to_square}"
        )

    def _sign(value: int) -> int:
        return (value > 0) - (value < 0)

    return _sign(delta_row), _sign(delta_col)


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """Walk from one square towards the other and collect every square strictly in between"""
    d_row, d_col = unit_direction(from_square, to_square)
    squares_found: list[Square] = []
    square = Square(from_square.row + d_row, from_square.col + d_col)
    while square != to_square:
        squares_found.append(square)
        square = Square(square.row + d_row, square.col + d_col)
    return squares_found


def has_collision(board: Board, from_square: Square, to_square: Square) -> bool:
    """TRUE if any square strictly between the two squares is occupied"""
    return any(
        board.piece(square) != PieceType.EMPTY
        for square in squares_between(from_square, to_square)
    )
