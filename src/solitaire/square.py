"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Solitaire chess is played on a 4x4 board: (rows, columns)
BOARD_DIMENSIONS = (4, 4)


@dataclass(frozen=True)
class Square:
    """Row 0 is the top of the board, column 0 the left-most column."""

    row: int
    col: int

    @classmethod
    def from_notation(cls, notation: str) -> Square:
        """'row,col' notation: '0,0' is the top left square, '3,3' the bottom right one"""
        row, col = notation.split(",")
        return cls(int(row), int(col))

    def to_notation(self) -> str:
        return f"{self.row},{self.col}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )
