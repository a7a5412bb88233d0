"""The puzzle board implements all rules that effect the placement of pieces: which captures are legal and how a capture changes the board"""

from copy import deepcopy
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Self

from loguru import logger

from src.core.exceptions import InvalidMoveError
from src.solitaire.moves import MOVEMENT_RULES, SLIDING_PIECES, Move, has_collision
from src.solitaire.pieces import GLYPH_TO_PIECE, PieceType
from src.solitaire.square import BOARD_DIMENSIONS, Square

Grid = list[list[PieceType]]


class Status(Enum):
    NOT_OVER = auto()
    SOLVED = auto()
    FAILED = auto()
    INVALID_INPUT = auto()


def empty_grid() -> Grid:
    rows, cols = BOARD_DIMENSIONS
    return [[PieceType.EMPTY] * cols for _ in range(rows)]


@dataclass
class Board:
    grid: Grid
    num_pieces: int
    status: Status

    @classmethod
    def from_grid(cls, grid: Grid) -> Self:
        """Count the pieces once. From here on `num_pieces` is kept up to date by `apply_move()`"""
        num_pieces = sum(piece != PieceType.EMPTY for row in grid for piece in row)
        status = Status.SOLVED if num_pieces == 1 else Status.NOT_OVER
        return cls(deepcopy(grid), num_pieces, status)

    @classmethod
    def invalid(cls) -> Self:
        """Placeholder board for input that could not be read. No puzzle logic should run against it."""
        return cls(empty_grid(), 0, Status.INVALID_INPUT)

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Construct a board from its textual description.

        The description holds one glyph per square, read row by row (top to bottom, left to right), separated by whitespace
        ex. a rook on row 1, a pawn on row 2 and a king in the bottom right corner:
        - - - -
        - R - -
        - - P -
        - - - K

        Malformed descriptions do not raise: the board is marked with status INVALID_INPUT instead.
        """
        rows, cols = BOARD_DIMENSIONS
        glyphs = text.split()
        if len(glyphs) != rows * cols:
            logger.warning(
                f"Board description has {len(glyphs)} squares, expected {rows * cols}."
            )
            return cls.invalid()

        unknown = [glyph for glyph in glyphs if glyph not in GLYPH_TO_PIECE]
        if unknown:
            logger.warning(f"Board description contains unknown pieces: {unknown}")
            return cls.invalid()

        grid = [
            [PieceType.from_glyph(glyph) for glyph in glyphs[row * cols : (row + 1) * cols]]
            for row in range(rows)
        ]
        return cls.from_grid(grid)

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        """Load a board description from a text file (see `from_text()`)"""
        return cls.from_text(Path(path).read_text())

    def to_text(self) -> str:
        """Space separated glyphs, one line per row (every row is newline-terminated)"""
        return "".join(
            " ".join(piece.glyph for piece in row) + "\n" for row in self.grid
        )

    def __str__(self) -> str:
        return self.to_text()

    def piece(self, square: Square) -> PieceType:
        return self.grid[square.row][square.col]

    def occupied_squares(self) -> list[Square]:
        """All squares holding a piece, in row-major order"""
        rows, cols = BOARD_DIMENSIONS
        return [
            Square(row, col)
            for row in range(rows)
            for col in range(cols)
            if self.grid[row][col] != PieceType.EMPTY
        ]

    def copy(self) -> Self:
        """Independent copy: nothing is shared with the original grid"""
        return deepcopy(self)

    def is_valid_move(self, from_square: Square, to_square: Square) -> bool:
        """
        Can the piece on `from_square` capture the piece on `to_square`?
        ----

        Never raises: anything off the board, a move onto itself or a move onto an empty square is simply not valid.
        """
        if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
            return False
        if from_square == to_square:
            return False
        if self.piece(to_square) == PieceType.EMPTY:
            # every move must be a capture
            return False

        piece_type = self.piece(from_square)
        if piece_type == PieceType.EMPTY:
            return False

        move = Move(from_square, to_square)
        movement_rule = MOVEMENT_RULES[piece_type]
        if not movement_rule(*move.delta):
            return False

        if piece_type in SLIDING_PIECES:
            return not has_collision(self, from_square, to_square)
        return True

    def apply_move(self, from_square: Square, to_square: Square) -> None:
        """
        Capture: the moving piece replaces the captured piece and leaves an empty square behind.

        Raises InvalidMoveError (and leaves the board untouched) if the move is not valid.
        """
        if not self.is_valid_move(from_square, to_square):
            raise InvalidMoveError(
                f"Move not allowed: {from_square.to_notation()}-{to_square.to_notation()}"
            )

        piece_that_moved = self.piece(from_square)
        self.grid[to_square.row][to_square.col] = piece_that_moved
        self.grid[from_square.row][from_square.col] = PieceType.EMPTY
        self.num_pieces -= 1

        if self.num_pieces == 1:
            self.status = Status.SOLVED
