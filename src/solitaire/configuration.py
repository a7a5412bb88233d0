"""A single node in the search tree of a solitaire chess puzzle"""

from dataclasses import dataclass
from typing import Optional, Self

from src.solitaire.board import Board
from src.solitaire.moves import Move


@dataclass(frozen=True)
class SolitaireConfig:
    """
    Board snapshot + the move that produced it from its parent configuration (None for the root).

    NOTE: the board is never mutated once the configuration exists. Successors work on their own copy.
    """

    board: Board
    move: Optional[Move] = None

    @classmethod
    def from_board(cls, board: Board) -> Self:
        """Root of a search: take a snapshot, so later changes to `board` do not leak into the search tree"""
        return cls(board.copy())

    def get_successors(self) -> list[Self]:
        """
        Every configuration reachable by a single capture.
        ----

        Only occupied squares can be the start or the target of a capture, so only pairs of those are tried.
        Order: moving piece in row-major order, then target piece in row-major order.
        """
        occupied = self.board.occupied_squares()
        successors: list[Self] = []
        for from_square in occupied:
            for to_square in occupied:
                if from_square == to_square:
                    continue
                if self.board.is_valid_move(from_square, to_square):
                    successors.append(self._child(Move(from_square, to_square)))
        return successors

    def is_goal(self) -> bool:
        """Solved when a single piece is left"""
        return self.board.num_pieces == 1

    def is_valid(self) -> bool:
        """Successors are only created for legal moves, so every configuration is valid"""
        return True

    def __str__(self) -> str:
        return self.board.to_text()

    def _child(self, move: Move) -> Self:
        board = self.board.copy()
        board.apply_move(move.from_square, move.to_square)
        return type(self)(board, move)
