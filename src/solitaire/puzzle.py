"""
The Puzzle class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating everything a player can do with a puzzle (make a move, ask for a hint, let the solver
finish it, start over) --> passes this information to the service layer, which can then pass it onwards to the API layer.
"""

from dataclasses import dataclass
from typing import Optional, Self

from loguru import logger

from src.core.exceptions import InvalidMoveError, PuzzleStateError
from src.core.models import PuzzleModel
from src.solitaire.backtracking import Backtracker
from src.solitaire.board import Board, Status
from src.solitaire.configuration import SolitaireConfig
from src.solitaire.moves import Move


@dataclass
class Puzzle:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    initial_board: Board
    board: Board
    moves: list[Move]
    status: Status

    @classmethod
    def from_model(cls, model: PuzzleModel) -> Self:
        """Define how to construct a Puzzle from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise PuzzleStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )

        # create the Puzzle
        initial_board = Board.from_text(model.initial_board)
        board = Board.from_text(model.current_board)
        moves = [Move.from_notation(notation) for notation in model.moves]
        status = Status[status_name]

        return cls(initial_board, board, moves, status)

    def to_model(self) -> PuzzleModel:
        """Encode back into a format the Service layer uses"""

        return PuzzleModel(
            initial_board=self.initial_board.to_text(),
            current_board=self.board.to_text(),
            moves=[move.to_notation() for move in self.moves],
            status=self.status.name.lower().replace("_", " "),
        )

    @classmethod
    def new_puzzle(cls, board_text: str) -> Self:
        """Start a puzzle from a board description. Malformed descriptions give a puzzle with status INVALID_INPUT."""
        board = Board.from_text(board_text)
        puzzle = cls(
            initial_board=board,
            board=board.copy(),
            moves=[],
            status=board.status,
        )
        if puzzle.status == Status.NOT_OVER:
            # a starting position without a single capture is lost before the first move
            puzzle._update_status()
        return puzzle

    def legal_moves(self) -> list[str]:
        """All captures available on the current board (in the order the solver would try them)"""
        self._assert_in_progress()
        return [
            config.move.to_notation()
            for config in SolitaireConfig.from_board(self.board).get_successors()
            if config.move is not None
        ]

    def make_move(self, move_notation: str) -> None:
        """
        Attempt to make a move
        -----

        1. make sure the puzzle is still being played
        2. check the move is a legal capture
        3. update the board and the history of moves
        4. update puzzle status (if needed)
        """
        self._assert_in_progress()

        try:
            move = Move.from_notation(move_notation)
        except ValueError as e:
            raise InvalidMoveError(f"Unreadable move: {move_notation!r}") from e

        if not self.board.is_valid_move(move.from_square, move.to_square):
            raise InvalidMoveError(f"Move not allowed: {move_notation}")

        self._apply(move)
        self._update_status()

    def hint(self) -> Optional[Move]:
        """
        Let the solver make the next move.
        ----

        Returns the move that was made, or None if the puzzle cannot be solved from the current board
        (in which case the puzzle is marked as FAILED).
        """
        self._assert_in_progress()

        solution = self._find_solution()
        if solution is None:
            self._change_status(Status.FAILED)
            return None

        # first configuration is the current board itself
        next_move = solution[1].move
        assert next_move is not None
        self._apply(next_move)
        self._update_status()
        return next_move

    def solve(self) -> Optional[list[SolitaireConfig]]:
        """
        Let the solver finish the puzzle.
        ----

        Returns every step (move + resulting board) taken from the current board onwards, or None if there is no solution
        (in which case the puzzle is marked as FAILED).
        """
        self._assert_in_progress()

        solution = self._find_solution()
        if solution is None:
            self._change_status(Status.FAILED)
            return None

        steps = solution[1:]
        for step in steps:
            assert step.move is not None
            self._apply(step.move)
        self._update_status()
        return steps

    def restart(self) -> None:
        """Back to the starting position. Always allowed, whatever the current status."""
        if self.status == Status.INVALID_INPUT:
            # nothing to go back to
            return
        self.board = self.initial_board.copy()
        self.moves = []
        self._change_status(self.board.status)
        if self.status == Status.NOT_OVER:
            self._update_status()

    # -- Internal helpers --
    def _assert_in_progress(self) -> None:
        if self.status != Status.NOT_OVER:
            raise PuzzleStateError(f"Puzzle is not in progress. status: {self.status}")

    def _find_solution(self) -> Optional[list[SolitaireConfig]]:
        solver = Backtracker()
        return solver.solve_with_path(SolitaireConfig.from_board(self.board))

    def _apply(self, move: Move) -> None:
        self.board.apply_move(move.from_square, move.to_square)
        self.moves.append(move)
        logger.info(f"Played {move.to_notation()}, {self.board.num_pieces} pieces left.")

    def _update_status(self) -> None:
        if self.board.status == Status.SOLVED:
            self._change_status(Status.SOLVED)
        elif not SolitaireConfig(self.board).get_successors():
            # more than one piece left, but nothing can be captured anymore
            self._change_status(Status.FAILED)

    def _change_status(self, new_status: Status) -> None:
        if new_status != self.status:
            logger.info(f"Puzzle status: {self.status.name} -> {new_status.name}")
        self.status = new_status
