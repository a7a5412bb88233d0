"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

from uuid import UUID

from loguru import logger

from src.api.models import (
    CreatePuzzleRequest,
    DeletePuzzleRequest,
    GetPuzzleRequest,
    HintRequest,
    HintResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    ListPuzzlesRequest,
    MoveRequest,
    PuzzleListResponse,
    PuzzleResponse,
    RestartRequest,
    SolutionResponse,
    SolutionStep,
    SolveRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import PuzzleModel
from src.core.shared_types import Status
from src.db.repository import PuzzleRepository
from src.solitaire.moves import build_notation
from src.solitaire.puzzle import Puzzle


class PuzzleService:
    """Orchestration of layers for solitaire chess puzzles."""

    def __init__(self, repository: PuzzleRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_puzzle(self, request: CreatePuzzleRequest) -> PuzzleResponse:
        """Player loaded a new board."""

        # Use info in CreatePuzzleRequest to create a new Puzzle, and convert into PuzzleModel
        new_puzzle = Puzzle.new_puzzle(request.board_text)
        created_puzzle_data = new_puzzle.to_model()

        # Store the PuzzleModel in the repository
        stored_puzzle, puzzle_id = self.repo.create_puzzle(created_puzzle_data)
        logger.info(f"Created puzzle {puzzle_id} (status: {stored_puzzle.status})")

        # Return a PuzzleResponse
        return self._create_puzzle_response(puzzle_id, stored_puzzle)

    def get_puzzle_state(self, request: GetPuzzleRequest) -> PuzzleResponse:
        """Retrieve current puzzle state."""
        puzzle_model = self._fetch_puzzle(request.puzzle_id)
        return self._create_puzzle_response(request.puzzle_id, puzzle_model)

    def list_puzzles(self, request: ListPuzzlesRequest) -> PuzzleListResponse:
        """Every stored puzzle (oldest first), optionally only those with the requested status."""
        status = request.status.value if request.status is not None else None
        stored = self.repo.list_puzzles(status)
        return PuzzleListResponse(
            puzzles=[
                self._create_puzzle_response(puzzle_id, model)
                for puzzle_id, model in stored
            ]
        )

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves."""
        stored_model = self._fetch_puzzle(request.puzzle_id)
        puzzle = Puzzle.from_model(stored_model)
        return LegalMovesResponse(
            puzzle_id=request.puzzle_id, legal_moves=puzzle.legal_moves()
        )

    def make_move(self, request: MoveRequest) -> PuzzleResponse:
        """Make a move attempt."""

        # Retrieve persisted PuzzleModel from repository
        stored_model = self._fetch_puzzle(request.puzzle_id)

        # Parse data in MoveRequest to move notation
        move_notation = build_notation(request.from_square, request.to_square)

        # Attempt the move
        puzzle = Puzzle.from_model(stored_model)
        puzzle.make_move(move_notation)

        # Capture updated state and store in repository
        after_move = puzzle.to_model()
        self.repo.update_puzzle(request.puzzle_id, after_move)
        return self._create_puzzle_response(request.puzzle_id, after_move)

    def hint(self, request: HintRequest) -> HintResponse:
        """Let the solver play the next move (if the puzzle can still be solved)."""
        stored_model = self._fetch_puzzle(request.puzzle_id)
        puzzle = Puzzle.from_model(stored_model)

        next_move = puzzle.hint()

        after_hint = puzzle.to_model()
        self.repo.update_puzzle(request.puzzle_id, after_hint)
        return HintResponse(
            puzzle_id=request.puzzle_id,
            move=next_move.to_notation() if next_move is not None else None,
            board=after_hint.current_board,
            status=Status(after_hint.status),
        )

    def solve(self, request: SolveRequest) -> SolutionResponse:
        """Let the solver finish the puzzle. Returns each step so the front end can play them back."""
        stored_model = self._fetch_puzzle(request.puzzle_id)
        puzzle = Puzzle.from_model(stored_model)

        solution = puzzle.solve()
        steps = (
            [
                SolutionStep(move=step.move.to_notation(), board=step.board.to_text())
                for step in solution
                if step.move is not None
            ]
            if solution is not None
            else []
        )

        after_solve = puzzle.to_model()
        self.repo.update_puzzle(request.puzzle_id, after_solve)
        logger.info(
            f"Solver finished puzzle {request.puzzle_id} in {len(steps)} steps (status: {after_solve.status})"
        )
        return SolutionResponse(
            puzzle_id=request.puzzle_id, steps=steps, status=Status(after_solve.status)
        )

    def restart(self, request: RestartRequest) -> PuzzleResponse:
        """Put the pieces back where they started."""
        stored_model = self._fetch_puzzle(request.puzzle_id)
        puzzle = Puzzle.from_model(stored_model)
        puzzle.restart()

        restarted = puzzle.to_model()
        self.repo.update_puzzle(request.puzzle_id, restarted)
        return self._create_puzzle_response(request.puzzle_id, restarted)

    def delete_puzzle(self, request: DeletePuzzleRequest) -> None:
        """Handle a request to delete a Puzzle record."""
        self.repo.delete_puzzle(request.puzzle_id)

    # -- Internal helpers --
    def _create_puzzle_response(
        self, puzzle_id: UUID, model: PuzzleModel
    ) -> PuzzleResponse:
        """Convert info in PuzzleModel to a PuzzleResponse (for puzzle with given ID.)"""
        return PuzzleResponse(
            puzzle_id=puzzle_id,
            board=model.current_board,
            starting_board=model.initial_board,
            move_history=model.moves,
            status=Status(model.status),
        )

    def _fetch_puzzle(self, puzzle_id: UUID) -> PuzzleModel:
        """Attempt to find the puzzle in the repository and raise error if it fails."""
        puzzle_model = self.repo.get_puzzle(puzzle_id)
        if puzzle_model is None:
            raise RepositoryError(f"Puzzle with {puzzle_id=} not found.")
        return puzzle_model
