"""Where puzzles are kept between requests. The SQL implementation lives in sql_repository.py, tests use a dictionary."""

from typing import Optional, Protocol
from uuid import UUID

from src.core.models import PuzzleModel

StoredPuzzle = tuple[UUID, PuzzleModel]


class PuzzleRepository(Protocol):
    """Storage of puzzle sessions, keyed by puzzle ID"""

    def get_puzzle(self, puzzle_id: UUID) -> PuzzleModel | None:
        """The stored puzzle, or None for an unknown ID."""
        ...

    def list_puzzles(self, status: Optional[str] = None) -> list[StoredPuzzle]:
        """Every stored puzzle, oldest first. With a status ('solved', 'failed', ...) only the puzzles in that state."""
        ...

    def create_puzzle(self, puzzle: PuzzleModel) -> StoredPuzzle:
        """Store a freshly loaded puzzle under a new ID."""
        ...

    def update_puzzle(self, puzzle_id: UUID, puzzle: PuzzleModel) -> PuzzleModel | None:
        """Overwrite board, move history and status after a move, hint, solve or restart. None for an unknown ID."""
        ...

    def delete_puzzle(self, puzzle_id: UUID) -> PuzzleModel | None:
        """Forget a puzzle. Returns what was stored, None for an unknown ID."""
        ...
