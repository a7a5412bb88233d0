"""PuzzleRepository on top of the 'puzzles' table (SQLAlchemy)"""

from typing import Optional
from uuid import UUID, uuid4

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import PuzzleModel
from src.db.repository import StoredPuzzle
from src.db.schema import DBPuzzle


class SQLPuzzleRepository:
    """One row per puzzle session. Every write is committed straight away."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_puzzle(self, puzzle_id: UUID) -> PuzzleModel | None:
        row = self.db.get(DBPuzzle, puzzle_id)
        return _to_model(row) if row is not None else None

    def list_puzzles(self, status: Optional[str] = None) -> list[StoredPuzzle]:
        query = select(DBPuzzle).order_by(DBPuzzle.created_at)
        if status is not None:
            query = query.where(DBPuzzle.status == str(status))
        return [(row.id, _to_model(row)) for row in self.db.scalars(query)]

    def create_puzzle(self, puzzle: PuzzleModel) -> StoredPuzzle:
        row = DBPuzzle(id=uuid4())
        _write_model(row, puzzle)
        self.db.add(row)
        self._commit(row)
        logger.debug(f"Stored new puzzle {row.id} (status: {row.status})")
        return _to_model(row), row.id

    def update_puzzle(self, puzzle_id: UUID, puzzle: PuzzleModel) -> PuzzleModel | None:
        row = self.db.get(DBPuzzle, puzzle_id)
        if row is None:
            return None
        _write_model(row, puzzle)
        self._commit(row)
        return _to_model(row)

    def delete_puzzle(self, puzzle_id: UUID) -> PuzzleModel | None:
        row = self.db.get(DBPuzzle, puzzle_id)
        if row is None:
            return None
        removed = _to_model(row)
        self.db.delete(row)
        self.db.commit()
        logger.debug(f"Deleted puzzle {puzzle_id}")
        return removed

    def _commit(self, row: DBPuzzle) -> None:
        self.db.commit()
        self.db.refresh(row)


def _write_model(row: DBPuzzle, puzzle: PuzzleModel) -> None:
    row.initial_board = puzzle.initial_board
    row.current_board = puzzle.current_board
    # new list, so the JSON column registers the change
    row.moves = list(puzzle.moves)
    row.status = str(puzzle.status)


def _to_model(row: DBPuzzle) -> PuzzleModel:
    return PuzzleModel(
        initial_board=row.initial_board,
        current_board=row.current_board,
        moves=list(row.moves),
        status=row.status,
    )
