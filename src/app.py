"""Composition root: wire the layers together."""

from sqlalchemy.orm import Session

from src.core.config import settings
from src.core.log_config import configure_logging
from src.db.database import init_db
from src.db.sql_repository import SQLPuzzleRepository
from src.services.puzzle_service import PuzzleService

# once per process, not per service
configure_logging(settings.log_level)


def create_puzzle_service(db_session: Session) -> PuzzleService:
    """Service backed by the database the session is bound to. Missing tables are created first."""
    init_db(db_session.get_bind())
    return PuzzleService(SQLPuzzleRepository(db_session))
