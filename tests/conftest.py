"""
Pytest will auto-discover / import this file called 'conftest.py'.
Fixtures shared by the repository, database and full-stack tests live here.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.app import create_puzzle_service
from src.db.schema import Base
from src.services.puzzle_service import PuzzleService

# In-memory SQLite: a single shared connection, so every session sees the same tables
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Fresh tables for every test. Dropped at teardown so repository tests cannot see each other's puzzles."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session_shared() -> Generator[Session, None, None]:
    """Tables are kept after the test: mimics several sessions talking to one long-lived database."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def sql_puzzle_service(db_session_repo: Session) -> PuzzleService:
    """Service wired the way the application wires it, on top of the test database"""
    return create_puzzle_service(db_session_repo)
