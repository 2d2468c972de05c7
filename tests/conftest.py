"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest
from sqlalchemy.orm import Session, sessionmaker

from memoboard import models  # noqa: F401
from memoboard.application.common.notifications import Notification
from memoboard.database import Base, build_engine
from memoboard.domain.boards.entities.board import Board
from memoboard.domain.boards.value_objects.pair_draft import PairDraft
from memoboard.infrastructure.boards.repositories import BoardRepository

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = build_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


class FakeNotifier:
    """Collects notifications instead of showing them."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def errors(self) -> list[str]:
        return [n.message for n in self.notifications if n.level == "error"]

    @property
    def successes(self) -> list[str]:
        return [n.message for n in self.notifications if n.level == "success"]


def make_drafts(count: int, prefix: str = "term") -> list[PairDraft]:
    return [PairDraft(term=f"{prefix} {i}", definition=f"definition {i}") for i in range(count)]


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def board_repository(db_session: Session) -> BoardRepository:
    return BoardRepository(db_session)


@pytest.fixture
def saved_board(board_repository: BoardRepository) -> Board:
    """A 16-card board with one full level of 8 pairs."""
    board = Board.create(title="Biology", card_count=16, tags=["science"])
    return board_repository.create_board(board, make_drafts(8))
