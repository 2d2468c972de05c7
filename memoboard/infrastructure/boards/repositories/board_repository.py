"""Repository for Board domain entities and their pairs."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from memoboard.domain.boards.entities.board import Board
from memoboard.domain.boards.entities.pair import Pair
from memoboard.domain.boards.services.level_grouping_service import LevelGroupingService
from memoboard.domain.boards.value_objects.pair_draft import PairDraft, PairPatch
from memoboard.domain.common.value_objects.ids import BoardId, PairId
from memoboard.exceptions import BoardNotFoundError, PairNotFoundError, PersistenceError
from memoboard.infrastructure.boards.mappers import BoardMapper, PairMapper
from memoboard.models import Board as BoardORM
from memoboard.models import Pair as PairORM

logger = structlog.get_logger(__name__)


class BoardRepository:
    """Repository for Board domain entities and their pairs."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.board_mapper = BoardMapper()
        self.pair_mapper = PairMapper()

    def find_by_id(self, board_id: BoardId) -> Board | None:
        """
        Find a board by ID.

        Args:
            board_id: The board ID

        Returns:
            Board entity if found, None otherwise
        """
        with self._storage_errors():
            orm_model = self.db.get(BoardORM, str(board_id))
        return self.board_mapper.to_domain(orm_model) if orm_model else None

    def find_pairs(self, board_id: BoardId, level: int | None = None) -> list[Pair]:
        """
        Get the pairs of a board.

        Args:
            board_id: The board ID
            level: Only return pairs of this 1-based level when given

        Returns:
            List of pair entities ordered by level, then position
        """
        stmt = select(PairORM).where(PairORM.board_id == str(board_id))
        if level is not None:
            stmt = stmt.where(PairORM.level == level)
        stmt = stmt.order_by(PairORM.level, PairORM.position)

        with self._storage_errors():
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.pair_mapper.to_domain(orm) for orm in orm_models]

    def create_board(self, board: Board, drafts: Sequence[PairDraft]) -> Board:
        """
        Persist a new board with its pairs.

        Each pair's level follows from its position: card_count / 2 pairs per level.

        Returns:
            Saved board entity
        """
        orm_board = self.board_mapper.to_orm(board)
        for position, draft in enumerate(drafts):
            level = LevelGroupingService.level_of(position, board.pairs_per_level) + 1
            pair = Pair.create(board.id, draft, level=level)
            orm_board.pairs.append(self.pair_mapper.to_orm(pair, position))

        with self._storage_errors():
            self.db.add(orm_board)
            self.db.commit()
            self.db.refresh(orm_board)
        return self.board_mapper.to_domain(orm_board)

    def add_level(self, board_id: BoardId, drafts: Sequence[PairDraft]) -> int:
        """
        Append a new level after the board's current last level.

        Returns:
            1-based number of the created level
        """
        with self._storage_errors():
            self._require_board(board_id)
            last_level, last_position = self.db.execute(
                select(func.max(PairORM.level), func.max(PairORM.position)).where(
                    PairORM.board_id == str(board_id)
                )
            ).one()
            level = (last_level or 0) + 1
            start = last_position + 1 if last_position is not None else 0

            for offset, draft in enumerate(drafts):
                pair = Pair.create(board_id, draft, level=level)
                self.db.add(self.pair_mapper.to_orm(pair, start + offset))
            self.db.commit()

        return level

    def create_pair(self, board_id: BoardId, draft: PairDraft, level: int = 1) -> Pair:
        """
        Add a single pair to one level of a board.

        Returns:
            Saved pair entity
        """
        with self._storage_errors():
            self._require_board(board_id)
            pair = Pair.create(board_id, draft, level=level)
            orm_model = self.pair_mapper.to_orm(pair, self._next_position(board_id))
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.pair_mapper.to_domain(orm_model)

    def update_pair(self, board_id: BoardId, pair_id: PairId, patch: PairPatch) -> Pair:
        """
        Apply a partial update to a pair.

        Raises:
            PairNotFoundError: If the pair does not exist on this board
            DomainError: If the patch would leave the pair invalid
        """
        with self._storage_errors():
            orm_model = self._get_pair(board_id, pair_id)
            pair = self.pair_mapper.to_domain(orm_model)
            pair.update(patch.normalized())
            self.pair_mapper.to_orm(pair, orm_model.position, orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.pair_mapper.to_domain(orm_model)

    def delete_pair(self, board_id: BoardId, pair_id: PairId) -> None:
        """
        Delete a pair.

        Raises:
            PairNotFoundError: If the pair does not exist on this board
        """
        with self._storage_errors():
            orm_model = self._get_pair(board_id, pair_id)
            self.db.delete(orm_model)
            self.db.commit()

    def _require_board(self, board_id: BoardId) -> None:
        if self.db.get(BoardORM, str(board_id)) is None:
            raise BoardNotFoundError(board_id)

    def _get_pair(self, board_id: BoardId, pair_id: PairId) -> PairORM:
        stmt = select(PairORM).where(
            PairORM.id == str(pair_id),
            PairORM.board_id == str(board_id),
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if orm_model is None:
            raise PairNotFoundError(pair_id)
        return orm_model

    def _next_position(self, board_id: BoardId) -> int:
        last = self.db.execute(
            select(func.max(PairORM.position)).where(PairORM.board_id == str(board_id))
        ).scalar()
        return last + 1 if last is not None else 0

    @contextmanager
    def _storage_errors(self) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("board_storage_failed", error=str(e))
            raise PersistenceError("Could not save changes") from e
