"""Mapper for Board ORM ↔ Domain conversion."""

from memoboard.domain.boards.entities.board import Board
from memoboard.domain.common.value_objects import BoardId
from memoboard.models import Board as BoardORM


class BoardMapper:
    """Mapper for Board ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BoardORM) -> Board:
        """Convert ORM model to domain entity."""
        return Board.create_with_id(
            id=BoardId.from_string(orm_model.id),
            title=orm_model.title,
            card_count=orm_model.card_count,
            is_public=orm_model.is_public,
            tags=list(orm_model.tags or []),
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Board, orm_model: BoardORM | None = None) -> BoardORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.title = domain_entity.title
            orm_model.is_public = domain_entity.is_public
            orm_model.tags = list(domain_entity.tags)
            return orm_model

        return BoardORM(
            id=str(domain_entity.id),
            title=domain_entity.title,
            card_count=int(domain_entity.card_count),
            is_public=domain_entity.is_public,
            tags=list(domain_entity.tags),
            created_at=domain_entity.created_at,
        )
