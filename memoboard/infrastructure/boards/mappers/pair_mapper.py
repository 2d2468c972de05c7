"""Mapper for Pair ORM ↔ Domain conversion."""

from memoboard.domain.boards.entities.pair import Pair
from memoboard.domain.common.value_objects import BoardId, PairId
from memoboard.models import Pair as PairORM


class PairMapper:
    """Mapper for Pair ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: PairORM) -> Pair:
        """Convert ORM model to domain entity."""
        return Pair.create_with_id(
            id=PairId.from_string(orm_model.id),
            board_id=BoardId.from_string(orm_model.board_id),
            term=orm_model.term,
            definition=orm_model.definition,
            level=orm_model.level,
            created_at=orm_model.created_at,
        )

    def to_orm(
        self, domain_entity: Pair, position: int, orm_model: PairORM | None = None
    ) -> PairORM:
        """Convert domain entity to ORM model stored at the given position."""
        if orm_model:
            orm_model.term = domain_entity.term
            orm_model.definition = domain_entity.definition
            orm_model.level = domain_entity.level
            orm_model.position = position
            return orm_model

        return PairORM(
            id=str(domain_entity.id),
            board_id=str(domain_entity.board_id),
            term=domain_entity.term,
            definition=domain_entity.definition,
            level=domain_entity.level,
            position=position,
            created_at=domain_entity.created_at,
        )
