"""
Pair entity for persisted term/definition pairs.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from memoboard.domain.boards.value_objects.pair_draft import (
    PAIR_FIELD_MAX_LENGTH,
    PairDraft,
    PairPatch,
)
from memoboard.domain.common.entity import Entity
from memoboard.domain.common.exceptions import DomainError
from memoboard.domain.common.value_objects import BoardId, PairId


def _check_text(value: str, label: str) -> str:
    stripped = value.strip() if value else ""
    if not stripped:
        raise DomainError(f"{label} cannot be empty")
    if len(stripped) > PAIR_FIELD_MAX_LENGTH:
        raise DomainError(f"{label} must not exceed {PAIR_FIELD_MAX_LENGTH} characters")
    return stripped


@dataclass(eq=False)
class Pair(Entity[PairId]):
    """
    Term/definition pair saved on a board.

    Business Rules:
    - Term and definition cannot be empty
    - Term and definition are at most 255 characters
    - Pair always belongs to a board and to one of its levels (1-based)
    """

    id: PairId
    board_id: BoardId
    term: str
    definition: str
    level: int = 1
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_text(self.term, "Term")
        _check_text(self.definition, "Definition")
        if self.level < 1:
            raise DomainError("Level must be a positive number")

    def update(self, patch: PairPatch) -> None:
        """
        Apply a partial update.

        Args:
            patch: Fields to change

        Raises:
            DomainError: If a patched field is empty or too long
        """
        term = _check_text(patch.term, "Term") if patch.term is not None else self.term
        definition = (
            _check_text(patch.definition, "Definition")
            if patch.definition is not None
            else self.definition
        )
        self.term = term
        self.definition = definition

    def to_draft(self) -> PairDraft:
        return PairDraft(term=self.term, definition=self.definition)

    @classmethod
    def create(cls, board_id: BoardId, draft: PairDraft, level: int = 1) -> "Pair":
        """Create a new pair from an editor draft."""
        return cls(
            id=PairId.generate(),
            board_id=board_id,
            term=_check_text(draft.term, "Term"),
            definition=_check_text(draft.definition, "Definition"),
            level=level,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: PairId,
        board_id: BoardId,
        term: str,
        definition: str,
        level: int,
        created_at: datetime | None = None,
    ) -> "Pair":
        """Reconstitute a pair from persistence."""
        return cls(
            id=id,
            board_id=board_id,
            term=term,
            definition=definition,
            level=level,
            created_at=created_at,
        )
