"""
Board entity.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from memoboard.domain.boards.value_objects.card_count import CardCount
from memoboard.domain.common.entity import Entity
from memoboard.domain.common.exceptions import ValidationError
from memoboard.domain.common.value_objects import BoardId

TITLE_MAX_LENGTH = 120
MAX_TAGS = 10
TAG_MAX_LENGTH = 20


@dataclass(eq=False)
class Board(Entity[BoardId]):
    """
    Board of term/definition pairs.

    Business Rules:
    - Title is 1-120 characters after trimming
    - At most 10 tags, each at most 20 characters
    - Card count is fixed at creation (16 or 24)
    """

    id: BoardId
    title: str
    card_count: CardCount
    is_public: bool = True
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Title cannot be empty", field="title")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title must not exceed {TITLE_MAX_LENGTH} characters", field="title"
            )
        if len(self.tags) > MAX_TAGS:
            raise ValidationError(f"Maximum {MAX_TAGS} tags allowed", field="tags")
        for tag in self.tags:
            if len(tag) > TAG_MAX_LENGTH:
                raise ValidationError(
                    f"Each tag must not exceed {TAG_MAX_LENGTH} characters",
                    field="tags",
                    value=tag,
                )

    @property
    def pairs_per_level(self) -> int:
        return self.card_count.pairs_per_level

    @classmethod
    def create(
        cls,
        title: str,
        card_count: int,
        is_public: bool = True,
        tags: list[str] | None = None,
    ) -> "Board":
        """
        Create a new board.

        Raises:
            ValidationError: If title, tags or card count break the rules
        """
        cleaned_tags = [tag.strip() for tag in tags or [] if tag.strip()]
        return cls(
            id=BoardId.generate(),
            title=title.strip(),
            card_count=CardCount.parse(card_count),
            is_public=is_public,
            tags=cleaned_tags,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: BoardId,
        title: str,
        card_count: int,
        is_public: bool,
        tags: list[str],
        created_at: datetime | None = None,
    ) -> "Board":
        """Reconstitute a board from persistence."""
        return cls(
            id=id,
            title=title,
            card_count=CardCount.parse(card_count),
            is_public=is_public,
            tags=list(tags),
            created_at=created_at,
        )
