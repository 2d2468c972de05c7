"""Capacity context of a pair collection."""

from dataclasses import dataclass, replace
from enum import StrEnum

from memoboard.domain.common.exceptions import ValidationError
from memoboard.domain.common.value_object import ValueObject

from .card_count import CardCount

# Hard ceiling for a board created in one go, whatever its card count.
FREE_BOARD_MAX_PAIRS = 100


class CapacityMode(StrEnum):
    """Editing situation a pair collection belongs to."""

    BOARD = "board"
    LEVEL = "level"
    EDIT = "edit"


@dataclass(frozen=True)
class CapacityContext(ValueObject):
    """
    Everything the capacity policy needs to know about an editor.

    Business Rules:
    - existing_count is never negative
    - Only edit contexts carry already persisted pairs
    """

    mode: CapacityMode
    card_count: CardCount
    existing_count: int = 0

    def __post_init__(self) -> None:
        if self.existing_count < 0:
            raise ValidationError(
                "Existing pair count cannot be negative",
                field="existing_count",
                value=self.existing_count,
            )
        if self.existing_count and self.mode is not CapacityMode.EDIT:
            raise ValidationError(
                "Only edit contexts can hold persisted pairs",
                field="existing_count",
                value=self.existing_count,
            )

    @property
    def pairs_per_level(self) -> int:
        return self.card_count.pairs_per_level

    @classmethod
    def for_board(cls, card_count: int) -> "CapacityContext":
        """Context for creating a whole board (pairs split into levels)."""
        return cls(mode=CapacityMode.BOARD, card_count=CardCount.parse(card_count))

    @classmethod
    def for_level(cls, card_count: int) -> "CapacityContext":
        """Context for adding one level to an existing board."""
        return cls(mode=CapacityMode.LEVEL, card_count=CardCount.parse(card_count))

    @classmethod
    def for_edit(cls, card_count: int, existing_count: int) -> "CapacityContext":
        """Context for adding pairs next to already persisted ones."""
        return cls(
            mode=CapacityMode.EDIT,
            card_count=CardCount.parse(card_count),
            existing_count=existing_count,
        )

    def with_existing_count(self, existing_count: int) -> "CapacityContext":
        return replace(self, existing_count=existing_count)
