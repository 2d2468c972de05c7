"""Domain service for grouping pairs into levels."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from memoboard.domain.boards.value_objects.pair_draft import PairDraft


@dataclass
class PairLevel:
    """Consecutive rows that make up one level."""

    index: int
    first_row: int
    pairs: list[PairDraft] = field(default_factory=list)

    @property
    def number(self) -> int:
        """1-based level number, as shown to users."""
        return self.index + 1

    @property
    def label(self) -> str:
        return f"Level: {self.number}"


class LevelGroupingService:
    """
    Stateless mapping from flat row indices to levels.

    Levels are views computed from positions; nothing about them is stored
    on the drafts.
    """

    @staticmethod
    def level_of(index: int, max_per_level: int) -> int:
        """0-based level of the row at index."""
        if max_per_level <= 0:
            raise ValueError("max_per_level must be positive")
        if index < 0:
            raise ValueError("index must be non-negative")
        return index // max_per_level

    @staticmethod
    def is_level_start(index: int, max_per_level: int) -> bool:
        """Whether a "Level: N" marker goes before the row at index."""
        return LevelGroupingService.level_of(index, max_per_level) * max_per_level == index

    @staticmethod
    def group_by_level(drafts: Sequence[PairDraft], max_per_level: int) -> list[PairLevel]:
        """
        Split rows into levels of max_per_level rows.

        Args:
            drafts: Rows in display order
            max_per_level: Rows per level (card_count / 2)

        Returns:
            List of PairLevel, ordered by level index
        """
        levels: list[PairLevel] = []
        for index, draft in enumerate(drafts):
            if LevelGroupingService.is_level_start(index, max_per_level):
                levels.append(
                    PairLevel(
                        index=LevelGroupingService.level_of(index, max_per_level),
                        first_row=index,
                    )
                )
            levels[-1].pairs.append(draft)
        return levels
