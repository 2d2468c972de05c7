"""Domain service computing how many pairs an editor may hold."""

from memoboard.domain.boards.value_objects.capacity_context import (
    FREE_BOARD_MAX_PAIRS,
    CapacityContext,
    CapacityMode,
)


class CapacityPolicy:
    """
    Stateless capacity rules.

    - Board creation: fixed ceiling of FREE_BOARD_MAX_PAIRS, split into levels
    - Level creation: card_count / 2
    - Edit: card_count / 2 minus the pairs already persisted
    """

    @staticmethod
    def max_pairs(context: CapacityContext) -> int:
        """Total number of draft pairs the context allows, never negative."""
        if context.mode is CapacityMode.BOARD:
            return FREE_BOARD_MAX_PAIRS
        if context.mode is CapacityMode.LEVEL:
            return context.pairs_per_level
        return max(0, context.pairs_per_level - context.existing_count)

    @staticmethod
    def max_additional(context: CapacityContext, current_count: int) -> int:
        """
        Number of pairs that can still be added.

        Args:
            context: Capacity context of the editor
            current_count: Number of draft pairs currently held

        Returns:
            Non-negative number of free slots
        """
        return max(0, CapacityPolicy.max_pairs(context) - current_count)

    @staticmethod
    def is_exceeded(context: CapacityContext, count: int) -> bool:
        return count > CapacityPolicy.max_pairs(context)
