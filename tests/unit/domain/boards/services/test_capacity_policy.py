"""Tests for CapacityPolicy domain service."""

import pytest

from memoboard.domain.boards.services.capacity_policy import CapacityPolicy
from memoboard.domain.boards.value_objects.capacity_context import (
    FREE_BOARD_MAX_PAIRS,
    CapacityContext,
)
from memoboard.domain.common.exceptions import ValidationError


class TestMaxPairs:
    def test_board_mode_uses_free_ceiling(self) -> None:
        assert CapacityPolicy.max_pairs(CapacityContext.for_board(16)) == FREE_BOARD_MAX_PAIRS
        assert CapacityPolicy.max_pairs(CapacityContext.for_board(24)) == FREE_BOARD_MAX_PAIRS

    def test_level_mode_is_half_the_card_count(self) -> None:
        assert CapacityPolicy.max_pairs(CapacityContext.for_level(16)) == 8
        assert CapacityPolicy.max_pairs(CapacityContext.for_level(24)) == 12

    def test_edit_mode_subtracts_persisted_pairs(self) -> None:
        assert CapacityPolicy.max_pairs(CapacityContext.for_edit(24, 5)) == 7

    def test_edit_mode_never_goes_negative(self) -> None:
        assert CapacityPolicy.max_pairs(CapacityContext.for_edit(16, 11)) == 0


class TestMaxAdditional:
    def test_remaining_room(self) -> None:
        context = CapacityContext.for_level(16)
        assert CapacityPolicy.max_additional(context, 0) == 8
        assert CapacityPolicy.max_additional(context, 6) == 2

    def test_zero_when_full_or_over(self) -> None:
        context = CapacityContext.for_level(16)
        assert CapacityPolicy.max_additional(context, 8) == 0
        assert CapacityPolicy.max_additional(context, 10) == 0

    def test_is_exceeded(self) -> None:
        context = CapacityContext.for_level(16)
        assert not CapacityPolicy.is_exceeded(context, 8)
        assert CapacityPolicy.is_exceeded(context, 9)


class TestCapacityContext:
    def test_rejects_unsupported_card_count(self) -> None:
        with pytest.raises(ValidationError, match="16 or 24"):
            CapacityContext.for_level(20)

    def test_rejects_negative_existing_count(self) -> None:
        with pytest.raises(ValidationError):
            CapacityContext.for_edit(16, -1)

    def test_with_existing_count_returns_new_context(self) -> None:
        context = CapacityContext.for_edit(16, 2)
        updated = context.with_existing_count(5)

        assert context.existing_count == 2
        assert updated.existing_count == 5
        assert CapacityPolicy.max_pairs(updated) == 3
