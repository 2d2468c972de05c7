"""Value objects of the boards context."""

from .capacity_context import FREE_BOARD_MAX_PAIRS, CapacityContext, CapacityMode
from .card_count import CardCount
from .pair_draft import PAIR_FIELD_MAX_LENGTH, PairDraft, PairPatch
from .validation_result import (
    CollectionError,
    CollectionErrorCode,
    RowError,
    RowErrorCode,
    ValidationResult,
)

__all__ = [
    "FREE_BOARD_MAX_PAIRS",
    "PAIR_FIELD_MAX_LENGTH",
    "CapacityContext",
    "CapacityMode",
    "CardCount",
    "CollectionError",
    "CollectionErrorCode",
    "PairDraft",
    "PairPatch",
    "RowError",
    "RowErrorCode",
    "ValidationResult",
]
