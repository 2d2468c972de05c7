"""Domain services of the boards context."""

from .bulk_insertion_reconciler import BulkInsertionReconciler, ClampOutcome
from .capacity_policy import CapacityPolicy
from .level_grouping_service import LevelGroupingService, PairLevel
from .pair_validator import PairValidator

__all__ = [
    "BulkInsertionReconciler",
    "CapacityPolicy",
    "ClampOutcome",
    "LevelGroupingService",
    "PairLevel",
    "PairValidator",
]
