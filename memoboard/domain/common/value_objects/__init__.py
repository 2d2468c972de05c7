"""Common value objects shared across all domain modules."""

from .ids import BoardId, PairId

__all__ = [
    "BoardId",
    "PairId",
]
