from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class BoardId(EntityId):
    """Strongly-typed board identifier."""


@dataclass(frozen=True)
class PairId(EntityId):
    """Strongly-typed pair identifier."""
