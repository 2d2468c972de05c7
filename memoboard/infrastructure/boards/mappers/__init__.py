from .board_mapper import BoardMapper
from .pair_mapper import PairMapper

__all__ = ["BoardMapper", "PairMapper"]
