from .board import Board
from .pair import Pair

__all__ = ["Board", "Pair"]
