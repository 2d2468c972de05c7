"""Use cases driving the pair editor."""

from .add_level_use_case import AddLevelUseCase
from .create_board_use_case import CreateBoardUseCase
from .edit_board_use_case import EditBoardUseCase
from .generate_pairs_use_case import GeneratePairsUseCase

__all__ = [
    "AddLevelUseCase",
    "CreateBoardUseCase",
    "EditBoardUseCase",
    "GeneratePairsUseCase",
]
