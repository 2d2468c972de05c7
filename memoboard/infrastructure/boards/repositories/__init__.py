from .board_repository import BoardRepository

__all__ = ["BoardRepository"]
