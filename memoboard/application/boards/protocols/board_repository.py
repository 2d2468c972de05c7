"""Protocol for Board repository in boards context."""

from collections.abc import Sequence
from typing import Protocol

from memoboard.domain.boards.entities.board import Board
from memoboard.domain.boards.entities.pair import Pair
from memoboard.domain.boards.value_objects.pair_draft import PairDraft, PairPatch
from memoboard.domain.common.value_objects.ids import BoardId, PairId


class BoardRepositoryProtocol(Protocol):
    """
    Protocol for board persistence.

    Implementations raise PersistenceError when storage fails and
    BoardNotFoundError / PairNotFoundError for unknown ids.
    """

    def find_by_id(self, board_id: BoardId) -> Board | None:
        """
        Find a board by ID.

        Returns:
            Board entity if found, None otherwise
        """
        ...

    def find_pairs(self, board_id: BoardId, level: int | None = None) -> list[Pair]:
        """
        Get the pairs of a board, optionally only those of one level.

        Returns:
            List of pair entities ordered by level, then creation order
        """
        ...

    def create_board(self, board: Board, drafts: Sequence[PairDraft]) -> Board:
        """
        Persist a new board with its pairs.

        Pair levels are derived from their position in drafts.

        Returns:
            Saved board entity
        """
        ...

    def add_level(self, board_id: BoardId, drafts: Sequence[PairDraft]) -> int:
        """
        Append a new level of pairs to a board.

        Returns:
            1-based number of the created level
        """
        ...

    def create_pair(self, board_id: BoardId, draft: PairDraft, level: int = 1) -> Pair:
        """
        Add a single pair to one level of a board.

        Returns:
            Saved pair entity
        """
        ...

    def update_pair(self, board_id: BoardId, pair_id: PairId, patch: PairPatch) -> Pair:
        """
        Apply a partial update to a pair.

        Returns:
            Updated pair entity
        """
        ...

    def delete_pair(self, board_id: BoardId, pair_id: PairId) -> None:
        """Delete a pair."""
        ...
