"""
Domain service for merging a batch of generated pairs into a collection.

Insertion happens in two steps:
1. clamp() keeps only the candidates that fit into the remaining room
2. prune_blank_rows() later removes every row left completely blank

The second step is run by the owner of the collection once the insertion is
visible, never in the same call as the append.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from memoboard.domain.boards.value_objects.pair_draft import PairDraft


@dataclass(frozen=True)
class ClampOutcome:
    """Candidates kept by a clamp and how many were dropped."""

    accepted: tuple[PairDraft, ...]
    dropped: int


class BulkInsertionReconciler:
    """Stateless bulk insertion steps."""

    @staticmethod
    def clamp(candidates: Sequence[PairDraft], room: int) -> ClampOutcome:
        """
        Keep the first `room` candidates, in order.

        Candidates past the room are dropped silently; the caller only logs them.
        """
        room = max(0, room)
        accepted = tuple(candidates[:room])
        return ClampOutcome(accepted=accepted, dropped=len(candidates) - len(accepted))

    @staticmethod
    def prune_blank_rows(drafts: Sequence[PairDraft]) -> tuple[list[PairDraft], int]:
        """
        Remove rows whose term and definition are both blank.

        Returns:
            Tuple of (surviving rows in original order, number of removed rows)
        """
        survivors = [draft for draft in drafts if not draft.is_blank]
        return survivors, len(drafts) - len(survivors)
