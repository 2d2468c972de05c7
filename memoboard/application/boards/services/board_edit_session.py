"""Edit-mode state of one board level."""

from collections.abc import Sequence

import structlog

from memoboard.application.boards.protocols.board_repository import BoardRepositoryProtocol
from memoboard.application.boards.services.pair_collection_controller import (
    PairCollectionController,
)
from memoboard.application.common.notifications import Notification, NotifierProtocol
from memoboard.domain.boards.entities.board import Board
from memoboard.domain.boards.entities.pair import Pair
from memoboard.domain.boards.services.pair_validator import PairValidator
from memoboard.domain.boards.value_objects.capacity_context import CapacityContext
from memoboard.domain.boards.value_objects.pair_draft import PairDraft, PairPatch
from memoboard.domain.common.exceptions import DomainError
from memoboard.domain.common.value_objects.ids import PairId
from memoboard.exceptions import MemoboardError

logger = structlog.get_logger(__name__)


class BoardEditSession:
    """
    Persisted pairs of one level plus the draft rows being added to it.

    Every change to persisted pairs goes through the repository first; the
    local lists change only after the call succeeded. A failed call leaves
    everything as it was and emits an error notification.
    """

    def __init__(
        self,
        board: Board,
        pairs: Sequence[Pair],
        repository: BoardRepositoryProtocol,
        notifier: NotifierProtocol,
        level: int = 1,
        validator: PairValidator | None = None,
    ) -> None:
        self.board = board
        self.level = level
        self.repository = repository
        self.notifier = notifier
        self.validator = validator or PairValidator()
        self._pairs = list(pairs)
        self.drafts = PairCollectionController(
            CapacityContext.for_edit(board.card_count, len(self._pairs)), initial=()
        )

    @property
    def pairs(self) -> tuple[Pair, ...]:
        return tuple(self._pairs)

    @property
    def is_over_limit(self) -> bool:
        return len(self._pairs) > self.board.pairs_per_level

    def add_draft(self) -> bool:
        return self.drafts.add()

    def discard_draft(self, index: int) -> bool:
        return self.drafts.remove_at(index)

    def save_draft(self, index: int) -> Pair | None:
        """
        Persist the draft row at index as a new pair.

        Returns:
            Created pair, or None if the row is invalid or saving failed
        """
        if not 0 <= index < len(self.drafts):
            return None
        draft = self.drafts.drafts[index]

        problem = self._check(draft)
        if problem:
            self.notifier.notify(Notification.error(problem))
            return None

        try:
            created = self.repository.create_pair(self.board.id, draft.normalized(), self.level)
        except (MemoboardError, DomainError) as e:
            logger.warning("pair_create_failed", board_id=str(self.board.id), error=str(e))
            self.notifier.notify(Notification.error(e.message or "Could not save the pair"))
            return None

        self.drafts.remove_at(index)
        self._pairs.append(created)
        self._sync_capacity()
        self.notifier.notify(Notification.success("Pair added"))
        return created

    def update_pair(self, pair_id: PairId, term: str, definition: str) -> Pair | None:
        """
        Save edits of a persisted pair, sending only the changed fields.

        Returns:
            The pair as persisted after the call (unchanged pair when nothing
            changed), or None if the edit is invalid or saving failed
        """
        current = self._find(pair_id)
        if current is None:
            self.notifier.notify(Notification.error(f"Pair with id {pair_id} not found"))
            return None

        patch = PairPatch.diff(current.term, current.definition, term, definition)
        if patch.is_empty:
            return current

        problem = self._check(patch.apply_to(current.to_draft()), ignore=current)
        if problem:
            self.notifier.notify(Notification.error(problem))
            return None

        try:
            updated = self.repository.update_pair(self.board.id, pair_id, patch)
        except (MemoboardError, DomainError) as e:
            logger.warning("pair_update_failed", pair_id=str(pair_id), error=str(e))
            self.notifier.notify(Notification.error(e.message or "Could not save the pair"))
            return None

        self._pairs = [updated if pair.id == pair_id else pair for pair in self._pairs]
        self.notifier.notify(Notification.success("Pair updated"))
        return updated

    def delete_pair(self, pair_id: PairId) -> bool:
        """
        Delete a persisted pair.

        Returns:
            True if the pair was deleted
        """
        if self._find(pair_id) is None:
            return False

        try:
            self.repository.delete_pair(self.board.id, pair_id)
        except (MemoboardError, DomainError) as e:
            logger.warning("pair_delete_failed", pair_id=str(pair_id), error=str(e))
            self.notifier.notify(Notification.error(e.message or "Could not delete the pair"))
            return False

        self._pairs = [pair for pair in self._pairs if pair.id != pair_id]
        self._sync_capacity()
        self.notifier.notify(Notification.success("Pair deleted"))
        return True

    def _check(self, draft: PairDraft, ignore: Pair | None = None) -> str | None:
        errors = self.validator.validate_draft(draft)
        if errors:
            return errors[0].message

        key = draft.term.strip().casefold()
        for pair in self._pairs:
            if pair is not ignore and pair.term.casefold() == key:
                return "Each pair term must be unique"
        return None

    def _find(self, pair_id: PairId) -> Pair | None:
        return next((pair for pair in self._pairs if pair.id == pair_id), None)

    def _sync_capacity(self) -> None:
        self.drafts.set_context(self.drafts.context.with_existing_count(len(self._pairs)))
