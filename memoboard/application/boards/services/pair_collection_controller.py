"""
Stateful editor for an ordered collection of pair drafts.

One controller backs one editing screen (board creation, level creation or
the draft rows of board editing). Every mutation is synchronous and refuses
silently instead of raising: capacity is enforced by returning False / 0 and
validation problems come back as a ValidationResult.

Bulk insertion is two-phase:
    appended = controller.bulk_insert(candidates)   # clamp and append
    controller.settle()                             # prune blank rows

add_pairs() is the entry point for external callers (the generation panel);
it runs bulk_insert() and schedules settle() on the running event loop, so
the prune observes the state after the append.
"""

import asyncio
from collections.abc import Callable, Iterable, Mapping, Sequence

import structlog

from memoboard.domain.boards.services.bulk_insertion_reconciler import BulkInsertionReconciler
from memoboard.domain.boards.services.capacity_policy import CapacityPolicy
from memoboard.domain.boards.services.pair_validator import PairValidator
from memoboard.domain.boards.value_objects.capacity_context import CapacityContext
from memoboard.domain.boards.value_objects.pair_draft import PairDraft, PairPatch
from memoboard.domain.boards.value_objects.validation_result import ValidationResult

logger = structlog.get_logger(__name__)

Listener = Callable[[tuple[PairDraft, ...]], None]
PairInput = PairDraft | Mapping[str, object]


class PairCollectionController:
    """Owns the pair drafts of one editor and keeps them within capacity."""

    def __init__(
        self,
        context: CapacityContext,
        initial: Iterable[PairDraft] | None = None,
        validator: PairValidator | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            context: Capacity context of the editor
            initial: Starting rows; a single blank row when omitted
            validator: Validator used by validate()
        """
        self._context = context
        self._validator = validator or PairValidator()
        self._listeners: list[Listener] = []
        self._prune_pending = False
        self._drafts: list[PairDraft] = self._clamp_to_capacity(
            [PairDraft.empty()] if initial is None else list(initial)
        )

    def __len__(self) -> int:
        return len(self._drafts)

    @property
    def context(self) -> CapacityContext:
        return self._context

    @property
    def drafts(self) -> tuple[PairDraft, ...]:
        """Snapshot of the current rows."""
        return tuple(self._drafts)

    @property
    def max_pairs(self) -> int:
        return CapacityPolicy.max_pairs(self._context)

    @property
    def remaining(self) -> int:
        """Free slots left; the add affordance is shown only while positive."""
        return CapacityPolicy.max_additional(self._context, len(self._drafts))

    @property
    def can_add(self) -> bool:
        return self.remaining > 0

    @property
    def has_pending_prune(self) -> bool:
        return self._prune_pending

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback invoked with a snapshot after every change.

        Returns:
            Function removing the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_context(self, context: CapacityContext) -> None:
        """Swap the capacity context, e.g. after the persisted count changed."""
        self._context = context

    def add(self, draft: PairDraft | None = None) -> bool:
        """
        Append a row if there is room.

        Returns:
            True if the row was appended, False if capacity is reached
        """
        if not self.can_add:
            logger.debug("pair_add_refused", count=len(self._drafts), max_pairs=self.max_pairs)
            return False
        self._drafts.append(draft if draft is not None else PairDraft.empty())
        self._notify()
        return True

    def remove_at(self, index: int) -> bool:
        """
        Remove the row at index; later rows shift down by one.

        Returns:
            True if a row was removed, False if index is out of range
        """
        if not 0 <= index < len(self._drafts):
            return False
        del self._drafts[index]
        self._notify()
        return True

    def update_at(self, index: int, patch: PairPatch) -> bool:
        """
        Merge a partial update into the row at index.

        Returns:
            True if the row exists, False if index is out of range
        """
        if not 0 <= index < len(self._drafts):
            return False
        updated = patch.apply_to(self._drafts[index])
        if updated != self._drafts[index]:
            self._drafts[index] = updated
            self._notify()
        return True

    def bulk_insert(self, candidates: Sequence[PairInput]) -> int:
        """
        Append as many candidates as fit and mark the collection for pruning.

        Candidates beyond the remaining room are dropped. The blank-row prune
        is not run here; call settle() once the insertion is visible.

        Args:
            candidates: Accepted pairs, in the order they should appear

        Returns:
            Number of appended candidates
        """
        drafts = [self._coerce(candidate) for candidate in candidates]
        outcome = BulkInsertionReconciler.clamp(drafts, self.remaining)
        self._drafts.extend(outcome.accepted)
        self._prune_pending = True

        logger.info(
            "pairs_bulk_inserted",
            appended=len(outcome.accepted),
            dropped=outcome.dropped,
            count=len(self._drafts),
        )
        if outcome.accepted:
            self._notify()
        return len(outcome.accepted)

    def settle(self) -> int:
        """
        Run the pending prune: drop every row whose term and definition are blank.

        Scans the whole collection, including rows that existed before the
        bulk insert. Does nothing when no bulk insert is pending.

        Returns:
            Number of removed rows
        """
        if not self._prune_pending:
            return 0
        self._prune_pending = False

        survivors, removed = BulkInsertionReconciler.prune_blank_rows(self._drafts)
        if removed:
            self._drafts = survivors
            logger.debug("blank_pairs_pruned", removed=removed, count=len(self._drafts))
            self._notify()
        return removed

    def add_pairs(self, pairs: Iterable[PairInput]) -> int:
        """
        Insert externally produced pairs, e.g. accepted AI candidates.

        The prune runs on the next turn of the running event loop. Without a
        running loop there is no later turn, so it runs before returning.

        Returns:
            Number of appended pairs
        """
        appended = self.bulk_insert(list(pairs))
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.settle()
        else:
            loop.call_soon(self.settle)
        return appended

    def reset(self, drafts: Iterable[PairDraft] = ()) -> None:
        """Replace every row, e.g. to start the next level after saving one."""
        self._prune_pending = False
        self._drafts = self._clamp_to_capacity(list(drafts))
        self._notify()

    def validate(self) -> ValidationResult:
        """Check every row and the collection as a whole. Does not modify state."""
        return self._validator.validate(self._drafts, self._context)

    def _clamp_to_capacity(self, drafts: list[PairDraft]) -> list[PairDraft]:
        limit = self.max_pairs
        if len(drafts) > limit:
            logger.warning("initial_pairs_clamped", given=len(drafts), limit=limit)
            return drafts[:limit]
        return drafts

    def _notify(self) -> None:
        snapshot = self.drafts
        for listener in list(self._listeners):
            listener(snapshot)

    @staticmethod
    def _coerce(candidate: PairInput) -> PairDraft:
        if isinstance(candidate, PairDraft):
            return candidate
        return PairDraft.from_mapping(candidate)
