"""Selection step between pair generation and bulk insertion."""

from collections.abc import Sequence

import structlog

from memoboard.application.boards.protocols.pair_generation_service import GeneratedPair
from memoboard.domain.boards.value_objects.pair_draft import PairDraft
from memoboard.domain.common.exceptions import BusinessRuleViolationError

logger = structlog.get_logger(__name__)


class AcceptanceGate:
    """
    Holds one batch of generated candidates and the user's choice among them.

    Every candidate starts selected. The gate closes on accept or cancel and
    its selection is not kept anywhere afterwards.
    """

    def __init__(self, candidates: Sequence[PairDraft]) -> None:
        self._candidates = tuple(candidates)
        self._selected = [True] * len(self._candidates)
        self._open = True

    @classmethod
    def from_generated(cls, pairs: Sequence[GeneratedPair]) -> "AcceptanceGate":
        return cls([PairDraft(term=pair.term, definition=pair.definition) for pair in pairs])

    @property
    def candidates(self) -> tuple[PairDraft, ...]:
        return self._candidates

    @property
    def selection(self) -> tuple[bool, ...]:
        return tuple(self._selected)

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def selected_count(self) -> int:
        return sum(self._selected)

    @property
    def can_accept(self) -> bool:
        """Accept is blocked while nothing is selected."""
        return self._open and self.selected_count > 0

    def is_selected(self, index: int) -> bool:
        return 0 <= index < len(self._selected) and self._selected[index]

    def toggle(self, index: int) -> bool:
        """
        Flip the selection of one candidate.

        Returns:
            True if a candidate was toggled, False if index is out of range

        Raises:
            BusinessRuleViolationError: If the gate is already closed
        """
        self._ensure_open()
        if not 0 <= index < len(self._selected):
            return False
        self._selected[index] = not self._selected[index]
        return True

    def accept_selected(self) -> list[PairDraft]:
        """
        Close the gate and hand over the selected candidates in original order.

        Raises:
            BusinessRuleViolationError: If nothing is selected or the gate is closed
        """
        self._ensure_open()
        if not self.can_accept:
            raise BusinessRuleViolationError("nothing_selected", "Select at least one pair")

        accepted = [
            candidate
            for candidate, selected in zip(self._candidates, self._selected, strict=True)
            if selected
        ]
        offered = len(self._candidates)
        self._close()
        logger.debug("candidates_accepted", accepted=len(accepted), offered=offered)
        return accepted

    def cancel(self) -> None:
        """Discard the batch."""
        self._close()

    def _close(self) -> None:
        self._open = False
        self._candidates = ()
        self._selected = []

    def _ensure_open(self) -> None:
        if not self._open:
            raise BusinessRuleViolationError("gate_closed", "This batch was already closed")
