"""Use case for AI-generated pairs flowing into an editor."""

import structlog

from memoboard.application.boards.protocols.pair_generation_service import (
    PairGenerationServiceProtocol,
)
from memoboard.application.boards.services.acceptance_gate import AcceptanceGate
from memoboard.application.boards.services.pair_collection_controller import (
    PairCollectionController,
)
from memoboard.application.common.notifications import Notification, NotifierProtocol
from memoboard.application.common.result import Failure, Result, Success
from memoboard.domain.boards.value_objects.card_count import CardCount
from memoboard.domain.common.exceptions import DomainError
from memoboard.exceptions import PairGenerationError

logger = structlog.get_logger(__name__)

DEFAULT_INPUT_MAX_LENGTH = 5000


class GeneratePairsUseCase:
    """Generate candidates, let the user pick, and hand the pick to an editor."""

    def __init__(
        self,
        pair_generation_service: PairGenerationServiceProtocol,
        notifier: NotifierProtocol,
        input_max_length: int = DEFAULT_INPUT_MAX_LENGTH,
    ) -> None:
        self.pair_generation_service = pair_generation_service
        self.notifier = notifier
        self.input_max_length = input_max_length

    async def generate(self, input_text: str, card_count: int) -> Result[AcceptanceGate, str]:
        """
        Ask the generation service for candidates and open a gate over them.

        Args:
            input_text: Source text the pairs are generated from
            card_count: Card count of the target board (16 or 24)

        Returns:
            Success with an open AcceptanceGate, or Failure with the message
            that was shown to the user
        """
        if not input_text.strip():
            return self._fail("Input text cannot be empty")
        if len(input_text) > self.input_max_length:
            return self._fail(f"Input text must not exceed {self.input_max_length:,} characters")

        try:
            card = CardCount.parse(card_count)
        except DomainError as e:
            return self._fail(e.message)

        try:
            generated = await self.pair_generation_service.generate_pairs(input_text, int(card))
        except PairGenerationError as e:
            logger.warning("pair_generation_failed", error=str(e))
            return self._fail(e.message or "Could not generate pairs")

        candidates = generated[: card.pairs_per_level]
        if not candidates:
            return self._fail("No pairs were generated from this text")

        logger.info(
            "pair_candidates_generated",
            card_count=int(card),
            candidate_count=len(candidates),
        )
        return Success(AcceptanceGate.from_generated(candidates))

    def accept(self, gate: AcceptanceGate, controller: PairCollectionController) -> int:
        """
        Insert the selected candidates into the editor.

        Blocked (returns 0, nothing inserted) while no candidate is selected.

        Returns:
            Number of pairs appended to the editor
        """
        if not gate.can_accept:
            return 0

        appended = controller.add_pairs(gate.accept_selected())
        self.notifier.notify(Notification.success(f"Added {appended} pairs", title="Pairs added"))
        return appended

    def cancel(self, gate: AcceptanceGate) -> None:
        gate.cancel()

    def _fail(self, message: str) -> Failure[str]:
        self.notifier.notify(Notification.error(message))
        return Failure(message)
