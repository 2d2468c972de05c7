"""Use case for adding a level of pairs to an existing board."""

import structlog

from memoboard.application.boards.protocols.board_repository import BoardRepositoryProtocol
from memoboard.application.boards.services.pair_collection_controller import (
    PairCollectionController,
)
from memoboard.application.common.notifications import Notification, NotifierProtocol
from memoboard.application.common.result import Failure, Result, Success
from memoboard.domain.boards.value_objects.validation_result import ValidationResult
from memoboard.domain.common.exceptions import DomainError
from memoboard.domain.common.value_objects.ids import BoardId
from memoboard.exceptions import BoardNotFoundError, MemoboardError

logger = structlog.get_logger(__name__)


class AddLevelUseCase:
    """Use case for the level creation screen."""

    def __init__(
        self,
        board_repository: BoardRepositoryProtocol,
        notifier: NotifierProtocol,
    ) -> None:
        self.board_repository = board_repository
        self.notifier = notifier

    def submit(
        self,
        controller: PairCollectionController,
        board_id: BoardId,
        continue_editing: bool = False,
    ) -> Result[int, ValidationResult | str]:
        """
        Save the editor's pairs as the next level of a board.

        Args:
            controller: Editor in level mode
            board_id: Board receiving the level
            continue_editing: Empty the editor after saving so the next level
                can be entered right away

        Returns:
            Success with the new 1-based level number, or Failure with the
            ValidationResult / message explaining why nothing was saved
        """
        controller.settle()

        limit = controller.context.pairs_per_level
        if len(controller) > limit:
            message = f"The maximum number of pairs for this level is {limit}"
            self.notifier.notify(Notification.error(message))
            return Failure(message)

        validation = controller.validate()
        if not validation.is_valid:
            logger.info("level_submission_blocked", row_errors=len(validation.row_errors))
            return Failure(validation)

        drafts = [draft.normalized() for draft in controller.drafts]
        try:
            board = self.board_repository.find_by_id(board_id)
            if board is None:
                raise BoardNotFoundError(board_id)
            if board.card_count != controller.context.card_count:
                message = "Level card count does not match the board"
                self.notifier.notify(Notification.error(message))
                return Failure(message)
            level = self.board_repository.add_level(board_id, drafts)
        except (MemoboardError, DomainError) as e:
            logger.warning("level_create_failed", board_id=str(board_id), error=str(e))
            self.notifier.notify(Notification.error(e.message or "Could not save the level"))
            return Failure(e.message)

        logger.info("level_created", board_id=str(board_id), level=level, pair_count=len(drafts))
        self.notifier.notify(Notification.success("Level saved", title="Success"))

        if continue_editing:
            controller.reset()
        return Success(level)
