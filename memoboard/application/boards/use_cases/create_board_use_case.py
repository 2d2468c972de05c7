"""Use case for creating a board from an editor's pairs."""

import structlog

from memoboard.application.boards.protocols.board_repository import BoardRepositoryProtocol
from memoboard.application.boards.services.pair_collection_controller import (
    PairCollectionController,
)
from memoboard.application.common.notifications import Notification, NotifierProtocol
from memoboard.application.common.result import Failure, Result, Success
from memoboard.domain.boards.entities.board import Board
from memoboard.domain.boards.value_objects.validation_result import ValidationResult
from memoboard.domain.common.exceptions import DomainError
from memoboard.exceptions import MemoboardError

logger = structlog.get_logger(__name__)


class CreateBoardUseCase:
    """Use case for the board creation screen."""

    def __init__(
        self,
        board_repository: BoardRepositoryProtocol,
        notifier: NotifierProtocol,
    ) -> None:
        """Initialize use case with repository protocol and notifier."""
        self.board_repository = board_repository
        self.notifier = notifier

    def submit(
        self,
        controller: PairCollectionController,
        title: str,
        is_public: bool = True,
        tags: list[str] | None = None,
    ) -> Result[Board, ValidationResult | str]:
        """
        Create a board holding the editor's pairs.

        Pairs are stored in levels of card_count / 2, following their order
        in the editor.

        Args:
            controller: Editor in board mode
            title: Board title (1-120 characters)
            is_public: Whether other users can play the board
            tags: Optional tags (at most 10, each at most 20 characters)

        Returns:
            Success with the saved board, Failure with the ValidationResult
            when the pairs are invalid, or Failure with a message when the
            board could not be built or saved
        """
        controller.settle()
        validation = controller.validate()
        if not validation.is_valid:
            logger.info(
                "board_submission_blocked",
                row_errors=len(validation.row_errors),
                collection_errors=len(validation.collection_errors),
            )
            return Failure(validation)

        try:
            board = Board.create(
                title=title,
                card_count=controller.context.card_count,
                is_public=is_public,
                tags=tags,
            )
        except DomainError as e:
            self.notifier.notify(Notification.error(e.message))
            return Failure(e.message)

        drafts = [draft.normalized() for draft in controller.drafts]
        try:
            saved = self.board_repository.create_board(board, drafts)
        except (MemoboardError, DomainError) as e:
            logger.warning("board_create_failed", error=str(e))
            self.notifier.notify(Notification.error("Could not create the board"))
            return Failure(e.message)

        logger.info("board_created", board_id=str(saved.id), pair_count=len(drafts))
        self.notifier.notify(Notification.success("Board created", title="Success"))
        return Success(saved)
