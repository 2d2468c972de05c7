"""Use case for opening a board in edit mode."""

import structlog

from memoboard.application.boards.protocols.board_repository import BoardRepositoryProtocol
from memoboard.application.boards.services.board_edit_session import BoardEditSession
from memoboard.application.common.notifications import Notification, NotifierProtocol
from memoboard.domain.boards.services.pair_validator import PairValidator
from memoboard.domain.common.value_objects.ids import BoardId
from memoboard.exceptions import BoardNotFoundError

logger = structlog.get_logger(__name__)


class EditBoardUseCase:
    """Loads a board level and wraps it in an edit session."""

    def __init__(
        self,
        board_repository: BoardRepositoryProtocol,
        notifier: NotifierProtocol,
        pair_validator: PairValidator | None = None,
    ) -> None:
        self.board_repository = board_repository
        self.notifier = notifier
        self.pair_validator = pair_validator or PairValidator()

    def open_session(self, board_id: BoardId, level: int = 1) -> BoardEditSession:
        """
        Open an edit session for one level of a board.

        Args:
            board_id: Board to edit
            level: 1-based level whose pairs are edited

        Returns:
            BoardEditSession over the level's persisted pairs

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        board = self.board_repository.find_by_id(board_id)
        if not board:
            raise BoardNotFoundError(board_id)

        pairs = self.board_repository.find_pairs(board_id, level)
        session = BoardEditSession(
            board=board,
            pairs=pairs,
            repository=self.board_repository,
            notifier=self.notifier,
            level=level,
            validator=self.pair_validator,
        )

        if session.is_over_limit:
            self.notifier.notify(
                Notification.error(
                    f"A level can hold at most {board.pairs_per_level} pairs",
                    title="Pair limit",
                )
            )

        logger.debug("edit_session_opened", board_id=str(board_id), level=level, pairs=len(pairs))
        return session
