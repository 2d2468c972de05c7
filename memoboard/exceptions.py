"""Custom exception hierarchy for memoboard."""


class MemoboardError(Exception):
    """Base exception for all memoboard errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class NotFoundError(MemoboardError):
    """Resource not found error."""


class BoardNotFoundError(NotFoundError):
    """Board not found error."""

    def __init__(self, board_id: object | None = None) -> None:
        """Initialize with board ID."""
        self.board_id = board_id
        if board_id is not None:
            super().__init__(f"Board with id {board_id} not found")
        else:
            super().__init__("Board not found")


class PairNotFoundError(NotFoundError):
    """Pair not found error."""

    def __init__(self, pair_id: object) -> None:
        """Initialize with pair ID."""
        self.pair_id = pair_id
        super().__init__(f"Pair with id {pair_id} not found")


class ServiceError(MemoboardError):
    """Service layer error."""


class PairGenerationError(ServiceError):
    """The pair generation collaborator failed or returned nothing usable."""


class PersistenceError(ServiceError):
    """Storage failed while saving or loading boards."""
