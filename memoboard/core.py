from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from memoboard.application.boards.use_cases.add_level_use_case import AddLevelUseCase
from memoboard.application.boards.use_cases.create_board_use_case import CreateBoardUseCase
from memoboard.application.boards.use_cases.edit_board_use_case import EditBoardUseCase
from memoboard.application.boards.use_cases.generate_pairs_use_case import GeneratePairsUseCase
from memoboard.config import get_settings
from memoboard.domain.boards.services.pair_validator import PairValidator
from memoboard.infrastructure.ai.ai_service import AIPairGenerationService
from memoboard.infrastructure.boards.repositories import BoardRepository
from memoboard.infrastructure.common import LoggingNotifier


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    board_repository = providers.Factory(BoardRepository, db=db)

    # External services
    notifier = providers.Singleton(LoggingNotifier)
    pair_generation_service = providers.Singleton(AIPairGenerationService)

    # Domain services (pure domain logic, no db)
    pair_validator = providers.Factory(PairValidator)

    # Boards module, application use cases
    create_board_use_case = providers.Factory(
        CreateBoardUseCase,
        board_repository=board_repository,
        notifier=notifier,
    )
    add_level_use_case = providers.Factory(
        AddLevelUseCase,
        board_repository=board_repository,
        notifier=notifier,
    )
    edit_board_use_case = providers.Factory(
        EditBoardUseCase,
        board_repository=board_repository,
        notifier=notifier,
        pair_validator=pair_validator,
    )
    generate_pairs_use_case = providers.Factory(
        GeneratePairsUseCase,
        pair_generation_service=pair_generation_service,
        notifier=notifier,
        input_max_length=settings.provided.GENERATION_INPUT_MAX_LENGTH,
    )


# Initialize container
container = Container()
