from memoboard.application.boards.use_cases import (
    AddLevelUseCase,
    CreateBoardUseCase,
    EditBoardUseCase,
    GeneratePairsUseCase,
)
from memoboard.config import get_settings
from memoboard.core import Container
from memoboard.domain.boards.services.pair_validator import PairValidator
from memoboard.infrastructure.boards.repositories import BoardRepository
from memoboard.infrastructure.common import LoggingNotifier


def test_container_wires_use_cases(db_session) -> None:
    container = Container()
    container.db.override(db_session)

    create_board = container.create_board_use_case()
    add_level = container.add_level_use_case()
    edit_board = container.edit_board_use_case()
    generate = container.generate_pairs_use_case()

    assert isinstance(create_board, CreateBoardUseCase)
    assert isinstance(add_level, AddLevelUseCase)
    assert isinstance(edit_board, EditBoardUseCase)
    assert isinstance(generate, GeneratePairsUseCase)
    assert isinstance(create_board.board_repository, BoardRepository)
    assert create_board.board_repository.db is db_session
    assert isinstance(create_board.notifier, LoggingNotifier)
    assert create_board.notifier is add_level.notifier
    assert generate.input_max_length == get_settings().GENERATION_INPUT_MAX_LENGTH
    assert isinstance(edit_board.pair_validator, PairValidator)


def test_edit_sessions_use_the_injected_validator(db_session, saved_board) -> None:
    container = Container()
    container.db.override(db_session)
    validator = PairValidator(max_length=10)
    container.pair_validator.override(validator)

    session = container.edit_board_use_case().open_session(saved_board.id)

    assert session.validator is validator
