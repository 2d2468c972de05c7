"""Tests for BoardEditSession and EditBoardUseCase."""

from unittest.mock import MagicMock

import pytest

from memoboard.application.boards.services.board_edit_session import BoardEditSession
from memoboard.application.boards.use_cases.edit_board_use_case import EditBoardUseCase
from memoboard.domain.boards.entities.board import Board
from memoboard.domain.boards.entities.pair import Pair
from memoboard.domain.boards.value_objects.pair_draft import PairDraft, PairPatch
from memoboard.domain.common.exceptions import DomainError
from memoboard.domain.common.value_objects import BoardId, PairId
from memoboard.exceptions import BoardNotFoundError, PersistenceError


@pytest.fixture
def session(board_repository, saved_board, notifier) -> BoardEditSession:
    use_case = EditBoardUseCase(board_repository=board_repository, notifier=notifier)
    first = board_repository.find_pairs(saved_board.id, level=1)
    # Free two slots so drafts can be added
    for pair in first[:2]:
        board_repository.delete_pair(saved_board.id, pair.id)
    return use_case.open_session(saved_board.id)


def _board_with_pairs(count: int) -> tuple[Board, list[Pair]]:
    board = Board.create(title="Biology", card_count=16)
    pairs = [
        Pair.create(board.id, PairDraft(term=f"term {i}", definition="d")) for i in range(count)
    ]
    return board, pairs


class TestOpenSession:
    def test_loads_one_level(self, board_repository, saved_board, notifier) -> None:
        use_case = EditBoardUseCase(board_repository=board_repository, notifier=notifier)

        session = use_case.open_session(saved_board.id)

        assert len(session.pairs) == 8
        assert session.drafts.max_pairs == 0
        assert not session.add_draft()
        assert notifier.notifications == []

    def test_unknown_board(self, board_repository, notifier) -> None:
        use_case = EditBoardUseCase(board_repository=board_repository, notifier=notifier)
        with pytest.raises(BoardNotFoundError):
            use_case.open_session(BoardId.generate())

    def test_over_limit_level_is_reported(self, notifier) -> None:
        board, pairs = _board_with_pairs(9)
        repository = MagicMock()
        repository.find_by_id.return_value = board
        repository.find_pairs.return_value = pairs

        session = EditBoardUseCase(board_repository=repository, notifier=notifier).open_session(
            board.id
        )

        assert session.is_over_limit
        assert notifier.errors == ["A level can hold at most 8 pairs"]


class TestSaveDraft:
    def test_saves_draft_as_pair(self, session, board_repository, notifier) -> None:
        session.add_draft()
        session.drafts.update_at(0, PairPatch(term=" fresh ", definition=" new "))

        created = session.save_draft(0)

        assert created is not None
        assert created.term == "fresh"
        assert created.level == 1
        assert len(session.pairs) == 7
        assert len(session.drafts) == 0
        assert session.drafts.max_pairs == 1
        assert notifier.successes[-1] == "Pair added"
        assert len(board_repository.find_pairs(session.board.id, level=1)) == 7

    def test_blank_draft_is_not_sent(self, notifier) -> None:
        board, pairs = _board_with_pairs(2)
        repository = MagicMock()
        session = BoardEditSession(board, pairs, repository, notifier)
        session.add_draft()
        session.drafts.update_at(0, PairPatch(term="   "))

        assert session.save_draft(0) is None
        assert notifier.errors == ["Term is required"]
        repository.create_pair.assert_not_called()
        assert len(session.drafts) == 1

    def test_duplicate_of_persisted_term(self, notifier) -> None:
        board, pairs = _board_with_pairs(2)
        repository = MagicMock()
        session = BoardEditSession(board, pairs, repository, notifier)
        session.drafts.add(PairDraft(term="TERM 1", definition="again"))

        assert session.save_draft(0) is None
        assert notifier.errors == ["Each pair term must be unique"]
        repository.create_pair.assert_not_called()

    def test_storage_failure_keeps_everything(self, notifier) -> None:
        board, pairs = _board_with_pairs(2)
        repository = MagicMock()
        repository.create_pair.side_effect = PersistenceError("Could not save changes")
        session = BoardEditSession(board, pairs, repository, notifier)
        session.drafts.add(PairDraft(term="new", definition="pair"))

        assert session.save_draft(0) is None
        assert len(session.drafts) == 1
        assert len(session.pairs) == 2
        assert notifier.errors == ["Could not save changes"]


class TestUpdatePair:
    def test_sends_only_changed_fields(self, notifier) -> None:
        board, pairs = _board_with_pairs(2)
        target = pairs[0]
        repository = MagicMock()
        repository.update_pair.return_value = Pair.create_with_id(
            target.id, board.id, target.term, "better", level=1
        )
        session = BoardEditSession(board, pairs, repository, notifier)

        updated = session.update_pair(target.id, f" {target.term} ", "better")

        repository.update_pair.assert_called_once_with(
            board.id, target.id, PairPatch(definition="better")
        )
        assert updated is not None
        assert session.pairs[0].definition == "better"
        assert notifier.successes == ["Pair updated"]

    def test_unchanged_edit_makes_no_call(self, notifier) -> None:
        board, pairs = _board_with_pairs(1)
        repository = MagicMock()
        session = BoardEditSession(board, pairs, repository, notifier)

        result = session.update_pair(pairs[0].id, pairs[0].term, " d ")

        assert result is pairs[0]
        repository.update_pair.assert_not_called()
        assert notifier.notifications == []

    def test_blank_field_is_rejected(self, notifier) -> None:
        board, pairs = _board_with_pairs(1)
        repository = MagicMock()
        session = BoardEditSession(board, pairs, repository, notifier)

        assert session.update_pair(pairs[0].id, pairs[0].term, "  ") is None
        assert notifier.errors == ["Definition is required"]
        repository.update_pair.assert_not_called()

    def test_persisted_update(self, session, board_repository) -> None:
        target = session.pairs[0]

        session.update_pair(target.id, "renamed", target.definition)

        stored = board_repository.find_pairs(session.board.id, level=1)
        assert stored[0].term == "renamed"


class TestDeletePair:
    def test_delete_frees_a_slot(self, session, board_repository, notifier) -> None:
        target = session.pairs[0]

        assert session.delete_pair(target.id)

        assert target not in session.pairs
        assert session.drafts.max_pairs == 3
        assert notifier.successes[-1] == "Pair deleted"
        assert len(board_repository.find_pairs(session.board.id, level=1)) == 5

    def test_unknown_pair(self, session) -> None:
        assert not session.delete_pair(PairId.generate())

    def test_storage_failure_keeps_pair(self, notifier) -> None:
        board, pairs = _board_with_pairs(2)
        repository = MagicMock()
        repository.delete_pair.side_effect = PersistenceError("Could not save changes")
        session = BoardEditSession(board, pairs, repository, notifier)

        assert not session.delete_pair(pairs[0].id)
        assert len(session.pairs) == 2
        assert notifier.errors == ["Could not save changes"]

    def test_domain_failure_keeps_pair(self, notifier) -> None:
        board, pairs = _board_with_pairs(2)
        repository = MagicMock()
        repository.delete_pair.side_effect = DomainError("Pair is locked")
        session = BoardEditSession(board, pairs, repository, notifier)

        assert not session.delete_pair(pairs[0].id)
        assert len(session.pairs) == 2
        assert notifier.errors == ["Pair is locked"]
