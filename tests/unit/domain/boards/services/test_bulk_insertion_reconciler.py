"""Tests for BulkInsertionReconciler domain service."""

from memoboard.domain.boards.services.bulk_insertion_reconciler import BulkInsertionReconciler
from memoboard.domain.boards.value_objects.pair_draft import PairDraft


def _drafts(*terms: str) -> list[PairDraft]:
    return [PairDraft(term=t, definition=f"{t} meaning" if t else "") for t in terms]


def test_clamp_keeps_first_candidates_in_order() -> None:
    outcome = BulkInsertionReconciler.clamp(_drafts("a", "b", "c", "d", "e"), 3)

    assert [d.term for d in outcome.accepted] == ["a", "b", "c"]
    assert outcome.dropped == 2


def test_clamp_with_no_room_drops_everything() -> None:
    outcome = BulkInsertionReconciler.clamp(_drafts("a", "b"), 0)
    assert outcome.accepted == ()
    assert outcome.dropped == 2


def test_clamp_treats_negative_room_as_zero() -> None:
    outcome = BulkInsertionReconciler.clamp(_drafts("a"), -3)
    assert outcome.accepted == ()
    assert outcome.dropped == 1


def test_prune_removes_only_fully_blank_rows() -> None:
    rows = [
        PairDraft(term="", definition=""),
        PairDraft(term="cat", definition=""),
        PairDraft(term="  ", definition="\t"),
        PairDraft(term="", definition="a pet"),
    ]

    survivors, removed = BulkInsertionReconciler.prune_blank_rows(rows)

    assert removed == 2
    assert survivors == [rows[1], rows[3]]
