"""Tests for PairValidator domain service."""

from memoboard.domain.boards.services.pair_validator import PairValidator
from memoboard.domain.boards.value_objects.capacity_context import CapacityContext
from memoboard.domain.boards.value_objects.pair_draft import PAIR_FIELD_MAX_LENGTH, PairDraft
from memoboard.domain.boards.value_objects.validation_result import (
    CollectionErrorCode,
    RowErrorCode,
)


def _draft(term: str, definition: str = "something") -> PairDraft:
    return PairDraft(term=term, definition=definition)


class TestRowRules:
    def test_valid_collection(self) -> None:
        result = PairValidator().validate([_draft("cat"), _draft("dog")])
        assert result.is_valid
        assert result.invalid_rows == []

    def test_blank_fields_are_required(self) -> None:
        result = PairValidator().validate([PairDraft(term="  ", definition="")])

        assert result.has_row_error(0, "term", RowErrorCode.REQUIRED)
        assert result.has_row_error(0, "definition", RowErrorCode.REQUIRED)
        assert [e.message for e in result.errors_for(0)] == [
            "Term is required",
            "Definition is required",
        ]

    def test_length_is_checked_after_trimming(self) -> None:
        at_limit = "a" * PAIR_FIELD_MAX_LENGTH
        result = PairValidator().validate(
            [_draft(f"  {at_limit}  "), _draft("b" * (PAIR_FIELD_MAX_LENGTH + 1))]
        )

        assert not result.has_row_error(0)
        assert result.has_row_error(1, "term", RowErrorCode.TOO_LONG)

    def test_duplicate_terms_are_case_insensitive(self) -> None:
        result = PairValidator().validate([_draft("Cat"), _draft("dog"), _draft(" cat ")])

        assert result.has_row_error(0, "term", RowErrorCode.DUPLICATE)
        assert result.has_row_error(2, "term", RowErrorCode.DUPLICATE)
        assert not result.has_row_error(1)
        assert result.invalid_rows == [0, 2]

    def test_terms_differing_only_in_case_are_duplicates(self) -> None:
        result = PairValidator().validate([_draft("Term"), _draft("TERM")])

        assert result.has_row_error(0, "term", RowErrorCode.DUPLICATE)
        assert result.has_row_error(1, "term", RowErrorCode.DUPLICATE)

    def test_similar_terms_are_not_duplicates(self) -> None:
        result = PairValidator().validate([_draft("Term"), _draft("Terms")])

        assert result.is_valid

    def test_blank_terms_are_not_duplicates(self) -> None:
        result = PairValidator().validate([_draft(""), _draft("")])

        assert not result.has_row_error(0, code=RowErrorCode.DUPLICATE)
        assert result.has_row_error(0, "term", RowErrorCode.REQUIRED)

    def test_validate_draft_checks_single_row(self) -> None:
        errors = PairValidator().validate_draft(_draft("", "ok"), index=3)
        assert len(errors) == 1
        assert errors[0].index == 3
        assert errors[0].field == "term"


class TestCollectionRules:
    def test_empty_collection(self) -> None:
        result = PairValidator().validate([])
        assert result.has_collection_error(CollectionErrorCode.EMPTY)
        assert not result.is_valid

    def test_capacity_exceeded(self) -> None:
        drafts = [_draft(f"term {i}") for i in range(9)]
        result = PairValidator().validate(drafts, CapacityContext.for_level(16))

        assert result.has_collection_error(CollectionErrorCode.CAPACITY_EXCEEDED)
        assert result.collection_errors[0].message == "A maximum of 8 pairs is allowed"

    def test_capacity_is_ignored_without_context(self) -> None:
        drafts = [_draft(f"term {i}") for i in range(9)]
        assert PairValidator().validate(drafts).is_valid

    def test_validate_is_repeatable(self) -> None:
        drafts = [_draft("Cat"), _draft("cat"), _draft("", "")]
        validator = PairValidator()

        assert validator.validate(drafts) == validator.validate(drafts)
