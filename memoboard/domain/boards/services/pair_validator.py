"""
Domain service validating pair drafts.

This is a pure domain service with no infrastructure dependencies.
"""

from collections import defaultdict
from collections.abc import Sequence

from memoboard.domain.boards.services.capacity_policy import CapacityPolicy
from memoboard.domain.boards.value_objects.capacity_context import CapacityContext
from memoboard.domain.boards.value_objects.pair_draft import PAIR_FIELD_MAX_LENGTH, PairDraft
from memoboard.domain.boards.value_objects.validation_result import (
    CollectionError,
    CollectionErrorCode,
    PairField,
    RowError,
    RowErrorCode,
    ValidationResult,
)


class PairValidator:
    """
    Validates drafts row by row and as a collection.

    Row rules:
    - term and definition are required (non-blank after trimming)
    - term and definition are at most max_length characters after trimming
    - terms are unique, case-insensitively; every row of a duplicate group is flagged

    Collection rules:
    - at least one pair
    - no more pairs than the capacity context allows
    """

    def __init__(self, max_length: int = PAIR_FIELD_MAX_LENGTH) -> None:
        self.max_length = max_length

    def validate_draft(self, draft: PairDraft, index: int = 0) -> tuple[RowError, ...]:
        """Check required and length rules for a single draft."""
        errors: list[RowError] = []
        errors.extend(self._check_field(index, "term", draft.term))
        errors.extend(self._check_field(index, "definition", draft.definition))
        return tuple(errors)

    def validate(
        self,
        drafts: Sequence[PairDraft],
        context: CapacityContext | None = None,
    ) -> ValidationResult:
        """
        Validate a whole collection.

        Args:
            drafts: Rows in display order
            context: Capacity context; capacity is not checked when omitted

        Returns:
            ValidationResult with per-row and collection-level errors
        """
        duplicates = self._find_duplicate_rows(drafts)

        row_errors: list[RowError] = []
        for index, draft in enumerate(drafts):
            row_errors.extend(self._check_field(index, "term", draft.term))
            if index in duplicates:
                row_errors.append(
                    RowError(
                        index=index,
                        field="term",
                        code=RowErrorCode.DUPLICATE,
                        message="Each pair term must be unique",
                    )
                )
            row_errors.extend(self._check_field(index, "definition", draft.definition))

        collection_errors: list[CollectionError] = []
        if not drafts:
            collection_errors.append(
                CollectionError(
                    code=CollectionErrorCode.EMPTY,
                    message="At least one pair is required",
                )
            )
        if context is not None and CapacityPolicy.is_exceeded(context, len(drafts)):
            limit = CapacityPolicy.max_pairs(context)
            collection_errors.append(
                CollectionError(
                    code=CollectionErrorCode.CAPACITY_EXCEEDED,
                    message=f"A maximum of {limit} pairs is allowed",
                )
            )

        return ValidationResult(
            row_errors=tuple(row_errors),
            collection_errors=tuple(collection_errors),
        )

    def _check_field(self, index: int, field: PairField, value: str) -> list[RowError]:
        label = "Term" if field == "term" else "Definition"
        stripped = value.strip()
        if not stripped:
            return [
                RowError(
                    index=index,
                    field=field,
                    code=RowErrorCode.REQUIRED,
                    message=f"{label} is required",
                )
            ]
        if len(stripped) > self.max_length:
            return [
                RowError(
                    index=index,
                    field=field,
                    code=RowErrorCode.TOO_LONG,
                    message=f"{label} must not exceed {self.max_length} characters",
                )
            ]
        return []

    @staticmethod
    def _find_duplicate_rows(drafts: Sequence[PairDraft]) -> set[int]:
        rows_by_term: dict[str, list[int]] = defaultdict(list)
        for index, draft in enumerate(drafts):
            key = draft.term.strip().casefold()
            if key:
                rows_by_term[key].append(index)

        return {
            index for indices in rows_by_term.values() if len(indices) > 1 for index in indices
        }
