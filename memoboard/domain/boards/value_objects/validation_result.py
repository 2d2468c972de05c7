"""Structured outcome of validating a pair collection."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from memoboard.domain.common.value_object import ValueObject

PairField = Literal["term", "definition"]


class RowErrorCode(StrEnum):
    REQUIRED = "required"
    TOO_LONG = "too_long"
    DUPLICATE = "duplicate"


class CollectionErrorCode(StrEnum):
    EMPTY = "empty"
    CAPACITY_EXCEEDED = "capacity_exceeded"


@dataclass(frozen=True)
class RowError(ValueObject):
    """Problem with one field of one row."""

    index: int
    field: PairField
    code: RowErrorCode
    message: str


@dataclass(frozen=True)
class CollectionError(ValueObject):
    """Problem with the collection as a whole."""

    code: CollectionErrorCode
    message: str


@dataclass(frozen=True)
class ValidationResult(ValueObject):
    """
    Result of validating every row of a collection.

    No row is corrected automatically; the caller shows the errors and
    the user edits the rows again.
    """

    row_errors: tuple[RowError, ...] = ()
    collection_errors: tuple[CollectionError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.row_errors and not self.collection_errors

    @property
    def invalid_rows(self) -> list[int]:
        """Sorted indices of rows with at least one error."""
        return sorted({error.index for error in self.row_errors})

    def errors_for(self, index: int) -> tuple[RowError, ...]:
        return tuple(error for error in self.row_errors if error.index == index)

    def has_row_error(
        self,
        index: int,
        field: PairField | None = None,
        code: RowErrorCode | None = None,
    ) -> bool:
        return any(
            (field is None or error.field == field) and (code is None or error.code == code)
            for error in self.errors_for(index)
        )

    def has_collection_error(self, code: CollectionErrorCode) -> bool:
        return any(error.code == code for error in self.collection_errors)
