"""
Pair draft value objects.

A PairDraft is a term/definition row that lives only in the editor until it
is submitted. Drafts are allowed to be blank or invalid; validation happens
when the whole collection is checked, never on construction.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace

from memoboard.domain.common.value_object import ValueObject

PAIR_FIELD_MAX_LENGTH = 255


@dataclass(frozen=True)
class PairDraft(ValueObject):
    """One editable term/definition row."""

    term: str = ""
    definition: str = ""

    @classmethod
    def empty(cls) -> "PairDraft":
        return cls()

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "PairDraft":
        """Build a draft from a {"term": ..., "definition": ...} mapping."""
        return cls(
            term=str(data.get("term") or ""),
            definition=str(data.get("definition") or ""),
        )

    @property
    def is_blank(self) -> bool:
        """True when both term and definition are empty or whitespace only."""
        return not self.term.strip() and not self.definition.strip()

    def normalized(self) -> "PairDraft":
        """Return the draft with surrounding whitespace stripped."""
        return PairDraft(term=self.term.strip(), definition=self.definition.strip())


@dataclass(frozen=True)
class PairPatch(ValueObject):
    """Partial update of a pair. Fields left as None are not touched."""

    term: str | None = None
    definition: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.term is None and self.definition is None

    def apply_to(self, draft: PairDraft) -> PairDraft:
        changes: dict[str, str] = {}
        if self.term is not None:
            changes["term"] = self.term
        if self.definition is not None:
            changes["definition"] = self.definition
        return replace(draft, **changes)

    def normalized(self) -> "PairPatch":
        return PairPatch(
            term=self.term.strip() if self.term is not None else None,
            definition=self.definition.strip() if self.definition is not None else None,
        )

    @classmethod
    def diff(
        cls,
        current_term: str,
        current_definition: str,
        term: str,
        definition: str,
    ) -> "PairPatch":
        """
        Build a patch holding only the fields whose trimmed value changed.

        Args:
            current_term: Term as currently persisted
            current_definition: Definition as currently persisted
            term: Term as edited by the user
            definition: Definition as edited by the user

        Returns:
            PairPatch, empty when nothing changed
        """
        new_term = term.strip()
        new_definition = definition.strip()
        return cls(
            term=new_term if new_term != current_term else None,
            definition=new_definition if new_definition != current_definition else None,
        )
