"""Card count of a board."""

from enum import IntEnum

from memoboard.domain.common.exceptions import ValidationError


class CardCount(IntEnum):
    """
    Number of cards laid out on a board.

    Every pair fills two cards, so one level of a board holds
    card_count / 2 pairs.
    """

    SIXTEEN = 16
    TWENTY_FOUR = 24

    @property
    def pairs_per_level(self) -> int:
        return self.value // 2

    @classmethod
    def parse(cls, value: int) -> "CardCount":
        """
        Convert a raw integer into a CardCount.

        Raises:
            ValidationError: If the value is neither 16 nor 24
        """
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(
                "Card count must be either 16 or 24", field="card_count", value=value
            ) from e
