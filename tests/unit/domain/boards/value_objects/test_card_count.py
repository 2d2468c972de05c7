import pytest

from memoboard.domain.boards.value_objects.card_count import CardCount
from memoboard.domain.common.exceptions import ValidationError


def test_parse_supported_values() -> None:
    assert CardCount.parse(16) is CardCount.SIXTEEN
    assert CardCount.parse(24).pairs_per_level == 12


def test_parse_rejects_other_values() -> None:
    with pytest.raises(ValidationError) as exc_info:
        CardCount.parse(18)
    assert exc_info.value.field == "card_count"
