from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GeneratedPair:
    term: str
    definition: str


class PairGenerationServiceProtocol(Protocol):
    async def generate_pairs(self, input_text: str, card_count: int) -> list[GeneratedPair]: ...
