from .board_repository import BoardRepositoryProtocol
from .pair_generation_service import GeneratedPair, PairGenerationServiceProtocol

__all__ = ["BoardRepositoryProtocol", "GeneratedPair", "PairGenerationServiceProtocol"]
