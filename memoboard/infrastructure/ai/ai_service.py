import structlog
from pydantic_ai.exceptions import AgentRunError, UserError

from memoboard.application.boards.protocols.pair_generation_service import GeneratedPair
from memoboard.domain.boards.value_objects.card_count import CardCount
from memoboard.exceptions import PairGenerationError
from memoboard.infrastructure.ai.ai_agents import get_pair_agent

logger = structlog.get_logger(__name__)


class AIPairGenerationService:
    async def generate_pairs(self, input_text: str, card_count: int) -> list[GeneratedPair]:
        pair_count = CardCount.parse(card_count).pairs_per_level
        agent = get_pair_agent(pair_count)
        try:
            result = await agent.run(input_text)
        except (AgentRunError, UserError) as e:
            logger.error("pair_generation_failed", error=str(e), card_count=card_count)
            raise PairGenerationError("Could not generate pairs, please try again") from e

        return [GeneratedPair(term=p.term, definition=p.definition) for p in result.output]
