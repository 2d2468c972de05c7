from pydantic import BaseModel
from pydantic_ai import Agent

from memoboard.infrastructure.ai.ai_model import get_ai_model


class GeneratedPairModel(BaseModel):
    term: str
    definition: str


def get_pair_agent(pair_count: int) -> Agent[None, list[GeneratedPairModel]]:
    return Agent(
        get_ai_model(),
        output_type=list[GeneratedPairModel],
        instructions=f"""
        You are an expert educational content creator specializing in creating study materials.
        Analyze the provided text and extract the most important concepts as term-definition
        pairs for a memory matching game.

        Requirements:
        - Extract exactly {pair_count} pairs
        - Terms should be 1-4 words: key concepts, names, or technical terms
        - Definitions should be 5-15 words: clear, concise explanations
        - Every term must be unique
        - Ensure variety, avoid repetitive or overlapping concepts
        - Use the language of the input text
        - Definitions must be understandable without the source text
        """,
    )
