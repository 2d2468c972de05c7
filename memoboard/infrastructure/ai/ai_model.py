"""Pydantic AI model selection for pair generation."""

from collections.abc import Callable
from functools import lru_cache

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from memoboard.config import Settings, get_settings
from memoboard.exceptions import PairGenerationError


def _ollama(settings: Settings, model_name: str) -> Model:
    return OpenAIChatModel(model_name, provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL))


def _openai(settings: Settings, model_name: str) -> Model:
    return OpenAIChatModel(model_name, provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY))


def _anthropic(settings: Settings, model_name: str) -> Model:
    return AnthropicModel(
        model_name, provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY)
    )


def _google(settings: Settings, model_name: str) -> Model:
    return GoogleModel(model_name, provider=GoogleProvider(api_key=settings.GEMINI_API_KEY))


_BUILDERS: dict[str, Callable[[Settings, str], Model]] = {
    "ollama": _ollama,
    "openai": _openai,
    "anthropic": _anthropic,
    "google": _google,
}


@lru_cache
def get_ai_model() -> Model:
    """
    Build the configured model once, on the first generation request.

    Credentials were already checked by Settings, so only a missing provider
    can fail here.

    Raises:
        PairGenerationError: If no AI provider is configured
    """
    settings = get_settings()
    if settings.AI_PROVIDER is None or settings.AI_MODEL_NAME is None:
        raise PairGenerationError("Pair generation is not configured")
    return _BUILDERS[settings.AI_PROVIDER](settings, settings.AI_MODEL_NAME)
