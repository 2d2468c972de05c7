"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AIProvider = Literal["ollama", "openai", "anthropic", "google"]

# Setting that must be filled in for each AI provider
PROVIDER_CREDENTIALS: dict[str, str] = {
    "ollama": "OPENAI_BASE_URL",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "google": "GEMINI_API_KEY",
}


class Settings(BaseSettings):
    """memoboard settings, read from the environment or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite:///./memoboard.db"
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Longest source text accepted for pair generation
    GENERATION_INPUT_MAX_LENGTH: int = Field(default=5000, gt=0)

    AI_PROVIDER: AIProvider | None = None
    AI_MODEL_NAME: str | None = None
    OPENAI_BASE_URL: str | None = None
    OPENAI_API_KEY: str | None = None
    ANTHROPIC_API_KEY: str | None = None
    GEMINI_API_KEY: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ai_enabled(self) -> bool:
        """Whether pair generation can be offered."""
        return self.AI_PROVIDER is not None

    @model_validator(mode="after")
    def check_provider_credentials(self) -> "Settings":
        if self.AI_PROVIDER is None:
            return self
        if not self.AI_MODEL_NAME:
            raise ValueError("AI_MODEL_NAME is required when AI_PROVIDER is set")

        credential = PROVIDER_CREDENTIALS[self.AI_PROVIDER]
        if not getattr(self, credential):
            raise ValueError(f"{credential} is required when AI_PROVIDER is '{self.AI_PROVIDER}'")
        return self


def configure_logging(environment: str = "development") -> None:
    """
    Route structlog through the standard library logger.

    Development prints colored console lines at DEBUG; production emits one
    JSON object per event at INFO.
    """
    production = environment == "production"
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer() if production else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
