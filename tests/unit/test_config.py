import pytest
from pydantic import ValidationError

from memoboard.config import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep exported settings from leaking into Settings()."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)


def test_defaults_disable_ai() -> None:
    settings = Settings(_env_file=None)

    assert not settings.ai_enabled
    assert settings.GENERATION_INPUT_MAX_LENGTH == 5000


def test_provider_requires_model_name() -> None:
    with pytest.raises(ValidationError, match="AI_MODEL_NAME"):
        Settings(_env_file=None, AI_PROVIDER="openai", OPENAI_API_KEY="sk-test")


@pytest.mark.parametrize(
    ("provider", "credential"),
    [
        ("ollama", "OPENAI_BASE_URL"),
        ("openai", "OPENAI_API_KEY"),
        ("anthropic", "ANTHROPIC_API_KEY"),
        ("google", "GEMINI_API_KEY"),
    ],
)
def test_provider_requires_credentials(provider: str, credential: str) -> None:
    with pytest.raises(ValidationError, match=credential):
        Settings(_env_file=None, AI_PROVIDER=provider, AI_MODEL_NAME="some-model")


def test_configured_provider_enables_ai() -> None:
    settings = Settings(
        _env_file=None,
        AI_PROVIDER="anthropic",
        AI_MODEL_NAME="some-model",
        ANTHROPIC_API_KEY="key",
    )
    assert settings.ai_enabled
