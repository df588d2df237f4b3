from dataclasses import dataclass
from enum import StrEnum


class Provider(StrEnum):
    """Supported model backends."""

    HUGGINGFACE = "huggingface"
    GROQ = "groq"
    TOGETHER = "together"
    GEMINI = "gemini"
    OPENAI = "openai"
    OPENROUTER = "openrouter"
    OPENAI_COMPATIBLE = "openai_compatible"
    EXAMPLE = "example"


@dataclass(frozen=True)
class ProviderConfig:
    """Provider selection and transport settings for one pipeline run."""

    provider: Provider
    model: str
    api_key: str | None = None
    base_url: str | None = None
    timeout_seconds: float = 60.0
    temperature: float = 0.3
    max_tokens: int = 2000
