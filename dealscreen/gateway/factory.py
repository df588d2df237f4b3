from typing import ClassVar

from dealscreen.config.settings import Settings
from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.example_gateway import ExampleGateway
from dealscreen.gateway.gemini_gateway import GeminiGateway
from dealscreen.gateway.huggingface_gateway import HuggingFaceGateway
from dealscreen.gateway.models import Provider, ProviderConfig
from dealscreen.gateway.openai_compatible_gateway import OpenAICompatibleGateway


class GatewayFactory:
    """Builds the configured model gateway."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[Provider, str]] = {
        Provider.GROQ: "https://api.groq.com/openai/v1",
        Provider.TOGETHER: "https://api.together.xyz/v1",
        Provider.OPENROUTER: "https://openrouter.ai/api/v1",
    }

    DEFAULT_MODELS: ClassVar[dict[Provider, str]] = {
        Provider.HUGGINGFACE: "mistralai/Mistral-7B-Instruct-v0.2",
        Provider.GROQ: "llama-3.1-8b-instant",
        Provider.TOGETHER: "mistralai/Mixtral-8x7B-Instruct-v0.1",
        Provider.GEMINI: "gemini-2.0-flash",
        Provider.EXAMPLE: "example",
    }

    @classmethod
    def create(cls, config: ProviderConfig) -> BaseModelGateway:
        """Create a gateway adapter for *config*."""
        if config.provider is Provider.EXAMPLE:
            return ExampleGateway()
        if config.provider is Provider.HUGGINGFACE:
            return HuggingFaceGateway(
                model=config.model,
                api_key=config.api_key,
                timeout_seconds=config.timeout_seconds,
                temperature=config.temperature,
                max_tokens=config.max_tokens,
                base_url=config.base_url,
            )
        if config.provider is Provider.GEMINI:
            return GeminiGateway(
                model=config.model,
                api_key=config.api_key,
                timeout_seconds=config.timeout_seconds,
                temperature=config.temperature,
                max_tokens=config.max_tokens,
                base_url=config.base_url,
            )
        return OpenAICompatibleGateway(
            model=config.model,
            api_key=config.api_key,
            timeout_seconds=config.timeout_seconds,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            base_url=config.base_url,
            provider_name=config.provider.value,
        )

    @classmethod
    def config_from_settings(cls, settings: Settings) -> ProviderConfig:
        """Resolve a ProviderConfig from application settings."""
        provider = cls._resolve_provider(settings)
        return ProviderConfig(
            provider=provider,
            model=cls._resolve_model_name(provider, settings),
            api_key=settings.llm_api_key or None,
            base_url=cls._resolve_base_url(provider, settings),
            timeout_seconds=settings.llm_timeout_seconds,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )

    @classmethod
    def create_from_settings(cls, settings: Settings) -> BaseModelGateway:
        return cls.create(cls.config_from_settings(settings))

    @classmethod
    def _resolve_provider(cls, settings: Settings) -> Provider:
        name = settings.llm_provider.strip().lower()
        try:
            return Provider(name)
        except ValueError:
            supported = sorted(p.value for p in Provider)
            raise ValueError(
                f"Unknown llm provider '{name}'. Choose from: {supported}"
            ) from None

    @classmethod
    def _resolve_model_name(cls, provider: Provider, settings: Settings) -> str:
        model = settings.llm_model.strip() or cls.DEFAULT_MODELS.get(provider, "")
        if not model:
            raise ValueError(f"llm_model is required for llm_provider={provider.value}")
        return model

    @classmethod
    def _resolve_base_url(cls, provider: Provider, settings: Settings) -> str | None:
        url = settings.llm_base_url.strip()
        if provider is Provider.OPENAI_COMPATIBLE and not url:
            raise ValueError(
                "llm_base_url is required for llm_provider=openai_compatible"
            )
        return url or cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
