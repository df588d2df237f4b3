import httpx
import openai

from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.exceptions import (
    MalformedResponseError,
    ProviderAuthError,
    ProviderError,
    ProviderNetworkError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)


class OpenAICompatibleGateway(BaseModelGateway):
    """Chat-completions adapter for OpenAI and OpenAI-compatible providers.

    Groq, Together, OpenRouter and self-hosted endpoints share this request
    and response shape and differ only by ``base_url``.
    """

    SYSTEM_PROMPT = (
        "You are an expert contract analyst. Follow the requested output format "
        "exactly, with no additional text or markdown."
    )

    def __init__(
        self,
        *,
        model: str,
        api_key: str | None,
        timeout_seconds: float = 60.0,
        temperature: float = 0.3,
        max_tokens: int = 2000,
        base_url: str | None = None,
        provider_name: str = "openai",
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._provider_name = provider_name
        self._client: openai.OpenAI | None = None
        if api_key:
            # The SDK retries on its own by default; retry policy lives in the pipeline.
            self._client = openai.OpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
                max_retries=0,
            )

    def complete(self, prompt: str) -> str:
        if self._client is None:
            raise ProviderAuthError(f"{self._provider_name} API key required")
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                messages=[
                    {"role": "system", "content": self.SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise ProviderTimeoutError(
                f"{self._provider_name} request timed out: {exc}"
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise ProviderNetworkError(
                f"{self._provider_name} network error: {exc}"
            ) from exc
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            raise ProviderAuthError(
                f"{self._provider_name} authentication error: {exc}"
            ) from exc
        except openai.RateLimitError as exc:
            raise ProviderRateLimitError(
                f"{self._provider_name} rate limit exceeded: {exc}",
                retry_after_seconds=self._retry_after(exc),
            ) from exc
        except openai.APIError as exc:
            raise ProviderError(f"{self._provider_name} API error: {exc}") from exc

        if not response.choices:
            raise MalformedResponseError(f"{self._provider_name} returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise MalformedResponseError(f"{self._provider_name} returned empty response")
        return content

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    @staticmethod
    def _retry_after(exc: openai.RateLimitError) -> float | None:
        raw = exc.response.headers.get("retry-after", "").strip()
        try:
            return float(raw) if raw else None
        except ValueError:
            return None
