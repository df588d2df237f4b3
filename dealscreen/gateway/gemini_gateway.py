from typing import Any

import httpx

from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.exceptions import (
    MalformedResponseError,
    ProviderAuthError,
    ProviderNetworkError,
    ProviderTimeoutError,
)
from dealscreen.gateway.http_errors import raise_for_provider_status


class GeminiGateway(BaseModelGateway):
    """Google Gemini ``generateContent`` adapter (nested candidates/parts shape)."""

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(
        self,
        *,
        model: str,
        api_key: str | None,
        timeout_seconds: float = 60.0,
        temperature: float = 0.3,
        max_tokens: int = 2000,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._url = f"{(base_url or self.BASE_URL).rstrip('/')}/{model}:generateContent"
        self._generation_config = {
            "temperature": temperature,
            "maxOutputTokens": max_tokens,
        }
        self._client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def complete(self, prompt: str) -> str:
        if not self._api_key:
            raise ProviderAuthError("Gemini API key required")
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self._generation_config,
        }
        try:
            response = self._client.post(
                self._url,
                json=payload,
                headers={"x-goog-api-key": self._api_key},
            )
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(f"Gemini API request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ProviderNetworkError(f"Gemini API call failed: {exc}") from exc

        raise_for_provider_status(response, "Gemini")

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Gemini returned non-JSON body: {response.text[:200]}"
            ) from exc
        return self._extract_text(data)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _extract_text(data: Any) -> str:
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not isinstance(candidates, list) or not candidates:
            raise MalformedResponseError("Unexpected response format from Gemini API")
        content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            raise MalformedResponseError("Unexpected response format from Gemini API")
        return "".join(
            part["text"]
            for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
