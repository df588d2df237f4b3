from typing import Any

import httpx

from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.exceptions import (
    MalformedResponseError,
    ModelLoadingError,
    ProviderNetworkError,
    ProviderTimeoutError,
)
from dealscreen.gateway.http_errors import raise_for_provider_status
from dealscreen.logging.logger import Log

_DEFAULT_LOADING_WAIT_SECONDS = 30.0


class HuggingFaceGateway(BaseModelGateway):
    """Hugging Face Inference API adapter (free-inference ``generated_text`` shape).

    The API key is optional: public models can be queried anonymously.
    """

    BASE_URL = "https://api-inference.huggingface.co/models"

    def __init__(
        self,
        *,
        model: str,
        api_key: str | None = None,
        timeout_seconds: float = 60.0,
        temperature: float = 0.3,
        max_tokens: int = 2000,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = f"{(base_url or self.BASE_URL).rstrip('/')}/{model}"
        self._temperature = temperature
        self._max_tokens = max_tokens
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.Client(headers=headers, timeout=timeout_seconds, transport=transport)

    def complete(self, prompt: str) -> str:
        payload = {
            "inputs": prompt,
            "parameters": {
                "max_new_tokens": self._max_tokens,
                "temperature": self._temperature,
                "return_full_text": False,
            },
        }
        try:
            response = self._client.post(self._url, json=payload)
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(
                f"Hugging Face API request timed out: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderNetworkError(f"Hugging Face API call failed: {exc}") from exc

        if response.status_code == 503:
            wait = self._estimated_time(response)
            Log.warning(f"Hugging Face model is loading, estimated wait {wait}s")
            raise ModelLoadingError(
                f"Hugging Face model is loading. Retry in {wait} seconds.",
                retry_after_seconds=wait,
            )
        raise_for_provider_status(response, "Hugging Face")

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Hugging Face returned non-JSON body: {response.text[:200]}"
            ) from exc
        return self._extract_text(data)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _extract_text(data: Any) -> str:
        if isinstance(data, list) and data and isinstance(data[0], dict):
            text = data[0].get("generated_text")
            if isinstance(text, str):
                return text
        if isinstance(data, dict) and isinstance(data.get("generated_text"), str):
            return str(data["generated_text"])
        if isinstance(data, str):
            return data
        raise MalformedResponseError(
            f"Unexpected response format from Hugging Face: {str(data)[:200]}"
        )

    @staticmethod
    def _estimated_time(response: httpx.Response) -> float:
        try:
            body = response.json()
        except ValueError:
            return _DEFAULT_LOADING_WAIT_SECONDS
        if isinstance(body, dict):
            estimated = body.get("estimated_time")
            if isinstance(estimated, (int, float)) and not isinstance(estimated, bool):
                return float(estimated)
        return _DEFAULT_LOADING_WAIT_SECONDS
