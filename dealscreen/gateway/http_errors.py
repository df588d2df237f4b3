"""Maps non-success HTTP responses from raw-HTTP providers onto ProviderError."""

import httpx

from dealscreen.gateway.exceptions import (
    ProviderAuthError,
    ProviderError,
    ProviderRateLimitError,
)


def raise_for_provider_status(response: httpx.Response, provider_name: str) -> None:
    """Raise the matching ProviderError if *response* is not a 2xx."""
    if response.is_success:
        return
    status = response.status_code
    detail = error_detail(response)
    if status in (401, 403):
        raise ProviderAuthError(
            f"{provider_name} API authentication error ({status}): {detail}"
        )
    if status == 429:
        raise ProviderRateLimitError(
            f"{provider_name} API rate limit exceeded: {detail}",
            retry_after_seconds=retry_after_seconds(response),
        )
    raise ProviderError(f"{provider_name} API error ({status}): {detail}")


def retry_after_seconds(response: httpx.Response) -> float | None:
    raw = response.headers.get("retry-after", "").strip()
    try:
        return float(raw) if raw else None
    except ValueError:
        return None


def error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return str(error.get("message") or error)
        if error:
            return str(error)
        if body.get("message"):
            return str(body["message"])
    return response.reason_phrase
