from typing import ClassVar


class ProviderError(Exception):
    """Raised when a model provider call fails."""

    code: ClassVar[str] = "provider_error"


class ProviderRateLimitError(ProviderError):
    """Raised when the provider asks the caller to back off before retrying."""

    code: ClassVar[str] = "rate_limited"

    def __init__(self, message: str, retry_after_seconds: float | None = None) -> None:
        super().__init__(message)
        self.retry_after_seconds = retry_after_seconds


class ModelLoadingError(ProviderRateLimitError):
    """Raised when the provider is still warming the requested model up."""

    code: ClassVar[str] = "model_loading"


class ProviderAuthError(ProviderError):
    """Raised when the API key is missing or rejected."""

    code: ClassVar[str] = "auth_error"


class MalformedResponseError(ProviderError):
    """Raised when the provider response does not have the expected shape."""

    code: ClassVar[str] = "malformed_response"


class ProviderNetworkError(ProviderError):
    """Raised when the provider cannot be reached."""

    code: ClassVar[str] = "network_error"


class ProviderTimeoutError(ProviderNetworkError):
    """Raised when the provider does not answer within the request timeout."""

    code: ClassVar[str] = "timeout"
