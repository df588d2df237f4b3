from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.exceptions import (
    MalformedResponseError,
    ModelLoadingError,
    ProviderAuthError,
    ProviderError,
    ProviderNetworkError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from dealscreen.gateway.factory import GatewayFactory
from dealscreen.gateway.models import Provider, ProviderConfig
from dealscreen.gateway.retry import RetryPolicy

__all__ = [
    "BaseModelGateway",
    "GatewayFactory",
    "MalformedResponseError",
    "ModelLoadingError",
    "Provider",
    "ProviderAuthError",
    "ProviderConfig",
    "ProviderError",
    "ProviderNetworkError",
    "ProviderRateLimitError",
    "ProviderTimeoutError",
    "RetryPolicy",
]
