from unittest.mock import MagicMock

import pytest

from dealscreen.config.settings import Settings
from dealscreen.gateway.exceptions import (
    ModelLoadingError,
    ProviderAuthError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)
from dealscreen.gateway.retry import RetryPolicy


def _policy(**kwargs: object) -> tuple[RetryPolicy, MagicMock]:
    sleep = MagicMock()
    return RetryPolicy(sleep=sleep, **kwargs), sleep  # type: ignore[arg-type]


class TestRetryPolicy:
    def test_returns_first_success(self) -> None:
        policy, sleep = _policy()
        gateway = MagicMock()
        gateway.complete.return_value = "YES"
        assert policy.complete(gateway, "p") == "YES"
        sleep.assert_not_called()

    def test_retries_rate_limit_once_with_requested_delay(self) -> None:
        policy, sleep = _policy()
        gateway = MagicMock()
        gateway.complete.side_effect = [
            ProviderRateLimitError("slow", retry_after_seconds=3),
            "YES",
        ]
        assert policy.complete(gateway, "p") == "YES"
        sleep.assert_called_once_with(3)
        assert gateway.complete.call_count == 2

    def test_model_loading_delay_is_capped(self) -> None:
        policy, sleep = _policy(max_delay_seconds=30.0)
        gateway = MagicMock()
        gateway.complete.side_effect = [
            ModelLoadingError("loading", retry_after_seconds=120),
            "ok",
        ]
        policy.complete(gateway, "p")
        sleep.assert_called_once_with(30.0)

    def test_default_delay_when_provider_gives_none(self) -> None:
        policy, sleep = _policy(default_delay_seconds=5.0)
        gateway = MagicMock()
        gateway.complete.side_effect = [ProviderRateLimitError("slow"), "ok"]
        policy.complete(gateway, "p")
        sleep.assert_called_once_with(5.0)

    def test_reraises_after_last_attempt(self) -> None:
        policy, sleep = _policy(max_attempts=2)
        gateway = MagicMock()
        gateway.complete.side_effect = ProviderRateLimitError("slow", retry_after_seconds=1)
        with pytest.raises(ProviderRateLimitError):
            policy.complete(gateway, "p")
        assert gateway.complete.call_count == 2
        assert sleep.call_count == 1

    @pytest.mark.parametrize(
        "error",
        [ProviderTimeoutError("t"), ProviderAuthError("a")],
    )
    def test_other_errors_are_not_retried(self, error: Exception) -> None:
        policy, sleep = _policy(max_attempts=5)
        gateway = MagicMock()
        gateway.complete.side_effect = error
        with pytest.raises(type(error)):
            policy.complete(gateway, "p")
        assert gateway.complete.call_count == 1
        sleep.assert_not_called()

    def test_from_settings(self) -> None:
        settings = Settings(llm_max_attempts=0, llm_max_retry_delay_seconds=10)
        policy = RetryPolicy.from_settings(settings)
        assert policy.max_attempts == 1
        assert policy.max_delay_seconds == 10.0
