import time
from collections.abc import Callable
from dataclasses import dataclass, field

from dealscreen.config.settings import Settings
from dealscreen.gateway.base import BaseModelGateway
from dealscreen.gateway.exceptions import ProviderRateLimitError
from dealscreen.logging.logger import Log


@dataclass(frozen=True)
class RetryPolicy:
    """Retries a gateway call while the provider asks the caller to back off.

    Only rate-limit and model-loading failures are retried; every other
    ProviderError is raised on the first attempt.
    """

    max_attempts: int = 2
    max_delay_seconds: float = 30.0
    default_delay_seconds: float = 5.0
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False, compare=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryPolicy":
        return cls(
            max_attempts=max(1, settings.llm_max_attempts),
            max_delay_seconds=float(settings.llm_max_retry_delay_seconds),
        )

    def complete(self, gateway: BaseModelGateway, prompt: str) -> str:
        attempt = 1
        while True:
            try:
                return gateway.complete(prompt)
            except ProviderRateLimitError as exc:
                if attempt >= self.max_attempts:
                    raise
                delay = self._delay_for(exc)
                Log.warning(
                    f"Provider asked to back off, retrying in {delay:.1f}s",
                    code=exc.code,
                    attempt=attempt,
                )
                self.sleep(delay)
                attempt += 1

    def _delay_for(self, exc: ProviderRateLimitError) -> float:
        requested = exc.retry_after_seconds
        if requested is None or requested < 0:
            requested = self.default_delay_seconds
        return min(requested, self.max_delay_seconds)
