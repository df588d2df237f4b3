from abc import ABC, abstractmethod


class BaseModelGateway(ABC):
    """Uniform text-completion contract over interchangeable model providers."""

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """Send *prompt* to the provider and return its reply as plain text.

        Raises:
            ProviderError: on network, auth, rate-limit or response-shape failure.
        """

    def close(self) -> None:
        """Release transport resources held by the adapter."""
