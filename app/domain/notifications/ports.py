"""
Port interfaces (ABCs) for the notifications bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.notifications.entities import ProviderCredentials


class PubSubGateway(ABC):
    """Port for a single, scoped connection to the pub/sub provider.

    Gateways are context managers: the dispatcher opens one per call and
    the connection is released on every exit path.

    Implementations must raise ProviderError for provider-side failures.
    """

    @abstractmethod
    def subscribe(
        self,
        topic_arn: str,
        protocol: str,
        endpoint: str,
        attributes: Optional[dict[str, str]] = None,
    ) -> Optional[str]:
        """Subscribe an endpoint to a topic.

        Returns:
            The subscription identifier, or None while confirmation is pending.
        """
        raise NotImplementedError

    @abstractmethod
    def unsubscribe(self, subscription_id: str) -> None:
        """Delete a subscription by its identifier."""
        raise NotImplementedError

    @abstractmethod
    def publish(
        self,
        topic_arn: str,
        message: str,
        subject: str,
        message_attributes: dict[str, dict[str, str]],
    ) -> Optional[str]:
        """Publish a message to a topic and return the provider message id."""
        raise NotImplementedError

    def close(self) -> None:
        """Release the underlying connection. No-op by default."""

    def __enter__(self) -> "PubSubGateway":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class PubSubGatewayFactory(ABC):
    """Port for building gateways from per-call credentials."""

    @abstractmethod
    def create(
        self,
        credentials: ProviderCredentials,
        timeout: Optional[float] = None,
    ) -> PubSubGateway:
        """Return a new gateway bound to the given credentials and deadline."""
        raise NotImplementedError
