"""
Shared fixtures and in-memory test doubles for the notification ports.

FakeGateway records every call and can be told to fail; FakeGatewayFactory
hands out FakeGateways and remembers the credentials/timeouts it was given.
"""

from typing import Optional

import pytest

from app.domain.notifications.dispatcher import NotificationDispatcher
from app.domain.notifications.entities import DispatchConfig, ProviderCredentials
from app.domain.notifications.ports import PubSubGateway, PubSubGatewayFactory

TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:trade-alerts"


def make_config(
    topic_arn: str = TOPIC_ARN,
    filter_policy: Optional[str] = None,
    timeout_seconds: Optional[float] = 10.0,
) -> DispatchConfig:
    return DispatchConfig(
        topic_arn=topic_arn,
        credentials=ProviderCredentials(region="us-east-1"),
        filter_policy=filter_policy,
        timeout_seconds=timeout_seconds,
    )


class FakeGateway(PubSubGateway):
    def __init__(
        self,
        subscription_id: Optional[str] = "arn:123",
        error: Optional[Exception] = None,
    ) -> None:
        self.subscription_id = subscription_id
        self.error = error
        self.calls: list[tuple] = []
        self.closed = False

    def subscribe(self, topic_arn, protocol, endpoint, attributes=None):
        self.calls.append(("subscribe", topic_arn, protocol, endpoint, attributes))
        if self.error:
            raise self.error
        return self.subscription_id

    def unsubscribe(self, subscription_id):
        self.calls.append(("unsubscribe", subscription_id))
        if self.error:
            raise self.error

    def publish(self, topic_arn, message, subject, message_attributes):
        self.calls.append(("publish", topic_arn, message, subject, message_attributes))
        if self.error:
            raise self.error
        return "msg-1"

    def close(self) -> None:
        self.closed = True


class FakeGatewayFactory(PubSubGatewayFactory):
    def __init__(self, gateway: Optional[FakeGateway] = None) -> None:
        self.gateway = gateway or FakeGateway()
        self.created: list[tuple[ProviderCredentials, Optional[float]]] = []

    def create(self, credentials, timeout=None):
        self.created.append((credentials, timeout))
        return self.gateway


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def factory(gateway) -> FakeGatewayFactory:
    return FakeGatewayFactory(gateway)


@pytest.fixture
def make_dispatcher(factory):
    """Build a dispatcher whose config loader returns the given config."""

    def _make(config: Optional[DispatchConfig] = None) -> NotificationDispatcher:
        return NotificationDispatcher(
            config_loader=lambda: config or make_config(),
            gateway_factory=factory,
        )

    return _make


@pytest.fixture
def dispatcher(make_dispatcher) -> NotificationDispatcher:
    return make_dispatcher()


@pytest.fixture
def topic_arn() -> str:
    return TOPIC_ARN
