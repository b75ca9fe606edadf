"""
Tests for the notifications application layer (use cases).

Use cases run against a dispatcher backed by in-memory gateways.
Each test verifies orchestration, not dispatcher rules.
"""

from unittest.mock import MagicMock

import pytest

from app.application.notifications.dtos import (
    PublishNotificationCommand,
    SubscribeEmailCommand,
    UnsubscribeEmailCommand,
)
from app.application.notifications.publish_notification import (
    PublishNotificationUseCase,
)
from app.application.notifications.subscribe_email import SubscribeEmailUseCase
from app.application.notifications.unsubscribe_email import (
    UnsubscribeEmailUseCase,
)
from app.domain.notifications.entities import SubscriptionHandle
from app.domain.notifications.errors import InvalidArgumentError


class TestSubscribeEmailUseCase:

    def test_returns_active_subscription(self, dispatcher) -> None:
        result = SubscribeEmailUseCase(dispatcher).execute(
            SubscribeEmailCommand(email="trader@example.com")
        )
        assert result.subscription_id == "arn:123"
        assert result.pending_confirmation is False

    def test_returns_pending_subscription(self, dispatcher, gateway) -> None:
        gateway.subscription_id = None
        result = SubscribeEmailUseCase(dispatcher).execute(
            SubscribeEmailCommand(email="trader@example.com")
        )
        assert result.subscription_id == "pending confirmation"
        assert result.pending_confirmation is True

    def test_invalid_email_propagates(self, dispatcher) -> None:
        with pytest.raises(InvalidArgumentError):
            SubscribeEmailUseCase(dispatcher).execute(
                SubscribeEmailCommand(email="not-an-email")
            )


class TestUnsubscribeEmailUseCase:

    def test_delegates_identifier(self) -> None:
        dispatcher = MagicMock()
        UnsubscribeEmailUseCase(dispatcher).execute(
            UnsubscribeEmailCommand(subscription_id="arn:123")
        )
        dispatcher.unsubscribe.assert_called_once_with("arn:123")

    def test_none_identifier_is_noop(self, dispatcher, gateway) -> None:
        UnsubscribeEmailUseCase(dispatcher).execute(
            UnsubscribeEmailCommand(subscription_id=None)
        )
        assert gateway.calls == []


class TestPublishNotificationUseCase:

    def test_delegates_message(self) -> None:
        dispatcher = MagicMock()
        PublishNotificationUseCase(dispatcher).execute(
            PublishNotificationCommand(message="m", subject="s", category="trade")
        )
        dispatcher.publish.assert_called_once_with(
            body="m", subject="s", category="trade"
        )

    def test_default_category(self, dispatcher, gateway) -> None:
        PublishNotificationUseCase(dispatcher).execute(
            PublishNotificationCommand(message="m", subject="s")
        )
        assert gateway.calls[0][4]["notificationType"]["StringValue"] == "general"


def test_subscription_handle_round_trips_through_use_cases(dispatcher, gateway) -> None:
    result = SubscribeEmailUseCase(dispatcher).execute(
        SubscribeEmailCommand(email="trader@example.com")
    )
    handle = SubscriptionHandle(result.subscription_id)

    UnsubscribeEmailUseCase(dispatcher).execute(
        UnsubscribeEmailCommand(subscription_id=handle.subscription_id)
    )

    assert gateway.calls[-1] == ("unsubscribe", "arn:123")
